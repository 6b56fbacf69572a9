import logging

from injector import inject

from ..input_params.register_member_params import RegisterMemberParams
from ..repository_interfaces.member_repository import MemberRepository
from ...domain_layer.member import Member

logger = logging.getLogger(__name__)


class RegisterMemberUseCase:
    """Register a new member whose name is not taken yet."""

    @inject
    def __init__(self, member_repository: MemberRepository):
        self._member_repository = member_repository

    def execute(self, params: RegisterMemberParams) -> Member:
        # The repository allows duplicate names; uniqueness is enforced here only.
        if self._member_repository.find_by_name(params.name) is not None:
            raise DuplicateMemberError(f"Member with name {params.name} already exists.")
        member = self._member_repository.save(Member.of(params.name))
        logger.info(f"Registered {member.as_str()}")
        return member


class DuplicateMemberError(Exception):
    """
    Exception raised when a member with the same name is already registered.
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"DuplicateMemberError: {self.message}"
