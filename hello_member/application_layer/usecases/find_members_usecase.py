from typing import List

from injector import inject

from ..repository_interfaces.member_repository import MemberRepository
from ...domain_layer.member import Member


class FindMembersUseCase:
    """Lookups over registered members."""

    @inject
    def __init__(self, member_repository: MemberRepository):
        self._member_repository = member_repository

    def execute(self) -> List[Member]:
        """Return every member ordered by id."""
        return sorted(self._member_repository.find_all(), key=lambda m: m.get_id())

    def find_by_id(self, member_id: int) -> Member:
        member = self._member_repository.find_by_id(member_id)
        if member is None:
            raise MemberNotFoundError(f"Member {member_id} not found.")
        return member

    def find_by_name(self, name: str) -> Member:
        member = self._member_repository.find_by_name(name)
        if member is None:
            raise MemberNotFoundError(f"Member named {name} not found.")
        return member


class MemberNotFoundError(Exception):
    """
    Exception raised when a requested member does not exist.
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"MemberNotFoundError: {self.message}"
