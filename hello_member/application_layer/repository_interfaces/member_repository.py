from abc import ABC, abstractmethod
from typing import List, Optional

from ...domain_layer.member import Member

class MemberRepository(ABC):
    """
    Storage contract for members.

    Lookups never raise for a missing member; they return None instead.
    """

    @abstractmethod
    def save(self, member: Member) -> Member:
        """
        Assign a fresh id to an unsaved member, store it and return the same object.
        Raises MemberAlreadySavedError when the member already has an id.
        """
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def find_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Member]:
        """Return any one stored member whose name equals `name` exactly."""
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def find_all(self) -> List[Member]:
        """Return a new list holding every stored member once, in no particular order."""
        raise NotImplementedError("This method should be overridden by subclasses.")


class MemberAlreadySavedError(Exception):
    """
    Exception raised when save is called with a member that already has an id.
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"MemberAlreadySavedError: {self.message}"
