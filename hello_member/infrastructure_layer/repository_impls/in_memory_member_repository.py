import logging
import threading
from typing import Dict, List, Optional

from ...application_layer.repository_interfaces.member_repository import MemberAlreadySavedError, MemberRepository
from ...domain_layer.member import Member

logger = logging.getLogger(__name__)


class InMemoryMemberRepository(MemberRepository):
    """
    MemberRepository holding members in a dict keyed by id.

    The store keeps the caller's objects, so later changes to a saved member's
    name are visible through subsequent lookups. Every operation runs under one
    lock, which keeps ids unique when several threads save at once.
    """

    def __init__(self):
        self._store: Dict[int, Member] = {}
        self._sequence = 0
        self._lock = threading.Lock()

    def save(self, member: Member) -> Member:
        if member.is_saved():
            raise MemberAlreadySavedError(f"Member {member.get_id()} has already been saved.")
        with self._lock:
            self._sequence += 1
            member.set_id(self._sequence)
            self._store[member.get_id()] = member
        logger.debug(f"Saved {member.as_str()}")
        return member

    def find_by_id(self, member_id: int) -> Optional[Member]:
        with self._lock:
            return self._store.get(member_id)

    def find_by_name(self, name: str) -> Optional[Member]:
        with self._lock:
            return next((m for m in self._store.values() if m.get_name() == name), None)

    def find_all(self) -> List[Member]:
        with self._lock:
            return list(self._store.values())

    def clear(self) -> None:
        """
        Remove every stored member. The id sequence keeps counting, so ids
        handed out after a clear never repeat earlier ones.
        """
        with self._lock:
            count = len(self._store)
            self._store.clear()
            next_id = self._sequence + 1
        logger.debug(f"Cleared {count} members; next id is {next_id}")
