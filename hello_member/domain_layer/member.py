from dataclasses import dataclass
from typing import Optional

@dataclass(eq=False)
class Member:
    """
    Domain object of Member.
    The id stays None until a repository saves the member.
    """
    id: Optional[int] = None
    name: Optional[str] = None

    @staticmethod
    def of(name: Optional[str]) -> 'Member':
        return Member(id=None, name=name)

    def get_id(self) -> Optional[int]:
        return self.id

    def set_id(self, id: int) -> None:
        self.id = id

    def get_name(self) -> Optional[str]:
        return self.name

    def set_name(self, name: Optional[str]) -> None:
        self.name = name

    def is_saved(self) -> bool:
        return self.id is not None

    def as_str(self) -> str:
        return f"Member {self.id}: {self.name}"

    def convert_to_json(self) -> dict:
        return {"id": self.id, "name": self.name}

    def __eq__(self, other: 'Member') -> bool:
        if not isinstance(other, Member):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id
