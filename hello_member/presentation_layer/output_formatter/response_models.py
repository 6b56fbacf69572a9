from typing import List, Optional

from pydantic import BaseModel

from ...domain_layer.member import Member


class HelloResponse(BaseModel):
    """
    Body of the hello-api endpoint.
    """
    name: str


class MemberResponse(BaseModel):
    id: int
    name: Optional[str] = None

    @staticmethod
    def of(member: Member) -> 'MemberResponse':
        return MemberResponse(id=member.get_id(), name=member.get_name())


class ErrorResponse(BaseModel):
    error: str
    message: str


def convert_members_to_json(members: List[Member]) -> list[dict]:
    return [MemberResponse.of(member).model_dump() for member in members]
