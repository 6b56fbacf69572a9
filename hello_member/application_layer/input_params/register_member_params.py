from dataclasses import dataclass

@dataclass
class RegisterMemberParams:
    """
    Parameters for registering a member.
    """
    name: str

    @staticmethod
    def of(name: str) -> 'RegisterMemberParams':
        return RegisterMemberParams(name)
