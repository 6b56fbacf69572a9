from injector import Injector, Module, provider, singleton

from .application_layer.repository_interfaces.member_repository import MemberRepository
from .infrastructure_layer.repository_impls.in_memory_member_repository import InMemoryMemberRepository


class ProvideMemberRepositoryModule(Module):
    @singleton
    @provider
    def provide_member_repository(self) -> MemberRepository:
        return InMemoryMemberRepository()


def create_injector(*modules: Module) -> Injector:
    """
    Build a new container. Later modules override bindings of earlier ones.
    """
    return Injector([ProvideMemberRepositoryModule(), *modules])
