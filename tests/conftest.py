import pytest
from injector import Module, provider, singleton

from hello_member import create_app
from hello_member.application_layer.repository_interfaces.member_repository import MemberRepository
from hello_member.container import create_injector
from hello_member.infrastructure_layer.repository_impls.in_memory_member_repository import InMemoryMemberRepository


@pytest.fixture()
def repository():
    """Fresh repository, cleared again after each test."""
    repo = InMemoryMemberRepository()
    yield repo
    repo.clear()


@pytest.fixture()
def injector(repository):
    class TestRepositoryModule(Module):
        @singleton
        @provider
        def provide_member_repository(self) -> MemberRepository:
            return repository

    return create_injector(TestRepositoryModule())


@pytest.fixture()
def app(injector):
    return create_app({"TESTING": True, "LOG_LEVEL": "DEBUG"}, injector=injector)


@pytest.fixture()
def client(app):
    return app.test_client()
