import logging
import threading

import pytest

from hello_member.application_layer.repository_interfaces.member_repository import MemberAlreadySavedError, MemberRepository
from hello_member.domain_layer.member import Member
from hello_member.infrastructure_layer.repository_impls.in_memory_member_repository import InMemoryMemberRepository


def test_is_a_member_repository(repository):
    assert isinstance(repository, MemberRepository)


def test_save_and_find_by_id(repository):
    member = Member.of("spring")

    saved = repository.save(member)

    assert saved is member
    assert saved.get_id() == 1
    assert repository.find_by_id(1).get_name() == "spring"
    assert repository.find_by_id(1) is member


def test_find_by_name(repository):
    repository.save(Member.of("spring"))
    spring2 = repository.save(Member.of("spring2"))

    found = repository.find_by_name("spring2")

    assert found is spring2
    assert found.get_name() == "spring2"


def test_find_by_name_is_exact_match(repository):
    repository.save(Member.of("Spring"))

    assert repository.find_by_name("spring") is None
    assert repository.find_by_name("Spring ") is None


def test_find_by_name_returns_one_of_several_matches(repository):
    first = repository.save(Member.of("twin"))
    second = repository.save(Member.of("twin"))

    found = repository.find_by_name("twin")

    assert found is first or found is second


def test_find_all(repository):
    repository.save(Member.of("spring1"))
    repository.save(Member.of("spring2"))

    members = repository.find_all()

    assert len(members) == 2
    assert {m.get_name() for m in members} == {"spring1", "spring2"}


def test_lookups_on_empty_store(repository):
    assert repository.find_by_id(42) is None
    assert repository.find_by_name("x") is None
    assert repository.find_all() == []


def test_ids_increase_from_one(repository):
    ids = [repository.save(Member.of(f"member{i}")).get_id() for i in range(5)]

    assert ids == [1, 2, 3, 4, 5]


def test_find_all_returns_independent_snapshot(repository):
    repository.save(Member.of("spring1"))
    snapshot = repository.find_all()

    snapshot.clear()
    snapshot.append(Member(id=99, name="intruder"))

    assert [m.get_name() for m in repository.find_all()] == ["spring1"]
    assert repository.find_by_id(99) is None


def test_find_all_does_not_see_later_saves(repository):
    repository.save(Member.of("spring1"))
    snapshot = repository.find_all()

    repository.save(Member.of("spring2"))

    assert len(snapshot) == 1


def test_caller_mutations_are_visible_through_reads(repository):
    member = repository.save(Member.of("before"))

    member.set_name("after")

    assert repository.find_by_id(member.get_id()).get_name() == "after"
    assert repository.find_by_name("after") is member
    assert repository.find_by_name("before") is None


def test_save_rejects_member_with_id(repository):
    member = repository.save(Member.of("spring"))

    with pytest.raises(MemberAlreadySavedError):
        repository.save(member)
    with pytest.raises(MemberAlreadySavedError):
        repository.save(Member(id=7, name="preassigned"))

    assert len(repository.find_all()) == 1
    assert repository.find_by_id(7) is None


def test_clear_empties_store(repository):
    repository.save(Member.of("spring"))

    repository.clear()

    assert repository.find_all() == []
    assert repository.find_by_id(1) is None
    assert repository.find_by_name("spring") is None


def test_clear_keeps_id_sequence(repository):
    repository.save(Member.of("spring1"))
    repository.save(Member.of("spring2"))

    repository.clear()
    member = repository.save(Member.of("spring3"))

    assert member.get_id() == 3
    assert repository.find_all() == [member]


def test_instances_do_not_share_state():
    first = InMemoryMemberRepository()
    second = InMemoryMemberRepository()

    first.save(Member.of("spring"))

    assert second.find_all() == []
    assert second.save(Member.of("other")).get_id() == 1


def test_store_is_empty_at_start_of_each_test(repository):
    # Runs after the tests above; the fixture gives every test its own store
    assert repository.find_all() == []
    assert repository.save(Member.of("fresh")).get_id() == 1


def test_concurrent_saves_get_distinct_ids(repository):
    per_thread = 200
    thread_count = 8
    barrier = threading.Barrier(thread_count)

    def worker(index):
        barrier.wait()
        for i in range(per_thread):
            repository.save(Member.of(f"t{index}-{i}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(thread_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [m.get_id() for m in repository.find_all()]
    assert len(ids) == per_thread * thread_count
    assert sorted(ids) == list(range(1, per_thread * thread_count + 1))
    for member in repository.find_all():
        assert repository.find_by_id(member.get_id()) is member


def test_clear_logs_next_id(repository, caplog):
    repository.save(Member.of("spring1"))
    repository.save(Member.of("spring2"))

    with caplog.at_level(logging.DEBUG):
        repository.clear()

    assert "Cleared 2 members; next id is 3" in caplog.text
