"""Tests for the in-memory employee repository."""

import threading

import pytest
from pydantic import ValidationError

from employee_directory_api.app.schemas.employee import Employee
from employee_directory_api.app.services.employee_service import (
    SEED_EMPLOYEES,
    EmployeeRepository,
)


@pytest.fixture
def repo():
    return EmployeeRepository()


def test_seed_state(repo):
    employees = repo.list()

    assert [e.id for e in employees] == [1, 2, 3]
    assert employees[0] == Employee(id=1, name="John Doe", position="Software Engineer", salary=60000)
    assert employees[1].name == "Jane Smith"
    assert employees[2].position == "QA Analyst"


def test_seed_records_are_not_shared_between_repositories():
    first = EmployeeRepository()
    second = EmployeeRepository()

    first.update(1, "Changed", "", 0)

    assert second.get(1).name == "John Doe"
    assert SEED_EMPLOYEES[0].name == "John Doe"


def test_empty_repository_starts_at_one():
    repo = EmployeeRepository(seed=())

    assert repo.list() == ()
    assert repo.add("Ann", "Dev", 1).id == 1


def test_custom_seed_continues_after_highest_id():
    repo = EmployeeRepository(seed=[Employee(id=10, name="A"), Employee(id=7, name="B")])

    assert [e.id for e in repo.list()] == [10, 7]
    assert repo.add("C", "", 0).id == 11


def test_add_appends_with_next_id(repo):
    emp = repo.add("Alice", "Tester", 55000)

    assert emp == Employee(id=4, name="Alice", position="Tester", salary=55000)
    assert repo.list()[-1] == emp
    assert len(repo) == 4


def test_ids_are_never_reused(repo):
    first = repo.add("A", "", 0)
    repo.delete(first.id)
    second = repo.add("B", "", 0)

    assert (first.id, second.id) == (4, 5)


def test_list_returns_snapshot(repo):
    snapshot = repo.list()
    snapshot[0].name = "Mutated"
    repo.add("Late", "", 0)

    assert len(snapshot) == 3
    assert repo.get(1).name == "John Doe"


def test_returned_record_is_a_copy(repo):
    emp = repo.add("Alice", "Tester", 1)
    emp.name = "Mallory"

    assert repo.get(emp.id).name == "Alice"


def test_update_partial(repo):
    assert repo.update(1, "", "", 65000) is True

    emp = repo.get(1)
    assert (emp.name, emp.position, emp.salary) == ("John Doe", "Software Engineer", 65000)


def test_update_all_fields(repo):
    assert repo.update(2, "Jane Doe", "Director", 90000.5) is True

    assert repo.get(2) == Employee(id=2, name="Jane Doe", position="Director", salary=90000.5)


@pytest.mark.parametrize("salary", [0, -1, float("nan")])
def test_update_keeps_salary_unless_positive(repo, salary):
    repo.update(3, "", "", salary)

    assert repo.get(3).salary == 50000


def test_update_missing(repo):
    assert repo.update(999, "Ghost", "None", 1) is False
    assert len(repo) == 3


def test_delete(repo):
    assert repo.delete(2) is True
    assert [e.id for e in repo.list()] == [1, 3]
    assert repo.delete(2) is False
    assert repo.get(2) is None


def test_id_cannot_be_reassigned(repo):
    emp = repo.get(1)

    with pytest.raises(ValidationError):
        emp.id = 42


def test_concurrent_adds_get_unique_ids(repo):
    def worker():
        for _ in range(50):
            repo.add("Worker", "Thread", 1)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [e.id for e in repo.list()]
    assert len(ids) == 3 + 8 * 50
    assert ids == sorted(set(ids))
    assert ids[-1] == 3 + 8 * 50
