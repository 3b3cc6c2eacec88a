"""
In-memory repository for employee records.

The repository owns an ordered list of :class:`Employee` records and a
counter for the next identifier.  Identifiers are never reused, even
after the record holding one is deleted.  Nothing is persisted; the
data lives as long as the repository object, which ``create_app``
builds once per application.

All operations run under a single lock so concurrent requests cannot
lose updates or observe a half-modified list.  Records handed out to
callers are copies; mutating them does not touch the stored data.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Tuple

from employee_directory_api.app.schemas.employee import Employee

logger = logging.getLogger(__name__)

# Records a freshly started service holds.
SEED_EMPLOYEES: Tuple[Employee, ...] = (
    Employee(id=1, name="John Doe", position="Software Engineer", salary=60000),
    Employee(id=2, name="Jane Smith", position="Project Manager", salary=75000),
    Employee(id=3, name="Sam Brown", position="QA Analyst", salary=50000),
)


class EmployeeRepository:
    """Ordered, lock-protected store of employee records."""

    def __init__(self, seed: Optional[Iterable[Employee]] = None) -> None:
        """Create the repository.

        Parameters
        ----------
        seed : Optional[Iterable[Employee]]
            Initial records in listing order.  Defaults to
            ``SEED_EMPLOYEES``; pass an empty iterable to start empty.
            The next identifier is one past the highest seeded one.
        """
        if seed is None:
            seed = SEED_EMPLOYEES
        self._lock = threading.Lock()
        self._employees: List[Employee] = [emp.model_copy() for emp in seed]
        self._next_id = max((emp.id for emp in self._employees), default=0) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def list(self) -> Tuple[Employee, ...]:
        """Return a snapshot of all employees in insertion order."""
        with self._lock:
            return tuple(emp.model_copy() for emp in self._employees)

    def get(self, employee_id: int) -> Optional[Employee]:
        """Return a copy of the employee with ``employee_id`` or ``None``."""
        with self._lock:
            emp = self._find(employee_id)
            return emp.model_copy() if emp is not None else None

    def add(self, name: str, position: str, salary: float) -> Employee:
        """Create an employee with the next identifier and append it."""
        with self._lock:
            emp = Employee(id=self._next_id, name=name, position=position, salary=salary)
            self._next_id += 1
            self._employees.append(emp)
        logger.info("Created employee %s", emp.id)
        return emp.model_copy()

    def update(self, employee_id: int, name: str, position: str, salary: float) -> bool:
        """Update an existing employee.

        Only a non-empty ``name`` or ``position`` replaces the stored
        value, and only a ``salary`` greater than zero replaces the
        stored salary.  Because of the latter a salary cannot be set
        to exactly 0 through this method.

        Returns ``True`` if the employee exists, ``False`` otherwise.
        """
        with self._lock:
            emp = self._find(employee_id)
            if emp is None:
                logger.debug("Employee %s not found for update", employee_id)
                return False
            if name:
                emp.name = name
            if position:
                emp.position = position
            if salary > 0:
                emp.salary = salary
        logger.info("Updated employee %s", employee_id)
        return True

    def delete(self, employee_id: int) -> bool:
        """Delete an employee by ID.

        Returns ``True`` if a record was removed, ``False`` otherwise.
        """
        with self._lock:
            index = self._index_of(employee_id)
            if index is None:
                logger.debug("Employee %s not found for deletion", employee_id)
                return False
            del self._employees[index]
        logger.info("Deleted employee %s", employee_id)
        return True

    def _index_of(self, employee_id: int) -> Optional[int]:
        # Linear scan; the directory is small.
        for index, emp in enumerate(self._employees):
            if emp.id == employee_id:
                return index
        return None

    def _find(self, employee_id: int) -> Optional[Employee]:
        index = self._index_of(employee_id)
        return self._employees[index] if index is not None else None
