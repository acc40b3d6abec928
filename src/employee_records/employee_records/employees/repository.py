from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_number(self, employee_number: str) -> Optional[Employee]:
        raise NotImplementedError

    def add(self, employee: Employee) -> Employee:
        """Store a new employee and return it with ``employee_id`` assigned."""

        raise NotImplementedError

    def save(self, employee: Employee) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError
