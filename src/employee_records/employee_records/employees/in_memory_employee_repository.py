from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Optional, Sequence

from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Sequence[Employee] = ()):
        self._by_id: dict[str, Employee] = {}
        for emp in employees:
            self.add(emp)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def get_by_number(self, employee_number: str) -> Optional[Employee]:
        for emp in self._by_id.values():
            if emp.employee_number == employee_number:
                return emp
        return None

    def add(self, employee: Employee) -> Employee:
        if not employee.employee_id:
            employee = replace(employee, employee_id=uuid.uuid4().hex)
        self._by_id[employee.employee_id] = employee
        return employee

    def save(self, employee: Employee) -> None:
        self._by_id[employee.employee_id] = employee

    def list_all(self) -> Sequence[Employee]:
        return list(self._by_id.values())
