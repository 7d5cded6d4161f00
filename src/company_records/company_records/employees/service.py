from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import parse_key, require_record_text
from ..core.exceptions import NotFoundError, ValidationError
from ..departments.repository import DepartmentRepository
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage employees from untyped (terminal) input.

    All validation happens here, before an Employee is built. The repository
    only persists.
    """

    def __init__(self, employees: EmployeeRepository, departments: DepartmentRepository):
        self._employees = employees
        self._departments = departments

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def find_employee(self, raw_empno) -> Optional[Employee]:
        return self._employees.get_by_id(parse_key(raw_empno, "Employee ID"))

    def get_employee(self, raw_empno) -> Employee:
        empno = parse_key(raw_empno, "Employee ID")
        employee = self._employees.get_by_id(empno)
        if not employee:
            raise NotFoundError(f"There is no Employee with EMPNO {empno}")
        return employee

    def hire(self, *, empno, name: str, position: str, depno) -> Employee:
        empno = parse_key(empno, "Employee ID")
        if self._employees.get_by_id(empno):
            raise ValidationError("There is already an Employee with the same ID")

        employee = Employee(
            empno=empno,
            name=require_record_text(name, "Name"),
            position=require_record_text(position, "Position"),
            depno=self._existing_depno(depno),
        )
        self._employees.add(employee)
        return employee

    def change(self, *, empno, name: str, position: str, depno) -> Employee:
        current = self.get_employee(empno)
        return self._employees.update(
            current.empno,
            name=require_record_text(name, "Name"),
            position=require_record_text(position, "Position"),
            depno=self._existing_depno(depno),
        )

    def dismiss(self, raw_empno) -> Employee:
        current = self.get_employee(raw_empno)
        return self._employees.delete(current.empno)

    def list_for_department(self, raw_depno) -> Sequence[Employee]:
        return self._employees.list_by_department(parse_key(raw_depno, "Department ID"))

    def _existing_depno(self, raw_depno) -> int:
        depno = parse_key(raw_depno, "Department ID")
        if not self._departments.get_by_id(depno):
            raise ValidationError(f"There is no Department with DEPNO {depno}")
        return depno
