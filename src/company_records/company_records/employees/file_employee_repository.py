from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from ..core.constants import EMPLOYEE_TAG
from ..storage.codec import decode_employee, encode_employee
from ..storage.file_store import FileStore
from ..storage.line_repository import TaggedLineRepository, is_valid_key
from .model import Employee
from .repository import EmployeeRepository


class FileEmployeeRepository(TaggedLineRepository[Employee], EmployeeRepository):
    """Employee records stored as ``employee(empno,name,position,depno)`` lines.

    Note: `add` does not check for an existing empno. Uniqueness is the
    caller's job (see EmployeeService.hire).
    """

    tag = EMPLOYEE_TAG
    label = "Employee"

    def __init__(self, store: FileStore):
        super().__init__(
            store,
            decode=decode_employee,
            encode=encode_employee,
            key_of=lambda e: e.empno,
        )

    def list_all(self) -> List[Employee]:
        return self._list_all()

    def get_by_id(self, empno: int) -> Optional[Employee]:
        return self._get_by_key(empno)

    def add(self, employee: Employee) -> None:
        self._add(employee)

    def update(self, empno: int, *, name: str, position: str, depno: int) -> Employee:
        return self._update(empno, lambda e: replace(e, name=name, position=position, depno=depno))

    def delete(self, empno: int) -> Employee:
        return self._delete(empno)

    def list_by_department(self, depno: int) -> List[Employee]:
        if not is_valid_key(depno):
            return []
        return [e for e in self._list_all() if e.depno == depno]
