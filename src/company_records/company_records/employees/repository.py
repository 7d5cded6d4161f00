from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on the file layout.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, empno: int) -> Optional[Employee]:
        raise NotImplementedError

    def add(self, employee: Employee) -> None:
        raise NotImplementedError

    def update(self, empno: int, *, name: str, position: str, depno: int) -> Employee:
        raise NotImplementedError

    def delete(self, empno: int) -> Employee:
        raise NotImplementedError

    def list_by_department(self, depno: int) -> Sequence[Employee]:
        raise NotImplementedError
