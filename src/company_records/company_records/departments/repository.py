from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_id(self, depno: int) -> Optional[Department]:
        raise NotImplementedError

    def add(self, department: Department) -> None:
        raise NotImplementedError

    def update(self, depno: int, *, name: str, location: str) -> Department:
        raise NotImplementedError

    def delete(self, depno: int) -> Department:
        raise NotImplementedError
