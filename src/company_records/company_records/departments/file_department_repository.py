from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from ..core.constants import DEPARTMENT_TAG
from ..storage.codec import decode_department, encode_department
from ..storage.file_store import FileStore
from ..storage.line_repository import TaggedLineRepository
from .model import Department
from .repository import DepartmentRepository


class FileDepartmentRepository(TaggedLineRepository[Department], DepartmentRepository):
    tag = DEPARTMENT_TAG
    label = "Department"

    def __init__(self, store: FileStore):
        super().__init__(
            store,
            decode=decode_department,
            encode=encode_department,
            key_of=lambda d: d.depno,
        )

    def list_all(self) -> List[Department]:
        return self._list_all()

    def get_by_id(self, depno: int) -> Optional[Department]:
        return self._get_by_key(depno)

    def add(self, department: Department) -> None:
        self._add(department)

    def update(self, depno: int, *, name: str, location: str) -> Department:
        return self._update(depno, lambda d: replace(d, name=name, location=location))

    def delete(self, depno: int) -> Department:
        return self._delete(depno)
