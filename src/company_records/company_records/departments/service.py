from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import parse_key, require_record_text
from ..core.exceptions import NotFoundError, ValidationError
from .model import Department
from .repository import DepartmentRepository


class DepartmentService:
    """Use case: manage departments from untyped (terminal) input."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_departments(self) -> Sequence[Department]:
        return self._departments.list_all()

    def find_department(self, raw_depno) -> Optional[Department]:
        return self._departments.get_by_id(parse_key(raw_depno, "Department ID"))

    def get_department(self, raw_depno) -> Department:
        depno = parse_key(raw_depno, "Department ID")
        department = self._departments.get_by_id(depno)
        if not department:
            raise NotFoundError(f"There is no Department with DEPNO {depno}")
        return department

    def open(self, *, depno, name: str, location: str) -> Department:
        depno = parse_key(depno, "Department ID")
        if self._departments.get_by_id(depno):
            raise ValidationError("There is already a Department with the same ID")

        department = Department(
            depno=depno,
            name=require_record_text(name, "Name"),
            location=require_record_text(location, "Location"),
        )
        self._departments.add(department)
        return department

    def change(self, *, depno, name: str, location: str) -> Department:
        current = self.get_department(depno)
        return self._departments.update(
            current.depno,
            name=require_record_text(name, "Name"),
            location=require_record_text(location, "Location"),
        )

    def close_department(self, raw_depno) -> Department:
        current = self.get_department(raw_depno)
        return self._departments.delete(current.depno)
