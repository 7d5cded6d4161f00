"""Line codec for employee and department records.

One record per line, ``<tag>(<field1>,...,<fieldN>)``. No escaping: fields
must not contain ``,``, ``(`` or ``)``.
"""

from __future__ import annotations

import re
from typing import List

from ..core.constants import (
    DEPARTMENT_FIELD_COUNT,
    DEPARTMENT_TAG,
    EMPLOYEE_FIELD_COUNT,
    EMPLOYEE_TAG,
)
from ..core.exceptions import MalformedLineError
from ..departments.model import Department
from ..employees.model import Employee

_INT_RE = re.compile(r"[+-]?[0-9]+")


def is_employee_line(line: str) -> bool:
    return line.startswith(EMPLOYEE_TAG)


def is_department_line(line: str) -> bool:
    return line.startswith(DEPARTMENT_TAG)


def key_prefix(tag: str, key: int) -> str:
    """Start of the line holding the record with this key, e.g. ``employee(7,``."""
    return f"{tag}({key},"


def encode_employee(employee: Employee) -> str:
    return f"{EMPLOYEE_TAG}({employee.empno},{employee.name},{employee.position},{employee.depno})"


def encode_department(department: Department) -> str:
    return f"{DEPARTMENT_TAG}({department.depno},{department.name},{department.location})"


def decode_employee(line: str) -> Employee:
    empno, name, position, depno = _fields(line, EMPLOYEE_TAG, EMPLOYEE_FIELD_COUNT)
    return Employee(
        empno=_to_int(empno, line),
        name=name,
        position=position,
        depno=_to_int(depno, line),
    )


def decode_department(line: str) -> Department:
    depno, name, location = _fields(line, DEPARTMENT_TAG, DEPARTMENT_FIELD_COUNT)
    return Department(depno=_to_int(depno, line), name=name, location=location)


def _fields(line: str, tag: str, count: int) -> List[str]:
    if not line.startswith(tag):
        raise MalformedLineError(f"Not a {tag} line: {line!r}")

    start = line.find("(")
    end = line.find(")")
    if start < 0 or end < start:
        raise MalformedLineError(f"Missing parentheses: {line!r}")

    parts = line[start + 1 : end].split(",")
    if len(parts) != count:
        raise MalformedLineError(f"Expected {count} fields, got {len(parts)}: {line!r}")
    return parts


def _to_int(value: str, line: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise MalformedLineError(f"Invalid integer {value!r}: {line!r}")
    return int(value)
