from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no file access code). `depno` references a
    Department but is not checked for existence when read back.
    """

    empno: int
    name: str
    position: str
    depno: int
