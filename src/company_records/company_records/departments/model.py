from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Department:
    depno: int
    name: str
    location: str
