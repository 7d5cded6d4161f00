"""Seed demo departments and employees.

Note: Only records whose key is not in the file yet are appended, so the
script can be run more than once.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "company_records"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from dotenv import load_dotenv

from config import get_settings_module

from company_records.container import build_container
from company_records.departments.model import Department
from company_records.employees.model import Employee

DEMO_DEPARTMENTS = [
    Department(depno=10, name="ACCOUNTING", location="SEVILLA"),
    Department(depno=20, name="RESEARCH", location="MADRID"),
    Department(depno=30, name="SALES", location="BARCELONA"),
    Department(depno=40, name="PRODUCTION", location="BILBAO"),
]

DEMO_EMPLOYEES = [
    Employee(empno=7369, name="SANCHEZ", position="CLERK", depno=20),
    Employee(empno=7499, name="ARROYO", position="SALESMAN", depno=30),
    Employee(empno=7566, name="JIMENEZ", position="MANAGER", depno=20),
    Employee(empno=7782, name="CEREZO", position="MANAGER", depno=10),
    Employee(empno=7839, name="REY", position="PRESIDENT", depno=10),
]


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)

    container.store.create()
    added = 0
    for d in DEMO_DEPARTMENTS:
        if not container.departments_repo.get_by_id(d.depno):
            container.departments_repo.add(d)
            added += 1
    for e in DEMO_EMPLOYEES:
        if not container.employees_repo.get_by_id(e.empno):
            container.employees_repo.add(e)
            added += 1
    container.close()

    print(f"OK: Seeded data file -> {container.store.path} ({added} new records)")


if __name__ == "__main__":
    main()
