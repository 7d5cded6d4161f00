from __future__ import annotations

from pathlib import Path

import pytest

from company_records.container import build_container
from company_records.departments.file_department_repository import FileDepartmentRepository
from company_records.employees.file_employee_repository import FileEmployeeRepository
from company_records.storage.file_store import FileStore

SAMPLE_LINES = [
    "department(10,ACCOUNTING,SEVILLA)",
    "employee(1,SMITH,CLERK,10)",
    "this line is not a record",
    "department(20,SALES,NYC)",
    "employee(2,JONES,MANAGER,20)",
    "employee(oops,BROKEN,LINE,10)",
    "employee(3,BLAKE,ANALYST,10)",
]


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "empresa.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture
def missing_file(tmp_path: Path) -> Path:
    return tmp_path / "nope" / "empresa.txt"


@pytest.fixture
def store(data_file: Path) -> FileStore:
    return FileStore(data_file)


@pytest.fixture
def employees(store: FileStore) -> FileEmployeeRepository:
    return FileEmployeeRepository(store)


@pytest.fixture
def departments(store: FileStore) -> FileDepartmentRepository:
    return FileDepartmentRepository(store)


@pytest.fixture
def container(data_file: Path):
    return build_container(data_file=data_file)
