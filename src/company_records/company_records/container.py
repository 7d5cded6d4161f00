from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .departments.file_department_repository import FileDepartmentRepository
from .departments.service import DepartmentService
from .employees.file_employee_repository import FileEmployeeRepository
from .employees.service import EmployeeService
from .storage.file_store import FileStore


@dataclass(frozen=True)
class Container:
    store: FileStore

    employees_repo: FileEmployeeRepository
    departments_repo: FileDepartmentRepository

    employee_service: EmployeeService
    department_service: DepartmentService

    def file_exists(self) -> bool:
        return self.store.file_exists()

    def close(self) -> None:
        self.store.close()


def build_container(*, data_file: Union[str, Path]) -> Container:
    store = FileStore(data_file)

    employees_repo = FileEmployeeRepository(store)
    departments_repo = FileDepartmentRepository(store)

    employee_service = EmployeeService(employees_repo, departments_repo)
    department_service = DepartmentService(departments_repo)

    return Container(
        store=store,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        employee_service=employee_service,
        department_service=department_service,
    )
