from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .employees.in_memory_repository import InMemoryEmployeeRepository
from .employees.json_file_repository import JsonFileEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService

STORAGE_BACKENDS = ("file", "memory")


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    employee_service: EmployeeService


def build_container(*, storage_backend: str = "file", data_dir: Union[str, Path] = "data") -> Container:
    if storage_backend == "file":
        employees_repo: EmployeeRepository = JsonFileEmployeeRepository(data_dir)
    elif storage_backend == "memory":
        employees_repo = InMemoryEmployeeRepository()
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND {storage_backend!r}, expected one of {STORAGE_BACKENDS}")

    employee_service = EmployeeService(employees_repo)

    return Container(
        employees_repo=employees_repo,
        employee_service=employee_service,
    )
