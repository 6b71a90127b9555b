from __future__ import annotations

from typing import Any, Dict, Optional

from ..common.validators import require_identifier
from .model import EmployeeRecord
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Dict-backed store for tests and throwaway dev servers.

    Keeps the serialized form so stored state is independent of the objects
    handed in and out.
    """

    def __init__(self):
        self._documents: Dict[str, Dict[str, Any]] = {}

    def put(self, employee_id: str, record: EmployeeRecord) -> None:
        employee_id = require_identifier(employee_id)
        self._documents[employee_id] = record.to_dict()

    def get(self, employee_id: str) -> Optional[EmployeeRecord]:
        employee_id = require_identifier(employee_id)
        document = self._documents.get(employee_id)
        if document is None:
            return None
        return EmployeeRecord.from_dict(document)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._documents
