from __future__ import annotations

import logging
from typing import Callable, Optional

from ..common.ids import generate_employee_id
from ..common.validators import require_identifier
from ..core.exceptions import EmployeeNotFoundError, ValidationError
from .model import EmployeeRecord
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases: create, save and look up employee records.

    Storage failures are not handled here; StorageError reaches the caller as is.
    """

    def __init__(self, repository: EmployeeRepository, id_generator: Callable[[], str] = generate_employee_id):
        self._repository = repository
        self._id_generator = id_generator

    def save(self, employee_id: str, record: Optional[EmployeeRecord]) -> str:
        """Store ``record`` under a caller-chosen identifier (full replace)."""
        employee_id = require_identifier(employee_id)
        if record is None:
            raise ValidationError("Missing employee data")

        self._repository.put(employee_id, record)
        logger.info("Saved employee id=%s", employee_id)
        return employee_id

    def create(self, record: Optional[EmployeeRecord]) -> str:
        """Store ``record`` under a freshly generated identifier and return it."""
        return self.save(self._id_generator(), record)

    def get(self, employee_id: str) -> EmployeeRecord:
        employee_id = require_identifier(employee_id)
        record = self._repository.get(employee_id)
        if record is None:
            logger.debug("Employee not found id=%s", employee_id)
            raise EmployeeNotFoundError("Employee not found")
        return record
