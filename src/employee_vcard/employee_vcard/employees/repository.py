from __future__ import annotations

from typing import Optional, Protocol

from .model import EmployeeRecord


class EmployeeRepository(Protocol):
    """Repository interface for employee records.

    Note (DIP): the service depends on this interface, not on a concrete
    storage medium. Keyed point lookup only, no listing or queries.
    """

    def put(self, employee_id: str, record: EmployeeRecord) -> None:
        """Create or fully replace the record stored under ``employee_id``.

        Raises ValidationError for a blank or unsafe id, before touching storage.
        Raises StorageError when the write cannot complete.
        """
        raise NotImplementedError

    def get(self, employee_id: str) -> Optional[EmployeeRecord]:
        """Return the stored record, or None when nothing is stored under ``employee_id``.

        Raises ValidationError for a blank or unsafe id.
        Raises StorageError when the read fails or the stored payload is corrupt.
        """
        raise NotImplementedError
