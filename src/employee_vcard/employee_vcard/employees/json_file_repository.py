from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..common.validators import require_identifier
from ..core.constants import SCHEMA_VERSION
from ..core.exceptions import StorageError, ValidationError
from .model import EmployeeRecord
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class JsonFileEmployeeRepository(EmployeeRepository):
    """One pretty-printed JSON document per employee: ``<data_dir>/<id>.json``."""

    def __init__(self, data_dir: Union[str, Path]):
        self._data_dir = Path(data_dir)

    def _path_for(self, employee_id: str) -> Path:
        return self._data_dir / f"{employee_id}.json"

    def put(self, employee_id: str, record: EmployeeRecord) -> None:
        employee_id = require_identifier(employee_id)
        document = {"schemaVersion": SCHEMA_VERSION, **record.to_dict()}
        target = self._path_for(employee_id)
        tmp_name = None
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._data_dir, prefix=f".{employee_id}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2, ensure_ascii=False)
                fh.flush()
                os.fsync(fh.fileno())
            # rename is atomic: readers see the old file or the new one, never a partial write
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as exc:
            logger.exception("Error saving employee data id=%s", employee_id)
            raise StorageError("Failed to save employee data") from exc
        finally:
            if tmp_name is not None:
                _discard(tmp_name)

    def get(self, employee_id: str) -> Optional[EmployeeRecord]:
        employee_id = require_identifier(employee_id)
        path = self._path_for(employee_id)
        try:
            with path.open("r", encoding="utf-8") as fh:
                document = json.load(fh)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            logger.exception("Error getting employee data id=%s", employee_id)
            raise StorageError("Failed to read employee data") from exc

        if not isinstance(document, dict):
            logger.error("Stored employee document is not an object id=%s", employee_id)
            raise StorageError("Stored employee data is corrupt")
        try:
            return EmployeeRecord.from_dict(document)
        except ValidationError as exc:
            logger.exception("Stored employee document has invalid fields id=%s", employee_id)
            raise StorageError("Stored employee data is corrupt") from exc


def _discard(path: str) -> None:
    try:
        os.unlink(path)
    except OSError:
        logger.warning("Could not remove temporary file %s", path)
