"""Identifier generation helpers."""

from __future__ import annotations

import secrets

from ..core.constants import EMPLOYEE_ID_ALPHABET, EMPLOYEE_ID_LENGTH


def generate_employee_id() -> str:
    """Create a random lowercase base36 identifier (about 124 bits of entropy)."""
    return "".join(secrets.choice(EMPLOYEE_ID_ALPHABET) for _ in range(EMPLOYEE_ID_LENGTH))
