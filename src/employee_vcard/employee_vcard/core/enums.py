from __future__ import annotations

from enum import Enum


class BackgroundType(str, Enum):
    """Header background style of the profile page."""

    SOLID = "solid"
    GRADIENT = "gradient"
