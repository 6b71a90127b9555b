"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_BACKGROUND_COLOR = "#222326"

EMPLOYEE_ID_LENGTH = 24
EMPLOYEE_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
MAX_EMPLOYEE_ID_LENGTH = 128

SCHEMA_VERSION = 1

DEFAULT_MAX_PHOTO_BYTES = 2 * 1024 * 1024

# Swatches offered next to the colour field on the creation form.
BACKGROUND_PRESETS = (
    "#222326",
    "#1e3a8a",
    "#0f766e",
    "#7c2d12",
    "#6d28d9",
    "#be123c",
)
