from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..common.validators import require_css_color
from ..core.constants import DEFAULT_BACKGROUND_COLOR
from ..core.enums import BackgroundType
from ..core.exceptions import ValidationError

# attribute name -> wire key (JSON API and stored document)
_TEXT_FIELDS = {
    "name": "name",
    "company": "company",
    "position": "position",
    "phone": "phone",
    "work_phone": "workPhone",
    "email": "email",
    "website": "website",
}


@dataclass(frozen=True)
class EmployeeRecord:
    """Domain entity: one employee's shareable profile.

    Note: plain data object, no storage code. Empty strings mark absent text
    fields; ``photo`` is a ``data:`` URL or None.
    """

    name: str = ""
    company: str = ""
    position: str = ""
    phone: str = ""
    work_phone: str = ""
    email: str = ""
    website: str = ""
    photo: Optional[str] = None
    background_type: BackgroundType = BackgroundType.SOLID
    background_color: str = DEFAULT_BACKGROUND_COLOR

    @property
    def initial(self) -> str:
        return self.name.strip()[:1].upper()

    @property
    def website_href(self) -> str:
        if not self.website or self.website.startswith("http"):
            return self.website
        return f"https://{self.website}"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {wire: getattr(self, attr) for attr, wire in _TEXT_FIELDS.items()}
        data["photo"] = self.photo
        data["backgroundType"] = self.background_type.value
        data["backgroundColor"] = self.background_color
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmployeeRecord":
        """Build a record from wire keys; absent keys take the defaults."""
        if not isinstance(data, Mapping):
            raise ValidationError("Employee data must be an object")

        kwargs: Dict[str, Any] = {}
        for attr, wire in _TEXT_FIELDS.items():
            kwargs[attr] = _text(data.get(wire), wire)

        photo = data.get("photo")
        if photo is not None and not isinstance(photo, str):
            raise ValidationError("photo must be a string")
        kwargs["photo"] = photo or None

        bg_type = data.get("backgroundType") or BackgroundType.SOLID.value
        try:
            kwargs["background_type"] = BackgroundType(bg_type)
        except (TypeError, ValueError) as exc:
            raise ValidationError("backgroundType must be 'solid' or 'gradient'") from exc

        bg_color = data.get("backgroundColor")
        kwargs["background_color"] = (
            DEFAULT_BACKGROUND_COLOR if bg_color is None else require_css_color(_text(bg_color, "backgroundColor"))
        )
        return cls(**kwargs)


def _text(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value
