"""vCard 3.0 (RFC 2426) export of an employee record."""

from __future__ import annotations

from typing import List

from .model import EmployeeRecord

VCARD_MIMETYPE = "text/vcard"


def _escape(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace("\r\n", "\n")
        .replace("\n", "\\n")
        .replace(",", "\\,")
        .replace(";", "\\;")
    )


def _structured_name(full_name: str) -> str:
    parts = full_name.split()
    if not parts:
        return ";;;;"
    if len(parts) == 1:
        return f"{_escape(parts[0])};;;;"
    given = " ".join(parts[:-1])
    return f"{_escape(parts[-1])};{_escape(given)};;;"


def build_vcard(record: EmployeeRecord) -> str:
    lines: List[str] = [
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"N:{_structured_name(record.name)}",
        f"FN:{_escape(record.name)}",
        f"ORG:{_escape(record.company)}",
        f"TITLE:{_escape(record.position)}",
    ]
    if record.phone:
        lines.append(f"TEL;TYPE=CELL:{_escape(record.phone)}")
    if record.work_phone:
        lines.append(f"TEL;TYPE=WORK:{_escape(record.work_phone)}")
    if record.email:
        lines.append(f"EMAIL:{_escape(record.email)}")
    if record.website:
        lines.append(f"URL:{_escape(record.website)}")
    lines.append("END:VCARD")
    return "\r\n".join(lines) + "\r\n"


def vcard_filename(record: EmployeeRecord) -> str:
    return f"{record.name.strip() or 'contact'}.vcf"
