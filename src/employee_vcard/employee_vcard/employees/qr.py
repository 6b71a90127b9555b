from __future__ import annotations

import base64
import io

import qrcode

from .model import EmployeeRecord


def profile_url(base_url: str, employee_id: str) -> str:
    return f"{base_url.rstrip('/')}/employee/{employee_id}"


def make_qr_png(data: str) -> bytes:
    """Render ``data`` as a black-on-white QR code PNG."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def make_qr_data_url(data: str) -> str:
    encoded = base64.b64encode(make_qr_png(data)).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def qr_filename(record: EmployeeRecord) -> str:
    return f"{record.name.strip() or 'employee'}_qrcode.png"
