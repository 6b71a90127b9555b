from __future__ import annotations

import base64
import io
from typing import Optional

from PIL import Image, UnidentifiedImageError
from werkzeug.datastructures import FileStorage

from ..core.constants import DEFAULT_MAX_PHOTO_BYTES
from ..core.exceptions import ValidationError

_MIME_BY_FORMAT = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "GIF": "image/gif",
    "WEBP": "image/webp",
}


def photo_to_data_url(upload: Optional[FileStorage], *, max_bytes: int = DEFAULT_MAX_PHOTO_BYTES) -> Optional[str]:
    """Turn an uploaded photo into a self-contained ``data:`` URL.

    Returns None when nothing was uploaded. The payload is sniffed with Pillow,
    the browser-supplied content type is not trusted.
    """
    if upload is None or not upload.filename:
        return None

    raw = upload.read(max_bytes + 1)
    if not raw:
        return None
    if len(raw) > max_bytes:
        raise ValidationError(f"Photo must be at most {max_bytes // 1024} KB")

    try:
        with Image.open(io.BytesIO(raw)) as img:
            img_format = img.format
            img.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
        raise ValidationError("Photo is not a valid image") from exc

    mime = _MIME_BY_FORMAT.get(img_format or "")
    if not mime:
        raise ValidationError("Photo must be PNG, JPEG, GIF or WEBP")

    encoded = base64.b64encode(raw).decode("ascii")
    return f"data:{mime};base64,{encoded}"
