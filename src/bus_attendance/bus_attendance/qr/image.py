from __future__ import annotations

import io

import qrcode

from ..core.constants import DEFAULT_QR_BORDER, DEFAULT_QR_BOX_SIZE


def render_png(payload: str, *, box_size: int = DEFAULT_QR_BOX_SIZE, border: int = DEFAULT_QR_BORDER) -> bytes:
    """Render ``payload`` as a black-on-white PNG."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=int(box_size),
        border=int(border),
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
