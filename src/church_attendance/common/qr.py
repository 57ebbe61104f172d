from __future__ import annotations

import io

import qrcode


def make_qr_png(data: str) -> io.BytesIO:
    """Render ``data`` as a PNG QR code, rewound and ready for send_file."""
    img = qrcode.make(data)
    buf = io.BytesIO()
    img.save(buf)
    buf.seek(0)
    return buf
