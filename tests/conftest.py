import io
import json
from collections.abc import Callable
from urllib.parse import quote

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

PREFIX = "ghostprint://payload="


def encode_payload(data: object, *, prefix: str = PREFIX, delimiter: str = "/") -> str:
    """Build an invocation string the way a browser hands it to the handler."""
    return f"{prefix}{quote(json.dumps(data))}{delimiter}"


@pytest.fixture()
def make_payload() -> Callable[..., str]:
    return encode_payload


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello Printer")
    c.save()
    return buf.getvalue()
