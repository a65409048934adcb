import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

REQUIRED_ENV = {
    "GOODDATA_HOST": "https://gooddata.example.com",
    "GOODDATA_TOKEN": "secret-token",
    "GOODDATA_WORKSPACE": "demo",
    "GOODDATA_NOTIFICATION_CHANNEL": "email-channel",
}


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def gooddata_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set the four required GoodData variables."""
    for key, value in REQUIRED_ENV.items():
        monkeypatch.setenv(key, value)
    return dict(REQUIRED_ENV)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Revenue by region")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a three-page PDF whose pages have different sizes."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(200, 100))
    c.drawString(10, 50, "Slide one")
    c.showPage()
    c.setPageSize((300, 100))
    c.drawString(10, 50, "Slide two")
    c.showPage()
    c.setPageSize((400, 100))
    c.drawString(10, 50, "Slide three")
    c.save()
    return buf.getvalue()
