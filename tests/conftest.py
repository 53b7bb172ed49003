"""Shared fixtures for pytest."""

import base64
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app.main import app
from app.services import stability_service


def make_image_bytes(image_format: str = "JPEG", size=(64, 48)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", size, (200, 180, 150)).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes("JPEG")


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG")


@pytest.fixture
def room_b64(jpeg_bytes) -> str:
    return base64.b64encode(jpeg_bytes).decode("ascii")


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_stability_singleton(monkeypatch):
    monkeypatch.setattr(stability_service, "_stability_service", None)
