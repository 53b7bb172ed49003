"""Unit tests for the uploaded photo decoder."""

import base64

import pytest
from PIL import Image

from app.services.exceptions import InputError
from app.utils.image import decode_room_image


def test_decodes_plain_base64_jpeg(jpeg_bytes):
    data, mime = decode_room_image(base64.b64encode(jpeg_bytes).decode())

    assert data == jpeg_bytes
    assert mime == "image/jpeg"


def test_strips_data_uri_prefix(png_bytes):
    payload = "data:image/png;base64," + base64.b64encode(png_bytes).decode()

    data, mime = decode_room_image(payload)

    assert data == png_bytes
    assert mime == "image/png"


@pytest.mark.parametrize("payload", [None, "", "   "])
def test_missing_image_is_rejected(payload):
    with pytest.raises(InputError):
        decode_room_image(payload)


def test_invalid_base64_is_rejected():
    with pytest.raises(InputError):
        decode_room_image("not*base64!!")


def test_non_image_bytes_are_rejected():
    with pytest.raises(InputError, match="not a readable image"):
        decode_room_image(base64.b64encode(b"hello, this is text").decode())


def test_decompression_bomb_is_rejected(monkeypatch, jpeg_bytes):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

    with pytest.raises(InputError, match="too large"):
        decode_room_image(base64.b64encode(jpeg_bytes).decode())
