"""업로드된 방 사진 디코딩"""
import base64
import binascii
import re
from io import BytesIO
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from ..services.exceptions import InputError

DATA_URI_PREFIX = re.compile(r"^data:image/[\w.+-]+;base64,", re.IGNORECASE)

MIME_TYPES = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
}


def decode_room_image(payload: Optional[str]) -> Tuple[bytes, str]:
    """base64 문자열 → (이미지 바이트, MIME 타입)

    Stability API 호출 전에 잘못된 입력을 걸러낸다.
    """
    if payload is None or not payload.strip():
        raise InputError("currentRoom image is required")

    data = DATA_URI_PREFIX.sub("", payload.strip(), count=1)
    # 일부 클라이언트는 줄바꿈을 섞어서 보냄
    data = "".join(data.split())

    try:
        image_bytes = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        raise InputError("currentRoom is not valid base64 image data")

    if not image_bytes:
        raise InputError("currentRoom image is empty")

    try:
        with Image.open(BytesIO(image_bytes)) as img:
            image_format = img.format
            img.verify()
    except Image.DecompressionBombError:
        raise InputError("currentRoom image is too large")
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise InputError("currentRoom is not a readable image")

    return image_bytes, MIME_TYPES.get(image_format, "image/jpeg")
