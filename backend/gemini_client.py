# backend/gemini_client.py

import base64
import binascii
import io
import logging
import re
from typing import Optional, Tuple

from google import genai
from google.genai import types
from PIL import Image, UnidentifiedImageError

from config.settings import settings
from .prompts import build_prompt

logger = logging.getLogger(__name__)

if not settings.GOOGLE_AI_API_KEY:
    raise RuntimeError("Missing GOOGLE_AI_API_KEY environment variable")

# 1 client dùng chung cho cả process
client = genai.Client(api_key=settings.GOOGLE_AI_API_KEY)

DEFAULT_MIME_TYPE = "image/png"

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w/+.-]+);base64,(?P<data>.*)$", re.DOTALL)
_FENCE_RE = re.compile(r"^\s*```[\w+-]*[ \t]*\n(?P<body>[\s\S]*?)\n?```\s*$")


class GenerationError(RuntimeError):
    """Model trả về response không dùng được."""


def decode_image(image: str) -> Tuple[bytes, str]:
    """
    Nhận base64 thuần hoặc data URL, trả về (bytes, mime_type).
    MIME được đoán bằng Pillow từ chính dữ liệu ảnh.
    """
    declared_mime: Optional[str] = None
    payload = image.strip()

    m = _DATA_URL_RE.match(payload)
    if m:
        declared_mime = m.group("mime")
        payload = m.group("data")

    # base64 kiểu MIME có xuống dòng
    payload = "".join(payload.split())

    try:
        raw = base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Image is not valid base64: {e}") from e

    if not raw:
        raise ValueError("Image payload is empty")

    try:
        with Image.open(io.BytesIO(raw)) as img:
            detected = Image.MIME.get(img.format or "")
    except UnidentifiedImageError:
        detected = None

    return raw, detected or declared_mime or DEFAULT_MIME_TYPE


def strip_code_fences(text: str) -> str:
    """Bỏ ```tsx ... ``` nếu model không chịu nghe lời."""
    m = _FENCE_RE.match(text)
    if m:
        return m.group("body")
    return text.strip()


async def generate_code_from_image(image: str, prompt: Optional[str] = None) -> str:
    """
    Gửi ảnh thiết kế + prompt cho Gemini, trả về code React/TypeScript.

    Args:
        image: Ảnh đã encode base64 (có thể kèm prefix data URL)
        prompt: Yêu cầu thêm của user (tuỳ chọn)
    """
    full_prompt = build_prompt(prompt)
    data, mime_type = decode_image(image)

    logger.info(
        "Calling %s, image=%d bytes (%s), extra_prompt=%s",
        settings.GEMINI_MODEL, len(data), mime_type, bool(prompt),
    )

    image_part = types.Part.from_bytes(data=data, mime_type=mime_type)
    response = await client.aio.models.generate_content(
        model=settings.GEMINI_MODEL,
        contents=[full_prompt, image_part],
    )

    text = response.text
    if not text or not text.strip():
        raise GenerationError("Gemini returned an empty response")

    return strip_code_fences(text)
