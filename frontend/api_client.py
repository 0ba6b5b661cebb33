from typing import Any, Dict, Optional

import requests

from config.settings import settings

GENERATE_PATH = "/api/generate"


def call_generate(image: str, prompt: Optional[str] = None) -> Dict[str, Any]:
    """
    Gọi POST /api/generate -> trả về envelope {success, data|error}.
    Route trả envelope cả khi lỗi (400/500) nên không raise_for_status ở đây.
    """
    payload: Dict[str, Any] = {"image": image}
    if prompt and prompt.strip():
        payload["prompt"] = prompt.strip()

    resp = requests.post(
        f"{settings.BACKEND_URL.rstrip('/')}{GENERATE_PATH}",
        json=payload,
        timeout=settings.REQUEST_TIMEOUT,
    )
    data = resp.json()
    if not isinstance(data, dict) or "success" not in data:
        raise ValueError(f"Unexpected response from backend (HTTP {resp.status_code})")
    return data
