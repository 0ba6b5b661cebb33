import logging
import uuid
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .validation import validate_file

logger = logging.getLogger(__name__)

OBJECT_URL_PREFIX = "blob:figment/"


@dataclass(frozen=True)
class UploadedImage:
    name: str
    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class ObjectUrlRegistry:
    """
    Tương đương URL.createObjectURL / revokeObjectURL của trình duyệt,
    nhưng sống trong session của Streamlit.
    """

    def __init__(self):
        self._urls: Dict[str, Tuple[bytes, str]] = {}

    def create(self, data: bytes, mime_type: str) -> str:
        url = f"{OBJECT_URL_PREFIX}{uuid.uuid4()}"
        self._urls[url] = (data, mime_type)
        return url

    def resolve(self, url: str) -> Optional[bytes]:
        entry = self._urls.get(url)
        return entry[0] if entry else None

    def revoke(self, url: str) -> None:
        # revoke 2 lần không sao
        self._urls.pop(url, None)

    def __contains__(self, url: str) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)


class UploadState:
    """File đang chọn + preview URL + lỗi validate gần nhất."""

    def __init__(self, registry: Optional[ObjectUrlRegistry] = None):
        self.registry = registry if registry is not None else ObjectUrlRegistry()
        self.file: Optional[UploadedImage] = None
        self.preview: Optional[str] = None
        self.error: Optional[str] = None

    def handle_file_select(self, file: UploadedImage) -> bool:
        result = validate_file(file.mime_type, file.size)

        if not result.valid:
            # Giữ nguyên file/preview cũ
            logger.info("Rejected upload %s: %s", file.name, result.error)
            self.error = result.error
            return False

        if self.preview:
            self.registry.revoke(self.preview)

        self.file = file
        self.preview = self.registry.create(file.data, file.mime_type)
        self.error = None
        return True

    def clear_file(self) -> None:
        if self.preview:
            self.registry.revoke(self.preview)
        self.file = None
        self.preview = None
        self.error = None

    def preview_bytes(self) -> Optional[bytes]:
        if not self.preview:
            return None
        return self.registry.resolve(self.preview)
