import base64
import logging
from typing import Callable, Optional

from backend.model import GenerationStatus

from .api_client import call_generate
from .upload import UploadedImage

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong while generating code. Please try again."

# idle -> loading -> success | error, từ trạng thái nào cũng có thể quay lại loading
IDLE = "idle"
LOADING = "loading"
SUCCESS = "success"
ERROR = "error"


def encode_file_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


class GenerationController:
    """
    Trạng thái 1 lần generate: status / error / code.
    Chỉ có 1 request tại 1 thời điểm, không huỷ, không retry:
    request nào xong sau cùng sẽ ghi đè state.
    """

    def __init__(
        self,
        generate_fn: Callable[..., dict] = call_generate,
        on_change: Optional[Callable[[GenerationStatus], None]] = None,
    ):
        self._generate_fn = generate_fn
        self._on_change = on_change
        self.status: GenerationStatus = IDLE
        self.error: Optional[str] = None
        self.code: Optional[str] = None

    def _set_status(self, status: GenerationStatus) -> None:
        self.status = status
        if self._on_change:
            self._on_change(status)

    def generate_file(self, file: UploadedImage, prompt: Optional[str] = None) -> None:
        self.error = None
        self.code = None
        self._set_status(LOADING)

        try:
            image = encode_file_base64(file.data)
            result = self._generate_fn(image, prompt)
            if result.get("success"):
                code = result["data"]["generatedCode"]
            else:
                err = result.get("error") or {}
                logger.warning("Backend returned error %s: %s", err.get("code"), err.get("message"))
                self.error = GENERIC_ERROR_MESSAGE
                self._set_status(ERROR)
                return
        except Exception:
            logger.exception("Generate request failed for %s", file.name)
            self.error = GENERIC_ERROR_MESSAGE
            self._set_status(ERROR)
            return

        self.code = code
        self._set_status(SUCCESS)

    def reset(self) -> None:
        self.error = None
        self.code = None
        self._set_status(IDLE)
