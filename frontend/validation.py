from dataclasses import dataclass
from typing import Optional

ALLOWED_FILE_TYPES = ("image/png", "image/jpeg", "image/webp")
MAX_SIZE = 10 * 1024 * 1024


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None


def validate_file(mime_type: Optional[str], size: int) -> ValidationResult:
    """Kiểm tra loại file trước, sau đó tới dung lượng."""
    if mime_type not in ALLOWED_FILE_TYPES:
        return ValidationResult(valid=False, error="File must be an image (png, jpg, webp)")
    if size > MAX_SIZE:
        return ValidationResult(valid=False, error="File must be under 10MB")
    return ValidationResult(valid=True)
