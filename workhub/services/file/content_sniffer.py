from dataclasses import dataclass
from typing import Optional, Union

from workhub.models import Category

# PROGRAMMING: Scratch(.sb3)/mBlock(.mp), 둘 다 ZIP
# AIGC: PNG / JPEG
HEADER_SIZE = 8

ZIP_SIGNATURE = b"\x50\x4b"
PNG_SIGNATURE = b"\x89\x50\x4e\x47\x0d\x0a\x1a\x0a"
JPEG_SIGNATURE = b"\xff\xd8"

PROGRAMMING_EXTENSIONS = frozenset({".sb3", ".mp"})
PNG_EXTENSIONS = frozenset({".png"})
JPEG_EXTENSIONS = frozenset({".jpg", ".jpeg"})

EMPTY_FILE_MESSAGE = "Uploaded file is empty"
TYPE_MISMATCH_MESSAGE = "Unsupported file type for the given category"
UNKNOWN_CATEGORY_MESSAGE = "Unsupported submission category"


@dataclass(frozen=True)
class SniffResult:
    accepted: bool
    reason: Optional[str] = None

    @classmethod
    def accept(cls) -> "SniffResult":
        return cls(True)

    @classmethod
    def reject(cls, reason: str) -> "SniffResult":
        return cls(False, reason)


def _as_category(category: Union[Category, str, None]) -> Optional[Category]:
    if isinstance(category, Category):
        return category
    try:
        return Category(category)
    except ValueError:
        return None


def _is_programming(extension: str, header: bytes) -> bool:
    return extension in PROGRAMMING_EXTENSIONS and header.startswith(ZIP_SIGNATURE)


def _is_aigc(extension: str, header: bytes) -> bool:
    if extension in PNG_EXTENSIONS:
        return header[:HEADER_SIZE] == PNG_SIGNATURE
    if extension in JPEG_EXTENSIONS:
        return header.startswith(JPEG_SIGNATURE)
    return False


def sniff(category: Union[Category, str, None], file_extension: str, first_bytes: bytes) -> SniffResult:
    """분류별 확장자와 매직 바이트 검사"""
    if not first_bytes:
        return SniffResult.reject(EMPTY_FILE_MESSAGE)

    extension = (file_extension or "").lower()
    resolved = _as_category(category)

    if resolved is Category.PROGRAMMING:
        ok = _is_programming(extension, first_bytes)
    elif resolved is Category.AIGC:
        ok = _is_aigc(extension, first_bytes)
    else:
        return SniffResult.reject(UNKNOWN_CATEGORY_MESSAGE)

    return SniffResult.accept() if ok else SniffResult.reject(TYPE_MISMATCH_MESSAGE)
