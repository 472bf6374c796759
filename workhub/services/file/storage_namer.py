import os
import re
import uuid

FALLBACK_DOWNLOAD_BASE = "download"

# 확장자는 점 + 영숫자만 허용
_SAFE_EXTENSION = re.compile(r"\.[A-Za-z0-9]{1,16}")
_LINE_BREAKS = re.compile(r"[\r\n]")
_UNSAFE_NAME_CHARS = re.compile(r'["\\/]')


def extension_of(filename: str) -> str:
    """클라이언트가 보낸 파일명의 확장자 (없으면 빈 문자열)"""
    if not filename:
        return ""
    basename = os.path.basename(filename.replace("\\", "/"))
    return os.path.splitext(basename)[1]


def generate_stored_name(original_extension: str = "") -> str:
    """디스크 저장용 고유 파일명 생성"""
    extension = original_extension if original_extension and _SAFE_EXTENSION.fullmatch(original_extension) else ""
    return f"{uuid.uuid4()}{extension}"


def pick_download_extension(file_name: str, stored_file_name: str) -> str:
    return extension_of(file_name) or extension_of(stored_file_name) or ""


def sanitize_student_name(student_name: str) -> str:
    without_breaks = _LINE_BREAKS.sub("", student_name or "")
    return _UNSAFE_NAME_CHARS.sub("_", without_breaks)


def build_download_name(grade, class_number, student_name: str, preferred_extension: str = "") -> str:
    """다운로드 파일명 생성: {학년}-{반}-{이름}{확장자}"""
    safe_name = sanitize_student_name(student_name).strip()
    # 이름이 비면 기본값
    base = f"{grade}-{class_number}-{safe_name}".strip() if safe_name else ""
    if not base:
        base = FALLBACK_DOWNLOAD_BASE
    return f"{base}{preferred_extension or ''}"
