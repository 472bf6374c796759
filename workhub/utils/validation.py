from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import Field, ValidationError, field_validator

from workhub.models import Category
from workhub.schemas.base import CamelModel

INTEGER_MESSAGE = "must be an integer"


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class SubmissionForm(CamelModel):
    """검증된 제출 폼 값"""
    student_name: str = Field(min_length=2, max_length=10)
    grade: int = Field(ge=1, le=6)
    class_number: int = Field(ge=1)
    category: Category
    work_title: str = Field(min_length=1, max_length=50)

    @field_validator("grade", "class_number", mode="before")
    @classmethod
    def integer_text_only(cls, value: Any) -> Any:
        # 폼 문자열은 ASCII 정수 표기만 허용 ("3.0", "３" 거부)
        if isinstance(value, bool):
            raise ValueError(INTEGER_MESSAGE)
        if isinstance(value, str):
            text = value.strip()
            digits = text[1:] if text.startswith(("+", "-")) else text
            if not (digits.isascii() and digits.isdigit()):
                raise ValueError(INTEGER_MESSAGE)
            return int(text)
        return value


def validate_submission_form(data: Mapping[str, Any]) -> Tuple[Optional[SubmissionForm], List[FieldError]]:
    """폼 검증: (폼, 오류 목록) 반환. 오류가 있으면 폼은 None"""
    try:
        return SubmissionForm.model_validate(dict(data)), []
    except ValidationError as e:
        errors = [
            FieldError(".".join(str(part) for part in err["loc"]), err["msg"])
            for err in e.errors()
        ]
        return None, errors
