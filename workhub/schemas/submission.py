from datetime import datetime
from typing import Optional
from workhub.models import Category
from .base import CamelModel

class SubmissionResponse(CamelModel):
    id: str
    student_name: str
    grade: int
    class_number: int
    category: Category
    work_title: str
    file_name: str
    stored_file_name: str
    file_type: Optional[str] = None
    file_size: int
    submitted_at: datetime

class QuotaCheckResponse(CamelModel):
    """당일 제출 가능 여부"""
    can_submit: bool
