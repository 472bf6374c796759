import enum
from sqlalchemy import Column, Integer, String, DateTime, Enum
from datetime import datetime, timezone
from ..database import Base

class Category(str, enum.Enum):
    PROGRAMMING = "PROGRAMMING"
    AIGC = "AIGC"

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Submission(Base):
    __tablename__ = "submissions"

    id = Column(String(36), primary_key=True)
    student_name = Column(String(10), nullable=False, index=True)
    grade = Column(Integer, nullable=False)
    class_number = Column(Integer, nullable=False)
    category = Column(Enum(Category, name="submission_category"), nullable=False)
    work_title = Column(String(50), nullable=False)
    file_name = Column(String, nullable=False)
    stored_file_name = Column(String, nullable=False, unique=True)
    file_type = Column(String, nullable=True)
    file_size = Column(Integer, nullable=False)
    submitted_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    @property
    def group_key(self):
        """최종 제출물 판정 기준 (학년, 반, 이름, 분류)"""
        return (self.grade, self.class_number, self.student_name, self.category)
