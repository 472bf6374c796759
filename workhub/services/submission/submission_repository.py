import logging
import uuid
from datetime import datetime
from typing import Dict, List, Optional
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from workhub.models import Submission
from workhub.models.submission import utcnow

logger = logging.getLogger(__name__)

def _newest_first(submission: Submission):
    # 같은 시각이면 id 오름차순
    return (-submission.submitted_at.timestamp(), submission.id)

class SubmissionRepository:
    """PostgreSQL 제출물 저장소"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, submission: Submission) -> Submission:
        """제출물 생성"""
        try:
            if submission.id is None:
                submission.id = str(uuid.uuid4())
            if submission.submitted_at is None:
                submission.submitted_at = utcnow()
            self.db.add(submission)
            await self.db.commit()
            await self.db.refresh(submission)
            return submission
        except Exception as e:
            logger.error(f"Error creating submission: {str(e)}")
            await self.db.rollback()
            raise

    async def get(self, submission_id: str) -> Optional[Submission]:
        return await self.db.get(Submission, submission_id)

    async def list_all(self) -> List[Submission]:
        """전체 제출물 (최신순)"""
        result = await self.db.execute(
            select(Submission).order_by(Submission.submitted_at.desc(), Submission.id.asc())
        )
        return list(result.scalars().all())

    async def count_for_student_between(
        self,
        student_name: str,
        start: datetime,
        end: datetime
    ) -> int:
        """[start, end) 구간의 학생 제출 수"""
        result = await self.db.execute(
            select(func.count())
            .select_from(Submission)
            .where(
                Submission.student_name == student_name,
                Submission.submitted_at >= start,
                Submission.submitted_at < end
            )
        )
        return result.scalar() or 0

class MemorySubmissionRepository:
    """프로세스 메모리 제출물 저장소 (개발/테스트용)"""

    def __init__(self):
        self._submissions: Dict[str, Submission] = {}

    async def create(self, submission: Submission) -> Submission:
        if submission.id is None:
            submission.id = str(uuid.uuid4())
        if submission.submitted_at is None:
            submission.submitted_at = utcnow()
        self._submissions[submission.id] = submission
        return submission

    async def get(self, submission_id: str) -> Optional[Submission]:
        return self._submissions.get(submission_id)

    async def list_all(self) -> List[Submission]:
        return sorted(self._submissions.values(), key=_newest_first)

    async def count_for_student_between(
        self,
        student_name: str,
        start: datetime,
        end: datetime
    ) -> int:
        return sum(
            1 for s in self._submissions.values()
            if s.student_name == student_name and start <= s.submitted_at < end
        )
