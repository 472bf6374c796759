import logging
from datetime import datetime, time, timedelta
from typing import Any, List, Mapping, Optional
from fastapi import UploadFile
from workhub.models import Submission
from workhub.core.errors import ContentRejectedError, FileRequiredError, ValidationFailedError
from workhub.services.file.content_sniffer import sniff
from workhub.services.file.file_service import FileService
from workhub.services.file.storage_namer import extension_of, generate_stored_name
from workhub.utils.validation import validate_submission_form

logger = logging.getLogger(__name__)

def local_day_bounds(now: Optional[datetime] = None):
    """서버 로컬 기준 [오늘 0시, 내일 0시)"""
    # 두 경계 모두 그 날짜의 로컬 자정 (서머타임 전환일 포함)
    today = (now or datetime.now()).astimezone().date()
    start = datetime.combine(today, time()).astimezone()
    end = datetime.combine(today + timedelta(days=1), time()).astimezone()
    return start, end

class SubmissionService:

    def __init__(self, repository, file_service: FileService):
        self.repository = repository
        self.file_service = file_service

    async def create_submission(
        self,
        form_data: Mapping[str, Any],
        file: Optional[UploadFile]
    ) -> Submission:
        """제출물 접수: 검증 -> 저장 -> 내용 검사 -> 기록 생성"""
        metadata, errors = validate_submission_form(form_data)
        if errors:
            raise ValidationFailedError(errors)

        if file is None or not file.filename:
            raise FileRequiredError()

        original_extension = extension_of(file.filename)
        stored_file_name = generate_stored_name(original_extension)
        file_size = await self.file_service.stage_upload(file, stored_file_name)

        header = await self.file_service.read_header(stored_file_name)
        result = sniff(metadata.category, original_extension, header)
        if not result.accepted:
            logger.info(
                f"제출 거부: {metadata.student_name} ({metadata.category.value}, {file.filename}) - {result.reason}"
            )
            await self.file_service.delete_file(stored_file_name)
            raise ContentRejectedError(result.reason)

        submission = Submission(
            student_name=metadata.student_name,
            grade=metadata.grade,
            class_number=metadata.class_number,
            category=metadata.category,
            work_title=metadata.work_title,
            file_name=file.filename,
            stored_file_name=stored_file_name,
            file_type=file.content_type,
            file_size=file_size
        )
        submission = await self.repository.create(submission)
        logger.info(f"제출 완료 - ID: {submission.id}, 저장 파일: {stored_file_name}")
        return submission

    async def list_all(self) -> List[Submission]:
        return await self.repository.list_all()

    async def list_latest_per_group(self) -> List[Submission]:
        """(학년, 반, 이름, 분류)별 최신 제출물만 반환"""
        seen = set()
        latest = []
        for submission in await self.repository.list_all():
            key = submission.group_key
            if key in seen:
                continue
            seen.add(key)
            latest.append(submission)
        return latest

    async def has_submitted_today(self, student_name: str, now: Optional[datetime] = None) -> bool:
        start, end = local_day_bounds(now)
        count = await self.repository.count_for_student_between(student_name, start, end)
        return count > 0
