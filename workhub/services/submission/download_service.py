import logging
from dataclasses import dataclass
from typing import AsyncIterator
from workhub.core.errors import SubmissionNotFoundError
from workhub.services.file.file_service import FileService
from workhub.services.file.storage_namer import build_download_name, pick_download_extension

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

@dataclass
class DownloadPayload:
    stream: AsyncIterator[bytes]
    download_name: str
    content_type: str

class DownloadService:

    def __init__(self, repository, file_service: FileService):
        self.repository = repository
        self.file_service = file_service

    async def prepare_download(self, submission_id: str) -> DownloadPayload:
        """다운로드용 스트림과 파일명 준비"""
        submission = await self.repository.get(submission_id)
        if submission is None:
            raise SubmissionNotFoundError()

        if not await self.file_service.exists(submission.stored_file_name):
            # 기록은 있는데 파일이 없는 경우도 외부에는 동일하게 응답
            logger.warning(f"저장 파일 없음 - ID: {submission.id}, 파일: {submission.stored_file_name}")
            raise SubmissionNotFoundError()

        stream = await self.file_service.open_stream(submission.stored_file_name)
        extension = pick_download_extension(submission.file_name, submission.stored_file_name)

        return DownloadPayload(
            stream=stream,
            download_name=build_download_name(
                submission.grade,
                submission.class_number,
                submission.student_name,
                extension
            ),
            content_type=submission.file_type or DEFAULT_CONTENT_TYPE
        )
