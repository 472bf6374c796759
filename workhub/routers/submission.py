from fastapi import APIRouter, Depends, UploadFile, File, Form, HTTPException, Query, Request
from fastapi.responses import StreamingResponse
from typing import List, Optional
from urllib.parse import quote
import logging

from workhub.core.config import settings
from workhub.core.rate_limit import limiter
from workhub.dependencies import get_download_service, get_submission_service
from workhub.schemas.base import ErrorResponse
from workhub.schemas.submission import QuotaCheckResponse, SubmissionResponse
from workhub.services.submission.download_service import DownloadService
from workhub.services.submission.submission_service import SubmissionService
from workhub.utils.auth import require_admin

logger = logging.getLogger(__name__)
AUTH_ERRORS = {401: {"model": ErrorResponse}}

router = APIRouter(
    prefix="/submissions",
    tags=["submissions"]
)

def content_disposition(filename: str) -> str:
    """attachment 헤더 생성 (비 ASCII 이름은 RFC 5987 인코딩)"""
    if filename.isascii():
        return f'attachment; filename="{filename}"'
    fallback = filename.encode("ascii", "replace").decode("ascii")
    return f"attachment; filename=\"{fallback}\"; filename*=utf-8''{quote(filename)}"

@router.get("", response_model=List[SubmissionResponse], responses=AUTH_ERRORS, dependencies=[Depends(require_admin)])
async def list_submissions(
    service: SubmissionService = Depends(get_submission_service)
):
    """전체 제출물 목록 (최신순)"""
    return await service.list_all()

@router.get("/final", response_model=List[SubmissionResponse], responses=AUTH_ERRORS, dependencies=[Depends(require_admin)])
async def list_final_submissions(
    service: SubmissionService = Depends(get_submission_service)
):
    """학생/반/분류별 최종 제출물 목록"""
    return await service.list_latest_per_group()

@router.get("/check", response_model=QuotaCheckResponse, responses={400: {"model": ErrorResponse}})
async def check_quota(
    student_name: Optional[str] = Query(None, alias="studentName"),
    service: SubmissionService = Depends(get_submission_service)
):
    """오늘 제출 가능 여부 확인"""
    if not student_name:
        raise HTTPException(status_code=400, detail="studentName is required")

    has_submission = await service.has_submitted_today(student_name)
    return QuotaCheckResponse(can_submit=not has_submission)

@router.get(
    "/{submission_id}/download",
    responses={**AUTH_ERRORS, 404: {"model": ErrorResponse}},
    dependencies=[Depends(require_admin)]
)
async def download_submission(
    submission_id: str,
    service: DownloadService = Depends(get_download_service)
):
    """제출 파일 다운로드"""
    payload = await service.prepare_download(submission_id)
    logger.info(f"다운로드 - ID: {submission_id}, 파일명: {payload.download_name}")
    return StreamingResponse(
        payload.stream,
        media_type=payload.content_type,
        headers={"Content-Disposition": content_disposition(payload.download_name)}
    )

@router.post(
    "",
    response_model=SubmissionResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 429: {"model": ErrorResponse}}
)
@limiter.limit(settings.RATE_LIMIT_SUBMISSIONS)
async def create_submission(
    request: Request,
    student_name: Optional[str] = Form(None, alias="studentName"),
    grade: Optional[str] = Form(None),
    class_number: Optional[str] = Form(None, alias="classNumber"),
    category: Optional[str] = Form(None),
    work_title: Optional[str] = Form(None, alias="workTitle"),
    file: Optional[UploadFile] = File(None),
    service: SubmissionService = Depends(get_submission_service)
):
    """작품 제출"""
    logger.info(f"=== 제출 처리 시작: {student_name!r} ({category!r}) ===")
    form_data = {
        "studentName": student_name,
        "grade": grade,
        "classNumber": class_number,
        "category": category,
        "workTitle": work_title
    }
    return await service.create_submission(form_data, file)
