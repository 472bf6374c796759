import logging
from typing import AsyncGenerator
from fastapi import Depends, FastAPI
from workhub.core.config import Settings, settings
from workhub.database import async_session_maker, init_db
from workhub.services.auth.auth_service import AuthService
from workhub.services.file.file_service import FileService
from workhub.services.submission.download_service import DownloadService
from workhub.services.submission.submission_repository import MemorySubmissionRepository, SubmissionRepository
from workhub.services.submission.submission_service import SubmissionService

logger = logging.getLogger(__name__)

memory_repository = MemorySubmissionRepository()

def get_app_settings() -> Settings:
    return settings

def get_file_service(app_settings: Settings = Depends(get_app_settings)) -> FileService:
    return FileService(app_settings.UPLOAD_DIR, app_settings.MAX_FILE_SIZE_BYTES)

async def get_submission_repository(
    app_settings: Settings = Depends(get_app_settings)
) -> AsyncGenerator:
    """RECORD_STORE 설정에 따른 제출물 저장소"""
    if app_settings.RECORD_STORE == "memory":
        yield memory_repository
        return
    async with async_session_maker() as session:
        yield SubmissionRepository(session)

def get_submission_service(
    repository=Depends(get_submission_repository),
    file_service: FileService = Depends(get_file_service)
) -> SubmissionService:
    return SubmissionService(repository, file_service)

def get_download_service(
    repository=Depends(get_submission_repository),
    file_service: FileService = Depends(get_file_service)
) -> DownloadService:
    return DownloadService(repository, file_service)

def get_auth_service(app_settings: Settings = Depends(get_app_settings)) -> AuthService:
    return AuthService(
        admin_password=app_settings.ADMIN_PASSWORD,
        secret_key=app_settings.SECRET_KEY,
        algorithm=app_settings.ALGORITHM,
        expire_minutes=app_settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )

async def init_app(app: FastAPI):
    """앱 초기화"""
    try:
        settings.UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
        if settings.RECORD_STORE == "memory":
            logger.warning("RECORD_STORE=memory; submissions are lost on restart")
        else:
            await init_db()
        if not settings.ADMIN_PASSWORD:
            logger.warning("ADMIN_PASSWORD is not set; admin login is disabled")
        logger.info(f"Upload directory: {settings.UPLOAD_DIR}")
    except Exception as e:
        logger.error(f"App initialization failed: {str(e)}")
        raise
