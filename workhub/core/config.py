from pydantic_settings import BaseSettings
from typing import List, Literal
from functools import lru_cache
from pathlib import Path

# 기본 디렉토리 설정
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    # 기본 경로 설정
    BASE_DIR: Path = BASE_DIR
    UPLOAD_DIR: Path = BASE_DIR / "uploads"

    # 업로드 제한 (50 MiB)
    MAX_FILE_SIZE_BYTES: int = 50 * 1024 * 1024

    # 보안 설정
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720
    ADMIN_PASSWORD: str = ""

    # 디버그 설정
    DEBUG: bool = False

    # 요청 제한 설정
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "10/minute"
    RATE_LIMIT_SUBMISSIONS: str = "5/minute"

    # 업로드 디렉토리 정적 서빙 여부
    SERVE_UPLOADS: bool = False
    CORS_ORIGINS: List[str] = ["*"]

    # 기록 저장소: postgres 또는 memory (프로세스 메모리, 재시작 시 소멸)
    RECORD_STORE: Literal["postgres", "memory"] = "postgres"

    # Database
    DATABASE_ECHO: bool = False
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 10
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "workhub_user"
    POSTGRES_PASSWORD: str = "workhub_password"
    POSTGRES_DB: str = "workhub_db"
    POSTGRES_PORT: str = "5432"

    @property
    def DATABASE_URL(self) -> str:
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    class Config:
        env_file = ".env"
        case_sensitive = True

@lru_cache()
def get_settings():
    settings = Settings()
    # 업로드 디렉토리 생성
    settings.UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
    return settings

settings = get_settings()
