"""
Pytest configuration for the submission service tests.

Settings are read from the environment at import time, so the test values
are exported before anything under ``workhub`` is imported.
"""
import io
import os
import tempfile
from pathlib import Path

import httpx
import pytest
from httpx import ASGITransport
from starlette.datastructures import Headers, UploadFile

os.environ.setdefault("SECRET_KEY", "test-jwt-secret")
os.environ.setdefault("ADMIN_PASSWORD", "test-admin-password")
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="workhub-uploads-")
os.environ["RATE_LIMIT_ENABLED"] = "false"

from workhub.core.config import settings  # noqa: E402
from workhub.dependencies import get_app_settings, get_submission_repository  # noqa: E402
from workhub.main import app  # noqa: E402
from workhub.services.file.file_service import FileService  # noqa: E402
from workhub.services.submission.submission_repository import MemorySubmissionRepository  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    target = tmp_path / "uploads"
    target.mkdir()
    return target


@pytest.fixture
def file_service(upload_dir: Path) -> FileService:
    return FileService(upload_dir, settings.MAX_FILE_SIZE_BYTES)


@pytest.fixture
def repository() -> MemorySubmissionRepository:
    return MemorySubmissionRepository()


@pytest.fixture
def make_upload():
    def _make(content: bytes, filename: str = "project.sb3", content_type: str = "application/octet-stream"):
        return UploadFile(
            file=io.BytesIO(content),
            filename=filename,
            headers=Headers({"content-type": content_type}),
        )
    return _make


@pytest.fixture
def test_settings(upload_dir: Path):
    return settings.model_copy(update={"UPLOAD_DIR": upload_dir})


@pytest.fixture
async def client(repository, test_settings):
    app.dependency_overrides[get_submission_repository] = lambda: repository
    app.dependency_overrides[get_app_settings] = lambda: test_settings
    try:
        async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://local") as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def admin_headers(client: httpx.AsyncClient):
    res = await client.post("/auth/login", json={"password": settings.ADMIN_PASSWORD})
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['access_token']}"}
