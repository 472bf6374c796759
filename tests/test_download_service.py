import pytest

from workhub.core.errors import SubmissionNotFoundError
from workhub.services.submission.download_service import DownloadService
from workhub.services.submission.submission_service import SubmissionService
from tests._shared import PNG_BYTES, ZIP_BYTES

pytestmark = pytest.mark.anyio


async def _collect(stream) -> bytes:
    return b"".join([chunk async for chunk in stream])


async def _submit(repository, file_service, upload, **overrides):
    values = dict(student_name="Alice", grade="3", class_number="2", category="PROGRAMMING", work_title="Cat Game")
    values.update(overrides)
    service = SubmissionService(repository, file_service)
    return await service.create_submission(values, upload)


async def test_prepares_stream_name_and_type(repository, file_service, make_upload):
    submission = await _submit(repository, file_service, make_upload(ZIP_BYTES, "cat.sb3", "application/x.scratch.sb3"))

    payload = await DownloadService(repository, file_service).prepare_download(submission.id)

    assert payload.download_name == "3-2-Alice.sb3"
    assert payload.content_type == "application/x.scratch.sb3"
    assert await _collect(payload.stream) == ZIP_BYTES


async def test_falls_back_to_octet_stream(repository, file_service, make_upload):
    submission = await _submit(repository, file_service, make_upload(ZIP_BYTES))
    submission.file_type = None

    payload = await DownloadService(repository, file_service).prepare_download(submission.id)

    assert payload.content_type == "application/octet-stream"
    await _collect(payload.stream)


async def test_extension_falls_back_to_stored_name(repository, file_service, make_upload):
    submission = await _submit(
        repository, file_service, make_upload(PNG_BYTES, "art.png", "image/png"), category="AIGC"
    )
    submission.file_name = "art"

    payload = await DownloadService(repository, file_service).prepare_download(submission.id)

    assert payload.download_name == "3-2-Alice.png"
    await _collect(payload.stream)


async def test_unknown_id_is_not_found(repository, file_service):
    with pytest.raises(SubmissionNotFoundError) as exc_info:
        await DownloadService(repository, file_service).prepare_download("00000000-0000-0000-0000-000000000000")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Submission not found"


async def test_missing_file_looks_like_unknown_id(repository, file_service, upload_dir, make_upload):
    submission = await _submit(repository, file_service, make_upload(ZIP_BYTES))
    (upload_dir / submission.stored_file_name).unlink()

    with pytest.raises(SubmissionNotFoundError) as exc_info:
        await DownloadService(repository, file_service).prepare_download(submission.id)

    assert exc_info.value.message == "Submission not found"
