from fastapi import UploadFile
import aiofiles
import aiofiles.os
import os
import logging
from pathlib import Path
from typing import AsyncIterator
from workhub.core.errors import FileTooLargeError
from workhub.services.file.content_sniffer import HEADER_SIZE

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

class FileService:
    """업로드 루트 디렉토리 파일 입출력"""

    def __init__(self, upload_dir: Path, max_file_size: int):
        self.upload_dir = Path(upload_dir)
        self.max_file_size = max_file_size

    async def ensure_upload_dir(self) -> Path:
        # 이미 있으면 성공 (동시 요청)
        await aiofiles.os.makedirs(self.upload_dir, exist_ok=True)
        return self.upload_dir

    def resolve(self, stored_file_name: str) -> Path:
        """저장 파일명 -> 전체 경로 (하위 디렉토리 없음)"""
        return self.upload_dir / os.path.basename(stored_file_name)

    async def stage_upload(self, file: UploadFile, stored_file_name: str) -> int:
        """업로드 파일을 저장하고 바이트 수 반환"""
        await self.ensure_upload_dir()
        file_path = self.resolve(stored_file_name)
        size = 0
        try:
            async with aiofiles.open(file_path, "wb") as out:
                while True:
                    chunk = await file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_file_size:
                        raise FileTooLargeError()
                    await out.write(chunk)
        except Exception:
            await self.delete_file(stored_file_name)
            raise

        logger.info(f"파일 저장 완료: {stored_file_name} ({size} bytes)")
        return size

    async def read_header(self, stored_file_name: str, size: int = HEADER_SIZE) -> bytes:
        async with aiofiles.open(self.resolve(stored_file_name), "rb") as f:
            return await f.read(size)

    async def delete_file(self, stored_file_name: str) -> bool:
        """파일 삭제 (실패해도 예외를 올리지 않음)"""
        full_path = self.resolve(stored_file_name)
        try:
            await aiofiles.os.remove(full_path)
            logger.info(f"File deleted: {full_path}")
            return True
        except FileNotFoundError:
            logger.warning(f"File not found: {full_path}")
            return False
        except OSError as e:
            logger.warning(f"Error deleting file {full_path}: {str(e)}")
            return False

    async def exists(self, stored_file_name: str) -> bool:
        return await aiofiles.os.path.isfile(self.resolve(stored_file_name))

    async def open_stream(self, stored_file_name: str) -> AsyncIterator[bytes]:
        """파일을 열고 청크 단위로 읽는 이터레이터 반환"""
        handle = await aiofiles.open(self.resolve(stored_file_name), "rb")

        async def iterate() -> AsyncIterator[bytes]:
            try:
                while True:
                    chunk = await handle.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    yield chunk
            finally:
                await handle.close()

        return iterate()
