import aiohttp
import asyncio
import argparse
import json
import logging
import os
from typing import Any, Dict, Optional

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ZIP_BYTES = b"PK\x03\x04dummy"
PNG_BYTES = b"\x89PNG\r\n\x1a\ndummy"


class SubmissionAPITester:
    """실행 중인 서버를 대상으로 하는 수동 점검 도구"""

    def __init__(self, base_url: str = "http://localhost:8000"):
        self.base_url = base_url.rstrip('/')
        self.token: Optional[str] = None

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    async def login(self, password: str) -> Dict[str, Any]:
        """관리자 로그인"""
        url = f"{self.base_url}/auth/login"
        async with aiohttp.ClientSession() as session:
            async with session.post(url, json={"password": password}) as response:
                body = await response.json()
                if response.status == 200:
                    self.token = body["access_token"]
                return body

    async def submit_work(
        self,
        student_name: str,
        grade: int,
        class_number: int,
        category: str,
        work_title: str,
        filename: str,
        content: bytes
    ) -> Dict[str, Any]:
        """작품 제출"""
        url = f"{self.base_url}/submissions"
        data = aiohttp.FormData()
        data.add_field('studentName', student_name)
        data.add_field('grade', str(grade))
        data.add_field('classNumber', str(class_number))
        data.add_field('category', category)
        data.add_field('workTitle', work_title)
        data.add_field('file', content, filename=filename, content_type='application/octet-stream')

        async with aiohttp.ClientSession() as session:
            async with session.post(url, data=data) as response:
                return {"status": response.status, "body": await response.json()}

    async def check_quota(self, student_name: str) -> Dict[str, Any]:
        url = f"{self.base_url}/submissions/check"
        async with aiohttp.ClientSession() as session:
            async with session.get(url, params={"studentName": student_name}) as response:
                return {"status": response.status, "body": await response.json()}

    async def list_final(self) -> Dict[str, Any]:
        url = f"{self.base_url}/submissions/final"
        async with aiohttp.ClientSession() as session:
            async with session.get(url, headers=self._auth_headers()) as response:
                return {"status": response.status, "body": await response.json()}

    async def download(self, submission_id: str) -> Dict[str, Any]:
        """제출 파일 다운로드"""
        url = f"{self.base_url}/submissions/{submission_id}/download"
        async with aiohttp.ClientSession() as session:
            async with session.get(url, headers=self._auth_headers()) as response:
                content = await response.read()
                return {
                    "status": response.status,
                    "disposition": response.headers.get("Content-Disposition"),
                    "size": len(content)
                }


async def main(base_url: str, password: str):
    tester = SubmissionAPITester(base_url)

    print("\n=== 제출 점검 시작 ===\n")
    created = await tester.submit_work("Alice", 3, 2, "PROGRAMMING", "Smoke Test", "project.sb3", ZIP_BYTES)
    print(f"PROGRAMMING 제출: {created['status']}")

    rejected = await tester.submit_work("Alice", 3, 2, "PROGRAMMING", "Smoke Test", "project.sb3", PNG_BYTES)
    print(f"잘못된 파일 제출: {rejected['status']} {rejected['body'].get('message')}")

    quota = await tester.check_quota("Alice")
    print(f"당일 제출 확인: {json.dumps(quota['body'])}")

    login = await tester.login(password)
    if not tester.token:
        print(f"❌ 로그인 실패: {login}")
        return

    final = await tester.list_final()
    print(f"최종 제출물: {len(final['body'])}건")

    if created["status"] == 201:
        result = await tester.download(created["body"]["id"])
        print(f"다운로드: {result}")

    print("\n=== 제출 점검 완료 ===\n")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Workhub API smoke check")
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--password", default=os.getenv("ADMIN_PASSWORD", ""))
    args = parser.parse_args()
    try:
        asyncio.run(main(args.base_url, args.password))
    except KeyboardInterrupt:
        print("\n점검이 사용자에 의해 중단되었습니다.")
    except aiohttp.ClientError as e:
        print(f"점검이 오류로 인해 중단되었습니다: {e}")
