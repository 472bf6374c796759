import uvicorn
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()

if __name__ == "__main__":
    from workhub.core.config import settings

    uvicorn.run(
        "workhub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,  # 개발 환경에서 자동 리로드 활성화
        reload_dirs=["workhub"] if settings.DEBUG else None
    )
