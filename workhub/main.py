from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi.middleware import SlowAPIMiddleware
from contextlib import asynccontextmanager
import logging

from workhub.core.config import settings
from workhub.core.errors import register_exception_handlers
from workhub.core.rate_limit import limiter
from workhub.dependencies import init_app
from workhub.routers import auth_router, submission_router

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작/종료 시 실행되는 이벤트 핸들러"""
    try:
        await init_app(app)
        logger.info("Application startup completed")
        yield
    finally:
        logger.info("Application shutdown")

# FastAPI 앱 설정
app = FastAPI(
    title="Workhub API",
    description="Student work submission API",
    version="1.0.0",
    lifespan=lifespan
)

# 요청 제한 설정
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# 라우터 초기화 함수 정의
def init_routers(app: FastAPI):
    """라우터 초기화"""
    app.include_router(auth_router)
    app.include_router(submission_router)

    if settings.SERVE_UPLOADS:
        app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# 라우터 초기화 함수 호출
init_routers(app)

# 헬스체크 엔드포인트
@app.get("/health")
@limiter.exempt
async def health_check():
    return {"status": "healthy"}
