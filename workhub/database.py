from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from workhub.core.config import Settings, settings
import logging

logger = logging.getLogger(__name__)

def build_engine(app_settings: Settings) -> AsyncEngine:
    """설정값으로 비동기 엔진 생성 (연결은 첫 쿼리 때)"""
    return create_async_engine(
        app_settings.DATABASE_URL,
        pool_size=app_settings.DATABASE_POOL_SIZE,
        max_overflow=app_settings.DATABASE_MAX_OVERFLOW,
        pool_pre_ping=True,
        pool_recycle=1800,
        echo=app_settings.DATABASE_ECHO
    )

engine = build_engine(settings)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)

Base = declarative_base()

async def init_db():
    """submissions 테이블 생성"""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"테이블 준비 완료: {', '.join(Base.metadata.tables)}")
    except Exception as e:
        logger.error(f"데이터베이스 초기화 중 오류: {str(e)}")
        raise
