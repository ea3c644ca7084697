import logging
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from ncnews.core.settings import CONFIG

logger = logging.getLogger(__name__)

DATABASE_URL = CONFIG.database_url


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # 인메모리 SQLite는 하나의 커넥션을 공유해야 테이블이 유지된다.
        return {"poolclass": StaticPool,
                "connect_args": {"check_same_thread": False}}
    return {"pool_size": 10, "max_overflow": 0, "pool_recycle": 300}  # 5분마다 연결 재활용


ASYNC_ENGINE = create_async_engine(DATABASE_URL,
                                   echo=CONFIG.DEBUG and CONFIG.APP_ENV != "test",
                                   future=True,
                                   **_engine_options(DATABASE_URL))

if DATABASE_URL.startswith("sqlite"):
    @event.listens_for(ASYNC_ENGINE.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite는 커넥션마다 FK 제약(ON DELETE CASCADE 포함)을 켜야 한다.
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

AsyncSessionLocal = async_sessionmaker(
    ASYNC_ENGINE,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

Base = declarative_base()  # Base 클래스 (모든 모델이 상속)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    session: AsyncSession = AsyncSessionLocal()
    try:
        yield session
    except Exception as e:
        logger.debug("Session rollback triggered due to exception: %r", e)
        await session.rollback()
        raise
    finally:
        await session.close()


# INTEGER 컬럼(id, votes)과 LIMIT/OFFSET(BIGINT)이 받을 수 있는 최대값
MAX_INT = 2 ** 31 - 1
MAX_BIGINT = 2 ** 63 - 1
