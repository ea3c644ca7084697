"""Recreate the schema and load a data bundle.

    APP_ENV=development python -m ncnews.db.seed
"""
import asyncio
import logging
from types import ModuleType

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine

from ncnews.core.database import Base
from ncnews.core.settings import CONFIG
from ncnews.models.articles import Article, Comment
from ncnews.models.topics import Topic
from ncnews.models.users import User
from ncnews.utils.logger import setup_logging

logger = logging.getLogger(__name__)


async def seed(engine: AsyncEngine, data: ModuleType) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

        await conn.execute(insert(Topic), data.topics)
        await conn.execute(insert(User), data.users)
        # 입력 순서대로 article_id 1..n 이 부여된다.
        for article in data.articles:
            await conn.execute(insert(Article).values(**article))
        await conn.execute(insert(Comment), data.comments)

    logger.info("Seeded %d topics, %d users, %d articles, %d comments",
                len(data.topics), len(data.users), len(data.articles), len(data.comments))


async def main() -> None:
    from ncnews.core.database import ASYNC_ENGINE
    from ncnews.db.data import test_data

    setup_logging(CONFIG.LOG_LEVEL)
    try:
        await seed(ASYNC_ENGINE, test_data)
    finally:
        await ASYNC_ENGINE.dispose()


if __name__ == "__main__":
    asyncio.run(main())
