import logging

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ncnews.core.database import get_db
from ncnews.models.topics import Topic
from ncnews.schemas.topics import TopicIn
from ncnews.utils.exc_handler import translate_db_errors

logger = logging.getLogger(__name__)


class TopicService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_topics(self):
        result = await self.db.execute(select(Topic))
        return result.scalars().all()

    async def create_topic(self, topic_in: TopicIn):
        create_topic = Topic(**topic_in.model_dump())

        # slug 중복(unique) 위반은 400으로 변환
        async with translate_db_errors(self.db):
            self.db.add(create_topic)
            await self.db.commit()
        await self.db.refresh(create_topic)

        logger.info("Created topic %s", create_topic.slug)
        return create_topic


def get_topic_service(db: AsyncSession = Depends(get_db)) -> 'TopicService':
    return TopicService(db)
