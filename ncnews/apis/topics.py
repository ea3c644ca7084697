from fastapi import APIRouter, Depends, status

from ncnews.schemas import topics as schema_topic
from ncnews.services.topic_service import TopicService, get_topic_service

router = APIRouter()
' prefix="/api/topics"'


@router.get("", response_model=schema_topic.TopicsResponse)
async def get_topics(topic_service: TopicService = Depends(get_topic_service)):
    topics = await topic_service.get_topics()
    return {"topics": topics}


@router.post("",
             response_model=schema_topic.TopicResponse,
             status_code=status.HTTP_201_CREATED,
             responses={400: {
                 "description": "Bad Request",
                 "content": {"application/json": {"example": {"msg": "Bad request"}}}
             }})
async def post_topic(topic_in: schema_topic.TopicIn,
                     topic_service: TopicService = Depends(get_topic_service)):
    topic = await topic_service.create_topic(topic_in)
    return {"topic": topic}
