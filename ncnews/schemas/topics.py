from pydantic import BaseModel, ConfigDict, StrictStr


class TopicIn(BaseModel):
    slug: StrictStr
    description: StrictStr


class TopicOut(BaseModel):
    slug: str
    description: str
    model_config = ConfigDict(from_attributes=True)


class TopicResponse(BaseModel):
    topic: TopicOut


class TopicsResponse(BaseModel):
    topics: list[TopicOut]
