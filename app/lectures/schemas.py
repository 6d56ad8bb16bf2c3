from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.lectures.models import Level


class LectureCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: str = Field(min_length=1)
    level: Level
    language: str = Field(min_length=1)
    type_write: str = Field(min_length=1)
    time: int = Field(default=0, ge=0)
    url_audio: str = ""
    img: str = ""


class LectureResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    content: str
    level: str
    language: str
    type_write: str
    time: int
    url_audio: str
    img: str
    created_at: str
    updated_at: str
