from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.words.models import Difficulty, WordType


class SpanishWord(BaseModel):
    word: str | None = Field(default=None, max_length=100)
    definition: str | None = Field(default=None, max_length=1000)


class WordCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    word: str = Field(min_length=1, max_length=100)
    language: str = Field(min_length=1)
    difficulty: Difficulty = Difficulty.hard
    type: list[WordType] = Field(min_length=1)
    definition: str = Field(default="", max_length=1000)
    examples: list[str] = Field(default_factory=list)
    sinonyms: list[str] = Field(default_factory=list)
    code_switching: list[str] = Field(default_factory=list)
    ipa: str | None = Field(default=None, alias="IPA")
    img: str | None = None
    seen: int = Field(default=0, ge=0)
    spanish: SpanishWord | None = None


class WordResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    word: str
    language: str
    difficulty: str
    type: list[str]
    definition: str
    examples: list[str]
    sinonyms: list[str]
    code_switching: list[str]
    ipa: str | None = Field(default=None, alias="IPA")
    img: str | None
    seen: int
    spanish: dict | None
    created_at: str
    updated_at: str
