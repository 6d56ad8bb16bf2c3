from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.expressions.models import ExpressionType
from app.words.models import Difficulty


class SpanishExpression(BaseModel):
    expression: str | None = Field(default=None, max_length=200)
    definition: str | None = Field(default=None, max_length=1000)


class ExpressionCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    expression: str = Field(min_length=1, max_length=200)
    language: str = Field(min_length=1)
    definition: str = Field(default="", max_length=1000)
    difficulty: Difficulty = Difficulty.hard
    type: list[ExpressionType] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
    context: str | None = Field(default=None, max_length=500)
    img: str | None = None
    spanish: SpanishExpression | None = None


class ExpressionResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    expression: str
    language: str
    definition: str
    difficulty: str
    type: list[str]
    examples: list[str]
    context: str | None
    img: str | None
    spanish: dict | None
    created_at: str
    updated_at: str
