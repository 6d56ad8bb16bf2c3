import os

os.environ.setdefault("LC_AUTH_PASSWORD", "test-password")
os.environ.setdefault("LC_JWT_SECRET", "test-secret-that-is-at-least-32-characters")
os.environ.setdefault("LC_DB_PATH", ":memory:")
os.environ.setdefault("LC_LOG_LEVEL", "WARNING")

import aiosqlite  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from app.database import create_schema  # noqa: E402
from app.expressions.importer import ExpressionImporter  # noqa: E402
from app.expressions.repository import ExpressionRepository  # noqa: E402
from app.lectures.importer import LectureImporter  # noqa: E402
from app.lectures.repository import LectureRepository  # noqa: E402
from app.words.importer import WordImporter  # noqa: E402
from app.words.repository import WordRepository  # noqa: E402


@pytest_asyncio.fixture
async def db():
    conn = await aiosqlite.connect(":memory:")
    conn.row_factory = aiosqlite.Row
    await create_schema(conn)
    try:
        yield conn
    finally:
        await conn.close()


@pytest.fixture
def word_repo(db) -> WordRepository:
    return WordRepository(db)


@pytest.fixture
def lecture_repo(db) -> LectureRepository:
    return LectureRepository(db)


@pytest.fixture
def expression_repo(db) -> ExpressionRepository:
    return ExpressionRepository(db)


@pytest.fixture
def word_importer(word_repo) -> WordImporter:
    return WordImporter(word_repo)


@pytest.fixture
def lecture_importer(lecture_repo) -> LectureImporter:
    return LectureImporter(lecture_repo)


@pytest.fixture
def expression_importer(expression_repo) -> ExpressionImporter:
    return ExpressionImporter(expression_repo)


@pytest.fixture
def make_word():
    def factory(word: str = "cat", **overrides) -> dict:
        record = {
            "word": word,
            "language": "en",
            "difficulty": "easy",
            "type": ["noun"],
            "definition": f"Definition of {word}",
        }
        record.update(overrides)
        return record

    return factory


@pytest.fixture
def make_lecture():
    def factory(content: str = "Once upon a time...", **overrides) -> dict:
        record = {
            "content": content,
            "level": "B1",
            "language": "en",
            "typeWrite": "story",
            "time": 5,
        }
        record.update(overrides)
        return record

    return factory


@pytest.fixture
def make_expression():
    def factory(expression: str = "break the ice", **overrides) -> dict:
        record = {
            "expression": expression,
            "language": "en",
            "definition": "To start a conversation",
            "type": ["idiom"],
        }
        record.update(overrides)
        return record

    return factory
