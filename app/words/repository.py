import json
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

import aiosqlite
import structlog

logger = structlog.get_logger()

_COLUMNS = (
    "word",
    "language",
    "definition",
    "difficulty",
    "type",
    "examples",
    "sinonyms",
    "code_switching",
    "ipa",
    "img",
    "seen",
    "spanish",
)


def _columns(record: Mapping[str, Any]) -> dict[str, Any]:
    """Map a camelCase word record onto column values, defaulting absent fields."""
    spanish = record.get("spanish")
    return {
        "word": record["word"],
        "language": record["language"],
        "definition": record.get("definition") or "",
        "difficulty": record.get("difficulty") or "hard",
        "type": json.dumps(list(record.get("type") or [])),
        "examples": json.dumps(list(record.get("examples") or [])),
        "sinonyms": json.dumps(list(record.get("sinonyms") or [])),
        "code_switching": json.dumps(list(record.get("codeSwitching") or [])),
        "ipa": record.get("IPA"),
        "img": record.get("img"),
        "seen": int(record.get("seen") or 0),
        "spanish": json.dumps(dict(spanish)) if spanish else None,
    }


def _decode(row: aiosqlite.Row) -> dict:
    data = dict(row)
    for field in ("type", "examples", "sinonyms", "code_switching"):
        data[field] = json.loads(data[field])
    data["spanish"] = json.loads(data["spanish"]) if data["spanish"] else None
    return data


class WordRepository:
    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def get_by_id(self, word_id: str) -> dict | None:
        cursor = await self._db.execute("SELECT * FROM words WHERE id = ?", (word_id,))
        row = await cursor.fetchone()
        if row is None:
            return None
        return _decode(row)

    async def get_by_word(self, word: str) -> dict | None:
        cursor = await self._db.execute("SELECT * FROM words WHERE word = ?", (word,))
        row = await cursor.fetchone()
        if row is None:
            return None
        return _decode(row)

    async def list_all(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        if limit is None:
            cursor = await self._db.execute("SELECT * FROM words ORDER BY created_at DESC")
        else:
            cursor = await self._db.execute(
                "SELECT * FROM words ORDER BY created_at DESC LIMIT ? OFFSET ?",
                (limit, offset),
            )
        rows = await cursor.fetchall()
        return [_decode(row) for row in rows]

    async def count(self) -> int:
        cursor = await self._db.execute("SELECT COUNT(*) AS total FROM words")
        row = await cursor.fetchone()
        return row["total"] if row else 0

    async def insert(self, record: Mapping[str, Any]) -> str:
        word_id = str(uuid4())
        now = datetime.now(UTC).isoformat()
        values = _columns(record)

        await self._db.execute(
            f"""
            INSERT INTO words (id, {', '.join(_COLUMNS)}, created_at, updated_at)
            VALUES (?, {', '.join('?' for _ in _COLUMNS)}, ?, ?)
            """,
            (word_id, *(values[column] for column in _COLUMNS), now, now),
        )
        await self._db.commit()

        logger.info("word_inserted", word_id=word_id, word=values["word"])
        return word_id

    async def update(self, word_id: str, record: Mapping[str, Any]) -> None:
        """Replace every stored field of the word with the given record."""
        now = datetime.now(UTC).isoformat()
        values = _columns(record)

        await self._db.execute(
            f"""
            UPDATE words
            SET {', '.join(f'{column} = ?' for column in _COLUMNS)}, updated_at = ?
            WHERE id = ?
            """,
            (*(values[column] for column in _COLUMNS), now, word_id),
        )
        await self._db.commit()

        logger.info("word_updated", word_id=word_id, word=values["word"])
