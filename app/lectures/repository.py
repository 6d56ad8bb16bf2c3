from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

import aiosqlite
import structlog

logger = structlog.get_logger()

_COLUMNS = ("content", "level", "language", "type_write", "time", "url_audio", "img")


def _columns(record: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "content": record["content"],
        "level": record["level"],
        "language": record["language"],
        "type_write": record["typeWrite"],
        "time": int(record.get("time") or 0),
        "url_audio": record.get("urlAudio") or "",
        "img": record.get("img") or "",
    }


class LectureRepository:
    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def get_by_id(self, lecture_id: str) -> dict | None:
        cursor = await self._db.execute("SELECT * FROM lectures WHERE id = ?", (lecture_id,))
        row = await cursor.fetchone()
        if row is None:
            return None
        return dict(row)

    async def get_by_content(self, content: str) -> dict | None:
        cursor = await self._db.execute(
            "SELECT * FROM lectures WHERE content = ? LIMIT 1",
            (content,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return dict(row)

    async def list_all(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        if limit is None:
            cursor = await self._db.execute("SELECT * FROM lectures ORDER BY created_at DESC")
        else:
            cursor = await self._db.execute(
                "SELECT * FROM lectures ORDER BY created_at DESC LIMIT ? OFFSET ?",
                (limit, offset),
            )
        rows = await cursor.fetchall()
        return [dict(row) for row in rows]

    async def count(self) -> int:
        cursor = await self._db.execute("SELECT COUNT(*) AS total FROM lectures")
        row = await cursor.fetchone()
        return row["total"] if row else 0

    async def insert(self, record: Mapping[str, Any]) -> str:
        lecture_id = str(uuid4())
        now = datetime.now(UTC).isoformat()
        values = _columns(record)

        await self._db.execute(
            f"""
            INSERT INTO lectures (id, {', '.join(_COLUMNS)}, created_at, updated_at)
            VALUES (?, {', '.join('?' for _ in _COLUMNS)}, ?, ?)
            """,
            (lecture_id, *(values[column] for column in _COLUMNS), now, now),
        )
        await self._db.commit()

        logger.info("lecture_inserted", lecture_id=lecture_id, level=values["level"])
        return lecture_id

    async def update(self, lecture_id: str, record: Mapping[str, Any]) -> None:
        now = datetime.now(UTC).isoformat()
        values = _columns(record)

        await self._db.execute(
            f"""
            UPDATE lectures
            SET {', '.join(f'{column} = ?' for column in _COLUMNS)}, updated_at = ?
            WHERE id = ?
            """,
            (*(values[column] for column in _COLUMNS), now, lecture_id),
        )
        await self._db.commit()

        logger.info("lecture_updated", lecture_id=lecture_id)
