import json
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

import aiosqlite
import structlog

logger = structlog.get_logger()

_COLUMNS = (
    "expression",
    "language",
    "definition",
    "difficulty",
    "type",
    "examples",
    "context",
    "img",
    "spanish",
)


def _columns(record: Mapping[str, Any]) -> dict[str, Any]:
    spanish = record.get("spanish")
    return {
        "expression": record["expression"],
        "language": record["language"],
        "definition": record.get("definition") or "",
        "difficulty": record.get("difficulty") or "hard",
        "type": json.dumps(list(record.get("type") or [])),
        "examples": json.dumps(list(record.get("examples") or [])),
        "context": record.get("context"),
        "img": record.get("img"),
        "spanish": json.dumps(dict(spanish)) if spanish else None,
    }


def _decode(row: aiosqlite.Row) -> dict:
    data = dict(row)
    data["type"] = json.loads(data["type"])
    data["examples"] = json.loads(data["examples"])
    data["spanish"] = json.loads(data["spanish"]) if data["spanish"] else None
    return data


class ExpressionRepository:
    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def get_by_id(self, expression_id: str) -> dict | None:
        cursor = await self._db.execute(
            "SELECT * FROM expressions WHERE id = ?", (expression_id,)
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return _decode(row)

    async def get_by_expression(self, expression: str) -> dict | None:
        cursor = await self._db.execute(
            "SELECT * FROM expressions WHERE expression = ?", (expression,)
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return _decode(row)

    async def list_all(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        if limit is None:
            cursor = await self._db.execute("SELECT * FROM expressions ORDER BY created_at DESC")
        else:
            cursor = await self._db.execute(
                "SELECT * FROM expressions ORDER BY created_at DESC LIMIT ? OFFSET ?",
                (limit, offset),
            )
        rows = await cursor.fetchall()
        return [_decode(row) for row in rows]

    async def count(self) -> int:
        cursor = await self._db.execute("SELECT COUNT(*) AS total FROM expressions")
        row = await cursor.fetchone()
        return row["total"] if row else 0

    async def insert(self, record: Mapping[str, Any]) -> str:
        expression_id = str(uuid4())
        now = datetime.now(UTC).isoformat()
        values = _columns(record)

        await self._db.execute(
            f"""
            INSERT INTO expressions (id, {', '.join(_COLUMNS)}, created_at, updated_at)
            VALUES (?, {', '.join('?' for _ in _COLUMNS)}, ?, ?)
            """,
            (expression_id, *(values[column] for column in _COLUMNS), now, now),
        )
        await self._db.commit()

        logger.info(
            "expression_inserted",
            expression_id=expression_id,
            expression=values["expression"],
        )
        return expression_id

    async def update(self, expression_id: str, record: Mapping[str, Any]) -> None:
        now = datetime.now(UTC).isoformat()
        values = _columns(record)

        await self._db.execute(
            f"""
            UPDATE expressions
            SET {', '.join(f'{column} = ?' for column in _COLUMNS)}, updated_at = ?
            WHERE id = ?
            """,
            (*(values[column] for column in _COLUMNS), now, expression_id),
        )
        await self._db.commit()

        logger.info("expression_updated", expression_id=expression_id)
