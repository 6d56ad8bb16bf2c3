from collections.abc import Mapping
from typing import Any

from app.expressions.repository import ExpressionRepository
from app.expressions.validator import ExpressionValidator
from app.importing.registry import EntityImporter, EntityKind


class ExpressionImporter(EntityImporter):
    kind = EntityKind.expression

    def __init__(self, repo: ExpressionRepository) -> None:
        self._repo = repo
        self.validator = ExpressionValidator()

    async def find_existing(self, record: Mapping[str, Any]) -> dict | None:
        if not record.get("expression"):
            return None
        return await self._repo.get_by_expression(record["expression"])

    async def insert(self, record: Mapping[str, Any]) -> str:
        return await self._repo.insert(record)

    async def update(self, record_id: str, record: Mapping[str, Any]) -> None:
        await self._repo.update(record_id, record)
