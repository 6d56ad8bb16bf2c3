from collections.abc import Mapping
from typing import Any

from app.importing.registry import EntityImporter, EntityKind
from app.lectures.repository import LectureRepository
from app.lectures.validator import LectureValidator


class LectureImporter(EntityImporter):
    kind = EntityKind.lecture

    def __init__(self, repo: LectureRepository) -> None:
        self._repo = repo
        self.validator = LectureValidator()

    async def find_existing(self, record: Mapping[str, Any]) -> dict | None:
        if not record.get("content"):
            return None
        return await self._repo.get_by_content(record["content"])

    async def insert(self, record: Mapping[str, Any]) -> str:
        return await self._repo.insert(record)

    async def update(self, record_id: str, record: Mapping[str, Any]) -> None:
        await self._repo.update(record_id, record)
