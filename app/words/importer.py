from collections.abc import Mapping
from typing import Any

from app.importing.registry import EntityImporter, EntityKind
from app.words.repository import WordRepository
from app.words.validator import WordValidator


class WordImporter(EntityImporter):
    kind = EntityKind.word

    def __init__(self, repo: WordRepository) -> None:
        self._repo = repo
        self.validator = WordValidator()

    async def find_existing(self, record: Mapping[str, Any]) -> dict | None:
        if not record.get("word"):
            return None
        return await self._repo.get_by_word(record["word"])

    async def insert(self, record: Mapping[str, Any]) -> str:
        return await self._repo.insert(record)

    async def update(self, record_id: str, record: Mapping[str, Any]) -> None:
        await self._repo.update(record_id, record)
