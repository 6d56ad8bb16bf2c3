from datetime import UTC, datetime

import structlog

from app.exceptions import ConflictError, NotFoundError
from app.words.repository import WordRepository
from app.words.schemas import WordCreate, WordResponse

logger = structlog.get_logger()


class WordService:
    def __init__(self, repo: WordRepository) -> None:
        self._repo = repo

    async def create(self, data: WordCreate) -> WordResponse:
        if await self._repo.get_by_word(data.word):
            raise ConflictError(f"Word '{data.word}' already exists")

        word_id = await self._repo.insert(data.model_dump(by_alias=True, mode="json"))
        row = await self._repo.get_by_id(word_id)
        if row is None:
            raise NotFoundError("Word", word_id)

        logger.info("word_created", word_id=word_id)
        return self._to_response(row)

    async def get_by_id(self, word_id: str) -> WordResponse:
        row = await self._repo.get_by_id(word_id)
        if row is None:
            raise NotFoundError("Word", word_id)
        return self._to_response(row)

    async def list_words(self, limit: int = 50, offset: int = 0) -> list[WordResponse]:
        rows = await self._repo.list_all(limit=limit, offset=offset)
        return [self._to_response(row) for row in rows]

    async def export(self) -> dict:
        rows = await self._repo.list_all()
        records = [
            self._to_response(row).model_dump(by_alias=True, exclude_none=True) for row in rows
        ]
        logger.info("words_exported", total=len(records))
        return {
            "data": {
                "totalWords": len(records),
                "exportDate": datetime.now(UTC).isoformat(),
                "records": records,
            }
        }

    def _to_response(self, row: dict) -> WordResponse:
        return WordResponse(
            id=row["id"],
            word=row["word"],
            language=row["language"],
            difficulty=row["difficulty"],
            type=row["type"],
            definition=row["definition"],
            examples=row["examples"],
            sinonyms=row["sinonyms"],
            code_switching=row["code_switching"],
            ipa=row["ipa"],
            img=row["img"],
            seen=row["seen"],
            spanish=row["spanish"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
