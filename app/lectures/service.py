from datetime import UTC, datetime

import structlog

from app.exceptions import ConflictError, NotFoundError
from app.lectures.repository import LectureRepository
from app.lectures.schemas import LectureCreate, LectureResponse

logger = structlog.get_logger()


class LectureService:
    def __init__(self, repo: LectureRepository) -> None:
        self._repo = repo

    async def create(self, data: LectureCreate) -> LectureResponse:
        if await self._repo.get_by_content(data.content):
            raise ConflictError("A lecture with the same content already exists")

        lecture_id = await self._repo.insert(data.model_dump(by_alias=True, mode="json"))
        row = await self._repo.get_by_id(lecture_id)
        if row is None:
            raise NotFoundError("Lecture", lecture_id)

        logger.info("lecture_created", lecture_id=lecture_id)
        return self._to_response(row)

    async def get_by_id(self, lecture_id: str) -> LectureResponse:
        row = await self._repo.get_by_id(lecture_id)
        if row is None:
            raise NotFoundError("Lecture", lecture_id)
        return self._to_response(row)

    async def list_lectures(self, limit: int = 50, offset: int = 0) -> list[LectureResponse]:
        rows = await self._repo.list_all(limit=limit, offset=offset)
        return [self._to_response(row) for row in rows]

    async def export(self) -> dict:
        rows = await self._repo.list_all()
        records = [self._to_response(row).model_dump(by_alias=True) for row in rows]
        logger.info("lectures_exported", total=len(records))
        return {
            "data": {
                "totalLectures": len(records),
                "exportDate": datetime.now(UTC).isoformat(),
                "records": records,
            }
        }

    def _to_response(self, row: dict) -> LectureResponse:
        return LectureResponse(
            id=row["id"],
            content=row["content"],
            level=row["level"],
            language=row["language"],
            type_write=row["type_write"],
            time=row["time"],
            url_audio=row["url_audio"],
            img=row["img"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
