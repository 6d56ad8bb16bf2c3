from datetime import UTC, datetime

import structlog

from app.exceptions import ConflictError, NotFoundError
from app.expressions.repository import ExpressionRepository
from app.expressions.schemas import ExpressionCreate, ExpressionResponse

logger = structlog.get_logger()


class ExpressionService:
    def __init__(self, repo: ExpressionRepository) -> None:
        self._repo = repo

    async def create(self, data: ExpressionCreate) -> ExpressionResponse:
        if await self._repo.get_by_expression(data.expression):
            raise ConflictError(f"Expression '{data.expression}' already exists")

        expression_id = await self._repo.insert(data.model_dump(by_alias=True, mode="json"))
        row = await self._repo.get_by_id(expression_id)
        if row is None:
            raise NotFoundError("Expression", expression_id)

        logger.info("expression_created", expression_id=expression_id)
        return self._to_response(row)

    async def get_by_id(self, expression_id: str) -> ExpressionResponse:
        row = await self._repo.get_by_id(expression_id)
        if row is None:
            raise NotFoundError("Expression", expression_id)
        return self._to_response(row)

    async def list_expressions(
        self, limit: int = 50, offset: int = 0
    ) -> list[ExpressionResponse]:
        rows = await self._repo.list_all(limit=limit, offset=offset)
        return [self._to_response(row) for row in rows]

    async def export(self) -> dict:
        rows = await self._repo.list_all()
        records = [
            self._to_response(row).model_dump(by_alias=True, exclude_none=True) for row in rows
        ]
        logger.info("expressions_exported", total=len(records))
        return {
            "data": {
                "totalExpressions": len(records),
                "exportDate": datetime.now(UTC).isoformat(),
                "records": records,
            }
        }

    def _to_response(self, row: dict) -> ExpressionResponse:
        return ExpressionResponse(
            id=row["id"],
            expression=row["expression"],
            language=row["language"],
            definition=row["definition"],
            difficulty=row["difficulty"],
            type=row["type"],
            examples=row["examples"],
            context=row["context"],
            img=row["img"],
            spanish=row["spanish"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
