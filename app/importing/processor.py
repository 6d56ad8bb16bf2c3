from typing import Any

import structlog

from app.importing.registry import EntityImporter
from app.importing.resolution import Mutation, resolve
from app.importing.schemas import (
    DuplicateStrategy,
    ProcessingResult,
    RecordAction,
    RecordStatus,
)

logger = structlog.get_logger()


def _error_message(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class RecordProcessor:
    """Runs one record through validate -> duplicate check -> resolve -> mutate.

    Never raises: any failure along the way becomes an ``error`` result so the
    caller can move on to the next record.
    """

    def __init__(self, importer: EntityImporter) -> None:
        self._importer = importer

    async def process(
        self, record: Any, index: int, strategy: DuplicateStrategy
    ) -> ProcessingResult:
        try:
            validation = self._importer.validate(record, index)
            if not validation.is_valid:
                return ProcessingResult(
                    index=index,
                    data=record,
                    status=RecordStatus.invalid,
                    validation_result=validation,
                    action=RecordAction.skipped,
                )

            existing = await self._importer.find_existing(record)
            resolution = resolve(existing, strategy)

            match resolution.mutation:
                case Mutation.insert:
                    await self._importer.insert(record)
                case Mutation.update:
                    await self._importer.update(existing["id"], record)

            return ProcessingResult(
                index=index,
                data=record,
                status=resolution.status,
                validation_result=validation,
                error=f"Duplicate {self._importer.kind} found" if resolution.fatal else None,
                action=resolution.action,
            )
        except Exception as exc:
            logger.warning(
                "import_record_failed",
                kind=self._importer.kind,
                index=index,
                error=_error_message(exc),
            )
            return ProcessingResult(
                index=index,
                data=record,
                status=RecordStatus.error,
                error=_error_message(exc),
            )

    def validate_only(self, record: Any, index: int) -> ProcessingResult:
        try:
            validation = self._importer.validate(record, index)
        except Exception as exc:
            logger.warning(
                "import_record_failed",
                kind=self._importer.kind,
                index=index,
                error=_error_message(exc),
            )
            return ProcessingResult(
                index=index,
                data=record,
                status=RecordStatus.error,
                error=_error_message(exc),
            )

        return ProcessingResult(
            index=index,
            data=record,
            status=RecordStatus.valid if validation.is_valid else RecordStatus.invalid,
            validation_result=validation,
        )
