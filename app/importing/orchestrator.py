import time
from collections.abc import Sequence
from typing import Any

import structlog

from app.importing.processor import RecordProcessor
from app.importing.registry import EntityImporter
from app.importing.schemas import (
    DEFAULT_BATCH_SIZE,
    BatchResult,
    ImportConfig,
    ImportResult,
    ImportSummary,
    ProcessingResult,
    RecordAction,
    RecordStatus,
    ValidationReport,
)

logger = structlog.get_logger()

_STATUS_COUNTERS = {
    RecordStatus.valid: "valid",
    RecordStatus.invalid: "invalid",
    RecordStatus.duplicate: "duplicates",
    RecordStatus.error: "errors",
}

_ACTION_COUNTERS = {
    RecordAction.inserted: "inserted",
    RecordAction.updated: "updated",
    RecordAction.merged: "updated",
    RecordAction.skipped: "skipped",
}

_BATCH_COUNTERS = (
    "valid",
    "invalid",
    "duplicates",
    "errors",
    "duplicate_errors",
    "inserted",
    "updated",
    "skipped",
)


def _increment(batch: BatchResult, counter: str) -> None:
    setattr(batch, counter, getattr(batch, counter) + 1)


def _tally(batch: BatchResult, result: ProcessingResult) -> None:
    batch.results.append(result)
    _increment(batch, _STATUS_COUNTERS[result.status])
    if result.action is not None:
        _increment(batch, _ACTION_COUNTERS[result.action])
    # A duplicate that carries an error was rejected by the "error" strategy.
    if result.status == RecordStatus.duplicate and result.error is not None:
        _increment(batch, "errors")
        _increment(batch, "duplicate_errors")


class BatchOrchestrator:
    """Drives one import run for a single entity kind.

    Records are processed one at a time, in submission order, so a record sees
    every insert made by the records before it in the same run.
    """

    def __init__(self, importer: EntityImporter) -> None:
        self._importer = importer
        self._processor = RecordProcessor(importer)

    async def run(self, records: Sequence[Any], config: ImportConfig) -> ImportResult:
        started = time.monotonic()
        logger.info(
            "import_started",
            kind=self._importer.kind,
            total_items=len(records),
            strategy=config.duplicate_strategy,
            batch_size=config.batch_size,
            validate_only=config.validate_only,
        )

        batches: list[BatchResult] = []
        for batch_index, offset in enumerate(range(0, len(records), config.batch_size)):
            chunk = records[offset : offset + config.batch_size]
            batch = BatchResult(batch_index=batch_index, processed=len(chunk))

            for position, record in enumerate(chunk, start=offset):
                if config.validate_only:
                    result = self._processor.validate_only(record, position)
                else:
                    result = await self._processor.process(
                        record, position, config.duplicate_strategy
                    )
                _tally(batch, result)

            batches.append(batch)
            logger.debug(
                "import_batch_completed",
                kind=self._importer.kind,
                batch_index=batch_index,
                processed=batch.processed,
                errors=batch.errors,
            )

        duration = int((time.monotonic() - started) * 1000)
        result = self._build_result(len(records), batches, duration, config.validate_only)

        logger.info(
            "import_completed",
            kind=self._importer.kind,
            total_items=result.total_items,
            inserted=result.total_inserted,
            updated=result.total_updated,
            skipped=result.total_skipped,
            errors=result.total_errors,
            duration_ms=duration,
        )
        return result

    async def validate(
        self, records: Sequence[Any], batch_size: int = DEFAULT_BATCH_SIZE
    ) -> ValidationReport:
        result = await self.run(records, ImportConfig(validate_only=True, batch_size=batch_size))
        logger.info(
            "validation_completed",
            kind=self._importer.kind,
            total_items=result.total_items,
            valid=result.total_valid,
            invalid=result.total_invalid,
        )
        return ValidationReport(
            total_items=result.total_items,
            valid=result.total_valid,
            invalid=result.total_invalid,
            validation_results=result.results,
        )

    def _build_result(
        self,
        total_items: int,
        batches: list[BatchResult],
        duration: int,
        validate_only: bool,
    ) -> ImportResult:
        totals = {
            counter: sum(getattr(batch, counter) for batch in batches)
            for counter in _BATCH_COUNTERS
        }

        if validate_only:
            message = (
                f"Validation completed. {totals['valid']} valid, "
                f"{totals['invalid']} invalid, {totals['errors']} errors"
            )
        else:
            message = (
                f"Import completed. {totals['inserted']} inserted, "
                f"{totals['updated']} updated, {totals['skipped']} skipped, "
                f"{totals['errors']} errors"
            )

        return ImportResult(
            total_items=total_items,
            total_batches=len(batches),
            total_valid=totals["valid"],
            total_invalid=totals["invalid"],
            total_duplicates=totals["duplicates"],
            total_errors=totals["errors"],
            total_duplicate_errors=totals["duplicate_errors"],
            total_inserted=totals["inserted"],
            total_updated=totals["updated"],
            total_skipped=totals["skipped"],
            batches=batches,
            summary=ImportSummary(
                success=totals["errors"] == 0,
                message=message,
                duration=duration,
            ),
        )
