from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MIN_BATCH_SIZE = 1
MAX_BATCH_SIZE = 100
DEFAULT_BATCH_SIZE = 10


class DuplicateStrategy(StrEnum):
    skip = "skip"
    overwrite = "overwrite"
    error = "error"
    merge = "merge"


class RecordStatus(StrEnum):
    valid = "valid"
    invalid = "invalid"
    duplicate = "duplicate"
    error = "error"


class RecordAction(StrEnum):
    inserted = "inserted"
    updated = "updated"
    merged = "merged"
    skipped = "skipped"


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImportConfig(_WireModel):
    model_config = ConfigDict(frozen=True)

    duplicate_strategy: DuplicateStrategy = DuplicateStrategy.skip
    validate_only: bool = False
    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, ge=MIN_BATCH_SIZE, le=MAX_BATCH_SIZE)


class ValidationResult(_WireModel):
    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ProcessingResult(_WireModel):
    index: int
    data: Any = None
    status: RecordStatus
    validation_result: ValidationResult | None = None
    error: str | None = None
    action: RecordAction | None = None


class BatchResult(_WireModel):
    batch_index: int
    processed: int = 0
    valid: int = 0
    invalid: int = 0
    duplicates: int = 0
    errors: int = 0
    duplicate_errors: int = 0
    inserted: int = 0
    updated: int = 0
    skipped: int = 0
    results: list[ProcessingResult] = Field(default_factory=list)


class ImportSummary(_WireModel):
    success: bool
    message: str
    duration: int


class ImportResult(_WireModel):
    total_items: int
    total_batches: int
    total_valid: int
    total_invalid: int
    total_duplicates: int
    total_errors: int
    total_duplicate_errors: int
    total_inserted: int
    total_updated: int
    total_skipped: int
    batches: list[BatchResult]
    summary: ImportSummary

    @property
    def results(self) -> list[ProcessingResult]:
        return [result for batch in self.batches for result in batch.results]


class ValidationReport(_WireModel):
    total_items: int
    valid: int
    invalid: int
    validation_results: list[ProcessingResult]
