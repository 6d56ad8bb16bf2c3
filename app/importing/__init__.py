from app.importing.orchestrator import BatchOrchestrator
from app.importing.processor import RecordProcessor
from app.importing.registry import EntityImporter, EntityKind, ImporterRegistry
from app.importing.schemas import (
    BatchResult,
    DuplicateStrategy,
    ImportConfig,
    ImportResult,
    ProcessingResult,
    ValidationReport,
    ValidationResult,
)
from app.importing.service import ImportService

__all__ = [
    "BatchOrchestrator",
    "BatchResult",
    "DuplicateStrategy",
    "EntityImporter",
    "EntityKind",
    "ImportConfig",
    "ImportResult",
    "ImportService",
    "ImporterRegistry",
    "ProcessingResult",
    "RecordProcessor",
    "ValidationReport",
    "ValidationResult",
]
