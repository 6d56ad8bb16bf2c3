import structlog

from app.importing.orchestrator import BatchOrchestrator
from app.importing.payload import decode_document, extract_records
from app.importing.registry import EntityKind, ImporterRegistry
from app.importing.schemas import ImportConfig, ImportResult, ValidationReport

logger = structlog.get_logger()


class ImportService:
    def __init__(self, registry: ImporterRegistry) -> None:
        self._registry = registry

    async def import_file(
        self,
        kind: EntityKind,
        file_content: bytes,
        config: ImportConfig,
        filename: str = "upload.json",
    ) -> ImportResult | ValidationReport:
        """Import (or just validate) the records of an uploaded JSON document."""
        records = extract_records(decode_document(file_content))
        logger.info(
            "import_file_received",
            kind=kind,
            filename=filename,
            records=len(records),
            validate_only=config.validate_only,
        )
        return await self.import_records(kind, records, config)

    async def import_records(
        self, kind: EntityKind, records: list, config: ImportConfig
    ) -> ImportResult | ValidationReport:
        orchestrator = BatchOrchestrator(self._registry.get(kind))
        if config.validate_only:
            return await orchestrator.validate(records, config.batch_size)
        return await orchestrator.run(records, config)
