from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

from app.exceptions import UnknownEntityKindError
from app.importing.schemas import ValidationResult
from app.importing.validation import RecordValidator


class EntityKind(StrEnum):
    word = "word"
    lecture = "lecture"
    expression = "expression"


class EntityImporter(ABC):
    """Store-facing capabilities the import engine needs for one content kind.

    ``find_existing`` must perform a single point lookup by the natural key and
    return the stored row (with its ``id``) or ``None``.
    """

    kind: EntityKind
    validator: RecordValidator

    def validate(self, record: Any, index: int) -> ValidationResult:
        return self.validator.validate(record, index)

    @abstractmethod
    async def find_existing(self, record: Mapping[str, Any]) -> dict | None: ...

    @abstractmethod
    async def insert(self, record: Mapping[str, Any]) -> str: ...

    @abstractmethod
    async def update(self, record_id: str, record: Mapping[str, Any]) -> None: ...


class ImporterRegistry:
    def __init__(self, importers: Iterable[EntityImporter] = ()) -> None:
        self._importers: dict[EntityKind, EntityImporter] = {}
        for importer in importers:
            self.register(importer)

    def register(self, importer: EntityImporter) -> None:
        self._importers[importer.kind] = importer

    def get(self, kind: str) -> EntityImporter:
        try:
            return self._importers[EntityKind(kind)]
        except (KeyError, ValueError):
            raise UnknownEntityKindError(kind) from None

    def kinds(self) -> list[EntityKind]:
        return list(self._importers)
