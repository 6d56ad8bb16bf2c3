from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from app.importing.schemas import ValidationResult

_MISSING = object()


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _choices_text(choices: Iterable[str]) -> str:
    return ", ".join(choices)


class FieldChecker:
    """Accumulates errors and warnings for the fields of one record.

    Optional checks only fire when the key is present; ``None`` counts as
    present unless the check is told the field is nullable.
    """

    def __init__(self, record: Mapping[str, Any]) -> None:
        self._record = record
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def _get(self, field: str) -> Any:
        return self._record.get(field, _MISSING)

    def require_text(self, field: str, label: str) -> None:
        if not _is_text(self._get(field)):
            self.errors.append(f"{label} is required and must be a non-empty string")

    def require_choice(self, field: str, label: str, choices: Sequence[str]) -> None:
        value = self._get(field)
        if not isinstance(value, str) or value not in choices:
            self.errors.append(
                f"{label} is required and must be one of: {_choices_text(choices)}"
            )

    def require_list(self, field: str, label: str, choices: Sequence[str] | None = None) -> None:
        value = self._get(field)
        if not isinstance(value, list) or not value:
            self.errors.append(f"{label} is required and must be a non-empty array")
            return
        self._check_items(value, label, choices)

    def optional_text(self, field: str, label: str, *, nullable: bool = False) -> None:
        value = self._get(field)
        if value is _MISSING or (nullable and value is None):
            return
        if not isinstance(value, str):
            self.errors.append(f"{label} must be a string")

    def optional_integer(self, field: str, label: str) -> None:
        value = self._get(field)
        if value is _MISSING:
            return
        if not _is_integer(value) or value < 0:
            self.errors.append(f"{label} must be a non-negative integer")

    def optional_choice(self, field: str, label: str, choices: Sequence[str]) -> None:
        value = self._get(field)
        if value is _MISSING:
            return
        if not isinstance(value, str) or value not in choices:
            self.errors.append(f"{label} must be one of: {_choices_text(choices)}")

    def optional_list(
        self,
        field: str,
        label: str,
        choices: Sequence[str] | None = None,
    ) -> None:
        value = self._get(field)
        if value is _MISSING:
            return
        if not isinstance(value, list):
            self.errors.append(f"{label} must be an array")
            return
        if not all(isinstance(item, str) for item in value):
            self.errors.append(f"{label} must be an array of strings")
            return
        self._check_items(value, label, choices)

    def optional_object(self, field: str, label: str) -> None:
        value = self._get(field)
        if value is _MISSING or value is None:
            return
        if not isinstance(value, Mapping):
            self.errors.append(f"{label} must be an object")

    def warn_if_longer(self, field: str, label: str, limit: int) -> None:
        value = self._get(field)
        if isinstance(value, str) and len(value) > limit:
            self.warnings.append(f"{label} is very long (>{limit:,} characters)")

    def _check_items(self, items: list, label: str, choices: Sequence[str] | None) -> None:
        if choices is None:
            return
        unknown = [item for item in items if not isinstance(item, str) or item not in choices]
        if unknown:
            self.errors.append(
                f"{label} contains invalid values: {', '.join(map(str, unknown))}. "
                f"Allowed: {_choices_text(choices)}"
            )

    def result(self) -> ValidationResult:
        return ValidationResult(
            is_valid=not self.errors,
            errors=list(self.errors),
            warnings=list(self.warnings),
        )


class RecordValidator(ABC):
    """Entity-specific schema check. Pure: no I/O, never raises for bad input."""

    def validate(self, record: Any, index: int) -> ValidationResult:
        if not isinstance(record, Mapping):
            return ValidationResult(is_valid=False, errors=["Record must be an object"])
        checker = FieldChecker(record)
        self.check(checker)
        return checker.result()

    def validate_many(self, records: Sequence[Any]) -> list[ValidationResult]:
        return [self.validate(record, index) for index, record in enumerate(records)]

    @abstractmethod
    def check(self, checker: FieldChecker) -> None:
        """Apply the entity's field rules."""
        ...
