import json
from typing import Any

from app.config import settings
from app.exceptions import ImportFileError, ValidationError
from app.importing.schemas import MAX_BATCH_SIZE, DuplicateStrategy, ImportConfig

# Accepted locations of the record array, in lookup order. The second one is
# what the export endpoints produce once wrapped in a response envelope.
RECORD_PATHS: tuple[tuple[str, ...], ...] = (
    ("data", "records"),
    ("data", "data", "records"),
    ("records",),
)

_BOOLEAN_FLAGS = {"true": True, "false": False}


def decode_document(file_content: bytes) -> Any:
    """Decode an uploaded file as UTF-8 JSON."""
    try:
        text = file_content.decode("utf-8")
    except UnicodeDecodeError:
        raise ImportFileError("Import file must be UTF-8 encoded") from None

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        raise ImportFileError("Invalid JSON file format") from None


def _lookup(document: Any, path: tuple[str, ...]) -> Any:
    node = document
    for key in path:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node


def extract_records(document: Any) -> list:
    for path in RECORD_PATHS:
        records = _lookup(document, path)
        if isinstance(records, list):
            return records

    expected = ", ".join(f"'{'.'.join(path)}'" for path in RECORD_PATHS)
    raise ImportFileError(f"Invalid file structure. Expected one of {expected} arrays")


def parse_flag(value: str | bool, name: str) -> bool:
    if isinstance(value, bool):
        return value
    try:
        return _BOOLEAN_FLAGS[value]
    except KeyError:
        raise ValidationError(f"Invalid {name}. Must be 'true' or 'false'") from None


def build_config(
    duplicate_strategy: str = DuplicateStrategy.skip,
    validate_only: str | bool = False,
    batch_size: int | str | None = None,
) -> ImportConfig:
    """Validate raw import parameters before any record is touched."""
    if duplicate_strategy not in set(DuplicateStrategy):
        allowed = ", ".join(DuplicateStrategy)
        raise ValidationError(f"Invalid duplicateStrategy. Must be one of: {allowed}")

    if batch_size is None:
        batch_size = settings.import_default_batch_size

    upper = min(settings.import_max_batch_size, MAX_BATCH_SIZE)
    try:
        batch_size_num = int(batch_size)
    except (TypeError, ValueError):
        batch_size_num = 0
    if not 1 <= batch_size_num <= upper:
        raise ValidationError(f"Invalid batchSize. Must be a number between 1 and {upper}")

    return ImportConfig(
        duplicate_strategy=DuplicateStrategy(duplicate_strategy),
        validate_only=parse_flag(validate_only, "validateOnly"),
        batch_size=batch_size_num,
    )
