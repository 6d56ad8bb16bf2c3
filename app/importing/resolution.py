from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from app.importing.schemas import DuplicateStrategy, RecordAction, RecordStatus


class Mutation(StrEnum):
    insert = "insert"
    update = "update"
    none = "none"


@dataclass(frozen=True)
class Resolution:
    mutation: Mutation
    status: RecordStatus
    action: RecordAction
    fatal: bool = False


_INSERT = Resolution(Mutation.insert, RecordStatus.valid, RecordAction.inserted)

# Keyed by (record already stored, strategy). "merge" replaces the whole
# record exactly like "overwrite" and only differs in the reported action.
DECISION_TABLE: dict[tuple[bool, DuplicateStrategy], Resolution] = {
    **{(False, strategy): _INSERT for strategy in DuplicateStrategy},
    (True, DuplicateStrategy.skip): Resolution(
        Mutation.none, RecordStatus.duplicate, RecordAction.skipped
    ),
    (True, DuplicateStrategy.error): Resolution(
        Mutation.none, RecordStatus.duplicate, RecordAction.skipped, fatal=True
    ),
    (True, DuplicateStrategy.overwrite): Resolution(
        Mutation.update, RecordStatus.valid, RecordAction.updated
    ),
    (True, DuplicateStrategy.merge): Resolution(
        Mutation.update, RecordStatus.valid, RecordAction.merged
    ),
}


def resolve(existing: Any | None, strategy: DuplicateStrategy) -> Resolution:
    """Decide what to do with a valid record given what the store already holds."""
    return DECISION_TABLE[(existing is not None, DuplicateStrategy(strategy))]
