"""Outcome — tagged result for one repository call.

Invariants:
    - kind is always set; value only for OK, error only for failure kinds
    - fold_error() is total: every exception maps to exactly one OutcomeKind
    - Domain errors never fold into INFRA_ERROR, infrastructure errors never into DUPLICATE/NOT_FOUND

Design Decisions:
    - Tagged result over per-action try/except: the controller matches exhaustively
      on OutcomeKind, so a new failure kind is a single place to extend
    - Pure folding separated from the async capture in the controller (ADR: core has no async)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from recipes_data_provider.core.domain_types import OutcomeKind
from recipes_data_provider.core.errors import (
    RecipeDoesNotExistError, RecipeHasToBeUniqueError,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a repository call: Ok(value) | Duplicate | NotFound | InfraError."""
    kind: OutcomeKind
    value: T | None = None
    error: BaseException | None = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(OutcomeKind.OK, value=value)


def fold_error(error: BaseException) -> Outcome:
    """Map a raised exception onto its Outcome."""
    if isinstance(error, RecipeHasToBeUniqueError):
        return Outcome(OutcomeKind.DUPLICATE, error=error)
    if isinstance(error, RecipeDoesNotExistError):
        return Outcome(OutcomeKind.NOT_FOUND, error=error)
    return Outcome(OutcomeKind.INFRA_ERROR, error=error)
