"""Outcome folding — every exception lands on exactly one OutcomeKind."""

from uuid import uuid4

from sqlalchemy.exc import IntegrityError

from recipes_data_provider.core.domain_types import OutcomeKind, StoreErrorKind
from recipes_data_provider.core.errors import (
    RecipeDoesNotExistError, RecipeHasToBeUniqueError, UnknownDatabaseError,
)
from recipes_data_provider.core.outcomes import Outcome, fold_error


def test_ok_carries_value():
    outcome = Outcome.ok([1, 2])
    assert outcome.kind is OutcomeKind.OK
    assert outcome.value == [1, 2]
    assert outcome.error is None


def test_ok_may_carry_none():
    outcome = Outcome.ok(None)
    assert outcome.kind is OutcomeKind.OK
    assert outcome.value is None


def test_duplicate_title_folds_to_duplicate():
    outcome = fold_error(RecipeHasToBeUniqueError("Soup"))
    assert outcome.kind is OutcomeKind.DUPLICATE
    assert outcome.value is None


def test_missing_recipe_folds_to_not_found():
    assert fold_error(RecipeDoesNotExistError(uuid4())).kind is OutcomeKind.NOT_FOUND


def test_unknown_database_error_folds_to_infra_error():
    error = UnknownDatabaseError("select", StoreErrorKind.CONNECTION)
    outcome = fold_error(error)
    assert outcome.kind is OutcomeKind.INFRA_ERROR
    assert outcome.error is error


def test_raw_store_error_folds_to_infra_error():
    error = IntegrityError("UPDATE recipes", {}, Exception("UNIQUE constraint failed"))
    assert fold_error(error).kind is OutcomeKind.INFRA_ERROR


def test_unexpected_exception_folds_to_infra_error():
    assert fold_error(RuntimeError("boom")).kind is OutcomeKind.INFRA_ERROR
