"""Recipe Controller — maps repository outcomes to HTTP responses.

Invariants:
    - Every action returns a Response; no exception escapes the controller
    - Each repository call is folded into an Outcome and matched exhaustively on OutcomeKind
    - absent / 0 affected rows / RecipeDoesNotExistError → 404
    - RecipeHasToBeUniqueError → 409
    - UnknownDatabaseError, raw store errors, anything else → 500 without internal details
    - 201 carries the created recipe and a Location built from its route values (uuid, title)

Design Decisions:
    - Repository and logger passed explicitly to the constructor: one controller per request,
      no container lookups (ADR: explicit dependency passing)
    - Controller returns Starlette responses directly so it can be exercised without routing
"""

import logging
from typing import Any, Awaitable, Sequence, TypeVar
from urllib.parse import urlencode
from uuid import UUID

from fastapi import Response, status
from fastapi.responses import JSONResponse

from recipes_data_provider.core.domain_types import OutcomeKind, RecipeId
from recipes_data_provider.core.errors import (
    RecipeDoesNotExistError, RecipesError, internal_error_response,
)
from recipes_data_provider.core.outcomes import Outcome, fold_error
from recipes_data_provider.core.repository_protocols import (
    CreateRecipeLike, RecipeLike, RecipeRepository, UpdateRecipeLike,
)
from recipes_data_provider.schemas.recipe import RecipeResponse

T = TypeVar("T")

RECIPES_PATH = "/api/v1/recipes"


async def capture_outcome(call: Awaitable[T]) -> Outcome[T]:
    """Await one repository call and fold its result or exception into an Outcome."""
    try:
        return Outcome.ok(await call)
    except Exception as e:
        return fold_error(e)


class RecipeController:
    """Recipe actions: list, search, lookup, create, update, delete."""

    def __init__(
        self,
        repository: RecipeRepository,
        logger: logging.Logger | None = None,
        base_path: str = RECIPES_PATH,
    ):
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)
        self.base_path = base_path.rstrip("/")

    async def get_recipes(self) -> Response:
        outcome = await capture_outcome(self.repository.get_recipes())
        match outcome.kind:
            case OutcomeKind.OK:
                return _json(status.HTTP_200_OK, _serialize_many(outcome.value))
            case _:
                return self._failure(outcome, "get_recipes")

    async def get_recipes_by_title(self, partial_title: str) -> Response:
        outcome = await capture_outcome(
            self.repository.get_recipes_by_title(partial_title),
        )
        match outcome.kind:
            case OutcomeKind.OK:
                return _json(status.HTTP_200_OK, _serialize_many(outcome.value))
            case _:
                return self._failure(outcome, "get_recipes_by_title")

    async def get_recipe_by_uuid(self, recipe_uuid: RecipeId) -> Response:
        outcome = await capture_outcome(
            self.repository.get_recipe_by_uuid(recipe_uuid),
        )
        match outcome.kind:
            case OutcomeKind.OK if outcome.value is not None:
                return _json(status.HTTP_200_OK, _serialize(outcome.value))
            case OutcomeKind.OK:
                return _not_found(recipe_uuid)
            case _:
                return self._failure(outcome, "get_recipe_by_uuid")

    async def create_recipe(self, dto: CreateRecipeLike) -> Response:
        outcome = await capture_outcome(self.repository.create_recipe(dto))
        match outcome.kind:
            case OutcomeKind.OK:
                recipe = outcome.value
                return _json(
                    status.HTTP_201_CREATED,
                    _serialize(recipe),
                    headers={"Location": self.location_for(recipe)},
                )
            case _:
                return self._failure(outcome, "create_recipe")

    async def update_recipe(self, dto: UpdateRecipeLike) -> Response:
        outcome = await capture_outcome(self.repository.update_recipe(dto))
        match outcome.kind:
            case OutcomeKind.OK if outcome.value:
                return Response(status_code=status.HTTP_204_NO_CONTENT)
            case OutcomeKind.OK:
                return _not_found(dto.uuid)
            case _:
                return self._failure(outcome, "update_recipe")

    async def delete_recipe(self, recipe_uuid: RecipeId) -> Response:
        outcome = await capture_outcome(
            self.repository.delete_recipe(recipe_uuid),
        )
        match outcome.kind:
            case OutcomeKind.OK if outcome.value:
                return Response(status_code=status.HTTP_204_NO_CONTENT)
            case OutcomeKind.OK:
                return _not_found(recipe_uuid)
            case _:
                return self._failure(outcome, "delete_recipe")

    def route_values(self, recipe: RecipeLike) -> dict[str, str]:
        return {"uuid": str(recipe.uuid), "title": recipe.title}

    def location_for(self, recipe: RecipeLike) -> str:
        """Lookup URL for recipe: uuid in the path, remaining route values as query."""
        values = self.route_values(recipe)
        path = f"{self.base_path}/{values.pop('uuid')}"
        return f"{path}?{urlencode(values)}"

    def _failure(self, outcome: Outcome, action: str) -> Response:
        """Render DUPLICATE / NOT_FOUND outcomes; anything else is a 500."""
        error = outcome.error
        match outcome.kind:
            case OutcomeKind.DUPLICATE | OutcomeKind.NOT_FOUND:
                self.logger.info(
                    f"{action}: {error}",
                    extra={"error_code": error.code, "outcome": outcome.kind.value},
                )
                return _json(error.http_status, error.to_response())
            case _:
                exc_info = (
                    (type(error), error, error.__traceback__) if error is not None
                    else None
                )
                self.logger.error(
                    f"{action} failed: {type(error).__name__}",
                    exc_info=exc_info,
                    extra={
                        "error_code": getattr(error, "code", "INTERNAL_ERROR"),
                        "outcome": outcome.kind.value,
                    },
                )
                content = (
                    error.to_response() if isinstance(error, RecipesError)
                    else internal_error_response()
                )
                return _json(status.HTTP_500_INTERNAL_SERVER_ERROR, content)


def _serialize(recipe: RecipeLike) -> dict[str, Any]:
    return RecipeResponse.model_validate(recipe).model_dump(mode="json")


def _serialize_many(recipes: Sequence[RecipeLike]) -> list[dict[str, Any]]:
    return [_serialize(r) for r in recipes]


def _not_found(recipe_uuid: UUID) -> Response:
    error = RecipeDoesNotExistError(recipe_uuid)
    return _json(error.http_status, error.to_response())


def _json(
    status_code: int, content: Any, headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=headers)
