"""Recipe Repository — SQL implementation of the RecipeRepository protocol.

Invariants:
    - One AsyncSession per repository instance, owned by the caller (request scope)
    - Reads never raise for "nothing found": None or [] instead
    - Reads and create translate store failures; update and delete re-raise them untranslated
    - A unique-constraint violation on insert is RecipeHasToBeUniqueError, never a raw IntegrityError
    - Zero affected rows on update is RecipeDoesNotExistError; on delete it is returned as 0
    - Every failed statement rolls the session back before the error leaves this class

Design Decisions:
    - Uniqueness checked by the store constraint, not a SELECT before INSERT:
      the read-then-act race is the database's to resolve
    - Update does not pre-check title uniqueness (unlike create): a clash surfaces
      as the store's own IntegrityError
    - Bulk UPDATE/DELETE statements: affected-row count is the existence signal;
      "evaluate" sync keeps rows already loaded in the session consistent
"""

import logging
from typing import Sequence
from uuid import uuid4

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from recipes_data_provider.core.domain_types import RecipeId, StoreErrorKind
from recipes_data_provider.core.errors import (
    RecipeDoesNotExistError, RecipeHasToBeUniqueError, UnknownDatabaseError,
)
from recipes_data_provider.core.repository_protocols import (
    CreateRecipeLike, UpdateRecipeLike,
)
from recipes_data_provider.core.store_errors import classify_store_error
from recipes_data_provider.models.recipe import Recipe

logger = logging.getLogger(__name__)


class SqlRecipeRepository:
    """Recipe persistence over a request-scoped async session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_recipes(self) -> Sequence[Recipe]:
        """All recipes, ordered by title."""
        query = select(Recipe).order_by(Recipe.title)
        try:
            result = await self.db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._unknown_database_error("select", e) from e

    async def get_recipes_by_title(self, partial_title: str) -> Sequence[Recipe]:
        """Recipes whose title contains partial_title (store-defined case sensitivity)."""
        query = (
            select(Recipe)
            .where(Recipe.title.contains(partial_title, autoescape=True))
            .order_by(Recipe.title)
        )
        try:
            result = await self.db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._unknown_database_error("select", e) from e

    async def get_recipe_by_uuid(self, recipe_uuid: RecipeId) -> Recipe | None:
        try:
            result = await self.db.execute(
                select(Recipe).where(Recipe.uuid == recipe_uuid),
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise await self._unknown_database_error("select", e) from e

    async def create_recipe(self, dto: CreateRecipeLike) -> Recipe:
        """Insert a recipe under a freshly minted uuid."""
        recipe = Recipe(uuid=RecipeId(uuid4()), title=dto.title)
        self.db.add(recipe)
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            kind = classify_store_error(e)
            if kind is StoreErrorKind.UNIQUE_VIOLATION:
                logger.info(
                    "Rejected duplicate recipe title",
                    extra={"title": dto.title, "store_error_kind": kind.value},
                )
                raise RecipeHasToBeUniqueError(dto.title) from e
            self._log_store_error("insert", kind, e)
            raise UnknownDatabaseError("insert", kind) from e

        logger.info(
            "Recipe created",
            extra={"recipe_uuid": str(recipe.uuid), "title": recipe.title},
        )
        return recipe

    async def update_recipe(self, dto: UpdateRecipeLike) -> int:
        """Retitle the recipe matching dto.uuid. Returns the affected-row count (1)."""
        statement = (
            update(Recipe)
            .where(Recipe.uuid == dto.uuid)
            .values(title=dto.title)
            .execution_options(synchronize_session="evaluate")
        )
        try:
            result = await self.db.execute(statement)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        if result.rowcount == 0:
            raise RecipeDoesNotExistError(dto.uuid)
        logger.info(
            "Recipe updated",
            extra={"recipe_uuid": str(dto.uuid), "title": dto.title},
        )
        return result.rowcount

    async def delete_recipe(self, recipe_uuid: RecipeId) -> int:
        """Delete the recipe matching recipe_uuid. Returns the affected-row count (0 or 1)."""
        statement = (
            delete(Recipe)
            .where(Recipe.uuid == recipe_uuid)
            .execution_options(synchronize_session="evaluate")
        )
        try:
            result = await self.db.execute(statement)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        if result.rowcount:
            logger.info(
                "Recipe deleted", extra={"recipe_uuid": str(recipe_uuid)},
            )
        return result.rowcount

    async def count_recipes(self) -> int:
        try:
            return await self.db.scalar(
                select(func.count()).select_from(Recipe),
            )
        except SQLAlchemyError as e:
            raise await self._unknown_database_error("count", e) from e

    async def _unknown_database_error(
        self, operation: str, error: SQLAlchemyError,
    ) -> UnknownDatabaseError:
        """Roll back, log, and build the UnknownDatabaseError for a failed read."""
        await self.db.rollback()
        kind = classify_store_error(error)
        self._log_store_error(operation, kind, error)
        return UnknownDatabaseError(operation, kind)

    @staticmethod
    def _log_store_error(
        operation: str, kind: StoreErrorKind, error: SQLAlchemyError,
    ) -> None:
        logger.error(
            f"Store {operation} failed: {type(error).__name__}",
            extra={"operation": operation, "store_error_kind": kind.value},
        )
