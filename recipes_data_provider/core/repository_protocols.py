"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from services/, api/ or infrastructure/ — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via explicit dependency passing

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Protocol, Sequence
from uuid import UUID

from recipes_data_provider.core.domain_types import RecipeId


class RecipeLike(Protocol):
    """Structural contract for Recipe rows handed to the controller."""
    uuid: UUID
    title: str


class CreateRecipeLike(Protocol):
    title: str


class UpdateRecipeLike(Protocol):
    uuid: UUID
    title: str


class RecipeRepository(Protocol):
    """Contract for recipe persistence — implemented by shell.

    Reads return rows or None and raise UnknownDatabaseError on store failure.
    create_recipe raises RecipeHasToBeUniqueError on a duplicate title.
    update_recipe raises RecipeDoesNotExistError when nothing matched.
    delete_recipe reports a miss as 0.
    """
    async def get_recipes(self) -> Sequence[RecipeLike]: ...
    async def get_recipes_by_title(self, partial_title: str) -> Sequence[RecipeLike]: ...
    async def get_recipe_by_uuid(self, recipe_uuid: RecipeId) -> RecipeLike | None: ...
    async def create_recipe(self, dto: CreateRecipeLike) -> RecipeLike: ...
    async def update_recipe(self, dto: UpdateRecipeLike) -> int: ...
    async def delete_recipe(self, recipe_uuid: RecipeId) -> int: ...
