"""Recipe Routes — HTTP surface for recipe CRUD.

Invariants:
    - Routes never touch the database or map errors: RecipeController does both
    - One repository + controller per request, built from the request's DB session
    - Path uuid is validated by FastAPI (malformed → 400 via the validation handler)

Design Decisions:
    - GET /recipes?title= serves search; no separate search path
    - PUT body carries only the title; the target uuid comes from the path
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from recipes_data_provider.api.recipe_controller import RECIPES_PATH, RecipeController
from recipes_data_provider.core.domain_types import RecipeId
from recipes_data_provider.infrastructure.database import get_db
from recipes_data_provider.schemas.recipe import (
    CreateRecipeDto, RecipeResponse, RecipeTitle, UpdateRecipeDto,
)
from recipes_data_provider.services.recipe_repository import SqlRecipeRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix=RECIPES_PATH, tags=["recipes"])


def get_recipe_controller(
    db: AsyncSession = Depends(get_db),
) -> RecipeController:
    """Per-request controller wired to a repository over the request session."""
    return RecipeController(SqlRecipeRepository(db), logger)


@router.get("", response_model=list[RecipeResponse])
async def get_recipes(
    title: str | None = Query(None, max_length=200),
    controller: RecipeController = Depends(get_recipe_controller),
) -> Response:
    """List recipes; with ?title= only those whose title contains it."""
    if title is not None:
        return await controller.get_recipes_by_title(title)
    return await controller.get_recipes()


@router.get(
    "/{recipe_uuid}", response_model=RecipeResponse, name="get_recipe_by_uuid",
)
async def get_recipe_by_uuid(
    recipe_uuid: UUID,
    controller: RecipeController = Depends(get_recipe_controller),
) -> Response:
    return await controller.get_recipe_by_uuid(RecipeId(recipe_uuid))


@router.post(
    "", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED,
)
async def create_recipe(
    body: CreateRecipeDto,
    controller: RecipeController = Depends(get_recipe_controller),
) -> Response:
    """Create a recipe. 409 when the title is taken."""
    return await controller.create_recipe(body)


@router.put("/{recipe_uuid}", status_code=status.HTTP_204_NO_CONTENT)
async def update_recipe(
    recipe_uuid: UUID,
    body: RecipeTitle,
    controller: RecipeController = Depends(get_recipe_controller),
) -> Response:
    """Retitle a recipe. 404 when no recipe has this uuid."""
    dto = UpdateRecipeDto(uuid=recipe_uuid, title=body.title)
    return await controller.update_recipe(dto)


@router.delete("/{recipe_uuid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_uuid: UUID,
    controller: RecipeController = Depends(get_recipe_controller),
) -> Response:
    return await controller.delete_recipe(RecipeId(recipe_uuid))
