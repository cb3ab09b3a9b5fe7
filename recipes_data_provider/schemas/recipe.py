"""Recipe Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - CreateRecipeDto.title / RecipeTitle.title: 1-200 chars, stripped, non-empty
    - UpdateRecipeDto carries the target uuid; the title is the only mutable field
    - RecipeResponse is built from ORM rows (from_attributes)

Design Decisions:
    - UpdateRecipeDto assembled in the route from path uuid + RecipeTitle body:
      the body never names its own target
    - field_validator for side-effect-free transforms (strip) — keeps models pure
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recipes_data_provider.core.domain_types import TITLE_MAX_LENGTH


def _strip_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


class CreateRecipeDto(BaseModel):
    """Recipe creation — title only, the identifier is minted by the store."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class RecipeTitle(BaseModel):
    """PUT body — the new title for an existing recipe."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class UpdateRecipeDto(BaseModel):
    """Recipe update — identifies the target row and carries its new title."""
    uuid: UUID
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class RecipeResponse(BaseModel):
    """Recipe response — public-facing recipe data."""
    model_config = ConfigDict(from_attributes=True)

    uuid: UUID
    title: str
