"""Recipe ORM — persists the single recipe entity.

Invariants:
    - uuid is the primary key, minted in Python at creation (uuid4) and never updated
    - title is non-nullable and unique across all recipes (uq_recipes_title)

Design Decisions:
    - Generic Uuid type over postgresql.UUID: the same model runs on PostgreSQL,
      MySQL and SQLite (ADR: store portability)
    - Named unique constraint: migrations and driver errors refer to the same name
"""

from uuid import UUID, uuid4

from sqlalchemy import String, Uuid, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from recipes_data_provider.core.domain_types import TITLE_MAX_LENGTH
from recipes_data_provider.db.base import Base


class Recipe(Base):
    """Recipe entity — identifier plus a unique title."""
    __tablename__ = "recipes"
    __table_args__ = (
        UniqueConstraint("title", name="uq_recipes_title"),
    )

    uuid: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid4,
    )
    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH), nullable=False,
    )

    def __repr__(self) -> str:
        return f"Recipe(uuid={self.uuid!s}, title={self.title!r})"
