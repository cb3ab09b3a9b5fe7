"""Recipe ORM — mapping shape, checked without a database."""

from uuid import UUID

from sqlalchemy import UniqueConstraint

from recipes_data_provider.db.base import Base
from recipes_data_provider.models.recipe import Recipe


def test_recipe_maps_recipes_table():
    assert Recipe.__tablename__ == "recipes"
    assert Base.metadata.tables["recipes"] is Recipe.__table__


def test_uuid_is_primary_key_with_python_default():
    column = Recipe.__table__.c.uuid
    assert column.primary_key
    assert column.type.python_type is UUID
    assert isinstance(column.default.arg(None), UUID)


def test_title_is_required_and_unique():
    table = Recipe.__table__
    assert not table.c.title.nullable
    assert table.c.title.type.length == 200
    unique = [c for c in table.constraints if isinstance(c, UniqueConstraint)]
    assert [c.name for c in unique] == ["uq_recipes_title"]
    assert [col.name for col in unique[0].columns] == ["title"]


def test_repr_shows_uuid_and_title():
    uid = UUID("ab24fde6-495b-45b6-be3c-1343939b646a")
    assert repr(Recipe(uuid=uid, title="Apple Pie")) == (
        f"Recipe(uuid={uid}, title='Apple Pie')"
    )
