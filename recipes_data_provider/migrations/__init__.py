"""Alembic migration scripts for the recipes schema."""
