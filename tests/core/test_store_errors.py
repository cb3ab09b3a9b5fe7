"""Store Error Classifier — vendor error codes mapped to portable StoreErrorKind.

Tests cover:
    - PostgreSQL SQLSTATE via sqlstate (asyncpg, psycopg3) and pgcode (psycopg2)
    - MySQL errno in args[0]
    - SQLite messages
    - Fallbacks: OperationalError without a code is CONNECTION, anything else UNKNOWN
"""

import sqlite3

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, ProgrammingError

from recipes_data_provider.core.domain_types import StoreErrorKind
from recipes_data_provider.core.store_errors import classify_store_error


class _PgError(Exception):
    def __init__(self, message: str, sqlstate: str):
        super().__init__(message)
        self.sqlstate = sqlstate


class _Psycopg2Error(Exception):
    def __init__(self, message: str, pgcode: str):
        super().__init__(message)
        self.pgcode = pgcode


def _wrap(cls, orig):
    return cls("INSERT INTO recipes", {}, orig)


@pytest.mark.parametrize("sqlstate, kind", [
    ("23505", StoreErrorKind.UNIQUE_VIOLATION),
    ("42P01", StoreErrorKind.MISSING_SCHEMA),
    ("3D000", StoreErrorKind.MISSING_SCHEMA),
    ("08006", StoreErrorKind.CONNECTION),
    ("57P01", StoreErrorKind.CONNECTION),
    ("23502", StoreErrorKind.UNKNOWN),
])
def test_postgres_sqlstate(sqlstate, kind):
    exc = _wrap(ProgrammingError, _PgError("pg failure", sqlstate))
    assert classify_store_error(exc) is kind


def test_psycopg2_pgcode_unique_violation():
    exc = _wrap(IntegrityError, _Psycopg2Error("duplicate key", "23505"))
    assert classify_store_error(exc) is StoreErrorKind.UNIQUE_VIOLATION


@pytest.mark.parametrize("errno, kind", [
    (1062, StoreErrorKind.UNIQUE_VIOLATION),
    (1146, StoreErrorKind.MISSING_SCHEMA),
    (1049, StoreErrorKind.MISSING_SCHEMA),
    (2003, StoreErrorKind.CONNECTION),
    (1452, StoreErrorKind.UNKNOWN),
])
def test_mysql_errno(errno, kind):
    exc = _wrap(ProgrammingError, Exception(errno, "mysql failure"))
    assert classify_store_error(exc) is kind


def test_sqlite_unique_message():
    orig = sqlite3.IntegrityError("UNIQUE constraint failed: recipes.title")
    assert classify_store_error(_wrap(IntegrityError, orig)) is StoreErrorKind.UNIQUE_VIOLATION


def test_sqlite_missing_table_message():
    orig = sqlite3.OperationalError("no such table: recipes")
    assert classify_store_error(_wrap(OperationalError, orig)) is StoreErrorKind.MISSING_SCHEMA


def test_not_null_integrity_error_is_not_unique():
    orig = sqlite3.IntegrityError("NOT NULL constraint failed: recipes.title")
    exc = _wrap(IntegrityError, orig)
    assert classify_store_error(exc) is StoreErrorKind.UNKNOWN


def test_operational_error_without_code_is_connection():
    exc = _wrap(OperationalError, Exception("server closed the connection unexpectedly"))
    assert classify_store_error(exc) is StoreErrorKind.CONNECTION


def test_os_level_connection_refused_is_connection():
    assert classify_store_error(ConnectionRefusedError(111, "refused")) is StoreErrorKind.CONNECTION


def test_unrelated_exception_is_unknown():
    assert classify_store_error(ValueError("boom")) is StoreErrorKind.UNKNOWN
