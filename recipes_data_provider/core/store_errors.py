"""Store Error Classifier — maps vendor-specific driver errors to StoreErrorKind.

Invariants:
    - Pure function of the exception: no IO, no logging, never raises
    - Unrecognised errors classify as UNKNOWN (never guessed as a domain error)
    - Only UNIQUE_VIOLATION is ever translated into a domain error by callers

Design Decisions:
    - Inspect exc.orig (the DBAPI error SQLAlchemy wrapped) rather than matching
      SQLAlchemy subclasses alone: IntegrityError covers FK/NOT NULL/CHECK too
      (ADR: repository stays portable across PostgreSQL, MySQL, SQLite)
    - Codes over messages where the driver exposes them; SQLite only has messages
"""

from sqlalchemy.exc import (
    DBAPIError, DisconnectionError, InterfaceError, OperationalError,
)

from recipes_data_provider.core.domain_types import StoreErrorKind


# PostgreSQL SQLSTATE codes
_PG_UNIQUE = {"23505"}
_PG_SCHEMA = {"42P01", "3F000", "3D000"}
_PG_CONNECTION_PREFIXES = ("08", "57P0")

# MySQL / MariaDB error numbers
_MYSQL_UNIQUE = {1062}
_MYSQL_SCHEMA = {1146, 1049}
_MYSQL_CONNECTION = {2002, 2003, 2006, 2013}

# SQLite message fragments (lower-cased)
_SQLITE_UNIQUE = ("unique constraint failed",)
_SQLITE_SCHEMA = ("no such table",)
_SQLITE_CONNECTION = ("unable to open database",)


def classify_store_error(exc: BaseException) -> StoreErrorKind:
    """Classify a store exception into a portable StoreErrorKind."""
    orig = getattr(exc, "orig", None) if isinstance(exc, DBAPIError) else None
    source = orig if orig is not None else exc

    sqlstate = _sqlstate_of(source)
    if sqlstate:
        kind = _classify_sqlstate(sqlstate)
        if kind is not StoreErrorKind.UNKNOWN:
            return kind

    errno = _mysql_errno_of(source)
    if errno is not None:
        kind = _classify_mysql_errno(errno)
        if kind is not StoreErrorKind.UNKNOWN:
            return kind

    kind = _classify_sqlite_message(str(source).lower())
    if kind is not StoreErrorKind.UNKNOWN:
        return kind

    if isinstance(exc, (OperationalError, InterfaceError, DisconnectionError)):
        return StoreErrorKind.CONNECTION
    if isinstance(exc, (ConnectionError, OSError)):
        return StoreErrorKind.CONNECTION
    return StoreErrorKind.UNKNOWN


def _sqlstate_of(error: BaseException) -> str | None:
    # psycopg2 exposes pgcode, psycopg3 and asyncpg (via SQLAlchemy) sqlstate
    for attr in ("sqlstate", "pgcode"):
        value = getattr(error, attr, None)
        if isinstance(value, str) and value:
            return value
    return None


def _classify_sqlstate(sqlstate: str) -> StoreErrorKind:
    if sqlstate in _PG_UNIQUE:
        return StoreErrorKind.UNIQUE_VIOLATION
    if sqlstate in _PG_SCHEMA:
        return StoreErrorKind.MISSING_SCHEMA
    if sqlstate.startswith(_PG_CONNECTION_PREFIXES):
        return StoreErrorKind.CONNECTION
    return StoreErrorKind.UNKNOWN


def _mysql_errno_of(error: BaseException) -> int | None:
    args = getattr(error, "args", ())
    if args and isinstance(args[0], int):
        return args[0]
    return None


def _classify_mysql_errno(errno: int) -> StoreErrorKind:
    if errno in _MYSQL_UNIQUE:
        return StoreErrorKind.UNIQUE_VIOLATION
    if errno in _MYSQL_SCHEMA:
        return StoreErrorKind.MISSING_SCHEMA
    if errno in _MYSQL_CONNECTION:
        return StoreErrorKind.CONNECTION
    return StoreErrorKind.UNKNOWN


def _classify_sqlite_message(message: str) -> StoreErrorKind:
    if any(fragment in message for fragment in _SQLITE_UNIQUE):
        return StoreErrorKind.UNIQUE_VIOLATION
    if any(fragment in message for fragment in _SQLITE_SCHEMA):
        return StoreErrorKind.MISSING_SCHEMA
    if any(fragment in message for fragment in _SQLITE_CONNECTION):
        return StoreErrorKind.CONNECTION
    return StoreErrorKind.UNKNOWN
