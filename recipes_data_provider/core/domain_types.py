"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RecipeId wraps UUID — minted once at creation, never reassigned
    - All store failure kinds and outcome kinds encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

RecipeId = NewType("RecipeId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

TITLE_MAX_LENGTH = 200


# ─── Enums ───────────────────────────────────────────────────────

class StoreErrorKind(str, Enum):
    """Portable classification of vendor-specific store failures."""
    UNIQUE_VIOLATION = "unique_violation"
    MISSING_SCHEMA = "missing_schema"
    CONNECTION = "connection"
    UNKNOWN = "unknown"


class OutcomeKind(str, Enum):
    """Every result a repository call can fold into at the controller seam."""
    OK = "ok"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    INFRA_ERROR = "infra_error"
