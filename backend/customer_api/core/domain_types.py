"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CustomerId wraps UUID at the repository boundary
    - REDACTED_PASSWORD is the only password value that leaves the service
    - All operation names encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON log fields without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

REDACTED_PASSWORD = ""


# ─── Enums ───────────────────────────────────────────────────────

class CustomerOperation(str, Enum):
    """Service operations — surfaced as the `operation` log field."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
