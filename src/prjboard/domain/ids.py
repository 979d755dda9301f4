"""Project ID pattern, validation, and generation.

IDs are ``prj_`` followed by 8 lowercase hex chars drawn from a random UUID.

INVARIANT: IDs are permanent. Once generated, an ID never changes, and the
store never hands the same ID to two projects.
"""

from __future__ import annotations

import re
import uuid

ID_PREFIX = "prj_"
ID_PATTERN: re.Pattern[str] = re.compile(r"^prj_[0-9a-f]{8}$")


def generate_project_id() -> str:
    """Return a fresh random project ID.

    Uniqueness within a store is enforced by the store, which regenerates
    on the (unlikely) collision.
    """
    return f"{ID_PREFIX}{uuid.uuid4().hex[:8]}"


def validate_id(project_id: str) -> bool:
    """Check whether *project_id* matches the project ID pattern."""
    return ID_PATTERN.match(project_id) is not None
