"""Field validation rules.

A :class:`ValidationRule` pairs a raw value with optional constraints.
:func:`validate` checks every constraint that applies to the value's type:

- ``required``: the stringified, stripped value must be non-empty.
- ``min_length`` / ``max_length``: only checked for ``str`` values.
- ``min`` / ``max``: only checked for numeric values.

A constraint that does not match the value's type is skipped, never treated
as a failure. Values are never coerced.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationRule:
    """A value plus the constraints it must satisfy."""

    value: str | int | float
    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    min: int | float | None = None
    max: int | float | None = None


def _is_numeric(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate(rule: ValidationRule) -> bool:
    """Return True when *rule.value* satisfies every applicable constraint."""
    value = rule.value
    is_valid = True
    if rule.required:
        is_valid = is_valid and len(str(value).strip()) != 0
    if rule.min_length is not None and isinstance(value, str):
        is_valid = is_valid and len(value) >= rule.min_length
    if rule.max_length is not None and isinstance(value, str):
        is_valid = is_valid and len(value) <= rule.max_length
    if rule.min is not None and _is_numeric(value):
        is_valid = is_valid and value >= rule.min
    if rule.max is not None and _is_numeric(value):
        is_valid = is_valid and value <= rule.max
    return is_valid


def validate_all(rules: Iterable[ValidationRule]) -> bool:
    """Validate every rule and return whether all of them passed.

    All rules are evaluated (no short-circuit) so each failure is logged.
    """
    ok = True
    for rule in rules:
        if not validate(rule):
            logger.debug("Validation failed for value %r", rule.value)
            ok = False
    return ok
