"""Validation layer.

Pure functions that check a payload against a RecordSchema before anything
touches the store. They return a cleaned copy of the payload (strings trimmed,
defaults filled, unknown keys dropped) or raise ValidationError.
"""

import re
from typing import Any

from poster_service.exceptions import ValidationError
from poster_service.records import FieldRule, RecordSchema

OBJECT_ID = re.compile(r"[0-9a-fA-F]{24}")


def _clean(rule: FieldRule, value: Any) -> Any:
    if rule.trim and isinstance(value, str):
        return value.strip()
    return value


def _label(rule: FieldRule) -> str:
    return rule.alias[:1].upper() + rule.alias[1:]


def _check_value(rule: FieldRule, value: Any) -> None:
    """Apply enum, range and format constraints to a present value."""
    if value is None:
        return
    label = _label(rule)
    if rule.choices is not None and value not in rule.choices:
        allowed = ", ".join(str(c) for c in rule.choices)
        raise ValidationError(f"{label} must be one of: {allowed}")
    if rule.minimum is not None and value < rule.minimum:
        raise ValidationError(f"{label} must be between {rule.minimum} and {rule.maximum}")
    if rule.maximum is not None and value > rule.maximum:
        raise ValidationError(f"{label} must be between {rule.minimum} and {rule.maximum}")
    if rule.pattern is not None and not (
        isinstance(value, str) and rule.pattern.fullmatch(value)
    ):
        raise ValidationError(f"{label} has an invalid format")


def validate_create(schema: RecordSchema, payload: dict[str, Any]) -> dict[str, Any]:
    """Check a full record before insert.

    Every required field must be present and truthy; the first failure wins,
    so a payload that is both incomplete and out of range reports the
    missing fields.
    """
    cleaned = {rule.name: _clean(rule, payload.get(rule.name)) for rule in schema.rules}

    if any(rule.required and not cleaned[rule.name] for rule in schema.rules):
        raise ValidationError(schema.missing_message)

    for rule in schema.rules:
        _check_value(rule, cleaned[rule.name])

    for name, default in schema.defaults.items():
        if cleaned.get(name) is None:
            cleaned[name] = default
    return cleaned


def validate_update(schema: RecordSchema, changes: dict[str, Any]) -> dict[str, Any]:
    """Check a partial field set before merge.

    Only supplied fields are validated; a supplied required field may not be
    cleared. Keys that are not fields of the record kind are dropped.
    """
    cleaned: dict[str, Any] = {}
    for name, value in changes.items():
        rule = schema.rule(name)
        if rule is None:
            continue
        value = _clean(rule, value)
        if rule.required and not value:
            raise ValidationError(f"{_label(rule)} cannot be empty.")
        if value is None and name in schema.defaults:
            value = schema.defaults[name]
        _check_value(rule, value)
        cleaned[name] = value

    if not cleaned:
        raise ValidationError("No fields provided for update.")
    return cleaned


def validate_object_id(value: str, label: str) -> str:
    """Reject identities that cannot possibly exist, before any store access."""
    if not OBJECT_ID.fullmatch(value):
        raise ValidationError(f"Invalid {label} ID format.")
    return value
