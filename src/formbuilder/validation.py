"""Declarative request shapes and the validator that enforces them.

Each shape is a Draft 7 JSON Schema. :func:`validate` either returns the input
restricted to the properties its shape declares, or raises
:class:`~formbuilder.errors.ValidationFailed` with one ``{path, message}`` item
per violation.
"""

from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError

from formbuilder.config import FIELD_TYPES, FORM_STATUSES
from formbuilder.errors import ValidationFailed

NON_EMPTY_STRING: dict[str, Any] = {"type": "string", "minLength": 1}
NULLABLE_STRING: dict[str, Any] = {"type": ["string", "null"]}
FORM_STATUS: dict[str, Any] = {"enum": list(FORM_STATUSES)}

# range of an SQLite INTEGER column
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1

CREATE_FORM: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": NON_EMPTY_STRING,
        "description": NULLABLE_STRING,
    },
    "required": ["name"],
}

UPDATE_FORM: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": NON_EMPTY_STRING,
        "description": NULLABLE_STRING,
        "status": FORM_STATUS,
    },
}

FORM_FIELD: dict[str, Any] = {
    "type": "object",
    "properties": {
        "type": {"enum": list(FIELD_TYPES)},
        "name": NON_EMPTY_STRING,
        "label": NULLABLE_STRING,
        "required": {"type": "boolean"},
        "ord": {"type": "integer", "minimum": SQLITE_INT_MIN, "maximum": SQLITE_INT_MAX},
        "config": {},
    },
    "required": ["type", "name"],
}

UPSERT_FORM: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": NON_EMPTY_STRING,
        "description": NULLABLE_STRING,
        "status": FORM_STATUS,
        "fields": {"type": "array", "items": FORM_FIELD},
    },
    "required": ["name", "fields"],
}

CREATE_SUBMISSION: dict[str, Any] = {
    "type": "object",
    "properties": {
        "payload": {"type": "object"},
    },
    "required": ["payload"],
}

HEALTH: dict[str, Any] = {
    "type": "object",
    "properties": {
        "service": {"type": "string"},
        "time": {"type": "string"},
    },
    "required": ["service", "time"],
}


def validate(shape: dict[str, Any], data: Any) -> Any:
    validator = Draft7Validator(shape)
    details: list[dict[str, str]] = []
    seen: set[tuple[str, str]] = set()
    for error in validator.iter_errors(data):
        for item in _error_details(error):
            key = (item["path"], item["message"])
            if key not in seen:
                seen.add(key)
                details.append(item)
    if details:
        details.sort(key=lambda item: item["path"])
        raise ValidationFailed(details)
    return _restrict(shape, data)


def _error_details(error: ValidationError) -> list[dict[str, str]]:
    base = [str(part) for part in error.absolute_path]
    # report a missing property at its own path rather than at its parent
    if error.validator == "required" and isinstance(error.instance, dict):
        return [
            {"path": ".".join([*base, name]), "message": "Required"}
            for name in error.validator_value
            if name not in error.instance
        ]
    return [{"path": ".".join(base), "message": error.message}]


def _restrict(shape: dict[str, Any], value: Any) -> Any:
    if isinstance(value, dict) and "properties" in shape:
        return {
            key: _restrict(sub_shape, value[key])
            for key, sub_shape in shape["properties"].items()
            if key in value
        }
    if isinstance(value, list) and "items" in shape:
        return [_restrict(shape["items"], item) for item in value]
    return value
