"""Field coercion helpers shared by the record ``from_dict`` constructors."""

from __future__ import annotations

from typing import Any


def required_str(data: dict[str, Any], key: str) -> str:
    """Get a required string field."""
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def optional_str(data: dict[str, Any], key: str) -> str | None:
    """Get an optional string field; empty strings count as absent."""
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise TypeError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def code(data: dict[str, Any], key: str) -> str:
    """Get a required alphabetic code in canonical uppercase."""
    return required_str(data, key).strip().upper()


def optional_code(data: dict[str, Any], key: str) -> str | None:
    """Get an optional alphabetic code in canonical uppercase."""
    value = optional_str(data, key)
    return value.strip().upper() if value is not None else None


def number(data: dict[str, Any], key: str) -> int:
    """Get a required numeric code; digit strings such as "019" are accepted."""
    value = data[key]
    if isinstance(value, bool):
        raise TypeError(f"Field '{key}' must be an integer")
    if isinstance(value, str):
        return int(value.strip())
    if not isinstance(value, int):
        raise TypeError(f"Field '{key}' must be an integer, got {type(value).__name__}")
    return value


def optional_number(data: dict[str, Any], key: str) -> int | None:
    """Get an optional numeric code."""
    if data.get(key) in (None, ""):
        return None
    return number(data, key)


def m49(data: dict[str, Any], key: str) -> str | None:
    """Get an optional M49 region reference rendered as three digits."""
    value = optional_number(data, key)
    return format_m49(value) if value is not None else None


def format_m49(value: int) -> str:
    """Render an M49 code the way the standard prints it ("019")."""
    return f"{value:03d}"


def str_tuple(data: dict[str, Any], key: str) -> tuple[str, ...]:
    """Get an optional list of strings as a tuple."""
    values = data.get(key) or []
    if not isinstance(values, list):
        raise TypeError(f"Field '{key}' must be a list")
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"Field '{key}' must contain strings")
    return tuple(values)
