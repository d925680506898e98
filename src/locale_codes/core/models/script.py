"""ISO 15924 script records."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.models import fields


@dataclass(frozen=True)
class ScriptInfo:
    """A writing system with its four-letter and numeric codes."""

    alphabetic_code: str  # e.g. "LATN"; title-cased only when rendered in a locale
    numeric_code: int
    name: str
    alias: str | None = None  # Unicode property value alias
    date: str | None = None
    unicode_version: str | None = None

    def identifiers(self) -> Iterator[tuple[IdentifierForm, str | int]]:
        """Yield every populated identifier."""
        yield IdentifierForm.ALPHA4, self.alphabetic_code
        yield IdentifierForm.NUMERIC, self.numeric_code

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScriptInfo:
        """Create from a dataset entry."""
        return cls(
            alphabetic_code=fields.code(data, "alphabetic_code"),
            numeric_code=fields.number(data, "numeric_code"),
            name=fields.required_str(data, "name"),
            alias=fields.optional_str(data, "alias"),
            date=fields.optional_str(data, "date"),
            unicode_version=fields.optional_str(data, "unicode_version"),
        )
