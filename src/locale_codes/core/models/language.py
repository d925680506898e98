"""ISO 639 language records."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.models import fields


class LanguageScope(str, Enum):
    """ISO 639-3 scope of a language identifier."""

    INDIVIDUAL = "individual"
    MACRO_LANGUAGE = "macro_language"
    SPECIAL = "special"

    @classmethod
    def from_string(cls, value: str) -> LanguageScope:
        """Parse scope from a dataset value ("I", "M", "S" or the full name)."""
        value = value.strip().lower()
        if value in ("i", "individual"):
            return cls.INDIVIDUAL
        if value in ("m", "macro", "macro_language", "macrolanguage"):
            return cls.MACRO_LANGUAGE
        if value in ("s", "special"):
            return cls.SPECIAL
        raise ValueError(f"Unknown language scope: {value}")


class LanguageType(str, Enum):
    """ISO 639-3 language type."""

    LIVING = "living"
    EXTINCT = "extinct"
    ANCIENT = "ancient"
    HISTORICAL = "historical"
    CONSTRUCTED = "constructed"
    SPECIAL = "special"

    @classmethod
    def from_string(cls, value: str) -> LanguageType:
        """Parse type from a dataset value ("L", "E", ... or the full name)."""
        value = value.strip().lower()
        for member in cls:
            if value in (member.value, member.value[0]):
                return member
        raise ValueError(f"Unknown language type: {value}")


@dataclass(frozen=True)
class LanguageInfo:
    """A language identified by ISO 639-3, with its 639-1 and 639-2 codes."""

    code: str  # ISO 639-3
    reference_name: str
    indigenous_name: str | None = None
    other_names: tuple[str, ...] = ()
    bibliographic_code: str | None = None  # ISO 639-2/B
    terminology_code: str | None = None  # ISO 639-2/T
    short_code: str | None = None  # ISO 639-1
    scope: LanguageScope = LanguageScope.INDIVIDUAL
    language_type: LanguageType = LanguageType.LIVING
    family_members: tuple[str, ...] = ()  # 639-3 codes, macro-languages only

    @property
    def is_macro_language(self) -> bool:
        """Check if this is a macro-language."""
        return self.scope is LanguageScope.MACRO_LANGUAGE

    def identifiers(self) -> Iterator[tuple[IdentifierForm, str]]:
        """Yield every populated identifier."""
        yield IdentifierForm.ALPHA3, self.code
        if self.terminology_code:
            yield IdentifierForm.ALPHA3, self.terminology_code
        if self.bibliographic_code:
            yield IdentifierForm.ALPHA3, self.bibliographic_code
        if self.short_code:
            yield IdentifierForm.ALPHA2, self.short_code

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LanguageInfo:
        """Create from a dataset entry."""
        return cls(
            code=fields.code(data, "code"),
            reference_name=fields.required_str(data, "reference_name"),
            indigenous_name=fields.optional_str(data, "indigenous_name"),
            other_names=fields.str_tuple(data, "other_names"),
            bibliographic_code=fields.optional_code(data, "bibliographic_code"),
            terminology_code=fields.optional_code(data, "terminology_code"),
            short_code=fields.optional_code(data, "short_code"),
            scope=LanguageScope.from_string(fields.optional_str(data, "scope") or "individual"),
            language_type=LanguageType.from_string(
                fields.optional_str(data, "language_type") or "living"
            ),
            family_members=tuple(code.upper() for code in fields.str_tuple(data, "family_members")),
        )
