"""ISO 4217 currency records."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.models import fields


@dataclass(frozen=True)
class Subdivision:
    """A minor unit of a currency, e.g. exponent 2 "cent"."""

    exponent: int
    name: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Subdivision:
        """Create from a dataset entry."""
        return cls(
            exponent=fields.number(data, "exponent"),
            name=fields.optional_str(data, "name"),
        )


@dataclass(frozen=True)
class CurrencyInfo:
    """A currency and the entities (countries) that use it."""

    alphabetic_code: str
    name: str
    numeric_code: int | None = None
    symbol: str | None = None
    subdivisions: tuple[Subdivision, ...] = ()
    standards_entities: tuple[str, ...] = ()

    @property
    def minor_unit(self) -> int | None:
        """Exponent of the first subdivision, if any."""
        return self.subdivisions[0].exponent if self.subdivisions else None

    def is_used_by(self, entity: str) -> bool:
        """Check if an entity name is listed, ignoring case."""
        wanted = entity.strip().casefold()
        return any(name.casefold() == wanted for name in self.standards_entities)

    def identifiers(self) -> Iterator[tuple[IdentifierForm, str | int]]:
        """Yield every populated identifier."""
        yield IdentifierForm.ALPHA3, self.alphabetic_code
        if self.numeric_code is not None:
            yield IdentifierForm.NUMERIC, self.numeric_code

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CurrencyInfo:
        """Create from a dataset entry."""
        subdivisions = data.get("subdivisions") or []
        if not isinstance(subdivisions, list):
            raise TypeError("Field 'subdivisions' must be a list")
        return cls(
            alphabetic_code=fields.code(data, "alphabetic_code"),
            name=fields.required_str(data, "name"),
            numeric_code=fields.optional_number(data, "numeric_code"),
            symbol=fields.optional_str(data, "symbol"),
            subdivisions=tuple(Subdivision.from_dict(item) for item in subdivisions),
            standards_entities=fields.str_tuple(data, "standards_entities"),
        )
