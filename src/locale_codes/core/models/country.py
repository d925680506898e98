"""ISO 3166-1 country records."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.models import fields


@dataclass(frozen=True)
class CountryInfo:
    """A country with its alpha and numeric codes and M49 region references.

    Region references are three-digit M49 strings ("019"), resolved through
    the region registry. The country's own name is not stored here: M49
    lists countries as well, so it is resolved from ``country_code``.
    """

    code: str  # alpha-3
    short_code: str  # alpha-2
    country_code: int  # numeric
    region_code: str | None = None
    sub_region_code: str | None = None
    intermediate_region_code: str | None = None

    @property
    def region_codes(self) -> tuple[str, ...]:
        """Populated region references, broadest first."""
        return tuple(
            code
            for code in (self.region_code, self.sub_region_code, self.intermediate_region_code)
            if code is not None
        )

    def identifiers(self) -> Iterator[tuple[IdentifierForm, str | int]]:
        """Yield every populated identifier."""
        yield IdentifierForm.ALPHA2, self.short_code
        yield IdentifierForm.ALPHA3, self.code
        yield IdentifierForm.NUMERIC, self.country_code

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CountryInfo:
        """Create from a dataset entry."""
        return cls(
            code=fields.code(data, "code"),
            short_code=fields.code(data, "short_code"),
            country_code=fields.number(data, "country_code"),
            region_code=fields.m49(data, "region_code"),
            sub_region_code=fields.m49(data, "sub_region_code"),
            intermediate_region_code=fields.m49(data, "intermediate_region_code"),
        )
