"""UN M49 region records."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.models import fields


class RegionKind(str, Enum):
    """Level of an M49 area in the region hierarchy."""

    WORLD = "world"
    REGION = "region"
    SUB_REGION = "sub_region"
    INTERMEDIATE_REGION = "intermediate_region"
    COUNTRY = "country"


@dataclass(frozen=True)
class RegionInfo:
    """An M49 area: a region, a sub-region, or a country."""

    code: int
    name: str
    kind: RegionKind = RegionKind.REGION

    @property
    def m49(self) -> str:
        """Code rendered as the three digits M49 uses."""
        return fields.format_m49(self.code)

    def identifiers(self) -> Iterator[tuple[IdentifierForm, int]]:
        """Yield every populated identifier."""
        yield IdentifierForm.NUMERIC, self.code

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RegionInfo:
        """Create from a dataset entry."""
        return cls(
            code=fields.number(data, "code"),
            name=fields.required_str(data, "name"),
            kind=RegionKind(data.get("kind") or RegionKind.REGION.value),
        )
