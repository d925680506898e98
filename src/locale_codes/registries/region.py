"""UN M49 region registry.

Codes are numeric; ``lookup("019")``, ``lookup("19")`` and ``lookup(19)``
all resolve the same area.
"""

from __future__ import annotations

from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.models.region import RegionInfo, RegionKind
from locale_codes.core.resources.loader import REGIONS
from locale_codes.registries.base import Registry
from locale_codes.registries.country import normalize_m49


class RegionRegistry(Registry[RegionInfo]):
    """Registry of M49 areas."""

    NAME = REGIONS
    FORMS = frozenset({IdentifierForm.NUMERIC})

    def is_country(self, code: str | int) -> bool:
        """Check if an M49 code denotes a country rather than a grouping."""
        region = self.lookup(code)
        return region is not None and region.kind is RegionKind.COUNTRY

    def subregions_of(self, code: str | int) -> list[RegionInfo]:
        """
        Areas one level below an area, derived from country references.

        M49 records carry no parent links; the hierarchy is read from the
        region chains of the country registry, in first-seen order.
        """
        parent = normalize_m49(code)
        if parent is None:
            return []

        children: list[str] = []
        for country in self.catalog.countries.records():
            chain = country.region_codes
            if parent in chain:
                position = chain.index(parent)
                if position + 1 < len(chain) and chain[position + 1] not in children:
                    children.append(chain[position + 1])

        areas = (self.lookup(child) for child in children)
        return [area for area in areas if area is not None]
