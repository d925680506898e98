"""ISO 3166-1 country registry and its joins into the M49 region registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.models.country import CountryInfo
from locale_codes.core.models.fields import format_m49
from locale_codes.core.resources.loader import COUNTRIES
from locale_codes.registries.base import Registry

if TYPE_CHECKING:
    from locale_codes.core.models.region import RegionInfo


def normalize_m49(code: str | int) -> str | None:
    """Render a region reference as three digits, or None if it is not numeric."""
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return format_m49(code) if code >= 0 else None
    text = code.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return format_m49(int(text))


class CountryRegistry(Registry[CountryInfo]):
    """Registry of countries, keyed by alpha-2, alpha-3 and numeric codes."""

    NAME = COUNTRIES
    FORMS = frozenset({IdentifierForm.ALPHA2, IdentifierForm.ALPHA3, IdentifierForm.NUMERIC})

    def region_for_country(self, code: str | int) -> RegionInfo | None:
        """Resolve a country's top-level region."""
        country = self.lookup(code)
        if country is None or country.region_code is None:
            return None
        return self.catalog.regions.lookup(country.region_code)

    def regions_for_country(self, code: str | int) -> list[RegionInfo]:
        """Resolve region, sub-region and intermediate region, broadest first."""
        country = self.lookup(code)
        if country is None:
            return []
        regions = (self.catalog.regions.lookup(ref) for ref in country.region_codes)
        return [region for region in regions if region is not None]

    def country_name(self, code: str | int) -> str | None:
        """Resolve a country's name from the M49 entry for its numeric code."""
        country = self.lookup(code)
        if country is None:
            return None
        area = self.catalog.regions.lookup_by_numeric(country.country_code)
        return area.name if area is not None else None

    def countries_in_region(self, region_code: str | int) -> list[CountryInfo]:
        """Countries referencing an M49 area at any level, in dataset order."""
        wanted = normalize_m49(region_code)
        if wanted is None:
            return []
        return [country for country in self.records() if wanted in country.region_codes]
