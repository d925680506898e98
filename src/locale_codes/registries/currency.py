"""ISO 4217 currency registry."""

from __future__ import annotations

from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.models.currency import CurrencyInfo
from locale_codes.core.resources.loader import CURRENCIES
from locale_codes.registries.base import Registry


class CurrencyRegistry(Registry[CurrencyInfo]):
    """Registry of currencies, keyed by alphabetic and numeric codes."""

    NAME = CURRENCIES
    FORMS = frozenset({IdentifierForm.ALPHA3, IdentifierForm.NUMERIC})

    def currencies_for_country_name(self, name: str) -> list[CurrencyInfo]:
        """Currencies listing an entity name (case-insensitive), in dataset order."""
        return [currency for currency in self.records() if currency.is_used_by(name)]

    def currencies_for_country(self, code: str | int) -> list[CurrencyInfo]:
        """Currencies used by a country, found through its M49 name."""
        name = self.catalog.countries.country_name(code)
        if name is None:
            return []
        return self.currencies_for_country_name(name)

    def countries_for_currency(self, code: str | int) -> list[str]:
        """Entity names that use a currency."""
        currency = self.lookup(code)
        if currency is None:
            return []
        return list(currency.standards_entities)
