"""Registry modules, one per standard."""

from locale_codes.registries.base import Registry
from locale_codes.registries.country import CountryRegistry
from locale_codes.registries.currency import CurrencyRegistry
from locale_codes.registries.language import LanguageRegistry
from locale_codes.registries.region import RegionRegistry
from locale_codes.registries.script import ScriptRegistry

__all__ = [
    "CountryRegistry",
    "CurrencyRegistry",
    "LanguageRegistry",
    "RegionRegistry",
    "Registry",
    "ScriptRegistry",
]
