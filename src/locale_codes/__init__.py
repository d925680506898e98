"""locale_codes - query layer over ISO language, country, currency, script and M49 region codes."""

from locale_codes.catalog import Catalog
from locale_codes.core.codeset import Codeset, Identifier, IdentifierForm
from locale_codes.core.errors import (
    DatasetError,
    DuplicateIdentifier,
    InvalidIdentifier,
    LocaleCodesError,
    RegistryLoadError,
    RegistryUnavailable,
    UnknownIdentifier,
)
from locale_codes.core.models import (
    CountryInfo,
    CurrencyInfo,
    LanguageInfo,
    RegionInfo,
    ScriptInfo,
)
from locale_codes.locale import LocaleBuilder, LocaleMode

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "Codeset",
    "CountryInfo",
    "CurrencyInfo",
    "DatasetError",
    "DuplicateIdentifier",
    "Identifier",
    "IdentifierForm",
    "InvalidIdentifier",
    "LanguageInfo",
    "LocaleBuilder",
    "LocaleCodesError",
    "LocaleMode",
    "RegionInfo",
    "RegistryLoadError",
    "RegistryUnavailable",
    "ScriptInfo",
    "UnknownIdentifier",
    "__version__",
]
