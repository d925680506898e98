"""Record types and configuration models."""

from locale_codes.core.models.config import Config, DataConfig, LocaleConfig, LogConfig
from locale_codes.core.models.country import CountryInfo
from locale_codes.core.models.currency import CurrencyInfo, Subdivision
from locale_codes.core.models.language import LanguageInfo, LanguageScope, LanguageType
from locale_codes.core.models.region import RegionInfo, RegionKind
from locale_codes.core.models.script import ScriptInfo

__all__ = [
    # Config
    "Config",
    "DataConfig",
    "LocaleConfig",
    "LogConfig",
    # Records
    "CountryInfo",
    "CurrencyInfo",
    "LanguageInfo",
    "LanguageScope",
    "LanguageType",
    "RegionInfo",
    "RegionKind",
    "ScriptInfo",
    "Subdivision",
]
