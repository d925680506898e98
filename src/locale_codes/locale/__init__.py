"""Locale string composition."""

from locale_codes.locale.builder import LocaleBuilder, LocaleMode

__all__ = [
    "LocaleBuilder",
    "LocaleMode",
]
