"""Core module - codeset engine, records, errors and dataset loading."""

from locale_codes.core.codeset import Codeset, Identifier, IdentifierForm, LoadState

__all__ = [
    "Codeset",
    "Identifier",
    "IdentifierForm",
    "LoadState",
]
