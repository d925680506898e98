"""ISO 639 language registry.

A single ``lookup`` accepts both 639-1 (two letters) and 639-2/639-3 (three
letters) codes; the terminology and bibliographic variants of 639-2 share
the alpha-3 keyspace with 639-3.
"""

from __future__ import annotations

from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.models.language import LanguageInfo
from locale_codes.core.resources.loader import LANGUAGES
from locale_codes.registries.base import Registry


class LanguageRegistry(Registry[LanguageInfo]):
    """Registry of languages."""

    NAME = LANGUAGES
    FORMS = frozenset({IdentifierForm.ALPHA2, IdentifierForm.ALPHA3})

    def family_members(self, code: str) -> list[LanguageInfo]:
        """Members of a macro-language, in listed order; unknown codes are skipped."""
        language = self.lookup(code)
        if language is None:
            return []
        members = (self.lookup(member) for member in language.family_members)
        return [member for member in members if member is not None]

    def macro_language_for(self, code: str) -> LanguageInfo | None:
        """Find the macro-language that lists this language as a member."""
        language = self.lookup(code)
        if language is None:
            return None
        for candidate in self.records():
            if candidate.is_macro_language and language.code in candidate.family_members:
                return candidate
        return None
