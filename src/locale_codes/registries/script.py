"""ISO 15924 script registry."""

from __future__ import annotations

from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.models.script import ScriptInfo
from locale_codes.core.resources.loader import SCRIPTS
from locale_codes.registries.base import Registry


class ScriptRegistry(Registry[ScriptInfo]):
    """Registry of scripts, keyed by four-letter and numeric codes."""

    NAME = SCRIPTS
    FORMS = frozenset({IdentifierForm.ALPHA4, IdentifierForm.NUMERIC})

    def scripts_for_unicode_version(self, version: str) -> list[ScriptInfo]:
        """Scripts first encoded in a Unicode version."""
        return [script for script in self.records() if script.unicode_version == version]
