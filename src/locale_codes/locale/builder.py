"""Locale identifier builder.

Composes ``language[-Script][-REGION]`` strings. In strict mode every
component must resolve in its registry; in lenient mode components are
taken as given. Both modes strip surrounding whitespace and apply the same
casing: language lower, script title, region upper. Nothing else is
rewritten (no fallback matching, no canonical-equivalent substitution).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING

from locale_codes.core.errors import UnknownIdentifier

if TYPE_CHECKING:
    from locale_codes.catalog import Catalog
    from locale_codes.core.models.config import Config

SEPARATORS = ("-", "_")


class LocaleMode(str, Enum):
    """Whether components are validated against their registries."""

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True)
class LocaleBuilder:
    """Immutable builder for a locale string.

    Example:
        >>> LocaleBuilder("sr", script="latn", region="rs", mode="lenient").build()
        'sr-Latn-RS'
    """

    language: str
    script: str | None = None
    region: str | None = None
    mode: LocaleMode = LocaleMode.STRICT
    separator: str = "-"
    catalog: Catalog | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Strip components and validate arguments that are wrong in either mode."""
        object.__setattr__(self, "language", (self.language or "").strip())
        object.__setattr__(self, "script", (self.script or "").strip() or None)
        object.__setattr__(self, "region", (self.region or "").strip() or None)
        if not self.language:
            raise ValueError("Language is required")
        if self.separator not in SEPARATORS:
            raise ValueError(f"Separator must be one of {SEPARATORS}: {self.separator!r}")
        object.__setattr__(self, "mode", LocaleMode(self.mode))

    @classmethod
    def from_config(
        cls,
        language: str,
        script: str | None = None,
        region: str | None = None,
        *,
        config: Config,
        catalog: Catalog | None = None,
    ) -> LocaleBuilder:
        """Create a builder using the configured mode and separator."""
        return cls(
            language,
            script,
            region,
            mode=LocaleMode(config.locale.default_mode),
            separator=config.locale.separator,
            catalog=catalog,
        )

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    @property
    def is_strict(self) -> bool:
        """Check if components are validated."""
        return self.mode is LocaleMode.STRICT

    def with_script(self, script: str | None) -> LocaleBuilder:
        """Return a builder with a different script."""
        return replace(self, script=script)

    def with_region(self, region: str | None) -> LocaleBuilder:
        """Return a builder with a different region."""
        return replace(self, region=region)

    def strict(self) -> LocaleBuilder:
        """Return a builder that validates components."""
        return replace(self, mode=LocaleMode.STRICT)

    def lenient(self) -> LocaleBuilder:
        """Return a builder that accepts components verbatim."""
        return replace(self, mode=LocaleMode.LENIENT)

    # =========================================================================
    # BUILDING
    # =========================================================================

    def validate(self) -> None:
        """
        Check every component against its registry (strict mode only).

        Components are checked in order language, script, region; the first
        unknown one is reported.

        Raises:
            UnknownIdentifier: A component is not in its registry
        """
        if not self.is_strict:
            return

        from locale_codes.catalog import Catalog

        catalog = self.catalog or Catalog.get_or_init()

        if catalog.languages.lookup(self.language) is None:
            raise UnknownIdentifier("language", self.language)

        if self.script and catalog.scripts.lookup_by_alpha(self.script) is None:
            raise UnknownIdentifier("script", self.script)

        if self.region:
            if self.region.isascii() and self.region.isdigit():
                found = catalog.regions.lookup(self.region)
            else:
                found = catalog.countries.lookup_by_alpha(self.region)
            if found is None:
                raise UnknownIdentifier("region", self.region)

    def build(self) -> str:
        """
        Compose the locale string.

        Raises:
            UnknownIdentifier: Strict mode and a component is unknown
        """
        self.validate()

        parts = [self.language.lower()]
        if self.script:
            parts.append(self.script.capitalize())
        if self.region:
            parts.append(self.region.upper())
        return self.separator.join(parts)
