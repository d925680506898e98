"""Catalog - explicit handle over all registries.

Usage:
    catalog = Catalog.open()
    mexico = catalog.countries.lookup("MEX")
    americas = catalog.regions.lookup(mexico.region_code)
    pesos = catalog.currencies.currencies_for_country_name("Mexico")

Each registry initializes lazily and independently on first query. Tests
build isolated handles with ``Catalog.from_records`` instead of sharing
the process-wide default.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, ClassVar

import structlog

from locale_codes.core.codeset import Codeset
from locale_codes.core.models.config import Config
from locale_codes.core.resources.loader import (
    COUNTRIES,
    CURRENCIES,
    LANGUAGES,
    REGIONS,
    REGISTRY_NAMES,
    SCRIPTS,
    DatasetLoader,
)
from locale_codes.registries import (
    CountryRegistry,
    CurrencyRegistry,
    LanguageRegistry,
    RegionRegistry,
    Registry,
    ScriptRegistry,
)

logger = structlog.get_logger(__name__)

Source = Callable[[], Iterable[Any]]

REGISTRY_ALIASES: dict[str, str] = {
    "language": LANGUAGES,
    "country": COUNTRIES,
    "currency": CURRENCIES,
    "script": SCRIPTS,
    "region": REGIONS,
}


class Catalog:
    """Owns one registry per standard and resolves joins between them."""

    _default: ClassVar[Catalog | None] = None
    _default_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        sources: Mapping[str, Source] | None = None,
        config: Config | None = None,
    ) -> None:
        """
        Initialize the catalog.

        Args:
            sources: Per-registry callables producing records on first use;
                a registry without a source stays unavailable until loaded
            config: Settings shared with the locale builder and CLI
        """
        sources = dict(sources or {})
        unknown = set(sources) - set(REGISTRY_NAMES)
        if unknown:
            raise ValueError(f"Unknown registries: {sorted(unknown)}")

        self.config = config or Config()

        def codeset(registry: type[Registry[Any]]) -> Codeset[Any]:
            return Codeset(registry.NAME, registry.FORMS, sources.get(registry.NAME))

        self.languages = LanguageRegistry(codeset(LanguageRegistry), self)
        self.countries = CountryRegistry(codeset(CountryRegistry), self)
        self.currencies = CurrencyRegistry(codeset(CurrencyRegistry), self)
        self.scripts = ScriptRegistry(codeset(ScriptRegistry), self)
        self.regions = RegionRegistry(codeset(RegionRegistry), self)

    def __repr__(self) -> str:
        return f"Catalog({', '.join(repr(registry) for registry in self)})"

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def open(cls, config: Config | None = None) -> Catalog:
        """Open a catalog over the packaged (or configured) dataset."""
        config = config or Config()
        loader = DatasetLoader(config.data)
        catalog = cls({name: loader.source_for(name) for name in REGISTRY_NAMES}, config)
        if config.eager_load:
            catalog.load_all()
        return catalog

    @classmethod
    def from_records(
        cls,
        *,
        languages: Iterable[Any] = (),
        countries: Iterable[Any] = (),
        currencies: Iterable[Any] = (),
        scripts: Iterable[Any] = (),
        regions: Iterable[Any] = (),
        config: Config | None = None,
    ) -> Catalog:
        """Build a catalog over in-memory records; omitted registries are empty."""
        datasets = {
            LANGUAGES: tuple(languages),
            COUNTRIES: tuple(countries),
            CURRENCIES: tuple(currencies),
            SCRIPTS: tuple(scripts),
            REGIONS: tuple(regions),
        }
        return cls({name: _fixed(records) for name, records in datasets.items()}, config)

    @classmethod
    def get_or_init(cls, config: Config | None = None) -> Catalog:
        """Get the process-wide catalog, opening it on first call."""
        if cls._default is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls.open(config)
                    logger.debug("[CATALOG] Default catalog opened")
        return cls._default

    @classmethod
    def reset(cls) -> None:
        """Drop the process-wide catalog (for testing)."""
        with cls._default_lock:
            cls._default = None

    # =========================================================================
    # ACCESS
    # =========================================================================

    def registries(self) -> dict[str, Registry[Any]]:
        """All registries by name."""
        return {registry.name: registry for registry in self}

    def registry(self, name: str) -> Registry[Any]:
        """Get a registry by name ("countries") or alias ("country")."""
        key = name.strip().lower()
        key = REGISTRY_ALIASES.get(key, key)
        registries = self.registries()
        if key not in registries:
            raise KeyError(f"Unknown registry: {name}")
        return registries[key]

    def __iter__(self) -> Iterator[Registry[Any]]:
        yield self.languages
        yield self.countries
        yield self.currencies
        yield self.scripts
        yield self.regions

    def load_all(self) -> None:
        """
        Initialize every registry now.

        Raises:
            RegistryLoadError: The first registry whose dataset is inconsistent
        """
        for registry in self:
            registry.codeset.initialize()

    def stats(self) -> dict[str, int]:
        """Record count per registry."""
        return {registry.name: len(registry) for registry in self}


def _fixed(records: tuple[Any, ...]) -> Source:
    """Source returning a fixed record tuple."""

    def source() -> tuple[Any, ...]:
        return records

    return source
