"""Base class for registry modules."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, ClassVar, Generic

from locale_codes.core.codeset import (
    Codeset,
    Identifier,
    IdentifierForm,
    IdentifierValue,
    R,
)

if TYPE_CHECKING:
    from locale_codes.catalog import Catalog


class Registry(Generic[R]):
    """
    One standard's records behind a ``Codeset``.

    Joins into other registries go through the bound ``Catalog`` and always
    resolve foreign keys with the target registry's ``lookup``. A registry
    never holds another registry.
    """

    NAME: ClassVar[str]
    FORMS: ClassVar[frozenset[IdentifierForm]]

    def __init__(self, codeset: Codeset[R], catalog: Catalog | None = None) -> None:
        """
        Initialize the registry.

        Args:
            codeset: Index over this registry's records
            catalog: Handle used to reach other registries for joins
        """
        self._codeset = codeset
        self._catalog = catalog

    @classmethod
    def create(
        cls,
        source: Callable[[], Iterable[R]] | None = None,
        catalog: Catalog | None = None,
    ) -> Registry[R]:
        """Create a registry whose codeset loads lazily from ``source``."""
        return cls(Codeset(cls.NAME, cls.FORMS, source), catalog)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._codeset!r})"

    @property
    def name(self) -> str:
        """Registry name."""
        return self._codeset.name

    @property
    def codeset(self) -> Codeset[R]:
        """Underlying index."""
        return self._codeset

    @property
    def catalog(self) -> Catalog:
        """Catalog used for cross-registry joins."""
        if self._catalog is None:
            raise RuntimeError(f"Registry '{self.name}' is not bound to a catalog")
        return self._catalog

    # =========================================================================
    # LOOKUP SURFACE
    # =========================================================================

    def lookup(self, identifier: str | int | Identifier) -> R | None:
        """Look up a record by any identifier form this registry supports."""
        return self._codeset.lookup(identifier)

    def lookup_by_alpha(self, code: str) -> R | None:
        """Look up a record by alphabetic code only."""
        return self._codeset.lookup_by_alpha(code)

    def lookup_by_numeric(self, code: int) -> R | None:
        """Look up a record by numeric code only."""
        return self._codeset.lookup_by_numeric(code)

    def all_codes(self) -> list[tuple[IdentifierForm, IdentifierValue]]:
        """All identifiers, in dataset order."""
        return self._codeset.all_codes()

    def all_alpha_codes(self) -> list[str]:
        """All alphabetic identifiers, in dataset order."""
        return self._codeset.all_alpha_codes()

    def all_numeric_codes(self) -> list[int]:
        """All numeric identifiers, in dataset order."""
        return self._codeset.all_numeric_codes()

    def records(self) -> tuple[R, ...]:
        """All records, in dataset order."""
        return self._codeset.records()

    def __len__(self) -> int:
        return len(self._codeset)

    def __iter__(self) -> Iterator[R]:
        return iter(self._codeset)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._codeset
