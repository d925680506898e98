"""Generic multi-key lookup engine shared by every registry.

A ``Codeset`` indexes a fixed set of records by each identifier form the
registry supports (alpha-2, alpha-3, alpha-4, numeric). It is built exactly
once, either explicitly through ``load()`` or lazily on first query from a
``source`` callable, and is read-only afterwards.

Resolution order for ``lookup(str)``:
    1. all-digit input is tried against the numeric index,
    2. then against the alpha index whose width equals the input length,
    3. any other input goes to the alpha index of its exact length.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Protocol, TypeVar

import structlog

from locale_codes.core.errors import (
    DuplicateIdentifier,
    InvalidIdentifier,
    RegistryLoadError,
    RegistryUnavailable,
)

logger = structlog.get_logger(__name__)


class IdentifierForm(str, Enum):
    """Distinct identifier keyspaces within a registry."""

    ALPHA2 = "alpha2"
    ALPHA3 = "alpha3"
    ALPHA4 = "alpha4"
    NUMERIC = "numeric"

    @property
    def is_alpha(self) -> bool:
        """Check if this is an alphabetic form."""
        return self is not IdentifierForm.NUMERIC

    @property
    def width(self) -> int | None:
        """Fixed length of alphabetic identifiers in this form."""
        return _ALPHA_WIDTHS.get(self)

    @classmethod
    def for_width(cls, width: int) -> IdentifierForm | None:
        """Get the alphabetic form for an identifier length."""
        for form, form_width in _ALPHA_WIDTHS.items():
            if form_width == width:
                return form
        return None


_ALPHA_WIDTHS: dict[IdentifierForm, int] = {
    IdentifierForm.ALPHA2: 2,
    IdentifierForm.ALPHA3: 3,
    IdentifierForm.ALPHA4: 4,
}


IdentifierValue = str | int


@dataclass(frozen=True)
class Identifier:
    """An identifier tagged with its form.

    Passing an ``Identifier`` to ``Codeset.lookup`` consults exactly one
    index, bypassing length and digit based dispatch.
    """

    form: IdentifierForm
    value: IdentifierValue

    def __post_init__(self) -> None:
        """Validate and normalize the tagged value."""
        if self.form is IdentifierForm.NUMERIC:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise ValueError(f"Numeric identifier must be an int: {self.value!r}")
            return
        if not isinstance(self.value, str) or len(self.value) != self.form.width:
            raise ValueError(f"Invalid {self.form.value} identifier: {self.value!r}")
        object.__setattr__(self, "value", self.value.upper())

    @classmethod
    def alpha(cls, code: str) -> Identifier:
        """Tag an alphabetic code by its length."""
        form = IdentifierForm.for_width(len(code))
        if form is None:
            raise ValueError(f"No alphabetic form has width {len(code)}: {code!r}")
        return cls(form, code)

    @classmethod
    def numeric(cls, code: int) -> Identifier:
        """Tag a numeric code."""
        return cls(IdentifierForm.NUMERIC, code)

    def __str__(self) -> str:
        return str(self.value)


class CodedRecord(Protocol):
    """Anything that can enumerate its own identifiers."""

    def identifiers(self) -> Iterator[tuple[IdentifierForm, IdentifierValue]]: ...


R = TypeVar("R", bound=CodedRecord)


class LoadState(str, Enum):
    """One-time initialization state of a codeset."""

    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


class Codeset(Generic[R]):
    """
    Multi-key index over an immutable set of records.

    Initialization is guarded by a per-codeset lock and happens once. After
    that, queries are plain dictionary reads with no locking.
    """

    def __init__(
        self,
        name: str,
        forms: Iterable[IdentifierForm],
        source: Callable[[], Iterable[R]] | None = None,
    ) -> None:
        """
        Initialize an empty codeset.

        Args:
            name: Registry name, used in errors and log events
            forms: Identifier forms this registry supports
            source: Optional callable producing the records on first query
        """
        self.name = name
        self.forms = frozenset(forms)
        self._source = source
        self._lock = threading.Lock()
        self._state = LoadState.PENDING
        self._error: RegistryLoadError | None = None

        self._records: tuple[R, ...] = ()
        self._indices: dict[IdentifierForm, dict[IdentifierValue, R]] = {}
        self._codes: tuple[tuple[IdentifierForm, IdentifierValue], ...] = ()

    def __repr__(self) -> str:
        return f"Codeset(name={self.name!r}, state={self._state.value}, records={len(self._records)})"

    # =========================================================================
    # INITIALIZATION
    # =========================================================================

    @property
    def state(self) -> LoadState:
        """Get the initialization state."""
        return self._state

    @property
    def is_loaded(self) -> bool:
        """Check if the indices are built and queryable."""
        return self._state is LoadState.READY

    @property
    def is_failed(self) -> bool:
        """Check if initialization failed."""
        return self._state is LoadState.FAILED

    def load(self, records: Iterable[R]) -> None:
        """
        Build the indices from a record sequence.

        A second call after a successful load is a no-op. A call after a
        failed load re-raises the original error.

        Raises:
            DuplicateIdentifier: Two records share an identifier of one form
            InvalidIdentifier: A record carries a malformed or unsupported identifier
        """
        if self._state is LoadState.READY:
            return
        with self._lock:
            self._initialize(lambda: records)

    def initialize(self) -> None:
        """
        Run the one-time initialization from ``source``.

        Callers racing on the first call block until it completes and then
        observe the same outcome.

        Raises:
            RegistryLoadError: The dataset is inconsistent (now or on an earlier attempt)
            RegistryUnavailable: No source was given and ``load`` was never called
        """
        if self._state is LoadState.READY:
            return

        with self._lock:
            if self._state is LoadState.PENDING and self._source is None:
                raise RegistryUnavailable(self.name)
            self._initialize(self._source)  # type: ignore[arg-type]

    def _ensure_loaded(self) -> None:
        """Initialize on first query; report failures as RegistryUnavailable."""
        if self._state is LoadState.READY:
            return
        try:
            self.initialize()
        except RegistryLoadError as e:
            raise RegistryUnavailable(self.name) from e

    def _initialize(self, supplier: Callable[[], Iterable[R]]) -> None:
        """Build and publish indices. Caller must hold the lock."""
        if self._state is LoadState.READY:
            return
        if self._state is LoadState.FAILED and self._error is not None:
            raise self._error

        try:
            records = tuple(supplier())
            indices, codes = self._build(records)
        except RegistryLoadError as e:
            self._error = e
            self._state = LoadState.FAILED
            logger.error("[CODESET] Load failed", registry=self.name, error=str(e))
            raise

        self._records = records
        self._indices = indices
        self._codes = tuple(codes)
        self._state = LoadState.READY

        logger.info(
            "[CODESET] Loaded",
            registry=self.name,
            records=len(records),
            identifiers=len(codes),
        )

    def _build(
        self, records: tuple[R, ...]
    ) -> tuple[dict[IdentifierForm, dict[IdentifierValue, R]], list[tuple[IdentifierForm, IdentifierValue]]]:
        """Index every identifier of every record, rejecting conflicts."""
        indices: dict[IdentifierForm, dict[IdentifierValue, R]] = {form: {} for form in self.forms}
        codes: list[tuple[IdentifierForm, IdentifierValue]] = []

        for record in records:
            for form, value in record.identifiers():
                key = self._index_key(form, value)
                index = indices[form]
                existing = index.get(key)
                if existing is None:
                    index[key] = record
                    codes.append((form, key))
                elif existing is not record:
                    raise DuplicateIdentifier(self.name, form, key)

        return indices, codes

    def _index_key(self, form: IdentifierForm, value: object) -> IdentifierValue:
        """Validate a dataset identifier and return its canonical key."""
        if form not in self.forms:
            raise InvalidIdentifier(self.name, form, value)

        if form is IdentifierForm.NUMERIC:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidIdentifier(self.name, form, value)
            return value

        if (
            not isinstance(value, str)
            or len(value) != form.width
            or not value.isascii()
            or not value.isalnum()
        ):
            raise InvalidIdentifier(self.name, form, value)
        return value.upper()

    # =========================================================================
    # QUERIES
    # =========================================================================

    def lookup(self, identifier: str | int | Identifier) -> R | None:
        """
        Look up a record by any identifier form the registry supports.

        Args:
            identifier: Alphabetic code (any case), numeric code as int or
                digit string, or a tagged ``Identifier``

        Returns:
            The matching record, or None
        """
        self._ensure_loaded()

        if isinstance(identifier, Identifier):
            index = self._indices.get(identifier.form)
            return index.get(identifier.value) if index is not None else None

        if isinstance(identifier, bool):
            return None
        if isinstance(identifier, int):
            return self._find_numeric(identifier)

        text = identifier.strip()
        if text.isascii() and text.isdigit():
            found = self._find_numeric(int(text))
            if found is not None:
                return found
        return self._find_alpha(text)

    def lookup_by_alpha(self, code: str) -> R | None:
        """Look up a record using alphabetic indices only."""
        self._ensure_loaded()
        return self._find_alpha(code.strip())

    def lookup_by_numeric(self, code: int) -> R | None:
        """Look up a record using the numeric index only."""
        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError(f"Numeric code must be an int, got {type(code).__name__}")
        self._ensure_loaded()
        return self._find_numeric(code)

    def _find_alpha(self, text: str) -> R | None:
        form = IdentifierForm.for_width(len(text))
        if form is None:
            return None
        index = self._indices.get(form)
        if index is None:
            return None
        return index.get(text.upper())

    def _find_numeric(self, code: int) -> R | None:
        index = self._indices.get(IdentifierForm.NUMERIC)
        if index is None:
            return None
        return index.get(code)

    # =========================================================================
    # ENUMERATION
    # =========================================================================

    def all_codes(self) -> list[tuple[IdentifierForm, IdentifierValue]]:
        """All identifiers as (form, value) pairs, in dataset order."""
        self._ensure_loaded()
        return list(self._codes)

    def all_alpha_codes(self) -> list[str]:
        """All alphabetic identifiers, in dataset order."""
        self._ensure_loaded()
        return [str(value) for form, value in self._codes if form.is_alpha]

    def all_numeric_codes(self) -> list[int]:
        """All numeric identifiers, in dataset order."""
        self._ensure_loaded()
        return [int(value) for form, value in self._codes if form is IdentifierForm.NUMERIC]

    def records(self) -> tuple[R, ...]:
        """The full record set, in dataset order."""
        self._ensure_loaded()
        return self._records

    def __len__(self) -> int:
        return len(self.records())

    def __iter__(self) -> Iterator[R]:
        return iter(self.records())

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, (str, int, Identifier)):
            return False
        return self.lookup(identifier) is not None
