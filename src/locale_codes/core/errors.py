"""Exception hierarchy for registry loading and locale building.

A lookup that finds nothing is never an error: it returns ``None`` (or an
empty list for joins). Exceptions are reserved for inconsistent datasets,
registries that failed to initialize, and strict locale validation.
"""

from __future__ import annotations

from typing import Any


class LocaleCodesError(Exception):
    """Base class for all locale_codes errors."""

    pass


class RegistryLoadError(LocaleCodesError):
    """A registry's dataset could not be turned into a consistent index."""

    def __init__(self, registry: str, message: str) -> None:
        self.registry = registry
        super().__init__(f"[{registry}] {message}")


class DuplicateIdentifier(RegistryLoadError):
    """Two records share an identifier within the same form."""

    def __init__(self, registry: str, form: Any, value: str | int) -> None:
        self.form = form
        self.value = value
        super().__init__(
            registry,
            f"duplicate {getattr(form, 'value', form)} identifier {value!r}",
        )


class InvalidIdentifier(RegistryLoadError):
    """A record carries a malformed identifier or one the registry does not support."""

    def __init__(self, registry: str, form: Any, value: Any) -> None:
        self.form = form
        self.value = value
        super().__init__(
            registry,
            f"invalid {getattr(form, 'value', form)} identifier {value!r}",
        )


class DatasetError(RegistryLoadError):
    """The dataset file for a registry is missing or malformed."""

    def __init__(self, registry: str, detail: str) -> None:
        self.detail = detail
        super().__init__(registry, f"dataset error: {detail}")


class RegistryUnavailable(LocaleCodesError):
    """Raised when querying a registry that failed, or never got, its load.

    When the registry failed, the original load error is chained as
    ``__cause__``.
    """

    def __init__(self, registry: str) -> None:
        self.registry = registry
        super().__init__(f"Registry '{registry}' is not available")


class UnknownIdentifier(LocaleCodesError):
    """A locale component was not found in its registry (strict building)."""

    def __init__(self, component: str, value: str) -> None:
        self.component = component
        self.value = value
        super().__init__(f"Unknown {component} identifier: {value!r}")
