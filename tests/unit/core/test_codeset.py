"""Tests for the Codeset lookup engine and Identifier forms."""

from __future__ import annotations

import threading
import time

import pytest

from locale_codes.core.codeset import Codeset, Identifier, IdentifierForm, LoadState
from locale_codes.core.errors import (
    DuplicateIdentifier,
    InvalidIdentifier,
    RegistryLoadError,
    RegistryUnavailable,
)
from locale_codes.core.models.country import CountryInfo
from locale_codes.core.models.language import LanguageInfo
from locale_codes.core.models.region import RegionInfo

COUNTRY_FORMS = (IdentifierForm.ALPHA2, IdentifierForm.ALPHA3, IdentifierForm.NUMERIC)

MEXICO = CountryInfo(code="MEX", short_code="MX", country_code=484, region_code="019")
USA = CountryInfo(code="USA", short_code="US", country_code=840, region_code="019")


def loaded(*records: CountryInfo) -> Codeset[CountryInfo]:
    codeset: Codeset[CountryInfo] = Codeset("countries", COUNTRY_FORMS)
    codeset.load(records)
    return codeset


# ============================================================================
# IDENTIFIER FORM TESTS
# ============================================================================


class TestIdentifierForm:
    """Tests for IdentifierForm and Identifier."""

    def test_widths(self):
        """Alpha forms have fixed widths, numeric has none."""
        assert IdentifierForm.ALPHA2.width == 2
        assert IdentifierForm.ALPHA3.width == 3
        assert IdentifierForm.ALPHA4.width == 4
        assert IdentifierForm.NUMERIC.width is None

    def test_for_width(self):
        """Forms are found by identifier length."""
        assert IdentifierForm.for_width(2) is IdentifierForm.ALPHA2
        assert IdentifierForm.for_width(3) is IdentifierForm.ALPHA3
        assert IdentifierForm.for_width(5) is None

    def test_is_alpha(self):
        assert IdentifierForm.ALPHA3.is_alpha
        assert not IdentifierForm.NUMERIC.is_alpha

    def test_identifier_normalizes_case(self):
        """Tagged alpha identifiers are stored uppercase."""
        assert Identifier(IdentifierForm.ALPHA3, "mex").value == "MEX"
        assert Identifier.alpha("mx") == Identifier(IdentifierForm.ALPHA2, "MX")

    def test_identifier_rejects_wrong_width(self):
        with pytest.raises(ValueError):
            Identifier(IdentifierForm.ALPHA2, "MEX")
        with pytest.raises(ValueError):
            Identifier.alpha("MEXICO")

    def test_numeric_identifier_requires_int(self):
        with pytest.raises(ValueError):
            Identifier(IdentifierForm.NUMERIC, "484")
        with pytest.raises(ValueError):
            Identifier.numeric(True)
        assert Identifier.numeric(484).value == 484


# ============================================================================
# LOAD TESTS
# ============================================================================


class TestCodesetLoad:
    """Tests for index construction."""

    def test_load_marks_ready(self):
        codeset = loaded(MEXICO)
        assert codeset.is_loaded
        assert codeset.state is LoadState.READY
        assert len(codeset) == 1

    def test_second_load_is_noop(self):
        """Initialization happens once; later loads do not replace the records."""
        codeset = loaded(MEXICO)
        codeset.load([USA])
        assert codeset.lookup("USA") is None
        assert codeset.lookup("MEX") is MEXICO

    def test_duplicate_alpha3_fails(self):
        """Two records with the same alpha-3 code fail the load."""
        clash = CountryInfo(code="MEX", short_code="XM", country_code=999)
        codeset: Codeset[CountryInfo] = Codeset("countries", COUNTRY_FORMS)

        with pytest.raises(DuplicateIdentifier) as exc_info:
            codeset.load([MEXICO, clash])

        assert exc_info.value.registry == "countries"
        assert exc_info.value.form is IdentifierForm.ALPHA3
        assert exc_info.value.value == "MEX"
        assert codeset.is_failed

    def test_duplicate_detection_ignores_case(self):
        clash = CountryInfo(code="mex", short_code="XM", country_code=999)
        codeset: Codeset[CountryInfo] = Codeset("countries", COUNTRY_FORMS)
        with pytest.raises(DuplicateIdentifier):
            codeset.load([MEXICO, clash])

    def test_duplicate_numeric_fails(self):
        clash = CountryInfo(code="XXX", short_code="XX", country_code=484)
        codeset: Codeset[CountryInfo] = Codeset("countries", COUNTRY_FORMS)
        with pytest.raises(DuplicateIdentifier) as exc_info:
            codeset.load([MEXICO, clash])
        assert exc_info.value.form is IdentifierForm.NUMERIC

    def test_failed_registry_stays_unqueryable(self):
        """After a failed load even unrelated valid identifiers are rejected."""
        clash = CountryInfo(code="MEX", short_code="XM", country_code=999)
        codeset: Codeset[CountryInfo] = Codeset("countries", COUNTRY_FORMS)
        with pytest.raises(DuplicateIdentifier):
            codeset.load([USA, MEXICO, clash])

        with pytest.raises(RegistryUnavailable) as exc_info:
            codeset.lookup("USA")
        assert isinstance(exc_info.value.__cause__, DuplicateIdentifier)

        with pytest.raises(RegistryUnavailable):
            codeset.all_codes()

    def test_failure_is_sticky(self):
        """A failed registry re-raises its original error instead of reloading."""
        clash = CountryInfo(code="MEX", short_code="XM", country_code=999)
        codeset: Codeset[CountryInfo] = Codeset("countries", COUNTRY_FORMS)
        with pytest.raises(DuplicateIdentifier) as first:
            codeset.load([MEXICO, clash])

        with pytest.raises(DuplicateIdentifier) as second:
            codeset.load([MEXICO])
        assert second.value is first.value

    def test_same_record_repeating_identifier_is_not_a_conflict(self):
        """639-3 and 639-2/T codes are often identical on one record."""
        english = LanguageInfo(
            code="ENG", reference_name="English", terminology_code="ENG", short_code="EN"
        )
        codeset: Codeset[LanguageInfo] = Codeset(
            "languages", (IdentifierForm.ALPHA2, IdentifierForm.ALPHA3)
        )
        codeset.load([english])
        assert codeset.all_codes() == [
            (IdentifierForm.ALPHA3, "ENG"),
            (IdentifierForm.ALPHA2, "EN"),
        ]

    def test_unsupported_form_is_invalid(self):
        """A record yielding a form the registry does not support fails the load."""
        codeset: Codeset[RegionInfo] = Codeset("regions", (IdentifierForm.ALPHA2,))
        with pytest.raises(InvalidIdentifier):
            codeset.load([RegionInfo(code=19, name="Americas")])

    def test_malformed_alpha_is_invalid(self):
        codeset: Codeset[CountryInfo] = Codeset("countries", COUNTRY_FORMS)
        with pytest.raises(InvalidIdentifier):
            codeset.load([CountryInfo(code="MEXX", short_code="MX", country_code=484)])

    def test_non_alphanumeric_alpha_is_invalid(self):
        codeset: Codeset[CountryInfo] = Codeset("countries", COUNTRY_FORMS)
        with pytest.raises(InvalidIdentifier):
            codeset.load([CountryInfo(code="M-X", short_code="MX", country_code=484)])

    def test_negative_numeric_is_invalid(self):
        codeset: Codeset[CountryInfo] = Codeset("countries", COUNTRY_FORMS)
        with pytest.raises(InvalidIdentifier):
            codeset.load([CountryInfo(code="MEX", short_code="MX", country_code=-1)])

    def test_load_errors_share_a_base(self):
        assert issubclass(DuplicateIdentifier, RegistryLoadError)
        assert issubclass(InvalidIdentifier, RegistryLoadError)


# ============================================================================
# LAZY INITIALIZATION TESTS
# ============================================================================


class TestCodesetLazyInit:
    """Tests for one-time initialization from a source."""

    def test_source_runs_on_first_query(self):
        calls = []

        def source():
            calls.append(1)
            return [MEXICO]

        codeset = Codeset("countries", COUNTRY_FORMS, source)
        assert calls == []
        assert codeset.lookup("MX") is MEXICO
        assert codeset.lookup("MEX") is MEXICO
        assert calls == [1]

    def test_no_source_and_no_load_is_unavailable(self):
        codeset: Codeset[CountryInfo] = Codeset("countries", COUNTRY_FORMS)
        with pytest.raises(RegistryUnavailable):
            codeset.lookup("MEX")

    def test_lazy_failure_is_chained(self):
        """A failing source surfaces as RegistryUnavailable caused by the load error."""
        clash = CountryInfo(code="MEX", short_code="XM", country_code=999)
        codeset = Codeset("countries", COUNTRY_FORMS, lambda: [MEXICO, clash])

        with pytest.raises(RegistryUnavailable) as exc_info:
            codeset.lookup("USA")
        assert isinstance(exc_info.value.__cause__, DuplicateIdentifier)

        with pytest.raises(DuplicateIdentifier):
            codeset.initialize()

    @pytest.mark.concurrency
    def test_racing_threads_initialize_once(self):
        """Concurrent first queries trigger exactly one source call."""
        calls = []
        lock = threading.Lock()

        def source():
            with lock:
                calls.append(1)
            time.sleep(0.05)
            return [MEXICO, USA]

        codeset = Codeset("countries", COUNTRY_FORMS, source)
        barrier = threading.Barrier(8)
        results: list[CountryInfo | None] = []

        def worker():
            barrier.wait()
            found = codeset.lookup("MEX")
            with lock:
                results.append(found)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert results == [MEXICO] * 8

    @pytest.mark.concurrency
    def test_racing_threads_all_see_failure(self):
        clash = CountryInfo(code="MEX", short_code="XM", country_code=999)
        codeset = Codeset("countries", COUNTRY_FORMS, lambda: [MEXICO, clash])
        barrier = threading.Barrier(4)
        errors: list[BaseException] = []
        lock = threading.Lock()

        def worker():
            barrier.wait()
            try:
                codeset.lookup("MEX")
            except RegistryUnavailable as e:
                with lock:
                    errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(errors) == 4
        assert all(isinstance(error.__cause__, DuplicateIdentifier) for error in errors)


# ============================================================================
# LOOKUP TESTS
# ============================================================================


class TestCodesetLookup:
    """Tests for lookup resolution."""

    def test_alpha2_and_alpha3_resolve_same_record(self):
        codeset = loaded(MEXICO, USA)
        assert codeset.lookup("MX") is codeset.lookup("MEX") is MEXICO

    def test_case_insensitive(self):
        codeset = loaded(MEXICO)
        assert codeset.lookup("mex") == codeset.lookup("MEX")
        assert codeset.lookup("Mx") is MEXICO

    def test_surrounding_whitespace_ignored(self):
        codeset = loaded(MEXICO)
        assert codeset.lookup("  MEX ") is MEXICO

    def test_numeric_string_and_int(self):
        codeset = loaded(MEXICO)
        assert codeset.lookup("484") is MEXICO
        assert codeset.lookup(484) is MEXICO

    def test_zero_padded_numeric(self):
        codeset = loaded(CountryInfo(code="BRA", short_code="BR", country_code=76))
        assert codeset.lookup("076") is codeset.lookup(76)

    def test_not_found_is_none(self):
        codeset = loaded(MEXICO)
        assert codeset.lookup("XYZ") is None
        assert codeset.lookup("999") is None
        assert codeset.lookup("") is None
        assert codeset.lookup("MEXICO") is None

    def test_bool_is_not_numeric(self):
        codeset = loaded(CountryInfo(code="AAA", short_code="AA", country_code=1))
        assert codeset.lookup(True) is None

    def test_numeric_first_then_alpha_fallback(self):
        """Digit strings hit the numeric index before the alpha index of the same width."""
        digits_alpha = CountryInfo(code="001", short_code="ZZ", country_code=999)
        numeric_one = CountryInfo(code="AAA", short_code="AA", country_code=1)
        codeset = loaded(digits_alpha, numeric_one)

        assert codeset.lookup("001") is numeric_one
        assert codeset.lookup_by_alpha("001") is digits_alpha

    def test_alpha_fallback_when_numeric_missing(self):
        digits_alpha = CountryInfo(code="002", short_code="ZZ", country_code=999)
        codeset = loaded(digits_alpha)
        assert codeset.lookup("002") is digits_alpha

    def test_tagged_identifier_bypasses_dispatch(self):
        digits_alpha = CountryInfo(code="001", short_code="ZZ", country_code=999)
        numeric_one = CountryInfo(code="AAA", short_code="AA", country_code=1)
        codeset = loaded(digits_alpha, numeric_one)

        assert codeset.lookup(Identifier(IdentifierForm.ALPHA3, "001")) is digits_alpha
        assert codeset.lookup(Identifier.numeric(1)) is numeric_one

    def test_tagged_identifier_for_unsupported_form(self):
        codeset = loaded(MEXICO)
        assert codeset.lookup(Identifier(IdentifierForm.ALPHA4, "LATN")) is None

    def test_lookup_by_alpha_ignores_numeric(self):
        codeset = loaded(MEXICO)
        assert codeset.lookup_by_alpha("484") is None
        assert codeset.lookup_by_alpha("mx") is MEXICO

    def test_lookup_by_numeric(self):
        codeset = loaded(MEXICO)
        assert codeset.lookup_by_numeric(484) is MEXICO
        assert codeset.lookup_by_numeric(1) is None

    def test_lookup_by_numeric_requires_int(self):
        codeset = loaded(MEXICO)
        with pytest.raises(TypeError):
            codeset.lookup_by_numeric("484")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            codeset.lookup_by_numeric(True)

    def test_absent_numeric_is_not_found(self):
        """A registry without a numeric form answers numeric queries with None."""
        codeset: Codeset[LanguageInfo] = Codeset(
            "languages", (IdentifierForm.ALPHA2, IdentifierForm.ALPHA3)
        )
        codeset.load([LanguageInfo(code="ENG", reference_name="English")])
        assert codeset.lookup_by_numeric(1) is None
        assert codeset.lookup("123") is None

    def test_contains(self):
        codeset = loaded(MEXICO)
        assert "mex" in codeset
        assert 484 in codeset
        assert "USA" not in codeset
        assert None not in codeset


# ============================================================================
# ENUMERATION TESTS
# ============================================================================


class TestCodesetEnumeration:
    """Tests for all_codes and friends."""

    def test_all_codes_in_dataset_order(self):
        """Codes follow record order, then each record's identifier order."""
        codeset = loaded(USA, MEXICO)
        assert codeset.all_codes() == [
            (IdentifierForm.ALPHA2, "US"),
            (IdentifierForm.ALPHA3, "USA"),
            (IdentifierForm.NUMERIC, 840),
            (IdentifierForm.ALPHA2, "MX"),
            (IdentifierForm.ALPHA3, "MEX"),
            (IdentifierForm.NUMERIC, 484),
        ]

    def test_all_alpha_and_numeric_codes(self):
        codeset = loaded(USA, MEXICO)
        assert codeset.all_alpha_codes() == ["US", "USA", "MX", "MEX"]
        assert codeset.all_numeric_codes() == [840, 484]

    def test_repeated_calls_are_stable(self):
        codeset = loaded(USA, MEXICO)
        assert codeset.all_codes() == codeset.all_codes()

    def test_round_trip(self):
        """Every enumerated identifier resolves to a record carrying it."""
        codeset = loaded(USA, MEXICO)
        for form, value in codeset.all_codes():
            record = codeset.lookup(value)
            assert record is not None
            assert (form, value) in list(record.identifiers())

    def test_records_and_iteration(self):
        codeset = loaded(USA, MEXICO)
        assert codeset.records() == (USA, MEXICO)
        assert list(codeset) == [USA, MEXICO]
