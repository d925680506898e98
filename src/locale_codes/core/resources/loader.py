"""Dataset Loader - read the generated registry datasets.

Each registry ships as one JSON file (an array of objects whose keys match
the record fields) embedded in the ``locale_codes.data`` package. A
configured ``data_dir`` replaces the packaged files. Files are only read
from inside a registry's one-time initialization, never at query time.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from functools import partial
from importlib import resources
from pathlib import Path
from typing import Any

import structlog

from locale_codes.core.errors import DatasetError
from locale_codes.core.models.config import DataConfig
from locale_codes.core.models.country import CountryInfo
from locale_codes.core.models.currency import CurrencyInfo
from locale_codes.core.models.language import LanguageInfo
from locale_codes.core.models.region import RegionInfo
from locale_codes.core.models.script import ScriptInfo

logger = structlog.get_logger(__name__)

LANGUAGES = "languages"
COUNTRIES = "countries"
CURRENCIES = "currencies"
SCRIPTS = "scripts"
REGIONS = "regions"

REGISTRY_NAMES: tuple[str, ...] = (LANGUAGES, COUNTRIES, CURRENCIES, SCRIPTS, REGIONS)

RECORD_PARSERS: dict[str, Callable[[dict[str, Any]], Any]] = {
    LANGUAGES: LanguageInfo.from_dict,
    COUNTRIES: CountryInfo.from_dict,
    CURRENCIES: CurrencyInfo.from_dict,
    SCRIPTS: ScriptInfo.from_dict,
    REGIONS: RegionInfo.from_dict,
}


class DatasetLoader:
    """
    Turn registry dataset files into record sequences.

    The loader holds no records itself; every ``load`` call re-reads and
    re-parses. Codesets call it once through ``source_for``.
    """

    PACKAGE = "locale_codes.data"

    def __init__(self, config: DataConfig | None = None) -> None:
        """
        Initialize DatasetLoader.

        Args:
            config: Dataset location; packaged files when omitted
        """
        self.config = config or DataConfig()

    def source_for(self, registry: str) -> Callable[[], list[Any]]:
        """Get a zero-argument callable that loads one registry."""
        if registry not in RECORD_PARSERS:
            raise ValueError(f"Unknown registry: {registry}")
        return partial(self.load, registry)

    def load(self, registry: str) -> list[Any]:
        """
        Read and parse the dataset for a registry.

        Raises:
            DatasetError: File missing, not valid JSON, or entries malformed
        """
        parse = RECORD_PARSERS[registry]
        entries = self.read_entries(registry)

        records = []
        for position, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise DatasetError(registry, f"entry {position} is not an object")
            try:
                records.append(parse(entry))
            except KeyError as e:
                raise DatasetError(registry, f"entry {position} is missing field {e}") from e
            except (TypeError, ValueError) as e:
                raise DatasetError(registry, f"entry {position}: {e}") from e

        logger.debug("[DATASET] Parsed", registry=registry, records=len(records))
        return records

    def read_entries(self, registry: str) -> list[Any]:
        """Read the raw JSON array for a registry."""
        filename = self.config.file_for(registry)

        try:
            if self.config.data_dir is not None:
                text = (Path(self.config.data_dir) / filename).read_text(encoding="utf-8")
            else:
                text = resources.files(self.PACKAGE).joinpath(filename).read_text(encoding="utf-8")
        except OSError as e:
            raise DatasetError(registry, f"cannot read {filename}: {e}") from e
        except UnicodeDecodeError as e:
            raise DatasetError(registry, f"{filename} is not valid UTF-8: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DatasetError(registry, f"{filename} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise DatasetError(registry, f"{filename} must contain a JSON array")
        return data
