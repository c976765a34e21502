"""
Language catalog and random intermediate-language selection

The catalog is read once from a JSON file shaped like::

    {"languages": [{"code": "es", "name": "Spanish", "nativeName": "Español",
                    "countries": ["ES", "MX"], "isOfficial": true}]}

Any failure to read or parse it falls back to DEFAULT_LANGUAGES.
"""
import json
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, FrozenSet, Iterable, Iterator, Mapping, Optional, Tuple, Union

from relay_translator.config import DEFAULT_LANGUAGE_CODE
from relay_translator.core.exceptions import CatalogLoadError
from relay_translator.utils.unified_logger import UnifiedLogger


@dataclass(frozen=True)
class LanguageEntry:
    """One language eligible for the intermediate hop"""
    code: str
    name: str
    native_name: str = ""
    countries: FrozenSet[str] = field(default_factory=frozenset)
    is_official: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'LanguageEntry':
        """Build an entry from a catalog record, raising CatalogLoadError if unusable"""
        if not isinstance(data, Mapping):
            raise CatalogLoadError(f"Language entry must be an object, got {type(data).__name__}")
        code = data.get('code')
        if not isinstance(code, str) or not code.strip():
            raise CatalogLoadError(f"Language entry without a code: {dict(data)!r}")
        return cls(
            code=code.strip(),
            name=data.get('name') or code,
            native_name=data.get('nativeName') or "",
            countries=frozenset(data.get('countries') or ()),
            is_official=bool(data.get('isOfficial', False)),
        )

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'name': self.name,
            'nativeName': self.native_name,
            'countries': sorted(self.countries),
            'isOfficial': self.is_official,
        }


DEFAULT_LANGUAGES: Tuple[LanguageEntry, ...] = (
    LanguageEntry(code='en', name='English', native_name='English', is_official=True),
    LanguageEntry(code='es', name='Spanish', native_name='Español', is_official=True),
    LanguageEntry(code='fr', name='French', native_name='Français', is_official=True),
    LanguageEntry(code='de', name='German', native_name='Deutsch', is_official=True),
)


class LanguageCatalog:
    """Read-only ordered collection of language entries"""

    def __init__(self, entries: Iterable[LanguageEntry]):
        self._entries = tuple(entries)

    @classmethod
    def default(cls) -> 'LanguageCatalog':
        return cls(DEFAULT_LANGUAGES)

    @property
    def entries(self) -> Tuple[LanguageEntry, ...]:
        return self._entries

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(entry.code for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LanguageEntry]:
        return iter(self._entries)

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def __repr__(self) -> str:
        return f"LanguageCatalog({list(self.codes)!r})"


def _read_source(source: Union[str, Path]) -> list:
    """Read the 'languages' list from a JSON catalog file"""
    path = Path(source)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogLoadError(f"Cannot read language data: {e}", source=str(path)) from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Cannot parse language data: {e}", source=str(path)) from e

    if not isinstance(data, dict) or not isinstance(data.get('languages'), list):
        raise CatalogLoadError("Language data has no 'languages' list", source=str(path))
    return data['languages']


def load_catalog(source: Union[str, Path, Iterable[Mapping[str, Any]], None],
                 logger: UnifiedLogger) -> LanguageCatalog:
    """
    Load the language catalog, never failing and never returning an empty catalog.

    Args:
        source: Path to a JSON catalog file, or already-parsed entry records
        logger: Logger receiving the fallback warning

    Returns:
        LanguageCatalog with at least one entry
    """
    try:
        if source is None:
            raise CatalogLoadError("No language data source configured")
        if isinstance(source, (str, Path)):
            records = _read_source(source)
        else:
            records = list(source)
        entries = [LanguageEntry.from_dict(record) for record in records]
    except CatalogLoadError as e:
        logger.warn("language data unavailable, using built-in defaults",
                    "error", str(e),
                    "source", e.source or str(source))
        return LanguageCatalog.default()

    if not entries:
        logger.warn("language data is empty, using built-in defaults", "source", str(source))
        return LanguageCatalog.default()

    logger.info("language data loaded", "language_count", len(entries))
    return LanguageCatalog(entries)


class LanguageSelector:
    """Uniform random choice of an intermediate language"""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source; defaults to one seeded from wall-clock time
        """
        self._rng = rng if rng is not None else random.Random(time.time_ns())

    def select_random(self, catalog: LanguageCatalog) -> str:
        """Return the code of a uniformly drawn entry, or the default code for an empty catalog"""
        if len(catalog) == 0:
            return DEFAULT_LANGUAGE_CODE
        return self._rng.choice(catalog.entries).code
