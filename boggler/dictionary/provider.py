"""
Dictionary providers.

Two views per language:
- seeding words: common words that generation may plant in the grid
- validation words: the full list a player's submission is checked against

Everything is normalised to uppercase. Providers are plain objects built
once and passed to the generator and validator; there is no module-level
cache.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple


_DATA_DIR = Path(__file__).parent / "data"

SEEDING_FILE = "seeding.txt"
VALIDATION_FILE = "validation.txt"


class DictionaryUnavailableError(RuntimeError):
    """Raised when a language's word lists cannot be loaded."""


def normalize(word: str) -> str:
    return word.strip().upper()


def _seed_list(words: Iterable[str]) -> List[str]:
    """Uppercase, keep letter-only words, drop repeats but keep first-seen order."""
    seen: Set[str] = set()
    result: List[str] = []
    for raw in words:
        word = normalize(raw)
        # Seeded words become grid cells, so each character must be an uppercase letter
        if word and word.isalpha() and word.isupper() and word not in seen:
            seen.add(word)
            result.append(word)
    return result


def _member_set(words: Iterable[str]) -> Set[str]:
    return {w for w in (normalize(raw) for raw in words) if w and w.isalpha()}


class DictionaryProvider(ABC):
    """Interface consumed by the grid generator and the word validator."""

    @abstractmethod
    def get_seed_words(self, language: str, min_length: int, max_length: int) -> List[str]:
        """Seeding words with min_length <= len <= max_length, in stable order."""

    @abstractmethod
    def is_member(self, language: str, word: str) -> bool:
        """Check a word against the validation list."""

    def words_by_length(self, language: str, min_length: int, max_length: int) -> Dict[int, List[str]]:
        """Group seeding words by length."""
        grouped: Dict[int, List[str]] = {}
        for word in self.get_seed_words(language, min_length, max_length):
            grouped.setdefault(len(word), []).append(word)
        return grouped


class _LoadedLanguage:
    def __init__(self, seeding: Iterable[str], validation: Iterable[str]):
        self.seeding = _seed_list(seeding)
        # Every seeded word must be accepted when a player finds it
        self.validation = _member_set(validation) | set(self.seeding)

    def seed_words(self, min_length: int, max_length: int) -> List[str]:
        return [w for w in self.seeding if min_length <= len(w) <= max_length]

    def has(self, word: str) -> bool:
        if not word:
            return False
        return normalize(word) in self.validation


class WordListDictionary(DictionaryProvider):
    """
    In-memory provider built from word lists.

    Args:
        seeding: language -> seeding words
        validation: language -> validation words (defaults to the seeding words)
    """

    def __init__(
        self,
        seeding: Dict[str, Iterable[str]],
        validation: Optional[Dict[str, Iterable[str]]] = None,
    ):
        validation = validation or {}
        self._languages: Dict[str, _LoadedLanguage] = {}
        for language in set(seeding) | set(validation):
            self._languages[language] = _LoadedLanguage(
                seeding.get(language, []), validation.get(language, [])
            )

    @classmethod
    def from_words(cls, words: Iterable[str], language: str = "english") -> "WordListDictionary":
        """Single list used for both seeding and validation."""
        words = list(words)
        return cls({language: words}, {language: words})

    @property
    def languages(self) -> List[str]:
        return sorted(self._languages)

    def _get(self, language: str) -> _LoadedLanguage:
        if language not in self._languages:
            raise DictionaryUnavailableError(f"No word lists for language '{language}'")
        return self._languages[language]

    def get_seed_words(self, language: str, min_length: int, max_length: int) -> List[str]:
        return self._get(language).seed_words(min_length, max_length)

    def is_member(self, language: str, word: str) -> bool:
        return self._get(language).has(word)


class FileDictionaryProvider(DictionaryProvider):
    """
    Provider reading ``<root>/<language>/seeding.txt`` and ``validation.txt``.

    Each file holds one word per line. A language is read on first use and
    kept on the instance.
    """

    def __init__(self, root: str | Path):
        self.root = Path(root)
        self._cache: Dict[str, _LoadedLanguage] = {}

    @classmethod
    def bundled(cls) -> "FileDictionaryProvider":
        """Provider over the word lists shipped with the package."""
        return cls(_DATA_DIR)

    def _paths(self, language: str) -> Tuple[Path, Path]:
        directory = self.root / language
        return directory / SEEDING_FILE, directory / VALIDATION_FILE

    def load(self, language: str) -> None:
        """
        Read a language's lists if not already cached.

        Raises:
            DictionaryUnavailableError: If either file is missing or unreadable
        """
        if language in self._cache:
            return
        seeding_path, validation_path = self._paths(language)
        try:
            seeding = seeding_path.read_text(encoding="utf-8").splitlines()
            validation = validation_path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise DictionaryUnavailableError(
                f"Failed to load dictionary for '{language}' from {self.root}: {e}"
            ) from e
        self._cache[language] = _LoadedLanguage(seeding, validation)

    def _get(self, language: str) -> _LoadedLanguage:
        self.load(language)
        return self._cache[language]

    def get_seed_words(self, language: str, min_length: int, max_length: int) -> List[str]:
        return self._get(language).seed_words(min_length, max_length)

    def is_member(self, language: str, word: str) -> bool:
        return self._get(language).has(word)

    def size(self, language: str) -> int:
        """Number of validation words for a language."""
        return len(self._get(language).validation)
