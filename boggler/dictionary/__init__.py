"""Word lists for seeding and validation."""

from .provider import (
    DictionaryProvider,
    DictionaryUnavailableError,
    FileDictionaryProvider,
    WordListDictionary,
)

__all__ = [
    "DictionaryProvider",
    "DictionaryUnavailableError",
    "FileDictionaryProvider",
    "WordListDictionary",
]
