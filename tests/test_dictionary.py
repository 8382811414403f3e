"""Tests for the dictionary providers."""

import pytest

from boggler.dictionary import (
    DictionaryProvider,
    DictionaryUnavailableError,
    FileDictionaryProvider,
    WordListDictionary,
)


def write_language(root, language, seeding, validation):
    directory = root / language
    directory.mkdir(parents=True)
    (directory / "seeding.txt").write_text("\n".join(seeding) + "\n", encoding="utf-8")
    (directory / "validation.txt").write_text("\n".join(validation) + "\n", encoding="utf-8")
    return directory


class TestWordListDictionary:
    """In-memory word lists."""

    def test_seed_words_uppercased(self):
        dictionary = WordListDictionary.from_words(["cat", "Dog", " tree "])
        assert dictionary.get_seed_words("english", 3, 4) == ["CAT", "DOG", "TREE"]

    def test_seed_words_length_filter(self, dictionary):
        words = dictionary.get_seed_words("english", 5, 5)
        assert words
        assert all(len(w) == 5 for w in words)

    def test_seed_words_keep_first_seen_order(self):
        dictionary = WordListDictionary.from_words(["dog", "cat", "DOG", "sun", "Cat"])
        assert dictionary.get_seed_words("english", 1, 10) == ["DOG", "CAT", "SUN"]

    def test_seed_words_letters_only(self):
        dictionary = WordListDictionary.from_words(["don't", "e-mail", "cat", "r2d2", ""])
        assert dictionary.get_seed_words("english", 1, 10) == ["CAT"]

    def test_seed_words_keep_non_ascii_letters(self):
        dictionary = WordListDictionary.from_words(["päivä", "jää", "yö", "e-mail"], language="finnish")
        assert dictionary.get_seed_words("finnish", 1, 10) == ["PÄIVÄ", "JÄÄ", "YÖ"]
        assert dictionary.is_member("finnish", "Päivä")

    def test_membership_ignores_case(self, dictionary):
        assert dictionary.is_member("english", "cat")
        assert dictionary.is_member("english", "Cat")
        assert dictionary.is_member("english", "CAT")

    def test_validation_only_words(self, dictionary):
        """Words in the validation list are accepted but never seeded."""
        assert dictionary.is_member("english", "COD")
        assert "COD" not in dictionary.get_seed_words("english", 3, 3)

    def test_unknown_word(self, dictionary):
        assert not dictionary.is_member("english", "CAD")
        assert not dictionary.is_member("english", "")

    def test_seeding_words_always_valid(self):
        """A word that can be seeded is always accepted, even if the validation list misses it."""
        dictionary = WordListDictionary({"english": ["cat"]}, {"english": ["dog"]})
        assert dictionary.is_member("english", "CAT")
        assert dictionary.is_member("english", "DOG")

    def test_validation_defaults_to_seeding(self):
        dictionary = WordListDictionary({"english": ["cat"]})
        assert dictionary.is_member("english", "CAT")
        assert not dictionary.is_member("english", "DOG")

    def test_unknown_language(self, dictionary):
        with pytest.raises(DictionaryUnavailableError):
            dictionary.get_seed_words("klingon", 3, 9)
        with pytest.raises(DictionaryUnavailableError):
            dictionary.is_member("klingon", "CAT")

    def test_languages(self):
        dictionary = WordListDictionary({"english": ["cat"], "french": ["chat"]})
        assert dictionary.languages == ["english", "french"]
        assert dictionary.is_member("french", "CHAT")
        assert not dictionary.is_member("english", "CHAT")

    def test_words_by_length(self):
        dictionary = WordListDictionary.from_words(["cat", "tree", "dog", "house"])
        assert dictionary.words_by_length("english", 3, 4) == {3: ["CAT", "DOG"], 4: ["TREE"]}

    def test_words_by_length_empty_range(self, dictionary):
        assert dictionary.words_by_length("english", 20, 30) == {}


class TestFileDictionaryProvider:
    """Word lists read from <root>/<language>/*.txt."""

    def test_reads_lists(self, tmp_path):
        write_language(tmp_path, "english", ["cat", "house"], ["cat", "house", "act"])
        provider = FileDictionaryProvider(tmp_path)
        assert provider.get_seed_words("english", 3, 5) == ["CAT", "HOUSE"]
        assert provider.is_member("english", "act")
        assert not provider.is_member("english", "tac")
        assert provider.size("english") == 3

    def test_blank_lines_ignored(self, tmp_path):
        write_language(tmp_path, "english", ["", "cat", "   ", "dog"], ["", "cat"])
        provider = FileDictionaryProvider(tmp_path)
        assert provider.get_seed_words("english", 1, 10) == ["CAT", "DOG"]
        assert provider.size("english") == 2

    def test_missing_language(self, tmp_path):
        provider = FileDictionaryProvider(tmp_path)
        with pytest.raises(DictionaryUnavailableError, match="english"):
            provider.load("english")

    def test_missing_validation_file(self, tmp_path):
        directory = tmp_path / "english"
        directory.mkdir()
        (directory / "seeding.txt").write_text("cat\n", encoding="utf-8")
        provider = FileDictionaryProvider(tmp_path)
        with pytest.raises(DictionaryUnavailableError):
            provider.is_member("english", "CAT")

    def test_language_is_cached(self, tmp_path):
        directory = write_language(tmp_path, "english", ["cat"], ["cat"])
        provider = FileDictionaryProvider(tmp_path)
        provider.load("english")
        (directory / "seeding.txt").unlink()
        (directory / "validation.txt").unlink()
        assert provider.is_member("english", "CAT")

    def test_instances_do_not_share_cache(self, tmp_path):
        directory = write_language(tmp_path, "english", ["cat"], ["cat"])
        FileDictionaryProvider(tmp_path).load("english")
        (directory / "validation.txt").unlink()
        with pytest.raises(DictionaryUnavailableError):
            FileDictionaryProvider(tmp_path).load("english")

    def test_reads_utf8_lists(self, tmp_path):
        write_language(tmp_path, "finnish", ["kesä", "järvi"], ["kesä", "järvi", "sää"])
        provider = FileDictionaryProvider(tmp_path)
        assert provider.get_seed_words("finnish", 3, 9) == ["KESÄ", "JÄRVI"]
        assert provider.is_member("finnish", "SÄÄ")

    def test_accepts_string_root(self, tmp_path):
        write_language(tmp_path, "english", ["cat"], ["cat"])
        assert FileDictionaryProvider(str(tmp_path)).is_member("english", "cat")

    def test_bundled_english(self):
        provider = FileDictionaryProvider.bundled()
        assert provider.is_member("english", "cat")
        assert provider.is_member("english", "HOUSE")
        seeds = provider.get_seed_words("english", 3, 9)
        assert "CAT" in seeds
        assert len(seeds) == len(set(seeds))
        assert all(3 <= len(w) <= 9 and w.isalpha() and w.isupper() for w in seeds)
        assert all(provider.is_member("english", w) for w in seeds)
        assert provider.size("english") >= len(seeds)


class TestProviderInterface:
    def test_cannot_instantiate_interface(self):
        with pytest.raises(TypeError):
            DictionaryProvider()

    def test_incomplete_provider_rejected(self):
        """A provider missing one of the lookups fails when constructed, not when first used."""

        class SeedsOnly(DictionaryProvider):
            def get_seed_words(self, language, min_length, max_length):
                return ["CAT"]

        with pytest.raises(TypeError):
            SeedsOnly()

    def test_custom_provider(self, cat_grid):
        """Anything implementing the two lookups can drive the validator."""
        from boggler.engine import Position, validate_word_submission

        class OnlyCat(DictionaryProvider):
            def get_seed_words(self, language, min_length, max_length):
                return ["CAT"]

            def is_member(self, language, word):
                return word == "CAT"

        result = validate_word_submission(
            cat_grid, [Position(0, 0), Position(0, 1), Position(0, 2)], [], OnlyCat()
        )
        assert result.is_valid is True
        assert OnlyCat().words_by_length("english", 3, 3) == {3: ["CAT"]}


class TestBundledFinnish:
    def test_lists_load(self):
        provider = FileDictionaryProvider.bundled()
        seeds = provider.get_seed_words("finnish", 3, 9)
        assert "PÄIVÄ" in seeds
        assert "YÖ" not in seeds
        assert all(w.isalpha() and w.isupper() for w in seeds)
        assert all(provider.is_member("finnish", w) for w in seeds)
        assert provider.is_member("finnish", "hyvä")
        assert not provider.is_member("finnish", "house")
