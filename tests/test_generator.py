"""
Tests for the Generators
========================
Tests for motus/core/generator.py.
"""

import math
import re
import string

import pytest

from motus.core.entropy import SecureEntropy, SeededEntropy
from motus.core.wordlist import WordCorpus, default_corpus
from motus.core.generator import (
    NUMBER_CHARS,
    SYMBOL_CHARS,
    TRUNCATED_WORD_LENGTH,
    GenerationError,
    InsufficientCorpus,
    InvalidLength,
    InvalidWordCount,
    PasswordTooShort,
    SeparatorMode,
    calculate_memorable_entropy,
    calculate_password_entropy,
    calculate_pin_entropy,
    memorable_password,
    pin_password,
    random_password,
)


class TestMemorablePassword:
    """Tests for memorable_password."""

    def test_scenario_plain(self, scripted, nato_corpus):
        entropy = scripted([2, 0])
        assert memorable_password(entropy, nato_corpus, 2) == "charlie alpha"
        assert entropy.remaining == 0

    def test_scenario_capitalized(self, scripted, nato_corpus):
        password = memorable_password(scripted([2, 0]), nato_corpus, 2, capitalize=True)
        assert password == "Charlie Alpha"

    def test_repeated_index_is_redrawn(self, scripted, nato_corpus):
        assert memorable_password(scripted([1, 1, 1, 3]), nato_corpus, 2) == "bravo delta"

    def test_number_separator(self, scripted, nato_corpus):
        password = memorable_password(scripted([2, 0, 7]), nato_corpus, 2, SeparatorMode.NUMBERS)
        assert password == "charlie7alpha"

    def test_symbol_separator(self, scripted, nato_corpus):
        password = memorable_password(scripted([2, 0, 0]), nato_corpus, 2, SeparatorMode.SYMBOLS)
        assert password == "charlie!alpha"

    def test_number_and_symbol_separator(self, scripted, nato_corpus):
        password = memorable_password(
            scripted([2, 0, 7, 1]), nato_corpus, 2, SeparatorMode.NUMBERS_AND_SYMBOLS
        )
        assert password == "charlie7@alpha"

    def test_separator_draw_bounds(self, scripted, nato_corpus):
        entropy = scripted([0, 1, 2, 5, 3, 9, 0])
        memorable_password(entropy, nato_corpus, 3, SeparatorMode.NUMBERS_AND_SYMBOLS)
        assert entropy.requests == [4, 4, 4, 10, 10, 10, 10]

    def test_truncated_words(self, scripted, nato_corpus):
        password = memorable_password(scripted([2, 0]), nato_corpus, 2, full_words=False)
        assert password == "char alph"

    def test_truncated_then_capitalized(self, scripted, nato_corpus):
        password = memorable_password(
            scripted([2, 0]), nato_corpus, 2, capitalize=True, full_words=False
        )
        assert password == "Char Alph"

    def test_single_word_has_no_separator(self, scripted, nato_corpus):
        assert memorable_password(scripted([3]), nato_corpus, 1, SeparatorMode.NUMBERS) == "delta"

    def test_whole_corpus(self, nato_corpus):
        password = memorable_password(SeededEntropy(9), nato_corpus, 4)
        assert sorted(password.split(" ")) == ["alpha", "bravo", "charlie", "delta"]

    @pytest.mark.parametrize("count", [1, 2, 5, 10, 15])
    def test_word_count_and_distinct(self, count):
        corpus = default_corpus()
        for seed in range(20):
            tokens = memorable_password(SeededEntropy(seed), corpus, count).split(" ")
            assert len(tokens) == count
            assert len(set(tokens)) == count
            assert all(token in corpus for token in tokens)

    def test_capitalize_changes_only_first_letter(self):
        corpus = default_corpus()
        plain = memorable_password(SeededEntropy(3), corpus, 6)
        capital = memorable_password(SeededEntropy(3), corpus, 6, capitalize=True)
        for low, up in zip(plain.split(" "), capital.split(" ")):
            assert up[0] == low[0].upper()
            assert up[1:] == low[1:]

    def test_truncation_length(self):
        corpus = default_corpus()
        password = memorable_password(SeededEntropy(4), corpus, 8, full_words=False)
        assert all(len(token) == TRUNCATED_WORD_LENGTH for token in password.split(" "))

    def test_separator_shapes(self):
        corpus = default_corpus()
        symbol = "[" + re.escape(SYMBOL_CHARS) + "]"
        patterns = {
            SeparatorMode.NUMBERS: r"[a-z]+(\d[a-z]+){4}",
            SeparatorMode.SYMBOLS: rf"[a-z]+({symbol}[a-z]+){{4}}",
            SeparatorMode.NUMBERS_AND_SYMBOLS: rf"[a-z]+(\d{symbol}[a-z]+){{4}}",
        }
        for mode, pattern in patterns.items():
            password = memorable_password(SeededEntropy(11), corpus, 5, mode)
            assert re.fullmatch(pattern, password), (mode, password)

    def test_zero_words(self, nato_corpus):
        with pytest.raises(InvalidWordCount):
            memorable_password(SecureEntropy(), nato_corpus, 0)

    def test_too_many_words(self, nato_corpus):
        with pytest.raises(InsufficientCorpus):
            memorable_password(SecureEntropy(), nato_corpus, 5)

    def test_empty_corpus(self):
        with pytest.raises(InsufficientCorpus):
            memorable_password(SecureEntropy(), WordCorpus([]), 1)

    def test_seeded_reproducible(self):
        corpus = default_corpus()
        a = memorable_password(SeededEntropy(42), corpus, 5, SeparatorMode.NUMBERS, True)
        b = memorable_password(SeededEntropy(42), corpus, 5, SeparatorMode.NUMBERS, True)
        assert a == b

    def test_seeded_known_output(self, nato_corpus):
        password = memorable_password(SeededEntropy(42), nato_corpus, 3, SeparatorMode.NUMBERS, True)
        assert password == "Alpha4Bravo1Delta"


class TestRandomPassword:
    """Tests for random_password."""

    def test_scenario_too_short(self):
        with pytest.raises(PasswordTooShort):
            random_password(SecureEntropy(), 1, include_numbers=True, include_symbols=True)

    def test_scenario_numbers_only(self):
        password = random_password(SecureEntropy(), 8, include_numbers=True)
        assert len(password) == 8
        assert any(c in string.digits for c in password)
        assert any(c in string.ascii_lowercase for c in password)
        assert any(c in string.ascii_uppercase for c in password)
        assert not any(c in SYMBOL_CHARS for c in password)

    def test_reserved_then_shuffled(self, scripted):
        # one draw per class, then Fisher-Yates draws for i = 3, 2, 1
        entropy = scripted([0, 0, 0, 0, 3, 2, 1])
        assert random_password(entropy, 4, True, True) == "aA0!"
        assert entropy.requests == [26, 26, 10, 10, 4, 3, 2]

    def test_shuffle_moves_reserved_characters(self, scripted):
        entropy = scripted([0, 0, 0, 0, 0, 0, 0])
        assert random_password(entropy, 4, True, True) == "A0!a"

    def test_pool_draws_for_free_positions(self, scripted):
        # pool is letters only: 52 characters
        entropy = scripted([1, 1, 51, 0, 0])
        assert random_password(entropy, 3) == "BZb"
        assert entropy.requests == [26, 26, 52, 3, 2]

    @pytest.mark.parametrize("numbers,symbols,classes", [
        (False, False, 2),
        (True, False, 3),
        (False, True, 3),
        (True, True, 4),
    ])
    def test_minimum_length(self, numbers, symbols, classes):
        password = random_password(SecureEntropy(), classes, numbers, symbols)
        assert len(password) == classes
        with pytest.raises(PasswordTooShort):
            random_password(SecureEntropy(), classes - 1, numbers, symbols)

    @pytest.mark.parametrize("numbers", [True, False])
    @pytest.mark.parametrize("symbols", [True, False])
    def test_class_presence(self, numbers, symbols):
        for seed in range(50):
            password = random_password(SeededEntropy(seed), 8, numbers, symbols)
            assert len(password) == 8
            assert any(c.islower() for c in password)
            assert any(c.isupper() for c in password)
            assert any(c in NUMBER_CHARS for c in password) == numbers
            assert any(c in SYMBOL_CHARS for c in password) == symbols

    def test_zero_length(self):
        with pytest.raises(InvalidLength):
            random_password(SecureEntropy(), 0)

    def test_errors_share_base(self):
        with pytest.raises(GenerationError):
            random_password(SecureEntropy(), 0)
        with pytest.raises(ValueError):
            random_password(SecureEntropy(), 2, True, True)

    def test_seeded_reproducible(self):
        assert random_password(SeededEntropy(0), 20, True, True) == \
            random_password(SeededEntropy(0), 20, True, True)

    def test_seeded_known_output(self):
        assert random_password(SeededEntropy(0), 20, True, True) == "3q92d$@5nbo(y&4EXprq"

    def test_secure_not_reproducible(self):
        assert random_password(SecureEntropy(), 20, True, True) != \
            random_password(SecureEntropy(), 20, True, True)


class TestPinPassword:
    """Tests for pin_password."""

    def test_scenario_digits(self, scripted):
        assert pin_password(scripted([3, 1, 4, 1, 5, 9]), 6) == "314159"

    def test_leading_zeros_kept(self, scripted):
        assert pin_password(scripted([0, 0, 7]), 3) == "007"

    @pytest.mark.parametrize("count", [1, 4, 7, 12, 40])
    def test_length_and_digits(self, count):
        pin = pin_password(SecureEntropy(), count)
        assert len(pin) == count
        assert pin.isdigit()

    def test_zero_length(self):
        with pytest.raises(InvalidLength):
            pin_password(SecureEntropy(), 0)

    def test_seeded_reproducible(self):
        assert pin_password(SeededEntropy(1), 12) == pin_password(SeededEntropy(1), 12)

    def test_seeded_known_output(self):
        assert pin_password(SeededEntropy(42), 12) == "052714189057"


class TestEntropyEstimates:
    """Tests for the theoretical entropy helpers."""

    def test_memorable(self):
        assert calculate_memorable_entropy(2, 4) == pytest.approx(math.log2(12))
        assert calculate_memorable_entropy(3, 100, SeparatorMode.NUMBERS) == \
            pytest.approx(math.log2(100 * 99 * 98) + 2 * math.log2(10))
        assert calculate_memorable_entropy(2, 10, SeparatorMode.NUMBERS_AND_SYMBOLS) == \
            pytest.approx(math.log2(90) + math.log2(100))

    def test_password(self):
        assert calculate_password_entropy(10) == pytest.approx(10 * math.log2(52))
        assert calculate_password_entropy(10, True, True) == pytest.approx(10 * math.log2(72))

    def test_pin(self):
        assert calculate_pin_entropy(6) == pytest.approx(6 * math.log2(10))
