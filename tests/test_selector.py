"""Tests for alphabet selection."""

from collections import Counter

import pytest

from rndstring.alphabets import DIGITS, LOWERCASE, as_alphabet_set
from rndstring.pool import EntropyPool
from rndstring.selector import select_from
from rndstring.sources.base import EntropySource


class ScriptedSource(EntropySource):
    """Returns pre-arranged byte strings, one per fill."""

    name = "scripted"

    def __init__(self, *chunks: bytes):
        self.chunks = list(chunks)

    def is_available(self) -> bool:
        return True

    def fill(self, buffer) -> None:
        view = self._byte_view(buffer)
        view[:] = self.chunks.pop(0)


class TestSelectFrom:
    @pytest.mark.parametrize("length", [1, 7, 64, 1000])
    def test_length_and_domain(self, length):
        alphabets = as_alphabet_set([LOWERCASE, DIGITS])
        out = select_from(length, alphabets)
        assert len(out) == length
        assert set(out) <= set(LOWERCASE + DIGITS)

    @pytest.mark.parametrize("length", [0, -1, -50])
    def test_non_positive_length(self, length):
        assert select_from(length, as_alphabet_set(["ab"])) == ""

    def test_modulo_rule(self):
        # choice bytes pick the alphabet, symbol bytes pick the symbol
        choice = bytes([0, 1, 2, 3])
        symbol = bytes([27, 13, 255, 10])
        pool = EntropyPool(primary=ScriptedSource(choice, symbol))
        out = select_from(4, as_alphabet_set([LOWERCASE, DIGITS]), pool=pool)
        # 0%2=0 -> 27%26=1 'b'; 1%2=1 -> 13%10=3 '3'; 2%2=0 -> 255%26=21 'v'; 3%2=1 -> 10%10=0 '0'
        assert out == "b3v0"

    def test_single_alphabet_draws_symbol_bytes_only(self):
        pool = EntropyPool(primary=ScriptedSource(bytes([0, 1, 2, 255])))
        assert select_from(4, as_alphabet_set(["abc"]), pool=pool) == "abca"

    def test_both_classes_appear(self):
        out = select_from(500, as_alphabet_set([LOWERCASE, DIGITS]))
        counts = Counter(c.isdigit() for c in out)
        # each class is picked with probability 1/2
        assert 150 < counts[True] < 350

    def test_all_symbols_reachable(self):
        out = select_from(5000, as_alphabet_set(["abcdefg"]))
        assert set(out) == set("abcdefg")

    def test_unicode_symbols(self):
        out = select_from(50, as_alphabet_set(["αβγ"]))
        assert set(out) <= set("αβγ")
