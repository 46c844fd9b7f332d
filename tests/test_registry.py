"""Tests for the named generator registry."""

import re

import pytest

from rndstring import registry
from rndstring.alphabets import DIGITS, HEXDIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from rndstring.exceptions import GeneratorAlreadyRegistered, UnknownGeneratorName
from rndstring.generators import new_alphabet_generator, new_dummy_generator
from rndstring.registry import list_generator_names, new_generator, register_generator

CLASSES = {"lcase": LOWERCASE, "ucase": UPPERCASE, "digits": DIGITS, "symbols": SYMBOLS}


@pytest.fixture
def scratch_names():
    """Remove names registered by a test afterwards."""
    added = []
    yield added
    for name in added:
        registry._generators.pop(name, None)


class TestBuiltins:
    def test_names(self):
        names = list_generator_names()
        for expected in ("hex", "b64", "b64url", "b32", "dummy", "lcase", "ucase",
                         "digits", "symbols", "letters", "letters&digits",
                         "letters&symbols&digits", "ascii", "hexstr"):
            assert expected in names

    def test_all_class_combinations(self):
        # 4 classes -> 15 non-empty combinations
        assert len(registry.ALPHABET_GENERATORS) == 15
        sets = {frozenset(abcs) for abcs in registry.ALPHABET_GENERATORS.values()}
        assert len(sets) == 15

    @pytest.mark.parametrize("name", sorted(registry.ALPHABET_GENERATORS))
    def test_alphabet_generators(self, name):
        out = new_generator(name, 64).generate()
        allowed = "".join(registry.ALPHABET_GENERATORS[name])
        assert len(out) == 64
        assert set(out) <= set(allowed)

    def test_hexstr_is_not_a_class_combination(self):
        assert "hexstr" not in registry.ALPHABET_GENERATORS
        assert "hexstr" in list_generator_names()

    def test_hexstr_exact_length(self):
        out = new_generator("hexstr", 7).generate()
        assert len(out) == 7
        assert set(out) <= set(HEXDIGITS)

    def test_hex_doubles_length(self):
        assert re.fullmatch(r"[0-9a-f]{20}", new_generator("hex", 10).generate())

    def test_ascii_alias(self):
        out = new_generator("ascii", 100).generate()
        assert set(out) <= set(LOWERCASE + UPPERCASE + DIGITS + SYMBOLS)

    def test_dummy_join(self):
        from rndstring.generators import join

        assert join("-", new_generator("dummy", 4), new_generator("dummy", 3)) == "AAAA-AAA"


class TestLookup:
    def test_unknown_name(self):
        with pytest.raises(UnknownGeneratorName) as e:
            new_generator("no-such-name", 8)
        assert e.value.name == "no-such-name"
        assert "no-such-name" in str(e.value)

    def test_unknown_is_key_error(self):
        with pytest.raises(KeyError):
            new_generator("no-such-name", 8)

    def test_names_is_a_copy(self):
        names = list_generator_names()
        names.add("bogus")
        assert "bogus" not in list_generator_names()


class TestRegister:
    def test_register(self, scratch_names):
        scratch_names.append("pin")
        register_generator("pin", lambda n: new_alphabet_generator(n, DIGITS))
        assert "pin" in list_generator_names()
        assert new_generator("pin", 6).generate().isdigit()

    def test_register_decorator(self, scratch_names):
        scratch_names.append("dna")

        @register_generator("dna")
        def new_dna_generator(n):
            return new_alphabet_generator(n, "ACGT")

        assert set(new_generator("dna", 50).generate()) <= set("ACGT")

    def test_duplicate_builtin(self):
        with pytest.raises(GeneratorAlreadyRegistered):
            register_generator("hex", new_dummy_generator)

    def test_duplicate_custom(self, scratch_names):
        scratch_names.append("twice")
        register_generator("twice", new_dummy_generator)
        with pytest.raises(GeneratorAlreadyRegistered):
            register_generator("twice", new_dummy_generator)
        assert new_generator("twice", 2).generate() == "AA"

    def test_duplicate_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            register_generator("dummy", new_dummy_generator)
