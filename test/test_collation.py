""" Tests for key generation, comparison and sorting, including the bundled French rules. """

from itertools import product
from random import Random

import pytest

from rule_collator import (build_table, compare, EQUAL, generate_key, GREATER, LESS,
                           RuleCollator, sort_all, Strength)
from rule_collator.compare import compare_keys
from test import FRENCH_DATA_SETS, FRENCH_RULES

FRENCH = RuleCollator.from_rules(FRENCH_RULES)
CASE_ACCENT_TABLE = build_table("< a,A < à,À")


def test_case_and_accent() -> None:
    """ Case variants are equal once tertiary differences are ignored, but still ordered at full strength. """
    table = CASE_ACCENT_TABLE
    assert compare("a", "A", table, Strength.SECONDARY) == EQUAL
    assert compare("a", "A", table, Strength.TERTIARY) == LESS
    assert compare("à", "A", table, Strength.PRIMARY) == GREATER
    assert sort_all(["À", "a", "A", "à"], table) == ["a", "A", "à", "À"]


def test_symbols_before_letters() -> None:
    table = build_table("< '@' < 0 < a")
    assert sort_all(["a", "@", "0"], table) == ["@", "0", "a"]


def test_unmapped_characters() -> None:
    """ Characters missing from the rules sort after every declared one, by code point among themselves. """
    table = build_table("a < b < c")
    assert sort_all(["c", "z", "a"], table) == ["a", "c", "z"]
    assert sort_all(["z", "B", "y", "c"], table) == ["c", "B", "y", "z"]
    assert compare("z", "c", table) == GREATER


def test_level_by_level() -> None:
    """ A secondary difference early in a string must not outweigh a primary difference later on.
        Comparing weight tuples element by element would get the first case wrong. """
    table = build_table("a ; á < b")
    assert compare("áa", "ab", table) == LESS
    assert compare("áb", "ab", table) == GREATER
    assert compare("áb", "ab", table, Strength.PRIMARY) == EQUAL
    # At each level, a strict prefix sorts first.
    assert compare("a", "ab", table) == LESS
    assert compare("ab", "a", table) == GREATER
    assert compare("a", "á", table) == LESS


def test_contractions() -> None:
    """ Contractions collate as single letters. """
    table = build_table("c < ch < d < h")
    assert sort_all(["d", "ch", "ca", "cz", "c"], table) == ["c", "ca", "cz", "ch", "d"]
    assert compare("cha", "cza", table) == GREATER


@pytest.mark.parametrize("table", [CASE_ACCENT_TABLE, FRENCH.table])
def test_blank_strings(table) -> None:
    """ Blank strings are ordered first no matter what the rules are. Two blanks are equal. """
    assert compare("", "", table) == EQUAL
    assert compare("  ", "\t", table) == EQUAL
    assert compare(None, "", table) == EQUAL
    assert compare("", "x", table) == LESS
    assert compare("x", "", table) == GREATER
    assert compare(" ", "@", table) == LESS
    assert sort_all(["b", " ", "a", "", None], table) == [" ", "", None, "a", "b"]


def test_strength_check() -> None:
    with pytest.raises(ValueError):
        compare("a", "b", CASE_ACCENT_TABLE, 0)
    with pytest.raises(ValueError):
        sort_all(["a"], CASE_ACCENT_TABLE, 5)
    with pytest.raises(ValueError):
        compare("a", "b", CASE_ACCENT_TABLE, 2.0)
    with pytest.raises(ValueError):
        sort_all(["b", "a"], CASE_ACCENT_TABLE, True)
    with pytest.raises(ValueError):
        FRENCH.with_strength(-1)
    assert Strength.from_name("Secondary") == Strength.SECONDARY
    assert Strength.from_name("4") == Strength.IDENTICAL
    assert Strength.from_name(1) == Strength.PRIMARY
    with pytest.raises(ValueError):
        Strength.from_name("quaternary")


def test_identical_strength() -> None:
    """ Elements declared with '=' are fully equal up to tertiary strength, so input order decides.
        The identical level breaks the tie by code point. """
    table = build_table("a = b < c")
    assert compare("a", "b", table) == EQUAL
    assert compare("b", "a", table, Strength.IDENTICAL) == GREATER
    assert sort_all(["b", "c", "a"], table) == ["b", "a", "c"]
    assert sort_all(["b", "c", "a"], table, Strength.IDENTICAL) == ["a", "b", "c"]


def test_input_normalization() -> None:
    """ Input is normalized the same way as the rules, so either form of an accented letter collates alike. """
    table = build_table("e < \u00e9 < f")
    assert compare("e\u0301", "\u00e9", table) == EQUAL
    assert sort_all(["f", "e\u0301", "e"], table) == ["e", "e\u0301", "f"]
    raw_table = build_table("e < \u00e9 < f", normalization=None)
    assert compare("e\u0301", "\u00e9", raw_table) == LESS


def test_keys() -> None:
    """ Keys keep their source string and compare the same way as the strings themselves. """
    key = generate_key("àA", CASE_ACCENT_TABLE)
    assert key.source == "àA"
    assert key.weights == ((1, 0, 0), (0, 0, 1))
    assert key.level(0) == (1, 0)
    assert key.level(2) == (0, 1)
    assert key.level(3) == (ord("à"), ord("A"))
    assert generate_key("a", CASE_ACCENT_TABLE) < key
    assert generate_key("a", CASE_ACCENT_TABLE, Strength.SECONDARY) == generate_key("A", CASE_ACCENT_TABLE,
                                                                                    Strength.SECONDARY)
    assert generate_key(None, CASE_ACCENT_TABLE) < generate_key("a", CASE_ACCENT_TABLE)
    assert compare_keys(key, generate_key("à", CASE_ACCENT_TABLE)) == GREATER


@pytest.mark.parametrize("name", sorted(FRENCH_DATA_SETS))
def test_french_data_sets(name:str) -> None:
    """ Sorting shuffled copies of each human-sorted list must restore the original order. """
    expected = FRENCH_DATA_SETS[name]
    rng = Random(len(expected))
    for _ in range(5):
        shuffled = rng.sample(expected, len(expected))
        assert FRENCH.sort(shuffled) == expected
    assert FRENCH.sort(expected) == expected
    assert sorted(reversed(expected), key=FRENCH.key) == expected


def test_french_rules() -> None:
    """ The symbols all share one weight, so they keep their input order. Only case separates v from V. """
    assert FRENCH.sort(["$", "@", "!"]) == ["$", "@", "!"]
    assert FRENCH.sort(["b", "$", "0", "@"]) == ["$", "@", "0", "b"]
    assert FRENCH.compare("v", "V") == LESS
    assert FRENCH.with_strength(Strength.SECONDARY).compare("v", "V") == EQUAL
    assert FRENCH.with_strength(Strength.SECONDARY).compare("w", "W") == LESS
    assert FRENCH.with_strength(Strength.PRIMARY).compare("Il", "îl") == EQUAL
    assert FRENCH.compare("Il", "îl") == LESS


WORDS = [w for words in FRENCH_DATA_SETS.values() for w in words] + ["", " ", "Zoo", "zoo", "\u00e9", "e\u0301"]


@pytest.mark.parametrize("strength", [Strength.PRIMARY, Strength.SECONDARY, Strength.TERTIARY])
def test_total_order(strength:int) -> None:
    """ Compare must be reflexive, antisymmetric, and transitive over any strings. """
    collator = FRENCH.with_strength(strength)
    cmp = collator.compare
    words = Random(strength).sample(WORDS, 40)
    for a in words:
        assert cmp(a, a) == EQUAL
    for a, b in product(words, repeat=2):
        assert cmp(a, b) == -cmp(b, a)
    for a, b, c in product(words[:15], repeat=3):
        if cmp(a, b) <= 0 and cmp(b, c) <= 0:
            assert cmp(a, c) <= 0
    # The sorter must agree with pairwise comparison.
    result = collator.sort(words)
    assert all(cmp(x, y) <= 0 for x, y in zip(result, result[1:]))


def test_sort_properties() -> None:
    """ Sorting is count-preserving, stable, and idempotent. Missing or empty input gives an empty list. """
    assert sort_all(None, CASE_ACCENT_TABLE) == []
    assert sort_all([], CASE_ACCENT_TABLE) == []
    assert sort_all(iter(()), CASE_ACCENT_TABLE) == []
    words = ["À", "a", "A", "à", "a", "A", "xa", "xA"]
    secondary = sort_all(words, CASE_ACCENT_TABLE, Strength.SECONDARY)
    assert secondary == ["a", "A", "a", "A", "À", "à", "xa", "xA"]
    assert sort_all(secondary, CASE_ACCENT_TABLE, Strength.SECONDARY) == secondary
    once = sort_all(words, CASE_ACCENT_TABLE)
    assert sort_all(once, CASE_ACCENT_TABLE) == once
    assert sorted(once) == sorted(words)


def test_sort_parallel() -> None:
    """ Keys generated by worker processes must give the same result as keys generated in-process. """
    words = Random(0).sample(WORDS, len(WORDS))
    serial = FRENCH.sort(words)
    parallel = RuleCollator(FRENCH.table, processes=2).sort(words)
    assert parallel == serial


def test_blank_keys() -> None:
    """ Comparing keys directly must agree with comparing strings and with ordering the keys. """
    table = build_table("a < b")
    blank = generate_key(" ", table)
    key_a = generate_key("a", table)
    assert blank < key_a
    assert compare_keys(blank, key_a) == compare(" ", "a", table) == LESS
    assert compare_keys(key_a, blank) == GREATER
    assert compare_keys(blank, generate_key(None, table)) == EQUAL
    assert compare_keys(blank, generate_key("\t", table), Strength.IDENTICAL) == EQUAL
