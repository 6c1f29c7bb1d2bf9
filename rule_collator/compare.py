""" Module for three-way comparison of strings under a weight table. """

from typing import Optional

from rule_collator.keys import CollationKey, generate_key, is_blank, Strength
from rule_collator.rules.table import WeightTable

LESS = -1
EQUAL = 0
GREATER = 1


def compare_blank(a:Optional[str], b:Optional[str]) -> Optional[int]:
    """ Order blank strings before all others, and equal to each other.
        Return None if neither string is blank and the weights must decide. """
    a_blank = is_blank(a)
    b_blank = is_blank(b)
    if a_blank and b_blank:
        return EQUAL
    if a_blank:
        return LESS
    if b_blank:
        return GREATER
    return None


def compare_keys(key_a:CollationKey, key_b:CollationKey, strength=Strength.TERTIARY) -> int:
    """ Compare two keys one level at a time across the whole string.
        An accent difference early in a string is only considered after all base letters are found equal,
        even if a base letter later in the string differs. At each level, a strict prefix sorts first.
        Keys of blank strings are ordered first, as they are by compare() and by the keys themselves. """
    Strength.check(strength)
    result = compare_blank(key_a.source, key_b.source)
    if result is not None:
        return result
    for n in range(strength):
        level_a = key_a.level(n)
        level_b = key_b.level(n)
        if level_a != level_b:
            return LESS if level_a < level_b else GREATER
    return EQUAL


def compare(a:Optional[str], b:Optional[str], table:WeightTable, strength=Strength.TERTIARY) -> int:
    """ Return LESS, EQUAL or GREATER for <a> against <b>. Blank strings are settled before any key is made. """
    result = compare_blank(a, b)
    if result is not None:
        return result
    return compare_keys(generate_key(a, table, strength), generate_key(b, table, strength), strength)
