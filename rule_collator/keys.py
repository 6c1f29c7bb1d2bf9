""" Module for generating collation keys from strings using a weight table. """

from functools import total_ordering
from typing import List, Optional, Tuple
import unicodedata

from rule_collator.rules.table import WeightEntry, WeightTable


class Strength:
    """ Number of comparison levels that take part in collation. Each level is only consulted when all
        coarser levels are equal over the entire string. """

    PRIMARY = 1    # Base letters only.
    SECONDARY = 2  # Base letters and accents (case-insensitive).
    TERTIARY = 3   # Base letters, accents and case.
    IDENTICAL = 4  # All of the above, then code points as a final tie-break.

    NAMES = {"primary": PRIMARY, "secondary": SECONDARY, "tertiary": TERTIARY, "identical": IDENTICAL}

    @classmethod
    def check(cls, strength:int) -> int:
        """ Return <strength> if it is a valid level count, otherwise raise ValueError. """
        if type(strength) is not int or strength not in cls.NAMES.values():
            raise ValueError(f'Invalid collation strength: {strength!r}')
        return strength

    @classmethod
    def from_name(cls, name) -> int:
        """ Convert a level name (case-insensitive) or number to a strength value. """
        if isinstance(name, str):
            key = name.strip().lower()
            if key in cls.NAMES:
                return cls.NAMES[key]
            if not key.isdigit():
                raise ValueError(f'Invalid collation strength: {name!r}')
            name = int(key)
        return cls.check(name)


def is_blank(text:Optional[str]) -> bool:
    """ Missing, empty and whitespace-only strings are blank. """
    return text is None or not text.strip()


@total_ordering
class CollationKey:
    """ Weights of every collation element in a string, paired with the string they came from.
        Keys compare level by level: the whole sequence of primary weights first, then all of the secondary
        weights, and so on up to the strength the key was made with. Blank strings sort before all others. """

    __slots__ = ("source", "weights", "strength", "_normalized", "_levels")

    def __init__(self, source:str, weights:List[WeightEntry], strength:int, normalized:str) -> None:
        self.source = source            # Original string as given by the caller.
        self.weights = tuple(weights)   # Weight entries of each collation element in order.
        self.strength = strength        # Number of levels used when comparing this key.
        self._normalized = normalized   # Normalized source used for the identical level.
        self._levels = None

    def level(self, n:int) -> Tuple[int, ...]:
        """ Return the weights of every element at level <n> (0 = primary). Level 3 holds the code points. """
        if n == Strength.IDENTICAL - 1:
            return tuple(map(ord, self._normalized))
        return tuple([w[n] for w in self.weights])

    def levels(self) -> tuple:
        """ Return one tuple of weights for each level in use. Computed once and cached. """
        if self._levels is None:
            if is_blank(self.source):
                self._levels = (False,)
            else:
                self._levels = (True, *map(self.level, range(self.strength)))
        return self._levels

    def __eq__(self, other) -> bool:
        if not isinstance(other, CollationKey):
            return NotImplemented
        return self.levels() == other.levels()

    def __lt__(self, other) -> bool:
        if not isinstance(other, CollationKey):
            return NotImplemented
        return self.levels() < other.levels()

    def __hash__(self) -> int:
        return hash(self.levels())

    def __repr__(self) -> str:
        return f'CollationKey({self.source!r}, {list(self.weights)!r})'


def normalize(text:str, table:WeightTable) -> str:
    """ Bring <text> into the same normalization form as the rules of <table>. """
    form = table.normalization
    return unicodedata.normalize(form, text) if form else text


def collation_weights(text:str, table:WeightTable) -> List[WeightEntry]:
    """ Split already-normalized <text> into collation elements, longest contraction first, and weigh each one. """
    weights = []
    match = table.match
    i = 0
    length = len(text)
    while i < length:
        w, n = match(text, i)
        weights.append(w)
        i += n
    return weights


def generate_key(text:Optional[str], table:WeightTable, strength=Strength.TERTIARY) -> CollationKey:
    """ Make a collation key for <text>. Every string gets one; unmapped characters use the table's fallback. """
    Strength.check(strength)
    source = "" if text is None else text
    normalized = normalize(source, table)
    return CollationKey(source, collation_weights(normalized, table), strength, normalized)
