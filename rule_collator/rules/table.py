""" Module for weight tables: the read-only mapping from collation elements to three-level weights.

    Tables are built by walking parsed rule statements in order. Each '<' opens a new primary group,
    each ';' a new secondary variant, each ',' a new tertiary variant, and '=' repeats the last weight.
    Lookup always takes the longest declared element at a position, so contractions win over single letters.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from .parser import Relation, RuleParser, RuleStatement


class WeightEntry(NamedTuple):
    """ Multi-level weight of one collation element. Lower values sort first at every level. """
    primary: int    # Position among primary groups in declaration order.
    secondary: int  # Rank among secondary variants within the primary group.
    tertiary: int   # Rank among tertiary variants within the secondary group.


class CharacterGroup(NamedTuple):
    """ Collation elements that share one weight, in declaration order. """
    weight: WeightEntry
    members: Tuple[str, ...]


class WeightTable(Mapping[str, WeightEntry]):
    """ Read-only mapping of collation elements (single characters or contractions) to weights.
        Characters missing from the table get a fallback weight after every declared primary group,
        ordered among themselves by code point. Tables are never mutated after construction,
        so one table may be shared by any number of collators and threads. """

    def __init__(self, weights:Mapping[str, WeightEntry], normalization:Optional[str]="NFC") -> None:
        self._weights = dict(weights)        # Weight entries keyed by collation element.
        self._normalization = normalization  # Normalization form the rule elements were written in.
        # Contraction lengths to try at each position, longest first.
        self._lengths = sorted({len(k) for k in self._weights}, reverse=True)
        self._max_primary = max([w.primary for w in self._weights.values()], default=-1)

    def __getitem__(self, element:str) -> WeightEntry:
        return self._weights[element]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({len(self)} elements, {self._max_primary + 1} primary groups)'

    @property
    def normalization(self) -> Optional[str]:
        return self._normalization

    @property
    def max_primary(self) -> int:
        """ Highest primary rank declared by the rules, or -1 for an empty table. """
        return self._max_primary

    def fallback(self, char:str) -> WeightEntry:
        """ Weight for a character the rules never mention. """
        return WeightEntry(self._max_primary + 1 + ord(char), 0, 0)

    def match(self, text:str, start:int) -> Tuple[WeightEntry, int]:
        """ Find the longest declared element in <text> at <start>.
            Return its weight and length, or the fallback weight of the single character there. """
        weights = self._weights
        remaining = len(text) - start
        for length in self._lengths:
            if length <= remaining:
                w = weights.get(text[start:start + length])
                if w is not None:
                    return w, length
        return self.fallback(text[start]), 1

    def groups(self) -> List[CharacterGroup]:
        """ Gather elements with identical weights into groups, sorted by weight. """
        members_by_weight = {}
        for element, w in self._weights.items():
            members_by_weight.setdefault(w, []).append(element)
        return [CharacterGroup(w, tuple(members_by_weight[w])) for w in sorted(members_by_weight)]


def table_from_statements(statements:Iterable[RuleStatement], normalization:Optional[str]="NFC") -> WeightTable:
    """ Assign each statement's element the weight in effect after applying its relation.
        Primary advances at each '<' and resets the finer levels; secondary advances at each ';'
        and resets tertiary; tertiary advances at each ','; '=' leaves all three unchanged. """
    weights: Dict[str, WeightEntry] = {}
    primary = -1
    secondary = tertiary = 0
    for st in statements:
        relation = st.relation
        if relation == Relation.NEXT_PRIMARY:
            primary += 1
            secondary = tertiary = 0
        elif relation == Relation.NEXT_SECONDARY:
            secondary += 1
            tertiary = 0
        elif relation == Relation.NEXT_TERTIARY:
            tertiary += 1
        weights[st.element] = WeightEntry(primary, secondary, tertiary)
    return WeightTable(weights, normalization)


def build_table(text:str, normalization:Optional[str]="NFC") -> WeightTable:
    """ Parse rule <text> and build its weight table. Raises RuleSyntaxError (or EmptyRuleError) on bad rules. """
    statements = RuleParser(normalization).parse(text)
    return table_from_statements(statements, normalization)
