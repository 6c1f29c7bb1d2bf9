""" Library entry point that binds a weight table to a comparison strength. """

from typing import Iterable, List, Optional

from rule_collator.compare import compare, LESS
from rule_collator.keys import CollationKey, generate_key, Strength
from rule_collator.rules.table import build_table, WeightTable
from rule_collator.sorter import sort_all


class RuleCollator:
    """ Binds one weight table to a comparison strength. Collators hold no global state,
        so any number of them may coexist with different rules and be used from any thread. """

    def __init__(self, table:WeightTable, strength=Strength.TERTIARY, *, processes=1) -> None:
        self._table = table                        # Read-only weights built from the rule text.
        self._strength = Strength.check(strength)  # Number of levels taking part in comparisons.
        self._processes = processes                # Worker processes for key generation during sorts.

    @classmethod
    def from_rules(cls, rules:str, strength=Strength.TERTIARY, *,
                   normalization:Optional[str]="NFC", processes=1) -> "RuleCollator":
        """ Parse rule text and build a collator from it. Raises RuleSyntaxError on bad rules. """
        table = build_table(rules, normalization)
        return cls(table, strength, processes=processes)

    @property
    def table(self) -> WeightTable:
        return self._table

    @property
    def strength(self) -> int:
        return self._strength

    def with_strength(self, strength:int) -> "RuleCollator":
        """ Return a collator sharing this table with a different strength. """
        return RuleCollator(self._table, strength, processes=self._processes)

    def compare(self, a:Optional[str], b:Optional[str]) -> int:
        return compare(a, b, self._table, self._strength)

    def less(self, a:Optional[str], b:Optional[str]) -> bool:
        return self.compare(a, b) == LESS

    def key(self, text:Optional[str]) -> CollationKey:
        """ Return a sortable key for <text>. Usable directly as a key function for sorted(). """
        return generate_key(text, self._table, self._strength)

    __call__ = key

    def sort(self, words:Optional[Iterable[Optional[str]]]) -> List[Optional[str]]:
        return sort_all(words, self._table, self._strength, processes=self._processes)
