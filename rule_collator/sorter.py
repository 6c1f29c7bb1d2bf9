""" Module for stable sorting of string collections by collation keys. """

from typing import Iterable, List, Optional

from rule_collator.keys import CollationKey, generate_key, Strength
from rule_collator.rules.table import WeightTable
from rule_collator.util.parallel import ParallelMapper


def generate_keys(words:Iterable[Optional[str]], table:WeightTable, strength=Strength.TERTIARY,
                  *, processes=1) -> List[CollationKey]:
    """ Make one key for each position in <words>, in order. Repeated strings get a key each.
        With more than one process, keys are generated in parallel; the table is shared read-only. """
    Strength.check(strength)
    mapper = ParallelMapper(generate_key, table=table, strength=strength, processes=processes)
    return mapper.map(words)


def sort_all(words:Optional[Iterable[Optional[str]]], table:WeightTable, strength=Strength.TERTIARY,
             *, processes=1) -> List[Optional[str]]:
    """ Return the strings of <words> in collation order. Missing or empty input gives an empty list.
        Keys are computed once up front. Blank strings come first, and collation-equal strings
        keep their input order through an explicit tie-break on original position. """
    if not words:
        return []
    words = list(words)
    keys = generate_keys(words, table, strength, processes=processes)
    order = sorted(range(len(words)), key=lambda i: (keys[i], i))
    return [words[i] for i in order]
