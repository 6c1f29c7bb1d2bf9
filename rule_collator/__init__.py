""" Package for ordering strings by human-authored collation rules rather than by code point.

    rules - Rule text such as "a,A < b,B ; ḃ,Ḃ" is parsed into relation statements, and each collation element
    (a single character or a contraction like "ch") gets a three-level weight: primary for the base letter,
    secondary for accent variants, tertiary for case. The result is an immutable weight table. Rules may be
    given as text or loaded from a rule file; a French rule set is bundled in the assets directory.

    keys - A string is split into collation elements, longest contraction first, and each is looked up in the
    table. Characters the rules never mention still get a weight: after every declared letter, by code point.

    compare - Strings are compared one level at a time over the whole string: all primary weights first,
    then all secondary weights, then all tertiary weights, up to the chosen strength. Blank strings sort first.

    sorter - Sorting computes one key per input position up front (optionally across worker processes),
    then sorts with the original position as the final tie-break, so equal strings keep their input order.

    collator - RuleCollator binds a table to a strength and is the intended entry point for library use.

    __main__ - When run as a script, the first command-line argument chooses an operation: sort, compare or table.
"""

from rule_collator.collator import RuleCollator
from rule_collator.compare import compare, EQUAL, GREATER, LESS
from rule_collator.keys import CollationKey, generate_key, Strength
from rule_collator.rules import CollationError, EmptyRuleError, RuleSyntaxError
from rule_collator.rules.table import build_table, WeightEntry, WeightTable
from rule_collator.sorter import sort_all

__version__ = "1.0.0"
