#!/usr/bin/env python3

""" Master console script and primary entry point for the rule collator. """

import sys

from rule_collator.util.entrypoints import EntryPoint, EntryPointSelector

ENTRY_POINTS = {
    "sort":    EntryPoint("rule_collator.main_sort",    "main", "Sort lines of text from files or stdin (default)."),
    "compare": EntryPoint("rule_collator.main_compare", "main", "Compare two strings and print <, = or >."),
    "table":   EntryPoint("rule_collator.main_table",   "main", "Show the weight groups defined by the rules.")
}


def main() -> int:
    loader = EntryPointSelector(ENTRY_POINTS, default_mode="sort")
    return loader.main()


if __name__ == '__main__':
    sys.exit(main())
