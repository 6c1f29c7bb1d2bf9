""" Main module for sorting lines of text from the command line. """

import sys
from time import time
from typing import Iterable, List

from rule_collator.app import CollatorApp
from rule_collator.options import CollatorOptions

STDIN_NAME = "-"


def read_lines(filenames:Iterable[str], *, encoding='utf-8') -> List[str]:
    """ Read every line from each file in turn (or from stdin for "-"), without line endings. """
    lines = []
    for filename in filenames:
        if filename == STDIN_NAME:
            lines += sys.stdin.read().splitlines()
        else:
            with open(filename, 'r', encoding=encoding) as fp:
                lines += fp.read().splitlines()
    return lines


def main() -> int:
    """ Sort the lines of all input files (stdin by default) by collation rules and print them. Time the sort. """
    opts = CollatorOptions("Sort lines of text by collation rules and print them to stdout.")
    app = CollatorApp(opts)
    try:
        with app.errors:
            app.setup()
            collator = app.collator
            lines = read_lines(app.args() or [STDIN_NAME])
            start_time = time()
            result = collator.sort(lines)
            app.log(f"Sorted {len(result)} lines in {time() - start_time:.3f} seconds.")
            for line in result:
                print(line)
            return 0
        return 1
    finally:
        app.close()


if __name__ == '__main__':
    sys.exit(main())
