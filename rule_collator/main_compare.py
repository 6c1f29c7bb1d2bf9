""" Main module for comparing two strings from the command line. """

import sys

from rule_collator.app import CollatorApp
from rule_collator.compare import EQUAL, GREATER, LESS
from rule_collator.options import CollatorOptions

SYMBOLS = {LESS: "<", EQUAL: "=", GREATER: ">"}


def main() -> int:
    """ Print <, = or > for the first string against the second. """
    opts = CollatorOptions("Compare two strings by collation rules. Prints <, = or >.")
    app = CollatorApp(opts)
    try:
        with app.errors:
            app.setup()
            args = app.args()
            if len(args) != 2:
                raise ValueError(f'Exactly two strings are required for comparison, got {len(args)}.')
            result = app.collator.compare(*args)
            print(SYMBOLS[result])
            return 0
        return 1
    finally:
        app.close()


if __name__ == '__main__':
    sys.exit(main())
