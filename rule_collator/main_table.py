""" Main module for printing the weight table built from a set of rules. """

import sys

from rule_collator.app import CollatorApp
from rule_collator.options import CollatorOptions


def main() -> int:
    """ Print each group of equally weighted elements on its own line, in collation order. """
    opts = CollatorOptions("Show the weight groups defined by a set of collation rules.")
    app = CollatorApp(opts)
    try:
        with app.errors:
            app.setup()
            for group in app.table.groups():
                weight = ".".join(map(str, group.weight))
                print(weight.ljust(12) + " ".join(group.members))
            return 0
        return 1
    finally:
        app.close()


if __name__ == '__main__':
    sys.exit(main())
