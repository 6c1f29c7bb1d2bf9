""" Test package for the rule collator. __init__.py loads common test resources. """

import json
import os

from rule_collator.options import CollatorOptions
from rule_collator.rules.io import load_rule_file

_data_path = os.path.join(os.path.dirname(__file__), "data", "french.json")
with open(_data_path, encoding="utf-8") as fp:
    FRENCH_DATA_SETS = json.load(fp)
del _data_path

FRENCH_RULES = load_rule_file(CollatorOptions().rules_path())
