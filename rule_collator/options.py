""" Command-line and config file options for building a collator. """

from typing import Optional

from rule_collator.keys import Strength
from rule_collator.util.cmdline import CmdlineOptions
from rule_collator.util.config import SectionConfigDict
from rule_collator.util.path import package_directory, PrefixPathConverter, user_data_directory

# The name of the root package is used as a default path for built-in assets and user files.
ROOT_PACKAGE = __package__.split(".", 1)[0]

NORMALIZATION_FORMS = ("NFC", "NFD", "NFKC", "NFKD")


class CollatorOptions(CmdlineOptions):
    """ Contains all command-line options necessary to build a collator from rules. """

    ASSET_PATH_PREFIX = ":/"  # Prefix that indicates built-in assets.
    USER_PATH_PREFIX = "~/"   # Prefix that indicates local user app data.
    CONFIG_SECTION = "collator"

    def __init__(self, app_description="Running the rule collator as a library (should never be seen).") -> None:
        super().__init__(app_description)
        self.add("log", "",
                 "Text file to append status and errors to. Status always goes to stderr.")
        self.add("rules", "",
                 "Collation rule text. Takes precedence over --rules-file.")
        self.add("rules-file", self.ASSET_PATH_PREFIX + "assets/french.rules",
                 "UTF-8 rule file. Lines starting with # are comments.")
        self.add("strength", "tertiary",
                 "Comparison strength: primary, secondary, tertiary or identical.")
        self.add("normalization", "NFC",
                 "Unicode normalization form for rules and input (NFC, NFD, NFKC, NFKD or none).")
        self.add("processes", 1,
                 "Number of processes used to generate keys (0 = one per CPU core).")
        self.add("config", self.USER_PATH_PREFIX + "config.cfg",
                 f"CFG file with default options in its [{self.CONFIG_SECTION}] section.")
        converter = PrefixPathConverter()
        converter.add(self.ASSET_PATH_PREFIX, package_directory(ROOT_PACKAGE))
        converter.add(self.USER_PATH_PREFIX, user_data_directory(ROOT_PACKAGE))
        self._convert_path = converter.convert

    def load_config(self) -> bool:
        """ Fill in options not given on the command line from the config file, if it exists. """
        cfg = SectionConfigDict(self.config_path(), self.CONFIG_SECTION)
        if not cfg.read():
            return False
        self.update_defaults(cfg)
        return True

    def config_path(self) -> str:
        return self._convert_path(self.config)

    def rules_path(self) -> str:
        return self._convert_path(self.rules_file)

    def log_path(self) -> str:
        """ Return the path for the log file (if any), creating directories to its location if necessary. """
        if not self.log:
            return ""
        return self._convert_path(self.log, make_dirs=True)

    def strength_value(self) -> int:
        return Strength.from_name(self.strength)

    def normalization_form(self) -> Optional[str]:
        """ Return the Unicode normalization form, or None if normalization is disabled. """
        form = str(self.normalization or "").strip().upper()
        if form in ("", "NONE"):
            return None
        if form not in NORMALIZATION_FORMS:
            raise ValueError(f'Invalid normalization form: {self.normalization!r}')
        return form
