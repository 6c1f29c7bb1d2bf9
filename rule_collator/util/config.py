""" Module for user configuration options stored in the .cfg file format. """

import ast
from configparser import ConfigParser, Error as ConfigParserError
from typing import Any, Dict

ConfigDict = Dict[str, Any]
NestedConfigDict = Dict[str, ConfigDict]


def eval_str(s:str) -> Any:
    """ Try to evaluate a string as a Python literal using ast.literal_eval. This fixes crap like bool('False') = True.
        Strings that are read as names will throw an error, in which case they should be left as-is. """
    try:
        return ast.literal_eval(s)
    except (SyntaxError, ValueError):
        return s


class ConfigIO:
    """ Reads CFG files and converts their values to Python objects. """

    def __init__(self, *, from_str=eval_str, encoding='utf-8') -> None:
        self._from_str = from_str  # Converts input strings to other values (default uses ast.literal_eval).
        self._encoding = encoding  # Character encoding of CFG files.

    def read(self, filename:str) -> NestedConfigDict:
        """ Read config settings from a file in .cfg format into a nested mapping by section and name. """
        parser = ConfigParser(interpolation=None)
        with open(filename, 'r', encoding=self._encoding) as fp:
            parser.read_file(fp)
        return {sect: {name: self._from_str(s) for name, s in parser[sect].items()}
                for sect in parser.sections()}


class SectionConfigDict(ConfigDict):
    """ Configuration dict corresponding to one section of a CFG file. """

    def __init__(self, filename:str, sect:str, *, io:ConfigIO=None) -> None:
        super().__init__()
        self._filename = filename    # Full name of a file in CFG format.
        self._sect = sect            # Name of our CFG file section.
        self._io = io or ConfigIO()  # Performs whole reads of CFG files.

    def read(self) -> bool:
        """ Try to read our section from the CFG file. Return True if the file could be read.
            A missing file is not an error; a file that is present but malformed is. """
        try:
            cfg = self._io.read(self._filename)
        except FileNotFoundError:
            return False
        except ConfigParserError as e:
            raise ValueError(f'Invalid config file {self._filename}: {e}') from e
        self.update(cfg.get(self._sect, {}))
        return True
