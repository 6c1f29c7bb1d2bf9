""" Module for user-configurable command-line options. """

import os
import sys
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple


class CmdlineOption:
    """ A command-line option that converts its argument strings into a single attribute value. """

    def __init__(self, key:str, desc="No description.", opt_type=str) -> None:
        self._key = key            # Option key (the name prefixed with --).
        self._desc = desc          # Description to be displayed in help.
        self._opt_type = opt_type  # Data type to be produced if the option is specified.

    def _multiargs(self) -> bool:
        """ If True, multiple command-line arguments are combined in a collection. """
        return issubclass(self._opt_type, (tuple, list, set))

    def convert(self, *args:str) -> Any:
        """ Convert argument strings to the type required by this option. """
        if self._multiargs():
            return self._opt_type(args)
        if len(args) != 1:
            raise ValueError(f'Option {self._key} takes exactly one argument, got {len(args)}.')
        if self._opt_type is bool:
            return args[0].strip().lower() in ("1", "true", "yes", "on")
        return self._opt_type(*args)

    def keys(self) -> Iterator[str]:
        yield self._key

    def usage(self) -> str:
        if self._multiargs():
            argstr = '<str> [<str> ...]'
        else:
            argstr = '<' + self._opt_type.__name__ + '>'
        return f'{self._key}={argstr}'

    def description(self) -> str:
        return self._desc


class CmdlineHelp:
    """ Formats a usage message and one line of help for each option. """

    def __init__(self, opts:Iterable[CmdlineOption], script_name:str, description:str, *, max_col_width=32) -> None:
        self._opts = list(opts)              # Options to describe.
        self._script_name = script_name      # Program name as run from the command line.
        self._description = description      # A short description of what the program does.
        self._max_col_width = max_col_width  # Maximum width of keys column in characters.

    def _info_lines(self) -> Iterator[str]:
        rows = [(", ".join(opt.keys()), opt.description()) for opt in self._opts]
        rows.append(("-h, --help", "Show this help message and exit."))
        col_width = max([len(k) for k, _ in rows if len(k) < self._max_col_width]) + 2
        for keys, desc in rows:
            if len(keys) <= col_width:
                yield keys.ljust(col_width) + desc
            else:
                yield keys
                yield '    ' + desc

    def format(self) -> str:
        usage = ''.join([' [' + opt.usage() + ']' for opt in self._opts])
        lines = [self._description,
                 f'usage: {self._script_name}{usage}',
                 "",
                 *self._info_lines(),
                 ""]
        return '\n'.join(lines)


def split_argv(argv:Iterable[str]) -> Tuple[List[str], List[List[str]]]:
    """ Split arguments into leading positional args and groups that each start with an option key.

          positional  positional  [ key ] |---------------| [   key   ] |--|
          program.exe a.txt b.txt --files=c.txt d.txt e.txt --strength=1
    """
    positional = []
    groups = []
    current = positional
    for s in argv:
        if s.startswith('--') or s == '-h':
            current = []
            groups.append(current)
        current.append(s)
    return positional, groups


class CmdlineOptions:
    """ Namespace for command-line options. Option values are accessed as instance attributes.
        Unparsed options fall back to their defaults, and may be overridden by lower priority sources. """

    def __init__(self, app_description="Command line application.", *, out=None) -> None:
        self._app_description = app_description  # App description shown in command-line help.
        self._options = {}                       # Option objects keyed by their destination attributes.
        self._parsed = set()                     # Attributes set explicitly on the command line.
        self._args = []                          # Positional arguments that did not belong to any option.
        self._out = out or sys.stdout            # Stream for help text.

    def __getattr__(self, name:str) -> Any:
        raise AttributeError(f'"{name}" is not the name of a valid command-line option.')

    def add(self, name:str, default:Any=None, desc="No description.") -> None:
        """ Add a new option and set its attribute to the default value (until parsed).
            Since attribute names cannot have hyphens, they are replaced with underscores. """
        opt_type = str if default is None else type(default)
        attr_name = name.replace("-", "_")
        self._options[attr_name] = CmdlineOption("--" + name, desc, opt_type)
        setattr(self, attr_name, default)

    def parse(self, argv:Iterable[str]=None) -> None:
        """ Parse options into instance attributes. Arguments come from <argv> if given, otherwise sys.argv.
            Each option key must start with '--'. Its arguments follow after '=' and/or as separate words.
            Unrecognized options raise ValueError. """
        script, *argv = (sys.argv if argv is None else argv) or [""]
        positional, groups = split_argv(argv)
        opts_by_key = {k: (attr, opt) for attr, opt in self._options.items() for k in opt.keys()}
        parsed = {}
        for s, *args in groups:
            key, *eq = s.split('=', 1)
            if key in ('-h', '--help'):
                self._print_help(script)
                sys.exit(0)
            if key not in opts_by_key:
                raise ValueError(f'Unknown option: {key}')
            attr, opt = opts_by_key[key]
            parsed[attr] = opt.convert(*eq, *args)
        self.__dict__.update(parsed)
        self._parsed.update(parsed)
        self._args = positional

    def _print_help(self, script:str) -> None:
        script_name = os.path.basename(script) if script else "?"
        text = CmdlineHelp(self._options.values(), script_name, self._app_description).format()
        self._out.write(text)

    def update_defaults(self, values:Mapping[str, Any]) -> Dict[str, Any]:
        """ Apply option values from a lower priority source (such as a config file).
            Options given on the command line keep their values. Return whatever was applied. """
        applied = {}
        for name, value in values.items():
            attr = name.replace("-", "_")
            if attr in self._options and attr not in self._parsed:
                applied[attr] = value
        self.__dict__.update(applied)
        return applied

    def args(self) -> List[str]:
        """ Return all positional arguments left over after parsing. """
        return self._args[:]
