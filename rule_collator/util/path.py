""" Module for expanding prefixed file paths (such as bundled rule files). """

import os
import sys

# Default user path components are for Linux, since it has several possible platform identifiers.
DEFAULT_USERPATH_COMPONENTS = (".local", "share", "{0}")
# User path components specific to Windows and Mac OS.
PLATFORM_USERPATH_COMPONENTS = {"win32": ("AppData", "Local", "{0}", "{0}"),
                                "darwin": ("Library", "Application Support", "{0}")}


def user_data_directory(app_name:str) -> str:
    """ Find an application's user data directory based on a platform-specific path expansion. """
    path_components = PLATFORM_USERPATH_COMPONENTS.get(sys.platform) or DEFAULT_USERPATH_COMPONENTS
    path_fmt = os.path.join("~", *path_components)
    return os.path.expanduser(path_fmt.format(app_name))


def package_directory(pkg_name:str) -> str:
    """ Find (or import) a package and return the directory it lives in. """
    module = sys.modules.get(pkg_name) or __import__(pkg_name)
    return os.path.dirname(module.__file__)


class PrefixPathConverter:
    """ Deciphers paths based on prefix strings (such as ~/ for the user data directory). """

    def __init__(self) -> None:
        self._path_table = []  # Matchable path prefixes paired with base paths, longest prefix first.

    def add(self, prefix:str, base_path:str) -> None:
        """ Add a base path to substitute for <prefix> at the start of a path string. """
        self._path_table.append((prefix, os.path.normpath(base_path)))
        self._path_table.sort(key=lambda x: -len(x[0]))

    def convert(self, path:str, *, make_dirs=False) -> str:
        """ Replace a known prefix on <path> with its base path. Other paths pass through unchanged.
            If <make_dirs> is true, create directories as needed to make a valid path for write mode. """
        for prefix, base_path in self._path_table:
            if path.startswith(prefix):
                path = os.path.join(base_path, path[len(prefix):])
                break
        if make_dirs:
            directory = os.path.dirname(path) or "."
            os.makedirs(directory, exist_ok=True)
        return path
