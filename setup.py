#!/usr/bin/env python3

""" Build script for the rule collator. """

import glob
import os
import shutil
import subprocess
import sys

from setuptools import Command as stCommand, find_packages, setup


def iglob_all(*patterns):
    """ Yield each unique file path that matches one of many glob <patterns>. """
    seen = set()
    for pattern in patterns:
        for path in glob.iglob(pattern, recursive=True):
            if path not in seen:
                yield path
                seen.add(path)


class BaseCommand(stCommand):
    """ Abstract command class that runs dependencies before the command itself. """
    requires = ""
    def __init__(self, *args):
        """ Run all dependency commands in order before touching the main one. """
        super().__init__(*args)
        for cmd in self.requires.split():
            self.run_command(cmd)


class Command(BaseCommand):
    """ BaseCommand with default fields and methods defined. """
    user_options = []
    def initialize_options(self):
        self.args = []
    def finalize_options(self):
        pass


class CommandNamespace:
    """ Contains all command classes for use in setuptools.setup().
        Any command here may be run by name, e.g. > python3 setup.py clean. """

    class clean(Command):
        description = "Remove all build and test-generated files."
        def run(self):
            for path in iglob_all('.pytest_cache', 'build', 'dist', '*.egg-info', '**/__pycache__'):
                if os.path.isdir(path):
                    shutil.rmtree(path)
                elif os.path.exists(path):
                    os.remove(path)

    class run(Command):
        description = "Run from source with any extra arguments."
        command_consumes_arguments = True
        def run(self):
            cmd = (sys.executable, '-m', 'rule_collator', *self.args)
            subprocess.run(cmd, check=True)

    class test(Command):
        description = "Clean up, then run all unit tests."
        requires = "clean"
        def run(self):
            import pytest
            pytest.main(["test"])


setup(
    name="rule_collator",
    version="1.0.0",
    description="Sort and compare strings by human-authored collation rules.",
    packages=find_packages(exclude=["test", "test.*"]),
    package_data={"rule_collator": ["assets/*.rules"]},
    python_requires=">=3.7",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["rule_collator=rule_collator.__main__:main"]},
    cmdclass={k: v for k, v in vars(CommandNamespace).items() if isinstance(v, type)},
)
