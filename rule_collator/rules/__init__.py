""" Package for collation rule text and the weight tables built from it. """

from types import SimpleNamespace
from typing import NoReturn


class FrozenStruct(SimpleNamespace):
    """ Immutable attribute-based data structure. """

    def _raise_on_mutate(self, *args) -> NoReturn:
        raise AttributeError('Structure is immutable.')

    __setattr__ = __delattr__ = _raise_on_mutate


class CollationError(Exception):
    """ Base class for all errors raised by the collation engine. """


class RuleSyntaxError(CollationError, ValueError):
    """ Raised when rule text cannot be parsed into a weight table. """

    def __init__(self, message:str, position=-1) -> None:
        super().__init__(message, position)
        self.message = message    # Human-readable description of the problem.
        self.position = position  # Offset of the offending character in the rule text, or -1 if unknown.

    def __str__(self) -> str:
        if self.position < 0:
            return self.message
        return f'{self.message} (at position {self.position})'


class EmptyRuleError(RuleSyntaxError):
    """ Raised when rule text is missing or contains nothing but whitespace. """
