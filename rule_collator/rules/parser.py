""" Module for parsing collation rule text into an ordered list of relation statements.

    Rule text is a chain of collation elements joined by relation operators:

        <  the next element sorts after the previous one with a primary (base letter) difference.
        ;  the next element sorts after the previous one with a secondary (accent) difference.
        ,  the next element sorts after the previous one with a tertiary (case) difference.
        =  the next element has exactly the same weight as the previous one.

    For example, "a,A < b,B ; ḃ,Ḃ" orders the letter b after a, its case variants tertiary-after each,
    and the dotted b variants secondary-after the plain ones. Whitespace between elements is ignored.
    A run of more than one character between operators is a contraction that collates as a single unit.
    ASCII punctuation is reserved for syntax and must be quoted with apostrophes to appear literally.
"""

from typing import Iterator, List, Optional, Tuple
import unicodedata

from . import EmptyRuleError, FrozenStruct, RuleSyntaxError


class Relation:
    """ Operator characters linking each collation element to the one before it. """

    NEXT_PRIMARY = "<"
    NEXT_SECONDARY = ";"
    NEXT_TERTIARY = ","
    SAME_WEIGHT = "="

    ALL = NEXT_PRIMARY + NEXT_SECONDARY + NEXT_TERTIARY + SAME_WEIGHT


QUOTE = "'"

# ASCII punctuation ranges that may only appear inside quotes (apart from the operators and the quote itself).
_RESERVED_RANGES = [(0x21, 0x2F), (0x3A, 0x40), (0x5B, 0x60), (0x7B, 0x7E)]
RESERVED = {chr(c) for start, end in _RESERVED_RANGES for c in range(start, end + 1)}
RESERVED.difference_update(Relation.ALL, QUOTE)


class RuleStatement(FrozenStruct):
    """ One relation from the rule text, introducing a single collation element. """

    relation: str  # Operator linking this element to the previous one (a Relation constant).
    element: str   # Character or contraction introduced by this statement.
    position: int  # Offset of the element's first character in the rule text as given.


class _Token:
    """ Token kinds produced by the scanner. """
    OPERATOR = "operator"
    OPERAND = "operand"


_TokenTuple = Tuple[str, str, int]  # (kind, text, position)


class RuleParser:
    """ Scans rule text one character at a time and checks statement order and element uniqueness. """

    def __init__(self, normalization:Optional[str]="NFC") -> None:
        self._normalization = normalization  # Unicode normalization form applied to each element (None to skip).

    def parse(self, text:str) -> List[RuleStatement]:
        """ Parse <text> into statements in declaration order. The first statement always opens a primary group. """
        if text is None or not text.strip():
            raise EmptyRuleError("Collation rules are empty.", 0)
        statements = []
        declared = {}
        relation = None
        relation_pos = 0
        for kind, value, pos in self._tokenize(text):
            if kind == _Token.OPERATOR:
                if relation is not None:
                    raise RuleSyntaxError(f'Operator "{value}" follows "{relation}" with no element between them.', pos)
                if not statements and value != Relation.NEXT_PRIMARY:
                    raise RuleSyntaxError(f'Operator "{value}" has no element before it.', pos)
                relation = value
                relation_pos = pos
                continue
            value = self._normalize(value)
            if value in declared:
                raise RuleSyntaxError(f'"{value}" was already declared at position {declared[value]}.', pos)
            declared[value] = pos
            # A leading element with no operator still starts the first primary group.
            statements.append(RuleStatement(relation=relation or Relation.NEXT_PRIMARY, element=value, position=pos))
            relation = None
        if relation is not None:
            raise RuleSyntaxError(f'Operator "{relation}" has no element after it.', relation_pos)
        return statements

    def _tokenize(self, text:str) -> Iterator[_TokenTuple]:
        """ Yield operators and operands in order. Adjacent literal runs (quoted or not) join into one operand. """
        chars = []
        start = 0
        i = 0
        length = len(text)
        while i < length:
            c = text[i]
            if c == QUOTE:
                if not chars:
                    start = i
                i = self._scan_quoted(text, i, chars)
                continue
            if c in Relation.ALL:
                if chars:
                    yield _Token.OPERAND, "".join(chars), start
                    chars = []
                yield _Token.OPERATOR, c, i
            elif c.isspace():
                pass
            elif c in RESERVED:
                raise RuleSyntaxError(f'Reserved character "{c}" must be quoted.', i)
            else:
                if not chars:
                    start = i
                chars.append(c)
            i += 1
        if chars:
            yield _Token.OPERAND, "".join(chars), start

    def _normalize(self, element:str) -> str:
        if self._normalization:
            return unicodedata.normalize(self._normalization, element)
        return element

    @staticmethod
    def _scan_quoted(text:str, i:int, chars:List[str]) -> int:
        """ Add the literal quoted at <i> to <chars> and return the index just past the closing quote.
            A doubled quote is a literal apostrophe, both inside and outside a quoted run. """
        j = i + 1
        if text.startswith(QUOTE, j):
            chars.append(QUOTE)
            return j + 1
        while True:
            end = text.find(QUOTE, j)
            if end < 0:
                raise RuleSyntaxError("Quoted literal is never closed.", i)
            chars.append(text[j:end])
            if not text.startswith(QUOTE, end + 1):
                return end + 1
            chars.append(QUOTE)
            j = end + 2


def parse_rules(text:str, normalization:Optional[str]="NFC") -> List[RuleStatement]:
    """ Parse rule <text> with a one-off parser. """
    return RuleParser(normalization).parse(text)
