""" Unit tests for rule parsing and weight table construction. """

import pickle

import pytest

from rule_collator.rules import EmptyRuleError, RuleSyntaxError
from rule_collator.rules.io import decode_rule_file
from rule_collator.rules.parser import parse_rules, Relation
from rule_collator.rules.table import build_table, WeightEntry


def test_relations() -> None:
    """ Each operator links its element to the previous one. The first element always opens a primary group. """
    statements = parse_rules("a , A ; á < b = B")
    assert [(st.relation, st.element) for st in statements] == [(Relation.NEXT_PRIMARY, "a"),
                                                                 (Relation.NEXT_TERTIARY, "A"),
                                                                 (Relation.NEXT_SECONDARY, "á"),
                                                                 (Relation.NEXT_PRIMARY, "b"),
                                                                 (Relation.SAME_WEIGHT, "B")]
    assert [st.position for st in statements] == [0, 4, 8, 12, 16]


def test_weights() -> None:
    """ Primary advances on '<' and resets the finer levels. Secondary advances on ';' and resets tertiary.
        Tertiary advances on ','. '=' copies the previous weight exactly. """
    table = build_table("a , A ; á , Á < b = B ; ḃ < c")
    assert dict(table) == {"a": (0, 0, 0), "A": (0, 0, 1), "á": (0, 1, 0), "Á": (0, 1, 1),
                           "b": (1, 0, 0), "B": (1, 0, 0), "ḃ": (1, 1, 0), "c": (2, 0, 0)}
    assert table.max_primary == 2
    assert isinstance(table["b"], WeightEntry)
    assert table["Á"].secondary == 1
    # Elements with equal weights are grouped together in declaration order.
    groups = table.groups()
    assert [g.members for g in groups] == [("a",), ("A",), ("á",), ("Á",), ("b", "B"), ("ḃ",), ("c",)]
    assert [g.weight for g in groups] == sorted(g.weight for g in groups)


def test_whitespace_and_leading_operator() -> None:
    """ Whitespace between elements is ignored, and a rule may start with '<'. """
    table = build_table("a<b;c,d")
    assert build_table("  a  <  b ; c , d \n") == table
    assert build_table("< a < b ; c , d") == table
    # Parsing the same text twice always gives the same table.
    assert build_table("a<b;c,d") == table


def test_quoting() -> None:
    """ Reserved characters and whitespace must be quoted. A doubled quote is a literal apostrophe. """
    table = build_table("'@' < 0 < ' ' < 'it''s' < '' < a'-'b")
    assert list(table) == ["@", "0", " ", "it's", "'", "a-b"]
    assert table["@"].primary < table["0"].primary < table["a-b"].primary


def test_contractions() -> None:
    """ A run of several characters between operators is one element, matched longest first. """
    table = build_table("c < ch < d")
    assert table.match("chaque", 0) == ((1, 0, 0), 2)
    assert table.match("cote", 0) == ((0, 0, 0), 1)
    assert table.match("xch", 1) == ((1, 0, 0), 2)
    # A character the rules never mention gets a fallback weight after every declared primary.
    w, n = table.match("x", 0)
    assert n == 1
    assert w == table.fallback("x") == (table.max_primary + 1 + ord("x"), 0, 0)


def test_normalization() -> None:
    """ Rule text is normalized before parsing, so decomposed input declares the composed element. """
    table = build_table("e < e\u0301")
    assert "\u00e9" in table
    raw_table = build_table("e < e\u0301", normalization=None)
    assert "\u00e9" not in raw_table
    assert raw_table.normalization is None
    assert table.normalization == "NFC"


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_empty_rules(text) -> None:
    """ Blank rules are an error of their own, which is still a syntax error. """
    with pytest.raises(EmptyRuleError):
        build_table(text)
    with pytest.raises(RuleSyntaxError):
        build_table(text)


@pytest.mark.parametrize("text, position", [("a < ? < d", 4),      # Reserved character used without quotes.
                                            ("a < < b", 4),        # Operator with no element between.
                                            ("a < b <", 6),        # Operator with no element after.
                                            ("; a < b", 0),        # Leading operator other than '<'.
                                            ("<", 0),              # Nothing but an operator.
                                            ("a < 'b", 4),         # Quote never closed.
                                            ("a < b , A ; a", 12), # Same element declared twice.
                                            ("a < 'b' < b", 10)])  # Quoting does not make a duplicate unique.
def test_syntax_errors(text:str, position:int) -> None:
    """ Malformed rules raise an error with the offset of the offending character. No table is built. """
    with pytest.raises(RuleSyntaxError) as exc_info:
        build_table(text)
    err = exc_info.value
    assert not isinstance(err, EmptyRuleError)
    assert err.position == position
    assert f"position {position}" in str(err)
    assert isinstance(err, ValueError)


def test_positions_with_normalization() -> None:
    """ Error offsets and statement positions index the rule text as given, even when normalization shortens it. """
    with pytest.raises(RuleSyntaxError) as exc_info:
        build_table("e\u0301 < ?")
    assert exc_info.value.position == 5
    with pytest.raises(RuleSyntaxError) as exc_info:
        build_table("\u00e9 < e\u0301")
    assert exc_info.value.position == 4
    statements = parse_rules("e\u0301 < f")
    assert [(st.element, st.position) for st in statements] == [("\u00e9", 0), ("f", 5)]


def test_table_is_read_only() -> None:
    """ Tables expose no mutating methods, and survive pickling for worker processes. """
    table = build_table("a < b")
    with pytest.raises(TypeError):
        table["c"] = WeightEntry(2, 0, 0)
    assert not hasattr(table, "update")
    assert pickle.loads(pickle.dumps(table)) == table


def test_rule_file_decoding() -> None:
    """ Rule files may have full-line comments. Everything else is joined into one rule string. """
    s = "# Greek letters\n\n  α < β  \n# gamma next\n< γ\n"
    assert decode_rule_file(s) == "α < β < γ"
    assert build_table(decode_rule_file(s)) == build_table("α < β < γ")
