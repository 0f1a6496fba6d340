"""
Tests for the NUPath extractor.
"""

from nuaudit.extract.nupath import extract_nupath
from nuaudit.grammar.nodes import NUPathNode, Token, TokenKind
from nuaudit.ir.enums import CompletionStatus, NUPathCategory


def nupath_node(*pairs) -> NUPathNode:
    tokens = tuple(Token(kind, text, column) for column, (kind, text) in enumerate(pairs, start=1))
    return NUPathNode(line=1, tokens=tokens)


class TestExtractNUPath:
    """Status and category from NUPath tokens."""

    def test_known_status_and_category(self):
        node = nupath_node((TokenKind.STATUS, "OK"), (TokenKind.NUPATH_ID, "ND"))
        assert extract_nupath(node) == (CompletionStatus.COMPLETED, NUPathCategory.ND)

    def test_missing_status(self):
        node = nupath_node((TokenKind.NUPATH_ID, "WF"))
        assert extract_nupath(node) == (None, NUPathCategory.WF)

    def test_unknown_category(self):
        node = nupath_node((TokenKind.STATUS, "IP"), (TokenKind.NUPATH_ID, "ZZ"))
        assert extract_nupath(node) == (CompletionStatus.IN_PROGRESS, None)

    def test_unknown_status(self):
        node = nupath_node((TokenKind.STATUS, "XX"), (TokenKind.NUPATH_ID, "CE"))
        assert extract_nupath(node) == (None, NUPathCategory.CE)

    def test_first_token_of_each_kind_wins(self):
        node = nupath_node(
            (TokenKind.STATUS, "NO"),
            (TokenKind.NUPATH_ID, "EX"),
            (TokenKind.STATUS, "OK"),
            (TokenKind.NUPATH_ID, "CE"),
        )
        assert extract_nupath(node) == (CompletionStatus.REQUIRED, NUPathCategory.EX)
