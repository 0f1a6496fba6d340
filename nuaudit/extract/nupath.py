"""
NUPath Extractor — An NUPath line to (status, category).

Either half may come back as None when its token is missing or
not a known code. Deciding what to do with an incomplete pair is
the caller's job.
"""

from enum import Enum
from typing import Optional, TypeVar

from nuaudit.core.logging import LogChannel, get_logger
from nuaudit.grammar.nodes import NUPathNode, Token, TokenKind
from nuaudit.ir.enums import CompletionStatus, NUPathCategory, UnknownCodeError

log = get_logger(LogChannel.EXTRACT, name="nuaudit.extract.nupath")

E = TypeVar("E", bound=Enum)


def _parse_code(enum_cls: type[E], token: Optional[Token]) -> Optional[E]:
    if token is None:
        return None
    try:
        return enum_cls.from_code(token.text)
    except UnknownCodeError as e:
        log.debug("unknown_code", kind=e.kind, code=e.code, column=token.column)
        return None


def extract_nupath(node: NUPathNode) -> tuple[Optional[CompletionStatus], Optional[NUPathCategory]]:
    """Classify an NUPath line, keeping the first token of each kind."""
    first: dict[TokenKind, Token] = {}
    for token in node.tokens:
        first.setdefault(token.kind, token)

    status = _parse_code(CompletionStatus, first.get(TokenKind.STATUS))
    category = _parse_code(NUPathCategory, first.get(TokenKind.NUPATH_ID))
    return status, category
