"""Grammar — Raw audit text to a tree of typed nodes."""

from nuaudit.grammar.nodes import (
    CatalogNode,
    CatalogNumberNode,
    CourseListNode,
    CourseNode,
    CourseOptionNode,
    CourseRefToken,
    DateNode,
    DocumentNode,
    EndOfInputNode,
    GraduationDateNode,
    MajorListNode,
    MinorListNode,
    Node,
    NUPathNode,
    RangeToken,
    SummaryNode,
    Token,
    TokenKind,
)
from nuaudit.grammar.parser import AuditSyntaxError, parse_document
from nuaudit.grammar.profile import FormatProfile, get_profile, list_profiles

__all__ = [
    # Nodes
    "CatalogNode",
    "CatalogNumberNode",
    "CourseListNode",
    "CourseNode",
    "CourseOptionNode",
    "CourseRefToken",
    "DateNode",
    "DocumentNode",
    "EndOfInputNode",
    "GraduationDateNode",
    "MajorListNode",
    "MinorListNode",
    "Node",
    "NUPathNode",
    "RangeToken",
    "SummaryNode",
    "Token",
    "TokenKind",
    # Parsing
    "AuditSyntaxError",
    "parse_document",
    # Profiles
    "FormatProfile",
    "get_profile",
    "list_profiles",
]
