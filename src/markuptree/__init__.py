import markuptree.version
from _markuptree.node import Node
from _markuptree.reading import read, read_tokens
from _markuptree.tokenizer import Scanner, Token, TokenizationError, TokenKind, parse
from _markuptree.tree_builder import (
    Diagnostic,
    MarkupStructureError,
    TreeBuilder,
    UnbalancedEndTagWarning,
    build,
)

__version__ = markuptree.version.version

__all__ = [
    "Diagnostic",
    "MarkupStructureError",
    "Node",
    "Scanner",
    "Token",
    "TokenKind",
    "TokenizationError",
    "TreeBuilder",
    "UnbalancedEndTagWarning",
    "build",
    "parse",
    "read",
    "read_tokens",
]
