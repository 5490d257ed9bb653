"""
In this module, the scanner is a single pass state machine over a byte
buffer that generates tokens. The state of the scanner is a set of
orthogonal flags (see ScannerFlags) together with a cursor: the current
position and the start of the slice currently being accumulated.

A slice is flushed into a token when a delimiter is found. The kind of the
token is decided by the flags at that moment, see Token.from_flags. The only
lookahead needed is two bytes, for detecting the "<!--" and "-->" comment
delimiters.

The tokens are decoded into strings when created, the scanner has to be given
a bytes-like object with UTF-8 contents.
"""

from .errors import TokenizationError
from .scanner import Scanner, parse
from .token import Token
from .token_kind import TokenKind

__all__ = ["Scanner", "Token", "TokenKind", "TokenizationError", "parse"]
