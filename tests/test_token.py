import pytest

from _markuptree.tokenizer.flags import ScannerFlags
from _markuptree.tokenizer.token import Token
from _markuptree.tokenizer.token_kind import TokenKind


@pytest.mark.parametrize(
    "in_tag, in_closing_tag, in_attribute_region, in_annotation, expected",
    [
        (False, False, False, False, TokenKind.TEXT),
        (True, False, False, False, TokenKind.TAG),
        (True, False, True, False, TokenKind.ATTRIBUTE),
        (True, True, False, False, TokenKind.ENDTAG),
        (True, True, True, False, TokenKind.ENDTAG),
        (False, False, False, True, TokenKind.ANNOTATION),
        (True, True, True, True, TokenKind.ANNOTATION),
    ],
)
def test_from_flags(
    in_tag, in_closing_tag, in_attribute_region, in_annotation, expected
):
    token = Token.from_flags(
        "x", in_tag, in_closing_tag, in_attribute_region, in_annotation
    )
    assert token.kind == expected
    assert token.value == "x"


def test_equality_ignores_bounds():
    assert Token(TokenKind.TAG, "a", 1, 2) == Token(TokenKind.TAG, "a", 5, 6)
    assert Token(TokenKind.TAG, "a") != Token(TokenKind.ENDTAG, "a")


def test_structural_kinds():
    assert TokenKind.ANNOTATION not in TokenKind.structural()
    assert len(TokenKind.structural()) == 4


def test_reset_flags():
    flags = ScannerFlags(in_tag=True, in_attribute_region=True, ignore_once=True)
    flags.reset()

    assert flags == ScannerFlags()


def test_leave_tag():
    flags = ScannerFlags(
        in_tag=True, in_closing_tag=True, in_attribute_region=True, has_text=True
    )
    flags.leave_tag()

    assert flags == ScannerFlags(has_text=True)
