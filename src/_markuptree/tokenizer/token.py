from dataclasses import dataclass, field

from _markuptree.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class Token:
    """
    A token in a markup document, ie. a classified slice of the input.

    The value is decoded from the input at construction time, start and end
    are the byte offsets of the slice it was taken from. Tokens compare
    equal by kind and value only.
    """

    kind: TokenKind
    value: str
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)

    @classmethod
    def from_flags(
        cls,
        value,
        in_tag,
        in_closing_tag,
        in_attribute_region,
        in_annotation,
        start=0,
        end=0,
    ):
        """
        :returns: A token whose kind is resolved from the scanner state at
            the time the slice was flushed. Annotation takes priority, then
            end tags, attributes and tags; anything outside a tag is text.
        """
        if in_annotation:
            kind = TokenKind.ANNOTATION
        elif not in_tag:
            kind = TokenKind.TEXT
        elif in_closing_tag:
            kind = TokenKind.ENDTAG
        elif in_attribute_region:
            kind = TokenKind.ATTRIBUTE
        else:
            kind = TokenKind.TAG
        return cls(kind, value, start, end)
