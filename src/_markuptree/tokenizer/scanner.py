from _markuptree.tokenizer.errors import TokenizationError
from _markuptree.tokenizer.flags import ScannerFlags
from _markuptree.tokenizer.token import Token

WHITESPACE = b"\n\r "


class Scanner:
    """
    Single pass tokenizer of a markup document. Iterating over a Scanner
    yields tokens in the order their closing delimiter was found.

    >>> [(t.kind.name, t.value) for t in Scanner(b" <div /> ")]
    [('TAG', 'div'), ('ENDTAG', '')]

    Note: start_position == 0 means that no slice is pending, so a slice
    can never start at the first byte of the input. Text that runs until
    the end of the input, and comments that are never closed, do not
    produce tokens.
    """

    def __init__(self, data):
        """
        :param data: A bytes-like object containing UTF-8 encoded markup.
        """
        if isinstance(data, str):
            raise TypeError("Scanner expects bytes, got str. Encode it as UTF-8 first.")
        self.data = bytes(data)
        self.end = len(self.data)
        self.position = 0
        self.start_position = 0

    def peek(self, length=2):
        """
        :returns: The (at most) length bytes following the current position.
        """
        return self.data[self.position + 1 : self.position + 1 + length]

    def make_token(self, flags, value=None):
        """
        Create a token from the pending slice, or from the given value
        for synthesized tokens.
        """
        if value is None:
            # "<!-->" closes the comment before its content starts.
            start, end = min(self.start_position, self.position), self.position
            try:
                value = self.data[start:end].decode("utf-8")
            except UnicodeDecodeError as err:
                raise TokenizationError(
                    f"Could not decode slice [{start}, {end}) as utf-8: {err}"
                ) from err
        else:
            start = end = self.position
        return Token.from_flags(
            value,
            flags.in_tag,
            flags.in_closing_tag,
            flags.in_attribute_region,
            flags.in_annotation,
            start,
            end,
        )

    def __iter__(self):
        return self.tokenize()

    def parse(self):
        """
        :returns: list of all tokens in the document.
        """
        return list(self.tokenize())

    def tokenize(self):
        self.position = 0
        self.start_position = 0
        flags = ScannerFlags()

        while self.position < self.end:
            byte = self.data[self.position : self.position + 1]
            if flags.in_annotation:
                if byte == b"-" and self.peek() == b"->":
                    yield self.make_token(flags)
                    self.start_position = 0
                    flags.in_annotation = False
                    # Lands on ">" which is dispatched in normal mode.
                    self.position += 2
                    continue
            elif byte == b"<":
                if self.start_position != 0 and self.position != self.start_position:
                    yield self.make_token(flags)
                    self.start_position = 0
                flags.in_tag = True
                flags.ignore_once = False
            elif byte == b"!":
                if flags.in_tag and self.peek() == b"--":
                    self.start_position = self.position + 3
                    flags.reset()
                    flags.in_annotation = True
            elif byte == b">":
                if self.start_position != 0:
                    yield self.make_token(flags)
                    self.start_position = 0
                elif flags.in_closing_tag:
                    if flags.ignore_once:
                        flags.ignore_once = False
                    else:
                        yield self.make_token(flags, value="")
                flags.leave_tag()
            elif byte == b"/":
                if not flags.in_string:
                    if flags.in_tag:
                        flags.in_closing_tag = True
                    self.start_position = self.position + 1
            elif byte in WHITESPACE:
                if flags.in_string:
                    pass
                elif not flags.has_text or self.start_position == 0:
                    self.start_position = 0
                elif flags.in_tag:
                    if flags.in_closing_tag:
                        flags.ignore_once = True
                    yield self.make_token(flags)
                    flags.in_attribute_region = True
                    flags.has_text = False
                    self.start_position = 0
            elif byte == b'"':
                if self.start_position == 0 and not flags.in_string:
                    self.start_position = self.position
                flags.in_string = not flags.in_string
            elif self.start_position == 0:
                flags.has_text = True
                self.start_position = self.position
            self.position += 1


def parse(data):
    """
    Tokenize a markup document.

    :param data: bytes-like object of UTF-8 encoded markup.
    :returns: list of tokens.
    """
    return Scanner(data).parse()
