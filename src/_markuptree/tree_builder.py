"""
The tree builder consumes the tokens generated by the scanner (see
_markuptree.tokenizer) and rebuilds the nesting of the document.

Closed elements are merged into a single accumulating root node. When a
closed element is not a direct child of the level the root is at, the root
takes over the tag and attributes of the closed element and is wrapped in a
new container node. For a document with a single outer element, the
resulting root is such a container and the outer element is its child.
Top level siblings become children of a root with an empty tag.
"""

import warnings
from dataclasses import dataclass

from _markuptree.node import Node
from _markuptree.tokenizer.token import Token
from _markuptree.tokenizer.token_kind import TokenKind


class MarkupStructureError(Exception):
    """
    Raised by the tree builder when an attribute or text token
    is found outside of any open tag.
    """

    pass


class UnbalancedEndTagWarning(UserWarning):
    """
    Emitted when an end tag is found without a corresponding open tag. The
    end tag is discarded.
    """

    pass


@dataclass(frozen=True)
class Diagnostic:
    """
    A recoverable issue found while building the tree.

    :param index: The index of the offending token in the token sequence.
    """

    message: str
    token: Token
    index: int


def split_attribute(value):
    """
    Split an attribute token value into key and value. Anything after a
    second "=" is dropped.

    >>> split_attribute('href="a"')
    ('href', '"a"')
    """
    parts = value.split("=")
    key = parts[0]
    attribute_value = parts[1] if len(parts) > 1 else ""
    return key, attribute_value


class TreeBuilder:
    """
    Builds a Node tree from tokens.

    >>> builder = TreeBuilder(parse(b"<p><b>bold</b></p>"))
    >>> root = builder.build()
    >>> str(root)
    '{ tag: div, depth: 0, children: [{ tag: p, depth: 1, children: [{ tag: b, depth: 2, children: [] }] }] }'

    Tags left open at the end of the tokens are abandoned.
    """

    def __init__(self, tokens, wrapper_tag="div"):
        """
        :param tokens: iterable of tokens, ie. a Scanner.
        :param wrapper_tag: The tag of the container nodes created when
            merging closed elements at inconsistent depths.
        """
        self.tokens = tokens
        self.diagnostics = []

        self._wrapper_tag = None
        self.wrapper_tag = wrapper_tag

    @property
    def wrapper_tag(self):
        return self._wrapper_tag

    @wrapper_tag.setter
    def wrapper_tag(self, value):
        if not isinstance(value, str) or not value:
            raise ValueError(f"wrapper_tag has to be a non-empty string, got {value!r}")
        self._wrapper_tag = value

    def report(self, message, token, index):
        self.diagnostics.append(Diagnostic(message, token, index))
        warnings.warn(message, UnbalancedEndTagWarning, stacklevel=3)

    def merge(self, root, closed):
        """
        Merge a closed element into the root.

        :returns: The new root.
        """
        if root.depth == 0:
            root.depth = closed.depth - 1

        if root.depth == closed.depth - 1:
            root.children.append(closed)
            return root

        root.tag = closed.tag
        root.children.extend(closed.children)
        root.attributes = closed.attributes
        return Node(self.wrapper_tag, closed.depth - 1, [root])

    def current(self, trees, token):
        if not trees:
            raise MarkupStructureError(
                f"Found {token.kind.name.lower()} {token.value!r} outside of any tag"
                f" at {token.start}"
            )
        return trees[-1]

    def build(self):
        """
        :returns: The root node of the document.
        """
        self.diagnostics = []
        stack = []
        trees = []
        root = Node("", 0)

        for index, token in enumerate(self.tokens):
            if token.kind not in TokenKind.structural():
                continue
            if token.kind == TokenKind.TAG:
                stack.append(token)
                trees.append(Node(token.value, len(stack)))
            elif token.kind == TokenKind.ENDTAG:
                if not stack:
                    self.report(
                        f"Found end tag {token.value!r} without open tag at {token.start}",
                        token,
                        index,
                    )
                    continue
                stack.pop()
                root = self.merge(root, trees.pop())
            elif token.kind == TokenKind.ATTRIBUTE:
                self.current(trees, token).set_attribute(*split_attribute(token.value))
            elif token.kind == TokenKind.TEXT:
                self.current(trees, token).set_text(token.value)

        return root


def build(tokens, wrapper_tag="div"):
    """
    Build the node tree of a tokenized markup document.

    :param tokens: iterable of tokens.
    :returns: The root node.
    """
    return TreeBuilder(tokens, wrapper_tag=wrapper_tag).build()
