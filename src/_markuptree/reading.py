import pathlib
from contextlib import contextmanager

from _markuptree.tokenizer import Scanner
from _markuptree.tree_builder import TreeBuilder


@contextmanager
def open_bytes(filelike):
    """
    Yields the contents of filelike as bytes. A path is opened in
    binary mode and closed afterwards, a stream is only read.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rb") as file_stream:
            yield file_stream.read()
    else:
        yield filelike.read()


def read_tokens(filelike):
    """
    Reads a markup file and returns its tokens,
    ie. tokens = read_tokens("/my/index.html")
    """
    with open_bytes(filelike) as data:
        return Scanner(data).parse()


def read(filelike, wrapper_tag="div"):
    """
    Reads a markup file and returns the root of its node tree,
    ie. root = read("/my/index.html")

    Unbalanced end tags are reported with UnbalancedEndTagWarning.
    """
    return TreeBuilder(read_tokens(filelike), wrapper_tag=wrapper_tag).build()
