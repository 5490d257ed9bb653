import io

import pytest

import markuptree
from markuptree import read, read_tokens


@pytest.fixture
def markup_file(tmp_path):
    test_file = tmp_path / "index.html"
    test_file.write_bytes(b'<html><body class="x">hello</body></html>\n')
    return test_file


def test_read_path(markup_file):
    root = read(markup_file)

    assert root.tag == "div"
    (html,) = root.children
    assert html.tag == "html"
    (body,) = html.children
    assert body.attributes == {"class": '"x"'}
    assert body.text == "hello"


def test_read_str_path(markup_file):
    assert read(str(markup_file)) == read(markup_file)


def test_read_tokens(markup_file):
    tokens = read_tokens(markup_file)

    assert [t.kind for t in tokens] == [
        markuptree.TokenKind.TAG,
        markuptree.TokenKind.TAG,
        markuptree.TokenKind.ATTRIBUTE,
        markuptree.TokenKind.TEXT,
        markuptree.TokenKind.ENDTAG,
        markuptree.TokenKind.ENDTAG,
    ]


def test_read_stream_is_not_closed():
    stream = io.BytesIO(b"<a></a>")

    root = read(stream)

    assert not stream.closed
    assert [c.tag for c in root.children] == ["a"]


def test_read_wrapper_tag(markup_file):
    assert read(markup_file, wrapper_tag="main").tag == "main"


def test_read_text_stream_is_rejected():
    with pytest.raises(TypeError):
        read_tokens(io.StringIO("<a></a>"))


def test_read_warns_on_unbalanced_end_tag(tmp_path):
    test_file = tmp_path / "broken.html"
    test_file.write_bytes(b"<p></p></div>")

    with pytest.warns(markuptree.UnbalancedEndTagWarning):
        root = read(test_file)

    assert [c.tag for c in root.children] == ["p"]


def test_version():
    assert isinstance(markuptree.__version__, str)
