"""
Tests for the lexer and the token stream.
"""

import pytest

from serverconf.config.lexer import LexerError, Token, TokenStream, tokenize


def texts(source: str) -> list[str]:
    return [token.text for token in tokenize(source)]


def test_words_and_lines() -> None:
    """Test that words carry their line numbers."""
    tokens = tokenize("localhost:80 {\n  root /var/www\n}\n")

    assert tokens == [
        Token("localhost:80", 1),
        Token("{", 1),
        Token("root", 2),
        Token("/var/www", 2),
        Token("}", 3),
    ]


def test_braces_are_only_tokens_when_standalone() -> None:
    """Braces glued to other text stay part of the word."""
    assert texts("log {path} {") == ["log", "{path}", "{"]
    assert texts("host:80{") == ["host:80{"]


def test_comments_are_skipped() -> None:
    """Comments are dropped up to the end of the line."""
    source = "# leading comment\nlocalhost:80 # trailing\ngzip\n"

    assert tokenize(source) == [Token("localhost:80", 2), Token("gzip", 3)]


def test_hash_inside_word_is_not_a_comment() -> None:
    """A hash inside a word is kept."""
    assert texts("redir /a#b") == ["redir", "/a#b"]


def test_quoted_word_keeps_whitespace() -> None:
    """Quoted words keep their spaces."""
    assert texts('log /var/log/access.log "{remote} - {path}"') == [
        "log",
        "/var/log/access.log",
        "{remote} - {path}",
    ]


def test_quoted_escape() -> None:
    """Only an escaped quote is unescaped."""
    assert texts(r'header X "say \"hi\""') == ["header", "X", 'say "hi"']


def test_quoted_word_spanning_lines_uses_start_line() -> None:
    """A quoted word spanning lines reports the line it started on."""
    tokens = tokenize('a "one\ntwo" b')

    assert tokens == [Token("a", 1), Token("one\ntwo", 1, quoted=True), Token("b", 2)]


def test_quoted_braces_are_not_structural() -> None:
    """Only an unquoted brace opens or closes a block."""
    tokens = tokenize('header "}" "{" {')

    assert [(token.text, token.opens_block, token.closes_block) for token in tokens] == [
        ("header", False, False),
        ("}", False, False),
        ("{", False, False),
        ("{", True, False),
    ]


def test_empty_quoted_word() -> None:
    assert texts('ext ""') == ["ext", ""]


def test_unterminated_quote() -> None:
    """Test that an unterminated quote raises LexerError."""
    with pytest.raises(LexerError) as exc_info:
        tokenize('root\n"/var/www', filename="site.conf")

    assert exc_info.value.line == 2
    assert "site.conf:2" in str(exc_info.value)


def test_empty_source() -> None:
    """Test that empty or comment-only input yields no tokens."""
    assert tokenize("") == []
    assert tokenize("  \n\t# only a comment\n") == []


class TestTokenStream:
    """Lookahead and pushback behavior."""

    def test_next_until_exhausted(self) -> None:
        """The last token stays current after exhaustion."""
        stream = TokenStream([Token("a", 1), Token("b", 1)])

        assert not stream.started
        assert stream.next() and stream.current.text == "a"
        assert stream.next() and stream.current.text == "b"
        assert not stream.next()
        assert stream.exhausted
        assert stream.current.text == "b"

    def test_unread_replays_current(self) -> None:
        """An unread token is returned again by next()."""
        stream = TokenStream([Token("a", 1), Token("b", 2)])
        stream.next()
        stream.unread()

        assert stream.pending
        assert stream.peek() == Token("a", 1)
        assert stream.next()
        assert not stream.pending
        assert stream.current.text == "a"
        assert stream.next()
        assert stream.current.text == "b"

    def test_peek_does_not_consume(self) -> None:
        """peek() leaves the current token in place."""
        stream = TokenStream([Token("a", 1), Token("b", 1)])
        stream.next()

        assert stream.peek() == Token("b", 1)
        assert stream.current.text == "a"
        assert stream.next()
        assert stream.current.text == "b"
        assert stream.peek() is None

    def test_unread_twice_fails(self) -> None:
        """Only one token can be pending."""
        stream = TokenStream([Token("a", 1)])
        stream.next()
        stream.unread()

        with pytest.raises(RuntimeError):
            stream.unread()

    def test_unread_before_start_fails(self) -> None:
        with pytest.raises(RuntimeError):
            TokenStream([]).unread()

    def test_current_before_start_fails(self) -> None:
        with pytest.raises(RuntimeError):
            TokenStream([Token("a", 1)]).current
