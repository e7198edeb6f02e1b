"""Tests for the C# tokenizer."""

from __future__ import annotations

from opinionated_usings.parser.lexer import TokenKind, tokenize


def _kinds(text: str) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token.text) for token in tokenize(text)]


class TestTokenize:
    def test_empty(self) -> None:
        assert list(tokenize("")) == []

    def test_directive_tokens(self) -> None:
        assert _kinds("using A = B.C;  // x") == [
            (TokenKind.IDENTIFIER, "using"),
            (TokenKind.WHITESPACE, " "),
            (TokenKind.IDENTIFIER, "A"),
            (TokenKind.WHITESPACE, " "),
            (TokenKind.PUNCTUATION, "="),
            (TokenKind.WHITESPACE, " "),
            (TokenKind.IDENTIFIER, "B"),
            (TokenKind.PUNCTUATION, "."),
            (TokenKind.IDENTIFIER, "C"),
            (TokenKind.PUNCTUATION, ";"),
            (TokenKind.WHITESPACE, "  "),
            (TokenKind.LINE_COMMENT, "// x"),
        ]

    def test_text_round_trips(self) -> None:
        text = 'namespace N {\r\n  /* a\n b */ var s = @"x""{"; #if\n#if DEBUG\n}'
        assert "".join(token.text for token in tokenize(text)) == text

    def test_positions(self) -> None:
        tokens = [t for t in tokenize("a\n  /* x\ny */ b\r\nc") if not t.is_trivia]
        assert [(t.text, t.line, t.column) for t in tokens] == [
            ("a", 0, 0),
            ("b", 2, 5),
            ("c", 3, 0),
        ]

    def test_alias_qualifier_is_one_token(self) -> None:
        assert (TokenKind.PUNCTUATION, "::") in _kinds("global::System")

    def test_verbatim_identifier(self) -> None:
        assert _kinds("@class") == [(TokenKind.IDENTIFIER, "@class")]

    def test_strings_hide_braces(self) -> None:
        kinds = _kinds('"{" @"}""" $"{x}" \'{\' """ } """')
        assert [text for kind, text in kinds if kind is TokenKind.STRING] == [
            '"{"',
            '@"}"""',
            '$"{x}"',
            '""" } """',
        ]
        assert (TokenKind.CHAR, "'{'") in kinds

    def test_preprocessor_only_at_line_start(self) -> None:
        kinds = _kinds("  #region Usings\na # b")
        assert kinds[1] == (TokenKind.PREPROCESSOR, "#region Usings")
        assert (TokenKind.PUNCTUATION, "#") in kinds

    def test_unterminated_block_comment_runs_to_end(self) -> None:
        kinds = _kinds("a /* never\nclosed")
        assert kinds[-1] == (TokenKind.BLOCK_COMMENT, "/* never\nclosed")

    def test_arbitrary_text_never_raises(self) -> None:
        text = "This isn't C# code. \x00\x1b  €"
        assert "".join(token.text for token in tokenize(text)) == text
