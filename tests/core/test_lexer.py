"""Tests for the SGF tokenizer."""

from kifu.core.sgf import Lexer, Token, TokenType, strip_newlines, tokenize


def _types(text: str) -> list[TokenType]:
    return [token.type for token in tokenize(text)]


class TestStructure:
    def test_minimal_document(self) -> None:
        tokens = tokenize("(;GM[1])")
        assert [t.type for t in tokens] == [
            TokenType.LEFT_PAREN,
            TokenType.SEMICOLON,
            TokenType.PROPERTY_NAME,
            TokenType.PROPERTY_VALUE,
            TokenType.RIGHT_PAREN,
            TokenType.EOF,
        ]
        assert [t.text for t in tokens] == ["(", ";", "GM", "1", ")", ""]
        assert [t.offset for t in tokens] == [0, 1, 2, 5, 7, 8]

    def test_property_names_are_uppercased(self) -> None:
        tokens = tokenize("(;gm[1]Sz[19])")
        names = [t.text for t in tokens if t.type == TokenType.PROPERTY_NAME]
        assert names == ["GM", "SZ"]

    def test_values_keep_their_case_and_spaces(self) -> None:
        tokens = tokenize("(;PB[Honinbo Shusaku])")
        assert tokens[3] == Token(TokenType.PROPERTY_VALUE, 5, "Honinbo Shusaku")

    def test_empty_value(self) -> None:
        tokens = tokenize("(;TB[])")
        assert tokens[3].type == TokenType.PROPERTY_VALUE
        assert tokens[3].text == ""
        assert tokens[-1].type == TokenType.EOF

    def test_text_before_first_paren_is_skipped(self) -> None:
        tokens = tokenize("garbage(;A[b])")
        assert tokens[0] == Token(TokenType.LEFT_PAREN, 7, "(")

    def test_document_without_paren_is_just_eof(self) -> None:
        tokens = tokenize("no game here")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF
        assert tokens[0].text == ""

    def test_empty_input(self) -> None:
        assert tokenize("") == [Token(TokenType.EOF, 0, "")]

    def test_multi_valued_property_repeats_values_only(self) -> None:
        assert _types("(;AB[aa][bb])") == [
            TokenType.LEFT_PAREN,
            TokenType.SEMICOLON,
            TokenType.PROPERTY_NAME,
            TokenType.PROPERTY_VALUE,
            TokenType.PROPERTY_VALUE,
            TokenType.RIGHT_PAREN,
            TokenType.EOF,
        ]

    def test_whitespace_after_values_is_skipped(self) -> None:
        tokens = tokenize("(;AB[aa] [bb]\t;B[cc] )")
        values = [t.text for t in tokens if t.type == TokenType.PROPERTY_VALUE]
        assert values == ["aa", "bb", "cc"]
        assert tokens[-1].type == TokenType.EOF

    def test_doubled_semicolon_is_absorbed(self) -> None:
        assert _types("(;;B[aa])").count(TokenType.SEMICOLON) == 1
        assert _types("(;;B[aa])")[-1] == TokenType.EOF

    def test_property_may_follow_right_paren(self) -> None:
        tokens = tokenize("(;A[b](;B[c])C[d])")
        kinds = [t.type for t in tokens]
        paren_idx = kinds.index(TokenType.RIGHT_PAREN)
        assert tokens[paren_idx + 1] == Token(TokenType.PROPERTY_NAME, 13, "C")
        assert kinds[-1] == TokenType.EOF

    def test_nested_right_parens(self) -> None:
        kinds = _types("(;A[b](;B[c](;W[d])))")
        assert kinds[-4:] == [
            TokenType.RIGHT_PAREN,
            TokenType.RIGHT_PAREN,
            TokenType.RIGHT_PAREN,
            TokenType.EOF,
        ]

    def test_scan_stops_after_closing_paren_followed_by_space(self) -> None:
        kinds = _types("(;A[b]) (;B[c])")
        assert kinds[-2:] == [TokenType.RIGHT_PAREN, TokenType.EOF]
        assert kinds.count(TokenType.LEFT_PAREN) == 1


class TestNewlines:
    def test_strip_newlines(self) -> None:
        assert strip_newlines("a\r\nb\nc\rd") == "abcd"

    def test_multiline_value_collapses_to_one_line(self) -> None:
        tokens = tokenize("(;C[line one\nline two]\r\n;B[aa])")
        assert tokens[3].text == "line oneline two"
        assert tokens[-1].type == TokenType.EOF

    def test_lexer_exposes_stripped_text(self) -> None:
        assert Lexer("(;A\n[b])").text == "(;A[b])"


class TestErrors:
    def test_semicolon_required_after_left_paren(self) -> None:
        tokens = tokenize("(B[aa])")
        assert [t.type for t in tokens] == [TokenType.LEFT_PAREN, TokenType.ERROR]
        error = tokens[-1]
        assert error.offset == 1
        assert error.context == "(|B[aa])"
        assert error.text == "semicolon expected here, position 1, '(|B[aa])'"

    def test_whitespace_not_allowed_between_paren_and_semicolon(self) -> None:
        tokens = tokenize("( ;A[b])")
        assert tokens[-1].type == TokenType.ERROR
        assert tokens[-1].text.startswith("semicolon expected here")

    def test_property_required_after_semicolon(self) -> None:
        tokens = tokenize("(;[aa])")
        assert tokens[-1].type == TokenType.ERROR
        assert tokens[-1].offset == 2
        assert tokens[-1].text.startswith("property expected here")

    def test_left_bracket_required_after_name(self) -> None:
        tokens = tokenize("(;B(aa])")
        assert tokens[-2] == Token(TokenType.PROPERTY_NAME, 2, "B")
        assert tokens[-1].type == TokenType.ERROR
        assert tokens[-1].offset == 3
        assert "left bracket '[' expected here" in tokens[-1].text

    def test_unterminated_value(self) -> None:
        tokens = tokenize("(;KEY[unterminated")
        assert tokens[-2] == Token(TokenType.PROPERTY_VALUE, 6, "unterminated")
        error = tokens[-1]
        assert error.type == TokenType.ERROR
        assert error.offset == 18
        assert error.context == "inated|"
        assert "right bracket ']' expected here" in error.text

    def test_non_printable_character_ends_value(self) -> None:
        tokens = tokenize("(;C[a\tb])")
        assert tokens[-2].text == "a"
        assert tokens[-1].type == TokenType.ERROR
        assert tokens[-1].offset == 5

    def test_invalid_character_after_value(self) -> None:
        tokens = tokenize("(;A[b]1)")
        assert tokens[-1].type == TokenType.ERROR
        assert "(found '1')" in tokens[-1].text

    def test_end_of_input_after_value(self) -> None:
        tokens = tokenize("(;A[b] ")
        assert tokens[-1].type == TokenType.ERROR
        assert "found end of input" in tokens[-1].text

    def test_error_is_last_token_without_eof(self) -> None:
        kinds = _types("(;A[b](;B[c](;W[d]")
        assert kinds[-1] == TokenType.ERROR
        assert TokenType.EOF not in kinds

    def test_context_is_bounded(self) -> None:
        text = "(;C[" + "x" * 40 + "\t" + "y" * 40 + "])"
        error = tokenize(text)[-1]
        before, _, after = error.context.partition("|")
        assert before == "xxxxxx"
        assert len(after) == 6


class TestOffsets:
    def test_offsets_are_utf8_byte_offsets(self) -> None:
        tokens = tokenize("(;C[é];B[aa])")
        semicolons = [t for t in tokens if t.type == TokenType.SEMICOLON]
        assert semicolons[1].offset == 7
        assert tokens[3] == Token(TokenType.PROPERTY_VALUE, 4, "é")
        assert tokens[5] == Token(TokenType.PROPERTY_NAME, 8, "B")


class TestStreaming:
    def test_tokens_are_produced_lazily(self) -> None:
        stream = Lexer("(;A[b])").tokens()
        assert next(stream).type == TokenType.LEFT_PAREN
        assert next(stream).type == TokenType.SEMICOLON

    def test_stream_cannot_be_restarted(self) -> None:
        lexer = Lexer("(;A[b])")
        first = list(lexer)
        assert first[-1].type == TokenType.EOF
        assert list(lexer.tokens()) == []

    def test_every_stream_ends_with_one_terminal_token(self) -> None:
        for text in ("", "(;A[b])", "(;A[b]", "((((", "(;A[b]))))", ")("):
            tokens = tokenize(text)
            terminal = [t for t in tokens if t.type.is_terminal]
            assert terminal == [tokens[-1]]
