"""
Test cases for the plainjson scanner.

Tests focus on token accuracy, line tracking and lexical error collection.
"""

import unittest

from plainjson.core.tokenizer import Position, Scanner, TokenType, scan
from plainjson.security.exceptions import ErrorKind, LexicalError
from plainjson.utils.config import ParseConfig


class ScannerTestCase(unittest.TestCase):
    """Shared helpers for scanner tests."""

    def _scan(self, text):
        scanner = Scanner(text)
        tokens = scanner.scan_tokens()
        return tokens, scanner.errors

    def _get_non_eof_tokens(self, text):
        """Helper to get tokens excluding EOF for easier testing."""
        tokens, _ = self._scan(text)
        return [t for t in tokens if t.type != TokenType.EOF]


class TestTokenizerAccuracy(ScannerTestCase):
    """Test tokenizer accuracy for well-formed input."""

    def test_string_tokenization(self):
        """Test that string tokens carry the raw content between quotes."""
        tokens = self._get_non_eof_tokens('"hello"')
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].value, "hello")

        tokens = self._get_non_eof_tokens('""')
        self.assertEqual(tokens[0].value, "")

    def test_backslashes_are_not_escapes(self):
        """Backslashes are copied verbatim into string content."""
        tokens = self._get_non_eof_tokens(r'"C:\temp\new"')
        self.assertEqual(tokens[0].value, r"C:\temp\new")

        tokens = self._get_non_eof_tokens(r'"line1\nline2"')
        self.assertEqual(tokens[0].value, "line1\\nline2")

    def test_backslash_quote_ends_string(self):
        """A quote after a backslash still terminates the string."""
        tokens, errors = self._scan(r'"a\"b"')
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].value, "a\\")
        # 'b' is unexpected, then the final quote opens an unterminated string
        self.assertEqual(len(errors), 2)

    def test_number_tokenization(self):
        """Test number tokenization keeps the raw lexeme."""
        test_cases = ["0", "-0", "123", "-456", "78.90", "0.5", "1e10",
                      "1.23e-4", "-1.5E-3", "2E+8"]

        for input_num in test_cases:
            with self.subTest(input_num=input_num):
                tokens, errors = self._scan(input_num)
                self.assertEqual(errors, [])
                self.assertEqual(tokens[0].type, TokenType.NUMBER)
                self.assertEqual(tokens[0].value, input_num)

    def test_keyword_tokenization(self):
        """Test boolean and null keyword tokenization."""
        keywords = [
            ("true", TokenType.TRUE),
            ("false", TokenType.FALSE),
            ("null", TokenType.NULL),
        ]

        for keyword, expected_type in keywords:
            with self.subTest(keyword=keyword):
                tokens = self._get_non_eof_tokens(keyword)
                self.assertEqual(len(tokens), 1)
                self.assertEqual(tokens[0].type, expected_type)
                self.assertEqual(tokens[0].value, keyword)

    def test_structural_tokenization(self):
        """Test structural character tokenization."""
        expected_types = [
            TokenType.LBRACE, TokenType.RBRACE,
            TokenType.LBRACKET, TokenType.RBRACKET,
            TokenType.COMMA, TokenType.COLON
        ]

        tokens = self._get_non_eof_tokens("{}[],:")
        self.assertEqual([t.type for t in tokens], expected_types)

    def test_whitespace_is_skipped(self):
        """Spaces, tabs, carriage returns and newlines produce no tokens."""
        tokens = self._get_non_eof_tokens(' \t\r\n"test" \r\n\t ')
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, TokenType.STRING)

    def test_eof_token_always_last(self):
        """Scanning ends with exactly one EOF token."""
        for text in ["", "   ", "[1]", "@"]:
            with self.subTest(text=text):
                tokens, _ = self._scan(text)
                self.assertEqual(tokens[-1].type, TokenType.EOF)
                self.assertEqual(
                    sum(1 for t in tokens if t.type == TokenType.EOF), 1
                )

    def test_object_token_sequence(self):
        """Test a full object produces the expected token types."""
        tokens = self._get_non_eof_tokens('{"a": [1, true]}')
        self.assertEqual(
            [t.type for t in tokens],
            [
                TokenType.LBRACE, TokenType.STRING, TokenType.COLON,
                TokenType.LBRACKET, TokenType.NUMBER, TokenType.COMMA,
                TokenType.TRUE, TokenType.RBRACKET, TokenType.RBRACE,
            ],
        )


class TestPositionTracking(ScannerTestCase):
    """Test line and column tracking."""

    def test_token_lines(self):
        """Newlines advance the line of later tokens."""
        tokens, _ = self._scan("[\n1,\n2]")
        self.assertEqual([t.line for t in tokens], [1, 2, 2, 3, 3, 3])

    def test_token_columns(self):
        """Columns are 1-based and reset after a newline."""
        tokens = self._get_non_eof_tokens('  "x"\n  42')
        self.assertEqual(tokens[0].position, Position(1, 3))
        self.assertEqual(tokens[1].position, Position(2, 3))

    def test_newline_inside_string_counts(self):
        """A newline inside a string counts as a line but keeps the string open."""
        tokens, errors = self._scan('"a\nb" @')
        self.assertEqual(tokens[0].value, "a\nb")
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].line, 2)


class TestLexicalErrors(ScannerTestCase):
    """Test lexical error detection and accumulation."""

    def test_invalid_numbers_report_errors(self):
        """Malformed numbers report an error but still produce a token."""
        invalid = ["01", "-01", "00", "1.", "1.e5", "1e", "1e+", "-", "-.5"]

        for text in invalid:
            with self.subTest(text=text):
                tokens, errors = self._scan(text)
                self.assertGreaterEqual(len(errors), 1)
                self.assertIsInstance(errors[0], LexicalError)
                self.assertIn("Invalid number literal", errors[0].message)
                self.assertEqual(tokens[0].type, TokenType.NUMBER)
                self.assertEqual(tokens[0].value, text)

    def test_leading_zero_single_error(self):
        """A leading zero is reported once and the whole lexeme is consumed."""
        tokens, errors = self._scan("0123")
        self.assertEqual(len(errors), 1)
        self.assertIn("leading zeros", errors[0].message)
        self.assertEqual(tokens[0].value, "0123")
        self.assertEqual(tokens[1].type, TokenType.EOF)

    def test_misspelled_keyword(self):
        """A misspelled keyword is an error but its token is still emitted."""
        tokens, errors = self._scan("tru")
        self.assertEqual(len(errors), 1)
        self.assertIn("expected 'true'", errors[0].message)
        self.assertEqual(tokens[0].type, TokenType.TRUE)
        self.assertEqual(tokens[0].value, "tru")

    def test_misspelled_keyword_continues_scanning(self):
        """Scanning resumes at the first character that did not match."""
        tokens, errors = self._scan("nulx")
        self.assertEqual(tokens[0].type, TokenType.NULL)
        self.assertEqual(len(errors), 2)
        self.assertIn("Unexpected character 'x'", errors[1].message)

    def test_unexpected_characters_accumulate(self):
        """Every unexpected character is reported in one pass."""
        tokens, errors = self._scan("[@, #, $]")
        self.assertEqual(len(errors), 3)
        for error in errors:
            self.assertEqual(error.kind, ErrorKind.LEXICAL)
        self.assertEqual(
            [t.type for t in tokens],
            [
                TokenType.LBRACKET, TokenType.COMMA, TokenType.COMMA,
                TokenType.RBRACKET, TokenType.EOF,
            ],
        )

    def test_unterminated_string(self):
        """A string running to end of input is reported and emits no token."""
        tokens, errors = self._scan('"abc')
        self.assertEqual(len(errors), 1)
        self.assertIn("Unterminated string", errors[0].message)
        self.assertEqual([t.type for t in tokens], [TokenType.EOF])

    def test_unterminated_string_reports_current_line(self):
        """The unterminated-string error is reported where scanning stopped."""
        _, errors = self._scan('"abc\ndef\n')
        self.assertEqual(errors[0].line, 3)

    def test_single_quotes_rejected(self):
        """Single-quoted strings are not JSON."""
        _, errors = self._scan("'a'")
        self.assertTrue(errors)
        self.assertIn("double quotes", " ".join(errors[0].suggestions))

    def test_error_positions(self):
        """Errors carry the line and column of the offending character."""
        _, errors = self._scan("[1,\n  @]")
        self.assertEqual(errors[0].position, Position(2, 3))


class TestScanFunction(unittest.TestCase):
    """Test the module-level scan() helper."""

    def test_scan_returns_tokens_and_errors(self):
        """scan() returns both the tokens and the lexical errors."""
        tokens, errors = scan("[1, @]")
        self.assertEqual(tokens[-1].type, TokenType.EOF)
        self.assertEqual(len(errors), 1)

    def test_scan_includes_context_by_default(self):
        """Errors carry a source excerpt unless disabled."""
        _, errors = scan("[1, @]")
        self.assertIsNotNone(errors[0].context)
        self.assertEqual(errors[0].context.error_char, "@")

        _, errors = scan("[1, @]", ParseConfig(include_context=False))
        self.assertIsNone(errors[0].context)

    def test_max_lexical_errors_caps_kept_errors(self):
        """Only the first max_lexical_errors errors are kept."""
        config = ParseConfig(max_lexical_errors=2)
        tokens, errors = scan("@@@@ 1", config)
        self.assertEqual(len(errors), 2)
        # scanning still covers the whole text
        self.assertEqual(tokens[0].type, TokenType.NUMBER)

    def test_dropped_errors_are_counted(self):
        """The collector counts errors beyond the cap."""
        scanner = Scanner("@@@@", max_errors=1)
        scanner.scan_tokens()
        self.assertEqual(len(scanner.errors), 1)
        self.assertEqual(scanner.collector.total, 4)


if __name__ == '__main__':
    unittest.main()
