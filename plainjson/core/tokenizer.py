"""
Scanner for plainjson - turns input text into tokens and lexical errors.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    LexicalError,
)
from ..utils.config import ParseConfig
from .constants import (
    DIGITS,
    KEYWORD_LITERALS,
    WHITESPACE,
    get_keyword_token_map,
    get_structural_token_map,
)
from .error_handling import ErrorCollector


class TokenType(Enum):
    """Token types for JSON parsing."""

    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    COLON = "COLON"
    COMMA = "COMMA"

    STRING = "STRING"
    NUMBER = "NUMBER"
    TRUE = "TRUE"
    FALSE = "FALSE"
    NULL = "NULL"

    EOF = "EOF"


@dataclass(frozen=True)
class Position:
    """Position in source text (1-based line and column)."""

    line: int
    column: int


class Token(NamedTuple):
    """Token with type, raw value and the position where it starts."""

    type: TokenType
    value: str
    position: Position

    @property
    def line(self) -> int:
        return self.position.line


class Scanner:
    """Lexical analyzer for JSON input.

    A Scanner is single-use: it walks the whole text once, left to right,
    and never stops at an error. Malformed numbers and misspelled keywords
    still produce a token so scanning can carry on; every problem found is
    kept in ``errors``.
    """

    def __init__(
        self,
        text: str,
        error_reporter: Optional[ErrorReporter] = None,
        max_errors: Optional[int] = None,
    ) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.error_reporter = error_reporter
        self.collector = ErrorCollector(max_errors)
        self._start_pos = 0
        self._start = Position(1, 1)
        self._structural = get_structural_token_map()
        self._keywords = get_keyword_token_map()

    @property
    def errors(self) -> list[LexicalError]:
        return self.collector.errors  # type: ignore[return-value]

    def current_position(self) -> Position:
        """Get current position in the text."""
        return Position(self.line, self.column)

    def is_at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Current character without consuming it, or '' at end of input."""
        if self.is_at_end():
            return ""
        return self.text[self.pos]

    def peek_digit(self) -> bool:
        char = self.peek()
        return char != "" and char in DIGITS

    def advance(self) -> str:
        """Consume and return the current character, tracking line and column."""
        if self.is_at_end():
            return ""

        char = self.text[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until end of input, then a single EOF token."""
        while not self.is_at_end():
            self._start_pos = self.pos
            self._start = self.current_position()
            token = self._scan_token()
            if token is not None:
                yield token

        yield Token(TokenType.EOF, "", self.current_position())

    def scan_tokens(self) -> list[Token]:
        """Scan the whole text into a list of tokens."""
        return list(self.tokenize())

    def _scan_token(self) -> Optional[Token]:
        char = self.advance()

        if char in WHITESPACE or char == "\n":
            return None

        if char in self._structural:
            return self._make_token(self._structural[char])

        if char == '"':
            return self._scan_string()

        if char == "-" or char in DIGITS:
            return self._scan_number(char)

        if char in KEYWORD_LITERALS:
            return self._scan_keyword(KEYWORD_LITERALS[char])

        self._report(
            f"Unexpected character {char!r}",
            self._start,
            ErrorSuggestionEngine.suggest_for_unexpected_character(char),
        )
        return None

    def _make_token(self, token_type: TokenType, value: Optional[str] = None) -> Token:
        if value is None:
            value = self.text[self._start_pos : self.pos]
        return Token(token_type, value, self._start)

    def _scan_string(self) -> Optional[Token]:
        # Backslashes are ordinary content; the next '"' always ends the string.
        content_start = self.pos
        while not self.is_at_end() and self.peek() != '"':
            self.advance()

        if self.is_at_end():
            self._report(
                "Unterminated string",
                self.current_position(),
                ["Add the closing '\"' to end the string"],
            )
            return None

        content = self.text[content_start : self.pos]
        self.advance()
        return self._make_token(TokenType.STRING, content)

    def _scan_number(self, first_char: str) -> Token:
        first_digit = first_char
        if first_char == "-":
            if self.peek_digit():
                first_digit = self.advance()
            else:
                first_digit = ""
                self._report_number("missing_integer", "expected a digit after '-'")

        if first_digit == "0" and self.peek_digit():
            self._report_number("leading_zero", "leading zeros are not allowed")

        if first_digit:
            while self.peek_digit():
                self.advance()

        if self.peek() == ".":
            self.advance()
            if not self.peek_digit():
                self._report_number(
                    "missing_fraction", "expected a digit after the decimal point"
                )
            while self.peek_digit():
                self.advance()

        if self.peek() in ("e", "E"):
            self.advance()
            if self.peek() in ("+", "-"):
                self.advance()
            if not self.peek_digit():
                self._report_number(
                    "missing_exponent", "expected a digit in the exponent"
                )
            while self.peek_digit():
                self.advance()

        return self._make_token(TokenType.NUMBER)

    def _scan_keyword(self, literal: str) -> Token:
        for expected in literal[1:]:
            if self.peek() != expected:
                self._report(
                    f"Invalid literal, expected '{literal}'",
                    self.current_position(),
                    ErrorSuggestionEngine.suggest_for_invalid_literal(literal),
                )
                break
            self.advance()

        return self._make_token(self._keywords[literal])

    def _report_number(self, problem: str, detail: str) -> None:
        self._report(
            f"Invalid number literal: {detail}",
            self.current_position(),
            ErrorSuggestionEngine.suggest_for_invalid_number(problem),
        )

    def _report(
        self, message: str, position: Position, suggestions: Optional[list[str]] = None
    ) -> None:
        if self.error_reporter:
            error = self.error_reporter.create_lexical_error(
                message, position, suggestions
            )
        else:
            error = LexicalError(message, position, suggestions=suggestions)
        self.collector.add_error(error)


def scan(
    text: str, config: Optional[ParseConfig] = None
) -> tuple[list[Token], list[LexicalError]]:
    """Scan text into (tokens, lexical errors).

    The token list always ends with an EOF token, even when errors were found.
    """
    config = config or ParseConfig()
    reporter = (
        ErrorReporter(text, config.max_error_context)
        if config.include_context
        else None
    )
    scanner = Scanner(text, reporter, config.max_lexical_errors)
    tokens = scanner.scan_tokens()
    return tokens, scanner.errors
