"""
Exception hierarchy and error reporting for plainjson.

Every error carries a kind (lexical, syntax, semantic or limit) and the
source position it was detected at, so a single list of errors can describe
the outcome of one deserialize call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.tokenizer import Position


class ErrorKind(Enum):
    """Category of a plainjson error."""

    LEXICAL = "lexical"
    SYNTAX = "syntax"
    SEMANTIC = "semantic"
    LIMIT = "limit"


@dataclass
class ErrorContext:
    """Source excerpt around an error location."""

    text: str
    position: "Position"
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class PlainJSONError(Exception):
    """Base exception for all plainjson errors."""

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        message: str,
        position: Optional["Position"] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """Line the error was reported at, if known."""
        return self.position.line if self.position else None

    def _format_message(self) -> str:
        msg = self.message

        if self.position:
            msg += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            msg += f"\n\nContext:\n{self.context.line_text}"
            msg += f"\n{self.context.column_indicator}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  - {suggestion}"

        return msg


class ParseError(PlainJSONError):
    """Raised when text cannot be turned into a value tree."""


class LexicalError(ParseError):
    """Unexpected character, unterminated string, malformed number or literal."""

    kind = ErrorKind.LEXICAL


class JSONSyntaxError(ParseError):
    """Unexpected or missing token, missing separator, or trailing content."""

    kind = ErrorKind.SYNTAX


class SemanticError(ParseError):
    """Well-formed tokens that still violate a value invariant (duplicate keys)."""

    kind = ErrorKind.SEMANTIC


class SecurityError(PlainJSONError):
    """Raised when a configured limit or the parser's nesting capacity is exceeded."""

    kind = ErrorKind.LIMIT


class JSONDecodeError(PlainJSONError, ValueError):
    """Raised by loads() when a document fails to deserialize."""

    def __init__(self, errors: list[PlainJSONError]):
        self.errors = list(errors)
        first = self.errors[0] if self.errors else None
        message = first.message if first else "Failed to deserialize JSON value"
        if len(self.errors) > 1:
            message += f" (and {len(self.errors) - 1} more error(s))"
        super().__init__(
            message,
            position=first.position if first else None,
            context=first.context if first else None,
            suggestions=first.suggestions if first else None,
        )
        self.kind = first.kind if first else None


class ErrorReporter:
    """Builds errors with source context for a single input text."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.lines = text.split("\n")
        self.max_context = max_context

    def create_context(self, position: "Position") -> ErrorContext:
        """Build an ErrorContext for the given position."""
        line_idx = position.line - 1
        line_text = self.lines[line_idx] if 0 <= line_idx < len(self.lines) else ""

        col_idx = max(0, min(position.column - 1, len(line_text)))
        half = self.max_context // 2
        context_before = line_text[max(0, col_idx - half) : col_idx]
        context_after = line_text[col_idx : col_idx + half]
        error_char = line_text[col_idx] if col_idx < len(line_text) else ""

        if len(line_text) > self.max_context:
            start = max(0, col_idx - half)
            line_text = line_text[start : start + self.max_context]
            col_idx -= start

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=context_before,
            context_after=context_after,
            error_char=error_char,
            line_text=line_text,
            column_indicator=" " * col_idx + "^",
        )

    def create_lexical_error(
        self,
        message: str,
        position: "Position",
        suggestions: Optional[list[str]] = None,
    ) -> LexicalError:
        """Create a LexicalError with context."""
        return LexicalError(
            message, position, self.create_context(position), suggestions
        )

    def create_syntax_error(
        self,
        message: str,
        position: "Position",
        suggestions: Optional[list[str]] = None,
    ) -> JSONSyntaxError:
        """Create a JSONSyntaxError with context."""
        return JSONSyntaxError(
            message, position, self.create_context(position), suggestions
        )

    def create_semantic_error(
        self,
        message: str,
        position: "Position",
        suggestions: Optional[list[str]] = None,
    ) -> SemanticError:
        """Create a SemanticError with context."""
        return SemanticError(
            message, position, self.create_context(position), suggestions
        )

    def create_security_error(
        self,
        message: str,
        position: Optional["Position"] = None,
        suggestions: Optional[list[str]] = None,
    ) -> SecurityError:
        """Create a SecurityError, with context when a position is known."""
        context = self.create_context(position) if position else None
        return SecurityError(message, position, context, suggestions)


class ErrorSuggestionEngine:
    """Suggests fixes for common JSON mistakes."""

    @staticmethod
    def suggest_for_unexpected_character(char: str) -> list[str]:
        """Suggestions for a character that cannot start any token."""
        if char == "'":
            return ["Use double quotes for strings", "Replace 'text' with \"text\""]
        if char in "/#":
            return ["Comments are not allowed in JSON"]
        if char.isalpha():
            return [
                "Wrap text values in double quotes",
                "Literals are lowercase: true, false, null",
            ]
        if char == ".":
            return ["Numbers need a digit before the decimal point, e.g. 0.5"]
        if char == "+":
            return ["Remove the leading '+', only '-' is allowed before a number"]
        return ["Remove or quote the unexpected character"]

    @staticmethod
    def suggest_for_invalid_literal(expected: str) -> list[str]:
        """Suggestions for a misspelled keyword literal."""
        return [f"Did you mean '{expected}'?", "Keyword literals are case-sensitive"]

    @staticmethod
    def suggest_for_invalid_number(problem: str) -> list[str]:
        """Suggestions for a malformed number literal."""
        suggestions = {
            "leading_zero": ["Remove leading zeros, e.g. 7 instead of 07"],
            "missing_integer": ["Add at least one digit after '-'"],
            "missing_fraction": ["Add digits after the decimal point, e.g. 1.0"],
            "missing_exponent": ["Add digits after the exponent marker, e.g. 1e5"],
        }
        return suggestions.get(problem, [])

    @staticmethod
    def suggest_for_unexpected_token(token_value: str) -> list[str]:
        """Suggestions for a token that cannot start a value."""
        if token_value in {"]", "}"}:
            return [
                "Remove the trailing comma before the closing bracket",
                "Check for a missing value",
            ]
        if token_value == ",":
            return ["Remove the extra comma", "Check for a missing value"]
        if token_value == ":":
            return ["Colons may only follow object keys"]
        if token_value == "":
            return ["Input ended before a value was found"]
        return []

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        """Suggestions for an object or array missing its closing bracket."""
        if structure_type == "object":
            return ["Add the missing '}' to close the object", "Check for a missing comma"]
        if structure_type == "array":
            return ["Add the missing ']' to close the array", "Check for a missing comma"]
        return []
