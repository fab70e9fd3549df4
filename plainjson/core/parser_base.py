"""
Base parser functionality shared between the recursive and explicit-stack parsers.

Both parsers accept the same grammar and report the same errors; they only
differ in how they keep track of open objects and arrays.
"""

import logging
from typing import NoReturn, Optional

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    JSONSyntaxError,
    PlainJSONError,
    SecurityError,
    SemanticError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .tokenizer import Position, Token, TokenType
from .values import Bool, Null, Num, Str, Value

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (
    TokenType.STRING,
    TokenType.NUMBER,
    TokenType.TRUE,
    TokenType.FALSE,
    TokenType.NULL,
)


class BaseParserMixin:
    """Token stream handling, value construction and error reporting."""

    def __init__(
        self,
        tokens: list[Token],
        config: Optional[ParseConfig] = None,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token list must end with an EOF token")
        self.tokens = tokens
        self.pos = 0
        self.config = config or ParseConfig()
        self.validator = (
            LimitValidator(self.config.limits) if self.config.limits else None
        )
        self.error_reporter = error_reporter
        self.logger = self.config.logger or logger
        # Non-fatal errors; parsing carries on past these but the document fails.
        self.errors: list[PlainJSONError] = []

    def parse_value(self) -> Value:
        raise NotImplementedError

    def parse(self) -> Value:
        """Parse the whole token list as one document.

        Raises the first error found. A missing ':' is recorded without
        stopping the parse, so it can be the first error even when a later
        problem is what finally aborted parsing.
        """
        try:
            value = self.parse_value()
            self.expect_end_of_input()
        except SecurityError as error:
            raise self._first_error(self._with_context(error))
        except PlainJSONError as error:
            raise self._first_error(error)

        if self.errors:
            raise self.errors[0]
        return value

    def _first_error(self, error: PlainJSONError) -> PlainJSONError:
        if not self.errors:
            return error
        self.logger.debug(f"Discarding later parse error: {error.message}")
        return self.errors[0]

    def _with_context(self, error: SecurityError) -> SecurityError:
        """Attach a source excerpt to a limit error raised by the validator."""
        if self.error_reporter is None or error.context or error.position is None:
            return error
        return self.error_reporter.create_security_error(
            error.message, error.position, error.suggestions
        )

    def current_token(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Move to the next token and return the one just consumed."""
        token = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return token

    def check(self, token_type: TokenType) -> bool:
        return self.current_token().type == token_type

    def expect_end_of_input(self) -> None:
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.raise_syntax_error(
                f"Expected end of input, found trailing content {token.value!r}",
                token,
                ["Remove everything after the top-level value"],
            )

    def is_scalar(self, token: Token) -> bool:
        return token.type in _SCALAR_TYPES

    def parse_scalar(self, token: Token) -> Value:
        """Consume a string, number or keyword token and build its value."""
        if self.validator:
            self.validator.count_item(token.position)

        if token.type == TokenType.STRING:
            if self.validator:
                self.validator.validate_string_length(token.value, token.position)
            self.advance()
            return Str(token.value)

        if token.type == TokenType.NUMBER:
            if self.validator:
                self.validator.validate_number_length(token.value, token.position)
            self.advance()
            return Num(float(token.value))

        self.advance()
        if token.type == TokenType.NULL:
            return Null()
        return Bool(token.type == TokenType.TRUE)

    def raise_unexpected_value_token(self, token: Token) -> NoReturn:
        if token.type == TokenType.EOF:
            self.raise_syntax_error(
                "Unexpected end of input, expected a value",
                token,
                ErrorSuggestionEngine.suggest_for_unexpected_token(""),
            )
        self.raise_syntax_error(
            f"Unexpected token {token.value!r}, expected a value",
            token,
            ErrorSuggestionEngine.suggest_for_unexpected_token(token.value),
        )

    def open_structure(self, token: Token) -> None:
        """Consume '{' or '[' and account for the new nesting level."""
        if self.validator:
            self.validator.count_item(token.position)
            self.validator.enter_structure(token.position)
        self.advance()

    def close_structure(self) -> None:
        """Consume '}' or ']'."""
        self.advance()
        if self.validator:
            self.validator.exit_structure()

    def check_unclosed(self, structure_type: str) -> None:
        token = self.current_token()
        if token.type == TokenType.EOF:
            closer = "}" if structure_type == "object" else "]"
            self.raise_syntax_error(
                f"Unexpected end of input, expected '{closer}' to close {structure_type}",
                token,
                ErrorSuggestionEngine.suggest_for_unclosed_structure(structure_type),
            )

    def expect_separator(self, structure_type: str) -> None:
        """Consume the comma that must precede every element after the first."""
        token = self.current_token()
        if token.type != TokenType.COMMA:
            noun = "members" if structure_type == "object" else "elements"
            self.raise_syntax_error(
                f"{structure_type.capitalize()} {noun} must be separated by a comma",
                token,
                ErrorSuggestionEngine.suggest_for_unclosed_structure(structure_type),
            )
        self.advance()

    def parse_member_key(self) -> Token:
        """Consume a member key and its ':' separator, returning the key token.

        A missing ':' is recorded but not raised; the member value is parsed
        from the current token.
        """
        token = self.current_token()
        if token.type == TokenType.EOF:
            self.raise_syntax_error(
                "Unexpected end of input, expected object key", token
            )
        if token.type != TokenType.STRING:
            self.raise_syntax_error(
                f"Expected string as object key, found {token.value!r}",
                token,
                ErrorSuggestionEngine.suggest_for_unexpected_token(token.value)
                or ["Object keys must be double-quoted strings"],
            )
        self.advance()

        if self.check(TokenType.COLON):
            self.advance()
        else:
            self.errors.append(
                self.create_syntax_error(
                    "Expected ':' after object key",
                    self.current_token(),
                    ["Object keys must be followed by a colon"],
                )
            )
        return token

    def insert_member(
        self, members: dict[str, Value], key_token: Token, value: Value
    ) -> None:
        key = key_token.value
        if key in members:
            self.raise_semantic_error(f"Duplicate object key {key!r}", key_token)
        members[key] = value
        if self.validator:
            self.validator.validate_object_keys(len(members), key_token.position)

    def append_element(self, items: list[Value], value: Value, token: Token) -> None:
        items.append(value)
        if self.validator:
            self.validator.validate_array_items(len(items), token.position)

    def create_syntax_error(
        self, message: str, token: Token, suggestions: Optional[list[str]] = None
    ) -> JSONSyntaxError:
        if self.error_reporter:
            return self.error_reporter.create_syntax_error(
                message, token.position, suggestions
            )
        return JSONSyntaxError(message, token.position, suggestions=suggestions)

    def create_security_error(
        self, message: str, token: Token, suggestions: Optional[list[str]] = None
    ) -> SecurityError:
        if self.error_reporter:
            return self.error_reporter.create_security_error(
                message, token.position, suggestions
            )
        return SecurityError(message, token.position, suggestions=suggestions)

    def raise_syntax_error(
        self, message: str, token: Token, suggestions: Optional[list[str]] = None
    ) -> NoReturn:
        raise self.create_syntax_error(message, token, suggestions)

    def raise_semantic_error(self, message: str, token: Token) -> NoReturn:
        position: Position = token.position
        if self.error_reporter:
            raise self.error_reporter.create_semantic_error(message, position)
        raise SemanticError(message, position)
