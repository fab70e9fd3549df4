"""
Parser for plainjson - converts tokens into a Value tree.

Also provides the deserialize entry points, which run the scanner and then
a parser over one input text.
"""

import logging
from typing import Optional, TextIO, Union

from ..security.exceptions import (
    ErrorReporter,
    JSONDecodeError,
    PlainJSONError,
    SecurityError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .error_handling import ParseResult
from .parser_base import BaseParserMixin
from .stack_parser import StackParser
from .tokenizer import Scanner, Token, TokenType
from .values import Arr, Obj, Value

logger = logging.getLogger(__name__)


class Parser(BaseParserMixin):
    """Recursive-descent JSON parser, one Python frame per nesting level."""

    def parse(self) -> Value:
        try:
            return super().parse()
        except RecursionError:
            token = self.current_token()
            raise self._first_error(
                self.create_security_error(
                    "Nesting too deep for the recursive parser",
                    token,
                    ["Parse with ParseConfig(use_explicit_stack=True)"],
                )
            ) from None

    def parse_value(self) -> Value:
        """Parse a JSON value (string, number, boolean, null, object, or array)."""
        token = self.current_token()

        if self.is_scalar(token):
            return self.parse_scalar(token)

        if token.type == TokenType.LBRACE:
            return self.parse_object()

        if token.type == TokenType.LBRACKET:
            return self.parse_array()

        self.raise_unexpected_value_token(token)

    def parse_object(self) -> Obj:
        """Parse '{' (member (',' member)*)? '}'."""
        self.open_structure(self.current_token())
        members: dict[str, Value] = {}

        while True:
            self.check_unclosed("object")
            if self.check(TokenType.RBRACE):
                self.close_structure()
                return Obj(members)

            if members:
                self.expect_separator("object")

            key_token = self.parse_member_key()
            value = self.parse_value()
            self.insert_member(members, key_token, value)

    def parse_array(self) -> Arr:
        """Parse '[' (value (',' value)*)? ']'."""
        self.open_structure(self.current_token())
        items: list[Value] = []

        while True:
            self.check_unclosed("array")
            if self.check(TokenType.RBRACKET):
                self.close_structure()
                return Arr(tuple(items))

            if items:
                self.expect_separator("array")

            element_token = self.current_token()
            self.append_element(items, self.parse_value(), element_token)


def parse_tokens(
    tokens: list[Token],
    config: Optional[ParseConfig] = None,
    error_reporter: Optional[ErrorReporter] = None,
) -> Value:
    """Parse a scanned token list, raising the first error found."""
    config = config or ParseConfig()
    parser_cls = StackParser if config.use_explicit_stack else Parser
    return parser_cls(tokens, config, error_reporter).parse()


def parse_document(text: str, config: Optional[ParseConfig] = None) -> ParseResult:
    """Scan and parse text, reporting every outcome through a ParseResult.

    Lexical errors are collected over the whole text and, when there are
    any, parsing is skipped. Otherwise the result holds either the value or
    the first parser error. Malformed input never raises.
    """
    config = config or ParseConfig()
    log = config.logger or logger

    if config.limits:
        try:
            LimitValidator(config.limits).validate_input_size(text)
        except SecurityError as error:
            log.debug(f"Rejected input: {error.message}")
            return ParseResult(errors=[error])

    error_reporter = (
        ErrorReporter(text, config.max_error_context)
        if config.include_context
        else None
    )

    scanner = Scanner(text, error_reporter, config.max_lexical_errors)
    tokens = scanner.scan_tokens()
    log.debug(
        f"Scanned {len(tokens)} tokens with {scanner.collector.total} lexical error(s)"
    )

    if scanner.collector:
        return ParseResult(
            errors=list(scanner.errors), tokens_scanned=len(tokens)
        )

    try:
        value = parse_tokens(tokens, config, error_reporter)
    except PlainJSONError as error:
        log.debug(f"Parse failed: {error.message}")
        return ParseResult(errors=[error], tokens_scanned=len(tokens))

    return ParseResult(value=value, tokens_scanned=len(tokens))


def deserialize(text: str, config: Optional[ParseConfig] = None) -> Optional[Value]:
    """Parse text into a Value, or return None if it is not valid JSON.

    A JSON ``null`` document yields ``Null()``, never ``None``.
    """
    return parse_document(text, config).value


def loads(
    s: Union[str, bytes, bytearray], *, config: Optional[ParseConfig] = None
) -> Value:
    """
    Deserialize a JSON document into a Value tree.

    Args:
        s: JSON text (bytes are decoded as UTF-8)
        config: Optional ParseConfig for limits, parser choice and error context

    Returns:
        The parsed Value

    Raises:
        SecurityError: If the only error is a violated limit
        JSONDecodeError: If the text is not valid JSON; ``errors`` holds
            every lexical error, or the first parser error
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8")

    result = parse_document(s, config)
    if result.ok:
        assert result.value is not None
        return result.value

    if len(result.errors) == 1 and isinstance(result.errors[0], SecurityError):
        raise result.errors[0]
    raise JSONDecodeError(result.errors)


def load(fp: TextIO, *, config: Optional[ParseConfig] = None) -> Value:
    """Deserialize a JSON document read from a file-like object."""
    return loads(fp.read(), config=config)
