"""
Common constants and mappings used across the plainjson library.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tokenizer import TokenType

WHITESPACE = " \t\r"

DIGITS = "0123456789"

# Keyword literals, keyed by their first character.
KEYWORD_LITERALS = {
    "t": "true",
    "f": "false",
    "n": "null",
}


def get_structural_token_map() -> dict[str, "TokenType"]:
    """Get the mapping of structural characters to TokenType enums."""
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
        "[": TokenType.LBRACKET,
        "]": TokenType.RBRACKET,
        ":": TokenType.COLON,
        ",": TokenType.COMMA,
    }


def get_keyword_token_map() -> dict[str, "TokenType"]:
    """Get the mapping of keyword literals to TokenType enums."""
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
        "null": TokenType.NULL,
    }
