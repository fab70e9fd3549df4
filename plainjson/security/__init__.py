"""
plainjson error model and resource limits.

This module provides the exception hierarchy, error reporting and limit
validation.
"""

from .exceptions import (
    ErrorKind,
    ErrorReporter,
    JSONDecodeError,
    JSONSyntaxError,
    LexicalError,
    ParseError,
    PlainJSONError,
    SecurityError,
    SemanticError,
)
from .limits import LimitValidator

__all__ = [
    'ErrorKind', 'ErrorReporter', 'PlainJSONError', 'ParseError',
    'LexicalError', 'JSONSyntaxError', 'SemanticError', 'SecurityError',
    'JSONDecodeError', 'LimitValidator',
]
