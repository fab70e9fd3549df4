"""
plainjson - a small, strict JSON text engine.

plainjson scans text into tokens, parses the tokens into an immutable value
tree, and serializes value trees back into compact JSON text.

Key Features:
- Immutable tagged-union value tree: Null, Bool, Num, Str, Arr, Obj
- Strict grammar: no comments, no trailing commas, no duplicate keys
- Every lexical error in a document is reported in one pass
- Errors carry their kind and source line, with a context excerpt
- Optional explicit-stack parser for deeply nested input
- Optional resource limits

String content is copied verbatim between quotes: backslash escapes are
neither decoded when parsing nor produced when serializing.

Quick Start:
    import plainjson

    value = plainjson.deserialize('{"items": [1, 2, 3], "active": true}')
    if value is None:
        ...  # not valid JSON

    result = plainjson.parse_document('[1,]')
    print(result.error)  # first error, with line and context

    text = plainjson.serialize(value)
"""

from .core.engine import deserialize, load, loads, parse_document
from .core.error_handling import ParseResult
from .core.serializer import dump, dumps, serialize
from .core.values import Arr, Bool, Null, Num, Obj, Str, Value, from_python
from .security.exceptions import (
    ErrorKind,
    JSONDecodeError,
    JSONSyntaxError,
    LexicalError,
    ParseError,
    PlainJSONError,
    SecurityError,
    SemanticError,
)
from .utils.config import ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "plainjson contributors"

__all__ = [
    # Entry points
    "deserialize", "parse_document", "loads", "load",
    "serialize", "dumps", "dump",
    # Value model
    "Value", "Null", "Bool", "Num", "Str", "Arr", "Obj", "from_python",
    "ParseResult",
    # Configuration classes
    "ParseConfig", "ParseLimits",
    # Exception classes
    "ErrorKind", "PlainJSONError", "ParseError", "LexicalError",
    "JSONSyntaxError", "SemanticError", "SecurityError", "JSONDecodeError",
]
