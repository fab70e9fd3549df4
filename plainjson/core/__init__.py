"""
plainjson Core Engine.

This module provides the scanner, the parsers, the value model and the
serializer.
"""

from .engine import Parser, deserialize, load, loads, parse_document, parse_tokens
from .error_handling import ParseResult
from .serializer import dump, dumps, serialize
from .stack_parser import StackParser
from .tokenizer import Position, Scanner, Token, TokenType, scan
from .values import Arr, Bool, Null, Num, Obj, Str, Value, from_python

__all__ = [
    'deserialize', 'parse_document', 'parse_tokens', 'loads', 'load',
    'serialize', 'dumps', 'dump',
    'Parser', 'StackParser', 'ParseResult',
    'Scanner', 'scan', 'Token', 'TokenType', 'Position',
    'Value', 'Null', 'Bool', 'Num', 'Str', 'Arr', 'Obj', 'from_python',
]
