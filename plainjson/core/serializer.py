"""
Serializer for plainjson - renders a Value tree as compact JSON text.

String content and object keys are written between quotes exactly as
stored, without escaping. The scanner does not unescape either, so text
round-trips unless a string holds a raw '"'.
"""

import math
from typing import TextIO

from .values import Arr, Bool, Null, Num, Obj, Str, Value, fold_tree

# Integral floats up to this magnitude are written without a fraction.
_INTEGRAL_LIMIT = 1e16


def format_number(number: float) -> str:
    """Render a float using the shortest text that reads back as the same float.

    Integral values print without a trailing ``.0`` (``42``, ``-0``).
    Non-finite values print as ``inf``, ``-inf`` and ``nan``, which are not
    valid JSON.
    """
    if math.isnan(number):
        return "nan"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    if number.is_integer() and abs(number) <= _INTEGRAL_LIMIT:
        text = str(int(number))
        if number == 0 and math.copysign(1.0, number) < 0:
            return "-0"
        return text
    return repr(number)


def serialize(value: Value) -> str:
    """Render a Value tree as JSON text.

    The tree is walked with an explicit stack, so any tree the parsers can
    build serializes regardless of depth.
    """
    return fold_tree(value, _serialize_scalar, _serialize_structure)


def _serialize_scalar(value: Value) -> str:
    if isinstance(value, Null):
        return "null"
    if isinstance(value, Bool):
        return "true" if value.value else "false"
    if isinstance(value, Num):
        return format_number(value.value)
    if isinstance(value, Str):
        return f'"{value.value}"'
    raise TypeError(f"Cannot serialize object of type {type(value).__name__}")


def _serialize_structure(value: Value, parts: list[str]) -> str:
    if isinstance(value, Arr):
        return "[" + ",".join(parts) + "]"
    assert isinstance(value, Obj)
    members = (f'"{key}": {part}' for key, part in zip(value.members.keys(), parts))
    return "{" + ",".join(members) + "}"


def dumps(value: Value) -> str:
    """Serialize a Value to a JSON formatted str."""
    return serialize(value)


def dump(value: Value, fp: TextIO) -> None:
    """Serialize a Value as JSON text to a file-like object."""
    fp.write(serialize(value))
