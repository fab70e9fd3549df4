"""
Value model for plainjson.

A parsed document is a tree of immutable Value nodes. Each node is one of
Null, Bool, Num, Str, Arr or Obj. Children are owned by exactly one parent,
so trees are acyclic.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class Value:
    """Base class of the tagged-union value tree."""

    __slots__ = ()

    def to_python(self) -> Any:
        """Convert the tree into plain Python objects."""
        raise NotImplementedError


@dataclass(frozen=True)
class Null(Value):
    """JSON null."""

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Bool(Value):
    """JSON true or false."""

    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Num(Value):
    """JSON number, always held as a 64-bit float."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class Str(Value):
    """JSON string; content is kept exactly as it appeared between the quotes."""

    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False, repr=False)
class Arr(Value):
    """JSON array."""

    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arr):
            return NotImplemented
        return trees_equal(self, other)

    def __hash__(self) -> int:
        return fold_tree(self, hash, _hash_structure)

    def __repr__(self) -> str:
        return fold_tree(self, repr, _repr_structure)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def to_python(self) -> list[Any]:
        return fold_tree(self, _scalar_to_python, _structure_to_python)


@dataclass(frozen=True, eq=False, repr=False)
class Obj(Value):
    """JSON object.

    Members keep insertion order, but equality and hashing ignore order. The
    mapping is read-only; duplicate keys are rejected by the parser before
    an Obj is built.
    """

    members: Mapping[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Obj):
            return NotImplemented
        return trees_equal(self, other)

    def __hash__(self) -> int:
        return fold_tree(self, hash, _hash_structure)

    def __repr__(self) -> str:
        return fold_tree(self, repr, _repr_structure)

    def __len__(self) -> int:
        return len(self.members)

    def __getitem__(self, key: str) -> Value:
        return self.members[key]

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def keys(self) -> Any:
        return self.members.keys()

    def items(self) -> Any:
        return self.members.items()

    def to_python(self) -> dict[str, Any]:
        return fold_tree(self, _scalar_to_python, _structure_to_python)


def fold_tree(
    value: Any,
    leaf: Callable[[Any], T],
    combine: Callable[[Any, list[T]], T],
) -> T:
    """Reduce a value tree bottom-up without recursion.

    ``leaf`` maps a node that is not an Arr or Obj to a result; ``combine``
    maps an Arr or Obj and the results of its children, in order, to a
    result. Depth is bounded by memory only.
    """
    results: list[T] = []
    stack: list[tuple[Any, bool]] = [(value, False)]

    while stack:
        node, expanded = stack.pop()
        if not isinstance(node, (Arr, Obj)):
            results.append(leaf(node))
            continue

        children = node.items if isinstance(node, Arr) else tuple(node.members.values())
        if expanded:
            split = len(results) - len(children)
            child_results = results[split:]
            del results[split:]
            results.append(combine(node, child_results))
            continue

        stack.append((node, True))
        stack.extend((child, False) for child in reversed(children))

    return results[0]


def trees_equal(left: Value, right: Value) -> bool:
    """Structural equality without recursion; object member order is ignored."""
    stack: list[tuple[Any, Any]] = [(left, right)]

    while stack:
        a, b = stack.pop()
        if isinstance(a, Arr):
            if not isinstance(b, Arr) or len(a.items) != len(b.items):
                return False
            stack.extend(zip(a.items, b.items))
        elif isinstance(a, Obj):
            if not isinstance(b, Obj) or a.members.keys() != b.members.keys():
                return False
            stack.extend((a.members[key], b.members[key]) for key in a.members)
        elif isinstance(b, (Arr, Obj)) or a != b:
            return False

    return True


def _hash_structure(node: Any, child_hashes: list[int]) -> int:
    if isinstance(node, Arr):
        return hash((Arr, tuple(child_hashes)))
    return hash((Obj, frozenset(zip(node.members.keys(), child_hashes))))


def _repr_structure(node: Any, child_reprs: list[str]) -> str:
    if isinstance(node, Arr):
        inner = ", ".join(child_reprs)
        if len(child_reprs) == 1:
            inner += ","
        return f"Arr(items=({inner}))"
    members = ", ".join(
        f"{key!r}: {child}" for key, child in zip(node.members.keys(), child_reprs)
    )
    return f"Obj(members={{{members}}})"


def _scalar_to_python(node: Value) -> Any:
    return node.to_python()


def _structure_to_python(node: Any, children: list[Any]) -> Any:
    if isinstance(node, Arr):
        return children
    return dict(zip(node.members.keys(), children))


def from_python(obj: Any) -> Value:
    """Build a Value tree from plain Python objects.

    Integers become Num floats and tuples become arrays. Dict keys must be
    strings.
    """
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Null()
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, (int, float)):
        return Num(float(obj))
    if isinstance(obj, str):
        return Str(obj)
    if isinstance(obj, (list, tuple)):
        return Arr(tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        members = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, not {type(key).__name__}")
            members[key] = from_python(value)
        return Obj(members)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
