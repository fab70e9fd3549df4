"""
Error collection and the structured result of one deserialize call.

The scanner collects every lexical error it meets; the parsers stop at the
first error. Both end up in a ParseResult, so callers read a single error
channel regardless of which phase failed.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from ..security.exceptions import ErrorKind, PlainJSONError

if TYPE_CHECKING:
    from .values import Value


class ErrorCollector:
    """Collects errors, optionally keeping only the first max_errors of them."""

    def __init__(self, max_errors: Optional[int] = None):
        self.errors: list[PlainJSONError] = []
        self.max_errors = max_errors
        self.dropped = 0

    def add_error(self, error: PlainJSONError) -> None:
        """Add an error to the collection."""
        if self.max_errors is None or len(self.errors) < self.max_errors:
            self.errors.append(error)
        else:
            self.dropped += 1

    @property
    def total(self) -> int:
        """Number of errors seen, including dropped ones."""
        return len(self.errors) + self.dropped

    def __bool__(self) -> bool:
        return self.total > 0


@dataclass
class ParseResult:
    """Outcome of parse_document(): a value or the errors that prevented one."""

    value: Optional["Value"] = None
    errors: list[PlainJSONError] = field(default_factory=list)
    tokens_scanned: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors and self.value is not None

    @property
    def error(self) -> Optional[PlainJSONError]:
        """The first error, or None on success."""
        return self.errors[0] if self.errors else None

    def errors_of_kind(self, kind: ErrorKind) -> list[PlainJSONError]:
        return [e for e in self.errors if e.kind is kind]
