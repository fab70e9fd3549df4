"""
Resource limits for plainjson.

A LimitValidator is created per parse call when ParseConfig.limits is set.
Every check raises SecurityError, which the parsers treat like any other
first error: the parse aborts and the document fails.
"""

from typing import TYPE_CHECKING, Optional

from ..utils.config import ParseLimits
from .exceptions import SecurityError

if TYPE_CHECKING:
    from ..core.tokenizer import Position


class LimitValidator:
    """Tracks nesting and value counts for one parse and enforces ParseLimits."""

    def __init__(self, limits: ParseLimits):
        self.limits = limits
        self.nesting_depth = 0
        self.total_items = 0

    def _check(
        self,
        what: str,
        actual: int,
        limit: int,
        position: Optional["Position"] = None,
    ) -> None:
        if actual > limit:
            raise SecurityError(f"{what} {actual} exceeds limit {limit}", position)

    def validate_input_size(self, text: str) -> None:
        """Reject input longer than max_input_size characters."""
        self._check("Input size", len(text), self.limits.max_input_size)

    def validate_string_length(
        self, string: str, position: Optional["Position"] = None
    ) -> None:
        self._check(
            "String length", len(string), self.limits.max_string_length, position
        )

    def validate_number_length(
        self, lexeme: str, position: Optional["Position"] = None
    ) -> None:
        self._check(
            "Number length", len(lexeme), self.limits.max_number_length, position
        )

    def enter_structure(self, position: Optional["Position"] = None) -> None:
        """Track entering an object or array and validate depth."""
        self.nesting_depth += 1
        self._check(
            "Nesting depth",
            self.nesting_depth,
            self.limits.max_nesting_depth,
            position,
        )

    def exit_structure(self) -> None:
        if self.nesting_depth > 0:
            self.nesting_depth -= 1

    def validate_object_keys(
        self, key_count: int, position: Optional["Position"] = None
    ) -> None:
        self._check(
            "Object key count", key_count, self.limits.max_object_keys, position
        )

    def validate_array_items(
        self, item_count: int, position: Optional["Position"] = None
    ) -> None:
        self._check(
            "Array item count", item_count, self.limits.max_array_items, position
        )

    def count_item(self, position: Optional["Position"] = None) -> None:
        """Count one parsed value against max_total_items."""
        self.total_items += 1
        self._check(
            "Total item count", self.total_items, self.limits.max_total_items, position
        )
