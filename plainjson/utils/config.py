"""
Configuration and limits for plainjson parsing.

Every option has a default that reproduces the plain engine behavior: no
resource limits, recursive descent, and errors with source context.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

_SIZE_FIELDS = ("max_input_size", "max_string_length", "max_number_length")
_STRUCTURE_FIELDS = (
    "max_nesting_depth",
    "max_object_keys",
    "max_array_items",
    "max_total_items",
)
_CONFIG_OPTIONS = (
    "use_explicit_stack",
    "include_context",
    "max_error_context",
    "max_lexical_errors",
)


@dataclass
class SizeLimits:
    """Input and content size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100


@dataclass
class StructureLimits:
    """Value tree complexity limits."""
    max_nesting_depth: int = 100
    max_object_keys: int = 10000
    max_array_items: int = 100000
    max_total_items: int = 1000000


@dataclass
class ParseLimits:
    """Resource limits enforced while parsing."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **flat_limits: int,
    ):
        unknown = set(flat_limits) - set(_SIZE_FIELDS) - set(_STRUCTURE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown limit(s): {', '.join(sorted(unknown))}")

        if size_limits is not None:
            self.size_limits = size_limits
        else:
            self.size_limits = SizeLimits(
                **{k: v for k, v in flat_limits.items() if k in _SIZE_FIELDS}
            )

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            self.structure_limits = StructureLimits(
                **{k: v for k, v in flat_limits.items() if k in _STRUCTURE_FIELDS}
            )

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length of a single string's content."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_number_length(self) -> int:
        """Maximum length of a number lexeme."""
        assert self.size_limits is not None
        return self.size_limits.max_number_length

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth of objects and arrays."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth

    @property
    def max_object_keys(self) -> int:
        """Maximum number of members in one object."""
        assert self.structure_limits is not None
        return self.structure_limits.max_object_keys

    @property
    def max_array_items(self) -> int:
        """Maximum number of elements in one array."""
        assert self.structure_limits is not None
        return self.structure_limits.max_array_items

    @property
    def max_total_items(self) -> int:
        """Maximum number of values in the whole document."""
        assert self.structure_limits is not None
        return self.structure_limits.max_total_items


@dataclass
class ParsingBehavior:
    """Core parsing behavior settings."""
    use_explicit_stack: bool = False


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_context: bool = True
    max_error_context: int = 50
    max_lexical_errors: Optional[int] = None


@dataclass
class ParseConfig:
    """Configuration options for plainjson parsing."""

    limits: Optional[ParseLimits] = None
    behavior: Optional[ParsingBehavior] = None
    error_reporting: Optional[ErrorReporting] = None
    logger: Optional[logging.Logger] = None

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        behavior: Optional[ParsingBehavior] = None,
        error_reporting: Optional[ErrorReporting] = None,
        logger: Optional[logging.Logger] = None,
        **config_options: Any,
    ):
        unknown = set(config_options) - set(_CONFIG_OPTIONS)
        if unknown:
            raise TypeError(f"Unknown config option(s): {', '.join(sorted(unknown))}")

        self.limits = limits
        self.logger = logger

        if behavior is not None:
            self.behavior = behavior
        else:
            self.behavior = ParsingBehavior(
                use_explicit_stack=config_options.get("use_explicit_stack", False),
            )

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_context=config_options.get("include_context", True),
                max_error_context=config_options.get("max_error_context", 50),
                max_lexical_errors=config_options.get("max_lexical_errors"),
            )

    @classmethod
    def strict(cls) -> "ParseConfig":
        """Default limits enforced, explicit work stack for nesting."""
        return cls(limits=ParseLimits(), use_explicit_stack=True)

    @property
    def use_explicit_stack(self) -> bool:
        """Whether to parse with an explicit work stack instead of recursion."""
        assert self.behavior is not None
        return self.behavior.use_explicit_stack

    @use_explicit_stack.setter
    def use_explicit_stack(self, value: bool) -> None:
        assert self.behavior is not None
        self.behavior.use_explicit_stack = value

    @property
    def include_context(self) -> bool:
        """Whether errors carry a source excerpt."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of source shown in an error excerpt."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

    @max_error_context.setter
    def max_error_context(self, value: int) -> None:
        assert self.error_reporting is not None
        self.error_reporting.max_error_context = value

    @property
    def max_lexical_errors(self) -> Optional[int]:
        """Cap on the number of lexical errors kept; None keeps all."""
        assert self.error_reporting is not None
        return self.error_reporting.max_lexical_errors

    @max_lexical_errors.setter
    def max_lexical_errors(self, value: Optional[int]) -> None:
        assert self.error_reporting is not None
        self.error_reporting.max_lexical_errors = value
