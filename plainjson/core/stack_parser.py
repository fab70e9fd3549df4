"""
Explicit-stack JSON parser.

Accepts the same grammar and reports the same errors as the recursive
Parser, but keeps open objects and arrays on a list instead of the Python
call stack. Nesting depth is then bounded by memory, or by
``max_nesting_depth`` when limits are configured.
"""

from dataclasses import dataclass, field
from typing import Optional

from .parser_base import BaseParserMixin
from .tokenizer import Token, TokenType
from .values import Arr, Obj, Value


@dataclass
class _Frame:
    """An object or array that has been opened but not yet closed."""

    is_object: bool
    members: dict[str, Value] = field(default_factory=dict)
    items: list[Value] = field(default_factory=list)
    pending_key: Optional[Token] = None
    pending_token: Optional[Token] = None

    @property
    def structure_type(self) -> str:
        return "object" if self.is_object else "array"

    @property
    def is_empty(self) -> bool:
        return not (self.members if self.is_object else self.items)

    def build(self) -> Value:
        if self.is_object:
            return Obj(self.members)
        return Arr(tuple(self.items))


class StackParser(BaseParserMixin):
    """JSON parser driven by an explicit work stack."""

    def parse_value(self) -> Value:
        stack: list[_Frame] = []
        need_value = True

        while True:
            if need_value:
                token = self.current_token()
                if token.type in (TokenType.LBRACE, TokenType.LBRACKET):
                    self.open_structure(token)
                    stack.append(_Frame(is_object=token.type == TokenType.LBRACE))
                    need_value = False
                    continue
                if not self.is_scalar(token):
                    self.raise_unexpected_value_token(token)
                value = self.parse_scalar(token)
            else:
                frame = stack[-1]
                value = self._continue_frame(frame)
                if value is None:
                    need_value = True
                    continue
                stack.pop()

            # A value is complete: hand it to the enclosing structure.
            if not stack:
                return value
            self._add_to_frame(stack[-1], value)
            need_value = False

    def _continue_frame(self, frame: _Frame) -> Optional[Value]:
        """Close the frame, or step to its next value.

        Returns the finished value when the closing bracket was consumed,
        None when the next member or element value should be parsed.
        """
        closer = TokenType.RBRACE if frame.is_object else TokenType.RBRACKET
        self.check_unclosed(frame.structure_type)
        if self.check(closer):
            self.close_structure()
            return frame.build()

        if not frame.is_empty:
            self.expect_separator(frame.structure_type)

        if frame.is_object:
            frame.pending_key = self.parse_member_key()
        else:
            frame.pending_token = self.current_token()
        return None

    def _add_to_frame(self, frame: _Frame, value: Value) -> None:
        if frame.is_object:
            assert frame.pending_key is not None
            self.insert_member(frame.members, frame.pending_key, value)
            frame.pending_key = None
        else:
            assert frame.pending_token is not None
            self.append_element(frame.items, value, frame.pending_token)
            frame.pending_token = None
