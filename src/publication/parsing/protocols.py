"""Protocol describing the parser surface extensions may use.

Extensions receive the live Parser and drive it through these methods.
Annotating against ParserHost instead of Parser keeps extension modules
free of a circular import on ``publication.parser``.

Usage:
    class Dollar(Extension):
        def parse_element(self, parser: ParserHost) -> Element | None:
            if parser.peek() != "$":
                return None
            ...

Thread Safety:
    Protocols are purely structural; no runtime overhead.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from publication.location import SourceLocation
from publication.nodes import Block, Element


@runtime_checkable
class ParserHost(Protocol):
    """Contract provided by CursorMixin, ElementParsingMixin and BlockParsingMixin."""

    offset: int

    # Cursor
    def is_at_end(self) -> bool: ...
    def peek(self) -> str: ...
    def peek_at(self, k: int) -> str: ...
    def peek_many(self, n: int) -> str: ...
    def take(self) -> str: ...
    def take_many(self, n: int) -> str: ...
    def skip_comment(self, *, consume_newline: bool = True) -> None: ...
    def skip_whitespace(self) -> None: ...
    def location(self, offset: int | None = None) -> SourceLocation: ...

    # Grammar
    def sees_end_of_block(self) -> bool: ...
    def parse_elements(self) -> tuple[Element, ...]: ...
    def parse_block(self) -> Block: ...
