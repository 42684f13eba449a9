"""Character cursor for the Publication parser.

Provides the scanner mixin: offset-addressed peek/take over the whole
source buffer. Reads past the end return the EOF sentinel instead of
raising, so grammar rules can look ahead without bounds checks.

There is no implicit backtracking. Speculative parses save ``offset``
before trying and assign it back on failure; the parser engine does this
around every extension trial.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from publication.location import SourceLocation

# Returned by peek/take once the cursor reaches the end of the buffer.
EOF = "\0"


class CursorMixin:
    """Mixin providing character-level navigation over ``_source``.

    Required Host Attributes:
        - _source: str
        - _pos: int
        - _source_file: str | None

    Invariant: ``0 <= _pos <= len(_source)`` at all times.

    """

    __slots__ = ()

    _source: str
    _pos: int
    _source_file: str | None

    @property
    def offset(self) -> int:
        """Current cursor offset. Assign to restore a saved position."""
        return self._pos

    @offset.setter
    def offset(self, value: int) -> None:
        if not 0 <= value <= len(self._source):
            msg = f"Offset {value} outside source of length {len(self._source)}"
            raise ValueError(msg)
        self._pos = value

    def is_at_end(self) -> bool:
        """Check if the cursor has consumed the whole buffer."""
        return self._pos >= len(self._source)

    def peek(self) -> str:
        """Character at the cursor, or EOF."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return EOF

    def peek_at(self, k: int) -> str:
        """Character ``k`` positions past the cursor, or EOF."""
        pos = self._pos + k
        if 0 <= pos < len(self._source):
            return self._source[pos]
        return EOF

    def peek_many(self, n: int) -> str:
        """Up to ``n`` characters from the cursor, clamped to what remains."""
        return self._source[self._pos : self._pos + max(n, 0)]

    def take(self) -> str:
        """Return the character at the cursor and advance past it.

        At the end of input returns EOF and leaves the cursor in place.
        """
        if self._pos < len(self._source):
            char = self._source[self._pos]
            self._pos += 1
            return char
        return EOF

    def take_many(self, n: int) -> str:
        """Return up to ``n`` characters and advance past them."""
        chunk = self.peek_many(n)
        self._pos += len(chunk)
        return chunk

    def skip_comment(self, *, consume_newline: bool = True) -> None:
        """Skip to the end of the current line comment.

        Called with the cursor just past a ``#``, or on it: a comment runs
        from the ``#`` to the end of its line either way. The newline is
        consumed too unless ``consume_newline`` is False; the element loop
        leaves it in place so a blank line after a comment still ends the
        block.
        """
        end = self._source.find("\n", self._pos)
        if end == -1:
            self._pos = len(self._source)
        else:
            self._pos = end + 1 if consume_newline else end

    def skip_whitespace(self) -> None:
        """Skip whitespace and ``#`` line comments."""
        while True:
            char = self.peek()
            if char == "#":
                self.skip_comment()
            elif char != EOF and char.isspace():
                self._pos += 1
            else:
                break

    def location(self, offset: int | None = None) -> SourceLocation:
        """Line/column of ``offset`` (defaults to the cursor)."""
        from publication.location import SourceLocation

        return SourceLocation.from_offset(
            self._source,
            self._pos if offset is None else offset,
            self._source_file,
        )
