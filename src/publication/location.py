"""Source location tracking for error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position in a source document.

    ``lineno`` and ``col_offset`` are 1-indexed; ``offset`` is the absolute
    character offset into the parser's buffer.

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=7, offset=42)
        >>> str(loc)
        '3:7'
        >>> str(SourceLocation(1, 1, source_file="notes.publ"))
        'notes.publ:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls, source: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute line and column for an absolute offset into ``source``."""
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            source_file=source_file,
        )
