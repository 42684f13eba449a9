"""StringBuilder for O(n) output accumulation.

Emitters append fragments to a list and join once at the end, instead of
repeatedly concatenating strings.

Thread Safety:
StringBuilder instances are local to each emit call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("Hello").append("</p>")
        >>> sb.build()
        '<p>Hello</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_indented(self, text: str, indent: str = "  ") -> StringBuilder:
        """Append multi-line text with every non-empty line indented.

        Used by the HTML emitter to nest rendered child blocks one level
        deeper than their container.

        Example:
            >>> StringBuilder().append_indented("<li>\\n  a\\n</li>\\n").build()
            '  <li>\\n    a\\n  </li>\\n'
        """
        for line in text.splitlines(keepends=True):
            if line.strip():
                self._parts.append(indent)
            self._parts.append(line)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if anything has been appended."""
        return bool(self._parts)
