"""Parsing subsystem for Publication.

Provides mixin classes for modular parsing functionality:
- `CursorMixin`: character cursor (peek/take, comment and whitespace skipping)
- `ElementParsingMixin`: the shared element loop and end-of-block test
- `BlockParsingMixin`: block dispatch and the builtin paragraph

Example:
    >>> from publication.parsing import (
    ...     BlockParsingMixin,
    ...     CursorMixin,
    ...     ElementParsingMixin,
    ... )
    >>> class Parser(CursorMixin, ElementParsingMixin, BlockParsingMixin):
    ...     pass

"""

from publication.parsing.blocks import BlockParsingMixin
from publication.parsing.cursor import EOF, CursorMixin
from publication.parsing.elements import ElementParsingMixin
from publication.parsing.protocols import ParserHost

__all__ = [
    "EOF",
    "BlockParsingMixin",
    "CursorMixin",
    "ElementParsingMixin",
    "ParserHost",
]
