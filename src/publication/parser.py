"""Single-pass parser producing the Publication AST.

Reads the whole document from an in-memory string and produces a tuple of
Block nodes. Builtin grammar covers comments, whitespace and paragraphs;
everything else comes from extensions consulted in registration order.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `CursorMixin`: character cursor, comment and whitespace skipping
- `ElementParsingMixin`: shared element loop and end-of-block test
- `BlockParsingMixin`: block dispatch and builtin paragraphs

Thread Safety:
- Parser instances are single-use and not thread-safe
- The produced AST is immutable (frozen dataclasses)

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from publication.config import get_parse_config
from publication.extensions.registry import ExtensionRegistry, ExtensionRegistryBuilder
from publication.nodes import Block
from publication.parsing import BlockParsingMixin, CursorMixin, ElementParsingMixin
from publication.stringbuilder import StringBuilder
from publication.utils.logger import get_logger

if TYPE_CHECKING:
    from publication.emitters.protocol import Emitter
    from publication.extensions.protocol import Extension

logger = get_logger(__name__)


class Parser(
    CursorMixin,
    ElementParsingMixin,
    BlockParsingMixin,
):
    """Parser for Publication documents.

    Usage:
        >>> from publication.extensions import Bold
        >>> parser = Parser("Hello *World*")
        >>> parser.add_extension(Bold())
        >>> parser.parse()
        (Paragraph(children=(Text(content='Hello '), ExtensionElement(...))),)

    Lifecycle:
        Construct once per document, optionally add extensions, then call
        exactly one terminal operation: ``parse()`` or ``emit_with()``.
        A second terminal call raises RuntimeError.

    Configuration:
        Without an explicit ``registry``, the extensions come from the
        active ParseConfig (see ``publication.config``).

    """

    __slots__ = (
        "_source",
        "_pos",
        "_source_file",
        "_extensions",
        "_consumed",
    )

    def __init__(
        self,
        source: str,
        *,
        registry: ExtensionRegistry | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Publication source text
            registry: Extensions to consult (defaults to the active config's)
            source_file: Optional source file path for error messages

        """
        self._source = source.replace("\r\n", "\n").replace("\r", "\n")
        self._pos = 0
        self._source_file = source_file
        if registry is None:
            registry = get_parse_config().build_registry()
        self._extensions: tuple[Extension, ...] = registry.extensions
        self._consumed = False

    @property
    def extensions(self) -> tuple[Extension, ...]:
        """Extensions in dispatch order."""
        return self._extensions

    def add_extension(self, extension: Extension) -> Parser:
        """Append an extension after those already registered.

        Returns:
            Self for chaining

        Raises:
            TypeError: If the object does not implement the Extension protocol
            ExtensionError: If its tags clash with registered extensions
        """
        builder = ExtensionRegistryBuilder().register_all(self._extensions)
        self._extensions = builder.register(extension).build().extensions
        return self

    def parse(self) -> tuple[Block, ...]:
        """Parse the whole document.

        Returns:
            Tuple of Block nodes (empty for whitespace/comment-only input)

        Raises:
            ParseError: On the first structural error; no partial AST
        """
        self._begin()
        blocks = tuple(self._iter_blocks())
        logger.debug("Parsed %d blocks from %s", len(blocks), self._source_file or "<string>")
        return blocks

    def emit_with(self, emitter: Emitter) -> str:
        """Parse the document and render each block as it is produced.

        Returns:
            The emitter's output for the whole document

        Raises:
            ParseError: On the first structural error; no partial output
        """
        self._begin()
        sb = StringBuilder()
        count = 0
        for block in self._iter_blocks():
            emitter.emit_block(block, sb)
            count += 1
        logger.debug("Emitted %d blocks with %s", count, type(emitter).__name__)
        return sb.build()

    def _begin(self) -> None:
        if self._consumed:
            msg = "Parser instances are single-use; create a new Parser per document"
            raise RuntimeError(msg)
        self._consumed = True
        logger.debug(
            "Parsing %d characters with extensions: %s",
            len(self._source),
            [ext.name for ext in self._extensions],
        )

    def _iter_blocks(self):
        self.skip_whitespace()
        while not self.is_at_end():
            yield self.parse_block()
            self.skip_whitespace()
