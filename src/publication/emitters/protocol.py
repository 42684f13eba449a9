"""Emitter protocol: a visitor rendering the AST to one output format.

Dispatch:
- Blocks: ``emit_block`` matches on the node type and calls
  ``emit_paragraph``, ``emit_extension_block`` or ``emit_extension_blocks``
- Elements: ``emit_element`` copies Text through ``escape_text`` and hands
  ExtensionElement to ``emit_extension_element``

Backends override the hooks they care about. The defaults render an
ExtensionElement as its wrapped element, unadorned, and omit extension
blocks entirely.

Example:
    class ShoutEmitter(Emitter):
        def emit_paragraph(self, block, sb):
            self.emit_elements(block.children, sb)
            sb.append("!\\n")

        def escape_text(self, text):
            return text.upper()

"""

from __future__ import annotations

from collections.abc import Iterable

from publication.errors import EmitError
from publication.nodes import (
    Block,
    Element,
    ExtensionBlock,
    ExtensionBlocks,
    ExtensionElement,
    Paragraph,
    Text,
)
from publication.stringbuilder import StringBuilder


class Emitter:
    """Base visitor for output backends.

    Emitters hold no per-render state: the output buffer is passed along
    explicitly, so one instance can render any number of documents.

    """

    #: Short format name, also the destination file suffix (e.g. "html")
    format: str = ""

    def emit(self, blocks: Iterable[Block]) -> str:
        """Render a whole document.

        Args:
            blocks: Parsed document

        Returns:
            Rendered output ("" for an empty document)
        """
        sb = StringBuilder()
        for block in blocks:
            self.emit_block(block, sb)
        return sb.build()

    # =========================================================================
    # Blocks
    # =========================================================================

    def emit_block(self, block: Block, sb: StringBuilder) -> None:
        """Render one block."""
        match block:
            case Paragraph():
                self.emit_paragraph(block, sb)
            case ExtensionBlock():
                self.emit_extension_block(block, sb)
            case ExtensionBlocks():
                self.emit_extension_blocks(block, sb)
            case _:
                raise EmitError(f"Cannot emit {type(block).__name__} as a block")

    def emit_paragraph(self, block: Paragraph, sb: StringBuilder) -> None:
        self.emit_elements(block.children, sb)

    def emit_extension_block(self, block: ExtensionBlock, sb: StringBuilder) -> None:
        """Render an extension block. Omitted by default."""

    def emit_extension_blocks(self, block: ExtensionBlocks, sb: StringBuilder) -> None:
        """Render an extension block of blocks. Omitted by default."""

    # =========================================================================
    # Elements
    # =========================================================================

    def emit_elements(self, elements: Iterable[Element], sb: StringBuilder) -> None:
        for element in elements:
            self.emit_element(element, sb)

    def emit_element(self, element: Element, sb: StringBuilder) -> None:
        """Render one element."""
        match element:
            case Text():
                sb.append(self.escape_text(element.content))
            case ExtensionElement():
                self.emit_extension_element(element, sb)
            case _:
                raise EmitError(f"Cannot emit {type(element).__name__} as an element")

    def emit_extension_element(self, element: ExtensionElement, sb: StringBuilder) -> None:
        """Render an extension element. Defaults to its child, unadorned."""
        self.emit_element(element.child, sb)

    def escape_text(self, text: str) -> str:
        """Backend-specific text escaping. Identity by default."""
        return text
