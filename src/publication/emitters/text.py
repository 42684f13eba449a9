"""Plain-text emitter.

Each block is written on its own line; consecutive blocks are separated by
one newline, so paragraphs come out separated by a single blank line:

    First paragraph.

    Second paragraph.

Decorations are dropped: ``*bold*`` comes out as ``bold``. Builtin lists
render one ``- item`` line per item. Other extension blocks have no plain
text form and are omitted.
"""

from __future__ import annotations

from publication.emitters.protocol import Emitter
from publication.nodes import Block, ExtensionBlock, ExtensionBlocks, Paragraph
from publication.stringbuilder import StringBuilder
from publication.tags import LIST, LIST_ITEM

LIST_ITEM_PREFIX = "- "


class TextEmitter(Emitter):
    """Render the AST as plain text."""

    format = "txt"

    def emit_block(self, block: Block, sb: StringBuilder) -> None:
        rendered = StringBuilder()
        super().emit_block(block, rendered)
        if not rendered:
            return
        if sb:
            sb.append("\n")
        sb.append(rendered.build())

    def emit_paragraph(self, block: Paragraph, sb: StringBuilder) -> None:
        self.emit_elements(block.children, sb)
        sb.append("\n")

    def emit_extension_block(self, block: ExtensionBlock, sb: StringBuilder) -> None:
        if block.tag == LIST_ITEM:
            sb.append(LIST_ITEM_PREFIX)
            self.emit_elements(block.children, sb)
            sb.append("\n")

    def emit_extension_blocks(self, block: ExtensionBlocks, sb: StringBuilder) -> None:
        if block.tag == LIST:
            for item in block.blocks:
                # Items are emitted directly; emit_block would separate them
                # with blank lines.
                super().emit_block(item, sb)
