"""HTML emitter.

Output shape:
    <p>
      This <strong>isn&apos;t</strong> Markdown!
    </p>

Builtin tags render with fixed markup and take priority over the tag table:
- BOLD → <strong>, ITALICS → <em>
- LIST → <ul>, LIST_ITEM → <li>

Any other tag is looked up in the caller-supplied tag table. A mapping is a
callable receiving the node and returning ``(element name, attributes)``.
Unmapped block tags fall back to ``<div data-tag="...">`` so they stay
visible; unmapped element tags render their child without a wrapper.

Thread Safety:
The tag table is filled before rendering; rendering itself keeps all state
in the StringBuilder passed along, so concurrent renders are safe.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeAlias

from publication.emitters.protocol import Emitter
from publication.nodes import (
    Element,
    ExtensionBlock,
    ExtensionBlocks,
    ExtensionElement,
    Paragraph,
)
from publication.stringbuilder import StringBuilder
from publication.tags import BOLD, ITALICS, LIST, LIST_ITEM, Tag
from publication.utils.logger import get_logger

logger = get_logger(__name__)

Attributes: TypeAlias = Sequence[tuple[str, str]]
TagMapping: TypeAlias = Callable[[Any], tuple[str, Attributes]]

_ESCAPES = str.maketrans(
    {
        "'": "&apos;",
        '"': "&quot;",
        "<": "&lt;",
        ">": "&gt;",
        "&": "&amp;",
    }
)

_BUILTIN_ELEMENT_WRAPPERS: dict[Tag, str] = {BOLD: "strong", ITALICS: "em"}
_BUILTIN_BLOCK_WRAPPERS: dict[Tag, str] = {LIST: "ul", LIST_ITEM: "li"}

# Attribute carrying the tag of an unmapped extension block
FALLBACK_TAG_ATTRIBUTE = "data-tag"


def html_escape(text: str) -> str:
    """Escape ``' " < > &`` as named entities, character by character."""
    return text.translate(_ESCAPES)


def _open_tag(name: str, attributes: Attributes = ()) -> str:
    attrs = "".join(f' {key}="{html_escape(value)}"' for key, value in attributes)
    return f"<{name}{attrs}>"


class HtmlEmitter(Emitter):
    """Render the AST to indented HTML.

    Usage:
        >>> emitter = HtmlEmitter()
        >>> emitter.tagged_element(MATH, lambda node: ("span", [("class", "math")]))
        >>> html = Parser(source).emit_with(emitter)

    """

    format = "html"

    def __init__(self) -> None:
        self._block_tags: dict[Tag, TagMapping] = {}
        self._element_tags: dict[Tag, TagMapping] = {}

    # =========================================================================
    # Tag table
    # =========================================================================

    def tagged_block(self, tag: Tag, mapping: TagMapping) -> HtmlEmitter:
        """Register how blocks carrying ``tag`` are wrapped.

        Returns:
            Self for chaining
        """
        if self._check_custom(tag, "block"):
            self._block_tags[tag] = mapping
        return self

    def tagged_element(self, tag: Tag, mapping: TagMapping) -> HtmlEmitter:
        """Register how elements carrying ``tag`` are wrapped.

        Returns:
            Self for chaining
        """
        if self._check_custom(tag, "element"):
            self._element_tags[tag] = mapping
        return self

    def _check_custom(self, tag: Tag, kind: str) -> bool:
        if tag.is_builtin:
            logger.warning(
                "Ignoring %s mapping for builtin tag %s; builtin tags render with fixed markup",
                kind,
                tag,
            )
            return False
        return True

    # =========================================================================
    # Blocks
    # =========================================================================

    def emit_paragraph(self, block: Paragraph, sb: StringBuilder) -> None:
        sb.append("<p>\n  ")
        self.emit_elements(block.children, sb)
        sb.append("\n</p>\n")

    def emit_extension_block(self, block: ExtensionBlock, sb: StringBuilder) -> None:
        name, attributes = self._resolve_block(block)
        sb.append(_open_tag(name, attributes)).append("\n  ")
        self.emit_elements(block.children, sb)
        sb.append(f"\n</{name}>\n")

    def emit_extension_blocks(self, block: ExtensionBlocks, sb: StringBuilder) -> None:
        name, attributes = self._resolve_block(block)
        sb.append(_open_tag(name, attributes)).append("\n")
        inner = StringBuilder()
        for child in block.blocks:
            self.emit_block(child, inner)
        sb.append_indented(inner.build())
        sb.append(f"</{name}>\n")

    def _resolve_block(self, block: ExtensionBlock | ExtensionBlocks) -> tuple[str, Attributes]:
        builtin = _BUILTIN_BLOCK_WRAPPERS.get(block.tag)
        if builtin is not None:
            return builtin, ()
        mapping = self._block_tags.get(block.tag)
        if mapping is not None:
            return mapping(block)
        return "div", ((FALLBACK_TAG_ATTRIBUTE, block.tag.name),)

    # =========================================================================
    # Elements
    # =========================================================================

    def emit_extension_element(self, element: ExtensionElement, sb: StringBuilder) -> None:
        builtin = _BUILTIN_ELEMENT_WRAPPERS.get(element.tag)
        if builtin is not None:
            self._wrap(builtin, (), element.child, sb)
            return
        mapping = self._element_tags.get(element.tag)
        if mapping is None:
            self.emit_element(element.child, sb)
            return
        name, attributes = mapping(element)
        self._wrap(name, attributes, element.child, sb)

    def _wrap(self, name: str, attributes: Attributes, child: Element, sb: StringBuilder) -> None:
        sb.append(_open_tag(name, attributes))
        self.emit_element(child, sb)
        sb.append(f"</{name}>")

    def escape_text(self, text: str) -> str:
        return html_escape(text)
