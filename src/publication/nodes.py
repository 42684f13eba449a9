"""Typed AST nodes for Publication.

All AST nodes are frozen dataclasses with slots for:
- Immutability: safe sharing across threads and reentrant parser calls
- Value equality: ASTs compare structurally, which keeps tests readable
- Pattern matching: emitters dispatch with ``match`` statements

Node Hierarchy:
Block (block-level structure)
├── Paragraph           builtin text block
├── ExtensionBlock      extension block holding inline elements
└── ExtensionBlocks     extension block holding nested blocks
Element (inline content)
├── Text                plain text
└── ExtensionElement    extension decoration around one element

A document is an ordered tuple of Block nodes.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from publication.tags import Tag

# =============================================================================
# Elements
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Plain text content.

    Whitespace runs are already coalesced to single spaces by the parser.

    """

    content: str


@dataclass(frozen=True, slots=True)
class ExtensionElement:
    """Inline element produced by an extension.

    Wraps exactly one child element, which may itself be an
    ExtensionElement, so decorations compose to any depth.

    Example:
        ``*bold*`` with the Bold extension becomes
        ``ExtensionElement(BOLD, Text("bold"))``

    """

    tag: Tag
    child: Element


# Type alias for inline elements
Element: TypeAlias = Text | ExtensionElement


# =============================================================================
# Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Builtin paragraph: a run of elements ended by a blank line or EOF."""

    children: tuple[Element, ...]


@dataclass(frozen=True, slots=True)
class ExtensionBlock:
    """Extension-defined block containing inline elements (e.g. a list item)."""

    tag: Tag
    children: tuple[Element, ...]


@dataclass(frozen=True, slots=True)
class ExtensionBlocks:
    """Extension-defined block containing nested blocks (e.g. a list)."""

    tag: Tag
    blocks: tuple[Block, ...]


# Type alias for block nodes
Block: TypeAlias = Paragraph | ExtensionBlock | ExtensionBlocks

# A parsed document
Document: TypeAlias = tuple[Block, ...]

__all__ = [
    "Block",
    "Document",
    "Element",
    "ExtensionBlock",
    "ExtensionBlocks",
    "ExtensionElement",
    "Paragraph",
    "Text",
]
