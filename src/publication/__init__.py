"""
Publication: a small, extensible plain-text markup compiler.

Documents are plain text: paragraphs separated by blank lines, ``#`` line
comments, and whatever extra grammar the registered extensions add. The
parser builds a typed AST; emitters render it as HTML or plain text.

Quick Start:
    >>> from publication import parse, render
    >>> blocks = parse("Hello, World! # greeting")
    >>> render(blocks)
    '<p>\\n  Hello, World!\\n</p>\\n'

    >>> # Or use the high-level Publication class
    >>> from publication import Publication
    >>> publ = Publication(enable_bold=True)
    >>> publ("This *isn't* Markdown!")
    '<p>\\n  This <strong>isn&apos;t</strong> Markdown!\\n</p>\\n'

Custom Extensions:
    >>> from publication import Extension, HtmlEmitter, Publication, Tag
    >>> class Dollars(Extension): ...
    >>> publ = Publication(extensions=[Dollars()])
    >>> publ.emitter.tagged_element(DOLLARS, lambda node: ("span", []))
"""

from __future__ import annotations

from collections.abc import Iterable

from publication.config import (
    ParseConfig,
    get_parse_config,
    load_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from publication.emitters import (
    Emitter,
    HtmlEmitter,
    TextEmitter,
    emitter_for_path,
    get_emitter,
)
from publication.errors import (
    EmitError,
    ExtensionError,
    ParseError,
    PublicationError,
    UnexpectedEndOfInput,
)
from publication.extensions import (
    Bold,
    Extension,
    ExtensionRegistry,
    ExtensionRegistryBuilder,
    Italics,
    Lists,
    create_registry,
    get_extension,
)
from publication.location import SourceLocation
from publication.nodes import (
    Block,
    Element,
    ExtensionBlock,
    ExtensionBlocks,
    ExtensionElement,
    Paragraph,
    Text,
)
from publication.parser import Parser
from publication.tags import BOLD, ITALICS, LIST, LIST_ITEM, Tag

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    config: ParseConfig | None = None,
    source_file: str | None = None,
) -> tuple[Block, ...]:
    """Parse Publication source into a tuple of blocks.

    Args:
        source: Publication source text
        config: Extensions to enable (uses the active context config if None)
        source_file: Optional source file path for error messages

    Returns:
        Tuple of Block nodes

    Example:
        >>> parse("one\\n\\ntwo")
        (Paragraph(children=(Text(content='one'),)), Paragraph(children=(Text(content='two'),)))
    """
    config = config or get_parse_config()
    parser = Parser(source, registry=config.build_registry(), source_file=source_file)
    return parser.parse()


def render(blocks: Iterable[Block], format: str = "html") -> str:
    """Render parsed blocks with one of the builtin emitters.

    Args:
        blocks: Parsed document
        format: "html" or "txt"

    Raises:
        KeyError: If the format is not recognized
    """
    return get_emitter(format).emit(blocks)


class Publication:
    """High-level processor combining parser configuration and an emitter.

    Usage:
        >>> publ = Publication(enable_bold=True, list_bullet="-")
        >>> html = publ("- *one*\\n- two")

        >>> # Plain text output
        >>> Publication(format="txt")("Hello   world")
        'Hello world\\n'

        >>> # Access the AST
        >>> blocks = publ.parse("Some text")

    Thread Safety:
        Configuration is immutable; each call builds its own Parser.

    """

    __slots__ = ("_config", "_emitter")

    def __init__(
        self,
        *,
        enable_bold: bool = False,
        enable_italics: bool = False,
        list_bullet: str | None = None,
        extensions: Iterable[Extension] = (),
        format: str = "html",
        emitter: Emitter | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            enable_bold: Register ``*text*`` emphasis
            enable_italics: Register ``/text/`` emphasis
            list_bullet: Register bulleted lists with this literal bullet
            extensions: Custom extensions, consulted after the builtins
            format: Output format when no ``emitter`` is given
            emitter: Emitter instance to render with
        """
        self._config = ParseConfig(
            enable_bold=enable_bold,
            enable_italics=enable_italics,
            list_bullet=list_bullet,
            extensions=tuple(extensions),
        )
        # Validates tags up front instead of on first parse
        self._config.build_registry()
        self._emitter = emitter or get_emitter(format)

    @classmethod
    def from_config(cls, config: ParseConfig, *, format: str = "html") -> Publication:
        """Create a processor from an existing ParseConfig."""
        return cls(
            enable_bold=config.enable_bold,
            enable_italics=config.enable_italics,
            list_bullet=config.list_bullet,
            extensions=config.extensions,
            format=format,
        )

    @property
    def config(self) -> ParseConfig:
        return self._config

    @property
    def emitter(self) -> Emitter:
        """The emitter in use; register custom tag mappings on it."""
        return self._emitter

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Parse and render in one call."""
        parser = Parser(source, registry=self._config.build_registry(), source_file=source_file)
        return parser.emit_with(self._emitter)

    def parse(self, source: str, *, source_file: str | None = None) -> tuple[Block, ...]:
        """Parse source into AST blocks."""
        return parse(source, config=self._config, source_file=source_file)

    def render(self, blocks: Iterable[Block]) -> str:
        """Render AST blocks with this processor's emitter."""
        return self._emitter.emit(blocks)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "Publication",
    "Parser",
    # Nodes
    "Block",
    "Element",
    "ExtensionBlock",
    "ExtensionBlocks",
    "ExtensionElement",
    "Paragraph",
    "Text",
    # Tags
    "Tag",
    "BOLD",
    "ITALICS",
    "LIST",
    "LIST_ITEM",
    # Extensions
    "Extension",
    "Bold",
    "Italics",
    "Lists",
    "ExtensionRegistry",
    "ExtensionRegistryBuilder",
    "create_registry",
    "get_extension",
    # Emitters
    "Emitter",
    "HtmlEmitter",
    "TextEmitter",
    "emitter_for_path",
    "get_emitter",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    "load_config",
    # Errors
    "PublicationError",
    "ParseError",
    "UnexpectedEndOfInput",
    "ExtensionError",
    "EmitError",
    # Location
    "SourceLocation",
]
