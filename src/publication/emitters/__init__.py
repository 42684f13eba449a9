"""Publication emitters.

Emitters convert the parsed AST into an output format.

Available Emitters:
- HtmlEmitter ("html"): indented HTML with a caller-extensible tag table
- TextEmitter ("txt"): plain text, decorations dropped

Lookup:
    >>> get_emitter("html")
    <publication.emitters.html.HtmlEmitter object at ...>
    >>> emitter_for_path("out/notes.txt").format
    'txt'

"""

from __future__ import annotations

from pathlib import Path

from publication.emitters.html import HtmlEmitter
from publication.emitters.protocol import Emitter
from publication.emitters.text import TextEmitter

# Format name (== destination file suffix) → emitter class
EMITTERS: dict[str, type[Emitter]] = {
    HtmlEmitter.format: HtmlEmitter,
    TextEmitter.format: TextEmitter,
}


def get_emitter(format: str) -> Emitter:
    """Create an emitter by format name.

    Raises:
        KeyError: If the format is not recognized
    """
    if format not in EMITTERS:
        available = ", ".join(sorted(EMITTERS))
        raise KeyError(f"Unknown output format: {format!r}. Available: {available}")
    return EMITTERS[format]()


def emitter_for_path(path: str | Path) -> Emitter:
    """Create the emitter matching a destination file's suffix.

    Raises:
        KeyError: If the path has no suffix or an unrecognized one
    """
    suffix = Path(path).suffix
    return get_emitter(suffix[1:] if suffix else "")


__all__ = [
    "EMITTERS",
    "Emitter",
    "HtmlEmitter",
    "TextEmitter",
    "emitter_for_path",
    "get_emitter",
]
