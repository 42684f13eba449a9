"""Exception classes for Publication.

Provides standardized exceptions for error handling throughout Publication.
"""

from __future__ import annotations


class PublicationError(Exception):
    """Base exception for all Publication errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(PublicationError):
    """Error during Publication parsing.

    Raised when the parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnexpectedEndOfInput(ParseError):
    """A block was requested with no characters left to consume."""

    def __init__(
        self,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        super().__init__("Unexpected end of input.", lineno, col_offset, source_file)


class EmitError(PublicationError):
    """Error during emission.

    Raised when an emitter is handed a node outside the Block/Element model.
    """

    pass


class ExtensionError(PublicationError):
    """Error in extension registration.

    Raised when an extension claims a tag that is reserved or already taken.
    """

    def __init__(self, extension_name: str, message: str) -> None:
        """Initialize extension error.

        Args:
            extension_name: Name of the offending extension
            message: Description of the error
        """
        self.extension_name = extension_name
        super().__init__(f"Extension '{extension_name}': {message}")
