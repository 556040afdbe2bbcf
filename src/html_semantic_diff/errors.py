"""Exceptions raised at the package boundary.

The core (normalize / compare / select) never raises on valid input:
comparison differences are returned as data.  These exceptions cover the
layers around it: reading input, parsing markup, and writing output.
"""

from __future__ import annotations

__all__ = [
    "HTMLSemanticDiffError",
    "InputSourceError",
    "OutputError",
    "ParseError",
    "UnknownFormatError",
]


class HTMLSemanticDiffError(Exception):
    """Base exception for html-semantic-diff boundary errors."""


class InputSourceError(HTMLSemanticDiffError):
    """No HTML source was given, or the chosen source could not be read."""

    def __init__(self, source: str, detail: str | None = None) -> None:
        self.source = source
        self.detail = detail
        message = f"cannot read HTML from {source}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ParseError(HTMLSemanticDiffError):
    """The HTML parser rejected the markup or is not available."""


class OutputError(HTMLSemanticDiffError):
    """The rendered output could not be written to its destination."""


class UnknownFormatError(HTMLSemanticDiffError):
    """An output format other than the supported ones was requested."""

    def __init__(self, fmt: str, supported: tuple[str, ...]) -> None:
        self.fmt = fmt
        self.supported = supported
        super().__init__(
            f"unknown output format {fmt!r} (expected one of: {', '.join(supported)})"
        )
