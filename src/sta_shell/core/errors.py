"""Exception types shared across sta-shell."""
from __future__ import annotations


class StaShellError(Exception):
    """Base class for errors raised by sta-shell itself."""


class BundleFormatError(StaShellError):
    """Raised when the embedded script bundle cannot be decoded.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    fragment_index:
        0-based index of the offending fragment, if known.
    """

    def __init__(self, message: str, fragment_index: int | None = None) -> None:
        if fragment_index is not None:
            message = f"fragment {fragment_index}: {message}"
        super().__init__(message)
        self.fragment_index = fragment_index


class SessionError(StaShellError):
    """Raised when an interpreter session is used incorrectly."""
