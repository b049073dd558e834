from __future__ import annotations


class PreviewError(Exception):
    """Base error for link preview failures.

    Every failure surfaced by :func:`linkpreview.preview.fetch_preview` is a
    ``PreviewError``. Callers that only need to know the preview is unavailable
    catch this class; the subclasses name the stage that failed.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidURLError(PreviewError):
    """Raised when the candidate URL is malformed or uses a disallowed scheme."""


class FetchError(PreviewError):
    """Raised when the request could not be completed."""


class BadStatusError(PreviewError):
    """Raised when the server answers with anything but 200."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(PreviewError):
    """Raised when the response body cannot be parsed as HTML."""
