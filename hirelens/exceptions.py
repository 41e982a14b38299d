"""Error taxonomy for the analysis actions.

Every error is terminal for the action that raised it; callers show the
message and return to idle.
"""
from __future__ import annotations


class HirelensError(Exception):
    """Base class for all errors surfaced to the user."""


class InputValidationError(HirelensError, ValueError):
    """User-supplied input is empty or unusable; raised before any request."""


class UpstreamServiceError(HirelensError, RuntimeError):
    """An external collaborator was unreachable, timed out, or answered badly.

    Attributes:
        service: Short name of the collaborator ("extractor", "matcher", "page").
    """

    def __init__(self, message: str, service: str = "") -> None:
        self.service = service
        super().__init__(message)


class FileTypeError(HirelensError, ValueError):
    """Uploaded file is not a PDF."""


class PdfParseError(HirelensError, ValueError):
    """The PDF could not be read."""


class EmptyExtractionError(HirelensError, ValueError):
    """The PDF parsed but produced no usable text."""


class ScrapeError(HirelensError, LookupError):
    """No content region on the page looked like a job description."""


class ConfigurationError(HirelensError, RuntimeError):
    """Required configuration (usually the API key) is missing."""
