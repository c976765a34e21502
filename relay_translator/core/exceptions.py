"""
Custom exceptions for the relay translation core.

This module defines specific exception types for each failure scenario,
so callers can tell recoverable conditions from programmer errors.
"""

from enum import Enum
from typing import Optional


class RelayTranslatorError(Exception):
    """Base exception for all relay translator errors."""
    pass


class CatalogLoadError(RelayTranslatorError):
    """Raised when the language catalog source is missing or malformed.

    The loader recovers from this by substituting the built-in default
    catalog; it is never surfaced to callers of the orchestrator.

    Attributes:
        source: Description of the source that failed to load
    """

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class ProviderConstructionError(RelayTranslatorError):
    """Raised when a remote translation provider cannot be built."""
    pass


class ProviderError(RelayTranslatorError):
    """Raised when a provider fails to translate a piece of text.

    Attributes:
        target_language: Language code the call was translating into
        cause: Underlying transport, HTTP or parse failure, if any
    """

    def __init__(self, message: str, target_language: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.target_language = target_language
        self.cause = cause


class RelayStage(Enum):
    """Hop of the relay that produced a failure."""
    INTERMEDIATE = "intermediate"
    FINAL = "final"


class RelayError(RelayTranslatorError):
    """A relay hop failed.

    Attributes:
        stage: Which hop failed
        cause: The provider error raised by that hop
    """

    def __init__(self, stage: RelayStage, cause: ProviderError):
        super().__init__(f"{stage.value} translation failed: {cause}")
        self.stage = stage
        self.cause = cause


class TrackerAlreadyClosedError(RelayTranslatorError):
    """Raised when an operation tracker is closed a second time."""
    pass
