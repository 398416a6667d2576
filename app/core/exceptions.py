"""Domain errors raised by the content engine.

Expected absence (unknown vertical, missing content item, no affiliate link) is
never an exception: lookups return ``None`` instead.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base error for content engine failures."""

    def __init__(self, message: str, error_code: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class InvalidInputError(EngineError):
    """A caller supplied a malformed enum value or argument."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "invalid_input")


class ContentSourceUnavailableError(EngineError):
    """The backing content source could not be read."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "content_source_unavailable")
