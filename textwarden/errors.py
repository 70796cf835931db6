"""Typed canonicalization failures."""

from typing import Optional


class CanonicalizationError(ValueError):
    """Base class for inputs that cannot be canonicalized."""

    code = "CANONICALIZATION_ERROR"


class InputTooLong(CanonicalizationError):
    """Raised when input exceeds the profile's byte ceiling."""

    code = "INPUT_TOO_LONG"

    def __init__(self, limit: int, actual: int, profile: Optional[str] = None) -> None:
        self.limit = limit
        self.actual = actual
        self.profile = profile
        super().__init__(f"input is {actual} bytes, limit is {limit}")


class EmptyAfterCanonicalization(CanonicalizationError):
    """Raised when nothing meaningful is left after canonicalization."""

    code = "EMPTY_AFTER_CANONICALIZATION"

    def __init__(self, profile: Optional[str] = None) -> None:
        self.profile = profile
        super().__init__("input is empty after canonicalization")
