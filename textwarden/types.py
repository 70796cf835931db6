"""Shared data types for canonicalization outcomes."""

from dataclasses import dataclass
from typing import Optional

from .errors import CanonicalizationError


@dataclass(frozen=True)
class CanonicalizationResult:
    """Canonical text, or the typed failure that prevented it."""

    profile: str
    input_bytes: int
    value: Optional[str] = None
    error: Optional[CanonicalizationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def outcome(self) -> str:
        """``OK`` or the failure's error code."""

        return "OK" if self.error is None else self.error.code

    def unwrap(self) -> str:
        """Return the canonical text or raise the failure."""

        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ValueError("result carries neither a value nor an error")
        return self.value
