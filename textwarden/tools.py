"""Tool implementations for the textwarden stdio endpoints."""

from typing import Dict, List, Optional, Union

from .audit import AuditLogger
from .config import DEFAULT_CONFIG, TextwardenConfig
from .digits import DEFAULT_SCRIPTS, fold_digits
from .pipeline import try_canonicalize
from .similarity import edit_distance, jaro_winkler, longest_common_substring, similarity_ratio


class ToolError(Exception):
    """Raised for local tool handling errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        super().__init__(message)


def tw_canonicalize(
    text: str,
    profile: Optional[str] = None,
    config: Optional[TextwardenConfig] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> Dict[str, object]:
    """Canonicalize text with a named profile; failures raise ToolError."""

    if not isinstance(text, str):
        raise ToolError("INVALID_ARGS", "text must be a string")
    resolved = (config or DEFAULT_CONFIG).get_profile(profile)
    result = try_canonicalize(text, resolved, audit_logger=audit_logger)
    if result.error is not None:
        raise ToolError(result.error.code, str(result.error))
    return {"profile": result.profile, "value": result.value}


def tw_fold_digits(text: str, scripts: Union[str, List[str], None] = None) -> Dict[str, object]:
    """Fold digits of the selected scripts (Persian and Arabic-Indic by default)."""

    if not isinstance(text, str):
        raise ToolError("INVALID_ARGS", "text must be a string")
    try:
        value = fold_digits(text, DEFAULT_SCRIPTS if scripts is None else scripts)
    except ValueError as exc:
        raise ToolError("INVALID_ARGS", str(exc)) from exc
    return {"value": value}


def tw_compare(a: str, b: str) -> Dict[str, object]:
    """Compute every similarity measure for a pair of strings."""

    if not isinstance(a, str) or not isinstance(b, str):
        raise ToolError("INVALID_ARGS", "a and b must be strings")
    return {
        "edit_distance": edit_distance(a, b),
        "similarity_ratio": similarity_ratio(a, b),
        "jaro_winkler": jaro_winkler(a, b),
        "longest_common_substring": longest_common_substring(a, b),
    }
