from .audit import AuditLogger
from .config import ConfigError, TextwardenConfig, load_config
from .digits import DEFAULT_SCRIPTS, SUPPORTED_SCRIPTS, fold_digits
from .errors import CanonicalizationError, EmptyAfterCanonicalization, InputTooLong
from .pipeline import (
    canonicalize,
    sanitize_numeric,
    sanitize_password,
    sanitize_person_name,
    sanitize_plain_text,
    sanitize_slug,
    sanitize_username,
    try_canonicalize,
)
from .profiles import PROFILES, CanonicalizationProfile
from .server import TextwardenServer, build_tool_handlers, load_context, main, serve_stdio
from .similarity import edit_distance, jaro_winkler, longest_common_substring, similarity_ratio
from .types import CanonicalizationResult

__all__ = [
    "AuditLogger",
    "CanonicalizationError",
    "CanonicalizationProfile",
    "CanonicalizationResult",
    "ConfigError",
    "DEFAULT_SCRIPTS",
    "EmptyAfterCanonicalization",
    "InputTooLong",
    "PROFILES",
    "SUPPORTED_SCRIPTS",
    "TextwardenConfig",
    "TextwardenServer",
    "build_tool_handlers",
    "canonicalize",
    "edit_distance",
    "fold_digits",
    "jaro_winkler",
    "load_config",
    "load_context",
    "longest_common_substring",
    "main",
    "sanitize_numeric",
    "sanitize_password",
    "sanitize_person_name",
    "sanitize_plain_text",
    "sanitize_slug",
    "sanitize_username",
    "serve_stdio",
    "similarity_ratio",
    "try_canonicalize",
]
