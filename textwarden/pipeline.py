"""Core canonicalization pipeline: guard, fold, normalize, filter, fold case."""

from dataclasses import replace
from typing import Mapping, Optional, Union

from .audit import AuditLogger
from .config import ConfigError
from .digits import fold_digits
from .errors import CanonicalizationError, EmptyAfterCanonicalization, InputTooLong
from .normalize import (
    ALWAYS_STRIPPED,
    collapse_whitespace,
    normalize_nfkc,
    strip_control_and_bidi,
    trim_ascii_whitespace,
)
from .profiles import (
    DEFAULT_PLAIN_TEXT_MAX_BYTES,
    NUMERIC,
    PASSWORD,
    PERSON_NAME,
    PERSON_NAME_MAX_BYTES,
    PLAIN_TEXT,
    PROFILES,
    SLUG,
    USERNAME,
    CanonicalizationProfile,
)
from .romanize import romanize_persian
from .sanitize import keep_ascii_digits, shape_person_name, shape_slug, shape_username, strip_tags
from .types import CanonicalizationResult

ProfileArg = Union[str, CanonicalizationProfile]


def _byte_length(text: str) -> int:
    """UTF-8 length; lone surrogates count as their three-byte encoding."""

    return len(text.encode("utf-8", "surrogatepass"))


def resolve_profile(
    profile: ProfileArg,
    profiles: Optional[Mapping[str, CanonicalizationProfile]] = None,
) -> CanonicalizationProfile:
    """Resolve a profile name, failing closed on unknown names."""

    if isinstance(profile, CanonicalizationProfile):
        return profile
    registry = PROFILES if profiles is None else profiles
    try:
        return registry[profile]
    except KeyError:
        raise ConfigError(f"unknown profile: {profile}") from None


def _apply_allow_list(text: str, profile: CanonicalizationProfile) -> str:
    if profile.allow_list == "username":
        return shape_username(text)
    if profile.allow_list == "slug":
        return shape_slug(text)
    if profile.allow_list == "person_name":
        return shape_person_name(text, profile.preserve_joiners - ALWAYS_STRIPPED)
    if profile.allow_list == "numeric":
        return keep_ascii_digits(text)
    raise ConfigError(f"unknown allow list: {profile.allow_list}")


def _run_stages(text: str, profile: CanonicalizationProfile) -> str:
    limit = profile.max_input_bytes
    if limit is not None:
        size = _byte_length(text)
        if size > limit:
            raise InputTooLong(limit, size, profile=profile.name)

    if profile.trim_whitespace:
        text = trim_ascii_whitespace(text)
    if profile.fold_digits:
        text = fold_digits(text, profile.digit_scripts)
    text = normalize_nfkc(text)
    if profile.romanize:
        text = romanize_persian(text)
    if profile.strip_tags:
        text = strip_tags(text)
    if profile.strip_control_and_bidi:
        text = strip_control_and_bidi(text, profile.preserve_joiners)
    if profile.allow_list is not None:
        text = _apply_allow_list(text, profile)
    # Removing characters can leave a base letter next to a combining mark.
    text = normalize_nfkc(text)

    if profile.collapse_whitespace:
        text = collapse_whitespace(text)
    if profile.trim_whitespace:
        text = trim_ascii_whitespace(text)
    if limit is not None:
        size = _byte_length(text)
        if size > limit:
            raise InputTooLong(limit, size, profile=profile.name)

    if profile.lowercase:
        text = text.lower()
        # Lowercasing can emit combining marks out of canonical order.
        text = normalize_nfkc(text)
    if not text:
        raise EmptyAfterCanonicalization(profile=profile.name)
    return text


def try_canonicalize(
    text: str,
    profile: ProfileArg = PASSWORD,
    audit_logger: Optional[AuditLogger] = None,
    profiles: Optional[Mapping[str, CanonicalizationProfile]] = None,
) -> CanonicalizationResult:
    """Run the canonicalization pipeline and return a CanonicalizationResult."""

    resolved = resolve_profile(profile, profiles)
    input_bytes = _byte_length(text)
    try:
        value = _run_stages(text, resolved)
    except CanonicalizationError as exc:
        result = CanonicalizationResult(profile=resolved.name, input_bytes=input_bytes, error=exc)
    else:
        result = CanonicalizationResult(profile=resolved.name, input_bytes=input_bytes, value=value)

    if audit_logger is not None:
        audit_logger.log(result)

    return result


def canonicalize(
    text: str,
    profile: ProfileArg = PASSWORD,
    audit_logger: Optional[AuditLogger] = None,
    profiles: Optional[Mapping[str, CanonicalizationProfile]] = None,
) -> str:
    """Canonicalize text with a profile, raising CanonicalizationError on failure."""

    return try_canonicalize(text, profile, audit_logger=audit_logger, profiles=profiles).unwrap()


def sanitize_password(text: str) -> str:
    """Canonical password: trimmed, digits folded, NFKC, controls stripped, lowercase."""

    return canonicalize(text, PASSWORD)


def sanitize_username(text: str, lowercase: bool = True) -> str:
    """Letters, digits and underscores, with Persian romanized to ASCII."""

    return canonicalize(text, USERNAME if lowercase else replace(USERNAME, lowercase=False))


def sanitize_slug(text: str, lowercase: bool = True) -> str:
    """Hyphen-separated words of letters and digits, no leading digits."""

    return canonicalize(text, SLUG if lowercase else replace(SLUG, lowercase=False))


def sanitize_plain_text(text: str, max_input_bytes: int = DEFAULT_PLAIN_TEXT_MAX_BYTES) -> str:
    """Single-line plain text with tags, controls and repeated whitespace removed."""

    return canonicalize(text, replace(PLAIN_TEXT, max_input_bytes=max_input_bytes))


def sanitize_person_name(text: str, max_input_bytes: int = PERSON_NAME_MAX_BYTES) -> str:
    """Letters, spaces, apostrophes and hyphens, keeping ZWNJ and ZWJ."""

    return canonicalize(text, replace(PERSON_NAME, max_input_bytes=max_input_bytes))


def sanitize_numeric(text: str) -> str:
    """Digits only, after folding Persian and Arabic-Indic digits."""

    return canonicalize(text, NUMERIC)
