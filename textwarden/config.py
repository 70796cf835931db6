"""Configuration parsing and custom profile definitions."""

from dataclasses import dataclass, field, replace
import json
from pathlib import Path
from typing import Dict, FrozenSet, Optional

from .digits import ALL_SCRIPTS, SUPPORTED_SCRIPTS
from .normalize import ALWAYS_STRIPPED
from .profiles import PROFILES, CanonicalizationProfile
from .sanitize import ALLOW_LISTS

DEFAULT_PROFILE = "plain_text"
DEFAULT_BASE_PROFILE = "plain_text"

_BOOL_FIELDS = (
    "trim_whitespace",
    "fold_digits",
    "lowercase",
    "strip_control_and_bidi",
    "romanize",
    "strip_tags",
    "collapse_whitespace",
)
_PROFILE_KEYS = frozenset(
    _BOOL_FIELDS
    + ("extends", "max_input_bytes", "digit_scripts", "preserve_joiners", "allow_list")
)


class ConfigError(ValueError):
    """Raised when configuration parsing or validation fails."""

    pass


@dataclass(frozen=True)
class TextwardenConfig:
    """Root configuration object: the default profile and every known profile."""

    default_profile: str = DEFAULT_PROFILE
    profiles: Dict[str, CanonicalizationProfile] = field(default_factory=lambda: dict(PROFILES))

    def get_profile(self, name: Optional[str] = None) -> CanonicalizationProfile:
        """Resolve a profile by name, falling back to the configured default."""

        resolved = name or self.default_profile
        try:
            return self.profiles[resolved]
        except KeyError:
            raise ConfigError(f"unknown profile: {resolved}") from None


DEFAULT_CONFIG = TextwardenConfig()


def load_config(path: Path) -> TextwardenConfig:
    """Load configuration from a JSON file path."""

    if not path.exists():
        return DEFAULT_CONFIG

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError("config must be valid JSON") from exc
    if not isinstance(data, dict):
        raise ConfigError("config must be a JSON object")
    return config_from_dict(data)


def config_from_dict(data: dict) -> TextwardenConfig:
    """Parse configuration from a Python dict."""

    custom = data.get("profiles", {})
    if custom is None:
        custom = {}
    if not isinstance(custom, dict):
        raise ConfigError("profiles must be an object")

    profiles = dict(PROFILES)
    for name, spec in custom.items():
        if name in PROFILES:
            raise ConfigError(f"profiles.{name} shadows a built-in profile")
        profiles[name] = profile_from_dict(name, spec)

    default_profile = data.get("default_profile", DEFAULT_PROFILE)
    if not isinstance(default_profile, str):
        raise ConfigError("default_profile must be a string")
    if default_profile not in profiles:
        raise ConfigError(f"default_profile names an unknown profile: {default_profile}")

    return TextwardenConfig(default_profile=default_profile, profiles=profiles)


def profile_from_dict(name: str, spec: object) -> CanonicalizationProfile:
    """Build a custom profile by overriding fields of a built-in one."""

    prefix = f"profiles.{name}"
    if not isinstance(spec, dict):
        raise ConfigError(f"{prefix} must be an object")

    unknown = set(spec) - _PROFILE_KEYS
    if unknown:
        raise ConfigError(f"{prefix} has unknown keys: {', '.join(sorted(unknown))}")

    base_name = spec.get("extends", DEFAULT_BASE_PROFILE)
    if not isinstance(base_name, str) or base_name not in PROFILES:
        raise ConfigError(f"{prefix}.extends must name a built-in profile")

    overrides: Dict[str, object] = {"name": name}
    for key in _BOOL_FIELDS:
        if key in spec:
            overrides[key] = _as_bool(spec[key], f"{prefix}.{key}")
    if "max_input_bytes" in spec:
        value = spec["max_input_bytes"]
        overrides["max_input_bytes"] = (
            None if value is None else _as_int(value, f"{prefix}.max_input_bytes")
        )
    if "digit_scripts" in spec:
        overrides["digit_scripts"] = _as_scripts(spec["digit_scripts"], f"{prefix}.digit_scripts")
    if "preserve_joiners" in spec:
        overrides["preserve_joiners"] = _as_preserve_set(
            spec["preserve_joiners"], f"{prefix}.preserve_joiners"
        )
    if "allow_list" in spec:
        allow_list = spec["allow_list"]
        if allow_list is not None and (
            not isinstance(allow_list, str) or allow_list not in ALLOW_LISTS
        ):
            raise ConfigError(
                f"{prefix}.allow_list must be one of {', '.join(sorted(ALLOW_LISTS))}"
            )
        overrides["allow_list"] = allow_list

    return replace(PROFILES[base_name], **overrides)


def _as_bool(value: object, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be a boolean")
    return value


def _as_int(value: object, name: str) -> int:
    """Validate integer limits in configuration."""

    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer")
    if value <= 0:
        raise ConfigError(f"{name} must be positive")
    return value


def _as_string_list(value: object, name: str) -> FrozenSet[str]:
    if not isinstance(value, list) or any(not isinstance(item, str) for item in value):
        raise ConfigError(f"{name} must be a list of strings")
    return frozenset(value)


def _as_scripts(value: object, name: str) -> FrozenSet[str]:
    scripts = _as_string_list(value, name)
    unknown = scripts - SUPPORTED_SCRIPTS - {ALL_SCRIPTS}
    if unknown:
        raise ConfigError(f"{name} has unknown scripts: {', '.join(sorted(unknown))}")
    return scripts


def _as_preserve_set(value: object, name: str) -> FrozenSet[str]:
    """Single characters only; NUL and bidi controls can never be preserved."""

    chars = _as_string_list(value, name)
    if any(len(ch) != 1 for ch in chars):
        raise ConfigError(f"{name} entries must be single characters")
    if chars & ALWAYS_STRIPPED:
        raise ConfigError(f"{name} cannot preserve NUL or bidi controls")
    return chars
