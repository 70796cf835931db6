"""Named canonicalization profiles."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

from .digits import DEFAULT_SCRIPTS
from .normalize import JOINERS

DEFAULT_PLAIN_TEXT_MAX_BYTES = 255
PERSON_NAME_MAX_BYTES = 100


@dataclass(frozen=True)
class CanonicalizationProfile:
    """Fixed configuration of the canonicalization stages for one field type."""

    name: str
    max_input_bytes: Optional[int] = None
    trim_whitespace: bool = True
    fold_digits: bool = True
    digit_scripts: FrozenSet[str] = DEFAULT_SCRIPTS
    lowercase: bool = False
    strip_control_and_bidi: bool = True
    preserve_joiners: FrozenSet[str] = field(default_factory=frozenset)
    allow_list: Optional[str] = None
    romanize: bool = False
    strip_tags: bool = False
    collapse_whitespace: bool = False


PASSWORD = CanonicalizationProfile(
    name="password",
    max_input_bytes=1024,
    lowercase=True,
    preserve_joiners=JOINERS,
)

USERNAME = CanonicalizationProfile(
    name="username",
    lowercase=True,
    strip_control_and_bidi=False,
    allow_list="username",
    romanize=True,
)

SLUG = CanonicalizationProfile(
    name="slug",
    lowercase=True,
    strip_control_and_bidi=False,
    allow_list="slug",
)

PLAIN_TEXT = CanonicalizationProfile(
    name="plain_text",
    max_input_bytes=DEFAULT_PLAIN_TEXT_MAX_BYTES,
    strip_tags=True,
    collapse_whitespace=True,
)

PERSON_NAME = CanonicalizationProfile(
    name="person_name",
    max_input_bytes=PERSON_NAME_MAX_BYTES,
    preserve_joiners=JOINERS,
    allow_list="person_name",
    strip_tags=True,
    collapse_whitespace=True,
)

NUMERIC = CanonicalizationProfile(
    name="numeric",
    strip_control_and_bidi=False,
    allow_list="numeric",
)

PROFILES: Dict[str, CanonicalizationProfile] = {
    profile.name: profile
    for profile in (PASSWORD, USERNAME, SLUG, PLAIN_TEXT, PERSON_NAME, NUMERIC)
}
