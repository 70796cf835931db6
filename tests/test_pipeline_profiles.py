from dataclasses import replace
import unittest

from textwarden.config import ConfigError
from textwarden.errors import CanonicalizationError, EmptyAfterCanonicalization, InputTooLong
from textwarden.pipeline import (
    canonicalize,
    sanitize_numeric,
    sanitize_password,
    sanitize_person_name,
    sanitize_plain_text,
    sanitize_slug,
    sanitize_username,
    try_canonicalize,
)
from textwarden.profiles import PASSWORD, PROFILES
from textwarden.types import CanonicalizationResult

_SAMPLES = [
    "MyP@ss123",
    " \t\nABC \r",
    "pass۱۲۳",
    "١٢٣ABC",
    "A\x00BC",
    "پر\u200cیناز",
    "abc\u202e123",
    "ＡＢＣ",
    "علی ۱۲۳",
    "  Hello,   <b>World</b>!\t2024 ",
    "e\u200b\u0301",
    "\u3000İstanbul \ufdfa",
    "1 2 3 go",
    "-1abc",
    "O'Brien  \n Smith",
    "x\ud800y",
    "ΣΑΣ σας",
    "ﬁ ① ²",
    "İ\u0619",
    "\u013d\u0130\u0619",
]


class PasswordProfileTests(unittest.TestCase):
    def test_ascii_lower(self) -> None:
        self.assertEqual(sanitize_password("MyP@ss123"), "myp@ss123")

    def test_persian_digits(self) -> None:
        self.assertEqual(sanitize_password("pass۱۲۳"), "pass123")

    def test_arabic_digits(self) -> None:
        self.assertEqual(sanitize_password("١٢٣ABC"), "123abc")

    def test_trim(self) -> None:
        self.assertEqual(sanitize_password(" \t\nABC \r"), "abc")

    def test_control_removal(self) -> None:
        self.assertEqual(sanitize_password("A\x00BC"), "abc")

    def test_keeps_zwnj(self) -> None:
        text = "پر\u200cیناز"
        result = sanitize_password(text)
        self.assertEqual(result, text)
        self.assertEqual(result.count("\u200c"), 1)
        self.assertEqual(result.index("\u200c"), 2)

    def test_removes_bidi_override(self) -> None:
        self.assertEqual(canonicalize("abc\u202e123", "password"), "abc123")

    def test_full_width(self) -> None:
        self.assertEqual(canonicalize("ＡＢＣ", PASSWORD), "abc")

    def test_lowercasing_keeps_marks_in_canonical_order(self) -> None:
        first = sanitize_password("\u0130\u0619")
        self.assertEqual(first, "i\u0619\u0307")
        self.assertEqual(sanitize_password(first), first)

    def test_too_long(self) -> None:
        with self.assertRaises(InputTooLong) as ctx:
            sanitize_password("A" * 2000)
        self.assertEqual(ctx.exception.limit, 1024)
        self.assertEqual(ctx.exception.actual, 2000)

    def test_limit_counts_bytes_not_characters(self) -> None:
        # 600 Persian letters are 1200 UTF-8 bytes.
        with self.assertRaises(InputTooLong):
            sanitize_password("س" * 600)
        self.assertEqual(sanitize_password("A" * 1024), "a" * 1024)

    def test_expansion_past_limit_is_rejected(self) -> None:
        # U+FDFA expands to 18 characters under NFKC.
        with self.assertRaises(InputTooLong):
            sanitize_password("\ufdfa" * 300)

    def test_empty_after_cleaning(self) -> None:
        with self.assertRaises(EmptyAfterCanonicalization):
            sanitize_password("\u202e")
        with self.assertRaises(EmptyAfterCanonicalization):
            sanitize_password("   ")

    def test_failures_share_a_base_class(self) -> None:
        with self.assertRaises(CanonicalizationError):
            sanitize_password("")
        with self.assertRaises(ValueError):
            sanitize_password("A" * 2000)

    def test_recomposes_after_removing_format_characters(self) -> None:
        self.assertEqual(sanitize_password("e\u200b\u0301"), "\u00e9")


class UsernameProfileTests(unittest.TestCase):
    def test_persian_username(self) -> None:
        self.assertEqual(sanitize_username("علی ۱۲۳"), "ali_123")

    def test_collapses_and_trims_underscores(self) -> None:
        self.assertEqual(sanitize_username("  John   Doe!! "), "john_doe")
        self.assertEqual(sanitize_username("__a__b__"), "a_b")

    def test_keeps_case_when_asked(self) -> None:
        self.assertEqual(sanitize_username("John Doe", lowercase=False), "John_Doe")

    def test_no_word_characters_is_an_error(self) -> None:
        with self.assertRaises(EmptyAfterCanonicalization):
            sanitize_username("!!! ???")


class SlugProfileTests(unittest.TestCase):
    def test_slug(self) -> None:
        self.assertEqual(sanitize_slug("2024 Annual Report!"), "annual-report")
        self.assertEqual(sanitize_slug("سلام دنیا ۲"), "سلام-دنیا-2")

    def test_keeps_case_when_asked(self) -> None:
        self.assertEqual(sanitize_slug("Hello World", lowercase=False), "Hello-World")


class PlainTextProfileTests(unittest.TestCase):
    def test_plain_text(self) -> None:
        self.assertEqual(
            sanitize_plain_text("  Hello,\t<b>World</b>\n۲۰۲۴ "), "Hello,World2024"
        )

    def test_tabs_and_newlines_are_removed_as_controls(self) -> None:
        self.assertEqual(sanitize_plain_text("a\tb\nc"), "abc")
        self.assertEqual(sanitize_plain_text("a \t b"), "a b")

    def test_strips_joiners_and_controls(self) -> None:
        self.assertEqual(sanitize_plain_text("a\u200cb\x07c\u202ed"), "abcd")

    def test_default_limit(self) -> None:
        with self.assertRaises(InputTooLong):
            sanitize_plain_text("x" * 256)
        self.assertEqual(sanitize_plain_text("x" * 255), "x" * 255)

    def test_configurable_limit(self) -> None:
        with self.assertRaises(InputTooLong):
            sanitize_plain_text("hello", max_input_bytes=4)


class PersonNameProfileTests(unittest.TestCase):
    def test_person_name(self) -> None:
        self.assertEqual(sanitize_person_name("  O'Brien-Smith  3rd "), "O'Brien-Smith rd")

    def test_keeps_zwnj_in_persian_names(self) -> None:
        self.assertEqual(sanitize_person_name("پری\u200cناز"), "پری\u200cناز")

    def test_default_limit(self) -> None:
        with self.assertRaises(InputTooLong):
            sanitize_person_name("x" * 101)
        self.assertEqual(sanitize_person_name("x" * 100), "x" * 100)


class NumericProfileTests(unittest.TestCase):
    def test_numeric(self) -> None:
        self.assertEqual(sanitize_numeric("۰۹۱۲-۳۴۵ 67"), "0912345" + "67")

    def test_numeric_without_digits(self) -> None:
        with self.assertRaises(EmptyAfterCanonicalization):
            sanitize_numeric("none")


class PipelineTests(unittest.TestCase):
    def test_idempotent_for_every_profile(self) -> None:
        for profile in PROFILES.values():
            for text in _SAMPLES:
                with self.subTest(profile=profile.name, text=text):
                    first = try_canonicalize(text, profile)
                    if not first.ok:
                        continue
                    self.assertEqual(canonicalize(first.value, profile), first.value)

    def test_try_canonicalize_returns_typed_failure(self) -> None:
        result = try_canonicalize("\u202e", "password")
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, EmptyAfterCanonicalization)
        self.assertEqual(result.outcome, "EMPTY_AFTER_CANONICALIZATION")
        self.assertIsNone(result.value)
        with self.assertRaises(EmptyAfterCanonicalization):
            result.unwrap()

    def test_try_canonicalize_success(self) -> None:
        result = try_canonicalize("ＡＢＣ", "password")
        self.assertTrue(result.ok)
        self.assertEqual(result.outcome, "OK")
        self.assertEqual(result.unwrap(), "abc")
        self.assertEqual(result.input_bytes, 9)

    def test_unknown_profile_fails_closed(self) -> None:
        with self.assertRaises(ConfigError):
            canonicalize("abc", "nope")

    def test_explicit_profile(self) -> None:
        profile = replace(PASSWORD, name="pin", lowercase=False, digit_scripts=frozenset({"all"}))
        self.assertEqual(canonicalize("ABC१२३", profile), "ABC123")

    def test_lone_surrogate_is_measured_and_removed(self) -> None:
        self.assertEqual(sanitize_password("x\ud800y"), "xy")

    def test_unwrap_without_value_or_error(self) -> None:
        with self.assertRaises(ValueError):
            CanonicalizationResult(profile="password", input_bytes=0).unwrap()

    def test_profile_helpers_are_documented(self) -> None:
        helpers = (
            sanitize_password,
            sanitize_username,
            sanitize_slug,
            sanitize_plain_text,
            sanitize_person_name,
            sanitize_numeric,
        )
        for helper in helpers:
            with self.subTest(helper=helper.__name__):
                self.assertTrue(helper.__doc__)
