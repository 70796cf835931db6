import json
import unittest

from textwarden.audit import audit_event_to_json, build_audit_event
from textwarden.pipeline import try_canonicalize


class AuditEventTests(unittest.TestCase):
    def test_audit_event_schema(self) -> None:
        result = try_canonicalize("Secret۱", "password")
        event = build_audit_event(result, timestamp="2024-01-01T00:00:00+00:00")
        data = json.loads(audit_event_to_json(event))

        expected_keys = {"timestamp", "profile", "outcome", "input_bytes", "output_chars"}
        self.assertEqual(set(data.keys()), expected_keys)
        self.assertEqual(data["outcome"], "OK")
        self.assertEqual(data["input_bytes"], 8)
        self.assertEqual(data["output_chars"], 7)
        self.assertNotIn("secret1", json.dumps(data))

    def test_failure_event_uses_error_code(self) -> None:
        result = try_canonicalize("A" * 2000, "password")
        event = build_audit_event(result, timestamp="2024-01-01T00:00:00+00:00")
        self.assertEqual(event.outcome, "INPUT_TOO_LONG")
        self.assertIsNone(event.output_chars)
        self.assertEqual(event.profile, "password")
