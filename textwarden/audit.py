"""Audit event creation and JSONL logging."""

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .types import CanonicalizationResult


@dataclass(frozen=True)
class AuditEvent:
    """Structured audit record for a single canonicalization.

    Never carries the input or canonical text, only sizes and the outcome.
    """

    timestamp: str
    profile: str
    outcome: str
    input_bytes: int
    output_chars: Optional[int]


def build_audit_event(result: CanonicalizationResult, timestamp: Optional[str] = None) -> AuditEvent:
    """Build an audit event from a CanonicalizationResult."""

    event_time = timestamp or datetime.now(timezone.utc).isoformat()
    return AuditEvent(
        timestamp=event_time,
        profile=result.profile,
        outcome=result.outcome,
        input_bytes=result.input_bytes,
        output_chars=len(result.value) if result.value is not None else None,
    )


def audit_event_to_json(event: AuditEvent) -> str:
    """Serialize an audit event to a JSON string."""

    return json.dumps(asdict(event), sort_keys=True, ensure_ascii=True)


class AuditLogger:
    """Append-only JSONL audit log writer."""

    def __init__(self, path: Path) -> None:
        """Initialize a logger that appends to the given path."""

        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, result: CanonicalizationResult, timestamp: Optional[str] = None) -> None:
        """Append a CanonicalizationResult to the JSONL audit log."""

        event = build_audit_event(result, timestamp=timestamp)
        payload = audit_event_to_json(event)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(payload + "\n")
