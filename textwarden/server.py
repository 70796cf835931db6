"""Line-delimited JSON stdio server and command line entry point."""

from dataclasses import dataclass
from functools import partial
import json
from pathlib import Path
import sys
from typing import Callable, Dict, IO, List, Optional

from .audit import AuditLogger
from .config import ConfigError, TextwardenConfig, load_config
from .tools import ToolError, tw_canonicalize, tw_compare, tw_fold_digits

DEFAULT_CONFIG_PATH = Path("config/textwarden.json")


@dataclass(frozen=True)
class TextwardenContext:
    """Runtime context holding config and the optional audit log."""

    config: TextwardenConfig
    audit_logger: Optional[AuditLogger]


def load_context(
    config_path: Optional[Path] = None,
    audit_log_path: Optional[Path] = None,
) -> TextwardenContext:
    """Load configuration and open the audit log if one is requested."""

    resolved_config = load_config(config_path or DEFAULT_CONFIG_PATH)
    audit_logger = AuditLogger(audit_log_path) if audit_log_path else None
    return TextwardenContext(config=resolved_config, audit_logger=audit_logger)


def build_tool_handlers(context: TextwardenContext) -> Dict[str, Callable[..., object]]:
    """Build tool handler callables bound to the runtime context."""

    return {
        "tw_canonicalize": partial(
            tw_canonicalize,
            config=context.config,
            audit_logger=context.audit_logger,
        ),
        "tw_fold_digits": tw_fold_digits,
        "tw_compare": tw_compare,
    }


class TextwardenServer:
    """Dispatch tool calls from JSON requests."""

    def __init__(self, handlers: Dict[str, Callable[..., object]]) -> None:
        """Initialize the server with tool handlers."""

        self._handlers = handlers

    def handle_request(self, request: Dict[str, object]) -> Dict[str, object]:
        """Handle a single tool request payload."""

        request_id = request.get("id")
        tool = request.get("tool")
        args = request.get("args", {})
        if not isinstance(tool, str):
            return self._error(request_id, "INVALID_REQUEST", "missing tool name")
        if not isinstance(args, dict):
            return self._error(request_id, "INVALID_REQUEST", "args must be an object")
        handler = self._handlers.get(tool)
        if handler is None:
            return self._error(request_id, "UNKNOWN_TOOL", f"unknown tool: {tool}")
        try:
            result = handler(**args)
        except ToolError as exc:
            return self._error(request_id, exc.code, str(exc))
        except ConfigError as exc:
            return self._error(request_id, "CONFIG_ERROR", str(exc))
        except TypeError as exc:
            return self._error(request_id, "INVALID_ARGS", str(exc))
        return {"id": request_id, "result": result}

    def _error(self, request_id: object, code: str, message: str) -> Dict[str, object]:
        """Create a standard error payload."""

        return {"id": request_id, "error": {"code": code, "message": message}}


def serve_stdio(
    server: TextwardenServer,
    input_stream: IO[str] = sys.stdin,
    output_stream: IO[str] = sys.stdout,
) -> None:
    """Serve line-delimited JSON requests over stdio."""

    for line in input_stream:
        line = line.strip()
        if not line:
            continue
        try:
            request = json.loads(line)
        except json.JSONDecodeError as exc:
            response = {"id": None, "error": {"code": "INVALID_JSON", "message": str(exc)}}
        else:
            if not isinstance(request, dict):
                response = {
                    "id": None,
                    "error": {"code": "INVALID_REQUEST", "message": "request must be an object"},
                }
            else:
                response = server.handle_request(request)
        output_stream.write(json.dumps(response, ensure_ascii=True) + "\n")
        output_stream.flush()


def main(argv: Optional[List[str]] = None, output_stream: IO[str] = sys.stdout) -> int:
    """CLI entrypoint: one-shot tool calls or the stdio server."""

    import argparse

    parser = argparse.ArgumentParser(description="textwarden text canonicalization")
    parser.add_argument(
        "--config",
        dest="config_path",
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to config/textwarden.json",
    )
    parser.add_argument(
        "--audit-log",
        dest="audit_log",
        default=None,
        help="Append a JSONL audit event per canonicalization to this path",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    canon = commands.add_parser("canonicalize", help="Canonicalize one value")
    canon.add_argument("text")
    canon.add_argument("--profile", default=None, help="Profile name (config default if omitted)")

    fold = commands.add_parser("fold-digits", help="Fold digits to ASCII")
    fold.add_argument("text")
    fold.add_argument(
        "--script",
        dest="scripts",
        action="append",
        default=None,
        help="Digit script to fold; repeatable, 'all' for every script",
    )

    compare = commands.add_parser("compare", help="Compare two strings")
    compare.add_argument("a")
    compare.add_argument("b")

    commands.add_parser("serve", help="Serve JSON requests on stdin")

    args = parser.parse_args(argv)

    try:
        context = load_context(
            config_path=Path(args.config_path),
            audit_log_path=Path(args.audit_log) if args.audit_log else None,
        )
    except ConfigError as exc:
        parser.error(str(exc))
    server = TextwardenServer(build_tool_handlers(context))

    if args.command == "serve":
        serve_stdio(server, output_stream=output_stream)
        return 0

    if args.command == "canonicalize":
        request_args = {"text": args.text, "profile": args.profile}
        tool = "tw_canonicalize"
    elif args.command == "fold-digits":
        request_args = {"text": args.text, "scripts": args.scripts}
        tool = "tw_fold_digits"
    else:
        request_args = {"a": args.a, "b": args.b}
        tool = "tw_compare"

    response = server.handle_request({"id": None, "tool": tool, "args": request_args})
    output_stream.write(json.dumps(response, ensure_ascii=False) + "\n")
    return 1 if "error" in response else 0


if __name__ == "__main__":
    raise SystemExit(main())
