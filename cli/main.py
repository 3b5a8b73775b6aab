"""Command line interface for requesting and debugging LKE storage credentials."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml

from apiserver.app import lambda_handler
from cli import config, output
from core.errors import ConfigurationError, CredentialProxyError
from core.log import configure_logging
from core.params import PROFILES
from core.service import request_credential
from core.settings import load_settings as load_lke_settings

FORMATS = ["json", "md", "table"]


class CLIError(Exception):
    def __init__(self, message: str, exit_code: int = 2) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lkecred", description="LKE storage credential toolkit")
    parser.add_argument("--config", type=Path, default=Path("lkecred.yml"), help="Path to CLI configuration file")
    parser.add_argument("--log-level", help="Logging level (defaults to $LOG_LEVEL or INFO)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # request ----------------------------------------------------------------
    request_cmd = subparsers.add_parser("request", help="Fetch a temporary storage credential")
    request_cmd.add_argument("--file-type", help="File extension to upload, e.g. png")
    request_cmd.add_argument("--public", action="store_true", help="Request a publicly readable upload")
    request_cmd.add_argument("--profile", choices=sorted(PROFILES), help="Parameter profile override")
    request_cmd.add_argument("--output", type=Path)
    request_cmd.add_argument("--format", choices=FORMATS, help="Output format override")

    # invoke -----------------------------------------------------------------
    invoke_cmd = subparsers.add_parser("invoke", help="Run an event file through the Lambda handler")
    invoke_cmd.add_argument("--event", type=Path, required=True)
    invoke_cmd.add_argument("--output", type=Path)

    return parser


def app(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = _load_cli_settings(args.config)
        if args.command == "request":
            merged = settings.merge_cli(format_override=args.format, profile_override=args.profile)
            return _cmd_request(args, merged)
        if args.command == "invoke":
            return _cmd_invoke(args)
    except CLIError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except CredentialProxyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


# ---------------------------------------------------------------------------
# Command implementations


def _cmd_request(args: argparse.Namespace, settings: config.Settings) -> int:
    lke_settings = load_lke_settings().with_overrides(region=settings.region, endpoint=settings.endpoint)
    body = {"fileType": args.file_type, "isPublic": bool(args.public)}
    result = request_credential(body, settings.default_profile, settings=lke_settings)

    if settings.default_format == "json":
        output.emit(result, "json", output_path=args.output)
    else:
        output.emit(result.summary(), settings.default_format, output_path=args.output)
    return 0


def _cmd_invoke(args: argparse.Namespace) -> int:
    event = _load_event(args.event)
    response = lambda_handler(event, None)
    payload = dict(response)
    if payload.get("body"):
        payload["body"] = json.loads(payload["body"])
    output.emit(payload, "json", output_path=args.output)
    return 0 if response["statusCode"] < 400 else 1


# ---------------------------------------------------------------------------
# Helpers


def _load_cli_settings(path: Path) -> config.Settings:
    try:
        return config.load_settings(path)
    except (ValueError, yaml.YAMLError) as exc:
        raise CLIError(f"Invalid configuration file {path}: {exc}") from exc


def _load_event(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise CLIError(f"Event file not found: {path}")
    try:
        event = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CLIError(f"Event file is not valid JSON: {exc}") from exc
    if not isinstance(event, dict):
        raise CLIError("Event file must contain a JSON object")
    return event


def main() -> None:
    raise SystemExit(app())


if __name__ == "__main__":
    main()
