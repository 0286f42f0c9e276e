# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Quaff CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..config import TransportSettings, load_transport_settings
from ..endpoints import Endpoint
from ..errors import TransportError
from ..log import setup_logging
from ..responses import ErrorResponse, Response
from ..transports import HttpxTransport

EXIT_OK = 0
EXIT_ERROR_RESPONSE = 1
EXIT_TRANSPORT_ERROR = 2
CLI_TEXT_TRUNCATION_BYTES = 4096


def _parse_param(value: str) -> tuple[str, str]:
    key, sep, item = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {value!r}")
    return key, item


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quaff", description="Fetch or probe an endpoint through the Quaff HTTP transport")
    parser.add_argument("--log-level", default=None, help="Logging level (TRACE shows raw response bodies)")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    get_parser = sub.add_parser("get", help="GET a resource and classify the response")
    get_parser.add_argument("url", help="Endpoint URL")
    get_parser.add_argument("--accept", default="application/json", help="Accept header sent with the request")
    get_parser.add_argument("--param", action="append", type=_parse_param, default=[], metavar="KEY=VALUE", help="Query parameter (repeatable)")
    get_parser.add_argument("--json", action="store_true", help="Output JSON instead of a human-friendly summary")

    ping_parser = sub.add_parser("ping", help="HEAD a resource to check that it exists")
    ping_parser.add_argument("url", help="Resource URL")
    return parser


def _truncate(text: str, max_bytes: int = CLI_TEXT_TRUNCATION_BYTES) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    return raw[:max_bytes].decode("utf-8", errors="ignore") + "...[truncated]"


def _response_to_dict(response: Response) -> dict[str, Any]:
    data: dict[str, Any] = {
        "ok": response.is_ok,
        "status_code": response.result_code,
        "content_type": response.content_type,
        "body": _truncate(response.text),
    }
    if isinstance(response, ErrorResponse):
        data["message"] = response.result_message
    return data


def _print_response(response: Response) -> None:
    status = "OK" if response.is_ok else "ERROR"
    line = f"{status} {response.result_code}"
    if isinstance(response, ErrorResponse) and response.result_message:
        line += f" {response.result_message}"
    print(line)
    if response.content_type:
        print(f"Content-Type: {response.content_type}")
    if response.body:
        print()
        print(_truncate(response.text))


def _run_get(args: argparse.Namespace, settings: TransportSettings) -> int:
    endpoint = Endpoint(base_url=args.url, accept_type=args.accept)
    with HttpxTransport(endpoint, settings=settings) as transport:
        response = transport.get("", dict(args.param))
    if args.json:
        print(json.dumps(_response_to_dict(response), indent=2))
    else:
        _print_response(response)
    return EXIT_ERROR_RESPONSE if response.is_error else EXIT_OK


def _run_ping(args: argparse.Namespace, settings: TransportSettings) -> int:
    endpoint = Endpoint(base_url=args.url, accept_type="*/*")
    with HttpxTransport(endpoint, settings=settings) as transport:
        result = transport.ping(args.url)
    print(f"{'EXISTS' if result.exists else 'MISSING'} {result.status_code}")
    return EXIT_OK if result.exists else EXIT_ERROR_RESPONSE


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings = load_transport_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    runner = _run_get if args.command == "get" else _run_ping
    try:
        return runner(args, settings)
    except TransportError as exc:
        print(f"Transport error ({exc.category.value}): {exc.message}", file=sys.stderr)
        return EXIT_TRANSPORT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
