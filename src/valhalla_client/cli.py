#!/usr/bin/env python3
"""Command-line access to the Valhalla endpoints.

Reads a JSON request from a file or stdin and prints the JSON response:

    echo '{"locations": [...], "costing": "auto"}' | valhalla-client route
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Callable, Dict, Optional, TextIO, Tuple, Type
from pydantic import BaseModel, ValidationError

from valhalla_client.client import ValhallaClient
from valhalla_client.config import get_settings
from valhalla_client.elevation import ElevationInput
from valhalla_client.errors import ValhallaError, ValhallaServiceError
from valhalla_client.isochrone import IsochroneInput
from valhalla_client.logging_config import configure_logging
from valhalla_client.models import ClientConfig
from valhalla_client.route import RouteInput

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SERVICE_ERROR = 1
EXIT_CLIENT_ERROR = 2

_EndpointCall = Callable[[ValhallaClient, BaseModel], BaseModel]

_COMMANDS: Dict[str, Tuple[Type[BaseModel], _EndpointCall]] = {
    "route": (RouteInput, lambda client, body: client.route(body)),
    "isochrone": (IsochroneInput, lambda client, body: client.isochrone(body)),
    "height": (ElevationInput, lambda client, body: client.elevation(body)),
}


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Timeout must be positive, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for the Valhalla CLI."""
    parser = argparse.ArgumentParser(
        prog="valhalla-client",
        description="Send a JSON request to a Valhalla endpoint and print the response.",
    )
    parser.add_argument(
        "command",
        choices=sorted(_COMMANDS),
        help="Which endpoint to call",
    )
    parser.add_argument(
        "--input",
        help="Path to the JSON request (default: read stdin)",
    )
    parser.add_argument(
        "--endpoint",
        help="Override VALHALLA_ENDPOINT",
    )
    parser.add_argument(
        "--api-key",
        help="Override VALHALLA_API_KEY",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        help="Override VALHALLA_TIMEOUT (seconds)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override VALHALLA_LOG_LEVEL",
    )
    return parser


def _read_request(path: Optional[str], stdin: TextIO) -> str:
    if path is None:
        return stdin.read()
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def _build_config(args: argparse.Namespace) -> ClientConfig:
    settings = get_settings()
    config = ClientConfig.from_settings(settings)
    headers = dict(config.custom_headers)
    if args.api_key:
        headers[settings.api_key_header] = args.api_key
    return ClientConfig(
        endpoint=args.endpoint or config.endpoint,
        custom_headers=headers,
        timeout=args.timeout or config.timeout,
        verify=config.verify,
    )


def run_cli(
    argv: Optional[list[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Execute CLI with given arguments.

    Args:
        argv: Command-line arguments (uses sys.argv if None).
        stdin: Request source when --input is not given (default sys.stdin).
        stdout: Response destination (default sys.stdout).

    Returns:
        Process exit code: 0 on success, 1 on a service error, 2 on any other error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        config = _build_config(args)
    except ValidationError as e:
        configure_logging(args.log_level or logging.INFO)
        LOGGER.error("Invalid configuration: %s", e)
        return EXIT_CLIENT_ERROR

    configure_logging(args.log_level or get_settings().log_level)

    request_model, call = _COMMANDS[args.command]
    try:
        body = request_model.model_validate_json(_read_request(args.input, stdin))
    except (OSError, UnicodeDecodeError) as e:
        LOGGER.error("Unable to read request file '%s': %s", args.input, e)
        return EXIT_CLIENT_ERROR
    except ValidationError as e:
        LOGGER.error("Invalid %s request: %s", args.command, e)
        return EXIT_CLIENT_ERROR

    with ValhallaClient(config) as client:
        try:
            output = call(client, body)
        except ValhallaServiceError as e:
            LOGGER.error("Valhalla returned HTTP %d for '%s': %s", e.status_code, args.command, e)
            stdout.write(
                json.dumps(
                    {
                        "error_code": e.error_code,
                        "error": e.error,
                        "status_code": e.status_code,
                        "status": e.status,
                    },
                    indent=2,
                )
            )
            stdout.write("\n")
            return EXIT_SERVICE_ERROR
        except ValhallaError as e:
            LOGGER.error("Request '%s' failed: %s", args.command, e)
            return EXIT_CLIENT_ERROR

    stdout.write(output.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    stdout.write("\n")
    LOGGER.debug("Request '%s' completed", args.command)
    return EXIT_OK


def main() -> None:  # pragma: no cover - CLI entrypoint
    """CLI entry point."""
    sys.exit(run_cli())


if __name__ == "__main__":  # pragma: no cover - CLI execution path
    main()
