#!/usr/bin/env python3
import argparse
import asyncio
import logging
from typing import Any

from activity_console.app import EXIT_FAILURE, run
from activity_console.core.config import load_settings
from activity_console.core.errors import ConfigurationError
from activity_console.core.log import configure_logging

logger = logging.getLogger("activity_console")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="activity-console",
        description=(
            "Pick a random number of participants and print a suggested activity "
            "from the Bored API (or a mock)."
        ),
    )
    parser.add_argument(
        "--config-dir",
        default=None,
        help="Directory holding appsettings.json and .env (default: current directory).",
    )
    parser.add_argument(
        "--environment",
        default=None,
        help="Loads appsettings.<ENVIRONMENT>.json on top of appsettings.json (default: $APP_ENVIRONMENT or Production).",
    )
    parser.add_argument("--min-participants", type=int, default=None)
    parser.add_argument(
        "--max-participants",
        type=int,
        default=None,
        help="Exclusive upper bound for the random participant count.",
    )
    parser.add_argument(
        "--use-mock",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use the local mock client instead of calling the Bored API.",
    )
    parser.add_argument("--base-url", default=None, help="Bored API activity endpoint.")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds.")
    parser.add_argument("--log-level", default=None)
    return parser


def overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    activity_params = {
        "min_number_of_participants": args.min_participants,
        "max_number_of_participants": args.max_participants,
    }
    bored_client = {
        "use_mock": args.use_mock,
        "base_url": args.base_url,
        "timeout_seconds": args.timeout,
    }
    for section, values in (("activity_params", activity_params), ("bored_client", bored_client)):
        values = {key: value for key, value in values.items() if value is not None}
        if values:
            overrides[section] = values

    if args.log_level:
        overrides["log_level"] = args.log_level
    return overrides


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Bootstrap logging so failures while loading settings are still reported.
    configure_logging("DEBUG")

    try:
        settings = load_settings(
            config_dir=args.config_dir,
            environment=args.environment,
            **overrides_from_args(args),
        )
    except ConfigurationError as exc:
        logger.critical(f"activity-console terminated unexpectedly: {exc}")
        return EXIT_FAILURE

    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} (environment={settings.app_env})")

    try:
        result = asyncio.run(run(settings))
    except Exception:
        logger.exception(f"{settings.app_name} terminated unexpectedly.")
        return EXIT_FAILURE

    logger.info(f"Shutting down {settings.app_name}: status={result.status.value} exit_code={result.exit_code}")
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
