from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from dumpsizer.app import evaluate_dump_device, reconcile_dump_device
from dumpsizer.config import (
    ConfigurationError,
    build_webhook_config,
    configure_logging,
    get_reconciler_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from dumpsizer.config import ReconcilerConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Size the AIX primary dump device")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser("evaluate", help="Print the decision without acting on it")
    evaluate.add_argument(
        "--facts",
        type=str,
        help="JSON facts document to evaluate instead of querying the host",
    )

    apply = subparsers.add_parser("apply", help="Evaluate and dispatch the decision")
    apply.add_argument(
        "--facts",
        type=str,
        help="JSON facts document to evaluate instead of querying the host",
    )
    apply.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Log the extendlv command instead of running it",
    )
    apply.add_argument(
        "--webhook-url",
        type=str,
        help="Also POST diagnostics to this URL",
    )

    return parser.parse_args(list(argv))


def _apply_overrides(config: ReconcilerConfig, args: argparse.Namespace) -> ReconcilerConfig:
    if args.facts:
        facts_file = Path(args.facts).expanduser()
        if not facts_file.is_file():
            raise ValueError(f"Facts file not found: {args.facts}")
        config = replace(config, facts_file=facts_file)
    if getattr(args, "dry_run", None):
        config = replace(config, dry_run=True)
    webhook_url = getattr(args, "webhook_url", None)
    if webhook_url:
        token = config.webhook.token if config.webhook is not None else None
        config = replace(config, webhook=build_webhook_config(webhook_url, token=token))
    return config


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    configure_logging()
    try:
        parsed_args = _parse_args(args_list)
        if parsed_args.verbose:
            configure_logging(verbose=True, force=True)
        config = _apply_overrides(get_reconciler_config(), parsed_args)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "evaluate":
            decision = evaluate_dump_device(config=config)
            print(json.dumps(asdict(decision), sort_keys=True))  # noqa: T201
        elif parsed_args.command == "apply":
            result = reconcile_dump_device(config=config)
            log.info("Dispatch outcome: %s", result.outcome)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
