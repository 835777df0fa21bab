from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from youthtracker.app import apply_delta_file, sweep_with_anthropic
from youthtracker.config import ConfigurationError, configure_logging
from youthtracker.domain.errors import SweepError
from youthtracker.domain.model import SweepType

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from youthtracker.app import SweepSummary

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sweep and merge youth transfer intel")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sweep = subparsers.add_parser("sweep", help="Search for new intel and merge it")
    sweep.add_argument(
        "--type",
        dest="sweep_type",
        choices=[sweep_type.value for sweep_type in SweepType],
        default=SweepType.FULL.value,
        help="Which players to search (defaults to full)",
    )
    sweep.add_argument(
        "--player",
        type=str,
        help="Name (or part of it) of the player to search in a flash sweep",
    )

    apply = subparsers.add_parser("apply", help="Validate and merge a saved delta file")
    apply.add_argument("delta_file", type=Path, help="Path of the raw delta JSON")

    for subparser in (sweep, apply):
        subparser.add_argument(
            "--dry-run",
            action="store_true",
            help="Validate and report without writing the stores",
        )
        subparser.add_argument(
            "--verbose",
            action="store_true",
            help="Enable debug logging",
        )

    return parser.parse_args(list(argv))


def _validate_args(args: argparse.Namespace) -> None:
    if args.command != "sweep":
        return
    if args.player and args.sweep_type != SweepType.FLASH.value:
        raise ValueError("--player is only valid with --type flash")
    if args.sweep_type == SweepType.FLASH.value and not args.player:
        raise ValueError("A flash sweep needs --player")


def _log_summary(summary: SweepSummary) -> None:
    log.info(
        "Sweep finished: searched=%s, accepted=%s, rejected=%s, tier warnings=%s, "
        "escalations=%s, tier_changes=%s, review=%s, written=%s",
        summary.players_searched,
        summary.accepted,
        summary.rejected,
        summary.tier_warnings,
        summary.escalations,
        summary.tier_changes,
        summary.needs_review,
        summary.written,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        _validate_args(parsed_args)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "sweep":
            summary = sweep_with_anthropic(
                sweep_type=SweepType(parsed_args.sweep_type),
                flash_player=parsed_args.player,
                dry_run=parsed_args.dry_run,
            )
        elif parsed_args.command == "apply":
            summary = apply_delta_file(parsed_args.delta_file, dry_run=parsed_args.dry_run)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except SweepError:
        log.exception("Sweep failed")
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during sweep")
        sys.exit(1)

    _log_summary(summary)


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
