"""CLI application entry point and command routing for checkin-kit.

This module is the **sole error boundary** for the entire application.
It catches :class:`~checkin_kit.exceptions.CheckinKitError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the core,
  config and infrastructure layers.
* Results go to stdout, diagnostics and errors to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import math
import sys

from checkin_kit.cli import exit_codes
from checkin_kit.cli.console import console, out
from checkin_kit.exceptions import CheckinKitError
from checkin_kit.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _non_negative_int(raw: str) -> int:
    """argparse type for ``--length``; rejects fractions and negatives."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``checkin-kit code``    — mint a secure check-in code
    * ``checkin-kit hash``    — normalise and hash an access code
    * ``checkin-kit layout``  — preview responsive values for a window
    * ``checkin-kit doctor``  — validate the environment
    """
    parser = argparse.ArgumentParser(
        prog="checkin-kit",
        description="Responsive layout values and secure check-in codes.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit log records as JSON lines.",
    )

    sub = parser.add_subparsers(dest="command")

    code = sub.add_parser("code", help="Generate a random check-in code.")
    code.add_argument(
        "-n",
        "--length",
        type=_non_negative_int,
        default=None,
        help="Number of characters (default: 6).",
    )
    code.add_argument(
        "--unbiased",
        action="store_true",
        help="Use rejection sampling for exactly uniform characters.",
    )
    code.add_argument(
        "--display",
        action="store_true",
        help="Print in hyphenated groups of four.",
    )

    hash_cmd = sub.add_parser("hash", help="Hash an access code with CODE_SALT.")
    hash_cmd.add_argument("code", help="Access code as typed by the user.")

    layout = sub.add_parser("layout", help="Preview responsive values for a window.")
    layout.add_argument("width", nargs="?", type=float, default=None)
    layout.add_argument("height", nargs="?", type=float, default=None)
    layout.add_argument(
        "--no-ipad-layout",
        action="store_true",
        help="Treat every device as a phone.",
    )

    sub.add_parser("doctor", help="Validate required environment variables.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_code(length: int | None, *, unbiased: bool, display: bool) -> int:
    """Print a freshly generated code to stdout."""
    from checkin_kit.core.code_generator import (
        DEFAULT_CODE_LENGTH,
        generate_code,
        generate_unbiased_code,
    )
    from checkin_kit.core.codes import format_code_for_display

    size = DEFAULT_CODE_LENGTH if length is None else length
    generator = generate_unbiased_code if unbiased else generate_code
    code = generator(size)
    out.print(format_code_for_display(code) if display else code)
    return exit_codes.SUCCESS


def _handle_hash(code: str) -> int:
    """Print the normalised code and its salted hash."""
    from checkin_kit.config.env import load_env_config
    from checkin_kit.core.codes import hash_code, normalize_code
    from checkin_kit.exceptions import EnvironmentCheckError, InvalidArgumentError

    config = load_env_config()
    if not config.code_salt:
        raise EnvironmentCheckError(
            "CODE_SALT is not set.",
            hint="Export CODE_SALT or add it to your .env file.",
        )

    normalized = normalize_code(code)
    if not normalized:
        raise InvalidArgumentError("Access code must not be empty.")

    out.print(normalized)
    out.print(hash_code(normalized, config.code_salt))
    return exit_codes.SUCCESS


def _handle_layout(
    width: float | None,
    height: float | None,
    *,
    ipad_layout_enabled: bool,
) -> int:
    """Show the classification and resolved values for a window."""
    from checkin_kit.cli.layout_preview import display_preview, prompt_preset
    from checkin_kit.exceptions import InvalidArgumentError
    from checkin_kit.infra.layout_source import DimensionsLayoutSource

    if width is None or height is None:
        if width is not None:
            raise InvalidArgumentError(
                "Both WIDTH and HEIGHT are required.",
                hint="e.g. checkin-kit layout 1024 768",
            )
        preset = prompt_preset()
        width, height = preset.width, preset.height

    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
        raise InvalidArgumentError(
            f"Window dimensions must be positive numbers, got {width} x {height}.",
        )

    source = DimensionsLayoutSource(
        width, height, ipad_layout_enabled=ipad_layout_enabled,
    )
    display_preview(source)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from checkin_kit.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the checkin-kit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    from checkin_kit.config.logging import configure_logging

    configure_logging(verbose=args.verbose, log_json=args.log_json)

    if args.command == "code":
        return _handle_code(args.length, unbiased=args.unbiased, display=args.display)
    if args.command == "hash":
        return _handle_hash(args.code)
    if args.command == "layout":
        return _handle_layout(
            args.width,
            args.height,
            ipad_layout_enabled=not args.no_ipad_layout,
        )
    return _handle_doctor()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CheckinKitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
