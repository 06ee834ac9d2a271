"""``checkin-kit doctor`` — environment diagnostics command.

Validates the ``EXPO_PUBLIC_*`` variables the app needs and renders a
Rich table of the results.  Missing variables are reported, never
raised; the command's exit code carries the verdict.
"""

from __future__ import annotations

import os
import platform
import sys
from collections.abc import Mapping

from checkin_kit.cli import exit_codes
from checkin_kit.cli.console import console
from checkin_kit.config.env import REQUIRED_ENV_VARS, load_env_config, validate_env
from checkin_kit.version import __version__

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _checkin_kit_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the checkin-kit version row."""
    return "checkin-kit", __version__, OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _env_var_checks(environ: Mapping[str, str]) -> list[tuple[str, str, str]]:
    """Return one row per required variable."""
    missing = set(validate_env(environ, quiet=True))
    return [
        (key, "missing" if key in missing else "set", FAIL if key in missing else OK)
        for key in REQUIRED_ENV_VARS
    ]


def _code_salt_check(environ: Mapping[str, str]) -> tuple[str, str, str]:
    """CODE_SALT is only needed by ``checkin-kit hash``, so it only warns."""
    config = load_env_config(environ)
    if config.code_salt:
        return "CODE_SALT", "set", OK
    return "CODE_SALT", "missing", WARN


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ncheckin-kit doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Check':<32} {'Value':<16} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<32} {value:<16} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(environ: Mapping[str, str] | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Parameters
    ----------
    environ:
        Mapping to validate.  ``None`` reads ``.env`` and ``os.environ``.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    if environ is None:
        load_env_config()  # seeds os.environ from .env
        environ = os.environ

    checks = [
        _checkin_kit_version_check(),
        _python_version_check(),
        *_env_var_checks(environ),
        _code_salt_check(environ),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        summary = "Some checks failed." if has_failure else "All checks passed."
        print(summary, file=sys.stderr)
    else:
        table = Table(
            title="checkin-kit doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Check", style="bold", min_width=12)
        table.add_column("Value", min_width=10)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
