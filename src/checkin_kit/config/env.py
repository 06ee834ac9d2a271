"""Environment configuration and validation.

Values come from the process environment, optionally seeded from a
``.env`` file via python-dotenv (existing variables always win).  Each
setting accepts the ``EXPO_PUBLIC_*`` name used by the mobile build and
a bare fallback name.

Validation only reports: missing variables are logged as warnings and
returned to the caller, never raised.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import structlog
from dotenv import find_dotenv, load_dotenv

log = structlog.get_logger("checkin_kit.config.env")

REQUIRED_ENV_VARS: tuple[str, ...] = (
    "EXPO_PUBLIC_SUPABASE_URL",
    "EXPO_PUBLIC_SUPABASE_ANON_KEY",
    "EXPO_PUBLIC_REDIRECT_URL",
    "EXPO_PUBLIC_ENV",
)

DEFAULT_ENVIRONMENT = "development"


@dataclass(frozen=True, slots=True)
class EnvConfig:
    """Resolved application settings.  Empty string means unset."""

    supabase_url: str = ""
    supabase_anon_key: str = ""
    redirect_url: str = ""
    environment: str = DEFAULT_ENVIRONMENT
    code_salt: str = ""


def _first(environ: Mapping[str, str], *keys: str, default: str = "") -> str:
    for key in keys:
        value = environ.get(key, "")
        if value.strip():
            return value.strip()
    return default


def load_env_config(
    environ: Mapping[str, str] | None = None,
    *,
    dotenv_path: str | Path | None = None,
) -> EnvConfig:
    """Build an :class:`EnvConfig`.

    When *environ* is ``None`` the ``.env`` file (or *dotenv_path*) is
    loaded into ``os.environ`` first and ``os.environ`` is read.  An
    explicit *environ* mapping is read as-is, with no file access.
    """
    if environ is None:
        load_dotenv(
            dotenv_path=dotenv_path or find_dotenv(usecwd=True),
            override=False,
        )
        environ = os.environ

    return EnvConfig(
        supabase_url=_first(environ, "EXPO_PUBLIC_SUPABASE_URL", "SUPABASE_URL"),
        supabase_anon_key=_first(
            environ, "EXPO_PUBLIC_SUPABASE_ANON_KEY", "SUPABASE_ANON_KEY",
        ),
        redirect_url=_first(environ, "EXPO_PUBLIC_REDIRECT_URL", "REDIRECT_URL"),
        environment=_first(
            environ, "EXPO_PUBLIC_ENV", "ENVIRONMENT", default=DEFAULT_ENVIRONMENT,
        ),
        code_salt=_first(environ, "CODE_SALT"),
    )


def validate_env(
    environ: Mapping[str, str] | None = None,
    *,
    quiet: bool = False,
) -> tuple[str, ...]:
    """Check that every :data:`REQUIRED_ENV_VARS` entry is set.

    Blank and whitespace-only values count as missing.  Each missing
    variable is logged as a warning unless *quiet* is set, for callers
    that report the result themselves.

    Returns
    -------
    tuple[str, ...]
        Missing variable names, in declaration order.  Empty when the
        environment is complete.
    """
    if environ is None:
        environ = os.environ

    missing = tuple(
        key for key in REQUIRED_ENV_VARS if not environ.get(key, "").strip()
    )
    if quiet:
        return missing
    for key in missing:
        log.warning("missing environment variable", key=key)
    if not missing:
        log.info("environment variables validated")
    return missing
