"""Configuration layer — environment settings and logging setup.

Importable by ``cli`` and ``infra``; never imported by ``core``.
"""

from checkin_kit.config.env import (
    REQUIRED_ENV_VARS,
    EnvConfig,
    load_env_config,
    validate_env,
)
from checkin_kit.config.logging import configure_logging

__all__: list[str] = [
    "REQUIRED_ENV_VARS",
    "EnvConfig",
    "configure_logging",
    "load_env_config",
    "validate_env",
]
