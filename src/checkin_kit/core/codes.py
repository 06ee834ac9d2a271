"""Access-code normalisation, display formatting and hashing.

Users type codes with arbitrary case, spaces and hyphens; everything is
reduced to the canonical uppercase form before it is compared or hashed.
"""

from __future__ import annotations

import hashlib
import re

from checkin_kit.exceptions import ConfigurationError

DISPLAY_GROUP_SIZE: int = 4

_SEPARATORS = re.compile(r"[\s-]+")


def normalize_code(code: str) -> str:
    """Uppercase *code* and strip whitespace and hyphens."""
    return _SEPARATORS.sub("", code.upper())


def format_code_for_display(code: str) -> str:
    """Render *code* in hyphenated groups of four (``ABCD-EFGH-IJ``)."""
    clean = normalize_code(code)
    return "-".join(
        clean[i:i + DISPLAY_GROUP_SIZE]
        for i in range(0, len(clean), DISPLAY_GROUP_SIZE)
    )


def hash_code(code: str, salt: str) -> str:
    """Return the salted SHA-256 hex digest stored for *code*.

    The digest covers ``"{salt}|{normalized}"``, so any spelling of the
    same code hashes identically.

    Raises
    ------
    ConfigurationError
        If *salt* is empty.
    """
    if not salt:
        raise ConfigurationError(
            "A code salt is required to hash access codes.",
            hint="Set CODE_SALT in the environment or .env file.",
        )
    payload = f"{salt}|{normalize_code(code)}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
