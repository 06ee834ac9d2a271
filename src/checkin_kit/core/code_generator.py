"""Secure check-in code generation.

Codes are drawn from :data:`CHARSET` using one cryptographically secure
random byte per output character.  The call is synchronous: the default
byte source is :func:`secrets.token_bytes`, which never blocks for an
unbounded time on supported platforms.

Known bias
----------
:func:`generate_code` maps each byte with ``b % 36``.  Because
``256 % 36 == 4``, byte values 252-255 land on indices 0-3 (``A``-``D``)
a fifth time, so those four characters are drawn with probability
8/256 instead of 7/256.  This is accepted for check-in codes.
:func:`generate_unbiased_code` is the explicit rejection-sampling
alternative for callers that need exact uniformity.

Failures of the byte source propagate unchanged; there is no fallback
to :mod:`random` or any other non-secure generator.
"""

from __future__ import annotations

import secrets

from checkin_kit.core.protocols import RandomSource
from checkin_kit.exceptions import InvalidArgumentError, RandomSourceError

CHARSET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
"""Uppercase Latin letters followed by decimal digits, indices 0-35."""

DEFAULT_CODE_LENGTH: int = 6

UNBIASED_BYTE_LIMIT: int = 256 - (256 % len(CHARSET))
"""Bytes at or above this value (252) are redrawn by the unbiased variant."""

MAX_UNBIASED_DRAWS: int = 32
"""Reads the unbiased variant makes before giving up on a source."""


class SecretsRandomSource:
    """:class:`RandomSource` backed by the operating system CSPRNG."""

    def token_bytes(self, nbytes: int) -> bytes:
        return secrets.token_bytes(nbytes)


_SYSTEM_SOURCE: RandomSource = SecretsRandomSource()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_code(
    length: int = DEFAULT_CODE_LENGTH,
    *,
    source: RandomSource | None = None,
) -> str:
    """Generate a random uppercase alphanumeric code.

    Parameters
    ----------
    length:
        Number of characters.  ``0`` yields ``""``.
    source:
        Byte source; defaults to the system CSPRNG.

    Raises
    ------
    InvalidArgumentError
        If *length* is negative or not an ``int``.
    RandomSourceError
        If *source* returns a different number of bytes than requested.
    """
    _validate_length(length)
    if length == 0:
        return ""

    data = _read_exact(source or _SYSTEM_SOURCE, length)
    return "".join(CHARSET[b % len(CHARSET)] for b in data)


def generate_unbiased_code(
    length: int = DEFAULT_CODE_LENGTH,
    *,
    source: RandomSource | None = None,
) -> str:
    """Generate a code with exactly uniform characters.

    Same contract as :func:`generate_code`, except that bytes at or
    above :data:`UNBIASED_BYTE_LIMIT` are discarded and redrawn.  More
    than *length* bytes may therefore be consumed from *source*.

    Raises
    ------
    RandomSourceError
        If *source* is still short of usable bytes after
        :data:`MAX_UNBIASED_DRAWS` reads.
    """
    _validate_length(length)
    rng = source or _SYSTEM_SOURCE

    chars: list[str] = []
    for _ in range(MAX_UNBIASED_DRAWS):
        if len(chars) == length:
            break
        for b in _read_exact(rng, length - len(chars)):
            if b < UNBIASED_BYTE_LIMIT:
                chars.append(CHARSET[b % len(CHARSET)])
    if len(chars) < length:
        raise RandomSourceError(
            f"Random source produced only {len(chars)} of {length} usable "
            f"bytes after {MAX_UNBIASED_DRAWS} reads.",
        )
    return "".join(chars)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _validate_length(length: object) -> None:
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentError(
            f"Code length must be an integer, got {type(length).__name__}.",
            hint="Pass a whole number of characters, e.g. 6.",
        )
    if length < 0:
        raise InvalidArgumentError(
            f"Code length must not be negative, got {length}.",
        )


def _read_exact(source: RandomSource, nbytes: int) -> bytes:
    data = source.token_bytes(nbytes)
    if len(data) != nbytes:
        raise RandomSourceError(
            f"Random source returned {len(data)} bytes, expected {nbytes}.",
        )
    return data
