"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, so resolution logic can be tested without any
platform or device simulation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from checkin_kit.core.models import DeviceType, Layout

LayoutListener = Callable[[Layout, DeviceType], None]
"""Callback invoked with the new ``(layout, device_type)`` after a change."""

Unsubscribe = Callable[[], None]


class LayoutSource(Protocol):
    """Contract for a live device-layout classifier.

    Any object implementing these three methods satisfies the protocol
    structurally (no explicit inheritance required).  The core only ever
    reads from it.
    """

    def current_layout(self) -> Layout:
        """Return the layout classification as of this call."""
        ...  # pragma: no cover

    def current_device_type(self) -> DeviceType:
        """Return the device type as of this call."""
        ...  # pragma: no cover

    def subscribe(self, listener: LayoutListener) -> Unsubscribe:
        """Register *listener* for classification changes.

        Returns
        -------
        Unsubscribe
            Zero-argument callable that detaches *listener*.  Calling it
            more than once must be harmless.
        """
        ...  # pragma: no cover


class RandomSource(Protocol):
    """Contract for a cryptographically secure byte source.

    No seeding and no determinism are assumed.  Implementations must
    raise on failure rather than degrade to a non-secure generator.
    """

    def token_bytes(self, nbytes: int) -> bytes:
        """Return exactly *nbytes* secure random bytes."""
        ...  # pragma: no cover
