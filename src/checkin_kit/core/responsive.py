"""Pure responsive value resolution.

Every function in this module is a **pure** transformation with no I/O,
no side effects, no memoisation, and trivially unit-testable.  This is
the canonical algorithm; :class:`~checkin_kit.core.responsive_service.ResponsiveService`
only re-reads a live layout source and delegates here.

Fallback chains (most specific first, always ending at ``phone``):

* ``tablet-landscape`` → ``tablet_landscape`` → ``tablet`` → ``phone``
* ``tablet-portrait``  → ``tablet_portrait``  → ``tablet`` → ``phone``
* anything else        → ``phone``
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from checkin_kit.core.models import DeviceType, Layout, ResponsiveValues
from checkin_kit.exceptions import ConfigurationError, missing_key_hint

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Fallback chains
# ---------------------------------------------------------------------------

PHONE_CHAIN: tuple[str, ...] = ("phone",)

FALLBACK_CHAINS: Mapping[Layout, tuple[str, ...]] = {
    Layout.TABLET_LANDSCAPE: ("tablet_landscape", "tablet", "phone"),
    Layout.TABLET_PORTRAIT: ("tablet_portrait", "tablet", "phone"),
    Layout.PHONE: PHONE_CHAIN,
}
"""Field names tried in order for each layout."""


def fallback_chain(layout: Layout | str) -> tuple[str, ...]:
    """Return the ordered field names consulted for *layout*.

    Unrecognised layouts get the phone chain.
    """
    try:
        key = Layout(layout)
    except ValueError:
        return PHONE_CHAIN
    return FALLBACK_CHAINS.get(key, PHONE_CHAIN)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def resolve_responsive_value(
    values: ResponsiveValues[T],
    layout: Layout | str,
) -> T:
    """Pick the value that applies to *layout*.

    Walks :func:`fallback_chain` and returns the first field that is not
    ``None``.  Total: ``phone`` is mandatory, so a value is always found.
    """
    for field_name in fallback_chain(layout):
        candidate = getattr(values, field_name)
        if candidate is not None:
            return candidate
    return values.phone


def resolve_scaled_value(
    base_value: float,
    scale_by_device_type: Mapping[DeviceType, float],
    device_type: DeviceType | str,
) -> float:
    """Return ``base_value * scale_by_device_type[device_type]``.

    Raises
    ------
    ConfigurationError
        If *device_type* has no scale factor.  No default is assumed.
    """
    factor = lookup_device_entry(scale_by_device_type, device_type, "scale factor")
    return base_value * factor


def lookup_device_entry(
    table: Mapping[DeviceType, T],
    device_type: DeviceType | str,
    what: str,
) -> T:
    """Fetch *device_type* from a per-device *table* or raise.

    Tables keyed by :class:`DeviceType` members and tables keyed by
    plain strings (``{"phone": 1, "tablet": 1.5}``) are both accepted.
    Enum members hash by name, so each spelling is tried explicitly.
    """
    candidates: list[object] = [device_type]
    try:
        member = DeviceType(device_type)
    except ValueError:
        pass
    else:
        candidates.extend((member, member.value))

    for key in candidates:
        if key in table:
            return table[key]  # type: ignore[index]

    label = getattr(device_type, "value", device_type)
    defined = ", ".join(sorted(str(getattr(k, "value", k)) for k in table))
    raise ConfigurationError(
        f"Missing {what} for device type '{label}'.",
        hint=missing_key_hint(label, defined or "none"),
    )
