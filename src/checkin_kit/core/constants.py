"""Shared breakpoints, grid configuration and scale factors.

Pure constants for the responsive tablet layout.  Every per-device table
is total over :class:`DeviceType` so it can be passed straight to
:func:`~checkin_kit.core.responsive.resolve_scaled_value`.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from checkin_kit.core.models import DeviceType, Layout

TABLET_BREAKPOINT: int = 768
"""Either window side at or above this width (points) means tablet."""

GRID_COLUMNS: Mapping[Layout, int] = MappingProxyType({
    Layout.PHONE: 1,
    Layout.TABLET_PORTRAIT: 2,
    Layout.TABLET_LANDSCAPE: 4,
})
"""Attendee grid columns per layout."""

SPACING_SCALE: Mapping[DeviceType, float] = MappingProxyType({
    DeviceType.PHONE: 1.0,
    DeviceType.TABLET: 1.25,
})

FONT_SCALE: Mapping[DeviceType, float] = MappingProxyType({
    DeviceType.PHONE: 1.0,
    DeviceType.TABLET: 1.1,
})

TOUCH_TARGET: Mapping[DeviceType, int] = MappingProxyType({
    DeviceType.PHONE: 44,
    DeviceType.TABLET: 48,
})
"""Minimum touch target sizes in points (Apple HIG)."""

SWIPE_THRESHOLD: Mapping[DeviceType, int] = MappingProxyType({
    DeviceType.PHONE: 72,
    DeviceType.TABLET: 100,
})

MODAL_MAX_WIDTH: Mapping[DeviceType, int] = MappingProxyType({
    DeviceType.PHONE: 9999,  # unconstrained; screen width minus padding wins
    DeviceType.TABLET: 500,
})

DEFAULT_MODAL_PADDING: int = 48
"""Total horizontal modal padding (24 points per side)."""

CARD_MIN_HEIGHT: int = 120

CARD_PADDING: Mapping[DeviceType, int] = MappingProxyType({
    DeviceType.PHONE: 12,
    DeviceType.TABLET: 16,
})

CARD_GAP: Mapping[DeviceType, int] = MappingProxyType({
    DeviceType.PHONE: 8,
    DeviceType.TABLET: 12,
})
