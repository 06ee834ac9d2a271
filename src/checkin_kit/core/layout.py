"""Device layout classification from window dimensions.

Pure functions only.  Live tracking of dimension changes lives in
:mod:`checkin_kit.infra.layout_source`; this module just answers "what
is this window?" for one ``(width, height)`` pair.
"""

from __future__ import annotations

from checkin_kit.core.constants import (
    DEFAULT_MODAL_PADDING,
    GRID_COLUMNS,
    MODAL_MAX_WIDTH,
    TABLET_BREAKPOINT,
)
from checkin_kit.core.models import DeviceLayout, DeviceType, Layout, Orientation
from checkin_kit.core.responsive import lookup_device_entry


def classify_dimensions(
    width: float,
    height: float,
) -> tuple[DeviceType, Orientation, Layout]:
    """Classify a window by its dimensions.

    A window is a tablet when *either* side reaches
    :data:`TABLET_BREAKPOINT`, and landscape when strictly wider than
    tall (a square window is portrait).
    """
    is_tablet = width >= TABLET_BREAKPOINT or height >= TABLET_BREAKPOINT
    is_landscape = width > height

    device_type = DeviceType.TABLET if is_tablet else DeviceType.PHONE
    orientation = Orientation.LANDSCAPE if is_landscape else Orientation.PORTRAIT

    if not is_tablet:
        layout = Layout.PHONE
    elif is_landscape:
        layout = Layout.TABLET_LANDSCAPE
    else:
        layout = Layout.TABLET_PORTRAIT

    return device_type, orientation, layout


def describe_layout(
    width: float,
    height: float,
    *,
    ipad_layout_enabled: bool = True,
) -> DeviceLayout:
    """Build a full :class:`DeviceLayout` snapshot for a window.

    With *ipad_layout_enabled* off every device is treated as a phone;
    the orientation still tracks the real window shape.
    """
    device_type, orientation, layout = classify_dimensions(width, height)

    if not ipad_layout_enabled:
        device_type = DeviceType.PHONE
        layout = Layout.PHONE

    return DeviceLayout(
        device_type=device_type,
        orientation=orientation,
        layout=layout,
        width=width,
        height=height,
        columns=GRID_COLUMNS[layout],
        ipad_layout_enabled=ipad_layout_enabled,
    )


def modal_width(
    width: float,
    device_type: DeviceType | str,
    horizontal_padding: float = DEFAULT_MODAL_PADDING,
) -> float:
    """Return the modal width for a window of *width* points.

    Phones use the full width minus padding; tablets are additionally
    capped at :data:`MODAL_MAX_WIDTH`.

    Raises
    ------
    ConfigurationError
        If *device_type* has no max-width entry.
    """
    max_width = lookup_device_entry(MODAL_MAX_WIDTH, device_type, "modal max width")
    return min(width - horizontal_padding, max_width)
