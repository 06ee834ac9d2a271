"""Domain models for checkin-kit.

All models are **frozen** dataclasses or string enums: immutable value
objects with no behaviour beyond data access.  They carry zero I/O and
must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Classification enums
# ---------------------------------------------------------------------------

class Layout(str, Enum):
    """Device/viewport shape category.

    Using ``str`` as a base lets a raw ``"tablet-portrait"`` compare equal
    to the member, which keeps values coming from outside the enum usable.
    """

    PHONE = "phone"
    TABLET_PORTRAIT = "tablet-portrait"
    TABLET_LANDSCAPE = "tablet-landscape"


class DeviceType(str, Enum):
    """Coarse device category used for scaling."""

    PHONE = "phone"
    TABLET = "tablet"


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


# ---------------------------------------------------------------------------
# Responsive configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResponsiveValues(Generic[T]):
    """Per-layout configuration for a single responsive value.

    ``phone`` is mandatory and acts as the universal fallback.  The three
    tablet fields are independent overrides; ``None`` means "not set".
    """

    phone: T
    """Value used on phones and whenever no tablet override applies."""

    tablet_portrait: T | None = None
    """Override for tablets held in portrait."""

    tablet_landscape: T | None = None
    """Override for tablets held in landscape."""

    tablet: T | None = None
    """Shared fallback for both tablet orientations."""


# ---------------------------------------------------------------------------
# Classifier output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DeviceLayout:
    """Snapshot of the current device classification.

    ``device_type`` and ``layout`` are the *effective* values: when the
    iPad layout flag is off they are forced to phone while
    ``orientation`` still reflects the real window shape.
    """

    device_type: DeviceType
    orientation: Orientation
    layout: Layout
    width: float
    height: float
    columns: int
    """Attendee grid column count for ``layout``."""

    ipad_layout_enabled: bool = True

    @property
    def is_tablet(self) -> bool:
        return self.device_type is DeviceType.TABLET

    @property
    def is_landscape(self) -> bool:
        return self.orientation is Orientation.LANDSCAPE
