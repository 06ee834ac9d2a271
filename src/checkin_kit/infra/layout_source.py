"""Window-dimension backed implementation of :class:`~checkin_kit.core.protocols.LayoutSource`.

The host (a window toolkit, a test, the CLI preview) pushes dimension
updates with :meth:`DimensionsLayoutSource.update`; subscribers are
notified only when the effective classification actually changes, e.g.
on rotation across the landscape boundary.
"""

from __future__ import annotations

import structlog

from checkin_kit.core.layout import describe_layout
from checkin_kit.core.models import DeviceLayout, DeviceType, Layout
from checkin_kit.core.protocols import LayoutListener, Unsubscribe

log = structlog.get_logger("checkin_kit.infra.layout_source")


class DimensionsLayoutSource:
    """Concrete :class:`LayoutSource` driven by ``(width, height)`` updates.

    Usage::

        source = DimensionsLayoutSource(390, 844)
        service = ResponsiveService(source)
        source.update(1024, 768)  # rotate / resize

    This class satisfies the :class:`~checkin_kit.core.protocols.LayoutSource`
    protocol structurally, without explicit inheritance.
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        ipad_layout_enabled: bool = True,
    ) -> None:
        self._ipad_layout_enabled: bool = ipad_layout_enabled
        self._snapshot: DeviceLayout = describe_layout(
            width, height, ipad_layout_enabled=ipad_layout_enabled,
        )
        self._listeners: list[LayoutListener] = []

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def current_layout(self) -> Layout:
        return self._snapshot.layout

    def current_device_type(self) -> DeviceType:
        return self._snapshot.device_type

    def subscribe(self, listener: LayoutListener) -> Unsubscribe:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Host-facing API
    # ------------------------------------------------------------------

    @property
    def snapshot(self) -> DeviceLayout:
        """Full classification for the most recent dimensions."""
        return self._snapshot

    @property
    def ipad_layout_enabled(self) -> bool:
        return self._ipad_layout_enabled

    def update(self, width: float, height: float) -> None:
        """Record new window dimensions."""
        self._apply(describe_layout(
            width, height, ipad_layout_enabled=self._ipad_layout_enabled,
        ))

    def set_ipad_layout_enabled(self, enabled: bool) -> None:
        """Toggle the iPad layout feature flag and reclassify."""
        self._ipad_layout_enabled = enabled
        self.update(self._snapshot.width, self._snapshot.height)

    def _apply(self, snapshot: DeviceLayout) -> None:
        previous = self._snapshot
        self._snapshot = snapshot

        if (previous.layout, previous.device_type) == (snapshot.layout, snapshot.device_type):
            return

        log.debug(
            "layout changed",
            previous=previous.layout.value,
            current=snapshot.layout.value,
            width=snapshot.width,
            height=snapshot.height,
        )
        # Copy so listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(snapshot.layout, snapshot.device_type)
