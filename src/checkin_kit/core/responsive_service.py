"""Reactive responsive resolution bound to a live layout source.

This is the reactive counterpart of :mod:`checkin_kit.core.responsive`.
It depends on a :class:`~checkin_kit.core.protocols.LayoutSource`
injected at construction time (dependency inversion), keeping the core
free of any platform imports.

Guarantees
----------
* The classification is re-read on every call and never cached.
* Resolution semantics are exactly those of the pure functions.
* Errors from the pure functions propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TypeVar

from checkin_kit.core.models import DeviceType, Layout, ResponsiveValues
from checkin_kit.core.protocols import LayoutSource, Unsubscribe
from checkin_kit.core.responsive import resolve_responsive_value, resolve_scaled_value

T = TypeVar("T")


class ResponsiveService:
    """Thin wrapper that resolves values against the *current* layout.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`LayoutSource` protocol.
    """

    def __init__(self, source: LayoutSource) -> None:
        self._source: LayoutSource = source

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def value(self, values: ResponsiveValues[T]) -> T:
        """Resolve *values* for the layout reported right now."""
        return resolve_responsive_value(values, self._source.current_layout())

    def scaled(
        self,
        base_value: float,
        scale_by_device_type: Mapping[DeviceType, float],
    ) -> float:
        """Scale *base_value* by the factor for the current device type.

        Raises
        ------
        ConfigurationError
            If the current device type has no scale factor.
        """
        return resolve_scaled_value(
            base_value,
            scale_by_device_type,
            self._source.current_device_type(),
        )

    def watch(
        self,
        values: ResponsiveValues[T],
        callback: Callable[[T], None],
    ) -> Unsubscribe:
        """Push a freshly resolved value to *callback* on every change.

        The callback is not invoked for the current layout; call
        :meth:`value` for the initial value.

        Returns
        -------
        Unsubscribe
            Callable that stops further notifications.
        """

        def _on_change(layout: Layout, _device_type: DeviceType) -> None:
            callback(resolve_responsive_value(values, layout))

        return self._source.subscribe(_on_change)
