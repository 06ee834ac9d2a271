"""Interactive layout preview for the CLI layer.

This module is responsible for:

* Prompting for a device preset via questionary arrow keys when no
  dimensions were given on the command line.
* Rendering a Rich table with the classification and every responsive
  value the app derives from it.

All display-related logic lives here; resolution itself is delegated
to :class:`~checkin_kit.core.responsive_service.ResponsiveService`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from checkin_kit.cli.console import console
from checkin_kit.core.constants import (
    CARD_GAP,
    CARD_PADDING,
    FONT_SCALE,
    SPACING_SCALE,
    SWIPE_THRESHOLD,
    TOUCH_TARGET,
)
from checkin_kit.core.layout import modal_width
from checkin_kit.core.models import DeviceLayout, ResponsiveValues
from checkin_kit.core.responsive_service import ResponsiveService
from checkin_kit.exceptions import InvalidArgumentError, MissingDependencyError
from checkin_kit.infra.layout_source import DimensionsLayoutSource


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for layout rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DevicePreset:
    label: str
    width: int
    height: int


# Tall phones such as the iPhone 15 (393 x 852) reach the breakpoint on
# height alone and classify as tablets, so the phone presets stay under it.
PRESETS: tuple[DevicePreset, ...] = (
    DevicePreset("iPhone SE (portrait)", 375, 667),
    DevicePreset("iPhone SE (landscape)", 667, 375),
    DevicePreset("iPad 10th gen (portrait)", 820, 1180),
    DevicePreset("iPad 10th gen (landscape)", 1180, 820),
    DevicePreset("iPad Pro 12.9\" (landscape)", 1366, 1024),
)

# Sample per-layout configuration mirroring the attendee list screen.
HEADER_TITLE = ResponsiveValues(
    phone="Attendees",
    tablet="Attendee roster",
    tablet_landscape="Attendee roster (grid)",
)


# ---------------------------------------------------------------------------
# Pure presentation helpers
# ---------------------------------------------------------------------------

def _format_number(value: float) -> str:
    """Render whole numbers without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def build_preview_rows(
    source: DimensionsLayoutSource,
    *,
    base_spacing: float = 16,
    base_font: float = 16,
) -> list[tuple[str, str]]:
    """Return ``(label, value)`` rows describing *source*'s current layout."""
    snapshot: DeviceLayout = source.snapshot
    service = ResponsiveService(source)

    return [
        ("Dimensions", f"{_format_number(snapshot.width)} x {_format_number(snapshot.height)}"),
        ("Device type", snapshot.device_type.value),
        ("Orientation", snapshot.orientation.value),
        ("Layout", snapshot.layout.value),
        ("iPad layout", "enabled" if snapshot.ipad_layout_enabled else "disabled"),
        ("Grid columns", str(snapshot.columns)),
        ("Header title", service.value(HEADER_TITLE)),
        ("Spacing", _format_number(service.scaled(base_spacing, SPACING_SCALE))),
        ("Font size", _format_number(service.scaled(base_font, FONT_SCALE))),
        ("Touch target", _format_number(service.scaled(1, TOUCH_TARGET))),
        ("Swipe threshold", _format_number(service.scaled(1, SWIPE_THRESHOLD))),
        ("Card padding", _format_number(service.scaled(1, CARD_PADDING))),
        ("Card gap", _format_number(service.scaled(1, CARD_GAP))),
        (
            "Modal width",
            _format_number(modal_width(snapshot.width, snapshot.device_type)),
        ),
    ]


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def display_preview(source: DimensionsLayoutSource) -> None:
    """Print a Rich table summarising the current layout of *source*."""
    table_class = _import_rich_table()

    table = table_class(
        title="Layout preview",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Property", style="bold", min_width=14)
    table.add_column("Value", min_width=20)

    for label, value in build_preview_rows(source):
        table.add_row(label, value)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_preset() -> DevicePreset:
    """Prompt the user to pick one of :data:`PRESETS`.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C during selection.
    InvalidArgumentError
        If the user cancels the prompt (Esc / None return).
    """
    questionary = _import_questionary()

    choices = [
        questionary.Choice(
            title=f"{preset.label:<28} {preset.width} x {preset.height}",
            value=preset,
        )
        for preset in PRESETS
    ]

    selected: DevicePreset | None = questionary.select(
        "Select a device to preview:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if selected is None:
        raise InvalidArgumentError(
            "No device selected.",
            hint="Pass WIDTH HEIGHT explicitly, e.g. checkin-kit layout 1024 768",
        )

    return selected
