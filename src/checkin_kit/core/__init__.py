"""Core layer — pure resolution and code-generation logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``, ``config`` or ``infra``.
* All functions are fully typed and side-effect free (apart from
  reading the secure random source).
"""

from checkin_kit.core.code_generator import (
    CHARSET,
    DEFAULT_CODE_LENGTH,
    generate_code,
    generate_unbiased_code,
)
from checkin_kit.core.codes import format_code_for_display, hash_code, normalize_code
from checkin_kit.core.layout import classify_dimensions, describe_layout, modal_width
from checkin_kit.core.models import (
    DeviceLayout,
    DeviceType,
    Layout,
    Orientation,
    ResponsiveValues,
)
from checkin_kit.core.protocols import LayoutSource, RandomSource
from checkin_kit.core.responsive import resolve_responsive_value, resolve_scaled_value
from checkin_kit.core.responsive_service import ResponsiveService

__all__: list[str] = [
    "CHARSET",
    "DEFAULT_CODE_LENGTH",
    "DeviceLayout",
    "DeviceType",
    "Layout",
    "LayoutSource",
    "Orientation",
    "RandomSource",
    "ResponsiveService",
    "ResponsiveValues",
    "classify_dimensions",
    "describe_layout",
    "format_code_for_display",
    "generate_code",
    "generate_unbiased_code",
    "hash_code",
    "modal_width",
    "normalize_code",
    "resolve_responsive_value",
    "resolve_scaled_value",
]
