"""Infrastructure layer — adapters for external collaborators.

Modules here satisfy the protocols declared in
:mod:`checkin_kit.core.protocols` and may hold state; the core never
imports from this package.
"""

from checkin_kit.infra.layout_source import DimensionsLayoutSource

__all__: list[str] = [
    "DimensionsLayoutSource",
]
