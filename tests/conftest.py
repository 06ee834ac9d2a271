"""Shared pytest fixtures and configuration for the checkin-kit test suite.

Guidelines
----------
* No network access in any test.
* Core tests are pure and use the fakes below instead of real devices
  or the OS random source where determinism matters.
* Tests must not depend on the developer's environment variables.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator, Iterable
from pathlib import Path

import pytest

from checkin_kit.config.env import REQUIRED_ENV_VARS
from checkin_kit.config.logging import LOGGER_NAME
from checkin_kit.core.models import DeviceType, Layout
from checkin_kit.core.protocols import LayoutListener, Unsubscribe


class FakeLayoutSource:
    """In-memory :class:`LayoutSource` the test drives by hand."""

    def __init__(
        self,
        layout: Layout | str = Layout.PHONE,
        device_type: DeviceType | str = DeviceType.PHONE,
    ) -> None:
        self.layout = layout
        self.device_type = device_type
        self.listeners: list[LayoutListener] = []
        self.reads = 0

    def current_layout(self) -> Layout:
        self.reads += 1
        return self.layout  # type: ignore[return-value]

    def current_device_type(self) -> DeviceType:
        self.reads += 1
        return self.device_type  # type: ignore[return-value]

    def subscribe(self, listener: LayoutListener) -> Unsubscribe:
        self.listeners.append(listener)
        return lambda: self.listeners.remove(listener) if listener in self.listeners else None

    def emit(self, layout: Layout, device_type: DeviceType) -> None:
        self.layout, self.device_type = layout, device_type
        for listener in list(self.listeners):
            listener(layout, device_type)


class ScriptedRandomSource:
    """:class:`RandomSource` replaying pre-set chunks and recording requests."""

    def __init__(self, chunks: Iterable[bytes]) -> None:
        self._chunks = list(chunks)
        self.requests: list[int] = []

    def token_bytes(self, nbytes: int) -> bytes:
        self.requests.append(nbytes)
        return self._chunks.pop(0)


@pytest.fixture
def fake_layout_source() -> FakeLayoutSource:
    return FakeLayoutSource()


@pytest.fixture
def scripted_source() -> type[ScriptedRandomSource]:
    """Factory returning :class:`ScriptedRandomSource` for per-test chunks."""
    return ScriptedRandomSource


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Give the test a private ``os.environ`` without app variables.

    python-dotenv writes straight into ``os.environ``, so the whole mapping
    is swapped for a copy rather than patching individual keys.  The test
    also runs from an empty directory so no stray ``.env`` is found.
    """
    environ = os.environ.copy()
    for key in (*REQUIRED_ENV_VARS, "SUPABASE_URL", "SUPABASE_ANON_KEY",
                "REDIRECT_URL", "ENVIRONMENT", "CODE_SALT"):
        environ.pop(key, None)
    monkeypatch.setattr(os, "environ", environ)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def full_env() -> dict[str, str]:
    return {
        "EXPO_PUBLIC_SUPABASE_URL": "https://example.supabase.co",
        "EXPO_PUBLIC_SUPABASE_ANON_KEY": "anon-key",
        "EXPO_PUBLIC_REDIRECT_URL": "checkin://auth/callback",
        "EXPO_PUBLIC_ENV": "staging",
        "CODE_SALT": "pepper",
    }


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """``main`` and ``configure_logging`` rewire stdlib logging; undo it."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_logger = logging.getLogger(LOGGER_NAME)
    app_level = app_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app_logger.setLevel(app_level)
