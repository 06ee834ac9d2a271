"""Tests for access-code helpers (core/codes.py)."""

from __future__ import annotations

import hashlib

import pytest

from checkin_kit.core.codes import format_code_for_display, hash_code, normalize_code
from checkin_kit.exceptions import ConfigurationError


class TestNormalizeCode:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("ab12cd", "AB12CD"),
            ("ab12-cd", "AB12CD"),
            ("  ab 12\tcd\n", "AB12CD"),
            ("AB--12 - CD", "AB12CD"),
            ("", ""),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_code(raw) == expected


class TestFormatCodeForDisplay:
    def test_groups_of_four(self) -> None:
        assert format_code_for_display("abcdefghij") == "ABCD-EFGH-IJ"

    def test_reformats_existing_hyphens(self) -> None:
        assert format_code_for_display("ab-cd ef-gh") == "ABCD-EFGH"

    def test_short_code_unchanged(self) -> None:
        assert format_code_for_display("q2x") == "Q2X"

    def test_empty(self) -> None:
        assert format_code_for_display("") == ""


class TestHashCode:
    def test_matches_salted_sha256(self) -> None:
        expected = hashlib.sha256(b"pepper|AB12CD").hexdigest()
        assert hash_code("AB12CD", "pepper") == expected

    def test_spelling_insensitive(self) -> None:
        assert hash_code("ab12-cd", "pepper") == hash_code("AB12CD", "pepper")

    def test_salt_changes_hash(self) -> None:
        assert hash_code("AB12CD", "a") != hash_code("AB12CD", "b")

    def test_empty_salt_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="salt") as exc_info:
            hash_code("AB12CD", "")
        assert exc_info.value.hint is not None
        assert "CODE_SALT" in exc_info.value.hint
