"""Tests for secure code generation (core/code_generator.py).

Deterministic byte sources are injected where exact output matters; the
real CSPRNG is used for the shape and uniqueness checks.

Coverage:
* Length, charset and default length.
* Zero, negative and non-integer lengths.
* One byte per character, mapped with ``b % 36``.
* The documented modulo bias for bytes 252-255.
* Byte-source failures propagate unchanged; short reads are rejected.
* The rejection-sampling variant.
"""

from __future__ import annotations

import re
from unittest.mock import patch

import pytest

from checkin_kit.core.code_generator import (
    CHARSET,
    DEFAULT_CODE_LENGTH,
    MAX_UNBIASED_DRAWS,
    UNBIASED_BYTE_LIMIT,
    SecretsRandomSource,
    generate_code,
    generate_unbiased_code,
)
from checkin_kit.exceptions import InvalidArgumentError, RandomSourceError

CODE_PATTERN = re.compile(r"^[A-Z0-9]*$")


# ---------------------------------------------------------------------------
# Charset
# ---------------------------------------------------------------------------

class TestCharset:
    def test_charset_layout(self) -> None:
        assert CHARSET == "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
        assert len(CHARSET) == 36

    def test_unbiased_limit(self) -> None:
        assert UNBIASED_BYTE_LIMIT == 252


# ---------------------------------------------------------------------------
# generate_code — shape
# ---------------------------------------------------------------------------

class TestGenerateCodeShape:
    def test_length_six_from_charset(self) -> None:
        for _ in range(50):
            code = generate_code(6)
            assert len(code) == 6
            assert CODE_PATTERN.match(code)

    def test_default_length(self) -> None:
        assert DEFAULT_CODE_LENGTH == 6
        assert len(generate_code()) == 6

    @pytest.mark.parametrize("length", [1, 12, 64])
    def test_requested_length(self, length: int) -> None:
        assert len(generate_code(length)) == length

    def test_zero_length_is_empty(self, scripted_source) -> None:
        source = scripted_source([])
        assert generate_code(0, source=source) == ""
        assert source.requests == []

    def test_independent_calls_differ(self) -> None:
        codes = {generate_code(12) for _ in range(100)}
        assert len(codes) == 100


# ---------------------------------------------------------------------------
# generate_code — argument validation
# ---------------------------------------------------------------------------

class TestGenerateCodeValidation:
    @pytest.mark.parametrize("length", [-1, -100])
    def test_negative_raises(self, length: int) -> None:
        with pytest.raises(InvalidArgumentError, match="negative"):
            generate_code(length)

    @pytest.mark.parametrize("length", [2.5, 6.0, "6", None, True])
    def test_non_integer_raises(self, length: object) -> None:
        with pytest.raises(InvalidArgumentError, match="integer"):
            generate_code(length)  # type: ignore[arg-type]

    def test_invalid_length_reads_no_bytes(self, scripted_source) -> None:
        source = scripted_source([])
        with pytest.raises(InvalidArgumentError):
            generate_code(-1, source=source)
        assert source.requests == []


# ---------------------------------------------------------------------------
# generate_code — byte mapping
# ---------------------------------------------------------------------------

class TestGenerateCodeMapping:
    def test_one_byte_per_character(self, scripted_source) -> None:
        source = scripted_source([bytes(8)])
        generate_code(8, source=source)
        assert source.requests == [8]

    def test_modulo_mapping(self, scripted_source) -> None:
        source = scripted_source([bytes([0, 25, 26, 35, 36, 251])])
        assert generate_code(6, source=source) == "AZ09A9"

    def test_known_modulo_bias(self, scripted_source) -> None:
        """Bytes 252-255 wrap onto A-D; this bias is accepted, not corrected."""
        source = scripted_source([bytes([252, 253, 254, 255])])
        assert generate_code(4, source=source) == "ABCD"

    def test_bias_distribution_over_all_bytes(self, scripted_source) -> None:
        source = scripted_source([bytes(range(256))])
        code = generate_code(256, source=source)
        counts = {ch: code.count(ch) for ch in CHARSET}
        assert {ch: counts[ch] for ch in "ABCD"} == {"A": 8, "B": 8, "C": 8, "D": 8}
        assert all(counts[ch] == 7 for ch in CHARSET[4:])

    def test_uses_secrets_by_default(self) -> None:
        with patch(
            "checkin_kit.core.code_generator.secrets.token_bytes",
            return_value=bytes([1, 2, 3]),
        ) as mock_token:
            assert generate_code(3) == "BCD"
        mock_token.assert_called_once_with(3)


# ---------------------------------------------------------------------------
# generate_code — byte-source failures
# ---------------------------------------------------------------------------

class TestGenerateCodeSourceFailures:
    def test_source_error_propagates_unchanged(self) -> None:
        class BrokenSource:
            def token_bytes(self, nbytes: int) -> bytes:
                raise OSError("entropy pool unavailable")

        with pytest.raises(OSError, match="entropy pool unavailable"):
            generate_code(6, source=BrokenSource())

    def test_secrets_failure_is_not_replaced(self) -> None:
        with patch(
            "checkin_kit.core.code_generator.secrets.token_bytes",
            side_effect=NotImplementedError("no CSPRNG"),
        ):
            with pytest.raises(NotImplementedError):
                generate_code(6)

    def test_short_read_raises(self, scripted_source) -> None:
        source = scripted_source([bytes(3)])
        with pytest.raises(RandomSourceError, match="3 bytes, expected 6"):
            generate_code(6, source=source)

    def test_long_read_raises(self, scripted_source) -> None:
        source = scripted_source([bytes(7)])
        with pytest.raises(RandomSourceError):
            generate_code(6, source=source)


# ---------------------------------------------------------------------------
# generate_unbiased_code
# ---------------------------------------------------------------------------

class TestGenerateUnbiasedCode:
    def test_redraws_high_bytes(self, scripted_source) -> None:
        source = scripted_source([bytes([252, 1]), bytes([255]), bytes([2])])
        assert generate_unbiased_code(2, source=source) == "BC"
        assert source.requests == [2, 1, 1]

    def test_accepts_limit_minus_one(self, scripted_source) -> None:
        source = scripted_source([bytes([251])])
        assert generate_unbiased_code(1, source=source) == "9"

    def test_shape_with_real_source(self) -> None:
        code = generate_unbiased_code(10)
        assert len(code) == 10
        assert CODE_PATTERN.match(code)

    def test_zero_length(self) -> None:
        assert generate_unbiased_code(0) == ""

    def test_validation_shared_with_generate_code(self) -> None:
        with pytest.raises(InvalidArgumentError):
            generate_unbiased_code(-3)

    def test_gives_up_on_source_without_usable_bytes(self) -> None:
        class HighBytesSource:
            def __init__(self) -> None:
                self.calls = 0

            def token_bytes(self, nbytes: int) -> bytes:
                self.calls += 1
                return bytes([255]) * nbytes

        source = HighBytesSource()
        with pytest.raises(RandomSourceError, match="usable"):
            generate_unbiased_code(4, source=source)
        assert source.calls == MAX_UNBIASED_DRAWS

    def test_fills_on_last_allowed_read(self, scripted_source) -> None:
        chunks = [bytes([252])] * (MAX_UNBIASED_DRAWS - 1) + [bytes([0])]
        source = scripted_source(chunks)
        assert generate_unbiased_code(1, source=source) == "A"
        assert len(source.requests) == MAX_UNBIASED_DRAWS


class TestSecretsRandomSource:
    def test_returns_requested_length(self) -> None:
        assert len(SecretsRandomSource().token_bytes(16)) == 16
