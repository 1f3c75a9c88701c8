"""Tests for Kubernetes quantity parsing."""

from __future__ import annotations

import pytest

from kubeinspect.errors import QuantityParseError
from kubeinspect.utils.resource_parser import parse_optional_quantity, parse_quantity


class TestParseQuantity:
    """Tests for parse_quantity function."""

    def test_binary_suffixes(self) -> None:
        """Test binary SI suffixes."""
        assert parse_quantity("1Ki") == 1024
        assert parse_quantity("128Mi") == 128 * 1024**2
        assert parse_quantity("1Gi") == 1024**3

    def test_decimal_suffixes(self) -> None:
        """Test decimal SI suffixes including sub-unit CPU values."""
        assert parse_quantity("250m") == pytest.approx(0.25)
        assert parse_quantity("500000u") == pytest.approx(0.5)
        assert parse_quantity("500000000n") == pytest.approx(0.5)
        assert parse_quantity("2k") == 2000
        assert parse_quantity("1M") == 1e6

    def test_plain_numbers(self) -> None:
        """Test numbers without a suffix."""
        assert parse_quantity("2") == 2.0
        assert parse_quantity("1.5") == 1.5
        assert parse_quantity(".5") == 0.5

    def test_exponent(self) -> None:
        """Test decimal exponent notation."""
        assert parse_quantity("1e3") == 1000
        assert parse_quantity("12E-2") == pytest.approx(0.12)

    def test_whitespace_is_stripped(self) -> None:
        """Test surrounding whitespace is ignored."""
        assert parse_quantity(" 100m ") == pytest.approx(0.1)

    @pytest.mark.parametrize("value", ["", "   ", "abc", "12Qi", "1.2.3", "Mi"])
    def test_invalid_raises(self, value: str) -> None:
        """Test malformed quantities raise QuantityParseError."""
        with pytest.raises(QuantityParseError):
            parse_quantity(value)

    def test_error_is_value_error(self) -> None:
        """Test QuantityParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_quantity("garbage")


class TestParseOptionalQuantity:
    """Tests for parse_optional_quantity function."""

    def test_missing_values(self) -> None:
        """Test None and blank inputs yield None."""
        assert parse_optional_quantity(None) is None
        assert parse_optional_quantity("") is None

    def test_present_value(self) -> None:
        """Test a present value is parsed."""
        assert parse_optional_quantity("256Mi") == 256 * 1024**2

    def test_invalid_value_raises(self) -> None:
        """Test invalid non-blank values still raise."""
        with pytest.raises(QuantityParseError):
            parse_optional_quantity("lots")
