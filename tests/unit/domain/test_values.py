"""Unit tests for the domain value types.

Tests cover:
- ItemNumber, Brand and Railway blank checks
- LengthOverBuffer positivity
- Price parsing, arithmetic and display
- Delivery date parsing (ByYear / ByQuarter)
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from railists.contracts.errors import (
    ERROR_NON_POSITIVE_LENGTH,
    BlankValueError,
    InvalidNumberOfValuesError,
    InvalidValueError,
    InvariantError,
    NumericFormatError,
    ValueOutOfRangeError,
)
from railists.domain.values import (
    Brand,
    ByQuarter,
    ByYear,
    ItemNumber,
    LengthOverBuffer,
    Price,
    Railway,
    parse_delivery_date,
)


class TestItemNumber:
    """Tests for ItemNumber."""

    def test_keeps_value(self) -> None:
        """Should keep the item number text and render it as is."""
        item_number = ItemNumber("123456")

        assert item_number.value == "123456"
        assert str(item_number) == "123456"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_rejects_blank(self, value: str) -> None:
        """Should reject empty item numbers."""
        with pytest.raises(BlankValueError):
            ItemNumber(value)

    def test_equality_by_value(self) -> None:
        """Should compare equal when the text is the same."""
        assert ItemNumber("60392") == ItemNumber("60392")
        assert ItemNumber("60392") != ItemNumber("60393")


class TestNames:
    """Tests for Brand and Railway."""

    def test_brand_name(self) -> None:
        """Should render the brand name."""
        assert str(Brand("ACME")) == "ACME"

    def test_railway_name(self) -> None:
        """Should render the railway name."""
        assert str(Railway("FS")) == "FS"

    def test_blank_brand_rejected(self) -> None:
        """Should reject a blank brand."""
        with pytest.raises(BlankValueError):
            Brand("")

    def test_blank_railway_rejected(self) -> None:
        """Should reject a blank railway."""
        with pytest.raises(BlankValueError):
            Railway(" ")


class TestLengthOverBuffer:
    """Tests for LengthOverBuffer."""

    def test_positive_length(self) -> None:
        """Should accept a positive length."""
        assert LengthOverBuffer(210).millimeters == 210
        assert str(LengthOverBuffer(210)) == "210 mm"

    @pytest.mark.parametrize("millimeters", [0, -1])
    def test_rejects_non_positive(self, millimeters: int) -> None:
        """Should reject zero and negative lengths."""
        with pytest.raises(InvariantError) as exc_info:
            LengthOverBuffer(millimeters)

        assert exc_info.value.code == ERROR_NON_POSITIVE_LENGTH
        assert exc_info.value.field_name == "length"


class TestPriceParse:
    """Tests for Price.parse."""

    def test_dot_separator(self) -> None:
        """Should parse a dot separated amount and ignore the suffix."""
        price = Price.parse("19.50 EUR")

        assert price.amount == Decimal("19.50")
        assert price.currency == "EUR"

    def test_comma_separator(self) -> None:
        """Should read a comma as the decimal separator."""
        assert Price.parse("19,50 EUR") == Price.parse("19.50 EUR")

    def test_amount_without_suffix(self) -> None:
        """Should accept an amount without currency suffix."""
        assert Price.parse("80").amount == Decimal("80")

    def test_blank(self) -> None:
        """Should reject an empty price."""
        with pytest.raises(BlankValueError):
            Price.parse("")

    @pytest.mark.parametrize("value", ["abc EUR", "12.3.4 EUR", "NaN EUR", "Infinity"])
    def test_not_a_number(self, value: str) -> None:
        """Should reject amounts that are not finite decimal numbers."""
        with pytest.raises(NumericFormatError):
            Price.parse(value)


class TestPriceArithmetic:
    """Tests for Price arithmetic and display."""

    def test_addition(self) -> None:
        """Should add amounts."""
        assert Price.euro("10.50") + Price.euro("4.50") == Price.euro("15.00")

    def test_sum_starts_from_zero(self) -> None:
        """Should work with the builtin sum."""
        total = sum([Price.euro("1"), Price.euro("2"), Price.euro("3")])

        assert total == Price.euro("6")

    def test_zero(self) -> None:
        """Should create a zero price in the default currency."""
        assert Price.zero().amount == Decimal("0")
        assert Price.zero().currency == "EUR"

    def test_ordering_by_amount(self) -> None:
        """Should order prices by amount."""
        assert Price.euro("10") < Price.euro("20")

    def test_display(self) -> None:
        """Should render amount and currency."""
        assert str(Price.parse("100.00 EUR")) == "100.00 EUR"

    def test_unsupported_currency(self) -> None:
        """Should reject currencies that are not supported."""
        with pytest.raises(InvalidValueError):
            Price(Decimal("10"), "USD")


class TestDeliveryDate:
    """Tests for parse_delivery_date."""

    def test_by_year(self) -> None:
        """Should parse a year."""
        delivery = parse_delivery_date("2024")

        assert delivery == ByYear(2024)
        assert str(delivery) == "2024"

    def test_by_quarter(self) -> None:
        """Should parse a year and quarter."""
        delivery = parse_delivery_date("2024/Q3")

        assert delivery == ByQuarter(2024, 3)
        assert str(delivery) == "2024/Q3"

    @pytest.mark.parametrize("year", ["1900", "2999"])
    def test_year_bounds_are_inclusive(self, year: str) -> None:
        """Should accept the first and last valid year."""
        assert parse_delivery_date(year) == ByYear(int(year))

    @pytest.mark.parametrize("value", ["1899", "3000"])
    def test_year_out_of_range(self, value: str) -> None:
        """Should reject years outside the accepted bounds."""
        with pytest.raises(ValueOutOfRangeError):
            parse_delivery_date(value)

    @pytest.mark.parametrize("value", ["20x4", "24", "20245", "2024a/Q1"])
    def test_year_not_a_number(self, value: str) -> None:
        """Should reject years that are not 4 digit numbers."""
        with pytest.raises(NumericFormatError):
            parse_delivery_date(value)

    def test_too_many_tokens(self) -> None:
        """Should reject more than one separator."""
        with pytest.raises(InvalidNumberOfValuesError):
            parse_delivery_date("2024/Q1/Q2")

    def test_blank_quarter(self) -> None:
        """Should reject an empty quarter."""
        with pytest.raises(BlankValueError):
            parse_delivery_date("2024/")

    @pytest.mark.parametrize("value", ["2024/3", "2024/X1", "2024/Q10"])
    def test_malformed_quarter(self, value: str) -> None:
        """Should reject quarters not written as Qn."""
        with pytest.raises(InvalidValueError):
            parse_delivery_date(value)

    def test_quarter_not_a_number(self) -> None:
        """Should reject a non numeric quarter."""
        with pytest.raises(NumericFormatError):
            parse_delivery_date("2024/QX")

    @pytest.mark.parametrize("value", ["2024/Q0", "2024/Q5"])
    def test_quarter_out_of_range(self, value: str) -> None:
        """Should reject quarters outside 1..4."""
        with pytest.raises(ValueOutOfRangeError):
            parse_delivery_date(value)

    def test_blank(self) -> None:
        """Should reject an empty delivery date."""
        with pytest.raises(BlankValueError):
            parse_delivery_date("")
