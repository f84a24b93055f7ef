"""
Value types for the catalog and collecting model.

Each value validates itself when built from text and is immutable:
- ItemNumber: catalog item number within a brand's catalog
- Brand / Railway: manufacturer and railway company names
- LengthOverBuffer: model length in millimeters
- Price: decimal amount with a currency
- DeliveryDate (ByYear / ByQuarter): announced delivery date

Usage:
    from railists.domain.values import Price, parse_delivery_date

    price = Price.parse("19,50 EUR")       # Price(amount=Decimal("19.50"), ...)
    delivery = parse_delivery_date("2024/Q3")
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from railists.config.currencies import DEFAULT_CURRENCY, is_supported_currency
from railists.config.delivery import (
    MAX_DELIVERY_YEAR,
    MAX_QUARTER,
    MIN_DELIVERY_YEAR,
    MIN_QUARTER,
    is_valid_delivery_year,
)
from railists.contracts.errors import (
    ERROR_NON_POSITIVE_LENGTH,
    BlankValueError,
    InvalidNumberOfValuesError,
    InvalidValueError,
    InvariantError,
    NumericFormatError,
    ValueOutOfRangeError,
)


def _require_text(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise BlankValueError(
            f"{field_name} cannot be blank", field_name=field_name, actual_value=value
        )
    return str(value)


# =============================================================================
# IDENTIFIERS AND NAMES
# =============================================================================


@dataclass(frozen=True, order=True)
class ItemNumber:
    """Identifies a catalog item within a brand's catalog. Never blank."""

    value: str

    def __post_init__(self) -> None:
        _require_text(self.value, "ItemNumber")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Brand:
    """A model railways manufacturer."""

    name: str

    def __post_init__(self) -> None:
        _require_text(self.name, "Brand")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Railway:
    """A railway company (e.g. "FS", "DB")."""

    name: str

    def __post_init__(self) -> None:
        _require_text(self.name, "Railway")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class LengthOverBuffer:
    """The length over buffer of a model, in millimeters."""

    millimeters: int

    def __post_init__(self) -> None:
        if self.millimeters <= 0:
            raise InvariantError(
                "Length over buffer cannot be 0 or negative",
                code=ERROR_NON_POSITIVE_LENGTH,
                field_name="length",
                actual_value=str(self.millimeters),
            )

    def __str__(self) -> str:
        return f"{self.millimeters} mm"


# =============================================================================
# PRICE
# =============================================================================


@dataclass(frozen=True, order=True)
class Price:
    """
    A decimal amount of money.

    Prices are parsed from ``"<amount> <suffix>"``; the amount may use a comma
    or a dot as decimal separator and the suffix is ignored. Every parsed
    price is recorded in DEFAULT_CURRENCY.

    Prices can be summed with ``sum()``: the total is always expressed in
    DEFAULT_CURRENCY, so mixing currencies gives a wrong total.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not is_supported_currency(self.currency):
            raise InvalidValueError(
                f"Currency '{self.currency}' is not supported",
                field_name="currency",
                actual_value=self.currency,
            )

    @classmethod
    def parse(cls, value: str) -> Price:
        """
        Parse a price string.

        Args:
            value: Text such as "19.50 EUR" or "19,50 EUR"

        Returns:
            Price in the default currency

        Raises:
            BlankValueError: If the value is empty
            NumericFormatError: If the amount is not a finite decimal number
        """
        text = _require_text(value, "Price")
        token = text.split()[0].replace(",", ".")

        try:
            amount = Decimal(token)
        except InvalidOperation as e:
            raise NumericFormatError(
                "Invalid price: the amount is not a number",
                field_name="Price",
                actual_value=value,
            ) from e

        if not amount.is_finite():
            raise NumericFormatError(
                "Invalid price: the amount must be a finite number",
                field_name="Price",
                actual_value=value,
            )

        return cls(amount)

    @classmethod
    def euro(cls, amount: Decimal | int | str) -> Price:
        """Create a price in euro."""
        return cls(Decimal(amount), "EUR")

    @classmethod
    def zero(cls) -> Price:
        return cls(Decimal("0"))

    def __add__(self, other: object) -> Price:
        if not isinstance(other, Price):
            return NotImplemented
        return Price(self.amount + other.amount, DEFAULT_CURRENCY)

    def __radd__(self, other: object) -> Price:
        # sum() starts from the integer 0
        if other == 0:
            return self
        return self.__add__(other)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


# =============================================================================
# DELIVERY DATE
# =============================================================================

QUARTER_PREFIX = "Q"


@dataclass(frozen=True, order=True)
class ByYear:
    """Delivery announced for a whole year."""

    year: int

    def __str__(self) -> str:
        return f"{self.year}"


@dataclass(frozen=True, order=True)
class ByQuarter:
    """Delivery announced for a quarter (1-4) of a year."""

    year: int
    quarter: int

    def __str__(self) -> str:
        return f"{self.year}/{QUARTER_PREFIX}{self.quarter}"


DeliveryDate = ByYear | ByQuarter


def parse_delivery_date(value: str) -> DeliveryDate:
    """
    Parse a delivery date written as ``YYYY`` or ``YYYY/Qn``.

    Raises:
        BlankValueError: If the value is empty
        InvalidNumberOfValuesError: If there are more than two "/" tokens
        NumericFormatError: If the year is not a 4 digit number
        ValueOutOfRangeError: If the year is outside the accepted bounds
        InvalidValueError: If the quarter is not Q1..Q4
    """
    text = _require_text(value, "DeliveryDate")

    tokens = text.split("/")
    if len(tokens) > 2:
        raise InvalidNumberOfValuesError(
            "Delivery date must be YYYY or YYYY/Qn",
            field_name="DeliveryDate",
            actual_value=value,
        )

    year = _parse_year(tokens[0])
    if len(tokens) == 1:
        return ByYear(year)

    return ByQuarter(year, _parse_quarter(tokens[1]))


def _parse_year(token: str) -> int:
    if len(token) != 4 or not (token.isascii() and token.isdigit()):
        raise NumericFormatError(
            "Delivery date year must be a 4 digit number",
            field_name="DeliveryDate.year",
            actual_value=token,
        )

    year = int(token)
    if not is_valid_delivery_year(year):
        raise ValueOutOfRangeError(
            f"Delivery date year must be between {MIN_DELIVERY_YEAR} "
            f"and {MAX_DELIVERY_YEAR}",
            field_name="DeliveryDate.year",
            actual_value=token,
        )
    return year


def _parse_quarter(token: str) -> int:
    if not token:
        raise BlankValueError(
            "Delivery date quarter cannot be blank",
            field_name="DeliveryDate.quarter",
            actual_value=token,
        )
    if len(token) != 2 or not token.startswith(QUARTER_PREFIX):
        raise InvalidValueError(
            "Delivery date quarter must be Q1, Q2, Q3 or Q4",
            field_name="DeliveryDate.quarter",
            actual_value=token,
        )

    digit = token[1]
    if not (digit.isascii() and digit.isdigit()):
        raise NumericFormatError(
            "Delivery date quarter is not a number",
            field_name="DeliveryDate.quarter",
            actual_value=token,
        )

    quarter = int(digit)
    if not MIN_QUARTER <= quarter <= MAX_QUARTER:
        raise ValueOutOfRangeError(
            f"Delivery date quarter must be between {MIN_QUARTER} and {MAX_QUARTER}",
            field_name="DeliveryDate.quarter",
            actual_value=token,
        )
    return quarter
