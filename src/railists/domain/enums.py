"""
Domain enums for the collection manager.

Defines the closed vocabularies used throughout the catalog and collecting
model:
- PowerMethod: DC vs AC current
- Category: rolling stock category (locomotives, trains, cars)
- LocomotiveType / TrainType / PassengerCarType / FreightCarType: sub-categories
- Epoch / MultipleEpoch: historical operating period of a model
- Control: decoder readiness
- DccInterface: physical decoder socket
- ServiceLevel: passenger class designation
- TrackGauge: track gauge classification for scales
- Priority: wish list priority

Every enum value is the exact textual token accepted by ``parse`` and
returned by ``str()``, so ``parse(str(x)) == x`` holds for every member.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from railists.contracts.errors import (
    BlankValueError,
    InvalidNumberOfValuesError,
    InvalidValueError,
)

T = TypeVar("T", bound="TokenEnum")

# Delimiter for composite values ("I/II", "1cl/2cl")
COMPOSITE_SEPARATOR = "/"


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


class TokenEnum(Enum):
    """
    Base for enums parsed from an exact textual token.

    Matching is case sensitive and never falls back to a default: an empty
    input raises BlankValueError, an unknown token raises InvalidValueError.
    """

    @classmethod
    def parse(cls: type[T], value: str) -> T:
        """
        Parse a token into an enum member.

        Args:
            value: The textual token (e.g., "DC", "NEM_652")

        Returns:
            The matching enum member

        Raises:
            BlankValueError: If the value is empty
            InvalidValueError: If the value is not a known token
        """
        if _is_blank(value):
            raise BlankValueError(
                f"{cls.__name__} value cannot be blank",
                field_name=cls.__name__,
                actual_value=value,
            )

        for member in cls:
            if member.value == value:
                return member

        allowed = ", ".join(member.value for member in cls)
        raise InvalidValueError(
            f"Invalid value for {cls.__name__} [allowed values are {allowed}]",
            field_name=cls.__name__,
            actual_value=value,
        )

    def __str__(self) -> str:
        return self.value


class PowerMethod(TokenEnum):
    """The power method for the model."""

    # Direct current
    DC = "DC"

    # Alternating current (Maerklin)
    AC = "AC"


class Category(TokenEnum):
    """
    Rolling stock category.

    A catalog item whose rolling stocks span more than one category is
    classified as TRAIN (a set).
    """

    LOCOMOTIVE = "LOCOMOTIVE"
    TRAIN = "TRAIN"
    PASSENGER_CAR = "PASSENGER_CAR"
    FREIGHT_CAR = "FREIGHT_CAR"

    @property
    def label(self) -> str:
        """Plural display name used in reports."""
        return _CATEGORY_LABELS[self]

    @property
    def symbol(self) -> str:
        """One letter abbreviation used in compact listings."""
        return _CATEGORY_SYMBOLS[self]


_CATEGORY_LABELS = {
    Category.LOCOMOTIVE: "Locomotives",
    Category.TRAIN: "Trains",
    Category.PASSENGER_CAR: "Passenger Cars",
    Category.FREIGHT_CAR: "Freight Cars",
}

_CATEGORY_SYMBOLS = {
    Category.LOCOMOTIVE: "L",
    Category.TRAIN: "T",
    Category.PASSENGER_CAR: "P",
    Category.FREIGHT_CAR: "F",
}


# =============================================================================
# SUB-CATEGORIES
# =============================================================================


class LocomotiveType(TokenEnum):
    """Locomotive sub-category."""

    STEAM_LOCOMOTIVE = "STEAM_LOCOMOTIVE"
    DIESEL_LOCOMOTIVE = "DIESEL_LOCOMOTIVE"
    ELECTRIC_LOCOMOTIVE = "ELECTRIC_LOCOMOTIVE"
    SHUNTING_LOCOMOTIVE = "SHUNTING_LOCOMOTIVE"


class TrainType(TokenEnum):
    """Train (fixed formation) sub-category."""

    ELECTRIC_MULTIPLE_UNITS = "ELECTRIC_MULTIPLE_UNITS"
    DIESEL_MULTIPLE_UNITS = "DIESEL_MULTIPLE_UNITS"
    RAILCARS = "RAILCARS"
    HIGH_SPEED_TRAINS = "HIGH_SPEED_TRAINS"
    TRAIN_SETS = "TRAIN_SETS"
    STARTER_SETS = "STARTER_SETS"


class PassengerCarType(TokenEnum):
    """Passenger car sub-category."""

    OPEN_COACH = "OPEN_COACH"
    COMPARTMENT_COACH = "COMPARTMENT_COACH"
    DINING_CAR = "DINING_CAR"
    LOUNGE = "LOUNGE"
    OBSERVATION = "OBSERVATION"
    SLEEPING_CAR = "SLEEPING_CAR"
    BAGGAGE_CAR = "BAGGAGE_CAR"
    DOUBLE_DECKER = "DOUBLE_DECKER"
    COMBINE_CAR = "COMBINE_CAR"
    DRIVING_TRAILER = "DRIVING_TRAILER"
    RAILWAY_POST_OFFICE = "RAILWAY_POST_OFFICE"


class FreightCarType(TokenEnum):
    """Freight car sub-category."""

    AUTO_TRANSPORT_CARS = "AUTO_TRANSPORT_CARS"
    BRAKE_WAGON = "BRAKE_WAGON"
    CONTAINER_CARS = "CONTAINER_CARS"
    COVERED_FREIGHT_CARS = "COVERED_FREIGHT_CARS"
    DEEP_WELL_FLAT_CARS = "DEEP_WELL_FLAT_CARS"
    DUMP_CARS = "DUMP_CARS"
    GONDOLA = "GONDOLA"
    HEAVY_GOODS_WAGONS = "HEAVY_GOODS_WAGONS"
    HINGED_COVER_WAGONS = "HINGED_COVER_WAGONS"
    HOPPER_WAGON = "HOPPER_WAGON"
    REFRIGERATOR_CARS = "REFRIGERATOR_CARS"
    SILO_CONTAINER_CARS = "SILO_CONTAINER_CARS"
    SLIDE_TARPAULIN_WAGON = "SLIDE_TARPAULIN_WAGON"
    SLIDING_WALL_BOXCARS = "SLIDING_WALL_BOXCARS"
    SPECIAL_TRANSPORT = "SPECIAL_TRANSPORT"
    STAKE_WAGONS = "STAKE_WAGONS"
    SWING_ROOF_WAGON = "SWING_ROOF_WAGON"
    TANK_CARS = "TANK_CARS"
    TELESCOPE_HOOD_WAGONS = "TELESCOPE_HOOD_WAGONS"


# =============================================================================
# EPOCH
# =============================================================================


class Epoch(TokenEnum):
    """
    Historical operating period of a model.

    The epochs (from the German "Epoche") divide railway history into time
    brackets so that locomotives, coaching and wagon stock can be grouped
    together. A model spanning a transition carries a MultipleEpoch.
    """

    I = "I"  # noqa: E741
    II = "II"
    IIa = "IIa"
    IIb = "IIb"
    III = "III"
    IIIa = "IIIa"
    IIIb = "IIIb"
    IV = "IV"
    IVa = "IVa"
    IVb = "IVb"
    V = "V"
    Va = "Va"
    Vb = "Vb"
    Vm = "Vm"
    VI = "VI"

    @classmethod
    def parse(cls, value: str) -> Epoch | MultipleEpoch:
        """
        Parse an epoch, either atomic ("IV") or a pair ("IV/V").

        Tokens of a pair are deduplicated and sorted, so "II/I" and "I/II"
        give the same MultipleEpoch.

        Raises:
            BlankValueError: If the value (or one of its tokens) is empty
            InvalidNumberOfValuesError: If a pair does not hold exactly two
                distinct tokens
            InvalidValueError: If a token is not a known epoch
        """
        if _is_blank(value):
            raise BlankValueError(
                "Epoch value cannot be blank", field_name="Epoch", actual_value=value
            )

        if COMPOSITE_SEPARATOR not in value:
            return super().parse(value)

        tokens = sorted(set(value.split(COMPOSITE_SEPARATOR)))
        if len(tokens) != 2:
            raise InvalidNumberOfValuesError(
                "Invalid number of elements for epoch values",
                field_name="Epoch",
                actual_value=value,
            )

        first, second = (super(Epoch, cls).parse(token) for token in tokens)
        return MultipleEpoch(first, second)


@dataclass(frozen=True)
class MultipleEpoch:
    """
    A model spanning two distinct epochs.

    Built by Epoch.parse with tokens already sorted; use ``of`` to build one
    from arbitrary epochs.
    """

    first: Epoch
    second: Epoch

    @classmethod
    def of(cls, first: Epoch, second: Epoch) -> MultipleEpoch:
        """Create a normalized pair, rejecting identical epochs."""
        if first == second:
            raise InvalidNumberOfValuesError(
                "A multiple epoch requires two distinct epochs",
                field_name="Epoch",
                actual_value=f"{first}/{second}",
            )
        ordered = sorted((first, second), key=lambda epoch: epoch.value)
        return cls(ordered[0], ordered[1])

    def __str__(self) -> str:
        return f"{self.first}{COMPOSITE_SEPARATOR}{self.second}"


# =============================================================================
# DIGITAL CONTROL
# =============================================================================


class Control(TokenEnum):
    """The control method for a railway model."""

    # The model can be fitted with a dcc decoder
    DCC_READY = "DCC_READY"

    # The model has a dcc decoder installed
    DCC = "DCC"

    # The model has a dcc decoder installed with the sound module
    DCC_SOUND = "DCC_SOUND"

    @property
    def with_decoder(self) -> bool:
        """Whether a decoder is actually installed."""
        return self is not Control.DCC_READY


class DccInterface(TokenEnum):
    """NMRA and NEM connectors for digital control (DCC)."""

    NEM_651 = "NEM_651"
    NEM_652 = "NEM_652"
    PLUX_8 = "PLUX_8"
    PLUX_16 = "PLUX_16"
    PLUX_22 = "PLUX_22"
    NEXT_18 = "NEXT_18"
    MTC_21 = "MTC_21"


# =============================================================================
# SERVICE LEVEL
# =============================================================================


class ServiceLevel(TokenEnum):
    """
    Passenger class designation.

    Mixed coaches combine adjacent classes only: 1cl/2cl, 2cl/3cl or the
    full 1cl/2cl/3cl. Input tokens may come in any order and repeat; the
    value is always rendered in ascending class order.
    """

    FIRST_CLASS = "1cl"
    SECOND_CLASS = "2cl"
    THIRD_CLASS = "3cl"
    FIRST_AND_SECOND_CLASS = "1cl/2cl"
    SECOND_AND_THIRD_CLASS = "2cl/3cl"
    FIRST_SECOND_AND_THIRD_CLASS = "1cl/2cl/3cl"

    @classmethod
    def parse(cls, value: str) -> ServiceLevel:
        """
        Parse an atomic or mixed service level.

        Raises:
            BlankValueError: If the value is empty
            InvalidValueError: If an atomic value is not a known class
            InvalidNumberOfValuesError: If a mixed value is not one of the
                allowed combinations
        """
        if _is_blank(value):
            raise BlankValueError(
                "Service level value cannot be blank",
                field_name="ServiceLevel",
                actual_value=value,
            )

        if COMPOSITE_SEPARATOR not in value:
            if value not in _ATOMIC_SERVICE_LEVELS:
                raise InvalidValueError(
                    "Wrong value for service level",
                    field_name="ServiceLevel",
                    actual_value=value,
                )
            return cls(value)

        tokens = sorted(set(value.split(COMPOSITE_SEPARATOR)))
        if len(tokens) not in (2, 3):
            raise InvalidNumberOfValuesError(
                "Invalid mixed service level: it needs two or three distinct values",
                field_name="ServiceLevel",
                actual_value=value,
            )

        canonical = COMPOSITE_SEPARATOR.join(tokens)
        if canonical not in _MIXED_SERVICE_LEVELS:
            raise InvalidNumberOfValuesError(
                "Invalid mixed service level",
                field_name="ServiceLevel",
                actual_value=value,
            )
        return cls(canonical)

    @property
    def is_mixed(self) -> bool:
        return COMPOSITE_SEPARATOR in self.value


_ATOMIC_SERVICE_LEVELS = frozenset({"1cl", "2cl", "3cl"})
_MIXED_SERVICE_LEVELS = frozenset({"1cl/2cl", "2cl/3cl", "1cl/2cl/3cl"})


# =============================================================================
# SCALES
# =============================================================================


class TrackGauge(TokenEnum):
    """Track gauge classification for a model scale."""

    STANDARD = "STANDARD"
    BROAD = "BROAD"
    MEDIUM = "MEDIUM"
    NARROW = "NARROW"


# =============================================================================
# WISH LISTS
# =============================================================================


class Priority(TokenEnum):
    """How badly a wish list item is wanted."""

    HIGH = "HIGH"
    NORMAL = "NORMAL"
    LOW = "LOW"

    @classmethod
    def default(cls) -> Priority:
        """Priority applied when a wish list item does not state one."""
        return cls.NORMAL

    @property
    def label(self) -> str:
        return self.value.capitalize()
