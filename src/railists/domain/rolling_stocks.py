"""
Rolling stock variants.

A rolling stock is one of four variants, each with its own attribute set:
- Locomotive: class name, road number, series, decoder control
- Train: fixed formation sold as a unit (railcars, multiple units)
- PassengerCar: coach with an optional service level
- FreightCar: wagon

The category of a rolling stock is given by its variant and is never stored
as data. Downstream code dispatches on the variant with ``isinstance``.

Usage:
    loco = Locomotive(
        class_name="E656",
        road_number="E656 077",
        railway=Railway("FS"),
        epoch=Epoch.IV,
        control=Control.DCC_READY,
    )
    loco.category        # Category.LOCOMOTIVE
    loco.with_decoder    # False
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from railists.domain.enums import (
    Category,
    Control,
    DccInterface,
    Epoch,
    FreightCarType,
    LocomotiveType,
    MultipleEpoch,
    PassengerCarType,
    ServiceLevel,
    TrainType,
)
from railists.domain.values import LengthOverBuffer, Railway


class _RollingStockTraits:
    """Read-only helpers shared by every rolling stock variant."""

    category: ClassVar[Category]

    @property
    def is_locomotive(self) -> bool:
        return self.category is Category.LOCOMOTIVE


class _DigitalControlTraits:
    """Decoder helpers for motorized variants (locomotives and trains)."""

    control: Control | None

    @property
    def with_decoder(self) -> bool:
        """True when a decoder is installed (not merely DCC ready)."""
        return self.control is not None and self.control.with_decoder


@dataclass(frozen=True)
class Locomotive(_RollingStockTraits, _DigitalControlTraits):
    """A locomotive."""

    category: ClassVar[Category] = Category.LOCOMOTIVE

    class_name: str
    road_number: str
    railway: Railway
    epoch: Epoch | MultipleEpoch
    series: str | None = None
    sub_category: LocomotiveType | None = None
    depot: str | None = None
    livery: str | None = None
    length_over_buffer: LengthOverBuffer | None = None
    control: Control | None = None
    dcc_interface: DccInterface | None = None


@dataclass(frozen=True)
class Train(_RollingStockTraits, _DigitalControlTraits):
    """A fixed formation of rolling stocks sold as a single unit."""

    category: ClassVar[Category] = Category.TRAIN

    type_name: str
    railway: Railway
    epoch: Epoch | MultipleEpoch
    road_number: str | None = None
    n_of_elements: int = 1
    sub_category: TrainType | None = None
    depot: str | None = None
    livery: str | None = None
    length_over_buffer: LengthOverBuffer | None = None
    control: Control | None = None
    dcc_interface: DccInterface | None = None


@dataclass(frozen=True)
class PassengerCar(_RollingStockTraits):
    """A passenger car (coach)."""

    category: ClassVar[Category] = Category.PASSENGER_CAR

    type_name: str
    railway: Railway
    epoch: Epoch | MultipleEpoch
    road_number: str | None = None
    sub_category: PassengerCarType | None = None
    service_level: ServiceLevel | None = None
    depot: str | None = None
    livery: str | None = None
    length_over_buffer: LengthOverBuffer | None = None


@dataclass(frozen=True)
class FreightCar(_RollingStockTraits):
    """A freight car (wagon)."""

    category: ClassVar[Category] = Category.FREIGHT_CAR

    type_name: str
    railway: Railway
    epoch: Epoch | MultipleEpoch
    road_number: str | None = None
    sub_category: FreightCarType | None = None
    depot: str | None = None
    livery: str | None = None
    length_over_buffer: LengthOverBuffer | None = None


RollingStock = Locomotive | Train | PassengerCar | FreightCar
