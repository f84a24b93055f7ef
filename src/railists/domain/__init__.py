"""
Domain module for the collection manager.

Contains the value types, enumerations, catalog model (rolling stocks and
catalog items) and collecting model (collections and wish lists).
"""

from railists.domain.catalog_items import CatalogItem, extract_category
from railists.domain.collections import Collection, CollectionItem, PurchasedInfo
from railists.domain.enums import (
    Category,
    Control,
    DccInterface,
    Epoch,
    FreightCarType,
    LocomotiveType,
    MultipleEpoch,
    PassengerCarType,
    PowerMethod,
    Priority,
    ServiceLevel,
    TrackGauge,
    TrainType,
)
from railists.domain.rolling_stocks import (
    FreightCar,
    Locomotive,
    PassengerCar,
    RollingStock,
    Train,
)
from railists.domain.scales import Scale
from railists.domain.values import (
    Brand,
    ByQuarter,
    ByYear,
    DeliveryDate,
    ItemNumber,
    LengthOverBuffer,
    Price,
    Railway,
    parse_delivery_date,
)
from railists.domain.wish_lists import PriceInfo, WishList, WishListItem

__all__ = [
    "Brand",
    "ByQuarter",
    "ByYear",
    "CatalogItem",
    "Category",
    "Collection",
    "CollectionItem",
    "Control",
    "DccInterface",
    "DeliveryDate",
    "Epoch",
    "FreightCar",
    "FreightCarType",
    "ItemNumber",
    "LengthOverBuffer",
    "Locomotive",
    "LocomotiveType",
    "MultipleEpoch",
    "PassengerCar",
    "PassengerCarType",
    "PowerMethod",
    "PriceInfo",
    "Priority",
    "PurchasedInfo",
    "Railway",
    "RollingStock",
    "Scale",
    "ServiceLevel",
    "TrackGauge",
    "Train",
    "TrainType",
    "WishList",
    "WishListItem",
    "extract_category",
    "parse_delivery_date",
]
