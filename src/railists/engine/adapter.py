"""
Document adapter for collections and wish lists.

Maps a parsed YAML document (nested dicts, lists and scalars) into the
domain model. Every field goes through its value parser; the first failure
stops the whole load and is re-raised as a DataLoadError naming the
document path of the offending field, e.g.
``elements[2].rollingStocks[0].epoch``.

Classes:
    DocumentAdapter: Build Collection and WishList objects from documents

Usage:
    from railists.engine.adapter import DocumentAdapter

    adapter = DocumentAdapter()
    collection = adapter.to_collection(yaml.load(text, Loader=TextScalarLoader))

YAML scalars may arrive as native values (ints for item numbers, dates for
purchase dates, datetimes for modifiedAt); they are accepted wherever the
document schema expects the equivalent text.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import Any, TypeVar

from railists.contracts.config import RailistsConfig
from railists.contracts.errors import (
    DataLoadError,
    InvalidValueError,
    NumericFormatError,
    RailistsError,
    invalid_field_error,
    missing_field_error,
    type_mismatch_error,
)
from railists.domain.catalog_items import CatalogItem
from railists.domain.collections import Collection, PurchasedInfo
from railists.domain.enums import (
    Control,
    DccInterface,
    Epoch,
    FreightCarType,
    LocomotiveType,
    PassengerCarType,
    PowerMethod,
    Priority,
    ServiceLevel,
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
    ItemNumber,
    LengthOverBuffer,
    Price,
    Railway,
    parse_delivery_date,
)
from railists.domain.wish_lists import PriceInfo, WishList

logger = logging.getLogger(__name__)

T = TypeVar("T")

Node = dict[str, Any]

# Rolling stock "category" tokens in documents
LOCOMOTIVE = "LOCOMOTIVE"
TRAIN = "TRAIN"
PASSENGER_CAR = "PASSENGER_CAR"
FREIGHT_CAR = "FREIGHT_CAR"


def _path(parent: str, key: str | int) -> str:
    if isinstance(key, int):
        return f"{parent}[{key}]"
    return f"{parent}.{key}" if parent else key


class DocumentAdapter:
    """
    Convert parsed documents into domain objects.

    The adapter is stateless apart from its configuration, so one instance
    can convert any number of documents.

    Attributes:
        config: Formats used for textual dates in the documents
    """

    def __init__(self, config: RailistsConfig | None = None) -> None:
        self.config = config or RailistsConfig.default()

    # =========================================================================
    # Documents
    # =========================================================================

    def to_collection(self, document: Any) -> Collection:
        """
        Build a Collection from a collection document.

        Args:
            document: The parsed YAML root (a mapping)

        Returns:
            Collection with its items in document order

        Raises:
            DataLoadError: On the first missing or invalid field
        """
        root = self._mapping(document, "", "collection document")

        collection = Collection(
            description=self._text(root, "description", ""),
            version=self._integer(root, "version", ""),
            modified_date=self._field(
                root, "modifiedAt", "", self._to_datetime, required=True
            ),
        )

        for index, element in enumerate(self._sequence(root, "elements", "")):
            path = _path("elements", index)
            node = self._mapping(element, path, "catalog item")
            catalog_item = self._catalog_item(node, path)
            purchased_info = self._purchased_info(node, path)
            collection.add_item(catalog_item, purchased_info)

        logger.debug("Built collection '%s' with %d items", collection.description, len(collection))
        return collection

    def to_wish_list(self, document: Any) -> WishList:
        """
        Build a WishList from a wish list document.

        The list name is read from ``name`` and falls back to ``description``.

        Raises:
            DataLoadError: On the first missing or invalid field
        """
        root = self._mapping(document, "", "wish list document")

        name_key = "name" if root.get("name") is not None else "description"
        wish_list = WishList(
            name=self._text(root, name_key, ""),
            version=self._integer(root, "version", ""),
            modified_at=self._field(
                root, "modifiedAt", "", self._to_datetime, required=False
            ),
        )

        for index, element in enumerate(self._sequence(root, "elements", "")):
            path = _path("elements", index)
            node = self._mapping(element, path, "catalog item")
            catalog_item = self._catalog_item(node, path)
            priority = self._field(node, "priority", path, Priority.parse, required=False)
            prices = self._price_infos(node, path)
            wish_list.add_item(catalog_item, priority, prices)

        logger.debug("Built wish list '%s' with %d items", wish_list.name, len(wish_list))
        return wish_list

    # =========================================================================
    # Catalog model
    # =========================================================================

    def _catalog_item(self, node: Node, path: str) -> CatalogItem:
        rolling_stocks = []
        for index, element in enumerate(self._sequence(node, "rollingStocks", path)):
            rs_path = _path(_path(path, "rollingStocks"), index)
            rs_node = self._mapping(element, rs_path, "rolling stock")
            rolling_stocks.append(self._rolling_stock(rs_node, rs_path))

        return self._build(
            path,
            lambda: CatalogItem(
                brand=self._field(node, "brand", path, Brand, required=True),
                item_number=self._field(node, "itemNumber", path, ItemNumber, required=True),
                description=self._text(node, "description", path),
                rolling_stocks=tuple(rolling_stocks),
                power_method=self._field(
                    node, "powerMethod", path, PowerMethod.parse, required=True
                ),
                scale=self._field(node, "scale", path, Scale.from_name, required=True),
                count=self._integer(node, "count", path),
                delivery_date=self._field(
                    node, "deliveryDate", path, parse_delivery_date, required=False
                ),
            ),
        )

    def _rolling_stock(self, node: Node, path: str) -> RollingStock:
        category = self._text(node, "category", path)
        type_name = self._text(node, "typeName", path)
        railway = self._field(node, "railway", path, Railway, required=True)
        epoch = self._field(node, "epoch", path, Epoch.parse, required=True)
        road_number = self._optional_text(node, "roadNumber", path)
        depot = self._optional_text(node, "depot", path)
        livery = self._optional_text(node, "livery", path)
        length = self._field(
            node, "length", path, self._to_length_over_buffer, required=False
        )

        if category == LOCOMOTIVE:
            return Locomotive(
                class_name=type_name,
                road_number=road_number or "",
                railway=railway,
                epoch=epoch,
                series=self._optional_text(node, "series", path),
                sub_category=self._field(
                    node, "subCategory", path, LocomotiveType.parse, required=False
                ),
                depot=depot,
                livery=livery,
                length_over_buffer=length,
                control=self._field(node, "control", path, Control.parse, required=False),
                dcc_interface=self._field(
                    node, "dccInterface", path, DccInterface.parse, required=False
                ),
            )
        if category == TRAIN:
            return Train(
                type_name=type_name,
                railway=railway,
                epoch=epoch,
                road_number=road_number,
                n_of_elements=1,
                sub_category=self._field(
                    node, "subCategory", path, TrainType.parse, required=False
                ),
                depot=depot,
                livery=livery,
                length_over_buffer=length,
                control=self._field(node, "control", path, Control.parse, required=False),
                dcc_interface=self._field(
                    node, "dccInterface", path, DccInterface.parse, required=False
                ),
            )
        if category == PASSENGER_CAR:
            return PassengerCar(
                type_name=type_name,
                railway=railway,
                epoch=epoch,
                road_number=road_number,
                sub_category=self._field(
                    node, "subCategory", path, PassengerCarType.parse, required=False
                ),
                service_level=self._field(
                    node, "serviceLevel", path, ServiceLevel.parse, required=False
                ),
                depot=depot,
                livery=livery,
                length_over_buffer=length,
            )
        if category == FREIGHT_CAR:
            return FreightCar(
                type_name=type_name,
                railway=railway,
                epoch=epoch,
                road_number=road_number,
                sub_category=self._field(
                    node, "subCategory", path, FreightCarType.parse, required=False
                ),
                depot=depot,
                livery=livery,
                length_over_buffer=length,
            )

        raise invalid_field_error(
            _path(path, "category"),
            InvalidValueError(
                "Invalid rolling stock type "
                f"[allowed values are {LOCOMOTIVE}, {TRAIN}, {PASSENGER_CAR}, {FREIGHT_CAR}]",
                field_name="category",
                actual_value=category,
            ),
        )

    # =========================================================================
    # Collecting model
    # =========================================================================

    def _purchased_info(self, node: Node, path: str) -> PurchasedInfo:
        info_path = _path(path, "purchaseInfo")
        if node.get("purchaseInfo") is None:
            raise missing_field_error("purchaseInfo", source=info_path)
        info = self._mapping(node["purchaseInfo"], info_path, "purchase info")

        return PurchasedInfo(
            shop=self._text(info, "shop", info_path),
            purchased_date=self._field(info, "date", info_path, self._to_date, required=True),
            price=self._field(info, "price", info_path, Price.parse, required=True),
        )

    def _price_infos(self, node: Node, path: str) -> list[PriceInfo]:
        if node.get("prices") is None:
            return []

        prices = []
        for index, element in enumerate(self._sequence(node, "prices", path)):
            price_path = _path(_path(path, "prices"), index)
            price_node = self._mapping(element, price_path, "price")
            prices.append(
                PriceInfo(
                    shop=self._text(price_node, "shop", price_path),
                    price=self._field(price_node, "price", price_path, Price.parse, required=True),
                )
            )
        return prices

    # =========================================================================
    # Field access
    # =========================================================================

    def _field(
        self,
        node: Node,
        key: str,
        path: str,
        parser: Callable[[Any], T],
        required: bool,
    ) -> T | None:
        """
        Read a field and run its parser, wrapping failures with the field path.

        Absent (or null) optional fields give None; absent required fields
        raise a missing field error.
        """
        source = _path(path, key)
        value = node.get(key)
        if value is None:
            if required:
                raise missing_field_error(key, source=source)
            return None

        if isinstance(value, (dict, list)):
            raise type_mismatch_error(key, "a scalar", value, source=source)

        try:
            return parser(value if isinstance(value, (date, datetime)) else self._scalar(value))
        except DataLoadError:
            raise
        except RailistsError as e:
            raise invalid_field_error(source, e) from e

    def _text(self, node: Node, key: str, path: str) -> str:
        value = node.get(key)
        if value is None:
            raise missing_field_error(key, source=_path(path, key))
        if isinstance(value, (dict, list)):
            raise type_mismatch_error(key, "text", value, source=_path(path, key))
        return self._scalar(value)

    def _optional_text(self, node: Node, key: str, path: str) -> str | None:
        if node.get(key) is None:
            return None
        return self._text(node, key, path)

    def _integer(self, node: Node, key: str, path: str) -> int:
        return self._field(node, key, path, self._to_int, required=True)

    def _mapping(self, value: Any, path: str, expected: str) -> Node:
        if not isinstance(value, dict):
            raise type_mismatch_error(path or "document", f"a mapping ({expected})", value)
        return value

    def _sequence(self, node: Node, key: str, path: str) -> list[Any]:
        value = node.get(key)
        source = _path(path, key)
        if value is None:
            raise missing_field_error(key, source=source)
        if not isinstance(value, list):
            raise type_mismatch_error(key, "a list", value, source=source)
        return value

    def _build(self, path: str, factory: Callable[[], T]) -> T:
        try:
            return factory()
        except DataLoadError:
            raise
        except RailistsError as e:
            source = _path(path, e.field_name) if e.field_name else path
            raise invalid_field_error(source, e) from e

    # =========================================================================
    # Scalar conversions
    # =========================================================================

    @staticmethod
    def _scalar(value: Any) -> str:
        return str(value)

    @staticmethod
    def _to_int(value: Any) -> int:
        text = str(value).strip()
        if isinstance(value, bool) or not (text.isascii() and text.isdigit()):
            raise NumericFormatError(
                "Value must be a non negative integer", actual_value=str(value)
            )
        return int(text)

    def _to_length_over_buffer(self, value: Any) -> LengthOverBuffer:
        text = str(value).strip()
        try:
            millimeters = int(text)
        except ValueError as e:
            raise NumericFormatError(
                "Length over buffer must be an integer", actual_value=text
            ) from e
        return LengthOverBuffer(millimeters)

    def _to_date(self, value: Any) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return datetime.strptime(value, self.config.documents.purchase_date_format).date()
        except ValueError as e:
            raise InvalidValueError(
                f"Invalid date, expected format {self.config.documents.purchase_date_format}",
                actual_value=value,
            ) from e

    def _to_datetime(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, datetime.min.time())
        try:
            return datetime.strptime(value, self.config.documents.modified_at_format)
        except ValueError as e:
            raise InvalidValueError(
                f"Invalid timestamp, expected format {self.config.documents.modified_at_format}",
                actual_value=value,
            ) from e
