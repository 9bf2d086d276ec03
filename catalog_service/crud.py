import logging
import threading
from typing import List, Optional

from .models import Item, make_key

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for errors raised by the inventory manager."""


class InvalidArgument(CatalogError, ValueError):
    pass


class NotFound(CatalogError, LookupError):
    pass


class InventoryManager:
    """
    In-memory catalog of items keyed by (category, brand).
    Keys are case-insensitive; display casing comes from the first registration.
    """

    def __init__(self):
        self._items: dict[str, Item] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, pair) -> bool:
        category, brand = pair
        return make_key(category, brand) in self._items

    def register_item(self, category: str, brand: str, price: int) -> None:
        if price <= 0:
            logger.warning(f"Rejected registration of '{category}'/'{brand}' with price {price}")
            raise InvalidArgument("price must be positive")

        key = make_key(category, brand)
        with self._lock:
            if key in self._items:
                logger.info(f"Item '{key}' already registered, leaving it unchanged")
                return
            self._items[key] = Item(category=category, brand=brand, price=price, quantity=0)
        logger.info(f"Registered item '{key}' at price {price}")

    def add_stock(self, category: str, brand: str, quantity: int) -> None:
        if quantity <= 0:
            logger.warning(f"Rejected stock addition of {quantity} for '{category}'/'{brand}'")
            raise InvalidArgument("quantity must be positive")

        key = make_key(category, brand)
        with self._lock:
            item = self._items.get(key)
            if item is None:
                logger.warning(f"Stock addition for unregistered item '{key}'")
                raise NotFound("item does not exist; register it first")
            item.quantity += quantity
            new_quantity = item.quantity
        logger.info(f"Added {quantity} to '{key}', stock now {new_quantity}")

    def get_item(self, category: str, brand: str) -> Item:
        key = make_key(category, brand)
        with self._lock:
            item = self._items.get(key)
            if item is None:
                raise NotFound("item does not exist; register it first")
            return item.model_copy()

    def search(
        self,
        category: Optional[str] = None,
        brand: Optional[str] = None,
        price_from: Optional[int] = None,
        price_to: Optional[int] = None,
        order_by: str = "price",
        ascending: bool = True,
    ) -> List[Item]:
        """
        Returns copies of the items matching every given filter.
        A None filter is ignored. Ordering is by quantity when order_by is
        "quantity" (any case), otherwise by price. Equal sort values fall back
        to the composite key, ascending.
        """
        with self._lock:
            result = [item.model_copy() for item in self._items.values()]

        if category is not None:
            category = category.lower()
            result = [item for item in result if item.category.lower() == category]
        if brand is not None:
            brand = brand.lower()
            result = [item for item in result if item.brand.lower() == brand]
        if price_from is not None:
            result = [item for item in result if item.price >= price_from]
        if price_to is not None:
            result = [item for item in result if item.price <= price_to]

        by_quantity = (order_by or "").lower() == "quantity"
        # Two stable passes: tie-break first, then the primary field
        result.sort(key=lambda item: item.key)
        result.sort(key=lambda item: item.quantity if by_quantity else item.price, reverse=not ascending)

        logger.debug(f"Search matched {len(result)} item(s)")
        return result
