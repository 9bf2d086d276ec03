"""
Scripted walk-through of the inventory manager.
Registers a few dairy items, stocks them, and prints several searches.
Run with: python -m catalog_service.demo
"""
import logging
import os

from . import config
from .crud import CatalogError, InventoryManager

logger = logging.getLogger(__name__)

SCENARIOS = [
    ("Search by brand Nestle:", dict(brand="Nestle")),
    ("Search by category Milk:", dict(category="Milk")),
    ("Search by category Milk ordered by price descending:", dict(category="Milk", ascending=False)),
    ("Search by price range 70 to 100:", dict(price_from=70, price_to=100)),
    ("Search non-existent category:", dict(category="Bread")),
]


def run_demo(manager: InventoryManager) -> None:
    # Negative price
    try:
        manager.register_item("Milk", "Amul", -10)
    except CatalogError as e:
        print(f"Error: {e}")

    manager.register_item("Milk", "Amul", 100)
    manager.register_item("Curd", "Amul", 50)
    manager.register_item("Milk", "Nestle", 60)
    manager.register_item("Curd", "Nestle", 90)

    # Negative stock
    try:
        manager.add_stock("Milk", "Amul", -5)
    except CatalogError as e:
        print(f"Error: {e}")

    manager.add_stock("Milk", "Amul", 20)
    manager.add_stock("Curd", "Amul", 5)
    manager.add_stock("Milk", "Nestle", 15)
    manager.add_stock("Curd", "Nestle", 10)

    for header, filters in SCENARIOS:
        print(f"\n{header}")
        for item in manager.search(order_by="price", **filters):
            print(item)


def main():
    # stdout carries the demo transcript, so only surface warnings and up by default
    logging.basicConfig(level=os.getenv("DEMO_LOG_LEVEL", "WARNING").upper(), format=config.LOG_FORMAT)
    logger.debug("Starting catalog demo")
    run_demo(InventoryManager())


if __name__ == "__main__":
    main()
