import pytest
from fastapi.testclient import TestClient

from catalog_service.crud import InventoryManager
from catalog_service.main import app


@pytest.fixture
def manager():
    return InventoryManager()


@pytest.fixture
def stocked_manager(manager):
    """Manager loaded with the dairy items used throughout the demo."""
    for category, brand, price, quantity in [
        ("Milk", "Amul", 100, 20),
        ("Curd", "Amul", 50, 5),
        ("Milk", "Nestle", 60, 15),
        ("Curd", "Nestle", 90, 10),
    ]:
        manager.register_item(category, brand, price)
        manager.add_stock(category, brand, quantity)
    return manager


@pytest.fixture
def client():
    # Entering the context runs the lifespan, which creates a fresh manager
    with TestClient(app) as test_client:
        yield test_client
