from catalog_service import demo
from catalog_service.crud import InventoryManager

EXPECTED_OUTPUT = """\
Error: price must be positive
Error: quantity must be positive

Search by brand Nestle:
Brand: Nestle, category: Milk, Price: 60, Quantity: 15
Brand: Nestle, category: Curd, Price: 90, Quantity: 10

Search by category Milk:
Brand: Nestle, category: Milk, Price: 60, Quantity: 15
Brand: Amul, category: Milk, Price: 100, Quantity: 20

Search by category Milk ordered by price descending:
Brand: Amul, category: Milk, Price: 100, Quantity: 20
Brand: Nestle, category: Milk, Price: 60, Quantity: 15

Search by price range 70 to 100:
Brand: Nestle, category: Curd, Price: 90, Quantity: 10
Brand: Amul, category: Milk, Price: 100, Quantity: 20

Search non-existent category:
"""


def test_demo_transcript(capsys):
    demo.main()
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_demo_leaves_manager_stocked(capsys):
    manager = InventoryManager()
    demo.run_demo(manager)

    assert len(manager) == 4
    assert manager.get_item("milk", "amul").quantity == 20
    assert manager.get_item("Milk", "Amul").price == 100
