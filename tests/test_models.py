"""Tests para modelos de dominio."""

from __future__ import annotations

import math
import unittest

from servidor.domain.models import Item, Product, StockRecordMixin
from shared.errors import ValidationError


class ItemTests(unittest.TestCase):
    """Valida construccion, invariantes y descripcion de items."""

    def test_describe_item(self) -> None:
        """Debe renderizar ID, nombre, precio con dos decimales y stock."""
        item = Item(item_id="B100", name="Clip", price=0.25, stock=7)

        self.assertEqual(
            item.describe(),
            "Item ID: B100\nName: Clip\nPrice: $0.25\nStock: 7",
        )

    def test_price_is_stored_as_float(self) -> None:
        """Debe aceptar precios enteros y guardarlos como float."""
        item = Item(item_id="B100", name="Clip", price=3, stock=0)

        self.assertIsInstance(item.price, float)
        self.assertEqual(item.describe().splitlines()[2], "Price: $3.00")

    def test_constructor_rejects_invalid_values(self) -> None:
        """Debe fallar al construir con datos que rompen invariantes."""
        invalid_kwargs = [
            {"item_id": "A01", "name": "Pen", "price": 1.0, "stock": 1},
            {"item_id": "A0001", "name": "Pen", "price": 1.0, "stock": 1},
            {"item_id": "A001", "name": "", "price": 1.0, "stock": 1},
            {"item_id": "A001", "name": "Pen", "price": -0.01, "stock": 1},
            {"item_id": "A001", "name": "Pen", "price": math.nan, "stock": 1},
            {"item_id": "A001", "name": "Pen", "price": math.inf, "stock": 1},
            {"item_id": "A001", "name": "Pen", "price": 1.0, "stock": -1},
            {"item_id": "A001", "name": "Pen", "price": 1.0, "stock": 1.5},
            {"item_id": "A001", "name": "Pen", "price": 1.0, "stock": True},
        ]
        for kwargs in invalid_kwargs:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValidationError):
                    Item(**kwargs)

    def test_setters_mutate_in_place(self) -> None:
        """Debe actualizar nombre, precio y stock."""
        item = Item(item_id="A001", name="Pen", price=1.5, stock=100)

        item.set_name("Pencil")
        item.set_price(0.75)
        item.set_stock(0)

        self.assertEqual(item.name, "Pencil")
        self.assertEqual(item.price, 0.75)
        self.assertEqual(item.stock, 0)

    def test_setters_reject_negative_values(self) -> None:
        """Debe rechazar valores negativos sin modificar el item."""
        item = Item(item_id="A001", name="Pen", price=1.5, stock=100)

        with self.assertRaises(ValidationError):
            item.set_stock(-5)
        with self.assertRaises(ValidationError):
            item.set_price(-1.0)
        with self.assertRaises(ValidationError):
            item.set_price(float("nan"))
        with self.assertRaises(ValidationError):
            item.stock = -1

        self.assertEqual(item.stock, 100)
        self.assertEqual(item.price, 1.5)

    def test_item_id_is_immutable(self) -> None:
        """No debe permitir reasignar el ID."""
        item = Item(item_id="A001", name="Pen", price=1.5, stock=100)

        with self.assertRaises(AttributeError):
            item.item_id = "Z999"

        self.assertEqual(item.item_id, "A001")


class ProductTests(unittest.TestCase):
    """Valida el tipo de item producto."""

    def test_describe_appends_description_and_supplier(self) -> None:
        """Debe agregar descripcion y proveedor tras los campos de item."""
        product = Product(
            item_id="A001",
            name="Pen",
            price=1.5,
            description="Blue",
            supplier="Acme",
            stock=100,
        )

        self.assertEqual(
            product.describe(),
            "Item ID: A001\n"
            "Name: Pen\n"
            "Price: $1.50\n"
            "Stock: 100\n"
            "Description: Blue\n"
            "Supplier: Acme",
        )

    def test_product_enforces_item_invariants(self) -> None:
        """Debe aplicar las mismas validaciones que un item basico."""
        with self.assertRaises(ValidationError):
            Product(
                item_id="A1",
                name="Pen",
                price=1.5,
                description="Blue",
                supplier="Acme",
                stock=1,
            )

        product = Product(
            item_id="A001",
            name="Pen",
            price=1.5,
            description="Blue",
            supplier="Acme",
            stock=1,
        )
        with self.assertRaises(ValidationError):
            product.set_stock(-1)
        with self.assertRaises(AttributeError):
            product.item_id = "A002"

    def test_product_shares_item_setters(self) -> None:
        """Item y Product deben usar los mismos mutadores."""
        for name in ("set_stock", "set_name", "set_price"):
            with self.subTest(name=name):
                self.assertIs(getattr(Item, name), getattr(StockRecordMixin, name))
                self.assertIs(getattr(Product, name), getattr(StockRecordMixin, name))

        product = Product(
            item_id="A001",
            name="Pen",
            price=1.5,
            description="Blue",
            supplier="Acme",
            stock=1,
        )
        product.set_name("Marker")
        product.set_price(2)
        product.set_stock(9)

        self.assertEqual((product.name, product.price, product.stock), ("Marker", 2.0, 9))
        with self.assertRaises(ValidationError):
            product.set_price(math.inf)


if __name__ == "__main__":
    unittest.main()
