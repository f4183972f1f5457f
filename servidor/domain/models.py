"""Modelos de dominio de inventario."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from parametros import ITEM_ID_LENGTH
from servidor.services.inventory_utils import (
    build_item_lines,
    build_product_lines,
    join_lines,
)
from shared.errors import ValidationError


def _validated_value(field_name: str, value: Any) -> Any:
    """Valida un campo comun de item y retorna el valor normalizado."""
    if field_name == "item_id":
        if not isinstance(value, str) or len(value) != ITEM_ID_LENGTH:
            raise ValidationError(
                f"Item ID must be exactly {ITEM_ID_LENGTH} characters long: {value!r}"
            )
        return value

    if field_name == "name":
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("Name must be a non-empty string.")
        return value

    if field_name == "price":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f"Price must be a number: {value!r}")
        if not math.isfinite(value) or value < 0:
            raise ValidationError(f"Price must be a finite non-negative number: {value}")
        return float(value)

    if field_name == "stock":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"Stock must be an integer: {value!r}")
        if value < 0:
            raise ValidationError(f"Stock must be non-negative: {value}")
        return value

    return value


def _guarded_setattr(instance: Any, field_name: str, value: Any) -> None:
    """Aplica invariantes en cada asignacion; el ID no se puede reasignar."""
    if field_name == "item_id" and hasattr(instance, "item_id"):
        raise AttributeError("item_id is immutable once the item is created")
    object.__setattr__(instance, field_name, _validated_value(field_name, value))


class StockRecordMixin:
    """Mutadores compartidos por todos los tipos de item."""

    __slots__ = ()

    __setattr__ = _guarded_setattr

    def set_stock(self, new_stock: int) -> None:
        self.stock = new_stock

    def set_name(self, new_name: str) -> None:
        self.name = new_name

    def set_price(self, new_price: float) -> None:
        self.price = new_price


@dataclass(slots=True)
class Item(StockRecordMixin):
    """Representa un item basico en inventario."""

    item_id: str
    name: str
    price: float
    stock: int

    def describe(self) -> str:
        """Retorna ID, nombre, precio y stock en lineas ``Campo: valor``."""
        return join_lines(build_item_lines(self.item_id, self.name, self.price, self.stock))


@dataclass(slots=True)
class Product(StockRecordMixin):
    """Item con descripcion y proveedor."""

    item_id: str
    name: str
    price: float
    description: str
    supplier: str
    stock: int

    def describe(self) -> str:
        """Retorna los campos de item seguidos de descripcion y proveedor."""
        lines = build_item_lines(self.item_id, self.name, self.price, self.stock)
        lines.extend(build_product_lines(self.description, self.supplier))
        return join_lines(lines)


InventoryItem = Item | Product
