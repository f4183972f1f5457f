"""DTOs entre la consola y el controlador."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ProductDraft:
    """DTO con los campos ya validados para crear un producto."""

    item_id: str
    name: str
    price: float
    description: str
    supplier: str
    stock: int


@dataclass(slots=True)
class StockUpdateRequest:
    """Solicitud para sobrescribir el stock de un item."""

    item_id: str
    new_stock: int


@dataclass(slots=True)
class ActionResult:
    """Resultado de una accion del menu listo para mostrar."""

    ok: bool
    message: str
