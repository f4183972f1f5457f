"""Utilidades para renderizar items de inventario como texto."""

from __future__ import annotations

from parametros import CURRENCY_SYMBOL, PRICE_DECIMALS


def format_price(amount: float) -> str:
    """Formatea un monto con simbolo de moneda y dos decimales."""
    return f"{CURRENCY_SYMBOL}{amount:.{PRICE_DECIMALS}f}"


def build_item_lines(item_id: str, name: str, price: float, stock: int) -> list[str]:
    """Construye las lineas ``Campo: valor`` comunes a todo item."""
    return [
        f"Item ID: {item_id}",
        f"Name: {name}",
        f"Price: {format_price(price)}",
        f"Stock: {stock}",
    ]


def build_product_lines(description: str, supplier: str) -> list[str]:
    """Construye las lineas adicionales de un producto."""
    return [
        f"Description: {description}",
        f"Supplier: {supplier}",
    ]


def join_lines(lines: list[str]) -> str:
    """Une lineas de descripcion en un bloque de texto."""
    return "\n".join(lines)
