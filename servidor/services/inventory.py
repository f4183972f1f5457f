"""Coleccion en memoria de items indexada por ID."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from parametros import EMPTY_REPORT_TEXT, REPORT_HEADER, REPORT_SEPARATOR
from servidor.domain.models import InventoryItem
from shared.errors import DuplicateIdentifierError, ItemNotFoundError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InventoryReport:
    """Descripciones de todos los items en orden de insercion."""

    entries: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        """Indica si el inventario no tenia items al generar el reporte."""
        return not self.entries

    def render(self) -> str:
        """Construye el texto del reporte o el aviso de inventario vacio."""
        if self.is_empty:
            return EMPTY_REPORT_TEXT

        lines = [REPORT_HEADER]
        for entry in self.entries:
            lines.append(entry)
            lines.append(REPORT_SEPARATOR)
        return "\n".join(lines)


class Inventory:
    """Administra items con ID unico preservando el orden de insercion.

    El inventario es dueño exclusivo de los items almacenados: ``find_item``
    entrega una referencia prestada que deja de pertenecer a la coleccion una
    vez que ``remove_item`` la retorna al llamador.
    """

    def __init__(self) -> None:
        # dict conserva orden de insercion; sirve como indice y como secuencia.
        self._items: dict[str, InventoryItem] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(self._items.values())

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def add_item(self, item: InventoryItem) -> None:
        """Agrega un item al final; rechaza IDs ya registrados."""
        if not self.is_id_unique(item.item_id):
            LOGGER.warning("Item rechazado por ID duplicado: %s", item.item_id)
            raise DuplicateIdentifierError(item.item_id)

        self._items[item.item_id] = item
        LOGGER.info("Item agregado: id=%s, total=%d", item.item_id, len(self._items))

    def is_id_unique(self, item_id: str) -> bool:
        """Retorna True si ningun item almacenado usa ese ID."""
        return item_id not in self._items

    def find_item(self, item_id: str) -> InventoryItem | None:
        """Busca un item por ID exacto."""
        return self._items.get(item_id)

    def remove_item(self, item_id: str) -> InventoryItem:
        """Elimina el item y lo retorna al llamador."""
        try:
            item = self._items.pop(item_id)
        except KeyError as exc:
            LOGGER.warning("No se pudo eliminar, ID inexistente: %s", item_id)
            raise ItemNotFoundError(item_id) from exc

        LOGGER.info("Item eliminado: id=%s, total=%d", item_id, len(self._items))
        return item

    def update_item_stock(self, item_id: str, new_stock: int) -> InventoryItem:
        """Sobrescribe el stock del item indicado."""
        item = self.find_item(item_id)
        if item is None:
            LOGGER.warning("No se pudo actualizar stock, ID inexistente: %s", item_id)
            raise ItemNotFoundError(item_id)

        item.set_stock(new_stock)
        LOGGER.info("Stock actualizado: id=%s, stock=%d", item_id, new_stock)
        return item

    def iter_descriptions(self) -> Iterator[str]:
        """Genera la descripcion de cada item en orden de insercion."""
        for item in self._items.values():
            yield item.describe()

    def generate_report(self) -> InventoryReport:
        """Genera el reporte completo del inventario."""
        return InventoryReport(entries=tuple(self.iter_descriptions()))
