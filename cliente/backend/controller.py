"""Controlador principal del cliente."""

from __future__ import annotations

import logging

from servidor.domain.models import InventoryItem, Product
from servidor.services.inventory import Inventory, InventoryReport
from shared.errors import DuplicateIdentifierError, ItemNotFoundError
from shared.protocol import ActionResult, ProductDraft, StockUpdateRequest

LOGGER = logging.getLogger(__name__)


class InventoryController:
    """Coordina acciones del menu sobre el inventario."""

    def __init__(self, inventory: Inventory | None = None) -> None:
        self._inventory = inventory if inventory is not None else Inventory()

    @property
    def inventory(self) -> Inventory:
        return self._inventory

    def is_id_available(self, item_id: str) -> bool:
        """Indica si el ID puede usarse para un producto nuevo."""
        return self._inventory.is_id_unique(item_id)

    def duplicate_id_result(self, item_id: str) -> ActionResult:
        """Construye el aviso de ID duplicado para la consola."""
        return ActionResult(
            ok=False,
            message=f"Error: Item ID {item_id} already exists. Please use a unique ID.",
        )

    def on_add_product(self, draft: ProductDraft) -> ActionResult:
        """Crea un producto desde el draft y lo agrega al inventario."""
        product = Product(
            item_id=draft.item_id,
            name=draft.name,
            price=draft.price,
            description=draft.description,
            supplier=draft.supplier,
            stock=draft.stock,
        )
        try:
            self._inventory.add_item(product)
        except DuplicateIdentifierError as exc:
            return self.duplicate_id_result(exc.item_id)

        LOGGER.info("Accion ejecutada: agregar producto %s", draft.item_id)
        return ActionResult(ok=True, message="Product added successfully!")

    def on_remove_item(self, item_id: str) -> ActionResult:
        """Elimina un item por ID."""
        try:
            self._inventory.remove_item(item_id)
        except ItemNotFoundError:
            return ActionResult(
                ok=False,
                message=f"Error: Item with ID {item_id} not found in the inventory.",
            )

        return ActionResult(
            ok=True,
            message=(
                f"Item with ID {item_id} has been successfully removed from the inventory."
            ),
        )

    def on_generate_report(self) -> InventoryReport:
        """Genera el reporte del inventario."""
        LOGGER.info("Accion ejecutada: generar reporte (%d items)", len(self._inventory))
        return self._inventory.generate_report()

    def on_view_item(self, item_id: str) -> ActionResult:
        """Retorna la descripcion del item o un aviso de inexistencia."""
        item: InventoryItem | None = self._inventory.find_item(item_id)
        if item is None:
            return ActionResult(ok=False, message=f"Error: Item with ID {item_id} not found.")

        return ActionResult(ok=True, message=item.describe())

    def on_update_stock(self, request: StockUpdateRequest) -> ActionResult:
        """Sobrescribe el stock de un item existente."""
        try:
            self._inventory.update_item_stock(request.item_id, request.new_stock)
        except ItemNotFoundError:
            return ActionResult(
                ok=False,
                message=f"Error: Item with ID {request.item_id} not found in the inventory.",
            )

        return ActionResult(
            ok=True,
            message=(
                f"Stock for item ID {request.item_id} has been updated to "
                f"{request.new_stock}."
            ),
        )

    def on_exit(self) -> ActionResult:
        """Cierra la sesion de consola."""
        LOGGER.info("Accion ejecutada: salir")
        return ActionResult(ok=True, message="Exiting the program.")
