"""Menu de consola del inventario."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TextIO, TypeVar

from cliente.backend.controller import InventoryController
from cliente.backend.validators import (
    parse_non_negative_float,
    parse_non_negative_int,
    validate_alphabetic,
    validate_item_id,
)
from cliente.frontend.dialogs import show_error, show_info, show_result
from parametros import ITEM_ID_LENGTH, MENU_OPTIONS, MENU_TITLE
from shared.errors import ValidationError
from shared.protocol import ProductDraft, StockUpdateRequest

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

EXIT_OPTION = "6"


class ConsoleMenu:
    """Loop interactivo que traduce opciones del menu a acciones del controlador."""

    def __init__(
        self,
        controller: InventoryController,
        input_stream: TextIO,
        output_stream: TextIO,
    ) -> None:
        self._controller = controller
        self._input = input_stream
        self._output = output_stream
        self._actions: dict[str, Callable[[], None]] = {
            "1": self._add_product,
            "2": self._remove_item,
            "3": self._generate_report,
            "4": self._view_item,
            "5": self._update_stock,
        }

    def run(self) -> None:
        """Muestra el menu hasta elegir salir o agotar la entrada."""
        try:
            while True:
                self._display_menu()
                choice = self._read("Select an option: ").strip()
                if choice == EXIT_OPTION:
                    result = self._controller.on_exit()
                    show_info(self._output, result.message)
                    return

                action = self._actions.get(choice)
                if action is None:
                    show_error(self._output, "Invalid option. Please try again.")
                    continue
                action()
        except EOFError:
            LOGGER.info("Entrada agotada, se cierra el menu.")

    def _display_menu(self) -> None:
        lines = [MENU_TITLE]
        lines.extend(f"{key}. {label}" for key, label in MENU_OPTIONS)
        show_info(self._output, "\n".join(lines))

    def _read(self, prompt: str) -> str:
        """Escribe el prompt y lee una linea; EOFError si no hay mas entrada."""
        self._output.write(prompt)
        self._output.flush()
        line = self._input.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def _prompt_valid(self, prompt: str, parser: Callable[[str], T]) -> T:
        """Repite el prompt hasta que el parser acepte la entrada."""
        while True:
            raw_value = self._read(prompt)
            try:
                return parser(raw_value)
            except ValidationError as exc:
                show_error(self._output, str(exc))

    def _add_product(self) -> None:
        item_id = self._prompt_valid(
            f"Enter item ID ({ITEM_ID_LENGTH} characters): ",
            validate_item_id,
        )
        if not self._controller.is_id_available(item_id):
            result = self._controller.duplicate_id_result(item_id)
            show_error(self._output, result.message)
            return

        draft = ProductDraft(
            item_id=item_id,
            name=self._prompt_valid(
                "Enter product name (alphabetic characters only): ",
                validate_alphabetic,
            ),
            price=self._prompt_valid(
                "Enter product price (non-negative number): ",
                parse_non_negative_float,
            ),
            description=self._prompt_valid(
                "Enter product description (alphabetic characters only): ",
                validate_alphabetic,
            ),
            supplier=self._prompt_valid(
                "Enter supplier name (alphabetic characters only): ",
                validate_alphabetic,
            ),
            stock=self._prompt_valid(
                "Enter initial stock quantity (non-negative integer): ",
                parse_non_negative_int,
            ),
        )
        result = self._controller.on_add_product(draft)
        show_result(self._output, result.ok, result.message)

    def _remove_item(self) -> None:
        item_id = self._read("Enter item ID to remove: ").strip()
        result = self._controller.on_remove_item(item_id)
        show_result(self._output, result.ok, result.message)

    def _generate_report(self) -> None:
        report = self._controller.on_generate_report()
        show_info(self._output, report.render())

    def _view_item(self) -> None:
        item_id = self._read("Enter item ID to view: ").strip()
        result = self._controller.on_view_item(item_id)
        show_result(self._output, result.ok, result.message)

    def _update_stock(self) -> None:
        item_id = self._read("Enter item ID to update stock: ").strip()
        new_stock = self._prompt_valid("Enter new stock quantity: ", parse_non_negative_int)
        result = self._controller.on_update_stock(
            StockUpdateRequest(item_id=item_id, new_stock=new_stock)
        )
        show_result(self._output, result.ok, result.message)
