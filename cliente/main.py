"""Inicializacion de la aplicacion de consola."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from cliente.backend.controller import InventoryController
from cliente.frontend.console_menu import ConsoleMenu
from servidor.services.inventory import Inventory

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI."""
    parser = argparse.ArgumentParser(
        description="Inventario en memoria administrado desde un menu de consola."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Muestra logs de nivel INFO en stderr.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Ejecuta el menu de consola."""
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    controller = InventoryController(inventory=Inventory())
    menu = ConsoleMenu(
        controller=controller,
        input_stream=sys.stdin,
        output_stream=sys.stdout,
    )
    LOGGER.info("Aplicacion iniciada.")
    menu.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
