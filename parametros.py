"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
import os

ITEM_ID_LENGTH = 4
CURRENCY_SYMBOL = "$"
PRICE_DECIMALS = 2

REPORT_HEADER = "=== Inventory Report ==="
REPORT_SEPARATOR = "---------------------"
EMPTY_REPORT_TEXT = "No items in inventory."

MENU_TITLE = "=== Inventory Management System Menu ==="
MENU_OPTIONS: tuple[tuple[str, str], ...] = (
    ("1", "Add Product"),
    ("2", "Remove Item"),
    ("3", "Generate Inventory Report"),
    ("4", "View Item by ID"),
    ("5", "Update Item Stock"),
    ("6", "Exit"),
)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL = os.environ.get("INVENTARIO_LOG_LEVEL", "WARNING").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
)
