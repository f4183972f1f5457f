"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class DuplicateIdentifierError(ServiceError):
    """Se intento agregar un item con un ID ya registrado."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item ID {item_id} already exists. Please use a unique ID.")
        self.item_id = item_id


class ItemNotFoundError(ServiceError):
    """No existe un item con el ID indicado."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item with ID {item_id} not found in the inventory.")
        self.item_id = item_id
