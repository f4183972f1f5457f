"""Validaciones para entradas del cliente."""

from __future__ import annotations

import math

from parametros import ITEM_ID_LENGTH
from shared.errors import ValidationError


def validate_item_id(raw_value: str) -> str:
    """Valida que el ID tenga exactamente el largo requerido."""
    item_id = raw_value.strip()
    if len(item_id) != ITEM_ID_LENGTH or any(char.isspace() for char in item_id):
        raise ValidationError(
            f"Invalid input. Item ID must be exactly {ITEM_ID_LENGTH} characters long."
        )
    return item_id


def validate_alphabetic(raw_value: str) -> str:
    """Valida texto compuesto solo por letras."""
    text = raw_value.strip()
    if not text.isalpha():
        raise ValidationError("Invalid input. Please enter alphabetic characters only.")
    return text


def parse_non_negative_int(raw_value: str) -> int:
    """Convierte texto a entero no negativo."""
    try:
        value = int(raw_value.strip())
    except ValueError as exc:
        raise ValidationError("Invalid input. Please enter a non-negative integer.") from exc

    if value < 0:
        raise ValidationError("Invalid input. Please enter a non-negative integer.")
    return value


def parse_non_negative_float(raw_value: str) -> float:
    """Convierte texto a numero decimal no negativo."""
    try:
        value = float(raw_value.strip())
    except ValueError as exc:
        raise ValidationError("Invalid input. Please enter a non-negative number.") from exc

    if not math.isfinite(value) or value < 0:
        raise ValidationError("Invalid input. Please enter a non-negative number.")
    return value
