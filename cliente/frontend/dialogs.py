"""Helpers de mensajes para la consola."""

from __future__ import annotations

from typing import TextIO


def show_info(stream: TextIO, message: str) -> None:
    """Muestra un mensaje informativo."""
    print(message, file=stream)


def show_error(stream: TextIO, message: str) -> None:
    """Muestra un mensaje de error."""
    print(message, file=stream)


def show_result(stream: TextIO, ok: bool, message: str) -> None:
    """Muestra el resultado de una accion segun su estado."""
    if ok:
        show_info(stream, message)
    else:
        show_error(stream, message)
