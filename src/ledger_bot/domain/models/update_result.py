"""
Modelo de dominio: Resultado de una actualización de celda.

Es lo que devuelve LedgerEngine.apply_update. Nunca se lanza una
excepción hacia el dispatcher: los fallos vienen como un UpdateResult con
success=False, el tipo de falla y un mensaje listo para el chat.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class FailureKind(Enum):
    """Motivo por el que una actualización no se aplicó."""

    INVALID_DAY = "invalid_day"
    INVALID_AMOUNT = "invalid_amount"
    STORAGE = "storage"


@dataclass(frozen=True)
class UpdateResult:
    """Resultado de sumar o sustituir un monto en una celda del ledger."""

    success: bool
    message: str
    """Texto para el usuario (confirmación o error)."""

    day: date | None = None
    delta: Decimal | None = None
    """Monto aplicado (el que escribió el usuario)."""

    total: Decimal | None = None
    """Valor final de la celda después de la actualización."""

    cell: str | None = None
    """Celda modificada en notación A1. Útil para la bitácora."""

    replaced: bool = False
    failure: FailureKind | None = None

    def __post_init__(self) -> None:
        if self.success and self.failure is not None:
            raise ValueError("Un resultado exitoso no puede tener failure")
        if not self.success and self.failure is None:
            raise ValueError("Un resultado fallido requiere failure")
