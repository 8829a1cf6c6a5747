"""
Modelo de dominio: Comando parseado.

Un ParsedCommand es el resultado de interpretar UN mensaje del chat.
Lo PRODUCE el parser y lo CONSUME el dispatcher, que decide qué
operación del motor ejecutar.

Decisiones de diseño:
- `amount` es Decimal y solo existe para los intents de actualización.
- `effective_date` siempre existe: si el mensaje no trae fecha, es "hoy"
  en horario de Brasilia.
- `target_date` solo existe para "saldo <fecha>".
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ledger_bot.domain.models.intent import Intent


@dataclass(frozen=True)
class ParsedCommand:
    """Comando reconocido en un mensaje del chat."""

    intent: Intent
    """Tipo de comando. UNRECOGNIZED si ninguna regla coincidió."""

    effective_date: date
    """Día al que aplica el comando (hoy si no se indicó fecha)."""

    raw_text: str
    """Mensaje original, para diagnóstico y para la respuesta de la IA."""

    amount: Decimal | None = None
    """Monto a sumar o sustituir. Solo para ADD_ENTRADA/ADD_SAIDA/ADD_DIARIO."""

    target_date: date | None = None
    """Día consultado en "saldo 16/12". Solo para QUERY_SALDO_DATE."""

    replace: bool = False
    """True si el mensaje empezaba con "sub" (sustituir en vez de sumar).
    No tiene efecto en los intents de consulta."""

    def __post_init__(self) -> None:
        """Validaciones de los invariantes del comando."""
        if self.intent.is_update:
            if self.amount is None:
                raise ValueError(f"{self.intent.name} requiere un monto")
            if self.amount < Decimal("0"):
                raise ValueError(f"El monto no puede ser negativo: {self.amount}")
        elif self.amount is not None:
            raise ValueError(f"{self.intent.name} no admite monto (recibió {self.amount})")

        if self.intent is Intent.QUERY_SALDO_DATE:
            if self.target_date is None:
                raise ValueError("QUERY_SALDO_DATE requiere target_date")
        elif self.target_date is not None:
            raise ValueError(f"{self.intent.name} no admite target_date")

    @property
    def is_recognized(self) -> bool:
        return self.intent is not Intent.UNRECOGNIZED
