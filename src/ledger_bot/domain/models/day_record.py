"""
Modelo de dominio: Registro de un día y resumen de un periodo de días.

Un DayRecord son las 4 columnas de valor de una fila de la planilla
(entrada, saída, diário, saldo). Celdas vacías o ilegibles valen 0.

Un PeriodSummary agrupa varios días consecutivos (el reporte semanal).
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class DayRecord:
    """Valores de un día del ledger."""

    day: date
    entrada: Decimal = ZERO
    saida: Decimal = ZERO
    diario: Decimal = ZERO
    saldo: Decimal = ZERO
    """Saldo del día. Lo calcula la propia planilla (fórmula); el bot
    nunca lo escribe."""

    @property
    def has_data(self) -> bool:
        """Un día "tiene datos" si alguna de las columnas editables es distinta de 0.

        El saldo no cuenta: es acumulado y casi nunca es 0.
        """
        return self.entrada != ZERO or self.saida != ZERO or self.diario != ZERO


@dataclass(frozen=True)
class PeriodSummary:
    """Totales de un periodo de días consecutivos, del más antiguo al más reciente."""

    start: date
    end: date
    days: list[DayRecord] = field(default_factory=list)

    @property
    def total_entradas(self) -> Decimal:
        return sum((d.entrada for d in self.days), ZERO)

    @property
    def total_saidas(self) -> Decimal:
        return sum((d.saida for d in self.days), ZERO)

    @property
    def total_diario(self) -> Decimal:
        return sum((d.diario for d in self.days), ZERO)

    @property
    def saldo_final(self) -> Decimal:
        """Saldo del día más reciente. No se suma: el saldo ya es acumulado."""
        if not self.days:
            return ZERO
        return self.days[-1].saldo

    @property
    def num_days(self) -> int:
        return (self.end - self.start).days + 1

    @property
    def media_diaria(self) -> Decimal:
        """(entradas + saídas + diário) / días del periodo."""
        total = self.total_entradas + self.total_saidas + self.total_diario
        return total / Decimal(self.num_days)
