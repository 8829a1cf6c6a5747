"""
Direccionamiento del ledger: (campo, día, mes, año) → celda.

La planilla es UNA hoja con un bloque de 6 columnas por mes:

    Mes        Desplazamiento   Dia  Entrada  Saída  Diário  Saldo
    Janeiro          0           B      C       D      E       F
    Fevereiro        6           H      I       J      K       L
    Março           12           N      O       P      Q       R
    ...
    Dezembro        66          BP     BQ      BR     BS      BT

Filas:
    6..36  → días 1..31 (fila = 6 + día - 1)
    40     → totales del mes: Entrada (+2), Saída (+3), Diário (+4)
    43     → Saída total (+1) y Performance (+4)

Todas las funciones son puras: no leen la planilla ni el reloj.
"""

import calendar

from ledger_bot.domain.exceptions import InvalidDayError
from ledger_bot.domain.models.intent import LedgerField
from ledger_bot.domain.models.month_layout import (
    CoordinateRange,
    LedgerCoordinate,
    MonthLayout,
)

FIRST_ROW = 6
BLOCK_WIDTH = 6
TOTALS_ROW = 40
PERFORMANCE_ROW = 43

# Claves de totals_coordinates()
TOTAL_ENTRADAS = "entradas"
TOTAL_SAIDAS = "saidas"
TOTAL_DIARIO = "diario"
SAIDA_TOTAL = "saida_total"
PERFORMANCE = "performance"


def last_valid_day(month: int, year: int) -> int:
    """Último día del mes según el calendario gregoriano.

    Ejemplos:
        >>> last_valid_day(2, 2024)
        29
        >>> last_valid_day(2, 2023)
        28
        >>> last_valid_day(4, 2026)
        30
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Mes fuera de rango: {month}. Debe ser 1-12.")
    return calendar.monthrange(year, month)[1]


def layout_for(month: int, year: int) -> MonthLayout:
    """Construye la disposición del bloque de un mes.

    Raises:
        ValueError: Si el mes no está entre 1 y 12.
    """
    return MonthLayout(
        month=month,
        year=year,
        first_row=FIRST_ROW,
        column_block_offset=(month - 1) * BLOCK_WIDTH,
        last_valid_day=last_valid_day(month, year),
    )


def coordinate_for(field: LedgerField, day: int, layout: MonthLayout) -> LedgerCoordinate:
    """Celda de un campo en un día del mes.

    Raises:
        InvalidDayError: Si el día es < 1 o mayor que el último día del mes.
                         Nunca se ajusta al último día válido.

    Ejemplos (enero 2026):
        entrada, día 1  → C6
        diario,  día 19 → E24
    """
    _check_day(day, layout)
    return LedgerCoordinate(
        column=layout.column_block_offset + field.column_offset,
        row=layout.first_row + day - 1,
    )


def range_for(
    fields: tuple[LedgerField, ...], day: int, layout: MonthLayout
) -> CoordinateRange:
    """Rango de una sola fila que cubre los campos indicados.

    Los campos deben ser contiguos en el bloque (ej: entrada..saldo).
    """
    if not fields:
        raise ValueError("range_for requiere al menos un campo")
    ordenados = sorted(fields, key=lambda f: f.column_offset)
    return CoordinateRange(
        start=coordinate_for(ordenados[0], day, layout),
        end=coordinate_for(ordenados[-1], day, layout),
    )


def month_range_for(
    fields: tuple[LedgerField, ...], last_day: int, layout: MonthLayout
) -> CoordinateRange:
    """Rango de las filas de los días 1..last_day para los campos indicados."""
    if not fields:
        raise ValueError("month_range_for requiere al menos un campo")
    ordenados = sorted(fields, key=lambda f: f.column_offset)
    return CoordinateRange(
        start=coordinate_for(ordenados[0], 1, layout),
        end=coordinate_for(ordenados[-1], last_day, layout),
    )


def totals_coordinates(layout: MonthLayout) -> dict[str, LedgerCoordinate]:
    """Las cinco celdas de totales que mantiene la planilla para el mes."""
    base = layout.column_block_offset
    return {
        TOTAL_ENTRADAS: LedgerCoordinate(base + 2, TOTALS_ROW),
        TOTAL_SAIDAS: LedgerCoordinate(base + 3, TOTALS_ROW),
        TOTAL_DIARIO: LedgerCoordinate(base + 4, TOTALS_ROW),
        SAIDA_TOTAL: LedgerCoordinate(base + 1, PERFORMANCE_ROW),
        PERFORMANCE: LedgerCoordinate(base + 4, PERFORMANCE_ROW),
    }


def _check_day(day: int, layout: MonthLayout) -> None:
    if day < 1 or day > layout.last_valid_day:
        raise InvalidDayError(day, layout.month, layout.year, layout.last_valid_day)
