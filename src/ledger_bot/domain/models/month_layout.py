"""
Modelo de dominio: Disposición de la planilla por mes.

La planilla tiene UNA hoja para el año, con un bloque de 6 columnas por
mes y una fila por día:

    JANEIRO:   filas 6-36, columnas B-F (G separador)
    FEVEREIRO: filas 6-33/34, columnas H-L (desplazamiento 6)
    MARÇO:     filas 6-36, columnas N-R (desplazamiento 12)
    ABRIL:     filas 6-35, columnas T-X (desplazamiento 18)
    ...

Las coordenadas se derivan siempre de (campo, día, mes, año); nunca se
guardan.
"""

from dataclasses import dataclass

from ledger_bot.domain.shared.a1_notation import column_to_letter


@dataclass(frozen=True)
class LedgerCoordinate:
    """Una celda del ledger: columna base 0 (A = 0) y fila base 1."""

    column: int
    row: int

    @property
    def a1(self) -> str:
        """Referencia en notación A1. Ejemplo: (2, 6) → 'C6'."""
        return f"{column_to_letter(self.column)}{self.row}"

    def __str__(self) -> str:
        return self.a1


@dataclass(frozen=True)
class CoordinateRange:
    """Rango rectangular de celdas, de `start` a `end` inclusive."""

    start: LedgerCoordinate
    end: LedgerCoordinate

    @property
    def a1(self) -> str:
        """Rango en notación A1. Ejemplo: 'C6:F6'."""
        return f"{self.start.a1}:{self.end.a1}"

    @property
    def width(self) -> int:
        return self.end.column - self.start.column + 1

    @property
    def height(self) -> int:
        return self.end.row - self.start.row + 1

    def __str__(self) -> str:
        return self.a1


@dataclass(frozen=True)
class MonthLayout:
    """Configuración derivada de la planilla para un (mes, año)."""

    month: int
    year: int

    first_row: int
    """Fila del día 1. Es la misma para todos los meses."""

    column_block_offset: int
    """Desplazamiento de columnas del bloque: (mes - 1) * 6."""

    last_valid_day: int
    """Último día del mes (28, 29, 30 o 31)."""

    @property
    def last_row(self) -> int:
        """Fila del último día del mes."""
        return self.first_row + self.last_valid_day - 1

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Mes fuera de rango: {self.month}. Debe ser 1-12.")
        if not 28 <= self.last_valid_day <= 31:
            raise ValueError(f"Último día fuera de rango: {self.last_valid_day}")
