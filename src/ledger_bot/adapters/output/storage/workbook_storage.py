"""
Adaptador de salida: Planilla en un archivo .xlsx (openpyxl + pycel).

Implementación de SheetStorage sobre un libro de Excel local con el
layout anual del ledger (un bloque de 6 columnas por mes).

Decisiones:
- El libro se abre una sola vez (en el primer acceso) y se mantiene en
  memoria. Cada write_cell guarda el archivo inmediatamente.
- Todo acceso pasa por un lock: openpyxl no es thread-safe y
  compare_report lee dos meses en paralelo.
- Un monto "R$ 1.234,56" se guarda como número con formato de reales,
  para que los SUM de las filas de totales lo cuenten. Las celdas
  numéricas se devuelven como texto "R$ 1.234,56".
- Las celdas con fórmula (los totales de las filas 40 y 43) se calculan
  al leerlas con pycel sobre el archivo guardado. openpyxl no recalcula
  ni guarda valores calculados, así que el valor que dejó Excel en el
  archivo queda viejo en cuanto el bot escribe una celda.
- Cualquier falla de archivo, de openpyxl o de pycel se convierte en
  StorageError.
"""

import numbers
import threading
import zipfile
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from pycel import ExcelCompiler

from ledger_bot.domain.exceptions import StorageError
from ledger_bot.domain.ports.sheet_storage import SheetStorage
from ledger_bot.domain.shared.a1_notation import column_to_letter, split_cell, split_range
from ledger_bot.domain.shared.money import format_brl, parse_money

MONEY_NUMBER_FORMAT = '"R$" #,##0.00'


class WorkbookSheetStorage(SheetStorage):
    """Lee y escribe celdas de una hoja de un libro .xlsx."""

    def __init__(self, workbook_path: Path, sheet_name: str | None = None) -> None:
        """
        Args:
            workbook_path: Ruta del .xlsx del ledger.
            sheet_name: Hoja del ledger. None = la hoja activa del libro.
        """
        self._path = Path(workbook_path)
        self._sheet_name = sheet_name
        self._lock = threading.Lock()
        self._workbook = None
        self._sheet = None
        self._compiler = None

    @property
    def path(self) -> Path:
        return self._path

    # =================================================================
    # SheetStorage
    # =================================================================

    def read_cell(self, a1: str) -> str:
        with self._lock:
            self._ensure_open("read_cell", a1)
            col, fila = self._coords("read_cell", a1)
            return self._text_at(fila, col)

    def write_cell(self, a1: str, text: str) -> None:
        with self._lock:
            self._ensure_open("write_cell", a1)
            col, fila = self._coords("write_cell", a1)
            try:
                cell = self._sheet.cell(row=fila, column=col + 1, value=_cell_value(text))
                if isinstance(cell.value, float):
                    cell.number_format = MONEY_NUMBER_FORMAT
                self._workbook.save(self._path)
            except (OSError, ValueError, TypeError) as e:
                raise StorageError("write_cell", a1, str(e))
            # Las fórmulas se recalculan desde el archivo recién guardado
            self._compiler = None

    def read_range(self, a1_range: str) -> list[list[str]]:
        with self._lock:
            self._ensure_open("read_range", a1_range)
            try:
                (col_ini, fila_ini), (col_fin, fila_fin) = split_range(a1_range)
            except ValueError as e:
                raise StorageError("read_range", a1_range, str(e))

            return [
                [self._text_at(fila, col) for col in range(col_ini, col_fin + 1)]
                for fila in range(fila_ini, fila_fin + 1)
            ]

    def batch_read(self, cells: list[str]) -> dict[str, str]:
        with self._lock:
            self._ensure_open("batch_read", ", ".join(cells))
            resultado: dict[str, str] = {}
            for a1 in cells:
                col, fila = self._coords("batch_read", a1)
                resultado[a1] = self._text_at(fila, col)
            return resultado

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _ensure_open(self, operation: str, target: str) -> None:
        """Abre el libro en el primer acceso. Debe llamarse con el lock tomado."""
        if self._workbook is not None:
            return

        if not self._path.exists():
            raise StorageError(operation, target, f"No existe el libro: {self._path}")

        try:
            workbook = load_workbook(self._path)
        except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as e:
            raise StorageError(operation, str(self._path), f"No se pudo abrir el libro: {e}")

        if self._sheet_name is None:
            sheet = workbook.active
        elif self._sheet_name in workbook.sheetnames:
            sheet = workbook[self._sheet_name]
        else:
            raise StorageError(
                operation,
                target,
                f"La hoja '{self._sheet_name}' no existe. "
                f"Hojas disponibles: {workbook.sheetnames}",
            )

        self._workbook = workbook
        self._sheet = sheet

    @staticmethod
    def _coords(operation: str, a1: str) -> tuple[int, int]:
        try:
            return split_cell(a1)
        except (ValueError, AttributeError) as e:
            raise StorageError(operation, str(a1), str(e))

    def _text_at(self, fila: int, col: int) -> str:
        """Texto de una celda (fila base 1, columna base 0)."""
        value = self._sheet.cell(row=fila, column=col + 1).value
        if isinstance(value, str) and value.startswith("="):
            value = self._evaluate(f"{column_to_letter(col)}{fila}")
        return _render(value)

    def _evaluate(self, a1: str):
        """Calcula una celda con fórmula a partir del archivo guardado."""
        address = f"{self._sheet.title}!{a1}"
        try:
            if self._compiler is None:
                self._compiler = ExcelCompiler(filename=str(self._path))
            return self._compiler.evaluate(address)
        except Exception as e:
            raise StorageError("evaluate", address, f"No se pudo calcular la fórmula: {e}")


def _cell_value(text: str):
    """Texto del motor → valor de celda: los montos van como número."""
    try:
        return float(parse_money(text))
    except (ValueError, TypeError):
        return text


def _render(value) -> str:
    """Valor de openpyxl / pycel → texto como lo mostraría la planilla."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, numbers.Real):
        return format_brl(Decimal(str(value)))
    if isinstance(value, (datetime, date)):
        return value.strftime("%d/%m/%Y")
    return str(value)
