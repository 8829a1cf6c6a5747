"""
Adaptador de salida: Planilla en memoria.

Implementación de SheetStorage sobre un diccionario celda → texto.

Útil para:
- Tests del motor y del dispatcher (sin archivos ni red).
- Probar comandos desde la terminal sin tocar la planilla real
  (`ledger-bot send ... ` sin --workbook).

Cuenta las lecturas para poder verificar cuántas veces un reporte va
a la planilla.
"""

import threading

from ledger_bot.domain.exceptions import StorageError
from ledger_bot.domain.ports.sheet_storage import SheetStorage
from ledger_bot.domain.shared.a1_notation import column_to_letter, split_cell, split_range


class InMemorySheetStorage(SheetStorage):
    """Planilla guardada en un dict {'C6': 'R$ 10,00', ...}."""

    def __init__(self, cells: dict[str, str] | None = None) -> None:
        self._cells: dict[str, str] = {}
        self._lock = threading.Lock()
        self.read_count: int = 0
        self.write_count: int = 0
        for a1, text in (cells or {}).items():
            self._cells[self._normalize(a1, "init")] = text

    def read_cell(self, a1: str) -> str:
        key = self._normalize(a1, "read_cell")
        with self._lock:
            self.read_count += 1
            return self._cells.get(key, "")

    def write_cell(self, a1: str, text: str) -> None:
        key = self._normalize(a1, "write_cell")
        with self._lock:
            self.write_count += 1
            self._cells[key] = text

    def read_range(self, a1_range: str) -> list[list[str]]:
        try:
            (col_ini, fila_ini), (col_fin, fila_fin) = split_range(a1_range)
        except ValueError as e:
            raise StorageError("read_range", a1_range, str(e))

        with self._lock:
            self.read_count += 1
            return [
                [
                    self._cells.get(f"{column_to_letter(col)}{fila}", "")
                    for col in range(col_ini, col_fin + 1)
                ]
                for fila in range(fila_ini, fila_fin + 1)
            ]

    def batch_read(self, cells: list[str]) -> dict[str, str]:
        keys = {a1: self._normalize(a1, "batch_read") for a1 in cells}
        with self._lock:
            self.read_count += 1
            return {a1: self._cells.get(key, "") for a1, key in keys.items()}

    def snapshot(self) -> dict[str, str]:
        """Copia de todas las celdas no vacías."""
        with self._lock:
            return {k: v for k, v in self._cells.items() if v != ""}

    @staticmethod
    def _normalize(a1: str, operation: str) -> str:
        """'c6' → 'C6'. Referencias inválidas son StorageError, como en cualquier backend."""
        try:
            col, fila = split_cell(a1)
        except (ValueError, AttributeError) as e:
            raise StorageError(operation, str(a1), str(e))
        return f"{column_to_letter(col)}{fila}"
