"""
Puerto de salida: Escritor de exportaciones.

Define el contrato para exportar un mes del ledger a un archivo
independiente de la planilla (para mandarlo al contador, archivarlo, etc.).

El motor solo entrega un MonthSummary y la lista de DayRecord del mes;
el formato del archivo lo decide el adaptador (hoy, ExcelWriter).
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ledger_bot.domain.models.day_record import DayRecord
from ledger_bot.domain.models.month_summary import MonthSummary


class OutputWriter(ABC):
    """Interfaz para exportar un mes del ledger."""

    @abstractmethod
    def write_month(
        self, summary: MonthSummary, records: list[DayRecord], output_path: Path
    ) -> Path:
        """Escribe el resumen y los días de un mes.

        Corresponde al layout: Hoja 1 = Resumo, Hoja 2 = Dias.

        Args:
            summary: Totales del mes.
            records: Un DayRecord por día del mes, en orden.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...
