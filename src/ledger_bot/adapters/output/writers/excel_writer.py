"""
Adaptador de salida: Escritor de Excel.

Exporta un mes del ledger a un archivo Excel independiente con el layout
estándar de 2 hojas:
- Hoja 1 (Resumo): Totales del mes, saída total, performance y media.
- Hoja 2 (Dias): Una fila por día con entrada, saída, diário y saldo.

La planilla del ledger tiene los 12 meses lado a lado y fórmulas en las
filas de totales; este archivo es plano, pensado para mandarlo a otra
persona o cargarlo en otra herramienta. Se genera con xlsxwriter a
través de pandas.
"""

from pathlib import Path

import pandas as pd

from ledger_bot.domain.exceptions import OutputError
from ledger_bot.domain.models.day_record import DayRecord
from ledger_bot.domain.models.month_summary import MonthSummary
from ledger_bot.domain.ports.output_writer import OutputWriter
from ledger_bot.domain.shared.month_map import month_label


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write_month(
        self, summary: MonthSummary, records: list[DayRecord], output_path: Path
    ) -> Path:
        """Escribe un mes del ledger a Excel.

        Args:
            summary: Totales del mes.
            records: Un DayRecord por día, en orden.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        # Asegurar extensión .xlsx
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            # Crear directorio si no existe
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(summary, records, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(
        self, summary: MonthSummary, records: list[DayRecord], output_path: Path
    ) -> None:
        # --- Construir datos de Dias ---
        filas_dias = [
            {
                "Data": record.day.strftime("%d/%m/%Y"),
                "Entrada": float(record.entrada),
                "Saída": float(record.saida),
                "Diário": float(record.diario),
                "Saldo": float(record.saldo),
            }
            for record in records
        ]
        df_dias = pd.DataFrame(
            filas_dias, columns=["Data", "Entrada", "Saída", "Diário", "Saldo"]
        )

        # --- Construir datos de Resumo ---
        df_resumo = pd.DataFrame(
            [
                {
                    "Mês": month_label(summary.month, summary.year),
                    "Entradas": float(summary.total_entradas),
                    "Saídas": float(summary.total_saidas),
                    "Diário": float(summary.total_diario),
                    "Saída Total": float(summary.saida_total),
                    "Performance": float(summary.performance),
                    "Dias com registros": summary.dias_com_dados,
                    "Média diária": float(summary.media_diaria),
                }
            ]
        )

        # --- Escribir Excel con xlsxwriter ---
        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            # Hoja 1: Resumo
            df_resumo.to_excel(writer, index=False, sheet_name="Resumo")

            # Hoja 2: Dias
            df_dias.to_excel(writer, index=False, sheet_name="Dias")

            # --- Aplicar formato ---
            workbook = writer.book
            ws_resumo = writer.sheets["Resumo"]
            ws_dias = writer.sheets["Dias"]

            # Formato para montos en reales
            money_format = workbook.add_format({"num_format": '"R$" #,##0.00'})

            # --- Formato Hoja Resumo ---
            ws_resumo.set_column("A:A", 16)  # Mês
            ws_resumo.set_column("B:F", 16, money_format)  # Totales
            ws_resumo.set_column("G:G", 18)  # Dias com registros
            ws_resumo.set_column("H:H", 16, money_format)  # Média

            # --- Formato Hoja Dias ---
            ws_dias.set_column("A:A", 12)  # Data
            ws_dias.set_column("B:E", 15, money_format)  # Montos
