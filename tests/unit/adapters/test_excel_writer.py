"""
Tests para ledger_bot.adapters.output.writers.excel_writer

Se escribe un mes a tmp_path y se vuelve a leer con pandas.
"""

from datetime import date
from decimal import Decimal

import pandas as pd
import pytest

from ledger_bot.adapters.output.writers.excel_writer import ExcelWriter
from ledger_bot.domain.exceptions import OutputError
from ledger_bot.domain.models.day_record import DayRecord
from ledger_bot.domain.models.month_summary import MonthSummary


@pytest.fixture
def summary():
    return MonthSummary(
        month=10,
        year=2026,
        total_entradas=Decimal("5000"),
        total_saidas=Decimal("1000"),
        total_diario=Decimal("500"),
        saida_total=Decimal("1500"),
        performance=Decimal("3500"),
        dias_com_dados=2,
    )


@pytest.fixture
def records():
    dias = [DayRecord(day=date(2026, 10, d)) for d in range(1, 32)]
    dias[0] = DayRecord(day=date(2026, 10, 1), entrada=Decimal("5000"), saldo=Decimal("5000"))
    dias[4] = DayRecord(day=date(2026, 10, 5), diario=Decimal("87.10"), saldo=Decimal("4912.90"))
    return dias


class TestExcelWriter:
    def test_agrega_extension(self, tmp_path, summary, records):
        created = ExcelWriter().write_month(summary, records, tmp_path / "outubro")
        assert created.suffix == ".xlsx"
        assert created.exists()

    def test_crea_directorio(self, tmp_path, summary, records):
        destino = tmp_path / "exports" / "2026" / "outubro.xlsx"
        assert ExcelWriter().write_month(summary, records, destino) == destino
        assert destino.exists()

    def test_hoja_resumo(self, tmp_path, summary, records):
        path = ExcelWriter().write_month(summary, records, tmp_path / "outubro.xlsx")

        resumo = pd.read_excel(path, sheet_name="Resumo")
        fila = resumo.iloc[0]
        assert fila["Mês"] == "OUTUBRO/2026"
        assert fila["Saída Total"] == 1500
        assert fila["Performance"] == 3500
        assert fila["Dias com registros"] == 2
        assert fila["Média diária"] == 3250

    def test_hoja_dias(self, tmp_path, summary, records):
        path = ExcelWriter().write_month(summary, records, tmp_path / "outubro.xlsx")

        dias = pd.read_excel(path, sheet_name="Dias")
        assert list(dias.columns) == ["Data", "Entrada", "Saída", "Diário", "Saldo"]
        assert len(dias) == 31
        assert dias.iloc[0]["Data"] == "01/10/2026"
        assert dias.iloc[4]["Diário"] == pytest.approx(87.10)

    def test_destino_no_escribible(self, tmp_path, summary, records):
        bloqueo = tmp_path / "archivo"
        bloqueo.write_text("no es un directorio")
        with pytest.raises(OutputError, match="Error generando salida"):
            ExcelWriter().write_month(summary, records, bloqueo / "outubro.xlsx")
