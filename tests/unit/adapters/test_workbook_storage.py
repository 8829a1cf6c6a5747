"""
Tests para ledger_bot.adapters.output.storage.workbook_storage

Cada test arma un libro .xlsx chico en tmp_path, con valores numéricos,
textos "R$ ..." y fórmulas, como los que tiene la planilla real. Los de
openpyxl no traen valores calculados; los de xlsxwriter sí, como un libro
guardado por Excel.
"""

from datetime import date
from decimal import Decimal

import pytest
import xlsxwriter
from openpyxl import Workbook, load_workbook

from ledger_bot.adapters.output.loggers.console_logger import ConsoleLogger
from ledger_bot.adapters.output.storage.workbook_storage import (
    MONEY_NUMBER_FORMAT,
    WorkbookSheetStorage,
)
from ledger_bot.domain.exceptions import StorageError
from ledger_bot.domain.models.intent import Intent
from ledger_bot.domain.services.ledger_engine import LedgerEngine


@pytest.fixture
def workbook_path(tmp_path):
    wb = Workbook()
    ws = wb.active
    ws.title = "2026"
    ws["B6"] = 1
    ws["C6"] = 10.5
    ws["D6"] = "R$ 3,00"
    ws["E6"] = 1234
    ws["C40"] = "=SUM(C6:C36)"
    wb.create_sheet("Notas")
    path = tmp_path / "financas.xlsx"
    wb.save(path)
    return path


class TestLectura:
    def test_numero_se_lee_como_reales(self, workbook_path):
        storage = WorkbookSheetStorage(workbook_path)
        assert storage.read_cell("C6") == "R$ 10,50"
        assert storage.read_cell("E6") == "R$ 1.234,00"

    def test_texto_se_lee_igual(self, workbook_path):
        assert WorkbookSheetStorage(workbook_path).read_cell("D6") == "R$ 3,00"

    def test_celda_vacia(self, workbook_path):
        assert WorkbookSheetStorage(workbook_path).read_cell("F6") == ""

    def test_formula_se_calcula_al_leer(self, workbook_path):
        """openpyxl no guarda el valor calculado: lo calcula pycel."""
        assert WorkbookSheetStorage(workbook_path).read_cell("C40") == "R$ 10,50"

    def test_read_range(self, workbook_path):
        rows = WorkbookSheetStorage(workbook_path).read_range("C6:F7")
        assert rows == [
            ["R$ 10,50", "R$ 3,00", "R$ 1.234,00", ""],
            ["", "", "", ""],
        ]

    def test_batch_read(self, workbook_path):
        valores = WorkbookSheetStorage(workbook_path).batch_read(["C6", "D6", "Z99"])
        assert valores == {"C6": "R$ 10,50", "D6": "R$ 3,00", "Z99": ""}

    def test_hoja_por_nombre(self, workbook_path):
        storage = WorkbookSheetStorage(workbook_path, sheet_name="Notas")
        assert storage.read_cell("C6") == ""


class TestEscritura:
    def test_escribe_y_guarda(self, workbook_path):
        storage = WorkbookSheetStorage(workbook_path)
        storage.write_cell("E24", "R$ 87,10")

        assert storage.read_cell("E24") == "R$ 87,10"
        celda = load_workbook(workbook_path)["2026"]["E24"]
        assert celda.value == pytest.approx(87.10)
        assert celda.number_format == MONEY_NUMBER_FORMAT

    def test_texto_que_no_es_monto_se_guarda_igual(self, workbook_path):
        WorkbookSheetStorage(workbook_path).write_cell("B50", "nota")
        assert load_workbook(workbook_path)["2026"]["B50"].value == "nota"

    def test_motor_sobre_el_libro(self, workbook_path):
        storage = WorkbookSheetStorage(workbook_path)
        engine = LedgerEngine(storage=storage, logger=ConsoleLogger(verbose=False))

        result = engine.apply_update(Intent.ADD_ENTRADA, Decimal("4.50"), date(2026, 1, 1))

        assert result.success
        assert load_workbook(workbook_path)["2026"]["C6"].value == pytest.approx(15.0)

    def test_total_refleja_la_escritura(self, workbook_path):
        storage = WorkbookSheetStorage(workbook_path)
        assert storage.read_cell("C40") == "R$ 10,50"

        storage.write_cell("C7", "R$ 100,00")

        assert storage.read_cell("C40") == "R$ 110,50"


class TestErrores:
    def test_libro_inexistente(self, tmp_path):
        storage = WorkbookSheetStorage(tmp_path / "no_existe.xlsx")
        with pytest.raises(StorageError, match="No existe el libro"):
            storage.read_cell("C6")

    def test_hoja_inexistente(self, workbook_path):
        storage = WorkbookSheetStorage(workbook_path, sheet_name="2025")
        with pytest.raises(StorageError, match="no existe"):
            storage.read_cell("C6")

    def test_archivo_que_no_es_xlsx(self, tmp_path):
        path = tmp_path / "roto.xlsx"
        path.write_text("no soy un excel")
        with pytest.raises(StorageError, match="No se pudo abrir"):
            WorkbookSheetStorage(path).read_cell("C6")

    def test_referencia_invalida(self, workbook_path):
        with pytest.raises(StorageError):
            WorkbookSheetStorage(workbook_path).read_cell("6C")

    def test_rango_invalido(self, workbook_path):
        with pytest.raises(StorageError):
            WorkbookSheetStorage(workbook_path).read_range("C6:??")


class TestTotalesConFormulas:
    """Libro guardado por Excel (con valores calculados) que el bot modifica."""

    @pytest.fixture
    def ledger_path(self, tmp_path):
        path = tmp_path / "ledger.xlsx"
        wb = xlsxwriter.Workbook(str(path))
        ws = wb.add_worksheet("2026")
        ws.write_number("C6", 5000)
        ws.write_formula("C40", "=SUM(C6:C36)", None, 5000)
        ws.write_formula("D40", "=SUM(D6:D36)", None, 0)
        ws.write_formula("E40", "=SUM(E6:E36)", None, 0)
        ws.write_formula("B43", "=D40+E40", None, 0)
        ws.write_formula("E43", "=C40-B43", None, 5000)
        wb.close()
        return path

    def _engine(self, path):
        return LedgerEngine(
            storage=WorkbookSheetStorage(path), logger=ConsoleLogger(verbose=False)
        )

    def test_valores_guardados_por_excel(self, ledger_path):
        summary = self._engine(ledger_path).month_totals(1, 2026, date(2026, 1, 31))
        assert summary.total_entradas == Decimal("5000")
        assert summary.performance == Decimal("5000")

    def test_totales_despues_de_escribir(self, ledger_path):
        engine = self._engine(ledger_path)
        engine.apply_update(Intent.ADD_ENTRADA, Decimal("100"), date(2026, 1, 1))
        engine.apply_update(Intent.ADD_DIARIO, Decimal("30"), date(2026, 1, 2))

        summary = engine.month_totals(1, 2026, date(2026, 1, 31))

        assert summary.total_entradas == Decimal("5100")
        assert summary.total_diario == Decimal("30")
        assert summary.saida_total == Decimal("30")
        assert summary.performance == Decimal("5070")

    def test_totales_al_reabrir_el_libro(self, ledger_path):
        self._engine(ledger_path).apply_update(
            Intent.ADD_ENTRADA, Decimal("100"), date(2026, 1, 1)
        )

        summary = self._engine(ledger_path).month_totals(1, 2026, date(2026, 1, 31))

        assert summary.total_entradas == Decimal("5100")
        assert summary.performance == Decimal("5100")
