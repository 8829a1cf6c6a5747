"""
Tests para ledger_bot.cli.main

Se llama a main() con argv explícito. La configuración del entorno se
neutraliza con monkeypatch para que ningún .env local cambie el resultado.
"""

import io

import pytest
from openpyxl import Workbook, load_workbook

from ledger_bot.cli.main import main
from ledger_bot.infrastructure.settings import Settings


@pytest.fixture(autouse=True)
def sin_entorno(monkeypatch):
    monkeypatch.setattr(Settings, "LEDGER_WORKBOOK", None)
    monkeypatch.setattr(Settings, "LEDGER_SHEET", None)
    monkeypatch.setattr(Settings, "OPENAI_API_KEY", None)


@pytest.fixture
def workbook_path(tmp_path):
    wb = Workbook()
    wb.active["BE40"] = "R$ 5.000,00"
    path = tmp_path / "financas.xlsx"
    wb.save(path)
    return path


class TestSend:
    def test_planilla_en_memoria(self, capsys):
        main(["send", "diario 10", "--no-ai"])

        out = capsys.readouterr().out
        assert "planilla en memoria" in out
        assert "✅ Diário de R$ 10,00 adicionado em" in out

    def test_no_reconocido_sin_ia_responde_ayuda(self, capsys):
        main(["send", "bom dia"])
        assert "CONTROLE FINANCEIRO" in capsys.readouterr().out

    def test_escribe_en_el_libro(self, workbook_path, capsys):
        main(["send", "sub entrada 352,91 01/01", "--workbook", str(workbook_path)])

        assert "substituído para R$ 352,91" in capsys.readouterr().out
        assert load_workbook(workbook_path).active["C6"].value == pytest.approx(352.91)


class TestChat:
    def test_una_respuesta_por_linea(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("diario 10\n\nsaldo\n"))
        main(["chat", "--no-ai"])

        out = capsys.readouterr().out
        assert "✅ Diário" in out
        assert "RESUMO FINANCEIRO" in out
        assert "RESUMEN DE LA SESIÓN" in out


class TestExport:
    def test_exporta_un_mes(self, workbook_path, tmp_path, capsys):
        destino = tmp_path / "outubro.xlsx"
        main(["export", "10/2026", "--workbook", str(workbook_path), "-o", str(destino)])

        assert destino.exists()
        assert "📁 Excel generado" in capsys.readouterr().out

    def test_mes_invalido(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["export", "13/2026"])
        assert exc_info.value.code == 1
        assert "Mês inválido" in capsys.readouterr().out

    def test_libro_inexistente(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["export", "10/2026", "--workbook", str(tmp_path / "nada.xlsx")])
        assert exc_info.value.code == 1
        assert "No existe el libro" in capsys.readouterr().out
