"""
Tests para ledger_bot.domain.shared.month_map, text_cleaner y a1_notation.

Son las utilidades sin estado que usan el parser y el direccionamiento.
"""

import pytest

from ledger_bot.domain.shared.a1_notation import (
    column_to_letter,
    letter_to_column,
    split_cell,
    split_range,
)
from ledger_bot.domain.shared.month_map import month_label, month_name, previous_month
from ledger_bot.domain.shared.text_cleaner import (
    normalize_command_text,
    strip_substitution_marker,
)


class TestMonthMap:
    def test_nombre(self):
        assert month_name(1) == "janeiro"
        assert month_name(3) == "março"
        assert month_name(12) == "dezembro"

    def test_mes_invalido(self):
        with pytest.raises(ValueError, match="fuera de rango"):
            month_name(13)

    def test_etiqueta(self):
        assert month_label(10, 2026) == "OUTUBRO/2026"

    def test_mes_anterior(self):
        assert previous_month(10, 2026) == (9, 2026)

    def test_mes_anterior_de_enero_cambia_de_ano(self):
        assert previous_month(1, 2026) == (12, 2025)


class TestTextCleaner:
    def test_minusculas_y_espacios(self):
        assert normalize_command_text("  SALDO   16/12  ") == "saldo 16/12"

    def test_caracteres_invisibles(self):
        assert normalize_command_text("saldo\u200b") == "saldo"

    def test_saltos_de_linea(self):
        assert normalize_command_text("diario\n87,10") == "diario 87,10"

    def test_none(self):
        assert normalize_command_text(None) == ""

    def test_prefijo_sub(self):
        assert strip_substitution_marker("sub entrada 500") == ("entrada 500", True)

    def test_prefijo_sub_mayusculas(self):
        assert strip_substitution_marker("SUB 300 hoje") == ("300 hoje", True)

    def test_palabra_que_empieza_con_sub_no_es_prefijo(self):
        assert strip_substitution_marker("subir 10") == ("subir 10", False)

    def test_sub_solo(self):
        assert strip_substitution_marker("sub") == ("sub", False)


class TestA1Notation:
    @pytest.mark.parametrize(
        "column, letters",
        [(0, "A"), (2, "C"), (25, "Z"), (26, "AA"), (52, "BA"), (71, "BT")],
    )
    def test_ida_y_vuelta(self, column, letters):
        assert column_to_letter(column) == letters
        assert letter_to_column(letters) == column

    def test_columna_negativa(self):
        with pytest.raises(ValueError):
            column_to_letter(-1)

    def test_split_cell(self):
        assert split_cell("C6") == (2, 6)
        assert split_cell("bg24") == (58, 24)

    def test_split_cell_invalida(self):
        with pytest.raises(ValueError, match="inválida"):
            split_cell("6C")

    def test_split_range(self):
        assert split_range("C6:F36") == ((2, 6), (5, 36))

    def test_split_range_celda_sola(self):
        assert split_range("E24") == ((4, 24), (4, 24))
