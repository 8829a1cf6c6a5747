"""
Tests para ledger_bot.domain.shared.money

Cada caso viene de un formato real que aparece en el chat o en la planilla:
- "87,10"      → coma decimal (lo más común en el celular)
- "87.10"      → punto decimal (teclado en inglés)
- "1.234,56"   → miles con punto, decimal con coma
- "R$ 1.234,56" → texto de celda escrito por el bot
- "-R$ 50,00"  → performance negativa en la fila 43
"""

from decimal import Decimal

import pytest

from ledger_bot.domain.shared.money import (
    MAX_AMOUNT,
    format_brl,
    normalize_amount,
    parse_money,
    parse_money_safe,
)


class TestNormalizeAmount:
    """Pruebas para normalize_amount (montos escritos en el chat)."""

    def test_coma_decimal(self):
        assert normalize_amount("87,10") == Decimal("87.10")

    def test_punto_decimal(self):
        assert normalize_amount("87.10") == Decimal("87.10")

    def test_miles_y_coma_decimal(self):
        assert normalize_amount("1.234,56") == Decimal("1234.56")

    def test_millones(self):
        assert normalize_amount("1.234.567,89") == Decimal("1234567.89")

    def test_entero(self):
        assert normalize_amount("517") == Decimal("517")

    def test_todas_las_formas_dan_el_mismo_valor(self):
        assert normalize_amount("87,10") == normalize_amount("87.10") == Decimal("87.1")

    def test_espacios_alrededor(self):
        assert normalize_amount("  300 ") == Decimal("300")

    def test_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="vacío"):
            normalize_amount("")

    def test_texto_lanza_error(self):
        with pytest.raises(ValueError, match="No se pudo convertir"):
            normalize_amount("abc")

    def test_no_string_lanza_type_error(self):
        with pytest.raises(TypeError):
            normalize_amount(87.10)

    def test_monto_enorme_lanza_error(self):
        with pytest.raises(ValueError, match="fuera de rango"):
            normalize_amount("9" * 30)

    def test_tope_exacto_se_acepta(self):
        assert normalize_amount("1000000000000") == MAX_AMOUNT


class TestParseMoney:
    """Pruebas para parse_money (texto de celda, versión estricta)."""

    def test_con_simbolo(self):
        assert parse_money("R$ 87,10") == Decimal("87.10")

    def test_con_miles(self):
        assert parse_money("R$ 1.234,56") == Decimal("1234.56")

    def test_sin_simbolo(self):
        assert parse_money("87,10") == Decimal("87.10")

    def test_sin_espacio_tras_simbolo(self):
        assert parse_money("R$87,10") == Decimal("87.10")

    def test_espacio_no_separable(self):
        """Planillas exportadas con formato de moneda usan U+00A0."""
        assert parse_money("R$\u00a01.234,56") == Decimal("1234.56")

    def test_negativo_antes_del_simbolo(self):
        assert parse_money("-R$ 50,00") == Decimal("-50.00")

    def test_negativo_despues_del_simbolo(self):
        assert parse_money("R$ -50,00") == Decimal("-50.00")

    def test_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="vacío"):
            parse_money("   ")

    def test_basura_lanza_error(self):
        with pytest.raises(ValueError, match="No se pudo convertir"):
            parse_money("#REF!")

    def test_nan_lanza_error(self):
        with pytest.raises(ValueError, match="no finito"):
            parse_money("NaN")

    def test_celda_enorme_lanza_error(self):
        with pytest.raises(ValueError, match="fuera de rango"):
            parse_money("R$ " + "9" * 30)


class TestParseMoneySafe:
    """Pruebas para parse_money_safe (celdas vacías o ilegibles valen 0)."""

    def test_valor_normal(self):
        assert parse_money_safe("R$ 87,10") == Decimal("87.10")

    def test_none(self):
        assert parse_money_safe(None) == Decimal("0")

    def test_vacio(self):
        assert parse_money_safe("") == Decimal("0")

    def test_guion(self):
        assert parse_money_safe("-") == Decimal("0")

    def test_error_de_formula(self):
        assert parse_money_safe("#REF!") == Decimal("0")

    def test_texto_de_formula(self):
        assert parse_money_safe("=SUM(C6:C36)") == Decimal("0")


class TestFormatBrl:
    """Pruebas para format_brl (texto que se escribe en la celda)."""

    def test_miles(self):
        assert format_brl(Decimal("1234.56")) == "R$ 1.234,56"

    def test_cero(self):
        assert format_brl(Decimal("0")) == "R$ 0,00"

    def test_centavos(self):
        assert format_brl(Decimal("87.1")) == "R$ 87,10"

    def test_millones(self):
        assert format_brl(Decimal("1234567.89")) == "R$ 1.234.567,89"

    def test_negativo(self):
        assert format_brl(Decimal("-50")) == "-R$ 50,00"

    def test_redondea_a_centavos(self):
        assert format_brl(Decimal("10.005")) == "R$ 10,00"

    @pytest.mark.parametrize("texto", ["87,10", "87.10", "1.234,56", "517", "0,01"])
    def test_ida_y_vuelta(self, texto):
        """Normalizar, formatear y volver a leer recupera el valor a 2 decimales."""
        valor = normalize_amount(texto)
        assert parse_money(format_brl(valor)) == valor.quantize(Decimal("0.01"))
