"""
Tests para ledger_bot.domain.shared.date_resolver

El ancla de todos los tests es lunes 19/10/2026 al mediodía en Brasilia.
Ningún test depende del reloj del sistema.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from ledger_bot.domain.shared.date_resolver import (
    BRASILIA_TZ,
    brasilia_now,
    format_date,
    resolve_date,
)

ANCHOR = datetime(2026, 10, 19, 12, 0, tzinfo=BRASILIA_TZ)


class TestResolveDate:
    """Pruebas para resolve_date."""

    # --- Palabras relativas ---

    @pytest.mark.parametrize("token", ["hoje", "hj", "HOJE", " Hj "])
    def test_hoje(self, token):
        assert resolve_date(token, ANCHOR) == date(2026, 10, 19)

    def test_ontem(self):
        assert resolve_date("ontem", ANCHOR) == date(2026, 10, 18)

    @pytest.mark.parametrize("token", ["amanha", "amanhã", "AMANHÃ"])
    def test_amanha(self, token):
        assert resolve_date(token, ANCHOR) == date(2026, 10, 20)

    def test_ontem_cruza_mes(self):
        assert resolve_date("ontem", datetime(2026, 3, 1, 9, 0)) == date(2026, 2, 28)

    def test_amanha_cruza_ano(self):
        assert resolve_date("amanha", date(2026, 12, 31)) == date(2027, 1, 1)

    # --- dd/mm[/aa[aa]] ---

    def test_dia_mes_usa_ano_del_ancla(self):
        assert resolve_date("16/12", ANCHOR) == date(2026, 12, 16)

    def test_un_digito(self):
        assert resolve_date("1/1", ANCHOR) == date(2026, 1, 1)

    def test_ano_dos_digitos(self):
        assert resolve_date("16/12/24", ANCHOR) == date(2024, 12, 16)

    def test_ano_cuatro_digitos(self):
        assert resolve_date("16/12/2024", ANCHOR) == date(2024, 12, 16)

    def test_29_febrero_bisiesto(self):
        assert resolve_date("29/02/2024", ANCHOR) == date(2024, 2, 29)

    def test_ano_de_tres_digitos_devuelve_ancla(self):
        assert resolve_date("16/12/024", ANCHOR) == date(2026, 10, 19)

    def test_ano_cero_devuelve_ancla(self):
        assert resolve_date("16/12/0000", ANCHOR) == date(2026, 10, 19)

    def test_ano_de_cinco_digitos_devuelve_ancla(self):
        assert resolve_date("16/12/20245", ANCHOR) == date(2026, 10, 19)

    # --- Fallback: nunca lanza ---

    def test_fecha_imposible_devuelve_ancla(self):
        assert resolve_date("31/02", ANCHOR) == date(2026, 10, 19)

    def test_mes_13_devuelve_ancla(self):
        assert resolve_date("10/13", ANCHOR) == date(2026, 10, 19)

    def test_texto_devuelve_ancla(self):
        assert resolve_date("semana que vem", ANCHOR) == date(2026, 10, 19)

    def test_vacio_devuelve_ancla(self):
        assert resolve_date("", ANCHOR) == date(2026, 10, 19)

    def test_none_devuelve_ancla(self):
        assert resolve_date(None, ANCHOR) == date(2026, 10, 19)

    def test_ancla_como_date(self):
        assert resolve_date("ontem", date(2026, 10, 19)) == date(2026, 10, 18)


class TestBrasiliaNow:
    """Pruebas para brasilia_now (ancla fija en UTC-3)."""

    def test_offset_fijo(self):
        now = brasilia_now(lambda: datetime(2026, 10, 19, 15, 0, tzinfo=timezone.utc))
        assert now.utcoffset() == timedelta(hours=-3)
        assert now.hour == 12

    def test_madrugada_utc_sigue_siendo_ayer_en_brasilia(self):
        now = brasilia_now(lambda: datetime(2026, 10, 20, 2, 0, tzinfo=timezone.utc))
        assert now.date() == date(2026, 10, 19)
        assert now.hour == 23

    def test_datetime_sin_zona_se_asume_utc(self):
        now = brasilia_now(lambda: datetime(2026, 10, 20, 2, 0))
        assert now.date() == date(2026, 10, 19)

    def test_independiente_de_la_zona_del_reloj(self):
        tokyo = timezone(timedelta(hours=9))
        now = brasilia_now(lambda: datetime(2026, 10, 20, 9, 0, tzinfo=tokyo))
        assert now.date() == date(2026, 10, 19)
        assert now.hour == 21

    def test_sin_reloj_usa_el_del_sistema(self):
        assert brasilia_now().utcoffset() == timedelta(hours=-3)


class TestFormatDate:
    def test_formato(self):
        assert format_date(date(2026, 1, 5)) == "05/01/2026"
