"""
Parser de comandos del chat.

Convierte un mensaje libre en pt-BR en un ParsedCommand. Es una función
pura: mismo texto + mismo ancla → mismo resultado, sin efectos
secundarios y sin lanzar excepciones.

Comandos reconocidos (en orden de prioridad, gana la primera regla):

    1. "sub ..."                        → sustituir en vez de sumar
    2. "ajuda" | "help" | "?"           → HELP
    3. "performance" | "desempenho"     → PERFORMANCE
       "comparar" | "comparação"        → COMPARE
       "previsão" | "projeção" | ...    → FORECAST
    4. "saldo 16/12" | "saldo ontem"    → QUERY_SALDO_DATE
    5. "saldo" | "saldo hoje" | "hj"    → QUERY_SALDO_TODAY
       "ontem" | "amanhã"               → QUERY_SALDO_DATE
    6. "semana" | "resumo mês"          → QUERY_WEEK / QUERY_MONTH
    7. "entrada 500" | "saída 120,50"   → ADD_ENTRADA / ADD_SAIDA
    8. "87,10" | "diario 87,10 ontem"   → ADD_DIARIO
    9. cualquier otra cosa              → UNRECOGNIZED

Las reglas son funciones independientes en la tupla PARSE_RULES. Agregar
un comando = agregar una función y ubicarla en la tupla.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from ledger_bot.domain.models.intent import Intent
from ledger_bot.domain.models.parsed_command import ParsedCommand
from ledger_bot.domain.shared.date_resolver import DATE_TOKEN_PATTERN, resolve_date
from ledger_bot.domain.shared.money import normalize_amount
from ledger_bot.domain.shared.text_cleaner import (
    normalize_command_text,
    strip_substitution_marker,
)

_QUERY_PREFIX = r"(?:saldo|resumo|extrato)"
_NUMBER = r"\d+(?:[.,]\d+)*"

_HELP_RE = re.compile(r"^(?:ajuda|help|\?)$")
_PERFORMANCE_RE = re.compile(r"^(?:performance|desempenho)$")
_COMPARE_RE = re.compile(r"^(?:comparar|comparacao|comparação)$")
_FORECAST_RE = re.compile(r"^(?:previsao|previsão|projecao|projeção|forecast)$")

_SALDO_DATE_RE = re.compile(rf"^{_QUERY_PREFIX}\s+({DATE_TOKEN_PATTERN})(?=\s|$)")
_SALDO_RELATIVE_RE = re.compile(rf"^{_QUERY_PREFIX}\s+(ontem|amanha|amanhã)$")
_SALDO_TODAY_RE = re.compile(rf"^{_QUERY_PREFIX}(?:\s+(?:hoje|hj))?$")
_TODAY_RE = re.compile(r"^(?:hoje|hj)$")
_RELATIVE_DAY_RE = re.compile(r"^(ontem|amanha|amanhã)$")
_WEEK_RE = re.compile(rf"^(?:{_QUERY_PREFIX}\s+)?(?:semana|semanal)$")
_MONTH_RE = re.compile(rf"^(?:{_QUERY_PREFIX}\s+)?(?:mes|mês|mensal)$")

_DIARIO_RE = re.compile(
    rf"^(?:(?:diario|diário)\s*)?({_NUMBER})"
    rf"(?:\s+(hoje|hj|ontem|amanha|amanhã|{DATE_TOKEN_PATTERN}))?$"
)

# Para extraer el monto de "entrada ..." / "saída ..."
_KEYWORDS_RE = re.compile(r"entrada|saida|saída|diario|diário|hoje|hj|ontem|amanha|amanhã")
_DATE_TOKEN_RE = re.compile(DATE_TOKEN_PATTERN)
_NUMBER_RUN_RE = re.compile(_NUMBER)

# Para extraer la fecha de "entrada ..." / "saída ..."
_TODAY_WORD_RE = re.compile(r"\b(?:hoje|hj)\b")
_YESTERDAY_WORD_RE = re.compile(r"\bontem\b")
_TOMORROW_WORD_RE = re.compile(r"\bamanh[aã]\b")


@dataclass(frozen=True)
class _ParseContext:
    """Lo que cada regla necesita para decidir y construir el comando."""

    body: str
    """Texto normalizado (minúsculas, espacios colapsados) sin el prefijo "sub"."""

    raw_text: str
    anchor_now: datetime | date
    today: date
    replace: bool

    def command(self, intent: Intent, **kwargs) -> ParsedCommand:
        kwargs.setdefault("effective_date", self.today)
        return ParsedCommand(
            intent=intent,
            raw_text=self.raw_text,
            replace=self.replace,
            **kwargs,
        )


ParseRule = Callable[[_ParseContext], ParsedCommand | None]


# =====================================================================
# REGLAS
# =====================================================================


def _match_help(ctx: _ParseContext) -> ParsedCommand | None:
    if _HELP_RE.match(ctx.body):
        return ctx.command(Intent.HELP)
    return None


def _match_analysis(ctx: _ParseContext) -> ParsedCommand | None:
    if _PERFORMANCE_RE.match(ctx.body):
        return ctx.command(Intent.PERFORMANCE)
    if _COMPARE_RE.match(ctx.body):
        return ctx.command(Intent.COMPARE)
    if _FORECAST_RE.match(ctx.body):
        return ctx.command(Intent.FORECAST)
    return None


def _match_saldo_with_date(ctx: _ParseContext) -> ParsedCommand | None:
    m = _SALDO_DATE_RE.match(ctx.body) or _SALDO_RELATIVE_RE.match(ctx.body)
    if m is None:
        return None
    return ctx.command(
        Intent.QUERY_SALDO_DATE,
        target_date=resolve_date(m.group(1), ctx.anchor_now),
    )


def _match_saldo_today(ctx: _ParseContext) -> ParsedCommand | None:
    if _SALDO_TODAY_RE.match(ctx.body) or _TODAY_RE.match(ctx.body):
        return ctx.command(Intent.QUERY_SALDO_TODAY)

    m = _RELATIVE_DAY_RE.match(ctx.body)
    if m:
        return ctx.command(
            Intent.QUERY_SALDO_DATE,
            target_date=resolve_date(m.group(1), ctx.anchor_now),
        )
    return None


def _match_period(ctx: _ParseContext) -> ParsedCommand | None:
    if _WEEK_RE.match(ctx.body):
        return ctx.command(Intent.QUERY_WEEK)
    if _MONTH_RE.match(ctx.body):
        return ctx.command(Intent.QUERY_MONTH)
    return None


def _amount_or_none(text: str) -> Decimal | None:
    """Monto del mensaje, o None si no se puede usar (p. ej. fuera de rango)."""
    try:
        return normalize_amount(text)
    except ValueError:
        return None


def _match_entrada_saida(ctx: _ParseContext) -> ParsedCommand | None:
    if "entrada" in ctx.body:
        intent = Intent.ADD_ENTRADA
    elif "saida" in ctx.body or "saída" in ctx.body:
        intent = Intent.ADD_SAIDA
    else:
        return None

    amount_text = _extract_amount_text(ctx.body)
    amount = _amount_or_none(amount_text) if amount_text is not None else None
    if amount is None:
        return None

    return ctx.command(
        intent,
        amount=amount,
        effective_date=_extract_date(ctx.body, ctx.anchor_now),
    )


def _match_diario(ctx: _ParseContext) -> ParsedCommand | None:
    m = _DIARIO_RE.match(ctx.body)
    amount = _amount_or_none(m.group(1)) if m is not None else None
    if amount is None:
        return None

    date_token = m.group(2)
    effective = resolve_date(date_token, ctx.anchor_now) if date_token else ctx.today
    return ctx.command(
        Intent.ADD_DIARIO,
        amount=amount,
        effective_date=effective,
    )


PARSE_RULES: tuple[ParseRule, ...] = (
    _match_help,
    _match_analysis,
    _match_saldo_with_date,
    _match_saldo_today,
    _match_period,
    _match_entrada_saida,
    _match_diario,
)


# =====================================================================
# API PÚBLICA
# =====================================================================


def parse_command(text: str, anchor_now: datetime | date) -> ParsedCommand:
    """Interpreta un mensaje del chat.

    Args:
        text: Mensaje tal como llegó del transporte.
        anchor_now: "Ahora" de Brasilia, calculado una vez por mensaje.

    Returns:
        ParsedCommand. Si ninguna regla coincide, el intent es UNRECOGNIZED.
        Nunca lanza excepciones.

    Ejemplos (ancla 19/10/2026):
        "diario 87,10"          → ADD_DIARIO, 87.10, 19/10/2026
        "entrada 352,91 01/01"  → ADD_ENTRADA, 352.91, 01/01/2026
        "sub saida 100 16/12"   → ADD_SAIDA, 100, 16/12/2026, replace
        "saldo 16/12"           → QUERY_SALDO_DATE, target 16/12/2026
        "517"                   → ADD_DIARIO, 517, 19/10/2026
    """
    raw_text = text if isinstance(text, str) else ""
    today = anchor_now.date() if isinstance(anchor_now, datetime) else anchor_now
    body, replace = strip_substitution_marker(normalize_command_text(raw_text))

    ctx = _ParseContext(
        body=body,
        raw_text=raw_text,
        anchor_now=anchor_now,
        today=today,
        replace=replace,
    )

    if body:
        for rule in PARSE_RULES:
            command = rule(ctx)
            if command is not None:
                return command

    return ctx.command(Intent.UNRECOGNIZED)


def is_valid_command(text: str, anchor_now: datetime | date) -> bool:
    """True si el mensaje se reconoce como algún comando."""
    return parse_command(text, anchor_now).is_recognized


# =====================================================================
# EXTRACCIÓN DE MONTO Y FECHA (entrada / saída)
# =====================================================================


def _extract_amount_text(body: str) -> str | None:
    """Devuelve el único número que queda tras quitar palabras clave y fechas.

    Si no queda ninguno, o quedan varios ("entrada 500 2x"), devuelve None:
    es preferible no reconocer el comando que adivinar el monto.
    """
    sin_fechas = _DATE_TOKEN_RE.sub(" ", body)
    sin_palabras = _KEYWORDS_RE.sub(" ", sin_fechas)
    runs = _NUMBER_RUN_RE.findall(sin_palabras)
    if len(runs) != 1:
        return None
    return runs[0]


def _extract_date(body: str, anchor_now: datetime | date) -> date:
    """Palabras relativas primero, después dd/mm[/aa], y si no hay nada, hoy."""
    if _TODAY_WORD_RE.search(body):
        return resolve_date("hoje", anchor_now)
    if _YESTERDAY_WORD_RE.search(body):
        return resolve_date("ontem", anchor_now)
    if _TOMORROW_WORD_RE.search(body):
        return resolve_date("amanha", anchor_now)

    m = _DATE_TOKEN_RE.search(body)
    if m:
        return resolve_date(m.group(0), anchor_now)
    return resolve_date("hoje", anchor_now)
