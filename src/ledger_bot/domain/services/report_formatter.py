"""
Formateo de respuestas para el chat.

Convierte los objetos de valor del motor (DayRecord, PeriodSummary,
MonthSummary, MonthComparison, MonthForecast, errores) en el texto que
recibe el usuario: pt-BR, con emojis y negritas de WhatsApp (*texto*).

No lee la planilla ni calcula nada que no esté ya en los modelos.
Todos los mensajes de error terminan indicando el comando "ajuda".
"""

from datetime import date
from decimal import Decimal

from ledger_bot.domain.models.day_record import DayRecord, PeriodSummary
from ledger_bot.domain.models.intent import LedgerField
from ledger_bot.domain.models.month_summary import (
    MonthComparison,
    MonthForecast,
    MonthSummary,
)
from ledger_bot.domain.shared.date_resolver import format_date
from ledger_bot.domain.shared.money import format_brl
from ledger_bot.domain.shared.month_map import month_label, month_name

SEPARATOR = "━" * 31

HELP_POINTER = '💡 Digite "ajuda" para ver os comandos disponíveis.'

HELP_MESSAGE = """--- 💰 CONTROLE FINANCEIRO ---

--- 📝 REGISTRAR VALORES ---

🔹 ADICIONAR (soma ao existente)
   • diario 87,10
   • entrada 200 hoje
   • saida 94,90 amanha
   • 517 (diário de hoje)

🔸 SUBSTITUIR (sobrescreve)
   • sub 300 hoje
   • sub entrada 500
   • sub saida 100 16/12


------ 📊 CONSULTAS ------

🔍 Resumos Rápidos:
   • saldo → Hoje
   • saldo 16/12 → Data específica
   • saldo semana → Últimos 7 dias
   • mes → Mês completo + Performance

📈 Análises Avançadas:
   • performance → Entradas vs Saídas
   • comparar → Mês atual vs anterior
   • previsao → Projeção de fim de mês


------ 📅 FORMATO DATAS ------

   ✓ hoje
   ✓ ontem
   ✓ amanha
   ✓ 25/12
   ✓ 25/12/2024


------ 💡 DICAS ------

   ⚡ Sem "sub" → SOMA valores
   ⚡ Com "sub" → SUBSTITUI valores
   ⚡ Use "mes" para relatório completo!"""

GENERIC_ERROR_MESSAGE = f"""⚠️ Ops! Algo deu errado.

Não consegui processar sua mensagem.

{HELP_POINTER}"""

STORAGE_ERROR_MESSAGE = """⚠️ Erro ao acessar a planilha.

Tente novamente em alguns instantes ou digite "ajuda" para ver os comandos."""


# =====================================================================
# ACTUALIZACIONES
# =====================================================================


def format_update_success(
    field: LedgerField, delta: Decimal, total: Decimal, on: date, replaced: bool
) -> str:
    """Confirmación de una escritura.

    Ejemplos:
        ✅ Diário de R$ 87,10 adicionado em 19/10/2026 (Total: R$ 187,10)
        ✅ Entrada substituído para R$ 500,00 em 19/10/2026
    """
    if replaced:
        return f"✅ {field.label} substituído para {format_brl(total)} em {format_date(on)}"
    return (
        f"✅ {field.label} de {format_brl(delta)} adicionado em {format_date(on)} "
        f"(Total: {format_brl(total)})"
    )


def format_invalid_day(error: Exception) -> str:
    return f"❌ {error}\n\n{HELP_POINTER}"


def format_invalid_amount(error: Exception) -> str:
    return f"❌ {error}\n\n{HELP_POINTER}"


def format_storage_failure() -> str:
    return STORAGE_ERROR_MESSAGE


# =====================================================================
# REPORTES
# =====================================================================


def format_day_report(record: DayRecord) -> str:
    return "\n".join(
        [
            f"📊 *RESUMO FINANCEIRO - {format_date(record.day)}*",
            SEPARATOR,
            "",
            f"💰 *ENTRADA:* {format_brl(record.entrada)}",
            f"💸 *SAÍDA:* {format_brl(record.saida)}",
            f"🍽️ *DIÁRIO:* {format_brl(record.diario)}",
            "",
            f"💵 *SALDO DO DIA:* {format_brl(record.saldo)}",
            "",
            SEPARATOR,
            f"{_saldo_emoji(record.saldo)} {_saldo_message(record.saldo)}",
        ]
    )


def format_week_report(summary: PeriodSummary) -> str:
    return "\n".join(
        [
            "📅 *RESUMO SEMANAL (Últimos 7 dias)*",
            f"{format_date(summary.start)} a {format_date(summary.end)}",
            SEPARATOR,
            "",
            f"💰 *Total ENTRADAS:* {format_brl(summary.total_entradas)}",
            f"💸 *Total SAÍDAS:* {format_brl(summary.total_saidas)}",
            f"🍽️ *Total DIÁRIO:* {format_brl(summary.total_diario)}",
            "",
            f"💵 *SALDO FINAL:* {format_brl(summary.saldo_final)}",
            "",
            SEPARATOR,
            f"📈 Média diária: {format_brl(summary.media_diaria)}",
        ]
    )


def format_month_report(summary: MonthSummary, days_considered: int) -> str:
    """Reporte completo del mes.

    Args:
        summary: Totales del mes.
        days_considered: Días sobre los que se contaron registros (hasta
                         hoy en el mes actual, el mes entero en los demás).
    """
    if summary.performance >= 0:
        performance_emoji = "📈"
        performance_text = "Saldo POSITIVO! Você economizou! 🎉"
    else:
        performance_emoji = "📉"
        performance_text = "Saldo NEGATIVO! Gastos superaram entradas ⚠️"

    media = format_brl(summary.media_diaria) if summary.has_data else "N/A"

    return "\n".join(
        [
            f"📆 *RESUMO COMPLETO - {month_label(summary.month, summary.year)}*",
            SEPARATOR,
            "",
            f"💰 *ENTRADAS:* {format_brl(summary.total_entradas)}",
            f"💸 *SAÍDAS:* {format_brl(summary.total_saidas)}",
            f"🍽️ *DIÁRIO:* {format_brl(summary.total_diario)}",
            "",
            SEPARATOR,
            "",
            f"🔻 *SAÍDA TOTAL:* {format_brl(summary.saida_total)}",
            "   (Saídas + Diário)",
            "",
            f"{performance_emoji} *PERFORMANCE:* {format_brl(summary.performance)}",
            f"   {performance_text}",
            "",
            SEPARATOR,
            f"📊 Dias com registros: {summary.dias_com_dados}/{days_considered}",
            f"📈 Média diária: {media}",
        ]
    )


def format_performance_report(summary: MonthSummary) -> str:
    titulo = month_label(summary.month, summary.year)

    if not summary.has_data:
        return "\n".join(
            [
                f"ℹ️ *PERFORMANCE - {titulo}*",
                SEPARATOR,
                "",
                "Ainda não há registros neste mês: performance não se aplica.",
                "",
                HELP_POINTER,
            ]
        )

    positivo = summary.performance >= 0
    percentual = summary.percentual_performance
    if positivo:
        conclusao = "✅ Você está economizando! Continue assim! 🎉"
    else:
        conclusao = (
            "⚠️ Seus gastos superaram as entradas em "
            f"{format_brl(abs(summary.performance))}"
        )

    return "\n".join(
        [
            f"{'✅' if positivo else '⚠️'} *PERFORMANCE - {titulo}*",
            SEPARATOR,
            "",
            f"💰 Entradas: {format_brl(summary.total_entradas)}",
            f"🔻 Saída Total: {format_brl(summary.saida_total)}",
            "",
            SEPARATOR,
            "",
            f"📊 *RESULTADO:* {format_brl(summary.performance)}",
            f"📈 *Percentual:* {_format_percent(percentual)}",
            "",
            conclusao,
        ]
    )


def format_comparison_report(comparison: MonthComparison) -> str:
    atual = month_name(comparison.current.month)
    anterior = month_name(comparison.previous.month)
    current = comparison.current
    previous = comparison.previous

    diff_entradas = comparison.diff_entradas
    diff_saidas = comparison.diff_saida_total
    diff_performance = comparison.diff_performance

    return "\n".join(
        [
            "📊 *COMPARAÇÃO DE MESES*",
            SEPARATOR,
            "",
            f"{month_label(current.month, current.year)} vs "
            f"{month_label(previous.month, previous.year)}",
            "",
            "💰 *ENTRADAS:*",
            f"{atual}: {format_brl(current.total_entradas)}",
            f"{anterior}: {format_brl(previous.total_entradas)}",
            f"{_arrow(diff_entradas)} Diferença: {format_brl(abs(diff_entradas))} "
            f"{'a mais' if diff_entradas >= 0 else 'a menos'}",
            "",
            "🔻 *SAÍDA TOTAL:*",
            f"{atual}: {format_brl(current.saida_total)}",
            f"{anterior}: {format_brl(previous.saida_total)}",
            f"{_arrow(diff_saidas)} Diferença: {format_brl(abs(diff_saidas))} "
            f"{'a mais' if diff_saidas >= 0 else 'a menos'}",
            "",
            f"{_arrow(diff_performance)} *PERFORMANCE:*",
            f"{atual}: {format_brl(current.performance)}",
            f"{anterior}: {format_brl(previous.performance)}",
            f"Diferença: {format_brl(abs(diff_performance))} "
            f"{'melhor' if diff_performance >= 0 else 'pior'}",
        ]
    )


def format_forecast_report(forecast: MonthForecast) -> str:
    summary = forecast.summary
    projecao = forecast.projecao_performance
    positivo = projecao >= 0

    if positivo:
        conclusao = "✅ Se manter esse ritmo, vai fechar o mês com saldo POSITIVO! 🎉"
    else:
        conclusao = (
            "⚠️ ATENÇÃO! Mantendo esse ritmo, o mês fecha NEGATIVO em "
            f"{format_brl(abs(projecao))}"
        )

    return "\n".join(
        [
            f"🔮 *PREVISÃO DE FIM DE MÊS - {month_label(summary.month, summary.year)}*",
            SEPARATOR,
            "",
            f"📅 Dia atual: {forecast.current_day}/{forecast.days_in_month}",
            f"⏳ Dias restantes: {forecast.days_remaining}",
            "",
            "📊 *MÉDIAS DIÁRIAS:*",
            f"💸 Saídas: {format_brl(forecast.media_saidas)}/dia",
            f"🍽️ Diário: {format_brl(forecast.media_diario)}/dia",
            f"🔻 Total: {format_brl(forecast.media_saida_total)}/dia",
            "",
            SEPARATOR,
            "",
            "🎯 *PROJEÇÃO PARA FIM DO MÊS:*",
            "",
            f"💰 Entradas: {format_brl(summary.total_entradas)} (fixo)",
            f"💸 Saídas: {format_brl(forecast.projecao_saidas)}",
            f"🍽️ Diário: {format_brl(forecast.projecao_diario)}",
            f"🔻 Saída Total: {format_brl(forecast.projecao_saida_total)}",
            "",
            f"{'✅' if positivo else '⚠️'} *Performance Prevista:* {format_brl(projecao)}",
            "",
            SEPARATOR,
            "",
            conclusao,
        ]
    )


def format_forecast_not_applicable(month: int, year: int) -> str:
    return "\n".join(
        [
            f"🔮 *PREVISÃO DE FIM DE MÊS - {month_label(month, year)}*",
            SEPARATOR,
            "",
            "❌ Não há dados suficientes para fazer previsão: previsão não se aplica.",
            "",
            HELP_POINTER,
        ]
    )


# =====================================================================
# AUXILIARES
# =====================================================================


def _saldo_emoji(saldo: Decimal) -> str:
    if saldo > 0:
        return "✅"
    if saldo < 0:
        return "⚠️"
    return "ℹ️"


def _saldo_message(saldo: Decimal) -> str:
    if saldo > 0:
        return "Saldo positivo! Continue assim! 🎉"
    if saldo < 0:
        return "Atenção aos gastos! 📉"
    return "Saldo zerado."


def _arrow(diff: Decimal) -> str:
    if diff > 0:
        return "📈"
    if diff < 0:
        return "📉"
    return "➡️"


def _format_percent(value: Decimal | None) -> str:
    """12.345 → '12,3%'. None (sin entradas) → 'N/A'."""
    if value is None:
        return "N/A"
    return f"{value:.1f}%".replace(".", ",")
