"""
Modelos de dominio del proyecto finance-ledger-bot.

Todos los modelos son dataclasses inmutables (frozen=True) o Enums que
representan los datos del negocio sin dependencias externas.

Uso:
    from ledger_bot.domain.models import Intent, ParsedCommand, DayRecord
"""

from ledger_bot.domain.models.day_record import DayRecord, PeriodSummary
from ledger_bot.domain.models.intent import (
    MUTABLE_FIELDS,
    VALUE_FIELDS,
    Intent,
    LedgerField,
)
from ledger_bot.domain.models.month_layout import (
    CoordinateRange,
    LedgerCoordinate,
    MonthLayout,
)
from ledger_bot.domain.models.month_summary import (
    MonthComparison,
    MonthForecast,
    MonthSummary,
)
from ledger_bot.domain.models.parsed_command import ParsedCommand
from ledger_bot.domain.models.update_result import FailureKind, UpdateResult

__all__ = [
    "CoordinateRange",
    "DayRecord",
    "FailureKind",
    "Intent",
    "LedgerCoordinate",
    "LedgerField",
    "MUTABLE_FIELDS",
    "MonthComparison",
    "MonthForecast",
    "MonthLayout",
    "MonthSummary",
    "ParsedCommand",
    "PeriodSummary",
    "UpdateResult",
    "VALUE_FIELDS",
]
