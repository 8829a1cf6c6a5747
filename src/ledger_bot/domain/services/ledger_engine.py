"""
Servicio de dominio: Motor del ledger.

Aplica las actualizaciones de monto y arma los reportes leyendo la
planilla a través del puerto SheetStorage:

    apply_update        → suma (o sustituye) un monto en una celda
    day_report          → 1 lectura (rango de una fila)
    week_report         → 7 lecturas (una por día; los días pueden
                          caer en bloques de meses distintos)
    month_report        → 2 lecturas (celdas de totales + rango del mes)
    performance_report  → 2 lecturas
    compare_report      → 4 lecturas, dos meses en paralelo
    forecast_report     → 2 lecturas

Cada reporte se recalcula desde cero: no hay caché ni estado compartido.

Dos "add" simultáneos sobre la misma celda compiten entre sí (cada uno
lee, suma y escribe por su cuenta): gana la última escritura. No hay
transacción que lo impida.

Las fallas del almacenamiento se capturan en el borde de cada operación
de reporte, se registran en la bitácora y se devuelven como mensaje.
No se reintenta nada.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta
from decimal import Decimal

from ledger_bot.domain.exceptions import InvalidAmountError, InvalidDayError, StorageError
from ledger_bot.domain.models.day_record import DayRecord, PeriodSummary
from ledger_bot.domain.models.intent import MUTABLE_FIELDS, VALUE_FIELDS, Intent
from ledger_bot.domain.models.month_summary import (
    MonthComparison,
    MonthForecast,
    MonthSummary,
)
from ledger_bot.domain.models.update_result import FailureKind, UpdateResult
from ledger_bot.domain.ports.process_logger import ProcessLogger
from ledger_bot.domain.ports.sheet_storage import SheetStorage
from ledger_bot.domain.services import report_formatter
from ledger_bot.domain.services.ledger_addressing import (
    PERFORMANCE,
    SAIDA_TOTAL,
    TOTAL_DIARIO,
    TOTAL_ENTRADAS,
    TOTAL_SAIDAS,
    coordinate_for,
    layout_for,
    month_range_for,
    range_for,
    totals_coordinates,
)
from ledger_bot.domain.shared.money import MAX_AMOUNT, format_brl, parse_money_safe
from ledger_bot.domain.shared.month_map import previous_month

WEEK_DAYS = 7


class LedgerEngine:
    """Operaciones sobre el ledger.

    Recibe sus dependencias por constructor (Dependency Injection).
    No sabe si la planilla es un .xlsx, una planilla remota o un dict en
    memoria: solo conoce el puerto SheetStorage.
    """

    def __init__(self, storage: SheetStorage, logger: ProcessLogger) -> None:
        """
        Args:
            storage: Acceso a las celdas de la planilla.
            logger: Logger para la bitácora de procesamiento.
        """
        self._storage = storage
        self._logger = logger

    # =================================================================
    # ACTUALIZACIÓN
    # =================================================================

    def apply_update(
        self, intent: Intent, amount: Decimal, on: date, replace: bool = False
    ) -> UpdateResult:
        """Suma `amount` a la celda del campo del intent en el día `on`.

        Con replace=True escribe `amount` directamente, sin leer la celda.
        En ambos casos lo escrito es texto en formato "R$ 1.234,56".

        Args:
            intent: ADD_ENTRADA, ADD_SAIDA o ADD_DIARIO.
            amount: Monto escrito por el usuario (>= 0).
            on: Día a actualizar.
            replace: True para sustituir en vez de sumar.

        Returns:
            UpdateResult exitoso con el total final, o fallido con
            FailureKind.INVALID_DAY / INVALID_AMOUNT / STORAGE.

        Raises:
            ValueError: Si el intent no es de actualización (error de
                        programación, no del usuario).
        """
        field = intent.field
        delta = Decimal(amount)

        try:
            layout = layout_for(on.month, on.year)
            cell = coordinate_for(field, on.day, layout).a1

            previous = ""
            if replace:
                total = delta
            else:
                previous = self._storage.read_cell(cell)
                total = parse_money_safe(previous) + delta

            if abs(total) > MAX_AMOUNT:
                raise InvalidAmountError(total, MAX_AMOUNT)
            written = format_brl(total)
            self._storage.write_cell(cell, written)

        except InvalidDayError as e:
            self._logger.log_invalid_day(e)
            return UpdateResult(
                success=False,
                message=report_formatter.format_invalid_day(e),
                day=on,
                delta=delta,
                replaced=replace,
                failure=FailureKind.INVALID_DAY,
            )
        except InvalidAmountError as e:
            self._logger.log_invalid_amount(e)
            return UpdateResult(
                success=False,
                message=report_formatter.format_invalid_amount(e),
                day=on,
                delta=delta,
                replaced=replace,
                failure=FailureKind.INVALID_AMOUNT,
            )
        except StorageError as e:
            self._logger.log_storage_error("apply_update", e)
            return UpdateResult(
                success=False,
                message=report_formatter.format_storage_failure(),
                day=on,
                delta=delta,
                replaced=replace,
                failure=FailureKind.STORAGE,
            )

        self._logger.log_cell_updated(cell, previous, written)
        return UpdateResult(
            success=True,
            message=report_formatter.format_update_success(field, delta, total, on, replace),
            day=on,
            delta=delta,
            total=total,
            cell=cell,
            replaced=replace,
        )

    # =================================================================
    # LECTURAS (lanzan StorageError)
    # =================================================================

    def day_record(self, on: date) -> DayRecord:
        """Lee entrada, saída, diário y saldo de un día en una sola lectura."""
        layout = layout_for(on.month, on.year)
        rango = range_for(VALUE_FIELDS, on.day, layout)
        rows = self._storage.read_range(rango.a1)
        return _record_from_row(on, _row_at(rows, 0))

    def week_summary(self, anchor: date) -> PeriodSummary:
        """Los 7 días que terminan en `anchor` (inclusive), del más antiguo al más reciente."""
        start = anchor - timedelta(days=WEEK_DAYS - 1)
        days = [self.day_record(start + timedelta(days=i)) for i in range(WEEK_DAYS)]
        return PeriodSummary(start=start, end=anchor, days=days)

    def month_records(
        self, month: int, year: int, last_day: int | None = None
    ) -> list[DayRecord]:
        """Lee los días 1..last_day del mes (todo el mes si es None) en una lectura."""
        layout = layout_for(month, year)
        if last_day is None:
            last_day = layout.last_valid_day

        rango = month_range_for(VALUE_FIELDS, last_day, layout)
        rows = self._storage.read_range(rango.a1)
        return [
            _record_from_row(date(year, month, day), _row_at(rows, day - 1))
            for day in range(1, last_day + 1)
        ]

    def month_totals(self, month: int, year: int, today: date) -> MonthSummary:
        """Totales del mes según las celdas de totales de la planilla.

        Hace dos lecturas:
        1. batch_read de las 5 celdas de totales (filas 40 y 43).
        2. read_range de entrada..diário para contar los días con datos.
           En el mes en curso se cuenta hasta `today`; en los demás,
           el mes entero.
        """
        layout = layout_for(month, year)
        coords = totals_coordinates(layout)
        cells = {key: coord.a1 for key, coord in coords.items()}
        valores = self._storage.batch_read(list(cells.values()))

        def total(key: str) -> Decimal:
            return parse_money_safe(valores.get(cells[key], ""))

        last_day = self._days_considered(month, year, today)
        rango = month_range_for(MUTABLE_FIELDS, last_day, layout)
        rows = self._storage.read_range(rango.a1)

        dias_com_dados = 0
        for idx in range(last_day):
            row = _row_at(rows, idx)
            if any(parse_money_safe(_cell_at(row, col)) != 0 for col in range(3)):
                dias_com_dados += 1

        return MonthSummary(
            month=month,
            year=year,
            total_entradas=total(TOTAL_ENTRADAS),
            total_saidas=total(TOTAL_SAIDAS),
            total_diario=total(TOTAL_DIARIO),
            saida_total=total(SAIDA_TOTAL),
            performance=total(PERFORMANCE),
            dias_com_dados=dias_com_dados,
        )

    def compare_months(self, today: date) -> MonthComparison:
        """Mes de `today` contra el mes anterior (enero → diciembre del año anterior).

        Los dos meses son independientes, así que se leen en paralelo.
        """
        prev_month, prev_year = previous_month(today.month, today.year)
        with ThreadPoolExecutor(max_workers=2) as executor:
            current_future = executor.submit(self.month_totals, today.month, today.year, today)
            previous_future = executor.submit(self.month_totals, prev_month, prev_year, today)
            current = current_future.result()
            previous = previous_future.result()
        return MonthComparison(current=current, previous=previous)

    def forecast(self, today: date) -> MonthForecast | None:
        """Proyección de fin de mes. None si el mes aún no tiene días con datos."""
        summary = self.month_totals(today.month, today.year, today)
        if summary.dias_com_dados == 0:
            return None
        layout = layout_for(today.month, today.year)
        return MonthForecast(
            summary=summary,
            current_day=today.day,
            days_in_month=layout.last_valid_day,
        )

    # =================================================================
    # REPORTES (nunca lanzan StorageError)
    # =================================================================

    def day_report(self, on: date) -> str:
        try:
            record = self.day_record(on)
        except StorageError as e:
            return self._storage_failure("day_report", e)
        self._logger.log_report_generated("dia", 1)
        return report_formatter.format_day_report(record)

    def week_report(self, anchor: date) -> str:
        try:
            summary = self.week_summary(anchor)
        except StorageError as e:
            return self._storage_failure("week_report", e)
        self._logger.log_report_generated("semana", WEEK_DAYS)
        return report_formatter.format_week_report(summary)

    def month_report(self, month: int, year: int, today: date) -> str:
        try:
            summary = self.month_totals(month, year, today)
        except StorageError as e:
            return self._storage_failure("month_report", e)
        self._logger.log_report_generated("mes", 2)
        return report_formatter.format_month_report(
            summary, self._days_considered(month, year, today)
        )

    def performance_report(self, today: date) -> str:
        try:
            summary = self.month_totals(today.month, today.year, today)
        except StorageError as e:
            return self._storage_failure("performance_report", e)
        self._logger.log_report_generated("performance", 2)
        return report_formatter.format_performance_report(summary)

    def compare_report(self, today: date) -> str:
        try:
            comparison = self.compare_months(today)
        except StorageError as e:
            return self._storage_failure("compare_report", e)
        self._logger.log_report_generated("comparar", 4)
        return report_formatter.format_comparison_report(comparison)

    def forecast_report(self, today: date) -> str:
        try:
            forecast = self.forecast(today)
        except StorageError as e:
            return self._storage_failure("forecast_report", e)
        self._logger.log_report_generated("previsao", 2)
        if forecast is None:
            return report_formatter.format_forecast_not_applicable(today.month, today.year)
        return report_formatter.format_forecast_report(forecast)

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _storage_failure(self, operation: str, error: StorageError) -> str:
        self._logger.log_storage_error(operation, error)
        return report_formatter.format_storage_failure()

    @staticmethod
    def _days_considered(month: int, year: int, today: date) -> int:
        """Hasta hoy en el mes en curso; el mes entero en cualquier otro."""
        if month == today.month and year == today.year:
            return today.day
        return layout_for(month, year).last_valid_day


def _row_at(rows: list[list[str]], idx: int) -> list[str]:
    """Fila `idx` del resultado de read_range; [] si el backend la recortó."""
    if idx < len(rows) and rows[idx] is not None:
        return rows[idx]
    return []


def _cell_at(row: list[str], idx: int) -> str:
    if idx < len(row) and row[idx] is not None:
        return str(row[idx])
    return ""


def _record_from_row(on: date, row: list[str]) -> DayRecord:
    """Fila entrada..saldo → DayRecord. Celdas ilegibles valen 0."""
    return DayRecord(
        day=on,
        entrada=parse_money_safe(_cell_at(row, 0)),
        saida=parse_money_safe(_cell_at(row, 1)),
        diario=parse_money_safe(_cell_at(row, 2)),
        saldo=parse_money_safe(_cell_at(row, 3)),
    )
