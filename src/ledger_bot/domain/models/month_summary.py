"""
Modelo de dominio: Resumen mensual, comparación entre meses y previsión.

Los totales del mes NO se calculan sumando días: se leen de las celdas de
totales que la propia planilla mantiene (fila 40: entradas, saídas,
diário; fila 43: saída total y performance). Solo `dias_com_dados` se
cuenta recorriendo las filas del mes.
"""

from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class MonthSummary:
    """Totales de un mes del ledger."""

    month: int
    year: int
    total_entradas: Decimal
    total_saidas: Decimal
    total_diario: Decimal

    saida_total: Decimal
    """Saídas + Diário (celda de la fila 43)."""

    performance: Decimal
    """Entradas - Saída total (celda de la fila 43)."""

    dias_com_dados: int
    """Días del mes con entrada, saída o diário distinto de 0."""

    @property
    def media_diaria(self) -> Decimal:
        """(entradas + saídas + diário) / dias_com_dados; 0 si no hay días con datos."""
        if self.dias_com_dados == 0:
            return ZERO
        total = self.total_entradas + self.total_saidas + self.total_diario
        return total / Decimal(self.dias_com_dados)

    @property
    def has_data(self) -> bool:
        return self.dias_com_dados > 0

    @property
    def percentual_performance(self) -> Decimal | None:
        """Performance como porcentaje de las entradas. None si no hubo entradas."""
        if self.total_entradas <= ZERO:
            return None
        return self.performance / self.total_entradas * Decimal("100")

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Mes fuera de rango: {self.month}. Debe ser 1-12.")
        if self.dias_com_dados < 0:
            raise ValueError(f"dias_com_dados no puede ser negativo: {self.dias_com_dados}")


@dataclass(frozen=True)
class MonthComparison:
    """Mes actual contra el mes inmediatamente anterior."""

    current: MonthSummary
    previous: MonthSummary

    @property
    def diff_entradas(self) -> Decimal:
        return self.current.total_entradas - self.previous.total_entradas

    @property
    def diff_saida_total(self) -> Decimal:
        return self.current.saida_total - self.previous.saida_total

    @property
    def diff_performance(self) -> Decimal:
        return self.current.performance - self.previous.performance


@dataclass(frozen=True)
class MonthForecast:
    """Proyección lineal de fin de mes a partir de la media por día con datos."""

    summary: MonthSummary
    current_day: int
    days_in_month: int

    @property
    def days_remaining(self) -> int:
        return self.days_in_month - self.current_day

    @property
    def media_saidas(self) -> Decimal:
        return self.summary.total_saidas / Decimal(self.summary.dias_com_dados)

    @property
    def media_diario(self) -> Decimal:
        return self.summary.total_diario / Decimal(self.summary.dias_com_dados)

    @property
    def media_saida_total(self) -> Decimal:
        total = self.summary.total_saidas + self.summary.total_diario
        return total / Decimal(self.summary.dias_com_dados)

    @property
    def projecao_saidas(self) -> Decimal:
        return self.summary.total_saidas + self.media_saidas * self.days_remaining

    @property
    def projecao_diario(self) -> Decimal:
        return self.summary.total_diario + self.media_diario * self.days_remaining

    @property
    def projecao_saida_total(self) -> Decimal:
        return self.summary.saida_total + self.media_saida_total * self.days_remaining

    @property
    def projecao_performance(self) -> Decimal:
        """Entradas (fijas) menos la saída total proyectada."""
        return self.summary.total_entradas - self.projecao_saida_total

    def __post_init__(self) -> None:
        if self.summary.dias_com_dados == 0:
            raise ValueError("No se puede proyectar un mes sin días con datos")
        if not 1 <= self.current_day <= self.days_in_month:
            raise ValueError(
                f"Día actual fuera de rango: {self.current_day}/{self.days_in_month}"
            )
