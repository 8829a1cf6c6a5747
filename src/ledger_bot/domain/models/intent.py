"""
Modelo de dominio: Intents de comando y campos del ledger.

Un Intent es el tipo de comando que el parser reconoce en un mensaje.
El conjunto es cerrado: cualquier texto termina en exactamente uno de
estos valores, incluido UNRECOGNIZED.

Un LedgerField es una de las columnas de un bloque mensual de la planilla.
"""

from enum import Enum


class LedgerField(Enum):
    """Columnas de un bloque mensual, con su desplazamiento dentro del bloque.

    Bloque de enero (desplazamiento 0):
        B = Dia (+1)
        C = Entrada (+2)
        D = Saída (+3)
        E = Diário (+4)
        F = Saldo (+5)
        G = separador (sin campo)
    """

    DAY = 1
    ENTRADA = 2
    SAIDA = 3
    DIARIO = 4
    SALDO = 5

    @property
    def column_offset(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """Nombre para mostrar en los mensajes del chat."""
        return _FIELD_LABELS[self]


_FIELD_LABELS = {
    LedgerField.DAY: "Dia",
    LedgerField.ENTRADA: "Entrada",
    LedgerField.SAIDA: "Saída",
    LedgerField.DIARIO: "Diário",
    LedgerField.SALDO: "Saldo",
}

# Campos que el usuario puede modificar desde el chat
MUTABLE_FIELDS = (LedgerField.ENTRADA, LedgerField.SAIDA, LedgerField.DIARIO)

# Campos que se leen para el reporte de un día
VALUE_FIELDS = (LedgerField.ENTRADA, LedgerField.SAIDA, LedgerField.DIARIO, LedgerField.SALDO)


class Intent(Enum):
    """Tipos de comando reconocidos por el parser."""

    ADD_ENTRADA = "entrada"
    ADD_SAIDA = "saida"
    ADD_DIARIO = "diario"
    QUERY_SALDO_TODAY = "saldo_hoje"
    QUERY_SALDO_DATE = "saldo_data"
    QUERY_WEEK = "semana"
    QUERY_MONTH = "mes"
    PERFORMANCE = "performance"
    COMPARE = "comparar"
    FORECAST = "previsao"
    HELP = "ajuda"
    UNRECOGNIZED = "nao_reconhecido"

    @property
    def is_update(self) -> bool:
        """True para los intents que escriben un monto en la planilla."""
        return self in _UPDATE_FIELDS

    @property
    def field(self) -> LedgerField:
        """Columna que modifica un intent de actualización.

        Raises:
            ValueError: Si el intent no es de actualización.
        """
        try:
            return _UPDATE_FIELDS[self]
        except KeyError:
            raise ValueError(f"El intent {self.name} no modifica ninguna columna")


_UPDATE_FIELDS = {
    Intent.ADD_ENTRADA: LedgerField.ENTRADA,
    Intent.ADD_SAIDA: LedgerField.SAIDA,
    Intent.ADD_DIARIO: LedgerField.DIARIO,
}
