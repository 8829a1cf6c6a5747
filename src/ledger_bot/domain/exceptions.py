"""
Excepciones de dominio del proyecto finance-ledger-bot.

Los comandos que no se reconocen NO son excepciones: el parser devuelve
el intent UNRECOGNIZED y el dispatcher decide qué responder. Tampoco lo es
una celda con texto ilegible: parse_money_safe la convierte en 0.

Jerarquía:
    LedgerBotError
    ├── InvalidDayError     → El día no existe en el mes del ledger
    ├── InvalidAmountError  → El total de la celda queda fuera de rango
    ├── StorageError        → Falla de lectura/escritura en la planilla
    └── OutputError         → Falla al exportar un mes a Excel
"""

from ledger_bot.domain.shared.money import format_brl


class LedgerBotError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    El dispatcher captura cualquier LedgerBotError para convertirla en un
    mensaje para el usuario; ninguna debe llegar al transporte de chat.
    """


class InvalidDayError(LedgerBotError):
    """Se lanza cuando se pide una celda para un día fuera del mes.

    Ejemplos:
    - Día 30 en febrero.
    - Día 31 en abril.
    - Día 0 o negativo.

    Nunca se "ajusta" el día al último válido: escribir en otra fila
    corrompería el ledger sin que el usuario lo note.
    """

    def __init__(self, day: int, month: int, year: int, last_valid_day: int):
        self.day = day
        self.month = month
        self.year = year
        self.last_valid_day = last_valid_day
        super().__init__(
            f"Dia inválido: {day}. O mês {month:02d}/{year} "
            f"só tem dias de 1 a {last_valid_day}"
        )


class InvalidAmountError(LedgerBotError):
    """Se lanza cuando el total de una celda superaría MAX_AMOUNT.

    Puede pasar al sumar sobre una celda que ya tiene un valor enorme, o
    cuando el monto llega al motor sin pasar por el parser.
    """

    def __init__(self, amount, limit):
        self.amount = amount
        self.limit = limit
        super().__init__(f"Valor fora do limite: o máximo por célula é {format_brl(limit)}")


class StorageError(LedgerBotError):
    """Se lanza cuando el adaptador de planilla no puede leer o escribir.

    Esto puede pasar porque:
    - El archivo .xlsx no existe o está bloqueado por otro programa.
    - La hoja configurada no existe en el libro.
    - El rango pedido no tiene un formato A1 válido.
    - La API remota de la planilla devolvió un error.

    El core nunca reintenta: si se quiere reintentar, es responsabilidad
    del adaptador.
    """

    def __init__(self, operation: str, target: str, causa: str):
        self.operation = operation
        self.target = target
        self.causa = causa
        super().__init__(f"Error en {operation} '{target}': {causa}")


class OutputError(LedgerBotError):
    """Se lanza cuando falla la exportación de un mes a archivo.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Hay un error en el formato del Excel.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
