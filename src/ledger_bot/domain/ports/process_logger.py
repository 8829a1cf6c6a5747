"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar los eventos que ocurren mientras el bot
procesa mensajes del chat: mensajes recibidos, comandos reconocidos o no,
celdas escritas, reportes generados y errores.

Los métodos nombran eventos del ledger ("celda actualizada", "día
inválido"), no niveles de `logging`. El adaptador decide cómo mostrarlos:
- ConsoleLogger: líneas con emojis y un resumen al final de `ledger-bot chat`.
- Tests: el mismo ConsoleLogger en modo silencioso, consultando get_summary().
"""

from abc import ABC, abstractmethod


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento de mensajes."""

    # --- Entrada ---

    @abstractmethod
    def log_message_received(self, conversation_id: str, text: str) -> None:
        """Registra que llegó un mensaje del chat."""
        ...

    @abstractmethod
    def log_command_parsed(self, conversation_id: str, intent: str, replace: bool) -> None:
        """Registra que el mensaje se reconoció como comando.

        Args:
            conversation_id: Identificador del chat.
            intent: Nombre del intent reconocido. Ejemplo: 'ADD_DIARIO'.
            replace: True si el comando era "sub ..." (sustitución).
        """
        ...

    @abstractmethod
    def log_command_unrecognized(self, conversation_id: str, text: str) -> None:
        """Registra que ninguna regla del parser reconoció el mensaje."""
        ...

    @abstractmethod
    def log_fallback_used(self, conversation_id: str, responder_name: str) -> None:
        """Registra que un mensaje se delegó al respondedor alternativo."""
        ...

    # --- Operaciones sobre la planilla ---

    @abstractmethod
    def log_cell_updated(self, cell: str, previous: str, written: str) -> None:
        """Registra una escritura en la planilla.

        Args:
            cell: Celda en notación A1. Ejemplo: 'E24'.
            previous: Texto que tenía la celda antes ('' si estaba vacía,
                      o si fue una sustitución y no se leyó).
            written: Texto escrito. Ejemplo: 'R$ 87,10'.
        """
        ...

    @abstractmethod
    def log_report_generated(self, report: str, reads: int) -> None:
        """Registra que se generó un reporte.

        Args:
            report: Nombre del reporte: 'dia', 'semana', 'mes', etc.
            reads: Cantidad de lecturas a la planilla que hizo.
        """
        ...

    # --- Errores ---

    @abstractmethod
    def log_invalid_day(self, error: Exception) -> None:
        """Registra un intento de acceder a un día que no existe en el mes."""
        ...

    @abstractmethod
    def log_invalid_amount(self, error: Exception) -> None:
        """Registra una actualización rechazada por un monto fuera de rango."""
        ...

    @abstractmethod
    def log_storage_error(self, operation: str, error: Exception) -> None:
        """Registra una falla del almacenamiento de la planilla.

        Args:
            operation: Operación del motor que falló. Ejemplo: 'month_report'.
            error: La excepción (normalmente StorageError).
        """
        ...

    @abstractmethod
    def log_unexpected_error(self, conversation_id: str, error: Exception) -> None:
        """Registra un error no previsto capturado en el dispatcher.

        Se espera que la implementación capture el traceback completo
        para facilitar debugging.
        """
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de toda la sesión.

        Returns:
            Diccionario con métricas:
            {
                'mensajes_recibidos': int,
                'comandos_reconocidos': int,
                'comandos_no_reconocidos': int,
                'respuestas_alternativas': int,
                'celdas_actualizadas': int,
                'reportes_generados': int,
                'errores': List[dict],  # [{tipo, detalle}]
            }
        """
        ...
