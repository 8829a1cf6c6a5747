"""
Servicio de dominio: Dispatcher de comandos.

Es el único punto de entrada del core para el transporte de chat:

    (conversation_id, texto) → handle() → texto de respuesta

1. Calcula el "ahora" de Brasilia UNA vez por mensaje.
2. Parsea el mensaje.
3. Si no se reconoce: delega al respondedor alternativo (IA) o, si no
   hay uno o falla, devuelve la ayuda estática.
4. Si se reconoce: ejecuta EXACTAMENTE una operación del motor, elegida
   en una tabla intent → handler.

Ninguna excepción pasa de aquí: cualquier error inesperado se registra
y se responde con una disculpa que apunta al comando "ajuda".
"""

from collections.abc import Callable
from datetime import date, datetime

from ledger_bot.domain.models.intent import Intent
from ledger_bot.domain.models.parsed_command import ParsedCommand
from ledger_bot.domain.ports.fallback_responder import FallbackResponder
from ledger_bot.domain.ports.process_logger import ProcessLogger
from ledger_bot.domain.services.command_parser import parse_command
from ledger_bot.domain.services.ledger_engine import LedgerEngine
from ledger_bot.domain.services.report_formatter import (
    GENERIC_ERROR_MESSAGE,
    HELP_MESSAGE,
)
from ledger_bot.domain.shared.date_resolver import brasilia_now

DEFAULT_CONVERSATION_ID = "default"


class CommandDispatcher:
    """Enruta cada mensaje a una operación del LedgerEngine."""

    def __init__(
        self,
        engine: LedgerEngine,
        logger: ProcessLogger,
        fallback: FallbackResponder | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Args:
            engine: Motor del ledger.
            logger: Logger para la bitácora de procesamiento.
            fallback: Respondedor para mensajes no reconocidos. Opcional.
            clock: Reloj a usar para el "ahora". Por defecto, el del sistema.
                   Los tests inyectan uno fijo.
        """
        self._engine = engine
        self._logger = logger
        self._fallback = fallback
        self._clock = clock

        self._handlers: dict[Intent, Callable[[ParsedCommand, date], str]] = {
            Intent.ADD_ENTRADA: self._handle_update,
            Intent.ADD_SAIDA: self._handle_update,
            Intent.ADD_DIARIO: self._handle_update,
            Intent.QUERY_SALDO_TODAY: lambda cmd, today: self._engine.day_report(today),
            Intent.QUERY_SALDO_DATE: lambda cmd, today: self._engine.day_report(
                cmd.target_date
            ),
            Intent.QUERY_WEEK: lambda cmd, today: self._engine.week_report(today),
            Intent.QUERY_MONTH: lambda cmd, today: self._engine.month_report(
                today.month, today.year, today
            ),
            Intent.PERFORMANCE: lambda cmd, today: self._engine.performance_report(today),
            Intent.COMPARE: lambda cmd, today: self._engine.compare_report(today),
            Intent.FORECAST: lambda cmd, today: self._engine.forecast_report(today),
            Intent.HELP: lambda cmd, today: HELP_MESSAGE,
        }

    def handle(self, raw_text: str, conversation_id: str = DEFAULT_CONVERSATION_ID) -> str:
        """Procesa un mensaje y devuelve la respuesta.

        Args:
            raw_text: Mensaje tal como llegó del chat.
            conversation_id: Identificador del chat (para el historial de la IA).

        Returns:
            Texto de respuesta. Nunca lanza excepciones.
        """
        try:
            self._logger.log_message_received(conversation_id, raw_text)

            anchor = brasilia_now(self._clock)
            command = parse_command(raw_text, anchor)

            if not command.is_recognized:
                self._logger.log_command_unrecognized(conversation_id, raw_text)
                return self._handle_unrecognized(raw_text, conversation_id)

            self._logger.log_command_parsed(
                conversation_id, command.intent.name, command.replace
            )
            handler = self._handlers[command.intent]
            return handler(command, anchor.date())

        except Exception as e:
            self._logger.log_unexpected_error(conversation_id, e)
            return GENERIC_ERROR_MESSAGE

    def is_valid_command(self, text: str) -> bool:
        """True si el texto se reconoce como comando (sin ejecutarlo)."""
        return parse_command(text, brasilia_now(self._clock)).is_recognized

    # =================================================================
    # HANDLERS
    # =================================================================

    def _handle_update(self, command: ParsedCommand, today: date) -> str:
        result = self._engine.apply_update(
            command.intent,
            command.amount,
            command.effective_date,
            replace=command.replace,
        )
        return result.message

    def _handle_unrecognized(self, raw_text: str, conversation_id: str) -> str:
        """Delega a la IA; si no hay o falla, devuelve la ayuda."""
        if self._fallback is None or not (raw_text or "").strip():
            return HELP_MESSAGE

        try:
            respuesta = self._fallback.respond(raw_text, conversation_id)
        except Exception as e:
            self._logger.log_unexpected_error(conversation_id, e)
            return HELP_MESSAGE

        self._logger.log_fallback_used(conversation_id, type(self._fallback).__name__)
        return respuesta or HELP_MESSAGE
