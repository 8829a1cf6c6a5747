"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y lleva contadores para un resumen final.

Útil para:
- Desarrollo y debugging.
- La sesión interactiva `ledger-bot chat`.

Para producción se podría implementar un FileLogger o WebhookLogger que
implemente la misma interfaz sin cambiar el dominio.
"""

import traceback

from ledger_bot.domain.ports.process_logger import ProcessLogger

_MAX_PREVIEW = 60


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Args:
            verbose: Si es False solo se imprimen los errores; los
                     contadores se llevan igual.
        """
        self._verbose = verbose
        self._mensajes_recibidos: int = 0
        self._comandos_reconocidos: int = 0
        self._comandos_no_reconocidos: int = 0
        self._respuestas_alternativas: int = 0
        self._celdas_actualizadas: int = 0
        self._reportes_generados: int = 0
        self._errores: list[dict] = []

    # --- Entrada ---

    def log_message_received(self, conversation_id: str, text: str) -> None:
        self._mensajes_recibidos += 1
        self._print(f"  📩 Mensaje [{conversation_id}]: {_preview(text)}")

    def log_command_parsed(self, conversation_id: str, intent: str, replace: bool) -> None:
        self._comandos_reconocidos += 1
        modo = " (sub)" if replace else ""
        self._print(f"  🧭 Comando: {intent}{modo}")

    def log_command_unrecognized(self, conversation_id: str, text: str) -> None:
        self._comandos_no_reconocidos += 1
        self._print(f"  ❔ No reconocido: {_preview(text)}")

    def log_fallback_used(self, conversation_id: str, responder_name: str) -> None:
        self._respuestas_alternativas += 1
        self._print(f"  🤖 Respuesta alternativa ({responder_name})")

    # --- Operaciones sobre la planilla ---

    def log_cell_updated(self, cell: str, previous: str, written: str) -> None:
        self._celdas_actualizadas += 1
        antes = previous if previous else "vacía"
        self._print(f"  ✏️  {cell}: {antes} → {written}")

    def log_report_generated(self, report: str, reads: int) -> None:
        self._reportes_generados += 1
        self._print(f"  📊 Reporte '{report}' ({reads} lecturas)")

    # --- Errores ---

    def log_invalid_day(self, error: Exception) -> None:
        self._errores.append({"tipo": "dia_invalido", "detalle": str(error)})
        print(f"  ⚠️  Día inválido: {error}")

    def log_invalid_amount(self, error: Exception) -> None:
        self._errores.append({"tipo": "monto_invalido", "detalle": str(error)})
        print(f"  ⚠️  Monto fuera de rango: {error}")

    def log_storage_error(self, operation: str, error: Exception) -> None:
        self._errores.append({"tipo": "planilla", "detalle": f"{operation}: {error}"})
        print(f"  ❌ Error de planilla en {operation}: {error}")

    def log_unexpected_error(self, conversation_id: str, error: Exception) -> None:
        self._errores.append({"tipo": "inesperado", "detalle": f"{type(error).__name__}: {error}"})
        print(f"  ❌ Error inesperado [{conversation_id}]: {type(error).__name__}: {error}")
        if self._verbose:
            traceback.print_exception(type(error), error, error.__traceback__)

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "mensajes_recibidos": self._mensajes_recibidos,
            "comandos_reconocidos": self._comandos_reconocidos,
            "comandos_no_reconocidos": self._comandos_no_reconocidos,
            "respuestas_alternativas": self._respuestas_alternativas,
            "celdas_actualizadas": self._celdas_actualizadas,
            "reportes_generados": self._reportes_generados,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final de la sesión."""
        print("\n" + "=" * 60)
        print("RESUMEN DE LA SESIÓN")
        print("=" * 60)
        print(f"  Mensajes recibidos:       {self._mensajes_recibidos}")
        print(f"  Comandos reconocidos:     {self._comandos_reconocidos}")
        print(f"  Comandos no reconocidos:  {self._comandos_no_reconocidos}")
        print(f"  Respuestas alternativas:  {self._respuestas_alternativas}")
        print(f"  Celdas actualizadas:      {self._celdas_actualizadas}")
        print(f"  Reportes generados:       {self._reportes_generados}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - [{err['tipo']}] {err['detalle']}")

        print("=" * 60)

    def _print(self, line: str) -> None:
        if self._verbose:
            print(line)


def _preview(text: str) -> str:
    """Primera línea del mensaje, recortada."""
    linea = (text or "").strip().splitlines()[0] if (text or "").strip() else ""
    if len(linea) > _MAX_PREVIEW:
        return linea[: _MAX_PREVIEW - 1] + "…"
    return linea
