"""
Punto de entrada CLI: ledger-bot.

Uso:
    # Procesar un solo mensaje e imprimir la respuesta
    ledger-bot send "diario 87,10" --workbook /ruta/financas.xlsx

    # Sesión interactiva: un mensaje por línea (Ctrl+D para salir)
    ledger-bot chat --workbook /ruta/financas.xlsx

    # Exportar un mes a un Excel aparte
    ledger-bot export 10/2026 --workbook /ruta/financas.xlsx -o /ruta/outubro.xlsx

Sin --workbook (ni LEDGER_WORKBOOK en el entorno) se usa una planilla en
memoria: sirve para probar comandos sin tocar el archivo real.

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (WorkbookSheetStorage, OpenAIResponder, etc.)
- Las inyecta en el LedgerEngine y el CommandDispatcher.
- Ejecuta el comando pedido.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import re
import sys
from pathlib import Path

from ledger_bot.adapters.output.loggers.console_logger import ConsoleLogger
from ledger_bot.adapters.output.responders.openai_responder import OpenAIResponder
from ledger_bot.adapters.output.storage.memory_storage import InMemorySheetStorage
from ledger_bot.adapters.output.storage.workbook_storage import WorkbookSheetStorage
from ledger_bot.adapters.output.writers.excel_writer import ExcelWriter
from ledger_bot.domain.exceptions import LedgerBotError
from ledger_bot.domain.ports.fallback_responder import FallbackResponder
from ledger_bot.domain.ports.sheet_storage import SheetStorage
from ledger_bot.domain.services.command_dispatcher import CommandDispatcher
from ledger_bot.domain.services.ledger_engine import LedgerEngine
from ledger_bot.domain.shared.date_resolver import brasilia_now
from ledger_bot.domain.shared.month_map import month_name
from ledger_bot.infrastructure.settings import settings

_MONTH_ARG_RE = re.compile(r"^(\d{1,2})/(\d{4})$")


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    # --- Ensamblar componentes ---
    # Si quisiéramos cambiar la planilla (ej: Google Sheets en vez de
    # un .xlsx), solo cambiaríamos esta sección. El dominio no se toca.

    logger = ConsoleLogger(verbose=args.verbose)
    storage = _build_storage(args)
    engine = LedgerEngine(storage=storage, logger=logger)

    if args.command == "export":
        _run_export(args, engine)
        return

    dispatcher = CommandDispatcher(
        engine=engine,
        logger=logger,
        fallback=_build_fallback(args),
    )

    if args.command == "send":
        print(dispatcher.handle(args.message, conversation_id=args.chat_id))
    elif args.command == "chat":
        _run_chat(dispatcher, args.chat_id)
        logger.print_summary()


def _build_storage(args: argparse.Namespace) -> SheetStorage:
    workbook = args.workbook or settings.LEDGER_WORKBOOK
    if not workbook:
        print("⚠️  Sin --workbook: usando una planilla en memoria (nada se guarda).")
        return InMemorySheetStorage()
    return WorkbookSheetStorage(Path(workbook), sheet_name=args.sheet or settings.LEDGER_SHEET)


def _build_fallback(args: argparse.Namespace) -> FallbackResponder | None:
    if args.no_ai or not settings.ai_enabled():
        return None
    return OpenAIResponder(
        client=settings.get_openai_client(),
        model=settings.OPENAI_MODEL,
        max_history=settings.FALLBACK_MAX_HISTORY,
        context_timeout_minutes=settings.FALLBACK_CONTEXT_TIMEOUT_MINUTES,
    )


def _run_chat(dispatcher: CommandDispatcher, chat_id: str) -> None:
    print("=" * 60)
    print("LEDGER BOT: digite 'ajuda' para ver os comandos (Ctrl+D para sair)")
    print("=" * 60)
    for line in sys.stdin:
        message = line.strip()
        if not message:
            continue
        print(dispatcher.handle(message, conversation_id=chat_id))
        print()


def _run_export(args: argparse.Namespace, engine: LedgerEngine) -> None:
    m = _MONTH_ARG_RE.match(args.month.strip())
    if not m or not 1 <= int(m.group(1)) <= 12:
        print(f"❌ Mês inválido: '{args.month}'. Use MM/AAAA, ex: 10/2026")
        sys.exit(1)
    month, year = int(m.group(1)), int(m.group(2))

    output_path = Path(args.output) if args.output else Path(
        f"ledger_{year}_{month:02d}_{month_name(month)}.xlsx"
    )

    try:
        today = brasilia_now().date()
        summary = engine.month_totals(month, year, today)
        records = engine.month_records(month, year)
        created = ExcelWriter().write_month(summary, records, output_path)
    except LedgerBotError as e:
        print(f"❌ {e}")
        sys.exit(1)

    print(f"📁 Excel generado: {created}")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Bot de controle financeiro sobre uma planilha anual",
        epilog='Ejemplo: ledger-bot send "entrada 352,91 01/01" --workbook financas.xlsx',
    )

    comunes = argparse.ArgumentParser(add_help=False)
    comunes.add_argument(
        "--workbook",
        help="Ruta del .xlsx del ledger. Por defecto: LEDGER_WORKBOOK del entorno.",
    )
    comunes.add_argument(
        "--sheet",
        help="Hoja del ledger dentro del libro. Por defecto: la hoja activa.",
    )
    comunes.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Imprime la bitácora de procesamiento.",
    )

    chat_flags = argparse.ArgumentParser(add_help=False)
    chat_flags.add_argument(
        "--chat-id",
        dest="chat_id",
        default="cli",
        help="Identificador de la conversación (historial de la IA).",
    )
    chat_flags.add_argument(
        "--no-ai",
        dest="no_ai",
        action="store_true",
        help="No usar OpenAI para mensajes no reconocidos (responde la ayuda).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    send = subparsers.add_parser(
        "send", parents=[comunes, chat_flags], help="Procesa un mensaje y muestra la respuesta"
    )
    send.add_argument("message", help='Mensaje del chat, ej: "diario 87,10"')

    subparsers.add_parser(
        "chat", parents=[comunes, chat_flags], help="Lee mensajes de stdin, uno por línea"
    )

    export = subparsers.add_parser("export", parents=[comunes], help="Exporta un mes a Excel")
    export.add_argument("month", help="Mes a exportar en formato MM/AAAA, ej: 10/2026")
    export.add_argument(
        "-o",
        "--output",
        dest="output",
        help="Archivo de salida. Por defecto: ledger_AAAA_MM_<mes>.xlsx",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
