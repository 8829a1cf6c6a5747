"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from ledger_bot.domain.ports import SheetStorage, ProcessLogger
"""

from ledger_bot.domain.ports.fallback_responder import FallbackResponder
from ledger_bot.domain.ports.output_writer import OutputWriter
from ledger_bot.domain.ports.process_logger import ProcessLogger
from ledger_bot.domain.ports.sheet_storage import SheetStorage

__all__ = [
    "FallbackResponder",
    "OutputWriter",
    "ProcessLogger",
    "SheetStorage",
]
