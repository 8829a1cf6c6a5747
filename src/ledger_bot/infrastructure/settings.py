"""
Configuración y variables de entorno.

Se leen del entorno (o de un archivo .env en el directorio de trabajo)
UNA vez, al importar el módulo. Los flags del CLI tienen prioridad sobre
estos valores.

La zona horaria (UTC-3) NO es configurable: es una constante del dominio
(date_resolver.BRASILIA_UTC_OFFSET).
"""

import os

from dotenv import load_dotenv
from openai import OpenAI

# Cargar variables del .env
load_dotenv()


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"La variable {name} debe ser un entero, recibió '{value}'")


class Settings:
    """Configuración centralizada de la aplicación."""

    # ========================================
    # 📗 PLANILLA
    # ========================================
    LEDGER_WORKBOOK = os.getenv("LEDGER_WORKBOOK")
    LEDGER_SHEET = os.getenv("LEDGER_SHEET") or None

    # ========================================
    # 🤖 OPENAI
    # ========================================
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

    # ========================================
    # 💬 HISTORIAL DE CONVERSACIÓN
    # ========================================
    FALLBACK_MAX_HISTORY = _int_env("FALLBACK_MAX_HISTORY", 10)  # mensajes
    FALLBACK_CONTEXT_TIMEOUT_MINUTES = _int_env("FALLBACK_CONTEXT_TIMEOUT_MINUTES", 30)

    @classmethod
    def ai_enabled(cls) -> bool:
        """True si hay una API key de OpenAI configurada."""
        return bool(cls.OPENAI_API_KEY and cls.OPENAI_API_KEY.strip())

    @classmethod
    def get_openai_client(cls) -> OpenAI:
        """Obtiene una instancia configurada del cliente OpenAI."""
        return OpenAI(api_key=cls.OPENAI_API_KEY)


# Instancia global de configuración
settings = Settings()
