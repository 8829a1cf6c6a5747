"""
Utilidades de limpieza de texto para los mensajes del chat.

Los mensajes llegan del transporte tal como los escribió el usuario:
con mayúsculas, espacios dobles, saltos de línea o caracteres invisibles
que algunos teclados de celular insertan. Estas funciones los dejan listos
para que el parser aplique sus regex.

No tienen lógica de negocio (no saben de comandos ni montos).
"""

import re

_SUBSTITUTION_MARKER_RE = re.compile(r"^sub\s+", re.IGNORECASE)


def clean_whitespace(text: str) -> str:
    """Reemplaza múltiples espacios/tabs/saltos por un solo espacio y hace strip.

    Ejemplos:
        >>> clean_whitespace("  saldo   16/12  ")
        'saldo 16/12'
    """
    return re.sub(r"\s+", " ", text).strip()


def remove_non_printable(text: str) -> str:
    """Elimina caracteres no imprimibles (zero-width, control chars).

    Algunos teclados de celular agregan U+200B o U+FEFF al copiar y pegar,
    lo que rompe regex como ^saldo$.

    Ejemplos:
        >>> remove_non_printable("saldo\\u200b")
        'saldo '
    """
    return "".join(char if char.isprintable() else " " for char in text)


def normalize_command_text(text: str) -> str:
    """Aplica todas las limpiezas en secuencia y pasa a minúsculas.

    Secuencia:
    1. Eliminar caracteres no imprimibles
    2. Colapsar espacios
    3. Minúsculas (los comandos son case-insensitive)
    """
    return clean_whitespace(remove_non_printable(text or "")).lower()


def strip_substitution_marker(text: str) -> tuple[str, bool]:
    """Quita el prefijo "sub " de un comando.

    Returns:
        Tupla (texto_sin_prefijo, tenia_prefijo).

    Ejemplos:
        >>> strip_substitution_marker("sub entrada 500")
        ('entrada 500', True)
        >>> strip_substitution_marker("subir 10")
        ('subir 10', False)
    """
    stripped, count = _SUBSTITUTION_MARKER_RE.subn("", text, count=1)
    return stripped, count > 0
