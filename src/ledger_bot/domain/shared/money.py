"""
Utilidades para manejo de montos monetarios en formato brasileño.

Hay dos fuentes de montos con convenciones distintas:

- Lo que escribe el usuario en el chat: "87,10", "87.10", "1.234,56",
  "517". Puede usar coma o punto como separador decimal, y a veces puntos
  como separador de miles. Se normaliza con `normalize_amount`.

- Lo que hay en las celdas de la planilla: siempre "R$ 1.234,56"
  (punto = miles, coma = decimal). Se lee con `parse_money` /
  `parse_money_safe` y se escribe con `format_brl`.

Siempre se devuelve Decimal, nunca float.
"""

import re
from decimal import Decimal, InvalidOperation

CENTAVOS = Decimal("0.01")

# Tope de un monto individual (un billón de reales). Por encima de esto el
# valor no entra en una celda numérica con centavos exactos.
MAX_AMOUNT = Decimal("1000000000000")

_CURRENCY_SYMBOL_RE = re.compile(r"R\$\s*")


def normalize_amount(text: str) -> Decimal:
    """Convierte un monto escrito en el chat a Decimal.

    Reglas:
    1. Toda coma se convierte en punto.
    2. Si quedan varios puntos, solo el ÚLTIMO es el separador decimal;
       los anteriores eran separadores de miles y se eliminan.

    Args:
        text: Monto tal como lo escribió el usuario, sin palabras clave.

    Returns:
        Decimal con el valor. No se redondea aquí.

    Raises:
        ValueError: Si el texto está vacío, no es un número o su valor
            absoluto supera MAX_AMOUNT.

    Ejemplos:
        >>> normalize_amount("87,10")
        Decimal('87.10')
        >>> normalize_amount("1.234,56")
        Decimal('1234.56')
        >>> normalize_amount("517")
        Decimal('517')
    """
    if not isinstance(text, str):
        raise TypeError(f"normalize_amount espera str, recibió {type(text).__name__}")
    normalized = text.strip()
    if not normalized:
        raise ValueError("El texto del monto está vacío")

    normalized = normalized.replace(",", ".")
    parts = normalized.split(".")
    if len(parts) > 2:
        normalized = "".join(parts[:-1]) + "." + parts[-1]

    try:
        result = Decimal(normalized)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}' (limpio: '{normalized}')")

    _check_range(result, text)
    return result


def parse_money(text: str) -> Decimal:
    """Convierte el texto de una celda ("R$ 1.234,56") a Decimal.

    Maneja:
    - Con símbolo: "R$ 87,10"
    - Sin símbolo: "87,10"
    - Con miles: "R$ 1.234,56"
    - Negativo: "-R$ 50,00" o "R$ -50,00"

    Raises:
        ValueError: Si el texto está vacío, no se puede convertir o supera
            MAX_AMOUNT.

    Ejemplos:
        >>> parse_money("R$ 1.234,56")
        Decimal('1234.56')
        >>> parse_money("-R$ 50,00")
        Decimal('-50.00')
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_money espera str, recibió {type(text).__name__}")
    if not text.strip():
        raise ValueError("El texto del monto está vacío")

    cleaned = _CURRENCY_SYMBOL_RE.sub("", text.strip())
    cleaned = cleaned.replace(" ", "").replace("\u00a0", "")
    cleaned = cleaned.replace(".", "").replace(",", ".")

    if not cleaned or cleaned == "-":
        raise ValueError(f"No se pudo extraer un monto de: '{text}'")

    try:
        result = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}' (limpio: '{cleaned}')")

    _check_range(result, text)
    return result


def parse_money_safe(text: str | None) -> Decimal:
    """Versión tolerante de parse_money: celdas vacías o ilegibles valen 0.

    Es la que usan todos los reportes. Hay celdas históricas vacías o con
    basura ("-", "N/A", fórmulas rotas) y un reporte mensual no puede
    fallar por una de ellas.

    Ejemplos:
        >>> parse_money_safe("R$ 87,10")
        Decimal('87.10')
        >>> parse_money_safe("")
        Decimal('0')
        >>> parse_money_safe("#REF!")
        Decimal('0')
    """
    if not text or text.strip() in ("", "-", "N/A", "n/a"):
        return Decimal("0")

    try:
        return parse_money(text)
    except ValueError:
        return Decimal("0")


def _check_range(result: Decimal, text: str) -> None:
    if not result.is_finite():
        raise ValueError(f"Monto no finito: '{text}'")
    if abs(result) > MAX_AMOUNT:
        raise ValueError(f"Monto fuera de rango: '{text}' (máximo {MAX_AMOUNT})")


def format_brl(amount: Decimal) -> str:
    """Formatea un Decimal como moneda brasileña: "R$ 1.234,56".

    Es el formato que se escribe en las celdas y el que se muestra en los
    reportes del chat.

    Ejemplos:
        >>> format_brl(Decimal("1234.56"))
        'R$ 1.234,56'
        >>> format_brl(Decimal("0"))
        'R$ 0,00'
        >>> format_brl(Decimal("-50"))
        '-R$ 50,00'
    """
    amount = Decimal(amount).quantize(CENTAVOS)
    # Primero formato inglés (1,234.56) y después se intercambian separadores
    texto = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    if amount < 0:
        return f"-R$ {texto}"
    return f"R$ {texto}"
