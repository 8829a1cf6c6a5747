"""
Resolución de fechas escritas en lenguaje natural (pt-BR).

El usuario escribe fechas de varias formas en el chat:

- Palabras relativas: "hoje", "hj", "ontem", "amanha", "amanhã"
- Día/mes:            "16/12"         → año del ancla
- Día/mes/año:        "16/12/24"      → 2024
                      "16/12/2024"

Todas se resuelven contra un "ahora" ancla que se calcula UNA vez por
mensaje con `brasilia_now()`. El resolver nunca consulta el reloj por su
cuenta: recibe el ancla como parámetro, así los tests pueden fijar
cualquier momento.

La zona horaria es fija (UTC-3, horario de Brasilia) y no depende de la
zona del servidor donde corre el bot.
"""

import re
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone

BRASILIA_UTC_OFFSET = timedelta(hours=-3)
BRASILIA_TZ = timezone(BRASILIA_UTC_OFFSET, name="BRT")

DATE_TOKEN_PATTERN = r"\d{1,2}/\d{1,2}(?:/(?:\d{4}|\d{2}))?"

# El año tiene exactamente 2 o 4 dígitos: "16/12/024" no es una fecha.
_DATE_TOKEN_RE = re.compile(r"^(\d{1,2})/(\d{1,2})(?:/(\d{4}|\d{2}))?$")

_RELATIVE_DAYS: dict[str, int] = {
    "hoje": 0,
    "hj": 0,
    "ontem": -1,
    "amanha": 1,
    "amanhã": 1,
}


def brasilia_now(clock: Callable[[], datetime] | None = None) -> datetime:
    """Devuelve la hora actual de Brasilia (UTC-3) como datetime con zona.

    Args:
        clock: Función que devuelve el instante actual. Por defecto
               `datetime.now(timezone.utc)`. Si devuelve un datetime sin
               zona, se asume UTC.

    Returns:
        datetime con tzinfo fijo UTC-3.
    """
    instante = clock() if clock is not None else datetime.now(timezone.utc)
    if instante.tzinfo is None:
        instante = instante.replace(tzinfo=timezone.utc)
    return instante.astimezone(BRASILIA_TZ)


def resolve_date(token: str, anchor_now: datetime | date) -> date:
    """Resuelve un token de fecha a un objeto date.

    Args:
        token: Texto de la fecha: "hoje", "ontem", "amanha", "16/12",
               "16/12/24", "16/12/2024". Case-insensitive.
        anchor_now: Momento ancla (normalmente `brasilia_now()`).

    Returns:
        La fecha resuelta. Cualquier texto no reconocido, o un dd/mm que no
        forma una fecha de calendario (ej: "31/02"), devuelve la fecha del
        ancla. Esta función nunca lanza excepciones.

    Ejemplos (ancla 2026-10-19):
        >>> resolve_date("ontem", datetime(2026, 10, 19))
        date(2026, 10, 18)
        >>> resolve_date("16/12", datetime(2026, 10, 19))
        date(2026, 12, 16)
        >>> resolve_date("01/01/25", datetime(2026, 10, 19))
        date(2025, 1, 1)
    """
    today = anchor_now.date() if isinstance(anchor_now, datetime) else anchor_now
    normalized = (token or "").strip().lower()

    if normalized in _RELATIVE_DAYS:
        return today + timedelta(days=_RELATIVE_DAYS[normalized])

    m = _DATE_TOKEN_RE.match(normalized)
    if m:
        day = int(m.group(1))
        month = int(m.group(2))
        year = _expand_year(m.group(3)) if m.group(3) else today.year
        try:
            return date(year, month, day)
        except ValueError:
            return today

    return today


def format_date(value: date) -> str:
    """Formatea una fecha como dd/mm/aaaa para los mensajes del chat."""
    return value.strftime("%d/%m/%Y")


def _expand_year(token: str) -> int:
    """Años de 2 dígitos son del siglo actual: 24 → 2024.

    No hay ventana de corte: el ledger no guarda fechas del siglo pasado.
    "0000" queda en el año 0, que date() rechaza.
    """
    if len(token) == 2:
        return 2000 + int(token)
    return int(token)
