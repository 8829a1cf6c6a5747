"""
Nombres de meses en portugués para los reportes del chat.

Los reportes muestran el mes por nombre ("OUTUBRO/2026", "janeiro vs
dezembro"). Se usa un diccionario propio en vez de `locale`/`strftime("%B")`
porque el locale pt_BR no siempre está instalado en el contenedor y
`setlocale` es global al proceso.
"""

_MONTH_NAMES: dict[int, str] = {
    1: "janeiro",
    2: "fevereiro",
    3: "março",
    4: "abril",
    5: "maio",
    6: "junho",
    7: "julho",
    8: "agosto",
    9: "setembro",
    10: "outubro",
    11: "novembro",
    12: "dezembro",
}


def month_name(month: int) -> str:
    """Devuelve el nombre del mes en minúsculas: 1 → 'janeiro'.

    Raises:
        ValueError: Si el mes no está entre 1 y 12.

    Ejemplos:
        >>> month_name(3)
        'março'
    """
    result = _MONTH_NAMES.get(month)
    if result is None:
        raise ValueError(f"Mes fuera de rango: {month}. Debe ser 1-12.")
    return result


def month_label(month: int, year: int) -> str:
    """Etiqueta para encabezados de reporte: (10, 2026) → 'OUTUBRO/2026'."""
    return f"{month_name(month).upper()}/{year}"


def previous_month(month: int, year: int) -> tuple[int, int]:
    """Mes anterior, con cambio de año en enero.

    Ejemplos:
        >>> previous_month(1, 2026)
        (12, 2025)
        >>> previous_month(10, 2026)
        (9, 2026)
    """
    if month == 1:
        return 12, year - 1
    return month - 1, year
