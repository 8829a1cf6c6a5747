"""
Conversión entre índices de columna y notación A1 de planillas.

En todo el dominio las columnas son índices base 0 (A = 0, B = 1, ...,
Z = 25, AA = 26). Solo en la frontera con el adaptador de planilla se
convierten a letras.
"""

import re

_CELL_RE = re.compile(r"^([A-Z]+)(\d+)$")


def column_to_letter(column: int) -> str:
    """Convierte un índice de columna base 0 a letras.

    Ejemplos:
        >>> column_to_letter(0)
        'A'
        >>> column_to_letter(25)
        'Z'
        >>> column_to_letter(26)
        'AA'
        >>> column_to_letter(71)
        'BT'
    """
    if column < 0:
        raise ValueError(f"Índice de columna negativo: {column}")
    letters = ""
    while column >= 0:
        letters = chr(column % 26 + ord("A")) + letters
        column = column // 26 - 1
    return letters


def letter_to_column(letters: str) -> int:
    """Inversa de column_to_letter: 'A' → 0, 'AA' → 26."""
    letters = letters.strip().upper()
    if not letters or not letters.isalpha():
        raise ValueError(f"Letras de columna inválidas: '{letters}'")
    column = 0
    for char in letters:
        column = column * 26 + (ord(char) - ord("A") + 1)
    return column - 1


def split_cell(a1: str) -> tuple[int, int]:
    """Separa una referencia 'C6' en (columna base 0, fila base 1).

    Raises:
        ValueError: Si la referencia no tiene formato A1.

    Ejemplos:
        >>> split_cell("C6")
        (2, 6)
    """
    m = _CELL_RE.match(a1.strip().upper())
    if not m:
        raise ValueError(f"Referencia de celda inválida: '{a1}'")
    return letter_to_column(m.group(1)), int(m.group(2))


def split_range(a1_range: str) -> tuple[tuple[int, int], tuple[int, int]]:
    """Separa un rango 'C6:F36' en ((2, 6), (5, 36)).

    Una celda sola ('C6') se trata como el rango C6:C6.
    """
    if ":" not in a1_range:
        cell = split_cell(a1_range)
        return cell, cell
    start, end = a1_range.split(":", 1)
    return split_cell(start), split_cell(end)
