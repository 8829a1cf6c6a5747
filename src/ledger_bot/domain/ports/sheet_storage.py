"""
Puerto de salida: Almacenamiento de la planilla (Sheet Storage).

Define el contrato para leer y escribir celdas del ledger. El dominio
solo conoce coordenadas A1 y texto; no sabe si detrás hay un .xlsx en
disco, una planilla de Google o un diccionario en memoria.

¿Por qué todo es texto?
Porque así se ve una planilla desde afuera: "R$ 1.234,56", "" o "#REF!".
Convertir a Decimal es trabajo del dominio (parse_money_safe), no del
adaptador. Así todos los adaptadores se comportan igual ante celdas
vacías o con basura.

Los adaptadores traducen CUALQUIER falla (archivo bloqueado, red, rango
inválido) a StorageError. El core no reintenta.
"""

from abc import ABC, abstractmethod


class SheetStorage(ABC):
    """Interfaz para la planilla del ledger."""

    @abstractmethod
    def read_cell(self, a1: str) -> str:
        """Lee el texto mostrado de una celda.

        Args:
            a1: Celda en notación A1. Ejemplo: "E24".

        Returns:
            Texto de la celda. "" si está vacía.

        Raises:
            StorageError: Si la lectura falla.
        """
        ...

    @abstractmethod
    def write_cell(self, a1: str, text: str) -> None:
        """Escribe texto en una celda, reemplazando lo que hubiera.

        Args:
            a1: Celda en notación A1.
            text: Texto a escribir. Para montos: "R$ 1.234,56".

        Raises:
            StorageError: Si la escritura falla.
        """
        ...

    @abstractmethod
    def read_range(self, a1_range: str) -> list[list[str]]:
        """Lee un rango rectangular.

        Args:
            a1_range: Rango en notación A1. Ejemplo: "C6:F6".

        Returns:
            Filas en orden (row-major). Cada fila tiene una entrada por
            columna del rango; celdas vacías son "". Algunos backends
            recortan filas o columnas vacías al final: el dominio trata
            cualquier posición faltante como "".

        Raises:
            StorageError: Si la lectura falla.
        """
        ...

    @abstractmethod
    def batch_read(self, cells: list[str]) -> dict[str, str]:
        """Lee varias celdas sueltas en una sola operación.

        Args:
            cells: Lista de celdas en notación A1.

        Returns:
            Diccionario celda → texto. Toda celda pedida aparece en el
            resultado; las vacías o ausentes valen "".

        Raises:
            StorageError: Si la lectura falla.
        """
        ...
