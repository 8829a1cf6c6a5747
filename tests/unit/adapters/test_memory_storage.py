"""
Tests para ledger_bot.adapters.output.storage.memory_storage
"""

import pytest

from ledger_bot.adapters.output.storage.memory_storage import InMemorySheetStorage
from ledger_bot.domain.exceptions import StorageError


class TestInMemorySheetStorage:
    def test_celda_vacia(self):
        assert InMemorySheetStorage().read_cell("C6") == ""

    def test_escribir_y_leer(self):
        storage = InMemorySheetStorage()
        storage.write_cell("E24", "R$ 87,10")
        assert storage.read_cell("E24") == "R$ 87,10"

    def test_referencias_en_minusculas(self):
        storage = InMemorySheetStorage({"c6": "R$ 1,00"})
        assert storage.read_cell("C6") == "R$ 1,00"
        assert storage.snapshot() == {"C6": "R$ 1,00"}

    def test_read_range_rellena_vacios(self):
        storage = InMemorySheetStorage({"C6": "a", "F7": "b"})
        assert storage.read_range("C6:F7") == [["a", "", "", ""], ["", "", "", "b"]]

    def test_batch_read_conserva_las_claves(self):
        storage = InMemorySheetStorage({"C40": "R$ 10,00"})
        assert storage.batch_read(["C40", "b43"]) == {"C40": "R$ 10,00", "b43": ""}

    def test_cuenta_lecturas_y_escrituras(self):
        storage = InMemorySheetStorage()
        storage.read_cell("C6")
        storage.read_range("C6:F6")
        storage.batch_read(["C40", "D40", "E40"])
        storage.write_cell("C6", "R$ 1,00")

        assert storage.read_count == 3
        assert storage.write_count == 1

    @pytest.mark.parametrize("referencia", ["6C", "", "C-1"])
    def test_referencia_invalida(self, referencia):
        with pytest.raises(StorageError):
            InMemorySheetStorage().read_cell(referencia)

    def test_rango_invalido(self):
        with pytest.raises(StorageError, match="read_range"):
            InMemorySheetStorage().read_range("C6:X")
