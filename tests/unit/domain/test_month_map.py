"""
Tests para src.domain.shared.month_map
"""

import pytest

from src.domain.shared.month_map import month_name, month_number


class TestMonthName:
    """Pruebas para month_name (número → nombre en inglés)."""

    @pytest.mark.parametrize(
        "month, expected",
        [(1, "January"), (7, "July"), (8, "August"), (12, "December")],
    )
    def test_nombres(self, month, expected):
        assert month_name(month) == expected

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_fuera_de_rango(self, month):
        with pytest.raises(ValueError, match="fuera de rango"):
            month_name(month)


class TestMonthNumber:
    """Pruebas para month_number (nombre → número)."""

    @pytest.mark.parametrize("name", ["July", "JULY", "july", "Jul", " jul "])
    def test_case_insensitive_y_abreviatura(self, name):
        assert month_number(name) == 7

    def test_no_reconocido(self):
        with pytest.raises(ValueError, match="no reconocido"):
            month_number("Julio")

    def test_ida_y_vuelta_en_orden_de_calendario(self):
        assert [month_number(month_name(n)) for n in range(1, 13)] == list(range(1, 13))
