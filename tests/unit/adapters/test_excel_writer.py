"""
Tests para ExcelWriter.

El contenido se verifica sobre los DataFrames (build_frames); la
escritura real solo se comprueba por la existencia del archivo.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

import pytest

from src.adapters.output.writers.excel_writer import ExcelWriter
from src.domain.exceptions import OutputError
from src.domain.models import ProcessingResult, Transaction, TransactionKind
from src.domain.services.report_formatter import format_summary_report
from src.domain.services.summary_calculator import calculate_summary


def _tx(n: int, when: date, amount: str) -> Transaction:
    value = Decimal(amount)
    return Transaction(
        id=UUID(int=n),
        account_id="00123",
        date=when,
        amount=value,
        kind=TransactionKind.for_amount(value),
        description=f"Transaction {n}",
    )


@pytest.fixture
def result():
    transactions = (
        _tx(0, date(2024, 7, 15), "60.50"),
        _tx(1, date(2024, 7, 28), "-10.30"),
        _tx(2, date(2024, 8, 2), "-20.46"),
        _tx(3, date(2024, 8, 13), "10.00"),
    )
    summary = calculate_summary(
        "00123",
        transactions,
        now=lambda: datetime(2024, 9, 1, tzinfo=timezone.utc),
    )
    return ProcessingResult(
        source="00123.csv",
        transactions=transactions,
        summary=summary,
        report=format_summary_report(summary),
    )


class TestBuildFrames:
    """Pruebas para ExcelWriter.build_frames()."""

    def test_hoja_resumen(self, result):
        df_resumen, _ = ExcelWriter.build_frames(result)

        assert list(df_resumen["Mes"]) == ["July", "August", "TOTAL"]
        assert list(df_resumen["Transacciones"]) == [2, 2, 4]
        assert (df_resumen["Cuenta"] == "00123").all()

        total = df_resumen.iloc[-1]
        assert total["Total Créditos"] == pytest.approx(70.50)
        assert total["Total Débitos"] == pytest.approx(-30.76)
        assert total["Promedio Débito"] == pytest.approx(-15.38)
        assert total["Promedio Crédito"] == pytest.approx(35.25)

    def test_neto_por_mes_y_balance_total(self, result):
        df_resumen, _ = ExcelWriter.build_frames(result)
        assert list(df_resumen["Neto"]) == pytest.approx([50.20, -10.46, 39.74])

    def test_hoja_transacciones(self, result):
        _, df_transacciones = ExcelWriter.build_frames(result)

        assert list(df_transacciones.columns) == [
            "Id",
            "Cuenta",
            "Fecha",
            "Descripción",
            "Tipo",
            "Monto",
        ]
        assert len(df_transacciones) == 4
        first = df_transacciones.iloc[0]
        assert first["Fecha"] == "15/07/2024"
        assert first["Tipo"] == "credit"
        assert first["Descripción"] == "Transaction 0"
        assert df_transacciones.iloc[1]["Monto"] == pytest.approx(-10.30)


class TestWrite:
    """Pruebas para ExcelWriter.write()."""

    def test_crea_el_archivo_y_el_directorio(self, result, tmp_path):
        destino = tmp_path / "salida" / "resumen_00123.xlsx"
        written = ExcelWriter().write(result, destino)

        assert written == destino
        assert written.exists()
        assert written.stat().st_size > 0

    def test_fuerza_la_extension(self, result, tmp_path):
        written = ExcelWriter().write(result, tmp_path / "resumen_00123.csv")
        assert written.suffix == ".xlsx"
        assert written.exists()

    def test_error_de_escritura(self, result, tmp_path):
        bloqueo = tmp_path / "no_es_directorio"
        bloqueo.write_text("x")
        with pytest.raises(OutputError):
            ExcelWriter().write(result, bloqueo / "resumen.xlsx")

    def test_extension(self):
        assert ExcelWriter().extension == ".xlsx"
