"""
Tests para el formateador del reporte de texto.
"""

from datetime import datetime, timezone
from decimal import Decimal

from src.domain.models import AccountSummary, MonthlySummary
from src.domain.services.report_formatter import format_summary_report, summary_subject

_NOW = datetime(2024, 9, 1, tzinfo=timezone.utc)


def _monthly(month, credits=(0, "0"), debits=(0, "0")):
    return MonthlySummary(
        month=month,
        year=2024,
        credit_count=credits[0],
        debit_count=debits[0],
        total_credits=Decimal(credits[1]),
        total_debits=Decimal(debits[1]),
    )


def _summary(monthly: dict) -> AccountSummary:
    total = sum((m.net for m in monthly.values()), Decimal("0"))
    count = sum(m.transaction_count for m in monthly.values())
    return AccountSummary(
        account_id="12345",
        total_balance=total,
        total_transactions=count,
        processed_at=_NOW,
        monthly_summaries=monthly,
    )


class TestFormatSummaryReport:
    """Pruebas para format_summary_report()."""

    def test_reporte_de_muestra(self):
        summary = _summary(
            {
                "July": _monthly(7, credits=(1, "60.50"), debits=(1, "-10.30")),
                "August": _monthly(8, credits=(1, "10.00"), debits=(1, "-20.46")),
            }
        )
        assert format_summary_report(summary) == (
            "Total balance is 39.74\n"
            "Number of transactions in July: 2\n"
            "Number of transactions in August: 2\n"
            "Average debit amount: -15.38\n"
            "Average credit amount: 35.25"
        )

    def test_meses_en_orden_de_calendario(self):
        # El dict viene desordenado a propósito
        summary = _summary(
            {
                "December": _monthly(12, credits=(1, "1.00")),
                "January": _monthly(1, credits=(1, "1.00")),
            }
        )
        lines = format_summary_report(summary).splitlines()
        assert lines[1] == "Number of transactions in January: 1"
        assert lines[2] == "Number of transactions in December: 1"

    def test_sin_debitos_omite_la_linea(self):
        summary = _summary({"July": _monthly(7, credits=(2, "30.00"))})
        report = format_summary_report(summary)
        assert "Average debit amount" not in report
        assert report.endswith("Average credit amount: 15.00")

    def test_sin_creditos_omite_la_linea(self):
        summary = _summary({"July": _monthly(7, debits=(1, "-5.00"))})
        report = format_summary_report(summary)
        assert "Average credit amount" not in report
        assert report.splitlines()[0] == "Total balance is -5.00"

    def test_resumen_vacio(self):
        summary = _summary({})
        assert format_summary_report(summary) == "Total balance is 0.00"

    def test_promedio_se_redondea_a_dos_decimales(self):
        summary = _summary({"July": _monthly(7, credits=(3, "10.00"))})
        assert format_summary_report(summary).endswith("Average credit amount: 3.33")

    def test_sin_salto_de_linea_final(self):
        summary = _summary({"July": _monthly(7, credits=(1, "1.00"))})
        assert not format_summary_report(summary).endswith("\n")


def test_asunto_del_correo():
    assert summary_subject("12345") == "Account Summary - 12345"
