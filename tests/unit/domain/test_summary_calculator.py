"""
Tests para el calculador del resumen de una cuenta.

El ejemplo base son las 4 transacciones del archivo de muestra:

    0,7/15,+60.5
    1,7/28,-10.3
    2,8/2,-20.46
    3,8/13,+10

Balance 39.74, 2 transacciones en julio, 2 en agosto,
débito promedio -15.38, crédito promedio 35.25.
"""

import dataclasses
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from src.domain.models import Transaction, TransactionKind
from src.domain.services.summary_calculator import (
    calculate_summary,
    group_by_month,
    summarize_month,
)

_NOW = datetime(2024, 9, 1, 12, 0, tzinfo=timezone.utc)


def _fixed_now():
    return _NOW


def _tx(when: date, amount: str) -> Transaction:
    value = Decimal(amount)
    return Transaction(
        id=uuid4(),
        account_id="12345",
        date=when,
        amount=value,
        kind=TransactionKind.for_amount(value),
    )


@pytest.fixture
def sample_transactions():
    return [
        _tx(date(2024, 7, 15), "60.50"),
        _tx(date(2024, 7, 28), "-10.30"),
        _tx(date(2024, 8, 2), "-20.46"),
        _tx(date(2024, 8, 13), "10.00"),
    ]


class TestCalculateSummary:
    """Pruebas para calculate_summary()."""

    def test_ejemplo_de_muestra(self, sample_transactions):
        summary = calculate_summary("12345", sample_transactions, now=_fixed_now)

        assert summary.account_id == "12345"
        assert summary.total_balance == Decimal("39.74")
        assert summary.total_transactions == 4
        assert summary.processed_at == _NOW
        assert list(summary.monthly_summaries) == ["July", "August"]

        july = summary.monthly_summaries["July"]
        assert july.credit_count == 1
        assert july.debit_count == 1
        assert july.total_credits == Decimal("60.50")
        assert july.total_debits == Decimal("-10.30")

        august = summary.monthly_summaries["August"]
        assert august.transaction_count == 2
        assert august.average_debit == Decimal("-20.46")
        assert august.average_credit == Decimal("10.00")

        assert summary.average_debit == Decimal("-15.38")
        assert summary.average_credit == Decimal("35.25")

    def test_sin_transacciones(self):
        summary = calculate_summary("12345", [], now=_fixed_now)
        assert summary.total_balance == Decimal("0")
        assert summary.total_transactions == 0
        assert summary.monthly_summaries == {}
        assert summary.average_credit is None

    def test_meses_en_orden_de_calendario(self):
        transactions = [
            _tx(date(2024, 12, 1), "1.00"),
            _tx(date(2024, 2, 1), "1.00"),
            _tx(date(2024, 7, 1), "1.00"),
        ]
        summary = calculate_summary("12345", transactions, now=_fixed_now)
        assert list(summary.monthly_summaries) == ["February", "July", "December"]

    def test_mismo_mes_de_distintos_anios_se_agrupa(self):
        transactions = [
            _tx(date(2023, 7, 1), "5.00"),
            _tx(date(2024, 7, 1), "-2.00"),
        ]
        summary = calculate_summary("12345", transactions, now=_fixed_now)

        assert list(summary.monthly_summaries) == ["July"]
        july = summary.monthly_summaries["July"]
        assert july.transaction_count == 2
        # Mes y año de la primera transacción del grupo
        assert july.year == 2023

    def test_cero_cuenta_como_credito(self):
        summary = calculate_summary("12345", [_tx(date(2024, 7, 1), "0.00")], now=_fixed_now)
        assert summary.credit_count == 1
        assert summary.debit_count == 0
        assert summary.average_debit is None

    def test_balance_exacto_sin_errores_de_redondeo(self):
        transactions = [_tx(date(2024, 1, 1), "0.10") for _ in range(10)]
        summary = calculate_summary("12345", transactions, now=_fixed_now)
        assert summary.total_balance == Decimal("1.00")

    def test_idempotente_salvo_processed_at(self, sample_transactions):
        first = calculate_summary("12345", sample_transactions)
        second = calculate_summary("12345", sample_transactions)
        assert dataclasses.replace(second, processed_at=first.processed_at) == first

    def test_no_modifica_la_entrada(self, sample_transactions):
        original = list(sample_transactions)
        calculate_summary("12345", sample_transactions, now=_fixed_now)
        assert sample_transactions == original

    def test_acepta_un_iterable(self, sample_transactions):
        summary = calculate_summary("12345", iter(sample_transactions), now=_fixed_now)
        assert summary.total_transactions == 4


class TestGroupByMonth:
    """Pruebas para group_by_month()."""

    def test_conserva_el_orden_dentro_del_grupo(self, sample_transactions):
        groups = group_by_month(sample_transactions)
        assert groups["July"] == sample_transactions[:2]
        assert groups["August"] == sample_transactions[2:]


class TestSummarizeMonth:
    """Pruebas para summarize_month()."""

    def test_grupo_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="vacío"):
            summarize_month([])

    def test_solo_debitos(self):
        monthly = summarize_month([_tx(date(2024, 3, 1), "-1.00"), _tx(date(2024, 3, 2), "-2.00")])
        assert monthly.month == 3
        assert monthly.debit_count == 2
        assert monthly.total_debits == Decimal("-3.00")
        assert monthly.average_debit == Decimal("-1.5")
        assert monthly.average_credit == Decimal("0")
