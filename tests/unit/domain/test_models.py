"""
Tests para los modelos de dominio.

Verifican que las validaciones, propiedades derivadas e inmutabilidad
funcionan correctamente. Estos tests son la "documentación ejecutable"
del modelo de datos.
"""

import dataclasses
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

import pytest

from src.domain.models import (
    AccountSummary,
    MonthlySummary,
    ProcessingResult,
    Transaction,
    TransactionKind,
)

_ID = UUID("00000000-0000-0000-0000-000000000001")
_NOW = datetime(2024, 9, 1, 12, 0, tzinfo=timezone.utc)


def _tx(amount: str, kind: TransactionKind | None = None, when: date = date(2024, 7, 15)):
    value = Decimal(amount)
    return Transaction(
        id=_ID,
        account_id="12345",
        date=when,
        amount=value,
        kind=kind or TransactionKind.for_amount(value),
        description="Transaction 1",
    )


class TestTransactionKind:
    """Pruebas para TransactionKind."""

    def test_positivo_es_credito(self):
        assert TransactionKind.for_amount(Decimal("0.01")) is TransactionKind.CREDIT

    def test_cero_es_credito(self):
        assert TransactionKind.for_amount(Decimal("0")) is TransactionKind.CREDIT

    def test_negativo_es_debito(self):
        assert TransactionKind.for_amount(Decimal("-0.01")) is TransactionKind.DEBIT

    def test_valor_serializable(self):
        assert TransactionKind.DEBIT.value == "debit"
        assert TransactionKind.CREDIT == "credit"


class TestTransaction:
    """Pruebas para el modelo Transaction."""

    def test_crear_credito(self):
        tx = _tx("60.50")
        assert tx.is_credit
        assert tx.kind is TransactionKind.CREDIT

    def test_crear_debito(self):
        tx = _tx("-10.30")
        assert not tx.is_credit
        assert tx.kind is TransactionKind.DEBIT

    def test_month_name(self):
        assert _tx("1.00", when=date(2024, 8, 2)).month_name == "August"

    def test_at_utc_midnight(self):
        tx = _tx("1.00")
        assert tx.at_utc_midnight == datetime(2024, 7, 15, tzinfo=timezone.utc)

    def test_es_inmutable(self):
        tx = _tx("1.00")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tx.amount = Decimal("2.00")  # type: ignore[misc]

    def test_tipo_que_no_coincide_con_signo_lanza_error(self):
        with pytest.raises(ValueError, match="no coincide"):
            _tx("-5.00", kind=TransactionKind.CREDIT)

    def test_credito_negativo_lanza_error(self):
        with pytest.raises(ValueError, match="no coincide"):
            _tx("5.00", kind=TransactionKind.DEBIT)

    def test_excede_limite_lanza_error(self):
        with pytest.raises(ValueError, match="límite"):
            _tx("1000000.01")

    def test_tres_decimales_lanza_error(self):
        with pytest.raises(ValueError, match="decimales"):
            _tx("1.005")

    def test_datetime_no_se_acepta(self):
        with pytest.raises(ValueError, match="sin hora"):
            Transaction(
                id=_ID,
                account_id="1",
                date=datetime(2024, 7, 15),  # type: ignore[arg-type]
                amount=Decimal("1.00"),
                kind=TransactionKind.CREDIT,
            )


class TestMonthlySummary:
    """Pruebas para el modelo MonthlySummary."""

    def _make(self, **overrides):
        values = dict(
            month=7,
            year=2024,
            credit_count=1,
            debit_count=1,
            total_credits=Decimal("60.50"),
            total_debits=Decimal("-10.30"),
        )
        values.update(overrides)
        return MonthlySummary(**values)

    def test_transaction_count_es_la_suma(self):
        assert self._make(credit_count=3, debit_count=2).transaction_count == 5

    def test_promedios(self):
        summary = self._make(
            credit_count=2,
            debit_count=2,
            total_credits=Decimal("70.50"),
            total_debits=Decimal("-30.76"),
        )
        assert summary.average_credit == Decimal("35.25")
        assert summary.average_debit == Decimal("-15.38")

    def test_sin_creditos_promedio_es_cero(self):
        summary = self._make(credit_count=0, total_credits=Decimal("0"))
        assert summary.average_credit == Decimal("0")

    def test_sin_debitos_promedio_es_cero(self):
        summary = self._make(debit_count=0, total_debits=Decimal("0"))
        assert summary.average_debit == Decimal("0")

    def test_month_name_y_net(self):
        summary = self._make()
        assert summary.month_name == "July"
        assert summary.net == Decimal("50.20")

    def test_mes_invalido(self):
        with pytest.raises(ValueError, match="Mes fuera de rango"):
            self._make(month=13)

    def test_conteo_negativo(self):
        with pytest.raises(ValueError, match="negativos"):
            self._make(debit_count=-1)

    def test_total_debitos_positivo(self):
        with pytest.raises(ValueError, match="positivo"):
            self._make(total_debits=Decimal("5"))


class TestAccountSummary:
    """Pruebas para el modelo AccountSummary."""

    def _july(self):
        return MonthlySummary(
            month=7,
            year=2024,
            credit_count=1,
            debit_count=1,
            total_credits=Decimal("60.50"),
            total_debits=Decimal("-10.30"),
        )

    def _august(self):
        return MonthlySummary(
            month=8,
            year=2024,
            credit_count=1,
            debit_count=1,
            total_credits=Decimal("10.00"),
            total_debits=Decimal("-20.46"),
        )

    def test_totales_globales(self):
        summary = AccountSummary(
            account_id="12345",
            total_balance=Decimal("39.74"),
            total_transactions=4,
            processed_at=_NOW,
            monthly_summaries={"July": self._july(), "August": self._august()},
        )
        assert summary.total_credits == Decimal("70.50")
        assert summary.total_debits == Decimal("-30.76")
        assert summary.credit_count == 2
        assert summary.debit_count == 2
        assert summary.average_credit == Decimal("35.25")
        assert summary.average_debit == Decimal("-15.38")

    def test_vacio(self):
        summary = AccountSummary(
            account_id="12345",
            total_balance=Decimal("0"),
            total_transactions=0,
            processed_at=_NOW,
        )
        assert summary.total_transactions == 0
        assert summary.monthly_summaries == {}
        assert summary.average_credit is None
        assert summary.average_debit is None

    def test_balance_inconsistente_lanza_error(self):
        with pytest.raises(ValueError, match="no coincide"):
            AccountSummary(
                account_id="12345",
                total_balance=Decimal("100.00"),
                total_transactions=2,
                processed_at=_NOW,
                monthly_summaries={"July": self._july()},
            )

    def test_conteo_inconsistente_lanza_error(self):
        with pytest.raises(ValueError, match="transacciones"):
            AccountSummary(
                account_id="12345",
                total_balance=Decimal("50.20"),
                total_transactions=3,
                processed_at=_NOW,
                monthly_summaries={"July": self._july()},
            )


class TestProcessingResult:
    """Pruebas para el modelo ProcessingResult."""

    def test_conteo_debe_coincidir_con_el_resumen(self):
        summary = AccountSummary(
            account_id="12345",
            total_balance=Decimal("0"),
            total_transactions=0,
            processed_at=_NOW,
        )
        with pytest.raises(ValueError, match="el resultado tiene 1"):
            ProcessingResult(
                source="12345.csv",
                transactions=(_tx("1.00"),),
                summary=summary,
                report="",
            )

    def test_account_id_viene_del_resumen(self):
        summary = AccountSummary(
            account_id="12345",
            total_balance=Decimal("0"),
            total_transactions=0,
            processed_at=_NOW,
        )
        result = ProcessingResult(source="x.csv", transactions=(), summary=summary, report="")
        assert result.account_id == "12345"
