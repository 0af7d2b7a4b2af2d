"""
Servicio de dominio: Calculador del resumen de una cuenta.

Dado el conjunto completo de transacciones de UNA cuenta calcula:
- El balance total (suma exacta de todos los montos).
- Un MonthlySummary por cada NOMBRE de mes presente.

Agrupación por nombre de mes:
    La clave es "July", no "2024-07". Transacciones de julio de años
    distintos caen en el mismo grupo. Es el comportamiento que esperan
    los reportes existentes; cambiarlo es una decisión de producto.

Es una función pura: no modifica las transacciones ni guarda estado
entre llamadas. Llamarla dos veces con las mismas transacciones produce
el mismo AccountSummary salvo `processed_at`.
"""

from collections.abc import Callable, Iterable
from datetime import datetime
from decimal import Decimal

from src.domain.models.account_summary import AccountSummary
from src.domain.models.monthly_summary import MonthlySummary
from src.domain.models.transaction import Transaction
from src.domain.shared.clock import utc_now


def calculate_summary(
    account_id: str,
    transactions: Iterable[Transaction],
    *,
    now: Callable[[], datetime] = utc_now,
) -> AccountSummary:
    """Calcula el resumen completo de una cuenta.

    Args:
        account_id: Cuenta resumida.
        transactions: Transacciones ya parseadas. El orden no altera los
                      totales; solo decide de qué transacción se toman
                      el mes/año de cada grupo (la primera).
        now: Reloj inyectable para `processed_at`.

    Returns:
        AccountSummary. Con cero transacciones devuelve un resumen en
        cero (balance 0, sin meses); nunca falla.
    """
    transactions = list(transactions)

    total_balance = Decimal("0")
    for tx in transactions:
        total_balance += tx.amount

    groups = group_by_month(transactions)
    monthly_summaries = {
        name: summarize_month(group)
        for name, group in sorted(groups.items(), key=lambda item: item[1][0].date.month)
    }

    return AccountSummary(
        account_id=account_id,
        total_balance=total_balance,
        total_transactions=len(transactions),
        processed_at=now(),
        monthly_summaries=monthly_summaries,
    )


def group_by_month(transactions: Iterable[Transaction]) -> dict[str, list[Transaction]]:
    """Agrupa las transacciones por nombre de mes ('July', 'August').

    Dentro de cada grupo se conserva el orden de entrada.
    """
    groups: dict[str, list[Transaction]] = {}
    for tx in transactions:
        groups.setdefault(tx.month_name, []).append(tx)
    return groups


def summarize_month(transactions: list[Transaction]) -> MonthlySummary:
    """Calcula los totales de un grupo mensual.

    El mes y el año del resumen son los de la PRIMERA transacción del
    grupo, no se recalculan por transacción.

    Raises:
        ValueError: Si el grupo está vacío (group_by_month nunca lo produce).
    """
    if not transactions:
        raise ValueError("No se puede resumir un grupo mensual vacío")

    total_credits = Decimal("0")
    total_debits = Decimal("0")
    credit_count = 0
    debit_count = 0

    for tx in transactions:
        if tx.is_credit:
            total_credits += tx.amount
            credit_count += 1
        else:
            total_debits += tx.amount
            debit_count += 1

    first_date = transactions[0].date
    return MonthlySummary(
        month=first_date.month,
        year=first_date.year,
        credit_count=credit_count,
        debit_count=debit_count,
        total_credits=total_credits,
        total_debits=total_debits,
    )
