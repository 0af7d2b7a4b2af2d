"""
Modelos de dominio del proyecto ledger-summary.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from src.domain.models import Transaction, AccountSummary, MonthlySummary
"""

from src.domain.models.account_summary import AccountSummary
from src.domain.models.monthly_summary import MonthlySummary
from src.domain.models.processing_result import ProcessingResult
from src.domain.models.transaction import Transaction
from src.domain.models.transaction_kind import TransactionKind

__all__ = [
    "AccountSummary",
    "MonthlySummary",
    "ProcessingResult",
    "Transaction",
    "TransactionKind",
]
