"""
Modelo de dominio: Tipo de transacción (crédito o débito).

El signo del monto ya dice si es crédito o débito; el tipo es redundante
pero explícito, y Transaction valida que ambos siempre coincidan.
"""

from decimal import Decimal
from enum import Enum


class TransactionKind(str, Enum):
    """Clasificación por signo: CREDIT si monto >= 0, DEBIT si monto < 0.

    Hereda de str para que el valor se serialice directo ("credit")
    en el Excel de salida.
    """

    CREDIT = "credit"
    DEBIT = "debit"

    @classmethod
    def for_amount(cls, amount: Decimal) -> "TransactionKind":
        """Deriva el tipo a partir del signo del monto."""
        return cls.DEBIT if amount < 0 else cls.CREDIT
