"""
Modelo de dominio: Resumen de la cuenta.

Es el resultado completo del cálculo para UNA cuenta:
- Lo PRODUCE el calculador (summary_calculator.calculate_summary).
- Lo CONSUMEN el formateador del reporte, el ExcelWriter y el correo.

Invariante: total_balance = Σ total_credits + Σ total_debits de todos
los grupos mensuales. Se valida al crear la instancia.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from src.domain.models.monthly_summary import MonthlySummary


@dataclass(frozen=True)
class AccountSummary:
    """Resumen de todas las transacciones de una cuenta."""

    account_id: str
    """Cuenta resumida."""

    total_balance: Decimal
    """Suma exacta de todos los montos (créditos + débitos)."""

    total_transactions: int
    """Cantidad total de transacciones."""

    processed_at: datetime
    """Momento (UTC) en que se calculó el resumen."""

    monthly_summaries: dict[str, MonthlySummary] = field(default_factory=dict)
    """Nombre de mes ('July') → resumen del grupo. En orden de calendario."""

    # --- Totales globales (todos los meses) ---

    @property
    def total_credits(self) -> Decimal:
        return sum((m.total_credits for m in self.monthly_summaries.values()), Decimal("0"))

    @property
    def total_debits(self) -> Decimal:
        return sum((m.total_debits for m in self.monthly_summaries.values()), Decimal("0"))

    @property
    def credit_count(self) -> int:
        return sum(m.credit_count for m in self.monthly_summaries.values())

    @property
    def debit_count(self) -> int:
        return sum(m.debit_count for m in self.monthly_summaries.values())

    @property
    def average_credit(self) -> Decimal | None:
        """Promedio de TODOS los créditos. None si no hay créditos.

        No es el promedio de los promedios mensuales: un mes con 10
        créditos pesa más que uno con 1.
        """
        if self.credit_count == 0:
            return None
        return self.total_credits / self.credit_count

    @property
    def average_debit(self) -> Decimal | None:
        """Promedio de TODOS los débitos. None si no hay débitos."""
        if self.debit_count == 0:
            return None
        return self.total_debits / self.debit_count

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if self.total_transactions < 0:
            raise ValueError(f"total_transactions no puede ser negativo: {self.total_transactions}")
        counted = sum(m.transaction_count for m in self.monthly_summaries.values())
        if counted != self.total_transactions:
            raise ValueError(
                f"Los grupos mensuales suman {counted} transacciones "
                f"pero total_transactions es {self.total_transactions}"
            )
        if self.total_credits + self.total_debits != self.total_balance:
            raise ValueError(
                f"total_balance ({self.total_balance}) no coincide con "
                f"créditos + débitos ({self.total_credits + self.total_debits})"
            )
