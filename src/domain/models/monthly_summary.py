"""
Modelo de dominio: Resumen mensual.

Agrupa los totales de todas las transacciones de un mismo NOMBRE de mes.
Transacciones de julio 2023 y julio 2024 caen en el mismo grupo "July";
`month` y `year` se toman de la primera transacción del grupo.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.shared.month_map import month_name


@dataclass(frozen=True)
class MonthlySummary:
    """Totales de un grupo mensual."""

    month: int
    """Mes (1-12) de la primera transacción del grupo."""

    year: int
    """Año de la primera transacción del grupo."""

    credit_count: int
    """Cantidad de créditos."""

    debit_count: int
    """Cantidad de débitos."""

    total_credits: Decimal
    """Suma exacta de los créditos (>= 0)."""

    total_debits: Decimal
    """Suma exacta de los débitos (<= 0)."""

    @property
    def month_name(self) -> str:
        return month_name(self.month)

    @property
    def transaction_count(self) -> int:
        return self.credit_count + self.debit_count

    @property
    def average_credit(self) -> Decimal:
        """total_credits / credit_count, o cero exacto si no hay créditos.

        ¿Por qué propiedad y no campo? Porque se deriva de los totales;
        guardarlo aparte permitiría un promedio que no coincide con ellos.
        """
        if self.credit_count == 0:
            return Decimal("0")
        return self.total_credits / self.credit_count

    @property
    def average_debit(self) -> Decimal:
        """total_debits / debit_count, o cero exacto si no hay débitos."""
        if self.debit_count == 0:
            return Decimal("0")
        return self.total_debits / self.debit_count

    @property
    def net(self) -> Decimal:
        return self.total_credits + self.total_debits

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if not 1 <= self.month <= 12:
            raise ValueError(f"Mes fuera de rango: {self.month}. Debe ser 1-12.")
        if self.credit_count < 0 or self.debit_count < 0:
            raise ValueError(
                f"Los conteos no pueden ser negativos: "
                f"créditos={self.credit_count}, débitos={self.debit_count}"
            )
        if self.total_credits < 0:
            raise ValueError(f"total_credits no puede ser negativo: {self.total_credits}")
        if self.total_debits > 0:
            raise ValueError(f"total_debits no puede ser positivo: {self.total_debits}")
