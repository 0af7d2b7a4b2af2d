"""
Modelo de dominio: Transacción.

Una Transaction representa una fila válida del CSV: un crédito (depósito)
o un débito (cargo) de una cuenta en una fecha.

Decisiones de diseño:
- Se usa `Decimal` para el monto porque `float` tiene errores de redondeo
  con dinero. El monto LLEVA el signo: los débitos son negativos.
- Se usa `date` (no `datetime`) porque el CSV no trae hora. Cuando se
  necesita un instante (por ejemplo, para persistir), `at_utc_midnight`
  lo normaliza a medianoche UTC.
- `kind` es redundante con el signo del monto, pero se valida que ambos
  coincidan siempre.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal
from uuid import UUID

from src.domain.constants import MAX_AMOUNT, MAX_DECIMAL_PLACES
from src.domain.models.transaction_kind import TransactionKind
from src.domain.shared.month_map import month_name


@dataclass(frozen=True)
class Transaction:
    """Transacción individual, inmutable después de crearla.

    frozen=True porque una transacción ya parseada no debería cambiar.
    El calculador de resúmenes solo la lee.
    """

    id: UUID
    """Identificador generado al parsear. NO es el Id del CSV."""

    account_id: str
    """Cuenta a la que pertenece. La proporciona quien llama, no la fila."""

    date: date
    """Fecha de la transacción, sin hora."""

    amount: Decimal
    """Monto con signo: >= 0 crédito, < 0 débito. Máximo 2 decimales."""

    kind: TransactionKind
    """CREDIT o DEBIT. Siempre coincide con el signo de amount."""

    description: str = ""
    """Texto derivado del Id del CSV, por ejemplo 'Transaction 7'."""

    # --- Propiedades derivadas ---

    @property
    def is_credit(self) -> bool:
        return self.kind is TransactionKind.CREDIT

    @property
    def month_name(self) -> str:
        """Nombre del mes en inglés ('July'). Es la clave de agrupación."""
        return month_name(self.date.month)

    @property
    def at_utc_midnight(self) -> datetime:
        """La fecha como instante: medianoche UTC de ese día."""
        return datetime.combine(self.date, time.min, tzinfo=timezone.utc)

    def __post_init__(self) -> None:
        """Validaciones que se ejecutan automáticamente al crear la instancia.

        Hace imposible construir una Transaction que el calculador no
        sepa manejar (un "crédito" negativo, un monto con 3 decimales).
        """
        if isinstance(self.date, datetime):
            raise ValueError(f"date debe ser una fecha sin hora, recibió datetime: {self.date}")
        if not self.amount.is_finite():
            raise ValueError(f"El monto debe ser finito: {self.amount}")
        if abs(self.amount) > MAX_AMOUNT:
            raise ValueError(f"El monto {self.amount} excede el límite de {MAX_AMOUNT}")
        if self.amount.as_tuple().exponent < -MAX_DECIMAL_PLACES:
            raise ValueError(
                f"El monto {self.amount} tiene más de {MAX_DECIMAL_PLACES} decimales"
            )
        if self.kind is not TransactionKind.for_amount(self.amount):
            raise ValueError(
                f"El tipo '{self.kind.value}' no coincide con el signo del monto {self.amount}"
            )
