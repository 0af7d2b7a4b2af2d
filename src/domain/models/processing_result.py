"""
Modelo de dominio: Resultado del procesamiento de un archivo.

Es el objeto que fluye del orquestador hacia las salidas:
- Lo PRODUCE SummaryProcessor.process_file.
- Lo CONSUME el OutputWriter (Excel) y el CLI (imprime el reporte).
"""

from dataclasses import dataclass

from src.domain.models.account_summary import AccountSummary
from src.domain.models.transaction import Transaction


@dataclass(frozen=True)
class ProcessingResult:
    """Resultado completo de procesar un CSV de transacciones."""

    source: str
    """Ruta del archivo procesado. Para trazabilidad en la bitácora."""

    transactions: tuple[Transaction, ...]
    """Transacciones en el mismo orden que las filas del CSV."""

    summary: AccountSummary
    """Totales calculados a partir de las transacciones."""

    report: str
    """Texto del reporte que se envía por correo."""

    @property
    def account_id(self) -> str:
        return self.summary.account_id

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if len(self.transactions) != self.summary.total_transactions:
            raise ValueError(
                f"El resumen cuenta {self.summary.total_transactions} transacciones "
                f"pero el resultado tiene {len(self.transactions)}"
            )
