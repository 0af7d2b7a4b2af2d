"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout
con un formato consistente y un resumen final.

Útil para:
- Desarrollo y debugging.
- Ejecución manual desde terminal.
"""

from pathlib import Path, PurePath

from src.domain.models.account_summary import AccountSummary
from src.domain.ports.process_logger import ProcessLogger
from src.domain.shared.money import format_money


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self) -> None:
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._archivos_descartados: int = 0
        self._total_transacciones: int = 0
        self._correos_enviados: int = 0
        self._correos_sin_html: int = 0
        self._errores: list[dict] = []

    # --- Fase 1: Lectura ---

    def log_file_received(self, file_path: str, account_id: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {_nombre(file_path)} (cuenta {account_id})")

    def log_file_skipped(self, file_path: str, reason: str) -> None:
        self._archivos_descartados += 1
        print(f"  ⏭️  Descartado: {_nombre(file_path)} — {reason}")

    def log_transactions_read(self, file_path: str, num_transactions: int) -> None:
        self._archivos_procesados += 1
        self._total_transacciones += num_transactions
        print(f"  ✅ Leído: {_nombre(file_path)} — {num_transactions} transacciones")

    # --- Fase 2: Cálculo y salidas ---

    def log_summary_computed(self, summary: AccountSummary) -> None:
        meses = ", ".join(summary.monthly_summaries) or "sin meses"
        print(
            f"  📊 Resumen {summary.account_id}: balance "
            f"{format_money(summary.total_balance)} — {meses}"
        )

    def log_output_written(self, output_path: Path) -> None:
        print(f"  📁 Archivo generado: {output_path}")

    def log_email_sent(self, account_id: str, subject: str) -> None:
        self._correos_enviados += 1
        print(f"  ✉️  Correo enviado: {subject}")

    def log_email_html_skipped(self, to_address: str, reason: str) -> None:
        self._correos_sin_html += 1
        print(f"  ⚠️  Correo a {to_address} solo en texto: {reason}")

    def log_error(self, file_path: str, error: Exception) -> None:
        self._errores.append({"archivo": _nombre(file_path), "error": str(error)})
        print(f"  ❌ Error: {_nombre(file_path)} — {error}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "archivos_descartados": self._archivos_descartados,
            "archivos_con_error": len(self._errores),
            "total_transacciones": self._total_transacciones,
            "correos_enviados": self._correos_enviados,
            "correos_sin_html": self._correos_sin_html,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        print(f"  Archivos procesados:  {self._archivos_procesados}")
        print(f"  Archivos descartados: {self._archivos_descartados}")
        print(f"  Archivos con error:   {len(self._errores)}")
        print(f"  Total transacciones:  {self._total_transacciones}")
        print(f"  Correos enviados:     {self._correos_enviados}")
        print(f"  Correos sin HTML:     {self._correos_sin_html}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)


def _nombre(file_path: str) -> str:
    """Solo el nombre del archivo, para que las líneas no sean enormes."""
    return PurePath(file_path).name or file_path
