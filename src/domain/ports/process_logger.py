"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante el procesamiento
de archivos de transacciones.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "Se leyeron 4 transacciones de la cuenta 12345"
- "Se envió el resumen por correo"

La implementación puede usar `logging` internamente, pero el dominio
solo conoce los eventos de negocio. Esto permite:
- En desarrollo: imprimir a consola.
- En tests: acumular en memoria y hacer asserts.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.account_summary import AccountSummary


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Fase 1: Lectura ---

    @abstractmethod
    def log_file_received(self, file_path: str, account_id: str) -> None:
        """Registra que se recibió un archivo para procesar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: str, reason: str) -> None:
        """Registra que un archivo fue descartado sin procesarse.

        Args:
            file_path: Ruta del archivo descartado.
            reason: Razón del descarte. Ejemplo: "Directorio sin archivos .csv"
        """
        ...

    @abstractmethod
    def log_transactions_read(self, file_path: str, num_transactions: int) -> None:
        """Registra cuántas transacciones se leyeron de un archivo."""
        ...

    # --- Fase 2: Cálculo y salidas ---

    @abstractmethod
    def log_summary_computed(self, summary: AccountSummary) -> None:
        """Registra el resumen calculado (balance, meses)."""
        ...

    @abstractmethod
    def log_output_written(self, output_path: Path) -> None:
        """Registra que se generó un archivo de salida."""
        ...

    @abstractmethod
    def log_email_sent(self, account_id: str, subject: str) -> None:
        """Registra que se envió el correo con el resumen."""
        ...

    @abstractmethod
    def log_email_html_skipped(self, to_address: str, reason: str) -> None:
        """Registra que el correo sale solo en texto plano.

        Ocurre cuando la versión HTML del reporte no se pudo generar.
        No es un error: el correo se envía igual.
        """
        ...

    @abstractmethod
    def log_error(self, file_path: str, error: Exception) -> None:
        """Registra un error durante el procesamiento."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_descartados': int,
                'archivos_con_error': int,
                'total_transacciones': int,
                'correos_enviados': int,
                'correos_sin_html': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...
