"""
Adaptador de salida: Escritor de Excel.

Genera un archivo Excel con el layout estándar de 2 hojas:
- Hoja 1 (Resumen): Una fila por grupo mensual con conteos, totales y
  promedios, más una fila final con el balance total de la cuenta.
- Hoja 2 (Transacciones): Detalle de cada transacción en el orden del CSV.

Es la versión "para archivar" del reporte que se envía por correo.
"""

from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.processing_result import ProcessingResult
from src.domain.ports.output_writer import OutputWriter


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    @property
    def extension(self) -> str:
        return ".xlsx"

    def write(self, result: ProcessingResult, output_path: Path) -> Path:
        """Escribe el resultado de un archivo de transacciones a Excel.

        Args:
            result: Resultado del procesamiento de un CSV.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        # Asegurar extensión .xlsx
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            # Crear directorio si no existe
            output_path.parent.mkdir(parents=True, exist_ok=True)
            df_resumen, df_transacciones = self.build_frames(result)
            self._escribir_excel(df_resumen, df_transacciones, output_path)
        except OutputError:
            raise
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    # =================================================================
    # Construcción de los DataFrames
    # =================================================================

    @staticmethod
    def build_frames(result: ProcessingResult) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Construye los DataFrames de las hojas Resumen y Transacciones.

        Separado de la escritura para poder verificar el contenido sin
        generar un archivo.
        """
        summary = result.summary

        # --- Hoja Resumen: una fila por mes ---
        filas_resumen = []
        for nombre_mes, mensual in summary.monthly_summaries.items():
            filas_resumen.append(
                {
                    "Cuenta": summary.account_id,
                    "Mes": nombre_mes,
                    "Año": mensual.year,
                    "Transacciones": mensual.transaction_count,
                    "Num Créditos": mensual.credit_count,
                    "Total Créditos": float(mensual.total_credits),
                    "Promedio Crédito": float(mensual.average_credit),
                    "Num Débitos": mensual.debit_count,
                    "Total Débitos": float(mensual.total_debits),
                    "Promedio Débito": float(mensual.average_debit),
                    "Neto": float(mensual.net),
                }
            )

        # Fila de totales de la cuenta
        filas_resumen.append(
            {
                "Cuenta": summary.account_id,
                "Mes": "TOTAL",
                "Año": None,
                "Transacciones": summary.total_transactions,
                "Num Créditos": summary.credit_count,
                "Total Créditos": float(summary.total_credits),
                "Promedio Crédito": float(summary.average_credit or 0),
                "Num Débitos": summary.debit_count,
                "Total Débitos": float(summary.total_debits),
                "Promedio Débito": float(summary.average_debit or 0),
                "Neto": float(summary.total_balance),
            }
        )

        df_resumen = pd.DataFrame(filas_resumen)

        # --- Hoja Transacciones ---
        filas_transacciones = [
            {
                "Id": str(tx.id),
                "Cuenta": tx.account_id,
                "Fecha": tx.date.strftime("%d/%m/%Y"),
                "Descripción": tx.description,
                "Tipo": tx.kind.value,
                "Monto": float(tx.amount),
            }
            for tx in result.transactions
        ]

        df_transacciones = pd.DataFrame(
            filas_transacciones,
            columns=["Id", "Cuenta", "Fecha", "Descripción", "Tipo", "Monto"],
        )

        return df_resumen, df_transacciones

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(
        self,
        df_resumen: pd.DataFrame,
        df_transacciones: pd.DataFrame,
        output_path: Path,
    ) -> None:
        """Escribe las 2 hojas con xlsxwriter y les aplica formato."""
        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            # Hoja 1: Resumen
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")

            # Hoja 2: Transacciones
            df_transacciones.to_excel(writer, index=False, sheet_name="Transacciones")

            # --- Aplicar formato ---
            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_transacciones = writer.sheets["Transacciones"]

            # Formato para texto (mantener ceros iniciales en cuenta)
            text_format = workbook.add_format({"num_format": "@"})

            # Formato para montos (2 decimales con separador de miles)
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:A", 18, text_format)  # Cuenta
            ws_resumen.set_column("B:B", 12)  # Mes
            ws_resumen.set_column("C:C", 8)  # Año
            ws_resumen.set_column("D:E", 14)  # Transacciones / Num Créditos
            ws_resumen.set_column("F:G", 18, money_format)  # Créditos
            ws_resumen.set_column("H:H", 14)  # Num Débitos
            ws_resumen.set_column("I:K", 18, money_format)  # Débitos / Neto

            # --- Formato Hoja Transacciones ---
            ws_transacciones.set_column("A:A", 38)  # Id
            ws_transacciones.set_column("B:B", 18, text_format)  # Cuenta
            ws_transacciones.set_column("C:C", 12)  # Fecha
            ws_transacciones.set_column("D:D", 30)  # Descripción
            ws_transacciones.set_column("E:E", 8)  # Tipo
            ws_transacciones.set_column("F:F", 15, money_format)  # Monto
