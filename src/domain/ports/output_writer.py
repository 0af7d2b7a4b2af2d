"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir el resultado del procesamiento en
algún formato persistente (Excel, CSV, etc.).

¿Por qué es un puerto de SALIDA?
Porque el dominio (lector, calculador) no decide NI conoce el formato
de salida. Solo produce un ProcessingResult y lo pasa a quien implemente
este puerto.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.processing_result import ProcessingResult


class OutputWriter(ABC):
    """Interfaz para escribir resultados de procesamiento."""

    @abstractmethod
    def write(self, result: ProcessingResult, output_path: Path) -> Path:
        """Escribe el resultado de un archivo de transacciones.

        Args:
            result: Transacciones, resumen y reporte de una cuenta.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...

    @property
    @abstractmethod
    def extension(self) -> str:
        """Extensión de los archivos que genera. Ejemplo: '.xlsx'"""
        ...
