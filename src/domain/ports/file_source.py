"""
Puerto de entrada: Origen de archivos.

Define el contrato para obtener los bytes de un CSV de transacciones.
Hoy el único adaptador lee del filesystem local (LocalFileSource); un
adaptador de almacenamiento de objetos implementaría la misma interfaz
sin que el lector de transacciones se entere.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO


class FileSource(ABC):
    """Interfaz para abrir archivos de transacciones."""

    @abstractmethod
    def open(self, path: str) -> BinaryIO:
        """Abre el archivo y devuelve un flujo binario.

        El flujo debe poder usarse como context manager
        (`with source.open(path) as stream:`). Quien llama lo cierra.

        Args:
            path: Ruta o URI del archivo.

        Raises:
            SourceNotFoundError: Si el archivo no existe.
            SourceTooLargeError: Si excede el tamaño máximo.
            SourceAccessDeniedError: Si no hay permisos o el origen no
                                     está soportado.
        """
        ...
