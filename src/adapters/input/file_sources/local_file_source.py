"""
Adaptador de entrada: Origen de archivos en el filesystem local.

Antes de abrir el archivo valida:
1. Que la ruta no sea una URI de otro origen (s3://, https://...).
2. Que exista y sea un archivo regular.
3. Que no exceda el tamaño máximo (10 MiB por defecto). Un CSV de
   transacciones más grande que eso casi siempre es un archivo equivocado
   y leerlo completo en memoria no vale la pena.

Los errores del sistema operativo se traducen a las excepciones del
dominio (SourceNotFoundError, SourceTooLargeError, SourceAccessDeniedError).
"""

from pathlib import Path
from typing import BinaryIO
from urllib.parse import unquote, urlparse

from src.domain.exceptions import (
    SourceAccessDeniedError,
    SourceNotFoundError,
    SourceTooLargeError,
)
from src.domain.ports.file_source import FileSource

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024


class LocalFileSource(FileSource):
    """Abre archivos locales en modo binario, con validación previa."""

    def __init__(self, max_file_size: int = DEFAULT_MAX_FILE_SIZE) -> None:
        """
        Args:
            max_file_size: Tamaño máximo en bytes. Archivos más grandes
                          se rechazan sin leerlos.
        """
        if max_file_size <= 0:
            raise ValueError(f"max_file_size debe ser positivo: {max_file_size}")
        self._max_file_size = max_file_size

    @property
    def max_file_size(self) -> int:
        return self._max_file_size

    def open(self, path: str) -> BinaryIO:
        file_path = self._resolve(path)

        try:
            stat = file_path.stat()
        except FileNotFoundError:
            raise SourceNotFoundError(path, "el archivo no existe")
        except PermissionError:
            raise SourceAccessDeniedError(path, "permiso denegado")

        if not file_path.is_file():
            raise SourceNotFoundError(path, "no es un archivo regular")

        if stat.st_size > self._max_file_size:
            raise SourceTooLargeError(path, stat.st_size, self._max_file_size)

        try:
            return file_path.open("rb")
        except PermissionError:
            raise SourceAccessDeniedError(path, "permiso denegado")
        except OSError as e:
            raise SourceAccessDeniedError(path, str(e))

    @staticmethod
    def _resolve(path: str) -> Path:
        """Convierte la ruta (o URI file://) a Path.

        Raises:
            SourceAccessDeniedError: Si es una URI de un origen que este
                                     adaptador no maneja.
        """
        parsed = urlparse(path)
        # Una letra sola es la unidad de Windows (C:\...), no un esquema
        if parsed.scheme and len(parsed.scheme) > 1:
            if parsed.scheme != "file":
                raise SourceAccessDeniedError(
                    path, f"origen '{parsed.scheme}://' no soportado por el filesystem local"
                )
            return Path(unquote(parsed.path))
        return Path(path).expanduser()
