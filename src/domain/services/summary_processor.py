"""
Servicio de dominio: Procesador de archivos de transacciones.

Orquesta el workflow completo de un archivo:
1. Recibe la ruta de un CSV.
2. Determina la cuenta (parámetro o nombre del archivo).
3. Abre el archivo con el FileSource.
4. Lee las transacciones (transaction_reader).
5. Calcula el resumen (summary_calculator).
6. Genera el reporte de texto (report_formatter).
7. Opcionalmente escribe el Excel y envía el correo.

¿Por qué no poner esta lógica en el CLI?
Porque "dado un CSV, producir y entregar el resumen" es una regla del
dominio. El CLI solo decide QUÉ archivos procesar y DÓNDE guardar.
"""

from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path, PurePath
from uuid import UUID, uuid4

from src.domain.constants import DEFAULT_ACCOUNT_ID
from src.domain.exceptions import LedgerBaseError
from src.domain.models.processing_result import ProcessingResult
from src.domain.ports.file_source import FileSource
from src.domain.ports.output_writer import OutputWriter
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.summary_mailer import SummaryMailer
from src.domain.services.report_formatter import format_summary_report, summary_subject
from src.domain.services.summary_calculator import calculate_summary
from src.domain.services.transaction_reader import read_transactions
from src.domain.shared.clock import utc_now, utc_today


class SummaryProcessor:
    """Procesa un CSV y produce un ProcessingResult.

    Recibe sus dependencias por constructor (Dependency Injection).
    No sabe qué FileSource, SummaryMailer ni OutputWriter concretos
    se están usando — solo conoce las interfaces (puertos).
    """

    def __init__(
        self,
        file_source: FileSource,
        logger: ProcessLogger,
        mailer: SummaryMailer | None = None,
        output_writer: OutputWriter | None = None,
        today: Callable[[], date] = utc_today,
        now: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        """
        Args:
            file_source: Origen de los archivos CSV.
            logger: Logger para la bitácora de procesamiento.
            mailer: Si se proporciona, se envía el reporte por correo.
            output_writer: Si se proporciona (y process_file recibe
                           output_dir), se escribe el archivo de salida.
            today: Reloj para el año de las fechas sin año.
            now: Reloj para `processed_at` del resumen.
            id_factory: Generador de identificadores de Transaction.
        """
        self._source = file_source
        self._logger = logger
        self._mailer = mailer
        self._writer = output_writer
        self._today = today
        self._now = now
        self._id_factory = id_factory

    def process_file(
        self,
        file_path: str,
        account_id: str | None = None,
        output_dir: Path | None = None,
    ) -> ProcessingResult:
        """Procesa un archivo y devuelve el resultado.

        Args:
            file_path: Ruta del CSV.
            account_id: Cuenta. Si es None se deriva del nombre del archivo.
            output_dir: Directorio donde escribir el Excel. Se ignora si
                        no hay output_writer.

        Returns:
            ProcessingResult con transacciones, resumen y reporte.

        Raises:
            LedgerBaseError: Cualquier error del proyecto (fila inválida,
                             archivo inexistente, correo no entregado...).
                             Se registra en la bitácora antes de propagarse.
        """
        if account_id is None:
            account_id = account_id_from_filename(file_path)

        self._logger.log_file_received(file_path, account_id)

        try:
            return self._process(file_path, account_id, output_dir)
        except LedgerBaseError as e:
            self._logger.log_error(file_path, e)
            raise

    def process_directory(
        self,
        dir_path: Path,
        output_dir: Path | None = None,
    ) -> list[ProcessingResult]:
        """Procesa todos los archivos CSV de un directorio.

        Cada archivo produce su propio resumen (la cuenta sale del nombre
        del archivo). Un archivo con errores se registra y se omite; no
        detiene a los demás.

        Args:
            dir_path: Ruta al directorio con CSVs.
            output_dir: Directorio de salida para los Excel.

        Returns:
            Lista de ProcessingResult (solo los exitosos).
        """
        if not dir_path.is_dir():
            raise ValueError(f"No es un directorio: {dir_path}")

        # Buscar todos los CSV (recursivo)
        archivos = sorted(dir_path.glob("**/*.csv"))

        if not archivos:
            self._logger.log_file_skipped(str(dir_path), "Directorio sin archivos .csv")
            return []

        resultados: list[ProcessingResult] = []
        for archivo in archivos:
            try:
                resultados.append(self.process_file(str(archivo), output_dir=output_dir))
            except LedgerBaseError:
                # Ya quedó en la bitácora (process_file); seguir con el siguiente
                continue

        return resultados

    def _process(
        self,
        file_path: str,
        account_id: str,
        output_dir: Path | None,
    ) -> ProcessingResult:
        # Paso 1: Leer transacciones
        with self._source.open(file_path) as stream:
            transactions = read_transactions(
                stream,
                account_id,
                today=self._today,
                id_factory=self._id_factory,
                source_name=file_path,
            )
        self._logger.log_transactions_read(file_path, len(transactions))

        # Paso 2: Calcular resumen y reporte
        summary = calculate_summary(account_id, transactions, now=self._now)
        self._logger.log_summary_computed(summary)

        result = ProcessingResult(
            source=file_path,
            transactions=tuple(transactions),
            summary=summary,
            report=format_summary_report(summary),
        )

        # Paso 3: Salidas opcionales
        if self._writer is not None and output_dir is not None:
            output_file = output_dir / f"resumen_{account_id}{self._writer.extension}"
            written = self._writer.write(result, output_file)
            self._logger.log_output_written(written)

        if self._mailer is not None:
            subject = summary_subject(account_id)
            self._mailer.send(subject, result.report)
            self._logger.log_email_sent(account_id, subject)

        return result


def account_id_from_filename(file_path: str) -> str:
    """Deriva la cuenta del nombre del archivo, sin extensión.

    "data/12345.csv" → "12345". Un nombre vacío o el genérico
    "transactions.csv" no identifican ninguna cuenta → "default-account".

    Ejemplos:
        >>> account_id_from_filename("/data/12345.csv")
        '12345'
        >>> account_id_from_filename("transactions.csv")
        'default-account'
    """
    stem = PurePath(file_path).stem
    if not stem or stem == "transactions":
        return DEFAULT_ACCOUNT_ID
    return stem
