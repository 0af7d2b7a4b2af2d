"""
Servicio de dominio: Lector de transacciones (ingesta de un CSV completo).

Recorre TODAS las filas de un flujo de bytes y devuelve la lista de
Transaction en el mismo orden que las filas:

    inicio → (si la 1a fila es encabezado, se descarta) → fila → parse → ...

Reglas:
- Solo la PRIMERA fila puede ser encabezado.
- La primera fila inválida aborta todo (RecordParseFailedError con el
  número de línea). No hay resultados parciales ni "saltar y continuar":
  un resumen calculado con filas faltantes sería un resumen incorrecto.
- Un archivo sin filas de datos → EmptyDatasetError.
- Las líneas vacías se ignoran (no son filas).

¿De dónde viene el flujo? De un FileSource (adaptador). Este servicio
no abre archivos: así se prueba con io.BytesIO.
"""

import csv
import io
from collections.abc import Callable
from datetime import date
from typing import BinaryIO
from uuid import UUID, uuid4

from src.domain.exceptions import (
    EmptyDatasetError,
    MalformedRecordError,
    RecordError,
    RecordParseFailedError,
)
from src.domain.models.transaction import Transaction
from src.domain.services.record_parser import is_header_row, parse_record
from src.domain.shared.clock import utc_today


def read_transactions(
    stream: BinaryIO,
    account_id: str,
    *,
    today: Callable[[], date] = utc_today,
    id_factory: Callable[[], UUID] = uuid4,
    source_name: str = "",
    encoding: str = "utf-8-sig",
) -> list[Transaction]:
    """Lee todas las transacciones de un CSV de 3 columnas.

    Args:
        stream: Flujo binario con el contenido del CSV. No se cierra:
                es responsabilidad de quien lo abrió.
        account_id: Cuenta a la que pertenecen todas las transacciones.
        today: Reloj inyectable. Se consulta UNA vez por archivo para
               el año de las fechas sin año.
        id_factory: Generador de identificadores de Transaction.
        source_name: Nombre del origen, solo para mensajes de error.
        encoding: Codificación del archivo. "utf-8-sig" descarta el BOM
                  que agregan algunas hojas de cálculo.

    Returns:
        Lista de Transaction en el orden de las filas del archivo.

    Raises:
        RecordParseFailedError: En la primera fila inválida. `line_number`
                                es la línea (1-indexed) donde empieza el
                                registro y `cause` el RecordError original.
        EmptyDatasetError: Si no hay ninguna fila de datos.
    """
    current_year = today().year
    transactions: list[Transaction] = []

    text = io.TextIOWrapper(stream, encoding=encoding, newline="")
    reader = csv.reader(text)
    first_row = True

    try:
        while True:
            # Línea donde empieza el registro; un campo entre comillas
            # puede abarcar varias líneas físicas.
            line_number = reader.line_num + 1
            try:
                fields = next(reader)
            except StopIteration:
                break
            except csv.Error as e:
                cause = MalformedRecordError("", f"fila ilegible: {e}")
                raise RecordParseFailedError(line_number, cause) from e
            except UnicodeDecodeError as e:
                cause = MalformedRecordError("", f"bytes no válidos en {encoding}: {e.reason}")
                raise RecordParseFailedError(line_number, cause) from e

            if not fields:
                continue

            if first_row:
                first_row = False
                if is_header_row(fields):
                    continue

            try:
                transaction = parse_record(
                    fields,
                    account_id,
                    current_year=current_year,
                    id_factory=id_factory,
                )
            except RecordError as e:
                raise RecordParseFailedError(line_number, e) from e

            transactions.append(transaction)
    finally:
        # Suelta el flujo binario sin cerrarlo.
        text.detach()

    if not transactions:
        raise EmptyDatasetError(source_name)

    return transactions
