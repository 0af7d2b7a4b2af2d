"""
Servicio de dominio: Parser de registros.

Convierte UNA fila del CSV (ya separada en campos) en una Transaction:

    ["7", "7/15", "+60.5"]  →  Transaction(date=2024-07-15,
                                           amount=Decimal("60.50"),
                                           kind=CREDIT,
                                           description="Transaction 7")

También decide si una fila es el encabezado ("Id,Date,Transaction").
Esa decisión solo la usa el lector de transacciones, y solo para la
primera fila del archivo.
"""

import re
from collections.abc import Callable, Sequence
from uuid import UUID, uuid4

from src.domain.constants import EXPECTED_FIELDS
from src.domain.exceptions import MalformedRecordError, MissingIdentifierError
from src.domain.models.transaction import Transaction
from src.domain.shared.date_parser import parse_transaction_date
from src.domain.shared.money import parse_amount

# Nombres de columna reconocidos como encabezado, por posición.
_HEADER_ID_NAMES = frozenset({"id", "transaction_id"})
_HEADER_DATE_NAMES = frozenset({"date", "transaction_date"})
_HEADER_AMOUNT_NAMES = frozenset({"amount", "transaction", "value"})

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)


def parse_record(
    fields: Sequence[str],
    account_id: str,
    *,
    current_year: int | None = None,
    id_factory: Callable[[], UUID] = uuid4,
) -> Transaction:
    """Parsea una fila del CSV a Transaction.

    Args:
        fields: Campos de la fila en orden: Id, Date, Transaction.
        account_id: Cuenta a la que pertenece la transacción. No sale
                    de la fila: la decide quien llama.
        current_year: Año para fechas sin año ("7/15"). None = año actual.
        id_factory: Generador del identificador de la Transaction.
                    Los tests inyectan uno determinista.

    Returns:
        Transaction completamente poblada.

    Raises:
        MalformedRecordError: Si la fila no tiene exactamente 3 campos.
        MissingIdentifierError: Si el Id está vacío.
        InvalidDateError: Si la fecha no tiene un formato aceptado.
        InvalidAmountError, AmountOutOfRangeError, AmountPrecisionError:
            Si el monto no es válido.
        Todos conservan el valor crudo del campo en `raw_value`.
    """
    if len(fields) != EXPECTED_FIELDS:
        raise MalformedRecordError(
            ",".join(fields),
            f"se esperaban {EXPECTED_FIELDS} campos pero se recibieron {len(fields)}",
        )

    raw_id, raw_date, raw_amount = fields

    id_text = raw_id.strip()
    if not id_text:
        raise MissingIdentifierError(raw_id)

    transaction_date = parse_transaction_date(raw_date, current_year=current_year)
    amount, kind = parse_amount(raw_amount)

    return Transaction(
        id=id_factory(),
        account_id=account_id,
        date=transaction_date,
        amount=amount,
        kind=kind,
        description=f"Transaction {id_text}",
    )


def is_header_row(fields: Sequence[str]) -> bool:
    """Indica si una fila es el encabezado del CSV y no datos.

    Es encabezado (comparación case-insensitive, ignorando espacios) si:
    - El primer campo es "id" o "transaction_id", o
    - El segundo campo es "date" o "transaction_date", o
    - El tercer campo es "amount", "transaction" o "value".

    Una fila cuyo primer campo es un entero NUNCA es encabezado,
    aunque los otros campos coincidan: "1,date,+5" es un dato (mal
    formado), no un encabezado que se pueda descartar en silencio.

    Ejemplos:
        >>> is_header_row(["Id", "Date", "Transaction"])
        True
        >>> is_header_row(["0", "7/15", "+60.5"])
        False
    """
    if len(fields) != EXPECTED_FIELDS:
        return False

    first, second, third = (f.strip().lower() for f in fields)

    if _INTEGER_PATTERN.match(first):
        return False

    return (
        first in _HEADER_ID_NAMES
        or second in _HEADER_DATE_NAMES
        or third in _HEADER_AMOUNT_NAMES
    )
