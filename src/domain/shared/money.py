"""
Utilidades para manejo de montos monetarios.

CONTEXTO DEL PROBLEMA:
La columna `Transaction` del CSV trae el monto con signo: "+60.5" es un
crédito, "-10.3" es un débito y "100" (sin signo) también es crédito.
El resumen que se envía por correo suma y promedia estos montos, así
que cualquier error de redondeo termina en el reporte:

    float("0.1") + float("0.2") = 0.30000000000000004

SOLUCIÓN:
Una sola función que:
1. Siempre devuelve Decimal (precisión monetaria exacta).
2. Clasifica el monto como crédito o débito por su signo inicial.
3. Rechaza montos fuera de rango o con más de 2 decimales.
   NUNCA redondea: "100.123" es un error, no "100.12".
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from src.domain.constants import MAX_AMOUNT, MAX_DECIMAL_PLACES
from src.domain.exceptions import (
    AmountOutOfRangeError,
    AmountPrecisionError,
    InvalidAmountError,
)
from src.domain.models.transaction_kind import TransactionKind

# Número decimal con signo opcional y exponente opcional: "60.5", ".5",
# "1e3", "-5". Sin espacios internos ni separadores de miles.
# re.ASCII: solo dígitos 0-9 (Decimal() aceptaría "١٠").
_NUMERIC_PATTERN = re.compile(
    r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII
)

_CENTS = Decimal("0.01")


def parse_amount(text: str) -> tuple[Decimal, TransactionKind]:
    """Convierte el texto de un monto con signo a (Decimal, tipo).

    Reglas:
    - "+" inicial → crédito; "-" inicial → débito; sin signo → crédito.
    - El signo del Decimal resultante se normaliza según el tipo,
      sin importar si el resto del texto traía otro signo ("+-5" → 5).
    - |monto| > 1,000,000 → AmountOutOfRangeError.
    - Más de 2 decimales → AmountPrecisionError (se verifica después
      del rango, igual que el sistema que generaba los correos).
    - Un monto cero siempre es crédito, incluso "-0.00", para que el
      tipo coincida con el signo (crédito ⇔ monto >= 0).

    Args:
        text: Monto tal como aparece en el CSV. Se ignoran espacios
              alrededor.

    Returns:
        Tupla (monto, tipo). El monto siempre queda con 2 decimales
        (Decimal("60.50")); el cambio de escala es exacto.

    Raises:
        InvalidAmountError: Si el texto está vacío o no es numérico.
        AmountOutOfRangeError: Si |monto| excede MAX_AMOUNT.
        AmountPrecisionError: Si tiene más de MAX_DECIMAL_PLACES decimales.

    Ejemplos:
        >>> parse_amount("+60.5")
        (Decimal('60.50'), <TransactionKind.CREDIT: 'credit'>)
        >>> parse_amount("-10.3")
        (Decimal('-10.30'), <TransactionKind.DEBIT: 'debit'>)
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_amount espera str, recibió {type(text).__name__}")

    cleaned = text.strip()
    if not cleaned:
        raise InvalidAmountError(text, "el monto no puede estar vacío")

    kind = TransactionKind.CREDIT
    numeric = cleaned
    if cleaned.startswith("+"):
        numeric = cleaned[1:]
    elif cleaned.startswith("-"):
        kind = TransactionKind.DEBIT
        numeric = cleaned[1:]

    if not _NUMERIC_PATTERN.match(numeric):
        raise InvalidAmountError(text, f"valor numérico inválido: '{numeric}'")

    try:
        value = Decimal(numeric)
    except InvalidOperation:
        raise InvalidAmountError(text, f"valor numérico inválido: '{numeric}'")

    amount = abs(value)
    if amount > MAX_AMOUNT:
        raise AmountOutOfRangeError(text, format_fixed(MAX_AMOUNT))

    if amount.as_tuple().exponent < -MAX_DECIMAL_PLACES:
        raise AmountPrecisionError(text, MAX_DECIMAL_PLACES)

    amount = amount.quantize(_CENTS)
    if amount == 0:
        return amount, TransactionKind.CREDIT

    if kind is TransactionKind.DEBIT:
        amount = -amount
    return amount, kind


def format_fixed(amount: Decimal, places: int = 2) -> str:
    """Formatea un Decimal con un número fijo de decimales, sin separadores.

    Redondea la mitad hacia arriba (alejándose de cero), que es lo que
    espera quien lee el reporte: -15.385 → "-15.39".

    Ejemplos:
        >>> format_fixed(Decimal("39.74"))
        '39.74'
        >>> format_fixed(Decimal("10"))
        '10.00'
    """
    exponent = Decimal(1).scaleb(-places)
    result = amount.quantize(exponent, rounding=ROUND_HALF_UP)
    if result == 0:
        # Evita "-0.00" en el reporte.
        result = abs(result)
    return f"{result:.{places}f}"


def format_money(amount: Decimal) -> str:
    """Formatea un Decimal como string monetario legible.

    Útil para logging y para mensajes en consola.

    Ejemplos:
        >>> format_money(Decimal("1234567.89"))
        '$1,234,567.89'
        >>> format_money(Decimal("0"))
        '$0.00'
    """
    # quantize asegura siempre 2 decimales
    amount = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    # format con comas de miles
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"
