"""Límites de negocio compartidos por los modelos y los parsers."""

from decimal import Decimal

MAX_AMOUNT = Decimal("1000000.00")
"""Valor absoluto máximo de una transacción."""

MAX_DECIMAL_PLACES = 2
"""Decimales permitidos en un monto. Nunca se redondea: se rechaza."""

EXPECTED_FIELDS = 3
"""Columnas de cada fila del CSV: Id, Date, Transaction."""

DEFAULT_ACCOUNT_ID = "default-account"
