"""
Conversión de las fechas del CSV de transacciones.

CONTEXTO DEL PROBLEMA:
Los CSV llegan de distintas herramientas y cada una escribe la fecha
a su manera:

- Exportación manual:   "7/15"        (sin año, mes/día)
- Hojas de cálculo:     "07/15/2023"  (mm/dd/yyyy)
- Exportaciones ISO:    "2023-07-15"
- Algunos sistemas:     "2023/07/15"

SOLUCIÓN:
Una lista FIJA y ORDENADA de formatos. Se prueban en orden y gana el
primero que produce una fecha válida. Si el formato no trae año, se usa
el año actual (inyectable para tests). El resultado siempre es un objeto
`date` (medianoche UTC implícita: no hay hora ni zona horaria).

NOTA: el formato numérico es mes/día (americano), NO día/mes.
"""

import re
from datetime import date

from src.domain.exceptions import InvalidDateError
from src.domain.shared.clock import utc_today

# Formatos aceptados, en orden de precedencia.
# M = mes de 1-2 dígitos, MM = mes de 2 dígitos (igual para D/DD).
# Solo dígitos ASCII: int() también convertiría "٧".
_DATE_LAYOUTS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (layout, re.compile(pattern, re.ASCII))
    for layout, pattern in (
        ("M/D", r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})$"),
        ("M/DD", r"^(?P<month>\d{1,2})/(?P<day>\d{2})$"),
        ("MM/D", r"^(?P<month>\d{2})/(?P<day>\d{1,2})$"),
        ("MM/DD", r"^(?P<month>\d{2})/(?P<day>\d{2})$"),
        ("M/D/YYYY", r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})$"),
        ("M/DD/YYYY", r"^(?P<month>\d{1,2})/(?P<day>\d{2})/(?P<year>\d{4})$"),
        ("MM/D/YYYY", r"^(?P<month>\d{2})/(?P<day>\d{1,2})/(?P<year>\d{4})$"),
        ("MM/DD/YYYY", r"^(?P<month>\d{2})/(?P<day>\d{2})/(?P<year>\d{4})$"),
        ("YYYY-MM-DD", r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})$"),
        ("YYYY/MM/DD", r"^(?P<year>\d{4})/(?P<month>\d{2})/(?P<day>\d{2})$"),
    )
)


def parse_transaction_date(
    date_text: str,
    current_year: int | None = None,
) -> date:
    """Parsea la fecha de una transacción a un objeto date.

    Soporta los siguientes formatos (en este orden de precedencia):
        "7/15", "7/05", "07/5", "07/15"       → sin año, usa current_year
        "7/15/2023", "07/15/2023", etc.        → mm/dd/yyyy
        "2023-07-15"                            → ISO
        "2023/07/15"                            → yyyy/mm/dd

    Args:
        date_text: Texto de la fecha tal como aparece en el CSV.
        current_year: Año a usar cuando el texto no lo incluye. Si es
                      None, se usa el año actual en UTC.

    Returns:
        Objeto date de Python.

    Raises:
        InvalidDateError: Si ningún formato produce una fecha válida.
                          El error conserva el texto original.

    Ejemplos:
        >>> parse_transaction_date("7/15", current_year=2024)
        datetime.date(2024, 7, 15)
        >>> parse_transaction_date("07/15/2023")
        datetime.date(2023, 7, 15)
    """
    text = date_text.strip()

    if not text:
        raise InvalidDateError(date_text, "el texto de fecha está vacío")

    for layout, pattern in _DATE_LAYOUTS:
        m = pattern.match(text)
        if not m:
            continue

        year_text = m.group("year") if "year" in pattern.groupindex else None
        if year_text is not None:
            year = int(year_text)
        else:
            year = current_year if current_year is not None else utc_today().year

        try:
            return date(year, int(m.group("month")), int(m.group("day")))
        except ValueError:
            # Forma correcta pero fecha imposible (ej: 2/30): probar el siguiente
            continue

    raise InvalidDateError(
        date_text,
        f"formatos soportados: {', '.join(layout for layout, _ in _DATE_LAYOUTS)}",
    )

