"""
Mapeo entre números de mes y nombres de mes en inglés.

CONTEXTO DEL PROBLEMA:
El resumen agrupa las transacciones por NOMBRE de mes ("July", "August")
y el reporte imprime ese nombre tal cual. `calendar.month_name` depende
del locale del proceso: en un servidor con LC_TIME=es_MX el reporte
diría "julio" y la agrupación cambiaría de clave.

SOLUCIÓN:
Una tabla fija en inglés, independiente del locale. El lookup inverso
(nombre → número) es case-insensitive y acepta también la abreviatura
de 3 letras ("Jul", "AUG").
"""

_MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Clave en mayúsculas → número de mes 1-12.
_MONTH_NUMBERS: dict[str, int] = {}
for _index, _name in enumerate(_MONTH_NAMES, start=1):
    _MONTH_NUMBERS[_name.upper()] = _index
    _MONTH_NUMBERS[_name[:3].upper()] = _index


def month_name(month: int) -> str:
    """Convierte un número de mes (1-12) a su nombre en inglés.

    Ejemplos:
        >>> month_name(7)
        'July'
        >>> month_name(12)
        'December'

    Raises:
        ValueError: Si el número está fuera de 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Mes fuera de rango: {month}. Debe ser 1-12.")
    return _MONTH_NAMES[month - 1]


def month_number(name: str) -> int:
    """Convierte un nombre de mes en inglés a su número 1-12.

    El lookup es case-insensitive y acepta nombre completo o abreviatura:
    'July', 'JULY', 'jul' → 7.

    Raises:
        ValueError: Si el nombre no se reconoce.
    """
    result = _MONTH_NUMBERS.get(name.strip().upper())
    if result is None:
        raise ValueError(f"Mes no reconocido: '{name}'. Valores válidos: {list(_MONTH_NAMES)}")
    return result
