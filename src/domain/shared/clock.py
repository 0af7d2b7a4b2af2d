"""
Reloj del sistema en UTC.

El parser de fechas necesita "el año actual" y el calculador necesita
"ahora" para `processed_at`. En lugar de llamar a datetime.now() dentro
del dominio, los servicios reciben estas funciones por parámetro; los
tests inyectan una fecha fija.
"""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Momento actual con zona horaria UTC."""
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Fecha actual en UTC (no en la zona local del servidor)."""
    return utc_now().date()
