"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el parser de registros, el calculador y
el formateador del reporte, y no dependen de ninguna librería externa.
Solo operan sobre tipos nativos de Python.

Uso:
    from src.domain.shared.money import parse_amount, format_fixed
    from src.domain.shared.date_parser import parse_transaction_date
    from src.domain.shared.month_map import month_name, month_number
    from src.domain.shared.clock import utc_now, utc_today
"""
