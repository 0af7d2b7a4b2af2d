"""
Versión HTML del reporte de resumen para el cuerpo del correo.

CONTEXTO DEL PROBLEMA:
El reporte es texto plano pensado para leerse en cualquier cliente:

    Total balance is 39.74
    Number of transactions in July: 2
    Average debit amount: -15.38

Los clientes de correo web lo muestran en una fuente proporcional y sin
estructura. El correo debe llevar además una versión HTML.

SOLUCIÓN:
Reconstruir las partes del reporte (balance, meses, promedios) a partir
de sus líneas y volcarlas en tablas con estilos en línea, que es lo
único que Gmail y Outlook respetan. Todo texto del reporte pasa por
html.escape.

Si el reporte trae una línea que no se reconoce, se lanza ValueError:
quien llama envía solo el texto plano en vez de un HTML incompleto.
"""

from html import escape

_BALANCE_PREFIX = "Total balance is "
_MONTH_PREFIX = "Number of transactions in "
_AVERAGE_DEBIT_PREFIX = "Average debit amount: "
_AVERAGE_CREDIT_PREFIX = "Average credit amount: "

_CELL = "padding:10px 16px;border-bottom:1px solid #dee2e6;font-size:14px;color:#003A40;"


def render_summary_html(subject: str, report: str) -> str:
    """Genera el HTML del correo a partir del reporte de texto.

    Args:
        subject: Asunto del correo. La cuenta se toma de lo que sigue a
                 " - " ("Account Summary - 12345" → "12345").
        report: Texto de format_summary_report.

    Returns:
        Documento HTML completo.

    Raises:
        ValueError: Si el reporte no tiene la línea de balance o trae
                    una línea que no se reconoce.

    Ejemplos:
        >>> html = render_summary_html("Account Summary - 1", "Total balance is 5.00")
        >>> "5.00" in html
        True
    """
    balance: str | None = None
    months: list[tuple[str, str]] = []
    averages: list[tuple[str, str]] = []

    for raw_line in report.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith(_BALANCE_PREFIX):
            balance = line[len(_BALANCE_PREFIX):]
        elif line.startswith(_MONTH_PREFIX):
            month, sep, count = line[len(_MONTH_PREFIX):].partition(": ")
            if not sep:
                raise ValueError(f"Línea de mes sin conteo: '{line}'")
            months.append((month, count))
        elif line.startswith(_AVERAGE_DEBIT_PREFIX):
            averages.append(("Average debit", line[len(_AVERAGE_DEBIT_PREFIX):]))
        elif line.startswith(_AVERAGE_CREDIT_PREFIX):
            averages.append(("Average credit", line[len(_AVERAGE_CREDIT_PREFIX):]))
        else:
            raise ValueError(f"Línea de reporte no reconocida: '{line}'")

    if balance is None:
        raise ValueError("El reporte no tiene la línea 'Total balance is'")

    _, _, account_id = subject.rpartition(" - ")

    month_rows = "".join(_row(f"Transactions in {month}", count) for month, count in months)
    average_rows = "".join(_row(label, value) for label, value in averages)

    return (
        "<!DOCTYPE html>\n"
        '<html><head><meta charset="utf-8">'
        f"<title>{escape(subject)}</title></head>"
        '<body style="margin:0;padding:20px;font-family:Arial,sans-serif;background-color:#f8f9fa;">'
        '<table width="600" cellpadding="0" cellspacing="0" border="0" '
        'style="margin:0 auto;background-color:#ffffff;border-radius:8px;">'
        '<tr><td style="background-color:#003A40;color:#ffffff;text-align:center;padding:24px;">'
        '<h1 style="margin:0;font-size:24px;">Account Transaction Summary</h1>'
        f'<div style="margin-top:8px;font-size:13px;">Account: {escape(account_id)}</div>'
        "</td></tr>"
        '<tr><td style="background-color:#00d4aa;color:#ffffff;text-align:center;padding:32px;">'
        '<div style="font-size:13px;text-transform:uppercase;">Total balance</div>'
        f'<div style="font-size:36px;font-weight:700;">{escape(balance)}</div>'
        "</td></tr>"
        '<tr><td style="padding:24px;">'
        '<table width="100%" cellpadding="0" cellspacing="0" border="0">'
        f"{month_rows}{average_rows}"
        "</table></td></tr>"
        "</table></body></html>\n"
    )


def _row(label: str, value: str) -> str:
    return (
        f'<tr><td style="{_CELL}">{escape(label)}</td>'
        f'<td style="{_CELL}text-align:right;font-weight:600;">{escape(value)}</td></tr>'
    )
