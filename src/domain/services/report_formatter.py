"""
Servicio de dominio: Formateador del reporte en texto.

Convierte un AccountSummary en el texto que va en el cuerpo del correo:

    Total balance is 39.74
    Number of transactions in July: 2
    Number of transactions in August: 2
    Average debit amount: -15.38
    Average credit amount: 35.25

Los meses salen en orden de calendario (enero → diciembre), así el
reporte es determinista aunque el CSV venga desordenado.
Los promedios son GLOBALES (todos los débitos de todos los meses entre
la cantidad total de débitos), no el promedio de los promedios.
"""

from src.domain.models.account_summary import AccountSummary
from src.domain.shared.money import format_fixed
from src.domain.shared.month_map import month_number


def format_summary_report(summary: AccountSummary) -> str:
    """Genera el reporte de texto de un resumen de cuenta.

    Líneas:
    1. "Total balance is X.XX"
    2. Una línea "Number of transactions in {Mes}: N" por grupo mensual.
    3. "Average debit amount: X.XX", solo si hay al menos un débito.
    4. "Average credit amount: X.XX", solo si hay al menos un crédito.

    No agrega salto de línea al final.
    """
    lines = [f"Total balance is {format_fixed(summary.total_balance)}"]

    for name in sorted(summary.monthly_summaries, key=month_number):
        monthly = summary.monthly_summaries[name]
        lines.append(f"Number of transactions in {name}: {monthly.transaction_count}")

    average_debit = summary.average_debit
    if average_debit is not None:
        lines.append(f"Average debit amount: {format_fixed(average_debit)}")

    average_credit = summary.average_credit
    if average_credit is not None:
        lines.append(f"Average credit amount: {format_fixed(average_credit)}")

    return "\n".join(lines)


def summary_subject(account_id: str) -> str:
    """Asunto del correo con el resumen."""
    return f"Account Summary - {account_id}"
