"""
Punto de entrada CLI: ledger-summary.

Uso:
    # Procesar un solo CSV (la cuenta sale del nombre del archivo)
    ledger-summary /ruta/12345.csv

    # Forzar la cuenta y generar el Excel
    ledger-summary /ruta/movimientos.csv --account-id 12345 -o /ruta/salida

    # Procesar todos los CSV de una carpeta y enviar cada resumen por correo
    TO_ADDRESS=cliente@example.com ledger-summary /ruta/carpeta --send-email

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Lee la configuración (AppSettings).
- Crea las instancias concretas (LocalFileSource, SmtpMailer, ExcelWriter...).
- Las inyecta en el SummaryProcessor.

No contiene lógica de negocio — solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from src.adapters.input.file_sources.local_file_source import LocalFileSource
from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.mailers.smtp_mailer import SmtpMailer
from src.adapters.output.writers.excel_writer import ExcelWriter
from src.domain.exceptions import ConfigurationError, LedgerBaseError
from src.domain.models.processing_result import ProcessingResult
from src.domain.services.summary_processor import SummaryProcessor
from src.infrastructure.settings import AppSettings


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    try:
        settings = AppSettings.from_env()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    if args.input_path:
        input_path = Path(args.input_path)
    elif settings.data_path is not None:
        input_path = settings.data_path
    else:
        print("❌ Indique un archivo o directorio (o defina DATA_PATH)")
        sys.exit(1)

    output_dir = Path(args.output_dir) if args.output_dir else None

    # --- Ensamblar componentes ---
    logger = ConsoleLogger()

    mailer = None
    if args.send_email:
        if not settings.can_send_email:
            print("❌ --send-email requiere la variable TO_ADDRESS")
            sys.exit(1)
        mailer = SmtpMailer(
            host=settings.smtp_host,
            port=settings.smtp_port,
            from_address=settings.from_address,
            to_address=settings.to_address,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            from_name=settings.from_name,
            logger=logger,
        )

    processor = SummaryProcessor(
        file_source=LocalFileSource(max_file_size=settings.max_file_size),
        logger=logger,
        mailer=mailer,
        output_writer=ExcelWriter() if output_dir is not None else None,
    )

    # --- Procesar ---
    print("=" * 60)
    print("LEDGER SUMMARY")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_dir or '(solo consola)'}")
    print(f"  Correo:   {settings.to_address if mailer else 'no'}")
    print()

    resultados: list[ProcessingResult] = []

    if input_path.is_dir():
        if args.account_id:
            print("⚠️  --account-id se ignora al procesar un directorio")
        resultados = processor.process_directory(input_path, output_dir=output_dir)
    elif input_path.exists():
        try:
            resultados = [
                processor.process_file(
                    str(input_path),
                    account_id=args.account_id,
                    output_dir=output_dir,
                )
            ]
        except LedgerBaseError:
            # El detalle ya se imprimió en la bitácora
            resultados = []
    else:
        print(f"❌ La ruta no existe: {input_path}")
        sys.exit(1)

    for resultado in resultados:
        print()
        print(f"--- {resultado.account_id} ---")
        print(resultado.report)

    # --- Resumen final ---
    logger.print_summary()

    if not resultados:
        sys.exit(1)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Resumen de balance y transacciones mensuales a partir de un CSV",
        epilog="Ejemplo: ledger-summary /ruta/12345.csv -o /ruta/salida",
    )

    parser.add_argument(
        "input_path",
        nargs="?",
        help="Ruta a un CSV (Id,Date,Transaction) o a un directorio con CSVs. "
        "Si se omite, se usa DATA_PATH.",
    )

    parser.add_argument(
        "--account-id",
        dest="account_id",
        help="Cuenta a la que pertenecen las transacciones. "
        "Por defecto se usa el nombre del archivo.",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio donde generar el Excel del resumen. "
        "Si no se especifica, no se genera archivo.",
    )

    parser.add_argument(
        "--send-email",
        dest="send_email",
        action="store_true",
        help="Envía el reporte por correo (requiere TO_ADDRESS).",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
