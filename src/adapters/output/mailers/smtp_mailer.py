"""
Adaptador de salida: Envío del resumen por SMTP.

Sirve tanto para un buzón de pruebas local (MailHog en localhost:1025,
sin autenticación) como para un servidor real con STARTTLS y usuario.

El mensaje es multipart/alternative: el reporte en texto plano más su
versión HTML (html_summary). Si el HTML no se puede generar, el correo
sale solo en texto y se registra en la bitácora.

Cualquier error de SMTP o de red se traduce a DeliveryError. No se
reintenta: si el correo no sale, el procesamiento del archivo falla
y queda en la bitácora.
"""

import smtplib
from email.message import EmailMessage
from email.utils import formataddr

from src.adapters.output.mailers.html_summary import render_summary_html
from src.domain.exceptions import DeliveryError
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.summary_mailer import SummaryMailer


class SmtpMailer(SummaryMailer):
    """Envía el reporte por SMTP en texto plano y HTML."""

    def __init__(
        self,
        host: str,
        port: int,
        from_address: str,
        to_address: str,
        username: str = "",
        password: str = "",
        use_tls: bool = False,
        from_name: str = "Account Summary",
        timeout: float = 30.0,
        logger: ProcessLogger | None = None,
    ) -> None:
        if not to_address:
            raise ValueError("Se requiere una dirección de destino (TO_ADDRESS)")
        self._host = host
        self._port = port
        self._from_address = from_address
        self._to_address = to_address
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._from_name = from_name
        self._timeout = timeout
        self._logger = logger

    def send(self, subject: str, body: str) -> None:
        message = self._build_message(subject, body)

        try:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
                if self._use_tls:
                    smtp.starttls()
                if self._username:
                    smtp.login(self._username, self._password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryError(self._to_address, str(e)) from e

    def _build_message(self, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = formataddr((self._from_name, self._from_address))
        message["To"] = self._to_address
        message.set_content(body)

        try:
            html = render_summary_html(subject, body)
        except ValueError as e:
            if self._logger is not None:
                self._logger.log_email_html_skipped(self._to_address, str(e))
        else:
            message.add_alternative(html, subtype="html")

        return message
