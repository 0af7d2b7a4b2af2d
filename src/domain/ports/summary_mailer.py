"""
Puerto de salida: Envío del resumen por correo.

El dominio solo sabe que existe "algo" que entrega un asunto y un cuerpo
de texto. Si es SMTP, un servicio de correo en la nube o un buzón de
pruebas lo decide el adaptador.
"""

from abc import ABC, abstractmethod


class SummaryMailer(ABC):
    """Interfaz para enviar el reporte de resumen."""

    @abstractmethod
    def send(self, subject: str, body: str) -> None:
        """Envía el reporte. El adaptador puede agregar una versión HTML.

        Args:
            subject: Asunto. Ejemplo: "Account Summary - 12345".
            body: Texto del reporte (format_summary_report).

        Raises:
            DeliveryError: Si el mensaje no se pudo entregar. No se
                           reintenta: quien llama decide.
        """
        ...
