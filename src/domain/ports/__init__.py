"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from src.domain.ports import FileSource, SummaryMailer, OutputWriter
"""

from src.domain.ports.file_source import FileSource
from src.domain.ports.output_writer import OutputWriter
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.summary_mailer import SummaryMailer

__all__ = [
    "FileSource",
    "OutputWriter",
    "ProcessLogger",
    "SummaryMailer",
]
