"""
Configuración de la aplicación a partir de variables de entorno.

Los mismos nombres que usa el despliegue (contenedor o función serverless):

    MAX_FILE_SIZE   Tamaño máximo del CSV en bytes (10485760)
    SMTP_HOST       Servidor SMTP (localhost)
    SMTP_PORT       Puerto SMTP (1025, el de MailHog)
    SMTP_USERNAME   Usuario SMTP (vacío = sin autenticación)
    SMTP_PASSWORD   Contraseña SMTP
    SMTP_USE_TLS    "true"/"false" (false)
    FROM_ADDRESS    Remitente (noreply@example.com)
    FROM_NAME       Nombre del remitente (Account Summary)
    TO_ADDRESS      Destinatario del resumen (obligatorio para enviar correo)
    DATA_PATH       Directorio de entrada por defecto del CLI

Los flags del CLI tienen prioridad sobre estas variables.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from src.adapters.input.file_sources.local_file_source import DEFAULT_MAX_FILE_SIZE
from src.domain.exceptions import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class AppSettings:
    """Configuración de la aplicación.

    Attributes:
        max_file_size: Tamaño máximo de un CSV en bytes.
        smtp_host: Servidor SMTP.
        smtp_port: Puerto SMTP.
        smtp_username: Usuario SMTP. Vacío = sin login.
        smtp_password: Contraseña SMTP.
        smtp_use_tls: Si se negocia STARTTLS.
        from_address: Dirección del remitente.
        from_name: Nombre visible del remitente.
        to_address: Destinatario. None = no se puede enviar correo.
        data_path: Directorio de entrada por defecto.
    """

    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    smtp_host: str = "localhost"
    smtp_port: int = 1025
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_tls: bool = False
    from_address: str = "noreply@example.com"
    from_name: str = "Account Summary"
    to_address: str | None = None
    data_path: Path | None = None

    @property
    def can_send_email(self) -> bool:
        return bool(self.to_address)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppSettings":
        """Construye la configuración desde variables de entorno.

        Args:
            environ: Variables a usar. None = os.environ. Los tests pasan
                     un dict para no depender del entorno real.

        Raises:
            ConfigurationError: Si un entero o booleano no se puede interpretar.
        """
        env = os.environ if environ is None else environ

        max_file_size = _read_int(env, "MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE)
        if max_file_size <= 0:
            raise ConfigurationError("MAX_FILE_SIZE", str(max_file_size), "entero positivo")

        raw_data_path = env.get("DATA_PATH", "").strip()

        return cls(
            max_file_size=max_file_size,
            smtp_host=env.get("SMTP_HOST", "localhost").strip() or "localhost",
            smtp_port=_read_int(env, "SMTP_PORT", 1025),
            smtp_username=env.get("SMTP_USERNAME", "").strip(),
            smtp_password=env.get("SMTP_PASSWORD", ""),
            smtp_use_tls=_read_bool(env, "SMTP_USE_TLS", False),
            from_address=env.get("FROM_ADDRESS", "noreply@example.com").strip(),
            from_name=env.get("FROM_NAME", "Account Summary").strip(),
            to_address=env.get("TO_ADDRESS", "").strip() or None,
            data_path=Path(raw_data_path).expanduser() if raw_data_path else None,
        )


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(name, raw, "un número entero")


def _read_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(name, raw, "true o false")
