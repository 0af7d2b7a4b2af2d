"""
Excepciones de dominio del proyecto ledger-summary.

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque permiten que el orquestador (SummaryProcessor) y el CLI distingan
entre "el CSV tiene una fila mala en la línea 7" y "el archivo no existe"
y reporten cada caso de forma diferente.

Jerarquía:
    LedgerBaseError
    ├── RecordError (ValueError)      → Una fila individual es inválida
    │   ├── InvalidAmountError        → Monto vacío o no numérico
    │   ├── AmountOutOfRangeError     → |monto| > 1,000,000
    │   ├── AmountPrecisionError      → Más de 2 decimales
    │   ├── InvalidDateError          → Fecha en formato no reconocido
    │   ├── MalformedRecordError      → La fila no tiene exactamente 3 campos
    │   └── MissingIdentifierError    → El Id de la fila está vacío
    ├── RecordParseFailedError        → RecordError + número de línea
    ├── EmptyDatasetError             → El archivo no tiene filas de datos
    ├── SourceError                   → Error del colaborador de archivos
    │   ├── SourceNotFoundError
    │   ├── SourceTooLargeError
    │   └── SourceAccessDeniedError
    ├── DeliveryError                 → Error al enviar el correo
    ├── OutputError                   → Error al generar el archivo de salida
    └── ConfigurationError            → Variables de entorno inválidas
"""


class LedgerBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar CUALQUIER error del proyecto con un solo
    `except LedgerBaseError` en el CLI.
    """


# ============================================================
# ERRORES DE REGISTRO (una fila del CSV)
# ============================================================


class RecordError(LedgerBaseError, ValueError):
    """Base de los errores de una fila individual.

    Hereda también de ValueError para que el código que ya captura
    ValueError (por ejemplo, validaciones genéricas) siga funcionando.
    """

    def __init__(self, raw_value: str, mensaje: str):
        self.raw_value = raw_value
        super().__init__(mensaje)


class InvalidAmountError(RecordError):
    """El monto está vacío o no es un número decimal."""

    def __init__(self, raw_value: str, detalle: str = ""):
        mensaje = f"Monto inválido: '{raw_value}'"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(raw_value, mensaje)


class AmountOutOfRangeError(RecordError):
    """El valor absoluto del monto excede el límite permitido."""

    def __init__(self, raw_value: str, limite: str):
        self.limite = limite
        super().__init__(raw_value, f"El monto '{raw_value}' excede el límite de {limite}")


class AmountPrecisionError(RecordError):
    """El monto tiene más decimales de los permitidos. Nunca se redondea."""

    def __init__(self, raw_value: str, max_decimales: int):
        self.max_decimales = max_decimales
        super().__init__(
            raw_value,
            f"El monto '{raw_value}' tiene demasiados decimales (máximo {max_decimales})",
        )


class InvalidDateError(RecordError):
    """La fecha no coincide con ninguno de los formatos aceptados."""

    def __init__(self, raw_value: str, detalle: str = ""):
        mensaje = f"Formato de fecha no reconocido: '{raw_value}'"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(raw_value, mensaje)


class MalformedRecordError(RecordError):
    """La fila no tiene exactamente los campos esperados o no se puede leer."""

    def __init__(self, raw_value: str, detalle: str):
        self.detalle = detalle
        super().__init__(raw_value, f"Registro mal formado: {detalle}")


class MissingIdentifierError(RecordError):
    """El campo Id de la fila está vacío."""

    def __init__(self, raw_value: str = ""):
        super().__init__(raw_value, "El Id de la transacción no puede estar vacío")


# ============================================================
# ERRORES DE INGESTA (el archivo completo)
# ============================================================


class RecordParseFailedError(LedgerBaseError):
    """Una fila falló al parsearse. Aborta la ingesta completa.

    Envuelve el RecordError original (disponible en `cause` y en
    `__cause__`) junto con el número de línea (1-indexed) de la fila.
    """

    def __init__(self, line_number: int, cause: RecordError):
        self.line_number = line_number
        self.cause = cause
        super().__init__(f"Error en la línea {line_number}: {cause}")


class EmptyDatasetError(LedgerBaseError):
    """El flujo no contiene ninguna fila de datos (vacío o solo encabezado)."""

    def __init__(self, origen: str = ""):
        self.origen = origen
        mensaje = "No se encontraron transacciones válidas"
        if origen:
            mensaje += f" en '{origen}'"
        super().__init__(mensaje)


# ============================================================
# ERRORES DE COLABORADORES EXTERNOS
# ============================================================


class SourceError(LedgerBaseError):
    """Base de los errores del colaborador de acceso a archivos."""

    def __init__(self, ruta: str, causa: str):
        self.ruta = ruta
        self.causa = causa
        super().__init__(f"No se pudo abrir '{ruta}': {causa}")


class SourceNotFoundError(SourceError):
    """El archivo no existe."""


class SourceTooLargeError(SourceError):
    """El archivo excede el tamaño máximo configurado."""

    def __init__(self, ruta: str, tamaño: int, maximo: int):
        self.tamaño = tamaño
        self.maximo = maximo
        super().__init__(ruta, f"demasiado grande: {tamaño} bytes (máximo {maximo} bytes)")


class SourceAccessDeniedError(SourceError):
    """No hay permisos para leer el archivo o el origen no está soportado."""


class DeliveryError(LedgerBaseError):
    """Se lanza cuando falla el envío del correo con el resumen."""

    def __init__(self, destinatario: str, causa: str):
        self.destinatario = destinatario
        self.causa = causa
        super().__init__(f"Error enviando correo a '{destinatario}': {causa}")


class OutputError(LedgerBaseError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Hay un error en el formato del Excel.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")


class ConfigurationError(LedgerBaseError):
    """Una variable de entorno tiene un valor inválido."""

    def __init__(self, variable: str, valor: str, esperado: str):
        self.variable = variable
        self.valor = valor
        super().__init__(f"Valor inválido para {variable}: '{valor}'. Se esperaba: {esperado}")
