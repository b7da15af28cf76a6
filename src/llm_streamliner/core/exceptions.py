"""
Exceptions personnalisées pour LLM Streamliner.
"""


class StreamlinerError(Exception):
    """Exception de base pour toutes les erreurs du streamliner."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code or "unknown_error"
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"[{self.code}] {self.message} - Détails: {self.details}"
        return f"[{self.code}] {self.message}"


class ConfigurationError(StreamlinerError):
    """Erreur de configuration (fichier manquant, valeur invalide, codec inconnu)."""

    def __init__(self, message: str, config_key: str = None):
        super().__init__(
            message=message,
            code="config_error",
            details={"key": config_key} if config_key else {}
        )


class CompressionError(StreamlinerError):
    """Échec de la transformation lors de la compression."""

    def __init__(self, message: str, codec: str = None):
        super().__init__(
            message=message,
            code="compression_error",
            details={"codec": codec} if codec else {}
        )


class ExpansionError(StreamlinerError):
    """Échec de l'expansion (flux invalide ou UTF-8 invalide).

    `cause` contient la description lisible de l'échec sous-jacent.
    """

    def __init__(self, cause: str, codec: str = None):
        super().__init__(
            message=f"Expansion impossible: {cause}",
            code="expansion_error",
            details={"codec": codec} if codec else {}
        )
        self.cause = cause


class SerializationError(StreamlinerError):
    """Erreur d'encodage/décodage JSON d'un memory module."""

    def __init__(self, message: str, field: str = None):
        super().__init__(
            message=message,
            code="serialization_error",
            details={"field": field} if field else {}
        )
        self.field = field


class StorageError(StreamlinerError):
    """Erreur d'E/S (ou de sérialisation) à la frontière de persistance."""

    def __init__(self, message: str, path: str = None, operation: str = None):
        details = {}
        if path:
            details["path"] = path
        if operation:
            details["operation"] = operation
        super().__init__(
            message=message,
            code="storage_error",
            details=details
        )
        self.path = path
        self.operation = operation
