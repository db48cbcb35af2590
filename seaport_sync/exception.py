class SeaportSyncException(Exception):
    pass


class ConfigurationError(SeaportSyncException):
    """Raised when required settings are missing or malformed."""

    def __init__(self, message: str, missing: list[str] = None):
        super().__init__(message)
        self.missing = missing or []
