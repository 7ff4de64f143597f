class DaftError(Exception):
    """Base application exception."""

    def __init__(self, message: str, code: str = "DAFT_ERROR"):
        super().__init__(message)
        self.code = code


class ConfigurationError(DaftError, ValueError):
    """Raised while building a handler from a bad config. Never recovered."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")
