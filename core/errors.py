"""Error taxonomy shared by every wizard step."""


class AppError(Exception):
    """Base class for errors shown to the user as a message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Bad or empty user input (empty topic, invalid video URL, ...)."""


class GenerationError(AppError):
    """A model call failed or returned an unparseable / absent payload."""


class ConfigurationError(AppError):
    """Required configuration (the API credential) is missing or invalid."""
