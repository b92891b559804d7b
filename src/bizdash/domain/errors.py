class AppError(Exception):
    """Base app error."""


class TransportError(AppError):
    """Network, DNS or HTTP failure while talking to the backend."""


class ParseError(AppError):
    """Backend answered with something that is not JSON."""


class ApplicationError(AppError):
    """Backend answered with status "error"."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(ApplicationError):
    pass


class ValidationError(AppError):
    pass


class ConfigError(ValidationError):
    pass
