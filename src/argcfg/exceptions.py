"""Custom exceptions for argcfg."""


class ArgcfgError(Exception):
    """Base exception for argcfg errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidTokenError(ArgcfgError, TypeError):
    """Raised when a non-string element is passed as an argument token."""

    def __init__(self, token: object, index: int):
        super().__init__(
            f"Argument at position {index} must be str, got {type(token).__name__}"
        )
        self.token = token
        self.index = index
