class TilesError(Exception):
    """Base class for errors raised by the tiles helpers."""

    code = "tiles_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthorizationError(TilesError):
    code = "access_denied"

    def __init__(self, capability: str):
        super().__init__(f"Missing capability: {capability}")
        self.capability = capability


class NotFoundError(TilesError):
    code = "not_found"


class InvalidValueError(TilesError):
    code = "validation_error"
