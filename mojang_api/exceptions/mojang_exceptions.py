from typing import Optional


class MojangBaseError(Exception):
    """Base class for Mojang client errors."""
    pass


class MojangNetworkError(MojangBaseError):
    """Raised when network or connection errors occur."""
    pass


class MojangHTTPError(MojangBaseError):
    """Raised when the service answers with an unexpected HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None, response=None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.response = response


class MojangServerError(MojangHTTPError):
    """Raised when the Mojang API returns 5xx or 429."""
    pass


class MojangClientError(MojangHTTPError):
    """Raised when the Mojang API returns 4xx."""
    pass


class MojangSchemaError(MojangBaseError):
    """Raised when unexpected JSON structure is returned."""
    pass
