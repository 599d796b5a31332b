from typing import Optional

from mojang_api.exceptions.mojang_exceptions import MojangBaseError


class MojangAPIError(MojangBaseError):
    """Domain error reported by the client, carrying a numeric code."""

    def __init__(self, message: str = "", code: int = 0):
        super().__init__(message)
        self.message = message
        self.code = code


class IllegalArgumentError(MojangAPIError, ValueError):
    """Raised before any request when the caller's input is invalid."""
    pass


class UserNotFoundError(MojangAPIError):
    """Raised when a lookup succeeds but the user does not exist."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message, code=status_code)
        self.status_code = status_code


class ForbiddenOperationError(MojangAPIError):
    """
    Raised when the auth server rejects the credentials.

    The message is the server's own errorMessage. The code is always 403,
    whatever status the response actually had; that status is kept in
    `status_code`.
    """

    CODE = 403

    def __init__(self, message: str, error: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, code=self.CODE)
        self.error = error
        self.status_code = status_code
