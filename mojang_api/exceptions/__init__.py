from mojang_api.exceptions.api_errors import (
    ForbiddenOperationError,
    IllegalArgumentError,
    MojangAPIError,
    UserNotFoundError,
)
from mojang_api.exceptions.mojang_exceptions import (
    MojangBaseError,
    MojangClientError,
    MojangHTTPError,
    MojangNetworkError,
    MojangSchemaError,
    MojangServerError,
)

__all__ = [
    "ForbiddenOperationError",
    "IllegalArgumentError",
    "MojangAPIError",
    "MojangBaseError",
    "MojangClientError",
    "MojangHTTPError",
    "MojangNetworkError",
    "MojangSchemaError",
    "MojangServerError",
    "UserNotFoundError",
]
