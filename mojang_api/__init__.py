"""
Client library for the Mojang account web services.
"""

from mojang_api.client import MojangAPI
from mojang_api.exceptions import (
    ForbiddenOperationError,
    IllegalArgumentError,
    MojangAPIError,
    MojangBaseError,
    MojangClientError,
    MojangHTTPError,
    MojangNetworkError,
    MojangSchemaError,
    MojangServerError,
    UserNotFoundError,
)
from mojang_api.models import (
    AuthenticatedUser,
    NameHistoryEntry,
    Profile,
    ProfileInformation,
    ServiceStatus,
    User,
)
from mojang_api.result_collections import NameHistoryCollection, ServiceStatusCollection
from mojang_api.session import AuthenticatedSession

__version__ = "1.0.0"

__all__ = [
    "AuthenticatedSession",
    "AuthenticatedUser",
    "ForbiddenOperationError",
    "IllegalArgumentError",
    "MojangAPI",
    "MojangAPIError",
    "MojangBaseError",
    "MojangClientError",
    "MojangHTTPError",
    "MojangNetworkError",
    "MojangSchemaError",
    "MojangServerError",
    "NameHistoryCollection",
    "NameHistoryEntry",
    "Profile",
    "ProfileInformation",
    "ServiceStatus",
    "ServiceStatusCollection",
    "User",
    "UserNotFoundError",
]
