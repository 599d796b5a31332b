from typing import Optional

from urllib.parse import quote

from mojang_api.core.config import Settings
from mojang_api.exceptions.api_errors import ForbiddenOperationError
from mojang_api.exceptions.mojang_exceptions import MojangHTTPError, MojangSchemaError
from mojang_api.models import AuthenticatedUser, ProfileInformation, User
from mojang_api.schemas import (
    AccountProfile,
    AuthErrorResponse,
    AuthenticateResponse,
    NameAvailabilityResponse,
)
from mojang_api.utils.decoding import decode_json, parse_as
from mojang_api.utils.http import HttpTransport, bearer_headers
from mojang_api.utils.logging_config import get_logger

AGENT = {"name": "Minecraft", "version": 1}
DUPLICATE_STATUS = "DUPLICATE"

logger = get_logger("auth")


def _auth_error(data, status_code: Optional[int]) -> Optional[ForbiddenOperationError]:
    """Return ForbiddenOperationError when `data` is an auth error body."""
    if not isinstance(data, dict) or "errorMessage" not in data:
        return None

    body = parse_as(AuthErrorResponse, data, "authentication error")
    return ForbiddenOperationError(body.error_message, error=body.error, status_code=status_code)


def authenticate(transport: HttpTransport, settings: Settings, email: str, password: str) -> AuthenticatedUser:
    """
    Authenticate with account credentials.

    Any response carrying `errorMessage` raises ForbiddenOperationError,
    whatever its HTTP status.
    """
    payload = {
        "agent": AGENT,
        "username": email,
        "password": password,
    }

    try:
        resp = transport.post_json(f"{settings.AUTH_HOST}/authenticate", payload)
    except MojangHTTPError as e:
        error = None
        if e.response is not None:
            try:
                error = _auth_error(decode_json(e.response), e.status_code)
            except MojangSchemaError:
                error = None
        if error is None:
            logger.exception("Authentication request failed")
            raise
        logger.warning(f"Authentication rejected: {error.error}")
        raise error from e

    data = decode_json(resp)
    error = _auth_error(data, resp.status_code)
    if error is not None:
        logger.warning(f"Authentication rejected: {error.error}")
        raise error

    body = parse_as(AuthenticateResponse, data, "authentication")
    logger.info(f"Authenticated profile={body.selected_profile.name}")

    return AuthenticatedUser(
        user=User(name=body.selected_profile.name, uuid=body.selected_profile.id),
        access_token=body.access_token,
        client_token=body.client_token,
    )


def fetch_account_profile(transport: HttpTransport, settings: Settings, token: str) -> ProfileInformation:
    """Fetch the profile of the account owning `token`."""
    try:
        resp = transport.get(f"{settings.SERVICES_HOST}/minecraft/profile", headers=bearer_headers(token))
        account = parse_as(AccountProfile, decode_json(resp), "account profile")
    except Exception:
        logger.exception("Account profile fetch failed")
        raise

    return ProfileInformation(uuid=account.id, name=account.name, skin_url=account.skins[0].url)


def check_name_availability(transport: HttpTransport, settings: Settings, name: str, token: str) -> bool:
    """
    Check whether `name` can be claimed.

    Only the documented rejection value DUPLICATE counts as taken; every
    other status reads as available.
    """
    url = f"{settings.SERVICES_HOST}/minecraft/profile/name/{quote(name, safe='')}/available"
    try:
        resp = transport.get(url, headers=bearer_headers(token))
        body = parse_as(NameAvailabilityResponse, decode_json(resp), "name availability")
    except Exception:
        logger.exception(f"Name availability check failed for name={name}")
        raise

    return body.status != DUPLICATE_STATUS
