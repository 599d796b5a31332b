from typing import Dict, List, Sequence, Union

from urllib.parse import quote

from mojang_api.core.config import Settings
from mojang_api.exceptions.api_errors import IllegalArgumentError, UserNotFoundError
from mojang_api.models import NameHistoryEntry, User
from mojang_api.result_collections import NameHistoryCollection
from mojang_api.schemas import BatchProfileLookup, NameHistoryResponse, ProfileLookup
from mojang_api.utils.decoding import decode_json, parse_as
from mojang_api.utils.http import HttpTransport
from mojang_api.utils.logging_config import get_logger

MAX_BATCH_SIZE = 10

logger = get_logger("users")


def resolve_uuid(transport: HttpTransport, settings: Settings, name: str) -> str:
    """
    Resolve a username to its UUID.

    The service answers 204/404 or an object without `id` for unknown
    names; all of those raise UserNotFoundError with the HTTP status.
    """
    if not name:
        raise IllegalArgumentError("Username must not be empty.")

    url = f"{settings.API_HOST}/users/profiles/minecraft/{quote(name, safe='')}"
    try:
        resp = transport.get(url, accept_statuses=(204, 404))
        data = decode_json(resp)
        lookup = parse_as(ProfileLookup, data, "username lookup") if data else None
    except Exception:
        logger.exception(f"UUID lookup failed for name={name}")
        raise

    if lookup is None or not lookup.id:
        raise UserNotFoundError(f"User {name} not found", resp.status_code)

    return lookup.id


def resolve_uuids_batch(
    transport: HttpTransport,
    settings: Settings,
    names: Sequence[str],
    as_users: bool = True,
) -> Union[List[User], Dict[str, str]]:
    """
    Resolve up to ten usernames in one request.

    Returns a list of User, or a {name: uuid} mapping when `as_users` is
    False. Unknown names are simply missing from the result.
    """
    names = list(names)
    if len(names) > MAX_BATCH_SIZE:
        raise IllegalArgumentError(
            f"Not more than {MAX_BATCH_SIZE} profile names per call is allowed."
        )

    try:
        resp = transport.post_json(f"{settings.API_HOST}/profiles/minecraft", names)
        found = parse_as(List[BatchProfileLookup], decode_json(resp) or [], "bulk lookup")
    except Exception:
        logger.exception(f"Bulk UUID lookup failed for {len(names)} names")
        raise

    logger.info(f"Bulk lookup resolved {len(found)}/{len(names)} names")

    if as_users:
        return [User(name=item.name, uuid=item.id) for item in found]
    return {item.name: item.id for item in found}


def fetch_name_history(transport: HttpTransport, settings: Settings, uuid: str) -> NameHistoryCollection:
    """Fetch every name the account has used, oldest first as returned."""
    url = f"{settings.API_HOST}/user/profiles/{quote(uuid, safe='')}/names"
    try:
        resp = transport.get(url)
        records = parse_as(NameHistoryResponse, decode_json(resp), "name history")
    except Exception:
        logger.exception(f"Name history fetch failed for uuid={uuid}")
        raise

    history = NameHistoryCollection()
    for record in records:
        history.add(NameHistoryEntry.from_millis(record.name, record.changed_to_at))

    return history
