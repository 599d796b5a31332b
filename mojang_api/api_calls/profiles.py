from urllib.parse import quote

from mojang_api.core.config import Settings
from mojang_api.exceptions.mojang_exceptions import MojangSchemaError
from mojang_api.models import Profile
from mojang_api.schemas import SessionProfile, TexturesPayload
from mojang_api.utils.decoding import decode_base64_json, decode_json, parse_as
from mojang_api.utils.http import HttpTransport
from mojang_api.utils.logging_config import get_logger

logger = get_logger("profiles")


def build_profile(data, decode_textures: bool = True) -> Profile:
    """
    Build a Profile from a session-server profile body.

    With `decode_textures` the base64 JSON in properties[0].value is
    decoded for the skin and cape URLs.
    """
    session_profile = parse_as(SessionProfile, data, "profile")

    if not session_profile.properties:
        if decode_textures:
            raise MojangSchemaError(
                f"Profile {session_profile.id} has no textures property"
            )
        return Profile(name=session_profile.name, uuid=session_profile.id, textures_value="")

    value = session_profile.properties[0].value
    if not decode_textures:
        return Profile(name=session_profile.name, uuid=session_profile.id, textures_value=value)

    payload = parse_as(TexturesPayload, decode_base64_json(value, "textures"), "textures")
    skin = payload.textures.SKIN
    cape = payload.textures.CAPE

    return Profile(
        name=session_profile.name,
        uuid=session_profile.id,
        textures_value=value,
        skin_url=skin.url if skin else None,
        cape_url=cape.url if cape else None,
    )


def fetch_profile(
    transport: HttpTransport,
    settings: Settings,
    uuid: str,
    decode_textures: bool = True,
) -> Profile:
    url = f"{settings.SESSION_HOST}/session/minecraft/profile/{quote(uuid, safe='')}"
    try:
        resp = transport.get(url)
        return build_profile(decode_json(resp), decode_textures=decode_textures)
    except Exception:
        logger.exception(f"Profile fetch failed for uuid={uuid}")
        raise
