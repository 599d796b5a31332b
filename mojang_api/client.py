"""
MojangAPI - single entry point for the Mojang web services.

Wraps one HttpTransport and exposes every supported endpoint as a
method returning typed models. Nothing is cached between calls.
"""

from typing import Dict, List, Optional, Sequence, Union

import requests

from mojang_api.api_calls import auth, profiles, status, users
from mojang_api.core.config import Settings, get_settings
from mojang_api.exceptions.mojang_exceptions import MojangSchemaError
from mojang_api.models import AuthenticatedUser, Profile, ProfileInformation, User
from mojang_api.renderer import OUTPUT_BASE64, OUTPUT_DATA_URI, render_head, validate_render_args
from mojang_api.result_collections import NameHistoryCollection, ServiceStatusCollection
from mojang_api.utils.http import HttpTransport


class MojangAPI:
    """
    Client for the Mojang account, session and services APIs.

    Args:
        session: requests.Session to send requests with. Pass one to
            configure adapters, proxies or test doubles; a private session
            is created otherwise.
        settings: Overrides the environment-driven settings.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.transport = HttpTransport(session=session, settings=self.settings)

    def __enter__(self) -> "MojangAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        self.transport.close()

    def fetch_service_status(self) -> ServiceStatusCollection:
        """Return the status of the Mojang services, in reported order."""
        return status.fetch_service_status(self.transport, self.settings)

    def resolve_uuid(self, name: str) -> str:
        """
        Return the UUID for a username.

        Raises:
            IllegalArgumentError: `name` is empty.
            UserNotFoundError: No such user; carries the HTTP status.
        """
        return users.resolve_uuid(self.transport, self.settings, name)

    def fetch_profile(self, uuid: str, decode_textures: bool = True) -> Profile:
        """Return the public profile, decoding skin/cape URLs by default."""
        return profiles.fetch_profile(self.transport, self.settings, uuid, decode_textures)

    def resolve_skin_url(self, uuid: str) -> str:
        profile = self.fetch_profile(uuid)
        if profile.skin_url is None:
            raise MojangSchemaError(f"Profile {uuid} has no skin texture")
        return profile.skin_url

    def resolve_uuids_batch(
        self,
        names: Sequence[str],
        as_users: bool = True,
    ) -> Union[List[User], Dict[str, str]]:
        """
        Resolve up to ten usernames at once.

        Raises:
            IllegalArgumentError: More than ten names; nothing is sent.
        """
        return users.resolve_uuids_batch(self.transport, self.settings, names, as_users)

    def fetch_name_history(self, uuid: str) -> NameHistoryCollection:
        return users.fetch_name_history(self.transport, self.settings, uuid)

    def authenticate(self, email: str, password: str) -> AuthenticatedUser:
        """
        Authenticate with account credentials.

        Raises:
            ForbiddenOperationError: The auth server rejected the request.
                The message is the server's errorMessage, the code is 403.
        """
        return auth.authenticate(self.transport, self.settings, email, password)

    def login(self, email: str, password: str) -> "AuthenticatedSession":
        """Authenticate and return a session bound to this client."""
        from mojang_api.session import AuthenticatedSession

        return AuthenticatedSession(self, self.authenticate(email, password))

    def fetch_account_profile(self, token: str) -> ProfileInformation:
        return auth.fetch_account_profile(self.transport, self.settings, token)

    def check_name_availability(self, name: str, token: str) -> bool:
        """True unless the service reports the name as DUPLICATE."""
        return auth.check_name_availability(self.transport, self.settings, name, token)

    def render_head_image(self, skin_url: str, size: int = 64, only_base64: bool = False) -> str:
        """
        Download a skin and render the player's head.

        Returns a data:image/png;base64 URI, or the bare base64 PNG when
        `only_base64` is set.
        """
        output = OUTPUT_BASE64 if only_base64 else OUTPUT_DATA_URI
        validate_render_args(size, output)

        skin = self.transport.get(skin_url).content
        return render_head(skin, size=size, output=output).decode("ascii")
