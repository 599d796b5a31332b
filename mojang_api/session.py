from typing import Optional

from mojang_api.client import MojangAPI
from mojang_api.models import AuthenticatedUser, ProfileInformation, User


class AuthenticatedSession:
    """
    An authenticated user bound to a MojangAPI client.

    Passes the user's bearer token to the endpoints that need it. The
    token is never refreshed; authenticate again once it expires.
    """

    def __init__(self, api: MojangAPI, authenticated: AuthenticatedUser):
        self.api = api
        self.authenticated = authenticated

    @property
    def user(self) -> User:
        return self.authenticated.user

    @property
    def name(self) -> str:
        return self.authenticated.name

    @property
    def uuid(self) -> Optional[str]:
        return self.authenticated.uuid

    @property
    def access_token(self) -> str:
        return self.authenticated.access_token

    def fetch_account_profile(self) -> ProfileInformation:
        return self.api.fetch_account_profile(self.access_token)

    def check_name_availability(self, name: str) -> bool:
        return self.api.check_name_availability(name, self.access_token)

    def resolve_skin_url(self) -> str:
        return self.api.resolve_skin_url(self.uuid)

    def render_head_image(self, size: int = 64, only_base64: bool = False) -> str:
        return self.api.render_head_image(self.resolve_skin_url(), size, only_base64)

    def __repr__(self) -> str:
        return f"AuthenticatedSession(user={self.user!r})"
