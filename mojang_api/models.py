from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ServiceStatus:
    """
    State of one Mojang service as reported by the status check.

    `status` is normally "green", "yellow" or "red"; any other value is
    kept as-is.
    """

    name: str
    status: str


@dataclass(frozen=True)
class User:
    """Base identity. `uuid` is None when only a name was resolved."""

    name: str
    uuid: Optional[str] = None


@dataclass(frozen=True)
class Profile:
    """
    Public profile from the session server.

    `textures_value` is the raw base64 payload. The URLs are only filled
    in when the payload was decoded; `skin_url` is also None for accounts
    using a default skin.
    """

    name: str
    uuid: str
    textures_value: str
    skin_url: Optional[str] = None
    cape_url: Optional[str] = None

    def as_user(self) -> User:
        return User(name=self.name, uuid=self.uuid)


@dataclass(frozen=True)
class AuthenticatedUser:
    """A user together with the bearer token returned by authentication."""

    user: User
    access_token: str = field(repr=False)
    client_token: Optional[str] = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return self.user.name

    @property
    def uuid(self) -> Optional[str]:
        return self.user.uuid


@dataclass(frozen=True)
class ProfileInformation:
    """Current-account profile; `skin_url` is the first listed skin."""

    uuid: str
    name: str
    skin_url: str


@dataclass(frozen=True)
class NameHistoryEntry:
    """
    One name an account has used.

    `changed_to_at` is in epoch seconds and is None for the original name.
    """

    name: str
    changed_to_at: Optional[int] = None

    @classmethod
    def from_millis(cls, name: str, changed_to_at_ms: Optional[int]) -> "NameHistoryEntry":
        if changed_to_at_ms is None:
            return cls(name=name)
        return cls(name=name, changed_to_at=changed_to_at_ms // 1000)
