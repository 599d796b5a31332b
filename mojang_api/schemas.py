"""
Pydantic schemas for Mojang API responses.

One schema per endpoint shape. Unknown fields are ignored, missing
required fields fail validation.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# Status check: [{"minecraft.net": "green"}, ...]
StatusCheckResponse = List[Dict[str, str]]


class ProfileLookup(BaseModel):
    """Username → UUID lookup result."""
    id: Optional[str] = None
    name: Optional[str] = None


class BatchProfileLookup(BaseModel):
    """Single entry of the bulk username → UUID response."""
    id: str
    name: str


class ProfileProperty(BaseModel):
    """Signed property attached to a session profile."""
    name: Optional[str] = None
    value: str
    signature: Optional[str] = None


class SessionProfile(BaseModel):
    """Response of the session server profile endpoint."""
    id: str
    name: str
    properties: List[ProfileProperty] = []


class TextureRef(BaseModel):
    url: str
    metadata: Optional[Dict[str, str]] = None


class Textures(BaseModel):
    SKIN: Optional[TextureRef] = None
    CAPE: Optional[TextureRef] = None


class TexturesPayload(BaseModel):
    """Decoded content of properties[0].value."""
    timestamp: Optional[int] = None
    profile_id: Optional[str] = Field(default=None, alias="profileId")
    profile_name: Optional[str] = Field(default=None, alias="profileName")
    textures: Textures


class NameHistoryRecord(BaseModel):
    name: str
    changed_to_at: Optional[int] = Field(default=None, alias="changedToAt")


NameHistoryResponse = List[NameHistoryRecord]


class SelectedProfile(BaseModel):
    id: str
    name: str


class AuthenticateResponse(BaseModel):
    """Successful response of the auth server."""
    access_token: str = Field(..., alias="accessToken")
    client_token: Optional[str] = Field(default=None, alias="clientToken")
    selected_profile: SelectedProfile = Field(..., alias="selectedProfile")


class AuthErrorResponse(BaseModel):
    """Error body of the auth server."""
    error: Optional[str] = None
    error_message: str = Field(..., alias="errorMessage")
    cause: Optional[str] = None


class AccountSkin(BaseModel):
    url: str
    id: Optional[str] = None
    state: Optional[str] = None
    variant: Optional[str] = None


class AccountProfile(BaseModel):
    """Response of the authenticated current-account endpoint."""
    id: str
    name: str
    skins: List[AccountSkin] = Field(..., min_length=1)


class NameAvailabilityResponse(BaseModel):
    status: str
