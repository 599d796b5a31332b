import pytest

from conftest import encode_textures
from mojang_api.models import AuthenticatedUser, ProfileInformation, User
from mojang_api.session import AuthenticatedSession

UUID = "8667ba71b85a4004af54457a9734eed7"


@pytest.fixture
def auth_session(api):
    return AuthenticatedSession(
        api,
        AuthenticatedUser(user=User("Steve", UUID), access_token="someToken"),
    )


class TestAuthenticatedSession:

    def test_identity(self, auth_session):
        assert auth_session.name == "Steve"
        assert auth_session.uuid == UUID
        assert auth_session.user == User("Steve", UUID)
        assert "someToken" not in repr(auth_session)

    def test_threads_token_into_account_profile(self, auth_session, adapter):
        adapter.add_json({"id": UUID, "name": "Steve", "skins": [{"url": "http://skin"}]})

        info = auth_session.fetch_account_profile()

        assert info == ProfileInformation(uuid=UUID, name="Steve", skin_url="http://skin")
        assert adapter.last_request.headers["Authorization"] == "Bearer someToken"

    def test_threads_token_into_name_availability(self, auth_session, adapter):
        adapter.add_json({"status": "DUPLICATE"})

        assert auth_session.check_name_availability("Taken") is False
        assert adapter.last_request.headers["Authorization"] == "Bearer someToken"

    def test_resolve_skin_url(self, auth_session, adapter):
        adapter.add_json({
            "id": UUID,
            "name": "Steve",
            "properties": [{"name": "textures", "value": encode_textures({"SKIN": {"url": "http://skin"}})}],
        })

        assert auth_session.resolve_skin_url() == "http://skin"
        assert adapter.last_request.url.endswith(f"/session/minecraft/profile/{UUID}")
