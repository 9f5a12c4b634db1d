"""Tests for demo authentication."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from wandermate.adapters.storage import JsonKeyValueStore, JsonSessionStore, JsonUserRepository
from wandermate.application.auth import AuthService, hash_password, verify_password
from wandermate.domain.models import ErrorKind, QueryResult, Session, User

REMOTE_SESSION = Session(
    user=User(id="1", username="emilys", email="emily.johnson@x.dummyjson.com"),
    token="remote-token",
)


@pytest.fixture
def store(tmp_path: Path) -> JsonKeyValueStore:
    """Key-value store in a temporary directory."""
    return JsonKeyValueStore(tmp_path / "storage.json")


@pytest.fixture
def gateway() -> MagicMock:
    """Remote gateway double; remote registration fails by default."""
    mock = MagicMock()
    mock.add_user = AsyncMock(
        return_value=QueryResult.failure(ErrorKind.REMOTE_QUERY_FAILED, "offline")
    )
    mock.login = AsyncMock(return_value=QueryResult.ok(REMOTE_SESSION))
    return mock


@pytest.fixture
def service(store: JsonKeyValueStore, gateway: MagicMock) -> AuthService:
    """Auth service over real JSON storage."""
    return AuthService(JsonUserRepository(store), JsonSessionStore(store), gateway)


class TestPasswordHashing:
    """Tests for password hashing helpers."""

    def test_hash_verifies(self) -> None:
        """Given a hashed password, then only the same password verifies."""
        password_hash = hash_password("s3cret")

        assert verify_password("s3cret", password_hash)
        assert not verify_password("wrong", password_hash)

    def test_salt_makes_hashes_differ(self) -> None:
        """Given two hashes of the same password, then they differ."""
        assert hash_password("s3cret") != hash_password("s3cret")
        assert hash_password("s3cret", "salt") == hash_password("s3cret", "salt")


class TestRegister:
    """Tests for registration."""

    @pytest.mark.asyncio
    async def test_registers_locally_even_if_remote_fails(
        self, service: AuthService, store: JsonKeyValueStore, gateway: MagicMock
    ) -> None:
        """Given the remote call fails, then the user is still registered locally."""
        result = await service.register("Alice", "Smith", "alice", "alice@example.com", "pw")

        assert result.is_ok
        assert result.value is not None
        assert result.value.username == "alice"
        assert JsonUserRepository(store).get_user("alice") == result.value
        payload = gateway.add_user.await_args.args[0]
        assert payload["firstName"] == "Alice"
        assert payload["lastName"] == "Smith"

    @pytest.mark.asyncio
    async def test_missing_field_is_rejected(
        self, service: AuthService, gateway: MagicMock
    ) -> None:
        """Given an empty field, then registration fails validation."""
        result = await service.register("Alice", "", "alice", "alice@example.com", "pw")

        assert result.error is not None
        assert result.error.kind is ErrorKind.VALIDATION_FAILED
        assert result.error.reason == "All fields are required"
        gateway.add_user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_username_is_rejected(self, service: AuthService) -> None:
        """Given an existing username, then registration fails."""
        await service.register("Alice", "Smith", "alice", "alice@example.com", "pw")

        result = await service.register("Al", "S", "alice", "other@example.com", "pw2")

        assert result.error is not None
        assert result.error.reason == "This email is already registered"


class TestLogin:
    """Tests for login and sessions."""

    @pytest.mark.asyncio
    async def test_local_login_persists_session(
        self, service: AuthService, gateway: MagicMock
    ) -> None:
        """Given a local user, when logging in with the right password, then a session is saved."""
        await service.register("Alice", "Smith", "alice", "alice@example.com", "pw")

        result = await service.login("alice", "pw")

        assert result.is_ok
        assert result.value is not None
        assert result.value.token.startswith("local-token-")
        gateway.login.assert_not_awaited()
        restored = service.restore_session()
        assert restored.value == result.value

    @pytest.mark.asyncio
    async def test_local_login_with_wrong_password_fails(
        self, service: AuthService, gateway: MagicMock
    ) -> None:
        """Given a local user and a wrong password, then login fails without a remote call."""
        await service.register("Alice", "Smith", "alice", "alice@example.com", "pw")

        result = await service.login("alice", "nope")

        assert result.error is not None
        assert result.error.kind is ErrorKind.AUTHENTICATION_FAILED
        assert result.error.reason == "Invalid credentials"
        gateway.login.assert_not_awaited()
        assert not service.restore_session().is_ok

    @pytest.mark.asyncio
    async def test_unknown_user_goes_to_remote(
        self, service: AuthService, gateway: MagicMock
    ) -> None:
        """Given an unknown user, then the remote demo API is used."""
        result = await service.login("emilys", "emilyspass")

        assert result.value == REMOTE_SESSION
        gateway.login.assert_awaited_once_with("emilys", "emilyspass")
        assert service.restore_session().value == REMOTE_SESSION

    @pytest.mark.asyncio
    async def test_remote_failure_saves_no_session(
        self, service: AuthService, gateway: MagicMock
    ) -> None:
        """Given the remote login fails, then its failure is returned."""
        gateway.login.return_value = QueryResult.failure(
            ErrorKind.AUTHENTICATION_FAILED, "Invalid credentials"
        )

        result = await service.login("ghost", "pw")

        assert not result.is_ok
        assert not service.restore_session().is_ok

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("username", "password"), [("", "pw"), ("alice", "")])
    async def test_missing_credentials(
        self, service: AuthService, username: str, password: str
    ) -> None:
        """Given a missing username or password, then login fails validation."""
        result = await service.login(username, password)

        assert result.error is not None
        assert result.error.reason == "Username and password are required"

    @pytest.mark.asyncio
    async def test_logout_clears_session(self, service: AuthService) -> None:
        """Given a logged-in user, when logging out, then no session remains."""
        await service.login("emilys", "emilyspass")

        service.logout()

        restored = service.restore_session()
        assert restored.error is not None
        assert restored.error.reason == "No session found"
