"""Unit tests for AuthService: login and token authorization."""

from unittest.mock import AsyncMock, Mock

import pytest

from application.services.auth_service import AuthService
from application.services.token_service import TokenService
from domain.exceptions import InvalidCredentials, MalformedToken, StoreUnavailable
from domain.value_objects.auth import Credentials, Identity, LoginResult
from infrastructure.security.password_hasher import PasswordHasher
from tests.conftest import make_user

PASSWORD = "securePassword123"


def _make_mock_repo() -> Mock:
    """Create a fully mocked UserRepository."""
    repo = Mock()
    repo.find_by_username = AsyncMock(return_value=None)
    repo.update = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def repo():
    return _make_mock_repo()


@pytest.fixture
def tokens():
    return TokenService(secret_key="auth-service-test-secret-0123456789", expire_minutes=15)


@pytest.fixture
def service(repo, hasher, tokens):
    return AuthService(repository=repo, hasher=hasher, tokens=tokens)


# ===========================================================================
# Login flow
# ===========================================================================


class TestAuthenticate:

    @pytest.mark.asyncio
    async def test_success_returns_user_and_token(self, service, repo, hasher):
        user = make_user(password_hash=hasher.hash(PASSWORD))
        repo.find_by_username.return_value = user

        result = await service.authenticate(Credentials("alice01", PASSWORD))

        assert isinstance(result, LoginResult)
        assert result.user is user
        assert result.access_token.token
        assert result.access_token.expires_in == 15 * 60
        repo.find_by_username.assert_awaited_once_with("alice01")

    @pytest.mark.asyncio
    async def test_wrong_password(self, service, repo, hasher):
        repo.find_by_username.return_value = make_user(password_hash=hasher.hash(PASSWORD))

        with pytest.raises(InvalidCredentials):
            await service.authenticate(Credentials("alice01", "wrongPassword1"))

    @pytest.mark.asyncio
    async def test_unknown_user_gives_same_error(self, service, repo):
        repo.find_by_username.return_value = None

        with pytest.raises(InvalidCredentials) as unknown:
            await service.authenticate(Credentials("nobody", PASSWORD))

        assert unknown.value.message == InvalidCredentials().message

    @pytest.mark.asyncio
    async def test_unknown_user_still_pays_for_verification(self, repo, tokens):
        hasher = Mock(spec=PasswordHasher)
        service = AuthService(repository=repo, hasher=hasher, tokens=tokens)

        with pytest.raises(InvalidCredentials):
            await service.authenticate(Credentials("nobody", PASSWORD))

        hasher.verify_dummy.assert_called_once_with(PASSWORD)

    @pytest.mark.asyncio
    async def test_malformed_stored_hash_is_invalid_credentials(self, service, repo):
        repo.find_by_username.return_value = make_user(password_hash="not-a-hash")

        with pytest.raises(InvalidCredentials):
            await service.authenticate(Credentials("alice01", PASSWORD))

    @pytest.mark.asyncio
    async def test_outdated_hash_is_rehashed(self, service, repo, hasher):
        weak = PasswordHasher(time_cost=2, memory_cost=8192, parallelism=1)
        user = make_user(password_hash=weak.hash(PASSWORD))
        old_hash = user.password_hash
        repo.find_by_username.return_value = user

        await service.authenticate(Credentials("alice01", PASSWORD))

        repo.update.assert_awaited_once_with(user)
        assert user.password_hash != old_hash
        assert hasher.needs_rehash(user.password_hash) is False

    @pytest.mark.asyncio
    async def test_rehash_store_failure_does_not_block_login(self, service, repo):
        weak = PasswordHasher(time_cost=2, memory_cost=8192, parallelism=1)
        repo.find_by_username.return_value = make_user(password_hash=weak.hash(PASSWORD))
        repo.update.side_effect = StoreUnavailable()

        result = await service.authenticate(Credentials("alice01", PASSWORD))

        assert result.access_token.token

    @pytest.mark.asyncio
    async def test_store_failure_on_lookup_propagates(self, service, repo):
        repo.find_by_username.side_effect = StoreUnavailable()

        with pytest.raises(StoreUnavailable):
            await service.authenticate(Credentials("alice01", PASSWORD))


# ===========================================================================
# Authorization
# ===========================================================================


class TestAuthorize:

    @pytest.mark.asyncio
    async def test_login_token_authorizes(self, service, repo, hasher):
        repo.find_by_username.return_value = make_user(password_hash=hasher.hash(PASSWORD))
        result = await service.authenticate(Credentials("alice01", PASSWORD))

        identity = service.authorize(result.access_token.token)

        assert isinstance(identity, Identity)
        assert identity.username == "alice01"

    @pytest.mark.asyncio
    async def test_authorize_does_not_touch_store(self, service, repo, hasher):
        repo.find_by_username.return_value = make_user(password_hash=hasher.hash(PASSWORD))
        result = await service.authenticate(Credentials("alice01", PASSWORD))
        repo.find_by_username.reset_mock()

        service.authorize(result.access_token.token)

        repo.find_by_username.assert_not_called()

    def test_authorize_rejects_garbage(self, service):
        with pytest.raises(MalformedToken):
            service.authorize("garbage")
