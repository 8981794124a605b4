"""Tests for the credentials provider and sign-in error classification."""

from unittest.mock import patch

import pytest

from app.core.errors import FetchError
from app.repositories.user_repository import UserRepository
from app.services.auth_service import (
    SESSION_USER_KEY,
    AuthService,
    CallbackRouteError,
    CredentialsSignin,
    hash_password,
    verify_password,
)

from conftest import PASSWORD, store_error


class TestPasswords:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("secret1")
        assert hashed != "secret1"
        assert verify_password("secret1", hashed)
        assert not verify_password("secret2", hashed)

    def test_non_bcrypt_hash_never_matches(self):
        assert not verify_password("secret1", "secret1")


class TestGetUser:
    async def test_found(self, auth_service):
        user = await auth_service.get_user("user@nextmail.com")
        assert user.id == "user-1"
        assert user.password != PASSWORD

    async def test_absent_is_not_an_error(self, auth_service):
        assert await auth_service.get_user("nobody@nextmail.com") is None

    async def test_store_failure(self, auth_service):
        with patch.object(UserRepository, "get_by_email", side_effect=store_error()):
            with pytest.raises(FetchError, match="Failed to fetch user."):
                await auth_service.get_user("user@nextmail.com")


class TestAuthorize:
    async def test_grants_on_matching_password(self, auth_service):
        user = await auth_service.authorize({"email": "user@nextmail.com", "password": PASSWORD})
        assert user is not None
        assert user.email == "user@nextmail.com"

    async def test_denies_wrong_password(self, auth_service):
        assert await auth_service.authorize({"email": "user@nextmail.com", "password": "wrong-password"}) is None

    async def test_denies_unknown_user(self, auth_service):
        assert await auth_service.authorize({"email": "ghost@nextmail.com", "password": PASSWORD}) is None

    @pytest.mark.parametrize(
        "credentials",
        [
            {"email": "user@nextmail.com", "password": "12345"},
            {"email": "not-an-email", "password": PASSWORD},
            {"email": "user@nextmail.com"},
            {},
        ],
    )
    async def test_bad_shape_denies_without_store_lookup(self, auth_service, credentials):
        with patch.object(UserRepository, "get_by_email") as get_by_email:
            assert await auth_service.authorize(credentials) is None
        get_by_email.assert_not_called()


class TestSignIn:
    async def test_success_stores_user_in_session(self, auth_service):
        session = {}
        user = await auth_service.sign_in(session, {"email": "user@nextmail.com", "password": PASSWORD})
        assert session[SESSION_USER_KEY] == {"id": user.id, "email": user.email, "name": user.name}

    async def test_denied_raises_credentials_signin(self, auth_service):
        with pytest.raises(CredentialsSignin):
            await auth_service.sign_in({}, {"email": "user@nextmail.com", "password": "wrong-password"})

    async def test_store_failure_raises_callback_error(self, auth_service):
        with patch.object(UserRepository, "get_by_email", side_effect=store_error()):
            with pytest.raises(CallbackRouteError):
                await auth_service.sign_in({}, {"email": "user@nextmail.com", "password": PASSWORD})

    def test_sign_out_clears_session(self):
        session = {SESSION_USER_KEY: {"id": "user-1"}, "other": 1}
        AuthService.sign_out(session)
        assert session == {"other": 1}


class TestAuthenticate:
    async def test_success_returns_none(self, auth_service):
        session = {}
        assert await auth_service.authenticate(session, {"email": "user@nextmail.com", "password": PASSWORD}) is None
        assert SESSION_USER_KEY in session

    async def test_bad_credentials(self, auth_service):
        session = {}
        message = await auth_service.authenticate(session, {"email": "user@nextmail.com", "password": "wrong-password"})
        assert message == "Invalid credentials."
        assert session == {}

    async def test_other_auth_failures(self, auth_service):
        with patch.object(UserRepository, "get_by_email", side_effect=store_error()):
            message = await auth_service.authenticate({}, {"email": "user@nextmail.com", "password": PASSWORD})
        assert message == "Something went wrong."

    async def test_non_auth_errors_propagate(self, auth_service):
        with patch.object(AuthService, "authorize", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError):
                await auth_service.authenticate({}, {"email": "user@nextmail.com", "password": PASSWORD})
