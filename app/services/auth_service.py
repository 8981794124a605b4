import logging
from typing import Any, Mapping, MutableMapping, Optional

import bcrypt
from fastapi import Request
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import Store
from app.core.errors import FetchError
from app.repositories.user_repository import UserRepository
from app.schemas.auth import Credentials, UserRecord

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user"


class AuthError(Exception):
    type = "AuthError"


class CredentialsSignin(AuthError):
    type = "CredentialsSignin"


class CallbackRouteError(AuthError):
    type = "CallbackRouteError"


class LoginRequired(Exception):
    """Raised by the route guard; the app answers with a redirect to /login."""


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


class AuthService:
    def __init__(self, store: Store):
        self.store = store

    async def get_user(self, email: str) -> Optional[UserRecord]:
        try:
            row = await self.store.run(UserRepository.get_by_email, email)
        except SQLAlchemyError as exc:
            logger.error(f"Failed to fetch user: {exc}")
            raise FetchError("Failed to fetch user.") from None
        if row is None:
            return None
        return UserRecord(id=row.id, name=row.name, email=row.email, password=row.password)

    async def authorize(self, credentials: Mapping[str, Any]) -> Optional[UserRecord]:
        """Accept/deny decision for an email + password pair. Never raises on bad input."""
        try:
            parsed = Credentials.model_validate({
                "email": credentials.get("email"),
                "password": credentials.get("password"),
            })
        except ValidationError:
            logger.info("Invalid credentials.")
            return None

        user = await self.get_user(parsed.email)
        if user is None:
            logger.info("Invalid credentials.")
            return None
        if verify_password(parsed.password, user.password):
            return user

        logger.info("Invalid credentials.")
        return None

    async def sign_in(self, session: MutableMapping[str, Any], credentials: Mapping[str, Any]) -> UserRecord:
        try:
            user = await self.authorize(credentials)
        except FetchError as exc:
            raise CallbackRouteError(exc.message) from exc
        if user is None:
            raise CredentialsSignin("Invalid credentials.")

        session[SESSION_USER_KEY] = {"id": user.id, "email": user.email, "name": user.name}
        return user

    async def authenticate(self, session: MutableMapping[str, Any], form: Mapping[str, Any]) -> Optional[str]:
        """Sign in from a login form. Returns an error message, or None on success."""
        try:
            await self.sign_in(session, form)
        except AuthError as error:
            if error.type == CredentialsSignin.type:
                return "Invalid credentials."
            return "Something went wrong."
        return None

    @staticmethod
    def sign_out(session: MutableMapping[str, Any]) -> None:
        session.pop(SESSION_USER_KEY, None)


def current_user(request: Request) -> Optional[dict]:
    return request.session.get(SESSION_USER_KEY)


def require_user(request: Request) -> dict:
    user = current_user(request)
    if not user:
        raise LoginRequired()
    return user
