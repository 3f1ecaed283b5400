"""
Auth service - signup, login and password reset against the users table.
No sessions or tokens: each call only answers whether the credentials hold.
"""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from buildstore.core.errors import StoreError, UnauthorizedError
from buildstore.core.security import hash_password, verify_password
from buildstore.db.models.user import User
from buildstore.db.repositories.user_repository import UserRepository

NOT_REGISTERED = "Username not registered. Please sign up."


class AuthService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def _get_registered(self, username: str | None) -> User:
        try:
            user = await self.user_repo.get_by_username(username)
        except SQLAlchemyError as exc:
            logger.error("User lookup failed for {!r}: {}", username, exc)
            raise StoreError("Internal Server Error") from exc
        if user is None:
            raise UnauthorizedError(NOT_REGISTERED)
        return user

    async def signup(self, username: str | None, password: str | None) -> int:
        """Create a user. Taken usernames and missing fields fail as StoreError."""
        # Empty passwords are never hashed; the NOT NULL column rejects them.
        password_hash = hash_password(password) if password else None
        try:
            user_id = await self.user_repo.create(username, password_hash)
        except SQLAlchemyError as exc:
            logger.error("User insert failed for {!r}: {}", username, exc)
            raise StoreError("Failed to create user") from exc
        logger.info("User {!r} created", username)
        return user_id

    async def login(self, username: str | None, password: str | None) -> None:
        user = await self._get_registered(username)
        if not verify_password(password, user.password):
            raise UnauthorizedError("Incorrect password.")

    async def reset_password(
        self, username: str | None, old_password: str | None, new_password: str | None
    ) -> None:
        """Replace the password, only when the old one matches."""
        user = await self._get_registered(username)
        if not verify_password(old_password, user.password):
            raise UnauthorizedError("Incorrect old password.")

        password_hash = hash_password(new_password) if new_password else None
        try:
            await self.user_repo.update_password(user.username, password_hash)
        except SQLAlchemyError as exc:
            logger.error("Password update failed for {!r}: {}", username, exc)
            raise StoreError("Failed to reset password") from exc
        logger.info("Password reset for {!r}", username)
