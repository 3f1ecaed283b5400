"""
User repository - encapsulates all user data access.
"""

from sqlalchemy import select, update

from buildstore.db.models.user import User
from buildstore.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries. Passwords arrive here already hashed."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_username(self, username: str | None) -> User | None:
        """Find user by username - used for login and password reset."""
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def create(self, username: str | None, password_hash: str | None) -> int:
        """Insert a user. A taken username raises IntegrityError."""
        user = await self.add(User(username=username, password=password_hash))
        return user.id

    async def update_password(self, username: str, password_hash: str) -> int:
        result = await self.session.execute(
            update(User).where(User.username == username).values(password=password_hash)
        )
        await self.session.commit()
        return result.rowcount
