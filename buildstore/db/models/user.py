"""
User model - login identity.
"""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from buildstore.db.base import Base


class User(Base):
    """User account. Created by signup, mutated by password reset, never deleted."""

    __tablename__ = "users"
    __table_args__ = (CheckConstraint("username <> ''", name="ck_users_username_not_empty"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    # Salted hash, see buildstore.core.security
    password: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
