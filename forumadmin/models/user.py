"""User account model."""
from __future__ import annotations

import enum

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from forumadmin.models.base import Base


class Role(str, enum.Enum):
    """Role tag stored on each user."""

    MEMBER = "member"
    MODERATOR = "moderator"
    ADMIN = "admin"


class User(Base):
    """Forum account. Email is the natural lookup key."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(254), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default=Role.MEMBER.value)  # member, moderator, admin

    @property
    def label(self) -> str:
        """Menu label, e.g. 'Ana - ana@x.com'."""
        return f"{self.name} - {self.email}"
