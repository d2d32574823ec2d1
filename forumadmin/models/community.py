"""Community model with moderator and member reference sets."""
from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forumadmin.models.base import Base

# Composite primary keys keep each set free of duplicates.
community_moderators = Table(
    "community_moderators",
    Base.metadata,
    Column("community_id", ForeignKey("communities.id"), primary_key=True),
    Column("user_id", ForeignKey("users.id"), primary_key=True),
)

community_members = Table(
    "community_members",
    Base.metadata,
    Column("community_id", ForeignKey("communities.id"), primary_key=True),
    Column("user_id", ForeignKey("users.id"), primary_key=True),
)


class Community(Base):
    """Named group. Created elsewhere in the app; only its sets change here."""

    __tablename__ = "communities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)

    moderators: Mapped[list["User"]] = relationship("User", secondary=community_moderators)
    members: Mapped[list["User"]] = relationship("User", secondary=community_members)

    @property
    def moderator_ids(self) -> set[int]:
        """Ids in the moderators set. Requires moderators to be loaded."""
        return {u.id for u in self.moderators}

    @property
    def member_ids(self) -> set[int]:
        """Ids in the members set. Requires members to be loaded."""
        return {u.id for u in self.members}
