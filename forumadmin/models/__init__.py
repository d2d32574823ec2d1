"""Database models."""
from forumadmin.models.base import Base, Store, StoreConnectionError, connect
from forumadmin.models.user import Role, User
from forumadmin.models.community import Community, community_members, community_moderators  # noqa: F401 - for metadata

__all__ = [
    "Base",
    "Community",
    "Role",
    "Store",
    "StoreConnectionError",
    "User",
    "community_members",
    "community_moderators",
    "connect",
]
