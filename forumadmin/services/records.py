"""Look-ups and writes against the Users and Communities collections."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.orm import selectinload

from forumadmin.auth import hash_password
from forumadmin.models import Community, Role, Store, User, community_members, community_moderators

logger = logging.getLogger(__name__)


async def get_user_by_email(store: Store, email: str) -> Optional[User]:
    """Exact-match lookup by email."""
    async with store.session() as session:
        result = await session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()


async def list_users_by_role(store: Store, role: Role) -> list[User]:
    async with store.session() as session:
        result = await session.execute(
            select(User).where(User.role == role.value).order_by(User.id)
        )
        return list(result.scalars().all())


async def create_user(store: Store, name: str, email: str, password: str, role: Role) -> User:
    """Insert a user. The password is stored only as a bcrypt hash."""
    async with store.session() as session:
        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=role.value,
        )
        session.add(user)
        await session.commit()
        await session.refresh(user)
    logger.info("Created %s user %s <%s> (id=%s)", role.value, name, email, user.id)
    return user


async def list_community_names(store: Store) -> list[str]:
    """Names of all communities, oldest first. Only the name column is read."""
    async with store.session() as session:
        result = await session.execute(select(Community.name).order_by(Community.id))
        return list(result.scalars().all())


async def get_community_by_name(store: Store, name: str) -> Optional[Community]:
    """Full community record with both reference sets loaded."""
    async with store.session() as session:
        result = await session.execute(
            select(Community)
            .where(Community.name == name)
            .options(selectinload(Community.moderators), selectinload(Community.members))
        )
        return result.scalar_one_or_none()


async def add_moderator_to_community(store: Store, community_name: str, user_id: int) -> bool:
    """Add user_id to the community's moderators and members sets in one transaction.

    Ids already present in a set are left alone. Returns False if no community
    with that name exists, True otherwise.
    """
    async with store.session() as session:
        community_id = await session.scalar(
            select(Community.id).where(Community.name == community_name)
        )
        if community_id is None:
            return False
        for table in (community_moderators, community_members):
            present = await session.scalar(
                select(table.c.user_id).where(
                    table.c.community_id == community_id,
                    table.c.user_id == user_id,
                )
            )
            if present is None:
                await session.execute(insert(table).values(community_id=community_id, user_id=user_id))
        await session.commit()
    logger.info("Added user id=%s to moderators and members of %s", user_id, community_name)
    return True
