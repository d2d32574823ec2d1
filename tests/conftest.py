"""Pytest configuration and fixtures for admin tool tests."""
import os

# Set test env BEFORE any imports that use config
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["NO_COLOR"] = "1"

import pytest

from config import StoreConfig
from forumadmin.models import Community, Role, User, connect
from forumadmin.prompts import Console, ScriptedReader


@pytest.fixture
async def store(tmp_path):
    """Fresh SQLite file store per test."""
    s = await connect(StoreConfig(database_url=f"sqlite+aiosqlite:///{tmp_path / 'forum.db'}"))
    yield s
    await s.dispose()


@pytest.fixture
def output():
    """Lines written by the console under test."""
    return []


@pytest.fixture
def make_console(output):
    """Build a Console answering with the given lines, color off, output captured."""

    def _make(*lines: str) -> Console:
        return Console(ScriptedReader(lines), writer=output.append, color=False)

    return _make


@pytest.fixture
def add_user(store):
    """Insert a user directly. Skips bcrypt; tests that need a real hash use create_user."""

    async def _add(name: str, email: str, role: Role = Role.MODERATOR) -> User:
        async with store.session() as session:
            user = User(name=name, email=email, password_hash="not-a-real-hash", role=role.value)
            session.add(user)
            await session.commit()
            await session.refresh(user)
            return user

    return _add


@pytest.fixture
def add_community(store):
    """Insert a community, optionally with existing moderators/members (by user)."""

    async def _add(name: str, moderators=(), members=()) -> Community:
        async with store.session() as session:
            community = Community(
                name=name,
                moderators=[await session.get(User, u.id) for u in moderators],
                members=[await session.get(User, u.id) for u in members],
            )
            session.add(community)
            await session.commit()
            return community

    return _add
