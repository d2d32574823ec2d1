"""Tests for the top-level menu and exit status."""
import pytest
from sqlalchemy import func, select

from config import StoreConfig
from forumadmin import main as main_module
from forumadmin.main import _main, parse_args, run
from forumadmin.models import StoreConnectionError, User, community_members, community_moderators, connect
from forumadmin.prompts import Console, ScriptedReader
from forumadmin.services import records


async def _count(store, table):
    async with store.session() as session:
        return await session.scalar(select(func.count()).select_from(table))


@pytest.mark.asyncio
async def test_menu_choice_out_of_range_exits_nonzero(store, make_console, output):
    assert await run(store, make_console("9")) == 1
    assert output == ["Error: Invalid choice"]


@pytest.mark.asyncio
async def test_menu_choice_not_a_number_exits_nonzero(store, make_console, output):
    assert await run(store, make_console("create")) == 1
    assert output == ["Error: Invalid choice"]


@pytest.mark.asyncio
async def test_create_through_menu(store, make_console, output):
    assert await run(store, make_console("1", "Ana", "ana@x.com", "pw")) == 0
    assert await records.get_user_by_email(store, "ana@x.com") is not None
    assert output[-1] == "✅ Success! Moderator Ana created successfully."


@pytest.mark.asyncio
async def test_duplicate_email_through_menu_exits_zero(store, add_user, make_console):
    await add_user("Ana", "ana@x.com")
    assert await run(store, make_console("1", "Ana", "ana@x.com", "pw")) == 0
    assert await _count(store, User) == 1


@pytest.mark.asyncio
async def test_assign_with_empty_store_exits_zero(store, make_console, output):
    assert await run(store, make_console("2")) == 0
    assert output[-1] == "No moderators found in the database."
    assert await _count(store, User) == 0
    assert await _count(store, community_moderators) == 0
    assert await _count(store, community_members) == 0


@pytest.mark.asyncio
async def test_assign_ana_to_rust(store, add_user, add_community, make_console):
    ana = await add_user("Ana", "ana@x.com")
    await add_community("Rust")
    assert await run(store, make_console("2", "1", "1")) == 0
    rust = await records.get_community_by_name(store, "Rust")
    assert rust.moderator_ids == {ana.id}
    assert rust.member_ids == {ana.id}


@pytest.mark.asyncio
async def test_unexpected_error_exits_nonzero(store, make_console, output, monkeypatch):
    async def _boom(store, email):
        raise RuntimeError("database is locked")

    monkeypatch.setattr(records, "get_user_by_email", _boom)
    assert await run(store, make_console("1", "Ana", "ana@x.com", "pw")) == 1
    assert output[-1] == "Error: database is locked"


@pytest.mark.asyncio
async def test_input_closed_mid_operation_exits_nonzero(store, make_console, output):
    assert await run(store, make_console("1", "Ana")) == 1
    assert output[-1] == "Error: no scripted input left"


@pytest.mark.asyncio
async def test_unknown_operation_is_graceful(store, make_console, output, monkeypatch):
    monkeypatch.setattr(main_module, "OPERATIONS", {"1": main_module.create_moderator})
    assert await run(store, make_console("2")) == 0
    assert output == ["Invalid choice."]


@pytest.mark.asyncio
async def test_connection_failure_skips_prompts(tmp_path):
    reader = ScriptedReader(["1"])
    lines = []
    console = Console(reader, writer=lines.append, color=False)
    bad = StoreConfig(database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'forum.db'}")
    assert await _main(bad, console) == 1
    assert reader.prompts == []
    assert len(lines) == 1
    assert lines[0].startswith("Error connecting to database: ")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "url",
    [
        "not a url",
        "postgresql+nosuchdriver://u:p@127.0.0.1:1/db",
        "postgresql+asyncpg://u:p@127.0.0.1:1/db",
    ],
)
async def test_unusable_database_url_reports_connection_error(url):
    """Malformed URLs and missing drivers exit 1 with the connection error line."""
    reader = ScriptedReader(["1"])
    lines = []
    console = Console(reader, writer=lines.append, color=False)
    assert await _main(StoreConfig(database_url=url), console) == 1
    assert reader.prompts == []
    assert len(lines) == 1
    assert lines[0].startswith("Error connecting to database: ")


@pytest.mark.asyncio
async def test_connect_wraps_url_errors():
    with pytest.raises(StoreConnectionError):
        await connect(StoreConfig(database_url="not a url"))


@pytest.mark.asyncio
async def test_connected_run(tmp_path):
    reader = ScriptedReader(["2"])
    lines = []
    console = Console(reader, writer=lines.append, color=False)
    good = StoreConfig(database_url=f"sqlite+aiosqlite:///{tmp_path / 'forum.db'}")
    assert await _main(good, console) == 0
    assert lines[0] == "✅ Connected to database"
    assert lines[-1] == "No moderators found in the database."


def test_parse_args():
    args = parse_args(["--database-url", "sqlite+aiosqlite:///x.db", "--no-color"])
    assert args.database_url == "sqlite+aiosqlite:///x.db"
    assert args.no_color is True
    assert parse_args([]).database_url is None


def test_store_config_from_env_prefers_explicit_url():
    assert StoreConfig.from_env("sqlite+aiosqlite:///other.db").database_url == "sqlite+aiosqlite:///other.db"
    assert StoreConfig.from_env().database_url == "sqlite+aiosqlite:///:memory:"
