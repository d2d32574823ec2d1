"""Command-line entry point: connect, run one operation, exit."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import config
from forumadmin import formatting
from forumadmin.commands.assign_moderator import assign_moderator
from forumadmin.commands.create_moderator import create_moderator
from forumadmin.models import Store, StoreConnectionError, connect
from forumadmin.prompts import Console, TerminalReader

logger = logging.getLogger("forumadmin")

OPERATIONS = {
    "1": create_moderator,
    "2": assign_moderator,
}


async def run(store: Store, console: Console) -> int:
    """Ask for one operation and run it. Returns the process exit status."""
    try:
        choice = await console.prompt_user_choice(formatting.MENU_PROMPT, formatting.MENU_OPTIONS)
        operation = OPERATIONS.get(choice)
        if operation is None:
            console.error(formatting.INVALID_CHOICE)
            return 0
        await operation(store, console)
    except Exception as e:
        logger.debug("Operation failed", exc_info=True)
        console.error(formatting.fatal_error(str(e)))
        return 1
    return 0


async def _main(store_config: config.StoreConfig, console: Console) -> int:
    try:
        store = await connect(store_config)
    except StoreConnectionError as e:
        console.error(formatting.connection_failed(str(e)))
        return 1
    console.success(formatting.CONNECTED)
    try:
        return await run(store, console)
    finally:
        await store.dispose()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create moderators or add them to communities",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override database URL (defaults to DATABASE_URL)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print plain text without terminal colors.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the admin tool. Returns 0 on success or no-op, 1 on failure."""
    args = parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL)
    color = not (args.no_color or config.NO_COLOR) and sys.stdout.isatty()
    console = Console(TerminalReader(), color=color)
    store_config = config.StoreConfig.from_env(args.database_url)
    try:
        return asyncio.run(_main(store_config, console))
    except KeyboardInterrupt:
        return 1


if __name__ == "__main__":
    sys.exit(main())
