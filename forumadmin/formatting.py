"""Plain-text messages and terminal colors.

Message builders return uncolored strings. Color is applied by colorize()
when the console writes to the terminal: one style per line, with names and
other values picked out in white.
"""
from __future__ import annotations

import enum
import re
from collections.abc import Sequence


class Level(enum.Enum):
    HEADING = "heading"
    PROMPT = "prompt"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


_RESET = "\033[0m"
_HIGHLIGHT = "\033[1;37m"  # bold white
_STYLES = {
    Level.HEADING: "\033[1;35m",  # bold magenta
    Level.PROMPT: "\033[1;36m",  # bold cyan
    Level.INFO: "\033[1m",
    Level.SUCCESS: "\033[1;32m",  # bold green
    Level.WARNING: "\033[1;33m",  # bold yellow
    Level.ERROR: "\033[1;31m",  # bold red
}


def colorize(text: str, level: Level, highlights: Sequence[str] = ()) -> str:
    """Wrap text in the ANSI style for level, with each highlight in white."""
    style = _STYLES[level]
    values = sorted({h for h in highlights if h}, key=len, reverse=True)
    if values:
        pattern = re.compile("|".join(re.escape(v) for v in values))
        text = pattern.sub(lambda m: f"{_HIGHLIGHT}{m.group(0)}{_RESET}{style}", text)
    return f"{style}{text}{_RESET}"


def numbered_options(options: Sequence[str]) -> str:
    """'1. first\\n2. second' for a 1-based menu."""
    return "\n".join(f"{i}. {label}" for i, label in enumerate(options, start=1))


def choice_prompt(message: str, options: Sequence[str]) -> str:
    return f"{message}\n{numbered_options(options)}\n> "


# Orchestrator
MENU_PROMPT = "What would you like to do? (Enter the number)"
MENU_OPTIONS = ("Create a new moderator", "Add an existing moderator to a community")
CONNECTED = "✅ Connected to database"
INVALID_CHOICE = "Invalid choice."


def connection_failed(reason: str) -> str:
    return f"Error connecting to database: {reason}"


def fatal_error(reason: str) -> str:
    return f"Error: {reason}"


# Create moderator
CREATE_HEADING = "\n--- Create New Moderator ---"
NAME_PROMPT = "Enter moderator's name:"
EMAIL_PROMPT = "Enter moderator's email:"
PASSWORD_PROMPT = "Enter moderator's password:"


def email_taken(email: str) -> str:
    return f"⚠️ Warning: A user with email {email} already exists."


def moderator_created(name: str) -> str:
    return f"✅ Success! Moderator {name} created successfully."


# Assign moderator
ASSIGN_HEADING = "\n--- Add Moderator to Community ---"
NO_MODERATORS = "No moderators found in the database."
MODERATOR_PROMPT = "Which moderator would you like to add? (Enter the number)"
MODERATOR_NOT_FOUND = "Error! Moderator not found."
NO_COMMUNITIES = "No communities found."
COMMUNITY_PROMPT = "Which community would you like to add the moderator to? (Enter the number)"
COMMUNITY_NOT_FOUND = "⚠️ Warning: Community does not exist."


def already_moderator(name: str, community: str) -> str:
    return f"⚠️ Warning: {name} is already a moderator of the {community} community!"


def moderator_assigned(name: str, community: str) -> str:
    return f"✅ Done! {name} has been added as a moderator and member of the {community} community."
