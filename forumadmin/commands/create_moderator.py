"""Create a new user account with the moderator role."""
from __future__ import annotations

from forumadmin import formatting
from forumadmin.models import Role, Store
from forumadmin.prompts import Console
from forumadmin.services import records


async def create_moderator(store: Store, console: Console) -> None:
    console.heading(formatting.CREATE_HEADING)
    name = await console.prompt_for_input(formatting.NAME_PROMPT)
    email = await console.prompt_for_input(formatting.EMAIL_PROMPT)
    # Not masked: the prompt echoes the password like any other field.
    password = await console.prompt_for_input(formatting.PASSWORD_PROMPT)

    if await records.get_user_by_email(store, email):
        console.warning(formatting.email_taken(email), email)
        return

    await records.create_user(store, name, email, password, Role.MODERATOR)
    console.success(formatting.moderator_created(name), name)
