"""Add an existing moderator to a community's moderators and members."""
from __future__ import annotations

from forumadmin import formatting
from forumadmin.models import Role, Store
from forumadmin.prompts import Console
from forumadmin.services import records


async def assign_moderator(store: Store, console: Console) -> None:
    """Pick a moderator, pick a community, add the moderator to both of its sets.

    The moderator and community lists are snapshots; the chosen community is
    fetched again by name before the write, and the write itself checks that
    the community still exists.
    """
    console.heading(formatting.ASSIGN_HEADING)
    moderators = await records.list_users_by_role(store, Role.MODERATOR)
    if not moderators:
        console.warning(formatting.NO_MODERATORS)
        return

    mod_choice = await console.prompt_user_choice(
        formatting.MODERATOR_PROMPT,
        [m.label for m in moderators],
    )
    mod_index = int(mod_choice) - 1
    if not 0 <= mod_index < len(moderators):
        console.error(formatting.MODERATOR_NOT_FOUND)
        return
    moderator = moderators[mod_index]

    community_names = await records.list_community_names(store)
    if not community_names:
        console.warning(formatting.NO_COMMUNITIES)
        return

    community_choice = await console.prompt_user_choice(formatting.COMMUNITY_PROMPT, community_names)
    community_name = community_names[int(community_choice) - 1]
    community = await records.get_community_by_name(store, community_name)
    if community is None:
        console.warning(formatting.COMMUNITY_NOT_FOUND)
        return

    if moderator.id in community.moderator_ids:
        console.warning(
            formatting.already_moderator(moderator.name, community_name), moderator.name, community_name
        )
        return

    if not await records.add_moderator_to_community(store, community_name, moderator.id):
        console.warning(formatting.COMMUNITY_NOT_FOUND)
        return
    console.success(
        formatting.moderator_assigned(moderator.name, community_name), moderator.name, community_name
    )
