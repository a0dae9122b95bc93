"""
Create Subreddit Use Case

Creates a community owned by the calling user.
"""

import re

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Subreddit
from src.libs.result import Error, Result, Return

from .dtos import CreateSubredditCommand, SubredditInfo

NAME_PATTERN = re.compile(r"^[a-z0-9_]+$")
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 50


def normalize_subreddit_name(name: str) -> str:
    return name.strip().lower()


class CreateSubredditUseCase:
    """
    Use case for creating a subreddit.

    Business Rules:
    - Name is lowercased; only letters, digits and underscores, 3-50 chars
    - Name and display name must both be unused
    - Creator counts as the first member
    - Rules and flairs default to empty lists
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateSubredditCommand) -> Result[SubredditInfo]:
        name = normalize_subreddit_name(command.name)

        if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
            return Return.err(
                Error(
                    "INVALID_SUBREDDIT_NAME",
                    f"Name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters",
                )
            )

        if not NAME_PATTERN.match(name):
            return Return.err(
                Error(
                    "INVALID_SUBREDDIT_NAME",
                    "Name can only contain lowercase letters, numbers, and underscores",
                )
            )

        async with self.uow:
            if await self.uow.subreddits.get_by_name(name):
                return Return.err(
                    Error("SUBREDDIT_NAME_TAKEN", "Subreddit name already exists")
                )

            if await self.uow.subreddits.get_by_display_name(command.display_name):
                return Return.err(
                    Error(
                        "DISPLAY_NAME_TAKEN",
                        "Subreddit with this display name already exists",
                    )
                )

            subreddit = Subreddit(
                name=name,
                display_name=command.display_name,
                description=command.description,
                rules=command.rules or [],
                flairs=[],
                is_nsfw=command.is_nsfw,
                is_private=command.is_private,
                created_by=command.created_by,
                members_count=1,
                active_users=0,
            )
            subreddit = await self.uow.subreddits.create(subreddit)

            await self.uow.commit()

            return Return.ok(SubredditInfo.model_validate(subreddit))
