"""
Update Subreddit Use Case

Applies a partial update to a community owned by the caller.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.libs.result import Error, Result, Return

from .dtos import SubredditInfo, UpdateSubredditCommand

UPDATABLE_FIELDS = (
    "display_name",
    "description",
    "rules",
    "banner_image_url",
    "icon_image_url",
    "is_nsfw",
    "is_private",
    "flairs",
)
NON_NULLABLE_FIELDS = {"display_name", "rules", "flairs", "is_nsfw", "is_private"}


class UpdateSubredditUseCase:
    """
    Use case for updating a subreddit.

    Business Rules:
    - Only the creator may update
    - Name is immutable; display name must stay unique
    - Fields the caller did not send are left untouched
    - Changing rules stamps rules_updated_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: UpdateSubredditCommand) -> Result[SubredditInfo]:
        changes = {
            field: getattr(command, field)
            for field in UPDATABLE_FIELDS
            if field in command.model_fields_set
            and not (field in NON_NULLABLE_FIELDS and getattr(command, field) is None)
        }

        async with self.uow:
            subreddit = await self.uow.subreddits.get_by_id(command.subreddit_id)
            if subreddit is None:
                return Return.err(Error("SUBREDDIT_NOT_FOUND", "Subreddit not found"))

            if subreddit.created_by != command.user_id:
                return Return.err(Error("FORBIDDEN", "You are not authorized"))

            new_display_name = changes.get("display_name")
            if new_display_name and new_display_name != subreddit.display_name:
                existing = await self.uow.subreddits.get_by_display_name(new_display_name)
                if existing and existing.id != subreddit.id:
                    return Return.err(
                        Error(
                            "DISPLAY_NAME_TAKEN",
                            "Subreddit with this display name already exists",
                        )
                    )

            if "rules" in changes and changes["rules"] != subreddit.rules:
                subreddit.rules_updated_at = utcnow()

            for field, value in changes.items():
                setattr(subreddit, field, value)

            subreddit = await self.uow.subreddits.update(subreddit)
            await self.uow.commit()

            return Return.ok(SubredditInfo.model_validate(subreddit))
