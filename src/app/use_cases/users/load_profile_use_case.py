"""
Load Profile Use Case

Loads the current user's profile from the identity in the session token.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.register_dto import UserInfo
from src.libs.result import Error, Result, Return


class LoadProfileUseCase:
    """
    Use case for loading the calling user's profile.

    Business Rules:
    - Token identity provides user_id
    - User may have been deleted since the token was issued -> USER_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(UserInfo.from_user(user))
