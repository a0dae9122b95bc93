"""
Login Use Case

Handles user authentication and returns a session token.
"""

from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .register_dto import AuthResponse, UserInfo

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Login or password is incorrect")


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password produce the same error
    - Constant-time password comparison; a dummy check runs for unknown emails
      so timing does not reveal registered addresses
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenService):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse, or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                self.hasher.verify_dummy(password)
                return Return.err(INVALID_CREDENTIALS)

            if not self.hasher.verify(password, user.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            token = self.tokens.issue(user.id, user.username, user.email)

            return Return.ok(AuthResponse(user=UserInfo.from_user(user), token=token))
