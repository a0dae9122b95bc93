import logging

from src.app.services.password_hasher import HashingError, PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.libs.result import Error, Result, Return

from .password_policy import validate_password
from .register_dto import AuthResponse, RegisterCommand, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[AuthResponse] (user without hash + session token)

    Business Logic:
    1. Enforce password policy
    2. Reject if email or username already exists
    3. Hash password with bcrypt
    4. Create User
    5. Commit, then issue session token
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenService):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with email, username, password

        Returns:
            Result[AuthResponse], or Error(INVALID_PASSWORD / EMAIL_ALREADY_EXISTS /
            USERNAME_ALREADY_EXISTS / HASHING_FAILED)
        """
        password_validation = validate_password(command.password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "User already exists")
                )

            existing_user = await self.uow.users.get_by_username(command.username)
            if existing_user:
                return Return.err(
                    Error("USERNAME_ALREADY_EXISTS", "Username is already taken")
                )

            try:
                password_hash = self.hasher.hash(command.password)
            except HashingError as exc:
                logger.error(f"Password hashing failed during registration: {exc}")
                return Return.err(Error("HASHING_FAILED", "Failed to hash password"))

            user = User(
                email=command.email,
                username=command.username,
                password_hash=password_hash,
            )
            user = await self.uow.users.create(user)

            await self.uow.commit()

            token = self.tokens.issue(user.id, user.username, user.email)

            return Return.ok(AuthResponse(user=UserInfo.from_user(user), token=token))
