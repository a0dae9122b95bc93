"""
Password policy shared by register, change-password and reset-password.
"""

from src.libs.result import Error, Result, Return

MIN_PASSWORD_LENGTH = 8
# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


def validate_password(password: str) -> Result[None]:
    """
    Validate password length.

    Args:
        password: Password to validate

    Returns:
        Result with None if valid, or Error(INVALID_PASSWORD)
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        )

    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long",
            )
        )

    return Return.ok(None)
