"""
Authentication Use Case DTOs (Data Transfer Objects)

Commands and responses for the password flows.
"""

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class ChangePasswordCommand(BaseModel):
    """Change password for an already authenticated user"""

    user_id: int
    old_password: str
    new_password: str


class ResetPasswordCommand(BaseModel):
    """Set a new password using a reset token from email"""

    token: str
    new_password: str


# ============================================================================
# Response DTOs
# ============================================================================


class MessageResponse(BaseModel):
    """Plain acknowledgement"""

    message: str
