"""
User Use Cases

All user-profile business logic.
"""

from .load_profile_use_case import LoadProfileUseCase

__all__ = [
    "LoadProfileUseCase",
]
