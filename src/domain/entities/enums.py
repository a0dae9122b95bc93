"""
Forum Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class PostType(str, Enum):
    """Kind of content a post carries"""

    text = "text"
    link = "link"
    image = "image"
