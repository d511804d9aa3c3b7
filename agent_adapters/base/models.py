"""Models public surface.

Re-exports the one-class-per-file DTOs in ``models_parts`` under a stable
import path.
"""

from .models_parts.chunk import Chunk
from .models_parts.fetch_response import FetchResponse
from .models_parts.message import Image, Message, Text
from .models_parts.role import Assistant, Role, User

__all__ = [
    "Chunk",
    "FetchResponse",
    "Message",
    "Text",
    "Image",
    "Role",
    "User",
    "Assistant",
]
