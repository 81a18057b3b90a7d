"""Broadcast schemas for API requests and responses."""

from .broadcasts import BroadcastCreateSchema
from .broadcasts import BroadcastListResponseSchema
from .broadcasts import BroadcastResponseSchema
from .broadcasts import BroadcastSchema
from .broadcasts import BroadcastUpdateSchema

__all__ = [
    "BroadcastCreateSchema",
    "BroadcastListResponseSchema",
    "BroadcastResponseSchema",
    "BroadcastSchema",
    "BroadcastUpdateSchema",
]
