"""Room domain services: registries, buzz arbitration and broadcasting.

Socket handlers and HTTP routes go through the ``Coordinator``; nothing here
knows about request contexts except the broadcast gateway.
"""

from .broadcast import BroadcastGateway
from .coordinator import Coordinator
from .registry import (
    ConnectionBoundError,
    DuplicatePlayerError,
    DuplicateRoomError,
    RegistryError,
    RoomNotFoundError,
)

__all__ = [
    'BroadcastGateway',
    'Coordinator',
    'ConnectionBoundError',
    'DuplicatePlayerError',
    'DuplicateRoomError',
    'RegistryError',
    'RoomNotFoundError',
]
