from typing import List, Optional

from buzzer.models import Player, Room
from . import arbitration
from .registry import (
    ConnectionBoundError,
    DuplicatePlayerError,
    PlayerRegistry,
    RoomNotFoundError,
    RoomRegistry,
)


class Coordinator:
    """Owns the room and player registries for one application.

    Every operation runs to completion without yielding, so each one is
    atomic with respect to the other socket handlers.
    """

    def __init__(self):
        self.rooms = RoomRegistry()
        self.players = PlayerRegistry()

    # ---- Rooms ----

    def create_room(self, name: str) -> Room:
        return self.rooms.create(name)

    def find_room(self, name: str) -> Optional[Room]:
        return self.rooms.find(name)

    def remove_room(self, name: str) -> List[Player]:
        """Delete a room and evict its members in the same step.

        Players still pointing at an unknown room are evicted too.
        """
        self.rooms.remove(name)
        return self.players.leave(lambda p: p.room == name)

    def adjust_score(self, name: str, team: str, delta: int) -> Optional[Room]:
        return self.rooms.adjust_score(name, team, delta)

    def lock(self, name: str) -> Optional[Room]:
        return self.rooms.lock(name)

    def unlock(self, name: str) -> Optional[Room]:
        return self.rooms.unlock(name)

    def clear(self, name: str) -> Optional[Room]:
        return self.rooms.clear_buzz(name)

    def buzz(self, room_name: str, name: str, connection_id: Optional[str] = None) -> bool:
        room = self.rooms.find(room_name)
        if room is None:
            return False
        # Hosts and stale clients may buzz without a registered player
        player = self.players.find(name, room_name) or Player(
            name=name, room=room_name, connection_id=connection_id)
        return arbitration.buzz(room, player)

    # ---- Players ----

    def join(self, name: str, room_name: str, connection_id: str) -> Player:
        if room_name not in self.rooms:
            raise RoomNotFoundError(f'Room {room_name!r} does not exist')
        if self.players.find(name, room_name) is not None:
            raise DuplicatePlayerError(f'Player {name!r} already in room {room_name!r}')
        if self.players.find_by_connection(connection_id) is not None:
            raise ConnectionBoundError('Connection has already joined a room')
        return self.players.join(Player(name=name, room=room_name, connection_id=connection_id))

    def exit(self, name: str, room_name: str) -> List[Player]:
        return self.players.leave(lambda p: p.name == name and p.room == room_name)

    def disconnect(self, connection_id: str) -> Optional[Player]:
        return self.players.leave_by_connection(connection_id)

    def players_in_room(self, room_name: str) -> List[Player]:
        return self.players.players_in_room(room_name)

    def name_taken(self, name: str) -> bool:
        return any(p.name == name for p in self.players)

    def reset(self) -> None:
        """Drop every room and player."""
        self.rooms = RoomRegistry()
        self.players = PlayerRegistry()
