from typing import Callable, Dict, List, Optional

from buzzer.models import Player, Room
from . import arbitration


TEAMS = ('blue', 'red')


class RegistryError(Exception):
    """Base class for rejected registry operations."""


class RoomNotFoundError(RegistryError):
    pass


class DuplicateRoomError(RegistryError):
    pass


class DuplicatePlayerError(RegistryError):
    pass


class ConnectionBoundError(RegistryError):
    pass


class RoomRegistry:
    """Active rooms keyed by name, in creation order.

    Mutations on an unknown room are no-ops returning ``None`` since
    clients routinely race with room teardown.
    """

    def __init__(self):
        self._rooms: Dict[str, Room] = {}

    def __contains__(self, name):
        return name in self._rooms

    def __len__(self):
        return len(self._rooms)

    def create(self, name: str) -> Room:
        if name in self._rooms:
            raise DuplicateRoomError(f'Room {name!r} already exists')
        room = Room(name=name)
        self._rooms[name] = room
        return room

    def remove(self, name: str) -> Optional[Room]:
        return self._rooms.pop(name, None)

    def find(self, name: str) -> Optional[Room]:
        return self._rooms.get(name)

    def adjust_score(self, name: str, team: str, delta: int) -> Optional[Room]:
        room = self.find(name)
        if room is None:
            return None
        if team not in TEAMS:
            raise ValueError(f'Unknown team {team!r}')
        if delta not in (1, -1):
            raise ValueError(f'Score delta must be +1 or -1, got {delta!r}')
        # No lower bound, scores may go negative
        if team == 'blue':
            room.blue_score += delta
        else:
            room.red_score += delta
        return room

    def lock(self, name: str) -> Optional[Room]:
        room = self.find(name)
        if room is not None:
            arbitration.lock(room)
        return room

    def unlock(self, name: str) -> Optional[Room]:
        room = self.find(name)
        if room is not None:
            arbitration.unlock(room)
        return room

    def clear_buzz(self, name: str) -> Optional[Room]:
        room = self.find(name)
        if room is not None:
            arbitration.clear(room)
        return room


class PlayerRegistry:
    """Connected players in join order.

    Snapshots returned by ``players_in_room`` follow insertion order.
    """

    def __init__(self):
        self._players: List[Player] = []

    def __len__(self):
        return len(self._players)

    def __iter__(self):
        return iter(list(self._players))

    def join(self, player: Player) -> Player:
        self._players.append(player)
        return player

    def players_in_room(self, room_name: str) -> List[Player]:
        return [p for p in self._players if p.room == room_name]

    def find(self, name: str, room_name: str) -> Optional[Player]:
        for p in self._players:
            if p.name == name and p.room == room_name:
                return p
        return None

    def find_by_connection(self, connection_id: str) -> Optional[Player]:
        for p in self._players:
            if p.connection_id == connection_id:
                return p
        return None

    def leave(self, predicate: Callable[[Player], bool]) -> List[Player]:
        kept, removed = [], []
        for p in self._players:
            (removed if predicate(p) else kept).append(p)
        self._players = kept
        return removed

    def leave_by_connection(self, connection_id: str) -> Optional[Player]:
        player = self.find_by_connection(connection_id)
        if player is not None:
            self._players.remove(player)
        return player
