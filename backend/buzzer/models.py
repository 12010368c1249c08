from dataclasses import dataclass
from typing import Optional


@dataclass
class Player:
    name: str
    room: str
    connection_id: Optional[str] = None

    def to_dict(self):
        return {
            'name': self.name,
            'room': self.room,
            'id': self.connection_id,
        }


@dataclass
class Room:
    name: str
    blue_score: int = 0
    red_score: int = 0
    buzzed_by: Optional[Player] = None
    locked: bool = False

    def to_dict(self):
        # Clients treat an empty string as "nobody buzzed"
        return {
            'name': self.name,
            'blue': self.blue_score,
            'red': self.red_score,
            'buzzed': self.buzzed_by.to_dict() if self.buzzed_by else '',
            'locked': self.locked,
        }
