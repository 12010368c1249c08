import enum

from buzzer.models import Player, Room


class BuzzState(enum.Enum):
    OPEN = 'open'
    BUZZED = 'buzzed'
    LOCKED_EMPTY = 'locked_empty'


def state_of(room: Room) -> BuzzState:
    if room.buzzed_by is not None:
        return BuzzState.BUZZED
    if room.locked:
        return BuzzState.LOCKED_EMPTY
    return BuzzState.OPEN


def buzz(room: Room, player: Player) -> bool:
    """Grant the buzz to ``player`` if the room is open.

    First buzz wins: once a room is buzzed or locked every further buzz is
    ignored until the room is unlocked. Returns whether the buzz was granted.
    """
    if state_of(room) is not BuzzState.OPEN:
        return False
    room.buzzed_by = player
    room.locked = True
    return True


def lock(room: Room) -> None:
    room.locked = True


def unlock(room: Room) -> None:
    room.locked = False
    room.buzzed_by = None


def clear(room: Room) -> None:
    # Leaves the lock in place, so a cleared room still rejects buzzes
    room.buzzed_by = None
