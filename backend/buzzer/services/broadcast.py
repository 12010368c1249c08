from flask import current_app

from .coordinator import Coordinator


class BroadcastGateway:
    """Pushes room state to every connection subscribed to a room channel.

    Delivery is best-effort: emits are fire-and-forget with no ack.
    """

    def __init__(self, socketio, coordinator: Coordinator, namespace: str = '/'):
        self.socketio = socketio
        self.coordinator = coordinator
        self.namespace = namespace

    def _emit(self, event, room_name, *args):
        self.socketio.emit(event, *args, to=room_name, namespace=self.namespace)

    def broadcast_room_state(self, room_name: str) -> None:
        room = self.coordinator.find_room(room_name)
        if room is None:
            current_app.logger.debug(f"[room-info-skip] room={room_name} not found")
            return
        self._emit('room info', room_name, room.to_dict())

    def broadcast_player_list(self, room_name: str) -> None:
        players = [p.to_dict() for p in self.coordinator.players_in_room(room_name)]
        self._emit('room data', room_name, players)

    def broadcast_buzzer_sound(self, room_name: str) -> None:
        self._emit('buzzer sound', room_name)

    def broadcast_room_removed(self, room_name: str) -> None:
        self._emit('redirect players', room_name)
        # Nobody stays subscribed to a dead room
        self.socketio.close_room(room_name, namespace=self.namespace)
