from flask import current_app, request
from flask_socketio import emit, join_room, leave_room
from typing import Optional, Tuple

from buzzer import socketio
from buzzer.services import BroadcastGateway, Coordinator, RegistryError


def _coordinator() -> Coordinator:
    return current_app.extensions['buzzer']


def _gateway() -> BroadcastGateway:
    return current_app.extensions['buzzer_gateway']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _room_name(data) -> Optional[str]:
    if isinstance(data, str) and data:
        return data
    emit('error', {'message': 'room name is required'})
    return None


def _player_payload(data) -> Tuple[Optional[str], Optional[str]]:
    data = data if isinstance(data, dict) else {}
    name, room_name = data.get('name'), data.get('room')
    if not (isinstance(name, str) and name and isinstance(room_name, str) and room_name):
        emit('error', {'message': 'name and room are required'})
        return None, None
    return name, room_name


def _reject(tag: str, exc: RegistryError) -> None:
    current_app.logger.info(f"[{tag}-rejected] sid={_get_sid()} reason={exc}")
    emit('error', {'message': str(exc)})


def handle_connect(auth=None):
    current_app.logger.debug(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    player = _coordinator().disconnect(_get_sid())
    if player is None:
        return
    current_app.logger.info(f"{player.name} has disconnected")
    _gateway().broadcast_player_list(player.room)


def handle_player_joined(data):
    name, room_name = _player_payload(data)
    if not name:
        return
    try:
        _coordinator().join(name, room_name, _get_sid())
    except RegistryError as exc:
        _reject('join', exc)
        return
    join_room(room_name)
    current_app.logger.info(f"[join] room={room_name} player={name}")
    gateway = _gateway()
    gateway.broadcast_player_list(room_name)
    gateway.broadcast_room_state(room_name)


def handle_create_room(data):
    room_name = _room_name(data)
    if not room_name:
        return
    try:
        _coordinator().create_room(room_name)
    except RegistryError as exc:
        _reject('create', exc)
        return
    current_app.logger.info(f"[create] room={room_name}")


def handle_host_joined(data):
    room_name = _room_name(data)
    if not room_name:
        return
    join_room(room_name)
    _gateway().broadcast_room_state(room_name)


def handle_exit_room(data):
    name, room_name = _player_payload(data)
    if not name:
        return
    removed = _coordinator().exit(name, room_name)
    for player in removed:
        leave_room(room_name, sid=player.connection_id)
    current_app.logger.info(f"[exit] room={room_name} player={name} removed={len(removed)}")
    _gateway().broadcast_player_list(room_name)


def handle_remove_room(data):
    room_name = _room_name(data)
    if not room_name:
        return
    evicted = _coordinator().remove_room(room_name)
    current_app.logger.info(f"[remove] room={room_name} evicted={len(evicted)}")
    _gateway().broadcast_room_removed(room_name)


def handle_buzz(data):
    name, room_name = _player_payload(data)
    if not name:
        return
    if not _coordinator().buzz(room_name, name, _get_sid()):
        # Late buzzes are dropped without telling the buzzer
        return
    current_app.logger.info(f"[buzz] room={room_name} player={name}")
    gateway = _gateway()
    gateway.broadcast_buzzer_sound(room_name)
    gateway.broadcast_room_state(room_name)


def _room_transition(action):
    def handler(data):
        room_name = _room_name(data)
        if not room_name:
            return
        if getattr(_coordinator(), action)(room_name) is None:
            current_app.logger.debug(f"[{action}-skip] room={room_name} not found")
            return
        _gateway().broadcast_room_state(room_name)
    handler.__name__ = f'handle_{action}'
    return handler


def _score_handler(team: str, delta: int):
    def handler(data):
        room_name = _room_name(data)
        if not room_name:
            return
        if _coordinator().adjust_score(room_name, team, delta) is None:
            current_app.logger.debug(f"[score-skip] room={room_name} not found")
            return
        _gateway().broadcast_room_state(room_name)
    handler.__name__ = f"handle_{'add' if delta > 0 else 'minus'}_{team}"
    return handler


handle_lock = _room_transition('lock')
handle_unlock = _room_transition('unlock')
handle_clear = _room_transition('clear')
handle_add_blue = _score_handler('blue', 1)
handle_minus_blue = _score_handler('blue', -1)
handle_add_red = _score_handler('red', 1)
handle_minus_red = _score_handler('red', -1)


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``.

    Event names match what the existing web clients emit, spaces included.
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('player joined', handle_player_joined, namespace=namespace)
    socketio.on_event('create room', handle_create_room, namespace=namespace)
    socketio.on_event('host joined', handle_host_joined, namespace=namespace)
    socketio.on_event('exit room', handle_exit_room, namespace=namespace)
    socketio.on_event('remove room', handle_remove_room, namespace=namespace)
    socketio.on_event('buzz', handle_buzz, namespace=namespace)
    socketio.on_event('lock', handle_lock, namespace=namespace)
    socketio.on_event('unlock', handle_unlock, namespace=namespace)
    socketio.on_event('clear', handle_clear, namespace=namespace)
    socketio.on_event('add blue', handle_add_blue, namespace=namespace)
    socketio.on_event('minus blue', handle_minus_blue, namespace=namespace)
    socketio.on_event('add red', handle_add_red, namespace=namespace)
    socketio.on_event('minus red', handle_minus_red, namespace=namespace)
