from flask import Blueprint, request, jsonify, current_app

main = Blueprint('main', __name__)

# Advisory checks a client runs before creating or joining over the socket.
# The socket handlers re-check everything since these can race.


def _json_object(value):
    return value if isinstance(value, dict) else {}


@main.route('/')
def index():
    return jsonify({'message': 'Buzzer server is running'})


@main.route('/create', methods=['POST'])
def check_create():
    data = _json_object(request.get_json(silent=True))
    room_name = data.get('room')
    if not isinstance(room_name, str) or not room_name:
        return jsonify({'error': 'Room name is required'}), 400

    if current_app.extensions['buzzer'].find_room(room_name) is not None:
        return jsonify({'error': 'Room already exists'}), 400
    return '', 200


@main.route('/join', methods=['POST'])
def check_join():
    data = _json_object(request.get_json(silent=True))
    player = _json_object(data.get('player'))
    name = player.get('name')
    room_name = player.get('room')
    if not all(isinstance(v, str) and v for v in (name, room_name)):
        return jsonify({'error': 'Player name and room are required'}), 400

    coordinator = current_app.extensions['buzzer']
    if coordinator.find_room(room_name) is None:
        return jsonify({'error': 'Room does not exist'}), 400
    if coordinator.name_taken(name):
        return jsonify({'error': 'Player already exists'}), 400
    return '', 200
