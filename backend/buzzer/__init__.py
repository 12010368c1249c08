from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    if not value or value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One coordinator per app keeps room state out of module globals
    from buzzer.services import BroadcastGateway, Coordinator
    coordinator = Coordinator()
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    flask_app.extensions['buzzer'] = coordinator
    flask_app.extensions['buzzer_gateway'] = BroadcastGateway(socketio, coordinator, namespace)

    from buzzer.main import main
    flask_app.register_blueprint(main)

    from buzzer.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace)

    flask_app.logger.info(f"[startup] namespace={namespace} origins={allowed_origins}")
    return flask_app
