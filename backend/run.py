import click

from buzzer import create_app, socketio

app = create_app()


@click.command()
@click.option('--host', default=None, help='Interface to bind, defaults to HOST.')
@click.option('--port', default=None, type=int, help='Port to listen on, defaults to PORT.')
@click.option('--debug/--no-debug', default=False)
def serve(host, port, debug):
    """Run the buzzer Socket.IO server."""
    host = host or app.config['HOST']
    port = port or app.config['PORT']
    app.logger.info(f"[serve] listening on {host}:{port}")
    # Use SocketIO server to enable websockets
    socketio.run(app, host=host, port=port, debug=debug)


if __name__ == '__main__':
    serve()
