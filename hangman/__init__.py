"""
Hangman Game Server Application Package

The game core (normal and devious rules) lives in ``hangman.core``; the rest
of the package hosts it behind a Flask + Socket.IO server, one game per
session.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Build the Flask app and its Socket.IO server.

    The game service is created with default settings if nothing has
    initialized it yet.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of (Flask app, SocketIO server)
    """
    from .controllers.game_controller import game_bp
    from .services.game_service import get_game_service, initialize_game_service
    from .websocket.handlers import register_websocket_handlers

    app = Flask(__name__)
    app.config.from_object(config_class)

    if get_game_service() is None:
        initialize_game_service()

    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    app.register_blueprint(game_bp, url_prefix='/api')
    register_websocket_handlers(socketio)

    # Keep a handle for code that only has the app
    app.socketio = socketio

    return app, socketio
