"""
Hangman Game Server - Main Entry Point

This is the main entry point for the hangman game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

import threading
import time
from hangman import create_app
from hangman.config import Config, validate_dictionary_integrity
from hangman.services.game_service import initialize_game_service, get_game_service
from hangman.utils.game_logger import game_logger


def session_cleanup_worker(interval_seconds, ttl_seconds, idle_ttl_seconds):
    """
    Background worker that periodically removes finished games idle for
    ttl_seconds and abandoned games idle for idle_ttl_seconds.
    """
    game_logger.logger.info("Session cleanup worker started")
    while True:
        try:
            game_service = get_game_service()
            if game_service:
                game_service.cleanup_finished_games(ttl_seconds, idle_ttl_seconds)
        except Exception as e:
            game_logger.logger.error(f"Error in session cleanup worker: {e}")

        time.sleep(interval_seconds)


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_dictionary_integrity()
        game_service = initialize_game_service()
        print(f"✓ Game service initialized with {len(game_service.dictionary)} dictionary words")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        cleanup_thread = threading.Thread(
            target=session_cleanup_worker,
            args=(Config.CLEANUP_INTERVAL_SECONDS, Config.FINISHED_GAME_TTL_SECONDS,
                  Config.IDLE_GAME_TTL_SECONDS),
            daemon=True
        )
        cleanup_thread.start()
        print(f"✓ Session cleanup worker started - checking every {Config.CLEANUP_INTERVAL_SECONDS} seconds")

        game_logger.logger.info("Hangman Server Starting")

        print(f"\nStarting Hangman Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Hangman Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
