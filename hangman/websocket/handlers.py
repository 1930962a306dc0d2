"""
WebSocket Event Handlers

Lets a client play a game over a socket. Every game has its own room
(``game_<id>``) so all connections following the same game see each update.
"""

from dataclasses import asdict
from flask import current_app, request
from flask_socketio import emit, join_room, leave_room
from ..core import HangmanError
from ..models.game import GameMode
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import INVALID_PAYLOAD, as_payload, parse_new_game_options


def _room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game and join its room."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        options, error = parse_new_game_options(
            data, current_app.config.get('DEFAULT_GAME_MODE', GameMode.NORMAL.value)
        )
        if error:
            emit('error', {'error': error})
            return

        try:
            game_id = game_service.create_new_game(**options)
        except HangmanError as e:
            game_logger.log_error(request, e, 'ws_new_game')
            emit('error', {'error': str(e)})
            return

        join_room(_room(game_id))
        state = game_service.get_game_state(game_id)
        game_logger.logger.info(f"WebSocket: created {state.game_mode} game {game_id}")

        emit('game_created', {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        })

    @socketio.on('join_game')
    def handle_join_game(data=None):
        """Join a game room for real-time updates."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = as_payload(data)
        if data is None:
            emit('error', {'error': INVALID_PAYLOAD})
            return

        game_id = data.get('game_id')
        if not game_id or not isinstance(game_id, str):
            emit('error', {'error': 'Game ID is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('game_state_update', {
            'success': True,
            'state': asdict(state)
        })

    @socketio.on('leave_game')
    def handle_leave_game(data=None):
        """Leave a game room."""
        data = as_payload(data)
        if data is None:
            emit('error', {'error': INVALID_PAYLOAD})
            return

        game_id = data.get('game_id')
        if not game_id or not isinstance(game_id, str):
            emit('error', {'error': 'Game ID is required'})
            return

        leave_room(_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")

    @socketio.on('submit_guess')
    def handle_submit_guess(data=None):
        """Submit a letter guess via WebSocket."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = as_payload(data)
        if data is None:
            emit('error', {'error': INVALID_PAYLOAD})
            return

        game_id = data.get('game_id')
        letter = data.get('letter')

        if not isinstance(game_id, str) or not game_id or not letter:
            emit('error', {'error': 'Game ID and letter required'})
            return

        is_valid, error = game_service.is_valid_guess(game_id, letter)
        if not is_valid:
            emit('guess_result', {'success': False, 'error': error})
            return

        try:
            state = game_service.make_guess(game_id, letter)
        except HangmanError as e:
            emit('guess_result', {'success': False, 'error': str(e)})
            return

        if state is None:
            emit('guess_result', {'success': False, 'error': 'Game not found'})
            return

        emit('guess_result', {'success': True, 'count': state.last_count})
        broadcast_game_state_update(game_id, socketio)

        if state.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                game_mode=state.game_mode, guesses=state.guesses
            )


def broadcast_game_state_update(game_id, socketio):
    """Broadcast game state update to every connection in the game room."""
    game_service = get_game_service()
    if not game_service:
        return

    state = game_service.get_game_state(game_id)
    if state is None:
        return

    socketio.emit('game_state_update', {
        'success': True,
        'state': asdict(state)
    }, to=_room(game_id))
