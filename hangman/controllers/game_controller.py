"""
Game Controller

HTTP endpoints for creating, playing and deleting hangman games.
Every response body carries a ``success`` flag; failures add an ``error``.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify, current_app
from ..config.game_settings import get_dictionary_statistics
from ..core import HangmanError
from ..models.game import GameMode
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import INVALID_PAYLOAD, as_payload, parse_new_game_options

game_bp = Blueprint('game', __name__)


def _fail(action, message, status, game_id=None, **details):
    """Log a failed request and build its JSON error response."""
    body = {'success': False, 'error': message}
    game_logger.log_server_response(request, action, False, body, game_id, **details)
    return jsonify(body), status


def _ok(action, body, game_id=None, **details):
    body = {'success': True, **body}
    game_logger.log_server_response(request, action, True, body, game_id, **details)
    return jsonify(body)


def _crash(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    return _fail(action, str(error), 500, game_id)


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Start a game; body may set game_mode, word_length and guess_limit."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _fail('new_game', 'Game service unavailable', 500)

        options, error = parse_new_game_options(
            request.get_json(silent=True),
            current_app.config.get('DEFAULT_GAME_MODE', GameMode.NORMAL.value)
        )
        if error:
            return _fail('new_game', error, 400)

        game_logger.log_user_action(request, 'new_game', **options)

        try:
            game_id = game_service.create_new_game(**options)
        except HangmanError as e:
            return _fail('new_game', str(e), 400)

        state = game_service.get_game_state(game_id)
        return _ok('new_game', {'game_id': game_id, 'state': asdict(state)}, game_id,
                   word_length=state.word_length, wrong_guess_limit=state.wrong_guess_limit)

    except Exception as e:
        return _crash('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Current pattern, guesses and budget of a game."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _fail('get_state', 'Game service unavailable', 500, game_id)

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _fail('get_state', 'Game not found', 404, game_id)

        return _ok('get_state', {'state': asdict(state)}, game_id,
                   guesses_left=state.guesses_left, game_over=state.game_over)

    except Exception as e:
        return _crash('get_state', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Guess one letter; the response reports how many times it occurs."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _fail('submit_guess', 'Game service unavailable', 500, game_id)

        data = as_payload(request.get_json(silent=True))
        if data is None:
            return _fail('submit_guess', INVALID_PAYLOAD, 400, game_id)
        if 'letter' not in data:
            return _fail('submit_guess', 'Letter is required', 400, game_id)

        letter = data['letter']
        game_logger.log_user_action(request, 'submit_guess', game_id, letter=letter)

        is_valid, error = game_service.is_valid_guess(game_id, letter)
        if not is_valid:
            status = 404 if error == 'Game not found' else 400
            return _fail('submit_guess', error, status, game_id, attempted_letter=letter)

        try:
            state = game_service.make_guess(game_id, letter)
        except HangmanError as e:
            # Another request on the same game got in between validation and record
            return _fail('submit_guess', str(e), 409, game_id)

        if state is None:
            return _fail('submit_guess', 'Game not found', 404, game_id)

        if state.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                game_mode=state.game_mode, guesses=state.guesses,
                guesses_left=state.guesses_left
            )

        return _ok('submit_guess', {'count': state.last_count, 'state': asdict(state)}, game_id,
                   letter=state.last_guess, count=state.last_count, game_over=state.game_over)

    except Exception as e:
        return _crash('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Forget a game."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _fail('delete_game', 'Game service unavailable', 500, game_id)

        game_logger.log_user_action(request, 'delete_game', game_id)

        if not game_service.delete_game(game_id):
            return _fail('delete_game', 'Game not found', 404, game_id)

        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
        return _ok('delete_game', {}, game_id)

    except Exception as e:
        return _crash('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Liveness plus session, dictionary and log counters."""
    try:
        game_service = get_game_service()
        game_logger.log_user_action(request, 'health_check')

        body = {
            'status': 'healthy',
            'active_games': game_service.active_games if game_service else 0,
            'dictionary': get_dictionary_statistics(game_service.dictionary if game_service else None),
            'log_stats': game_logger.get_log_stats()
        }
        game_logger.log_server_response(request, 'health_check', True, body)
        return jsonify(body)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({'status': 'error', 'error': str(e)}), 500
