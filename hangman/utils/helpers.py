"""
Helper Functions

Request payload parsing shared by the HTTP and WebSocket layers.
"""

from typing import Any, Dict, Optional, Tuple

from ..models.game import GameMode

GAME_MODES = [mode.value for mode in GameMode]

INVALID_PAYLOAD = 'Request body must be a JSON object'
INVALID_GAME_MODE = 'Invalid game mode. Must be "normal" or "devious"'


def as_payload(data: Any) -> Optional[Dict[str, Any]]:
    """Returns the payload as a dict ({} when absent), or None if it is not an object."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        return None
    return data


def optional_int(data: Dict[str, Any], key: str) -> Tuple[Optional[int], Optional[str]]:
    """Returns (value, error) for an optional integer field."""
    value = data.get(key)
    if value is None:
        return None, None
    if isinstance(value, bool) or not isinstance(value, int):
        return None, f'{key} must be an integer'
    return value, None


def parse_new_game_options(data: Any, default_mode: str) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
    """
    Validate a new game request.

    Args:
        data: Decoded request body or event payload
        default_mode: Game mode used when the payload names none

    Returns:
        Tuple of (options, error). Options hold game_mode, word_length and
        guess_limit, ready for GameService.create_new_game.
    """
    payload = as_payload(data)
    if payload is None:
        return None, INVALID_PAYLOAD

    game_mode = payload.get('game_mode', default_mode)
    if game_mode not in GAME_MODES:
        return None, INVALID_GAME_MODE

    options = {'game_mode': game_mode}
    for key in ('word_length', 'guess_limit'):
        options[key], error = optional_int(payload, key)
        if error:
            return None, error
    return options, None
