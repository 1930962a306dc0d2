"""
Game Logger Module for the Hangman Server

Writes one JSON object per line for every user action, server response,
game event and error. Entries go to a dated file under LOG_DIR; warnings and
errors are echoed to the console as well.
"""

import logging
import json
from collections import Counter
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config

# Event type prefix -> key reported by get_log_stats
_STAT_KEYS = {
    'USER_ACTION': 'user_actions',
    'SERVER_RESPONSE': 'server_responses',
    'GAME_EVENT': 'game_events',
    'ERROR': 'errors',
}


class GameLogger:
    """
    Structured logger shared by the HTTP and WebSocket layers.

    Args:
        log_dir: Directory for the dated log files
        level: Minimum level written to the file
    """

    def __init__(self, log_dir: str = Config.LOG_DIR, level: str = Config.LOG_LEVEL):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, level.upper(), logging.INFO)
        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now():%Y-%m-%d}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('hangman_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s', datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    @staticmethod
    def _identify(request) -> Dict[str, Optional[str]]:
        """Who sent the request; works for HTTP and Socket.IO requests."""
        return {
            'user_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'session_id': getattr(request, 'sid', None)
        }

    def _write(self, level: int, event_type: str, action: str,
               user: Dict[str, Optional[str]], details: Dict[str, Any]):
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user,
            'details': details
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Record what a client asked for.

        Args:
            request: Flask request object
            action: e.g. 'new_game', 'submit_guess', 'get_state'
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            'url': getattr(request, 'url', None),
            **kwargs
        }
        self._write(logging.INFO, 'USER_ACTION', action, self._identify(request), details)

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None, **kwargs):
        """Record what the server answered. Failures are logged at ERROR."""
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        if success:
            self._write(logging.INFO, 'SERVER_RESPONSE_SUCCESS', action, self._identify(request), details)
        else:
            self._write(logging.ERROR, 'SERVER_RESPONSE_ERROR', action, self._identify(request), details)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: Optional[str], **kwargs):
        """Record a game milestone such as 'game_won', 'game_lost' or 'game_deleted'."""
        user = {'user_ip': user_ip or 'unknown', 'session_id': None}
        self._write(logging.INFO, 'GAME_EVENT', event, user, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        """Record an unexpected exception raised while handling a request."""
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self._write(logging.ERROR, 'ERROR', action, self._identify(request), details)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Reduce a response to a summary that never contains the goal word."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        state = sanitized.get('state')
        if isinstance(state, dict):
            sanitized['state'] = {
                'game_mode': state.get('game_mode'),
                'word_length': state.get('word_length'),
                'guesses_left': state.get('guesses_left'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }
        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries per event type (used by the health check)."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        counts = Counter()
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    counts['total_entries'] += 1
                    for prefix, key in _STAT_KEYS.items():
                        if f'"event_type": "{prefix}' in line:
                            counts[key] += 1
                            break
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': counts['total_entries'],
            **{key: counts[key] for key in _STAT_KEYS.values()}
        }


# Global logger instance
game_logger = GameLogger()
