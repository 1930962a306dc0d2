"""
Game Service

Manages hangman game sessions for the normal and devious rules.
"""

import random
import threading
import time
import uuid
from typing import Dict, List, Optional, Sequence, Tuple

from ..config.game_settings import DICTIONARY, GUESS_LIMIT, WORD_LENGTH
from ..core import HangmanGame, get_strategy
from ..models.game import GameMode, GameState
from ..utils.game_logger import game_logger


class GameSession:
    """
    One hosted game plus the bookkeeping the server needs around it.

    The lock guards the game as a whole: the candidate set, guessed letters
    and remaining guesses change together inside record().
    """

    def __init__(self, game_id: str, game_mode: GameMode, game: HangmanGame):
        self.game_id = game_id
        self.game_mode = game_mode
        self.game = game
        self.lock = threading.Lock()
        self.last_guess: Optional[str] = None
        self.last_count: Optional[int] = None
        self.last_activity = time.time()

    def is_over(self) -> bool:
        return self.game.is_solved() or self.game.guesses_left() <= 0


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Rule selection (normal or devious) per game
    - Guess validation and recording
    - Game state snapshots without exposing the goal word to clients
    """

    def __init__(self,
                 dictionary: Optional[Sequence[str]] = None,
                 word_length: int = WORD_LENGTH,
                 guess_limit: int = GUESS_LIMIT,
                 rng: Optional[random.Random] = None):
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id
        self.dictionary = list(DICTIONARY if dictionary is None else dictionary)
        self.word_length = word_length
        self.guess_limit = guess_limit
        self.rng = rng or random.Random()
        self._lock = threading.Lock()

    def create_new_game(self,
                        game_mode: str = GameMode.NORMAL.value,
                        word_length: Optional[int] = None,
                        guess_limit: Optional[int] = None) -> str:
        """
        Creates a new game session.

        Args:
            game_mode: "normal" or "devious"
            word_length: Goal word length, service default when omitted
            guess_limit: Wrong guesses allowed, service default when omitted

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If the game mode is unknown
            InvalidConfigurationError: If no game can be built from the arguments
        """
        mode = GameMode(game_mode)
        game = HangmanGame(
            self.dictionary,
            self.word_length if word_length is None else word_length,
            self.guess_limit if guess_limit is None else guess_limit,
            get_strategy(mode, self.rng)
        )
        # Establish the candidate set now rather than on the first guess
        game.words()

        game_id = str(uuid.uuid4())
        with self._lock:
            self.games[game_id] = GameSession(game_id, mode, game)
        return game_id

    def _get_session(self, game_id: str) -> Optional[GameSession]:
        with self._lock:
            return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session = self._get_session(game_id)
        if session is None:
            return None

        with session.lock:
            return self._snapshot(session)

    def _snapshot(self, session: GameSession) -> GameState:
        game = session.game
        game_over = session.is_over()

        return GameState(
            game_id=session.game_id,
            game_mode=session.game_mode.value,
            word_length=game.length,
            pattern=game.pattern(),
            guesses=list(game.guesses()),
            guesses_left=game.guesses_left(),
            wrong_guess_limit=game.wrong_guess_limit(),
            game_over=game_over,
            won=game.is_solved(),
            answer=game.representative_word() if game_over else None,
            last_guess=session.last_guess,
            last_count=session.last_count
        )

    def is_valid_guess(self, game_id: str, letter) -> Tuple[bool, str]:
        """
        Validates a letter guess for a specific game session.

        Args:
            game_id: Unique game identifier
            letter: The letter to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        session = self._get_session(game_id)
        if session is None:
            return False, "Game not found"

        if not letter or not isinstance(letter, str):
            return False, "Guess must be a valid string"

        normalized = letter.strip().lower()
        if len(normalized) != 1 or not normalized.isalpha():
            return False, "Guess must be a single letter"

        with session.lock:
            if session.is_over():
                return False, "Game is already over"

            if normalized in session.game.guesses():
                return False, f"The letter {normalized} has already been guessed"

        return True, ""

    def make_guess(self, game_id: str, letter: str) -> Optional[GameState]:
        """
        Records a letter guess and returns the updated state.

        Args:
            game_id: Unique game identifier
            letter: A single letter

        Returns:
            Updated GameState or None if the game does not exist

        Raises:
            HangmanError: If the game rejects the guess
        """
        session = self._get_session(game_id)
        if session is None:
            return None

        normalized = letter.strip().lower()
        with session.lock:
            count = session.game.record(normalized)
            session.last_guess = normalized
            session.last_count = count
            session.last_activity = time.time()
            return self._snapshot(session)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False

    def cleanup_finished_games(self, ttl_seconds: float,
                               idle_ttl_seconds: Optional[float] = None) -> List[str]:
        """
        Removes games nobody has touched for a while.

        Args:
            ttl_seconds: Idle time after which a finished game is removed
            idle_ttl_seconds: Idle time after which an unfinished game is
                removed as abandoned; unfinished games are kept when None

        Returns:
            List of removed game IDs
        """
        now = time.time()
        with self._lock:
            expired = []
            for game_id, session in self.games.items():
                with session.lock:
                    idle = now - session.last_activity
                    over = session.is_over()
                if over and idle >= ttl_seconds:
                    expired.append(game_id)
                elif not over and idle_ttl_seconds is not None and idle >= idle_ttl_seconds:
                    expired.append(game_id)
            for game_id in expired:
                del self.games[game_id]

        if expired:
            game_logger.logger.info(f"Session cleanup: removed {len(expired)} expired game(s)")
        return expired

    @property
    def active_games(self) -> int:
        with self._lock:
            return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(**kwargs)
    return _game_service
