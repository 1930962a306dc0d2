import os
import random
import tempfile
from pathlib import Path

import pytest

# Keep test logs out of the working tree; must happen before hangman is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="hangman-logs-"))

from hangman import create_app  # noqa: E402
from hangman.config import TestingConfig, load_dictionary  # noqa: E402
from hangman.services.game_service import initialize_game_service  # noqa: E402

DATA_DIR = Path(__file__).resolve().parent / "data"
GUESS_LIMIT = 7
GOAL_LENGTH = 5


@pytest.fixture
def short_dictionary():
    return load_dictionary(str(DATA_DIR / "short_dictionary.txt"))


@pytest.fixture
def game_service():
    """Global service whose only 5-letter word is 'hello'."""
    return initialize_game_service(
        dictionary=["hello", "cat", "banana"],
        word_length=GOAL_LENGTH,
        guess_limit=GUESS_LIMIT,
        rng=random.Random(1),
    )


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
