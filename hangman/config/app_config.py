"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    DICTIONARY_PATH = os.getenv('DICTIONARY_PATH')
    DEFAULT_GAME_MODE = os.getenv('DEFAULT_GAME_MODE', 'normal')
    DEFAULT_WORD_LENGTH = int(os.getenv('DEFAULT_WORD_LENGTH', 5))
    GUESS_LIMIT = int(os.getenv('GUESS_LIMIT', 7))

    # Session Cleanup Settings
    FINISHED_GAME_TTL_SECONDS = int(os.getenv('FINISHED_GAME_TTL_SECONDS', 600))
    IDLE_GAME_TTL_SECONDS = int(os.getenv('IDLE_GAME_TTL_SECONDS', 3600))
    CLEANUP_INTERVAL_SECONDS = int(os.getenv('CLEANUP_INTERVAL_SECONDS', 60))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
