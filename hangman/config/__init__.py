"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game constants and the dictionary (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DICTIONARY, GUESS_LIMIT, WORD_LENGTH,
    load_dictionary, validate_dictionary_integrity, get_dictionary_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game settings
    'DICTIONARY', 'GUESS_LIMIT', 'WORD_LENGTH',
    'load_dictionary', 'validate_dictionary_integrity', 'get_dictionary_statistics'
]
