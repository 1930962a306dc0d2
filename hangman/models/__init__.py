"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameMode, GameState

__all__ = ['GameMode', 'GameState']
