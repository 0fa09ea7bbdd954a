"""Headless rules engine for Crazy Eights.

IMPORTANT: This package must never import a display library.
"""

from .actions import DrawCardAction, PlayCardAction, SelectSuitAction
from .display import Display, NullDisplay
from .errors import EmptyDeckError, EngineError, InvalidMoveError, UnknownCardError
from .game import GameEngine, StepResult, new_game, replay
from .piles import Deck, Pile
from .player import Player
from .types import Card, Difficulty, PlayerId, Rank, Suit

__all__ = [
    "Card",
    "Deck",
    "Difficulty",
    "Display",
    "DrawCardAction",
    "EmptyDeckError",
    "EngineError",
    "GameEngine",
    "InvalidMoveError",
    "NullDisplay",
    "Pile",
    "PlayCardAction",
    "Player",
    "PlayerId",
    "Rank",
    "SelectSuitAction",
    "StepResult",
    "Suit",
    "UnknownCardError",
    "new_game",
    "replay",
]
