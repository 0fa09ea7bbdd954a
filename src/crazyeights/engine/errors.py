from __future__ import annotations


class EngineError(RuntimeError):
    pass


class EmptyDeckError(EngineError):
    """A card was dealt from an empty deck."""


class InvalidMoveError(EngineError):
    pass


class UnknownCardError(InvalidMoveError):
    """The identifier does not name a card (in the hand, or at all)."""
