from __future__ import annotations

from dataclasses import dataclass

from .types import PlayerId, Suit


@dataclass(frozen=True)
class DrawCardAction:
    player: PlayerId


@dataclass(frozen=True)
class PlayCardAction:
    player: PlayerId
    card_id: str


@dataclass(frozen=True)
class SelectSuitAction:
    player: PlayerId
    suit: Suit


Action = DrawCardAction | PlayCardAction | SelectSuitAction
