from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol, Sequence

from .actions import Action, DrawCardAction, PlayCardAction
from .piles import Pile
from .types import Card, Difficulty, parse_difficulty


class Strategy(Protocol):
    def choose_move(self, hand: Sequence[Card], pile: Pile, rng: random.Random) -> Action: ...


def _first_playable(hand: Sequence[Card], pile: Pile) -> Card | None:
    for card in hand:
        if pile.is_valid_to_play(card):
            return card
    return None


@dataclass(frozen=True)
class FirstFitStrategy:
    """Play the first valid card in hand order, otherwise draw.

    skip_odds:
      0 = always search the hand (medium)
      n = skip the search, and draw, when a 1..n die roll comes up 1
    """

    skip_odds: int = 0

    def choose_move(self, hand: Sequence[Card], pile: Pile, rng: random.Random) -> Action:
        # Lower levels draw now and then even when holding a playable card.
        if self.skip_odds and rng.randint(1, self.skip_odds) == 1:
            return DrawCardAction(player="computer")
        card = _first_playable(hand, pile)
        if card is None:
            return DrawCardAction(player="computer")
        return PlayCardAction(player="computer", card_id=card.id)


_STRATEGIES: dict[Difficulty, Strategy] = {
    "very easy": FirstFitStrategy(skip_odds=2),
    "easy": FirstFitStrategy(skip_odds=3),
    "medium": FirstFitStrategy(skip_odds=0),
}


def strategy_for(difficulty: str) -> Strategy:
    return _STRATEGIES[parse_difficulty(difficulty)]
