from __future__ import annotations

import random
from typing import Iterable

from .errors import EmptyDeckError
from .types import WILD_RANK, Card, Suit


class Deck:
    """Draw pile. The top of the deck is the end of the list."""

    def __init__(self, cards: Iterable[Card], rng: random.Random) -> None:
        self._cards: list[Card] = list(cards)
        self._rng = rng

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def deal_a_card(self) -> Card:
        if not self._cards:
            raise EmptyDeckError("Cannot deal from an empty deck.")
        return self._cards.pop()

    def is_top_card_an_eight(self) -> bool:
        return bool(self._cards) and self._cards[-1].rank == WILD_RANK

    def replace(self, cards: Iterable[Card]) -> None:
        self._cards = list(cards)
        self.shuffle()


class Pile:
    """Discard pile plus the suit announced for the eight on top, if any."""

    def __init__(self) -> None:
        self._cards: list[Card] = []
        self._announced_suit: Suit | None = None

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    @property
    def announced_suit(self) -> Suit | None:
        return self._announced_suit

    def accept_a_card(self, card: Card) -> None:
        self._cards.append(card)
        # a fresh eight waits for its suit to be announced
        self._announced_suit = None

    def get_top_card(self) -> Card | None:
        return self._cards[-1] if self._cards else None

    def remove_top_card(self) -> Card:
        card = self._cards.pop()
        self._announced_suit = None
        return card

    def set_announced_suit(self, suit: Suit) -> None:
        self._announced_suit = suit

    def is_valid_to_play(self, card: Card | None) -> bool:
        if card is None:
            return False
        if card.rank == WILD_RANK:
            return True
        top = self.get_top_card()
        if top is None:
            return True
        if top.rank == WILD_RANK and self._announced_suit is not None:
            return card.suit == self._announced_suit
        return card.suit == top.suit or card.rank == top.rank
