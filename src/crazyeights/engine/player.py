from __future__ import annotations

from dataclasses import dataclass, field

from .errors import UnknownCardError
from .types import Card, PlayerId


@dataclass
class Player:
    id: PlayerId
    hand: list[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        self.hand.append(card)

    def remove(self, index_or_card: int | Card) -> Card:
        if isinstance(index_or_card, Card):
            index = self.index_of(index_or_card)
            if index < 0:
                raise UnknownCardError(f"{index_or_card.id} is not in the {self.id} hand.")
            return self.hand.pop(index)
        return self.hand.pop(index_or_card)

    def find(self, card_id: str) -> Card:
        wanted = Card.from_id(card_id)
        if wanted not in self.hand:
            raise UnknownCardError(f"{wanted.id} is not in the {self.id} hand.")
        return wanted

    def index_of(self, card: Card) -> int:
        try:
            return self.hand.index(card)
        except ValueError:
            return -1

    def is_hand_empty(self) -> bool:
        return not self.hand

    def get_hand_copy(self) -> list[Card]:
        return list(self.hand)
