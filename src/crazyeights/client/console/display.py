from __future__ import annotations

from typing import Callable, Sequence

from crazyeights.engine.types import Card, PlayerId


class ConsoleDisplay:
    """Prints engine notifications as plain text. Hides the computer's cards."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write

    def hand_updated(self, player: PlayerId, cards: Sequence[Card]) -> None:
        if player == "human":
            self._write("Your hand: " + " ".join(c.id for c in cards))
        else:
            self._write(f"Computer holds {len(cards)} card(s).")

    def pile_top_changed(self, card: Card) -> None:
        self._write(f"Pile: {card.id}")

    def prompt_suit_selection(self) -> None:
        self._write("Pick a suit: Clubs, Diamonds, Hearts or Spades (suit <name>).")

    def winner_announced(self, player: PlayerId) -> None:
        self._write("You win!" if player == "human" else "The computer wins.")

    def invalid_move_rejected(self, reason: str) -> None:
        self._write(f"Not allowed: {reason}")
