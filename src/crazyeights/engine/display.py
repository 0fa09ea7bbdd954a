from __future__ import annotations

from typing import Protocol, Sequence

from .types import Card, PlayerId


class Display(Protocol):
    """Presentation side of a game. The engine only ever calls these."""

    def hand_updated(self, player: PlayerId, cards: Sequence[Card]) -> None: ...

    def pile_top_changed(self, card: Card) -> None: ...

    def prompt_suit_selection(self) -> None: ...

    def winner_announced(self, player: PlayerId) -> None: ...

    def invalid_move_rejected(self, reason: str) -> None: ...


class NullDisplay:
    def hand_updated(self, player: PlayerId, cards: Sequence[Card]) -> None:
        pass

    def pile_top_changed(self, card: Card) -> None:
        pass

    def prompt_suit_selection(self) -> None:
        pass

    def winner_announced(self, player: PlayerId) -> None:
        pass

    def invalid_move_rejected(self, reason: str) -> None:
        pass
