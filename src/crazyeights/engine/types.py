from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

from .errors import UnknownCardError

Rank = Literal["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
Suit = Literal["Clubs", "Diamonds", "Hearts", "Spades"]
PlayerId = Literal["human", "computer"]
Difficulty = Literal["very easy", "easy", "medium"]

RANKS: tuple[Rank, ...] = get_args(Rank)
SUITS: tuple[Suit, ...] = get_args(Suit)
DIFFICULTIES: tuple[Difficulty, ...] = get_args(Difficulty)

WILD_RANK: Rank = "8"

_SUIT_BY_INITIAL: dict[str, Suit] = {s[0].lower(): s for s in SUITS}


@dataclass(frozen=True)
class Card:
    """A single playing card. Equality and hashing are by (rank, suit)."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if self.rank not in RANKS or self.suit not in SUITS:
            raise ValueError(f"Not a playing card: {self.rank!r} of {self.suit!r}")

    @property
    def id(self) -> str:
        return f"{self.rank}{self.suit[0].lower()}"

    @property
    def url(self) -> str:
        return f"images/{self.id}.png"

    @property
    def is_wild(self) -> bool:
        return self.rank == WILD_RANK

    def __str__(self) -> str:
        return self.id

    @staticmethod
    def from_id(card_id: str) -> "Card":
        text = card_id.strip()
        if len(text) < 2:
            raise UnknownCardError(f"Unknown card: {card_id!r}")
        rank = text[:-1].upper()
        suit = _SUIT_BY_INITIAL.get(text[-1].lower())
        if rank not in RANKS or suit is None:
            raise UnknownCardError(f"Unknown card: {card_id!r}")
        return Card(rank=rank, suit=suit)  # type: ignore[arg-type]


def standard_deck() -> list[Card]:
    """The 52 distinct cards, suit by suit, in rank order."""
    return [Card(rank=r, suit=s) for s in SUITS for r in RANKS]


def parse_suit(name: str) -> Suit:
    for s in SUITS:
        if s.lower() == name.strip().lower():
            return s
    raise ValueError(f"Unknown suit: {name!r}")


def parse_difficulty(name: str) -> Difficulty:
    level = name.strip().lower()
    if level == "hard":
        raise ValueError("Difficulty 'hard' is not implemented.")
    if level not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty: {name!r}")
    return level  # type: ignore[return-value]
