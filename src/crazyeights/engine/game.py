from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Literal

from .actions import Action, DrawCardAction, PlayCardAction, SelectSuitAction
from .ai import strategy_for
from .display import Display, NullDisplay
from .errors import EngineError, InvalidMoveError
from .piles import Deck, Pile
from .player import Player
from .types import Card, Difficulty, PlayerId, Suit, parse_difficulty, parse_suit, standard_deck

Event = dict[str, object]
Phase = Literal["awaiting_human", "awaiting_suit_selection", "human_won", "computer_won"]

HAND_SIZE = 7


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


@dataclass
class GameEngine:
    """One game of Crazy Eights, human versus computer.

    The human drives the game through `draw_card`, `play_card` and
    `continue_game_after_suit_selection`. The computer answers inside the
    same call, so every entry point returns with the human to move again or
    with the game over. All randomness goes through `rng`.
    """

    deck: Deck
    pile: Pile
    human: Player
    computer: Player
    rng: random.Random
    seed: int
    difficulty: Difficulty = "medium"
    display: Display = field(default_factory=NullDisplay)
    phase: Phase = "awaiting_human"
    winner: PlayerId | None = None
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    def set_difficulty(self, difficulty: str) -> None:
        self.difficulty = parse_difficulty(difficulty)

    # -- human entry points -------------------------------------------------

    def draw_card(self) -> StepResult:
        """Draw one card for the human. Drawing always ends the human's turn."""
        mark = len(self.event_log)
        self.action_log.append(DrawCardAction(player="human"))
        error = self._turn_error()
        if error:
            return self._reject(error, mark)

        self._draw_one(self.human)
        self._reshuffle_if_empty()
        self.play_computer()
        return self._accept(mark)

    def play_card(self, card_id: str) -> StepResult:
        mark = len(self.event_log)
        self.action_log.append(PlayCardAction(player="human", card_id=card_id))
        error = self._turn_error()
        if error:
            return self._reject(error, mark)

        try:
            card = self.human.find(card_id)
        except InvalidMoveError as e:
            return self._reject(str(e), mark)
        if not self.pile.is_valid_to_play(card):
            return self._reject(f"{card.id} cannot be played on {self._describe_pile()}.", mark)

        self._play_onto_pile(self.human, card)
        self._reshuffle_if_empty()
        if card.is_wild:
            # Computer waits until the human names a suit.
            self.phase = "awaiting_suit_selection"
            self.display.prompt_suit_selection()
        elif self.human.is_hand_empty():
            self._declare_winner("human")
        else:
            self.play_computer()
        return self._accept(mark)

    def continue_game_after_suit_selection(self, suit: str) -> StepResult:
        mark = len(self.event_log)
        self.action_log.append(SelectSuitAction(player="human", suit=suit))  # type: ignore[arg-type]
        if self.winner is not None:
            return self._reject("Game already ended.", mark)
        if self.phase != "awaiting_suit_selection":
            return self._reject("No eight is waiting for a suit.", mark)
        try:
            chosen = parse_suit(suit)
        except ValueError as e:
            return self._reject(str(e), mark)

        self._announce_suit("human", chosen)
        if self.human.is_hand_empty():
            self._declare_winner("human")
        else:
            self.phase = "awaiting_human"
            self._reshuffle_if_empty()
            self.play_computer()
        return self._accept(mark)

    def step(self, action: Action) -> StepResult:
        """Apply a human action. Computer moves are never passed in."""
        if action.player != "human":
            mark = len(self.event_log)
            self.action_log.append(action)
            return self._reject("Not your turn.", mark)
        if isinstance(action, DrawCardAction):
            return self.draw_card()
        if isinstance(action, PlayCardAction):
            return self.play_card(action.card_id)
        if isinstance(action, SelectSuitAction):
            return self.continue_game_after_suit_selection(action.suit)
        mark = len(self.event_log)
        self.action_log.append(action)
        return self._reject("Unknown action.", mark)

    # -- computer -----------------------------------------------------------

    def play_computer(self) -> None:
        if self.winner is not None:
            return
        strategy = strategy_for(self.difficulty)
        move = strategy.choose_move(self.computer.get_hand_copy(), self.pile, self.rng)
        if isinstance(move, PlayCardAction):
            card = self.computer.find(move.card_id)
            self._play_onto_pile(self.computer, card)
            if card.is_wild:
                # The computer always announces the suit printed on its eight.
                self._announce_suit("computer", card.suit)
            if self.computer.is_hand_empty():
                self._declare_winner("computer")
        else:
            self._draw_one(self.computer)
        self._reshuffle_if_empty()
        if self.winner is None:
            self.phase = "awaiting_human"

    # -- deck maintenance ---------------------------------------------------

    def update_deck(self) -> None:
        """Recycle every pile card but the top one into the (empty) deck."""
        if len(self.deck):
            raise EngineError("Deck must be empty before it is rebuilt from the pile.")
        announced = self.pile.announced_suit
        top = self.pile.remove_top_card()
        recycled: list[Card] = []
        while len(self.pile):
            recycled.append(self.pile.remove_top_card())
        self.deck.replace(recycled)
        self.pile.accept_a_card(top)
        if announced is not None:
            self.pile.set_announced_suit(announced)
        self.event_log.append({"type": "DECK_RESHUFFLED", "deck_size": len(self.deck), "top": top.id})
        self.display.pile_top_changed(top)

    def _reshuffle_if_empty(self) -> None:
        if not len(self.deck) and len(self.pile) > 1:
            self.update_deck()

    # -- internals ----------------------------------------------------------

    def _turn_error(self) -> str | None:
        if self.winner is not None:
            return "Game already ended."
        if self.phase == "awaiting_suit_selection":
            return "Choose a suit for the eight first."
        return None

    def _describe_pile(self) -> str:
        top = self.pile.get_top_card()
        if top is None:
            return "an empty pile"
        if self.pile.announced_suit is not None:
            return f"{top.id} (suit is {self.pile.announced_suit})"
        return top.id

    def _draw_one(self, player: Player) -> None:
        self._reshuffle_if_empty()
        if not len(self.deck):
            # Every other card is in someone's hand; the draw is lost.
            self.event_log.append({"type": "DRAW_SKIPPED", "player": player.id})
            return
        card = self.deck.deal_a_card()
        player.add(card)
        self.event_log.append({"type": "CARD_DRAWN", "player": player.id, "card_id": card.id})
        self.display.hand_updated(player.id, player.get_hand_copy())

    def _play_onto_pile(self, player: Player, card: Card) -> None:
        player.remove(player.index_of(card))
        self.pile.accept_a_card(card)
        self.event_log.append({"type": "CARD_PLAYED", "player": player.id, "card_id": card.id})
        self.display.hand_updated(player.id, player.get_hand_copy())
        self.display.pile_top_changed(card)

    def _announce_suit(self, player: PlayerId, suit: Suit) -> None:
        self.pile.set_announced_suit(suit)
        self.event_log.append({"type": "SUIT_ANNOUNCED", "player": player, "suit": suit})

    def _declare_winner(self, player: PlayerId) -> None:
        self.winner = player
        self.phase = "human_won" if player == "human" else "computer_won"
        self.event_log.append({"type": "GAME_ENDED", "winner": player, "reason": "hand_empty"})
        self.display.winner_announced(player)

    def _reject(self, reason: str, mark: int) -> StepResult:
        self.event_log.append({"type": "INVALID_MOVE", "reason": reason})
        self.display.invalid_move_rejected(reason)
        return StepResult(ok=False, events=self.event_log[mark:], error=reason)

    def _accept(self, mark: int) -> StepResult:
        return StepResult(ok=True, events=self.event_log[mark:])


def new_game(
    seed: int | None = None,
    difficulty: str = "medium",
    display: Display | None = None,
    rng: random.Random | None = None,
) -> GameEngine:
    """Shuffle, turn up a non-eight, and deal seven cards to each player."""
    level = parse_difficulty(difficulty)
    if rng is not None and seed is None:
        raise ValueError("An injected rng needs the seed it was created from.")
    if seed is None:
        seed = random.SystemRandom().randrange(2**32)
    rng = rng or random.Random(seed)

    deck = Deck(standard_deck(), rng)
    deck.shuffle()
    while deck.is_top_card_an_eight():
        deck.shuffle()
    pile = Pile()
    pile.accept_a_card(deck.deal_a_card())

    human = Player(id="human")
    computer = Player(id="computer")
    for p in (human, computer):
        for _ in range(HAND_SIZE):
            p.add(deck.deal_a_card())

    engine = GameEngine(
        deck=deck,
        pile=pile,
        human=human,
        computer=computer,
        rng=rng,
        seed=seed,
        difficulty=level,
        display=display or NullDisplay(),
    )
    top = pile.get_top_card()
    assert top is not None
    engine.event_log.append({"type": "GAME_STARTED", "seed": seed, "difficulty": level, "top": top.id})
    engine.display.hand_updated("human", human.get_hand_copy())
    engine.display.hand_updated("computer", computer.get_hand_copy())
    engine.display.pile_top_changed(top)
    return engine


def replay(
    seed: int,
    actions: Iterable[Action],
    difficulty: str = "medium",
    display: Display | None = None,
) -> GameEngine:
    engine = new_game(seed=seed, difficulty=difficulty, display=display)
    for a in actions:
        engine.step(a)
        if engine.winner is not None:
            break
    return engine
