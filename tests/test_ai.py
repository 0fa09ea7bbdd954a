from __future__ import annotations

import random

import pytest

from crazyeights.engine.actions import DrawCardAction, PlayCardAction
from crazyeights.engine.ai import strategy_for
from crazyeights.engine.piles import Pile
from crazyeights.engine.types import Card


class _Dice(random.Random):
    """Random source whose randint always returns the same face."""

    def __init__(self, face: int) -> None:
        super().__init__(0)
        self.face = face
        self.rolls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.rolls.append((a, b))
        return self.face


def _hand(*card_ids: str) -> list[Card]:
    return [Card.from_id(c) for c in card_ids]


def _pile(top: str) -> Pile:
    pile = Pile()
    pile.accept_a_card(Card.from_id(top))
    return pile


def test_medium_plays_first_playable_in_hand_order() -> None:
    hand = _hand("Kc", "7s", "8h", "2s")
    move = strategy_for("medium").choose_move(hand, _pile("2s"), random.Random(0))
    assert move == PlayCardAction(player="computer", card_id="7s")


def test_medium_draws_without_a_playable_card() -> None:
    hand = _hand("Kc", "3h")
    move = strategy_for("medium").choose_move(hand, _pile("2s"), random.Random(0))
    assert move == DrawCardAction(player="computer")


def test_medium_never_rolls() -> None:
    dice = _Dice(1)
    strategy_for("medium").choose_move(_hand("3s"), _pile("2s"), dice)
    assert dice.rolls == []


def test_very_easy_draws_on_a_roll_of_one_even_with_a_playable_card() -> None:
    dice = _Dice(1)
    move = strategy_for("very easy").choose_move(_hand("3s"), _pile("2s"), dice)
    assert move == DrawCardAction(player="computer")
    assert dice.rolls == [(1, 2)]

    move = strategy_for("very easy").choose_move(_hand("3s"), _pile("2s"), _Dice(2))
    assert move == PlayCardAction(player="computer", card_id="3s")


def test_easy_rolls_a_three_sided_die() -> None:
    dice = _Dice(1)
    assert strategy_for("easy").choose_move(_hand("3s"), _pile("2s"), dice) == DrawCardAction(
        player="computer"
    )
    assert dice.rolls == [(1, 3)]
    for face in (2, 3):
        move = strategy_for("easy").choose_move(_hand("3s"), _pile("2s"), _Dice(face))
        assert move == PlayCardAction(player="computer", card_id="3s")


def test_easy_skip_rate_is_about_one_third() -> None:
    rng = random.Random(99)
    strategy = strategy_for("easy")
    draws = sum(
        isinstance(strategy.choose_move(_hand("3s"), _pile("2s"), rng), DrawCardAction)
        for _ in range(3000)
    )
    assert 850 < draws < 1150


def test_hard_and_unknown_levels_are_rejected() -> None:
    with pytest.raises(ValueError):
        strategy_for("hard")
    with pytest.raises(ValueError):
        strategy_for("impossible")
