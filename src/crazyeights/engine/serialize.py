from __future__ import annotations


from .actions import Action, DrawCardAction, PlayCardAction, SelectSuitAction
from .game import GameEngine
from .player import Player
from .types import Card


def card_to_dict(c: Card) -> dict[str, object]:
    return {"id": c.id, "rank": c.rank, "suit": c.suit}


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, DrawCardAction):
        return {"type": "draw", "player": a.player}
    if isinstance(a, PlayCardAction):
        return {"type": "play", "player": a.player, "card_id": a.card_id}
    if isinstance(a, SelectSuitAction):
        return {"type": "select_suit", "player": a.player, "suit": a.suit}
    # should be unreachable
    return {"type": "unknown"}


def _player_to_dict(p: Player) -> dict[str, object]:
    return {"id": p.id, "hand": [c.id for c in p.hand]}


def snapshot(engine: GameEngine) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current game state."""
    top = engine.pile.get_top_card()
    return {
        "seed": engine.seed,
        "difficulty": engine.difficulty,
        "phase": engine.phase,
        "winner": engine.winner,
        "deck": [c.id for c in engine.deck.cards],
        "pile": [c.id for c in engine.pile.cards],
        "top": card_to_dict(top) if top is not None else None,
        "announced_suit": engine.pile.announced_suit,
        "players": [_player_to_dict(engine.human), _player_to_dict(engine.computer)],
        "action_log": [action_to_dict(a) for a in engine.action_log],
    }
