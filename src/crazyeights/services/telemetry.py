from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping, Sequence

from crazyeights.engine.display import Display
from crazyeights.engine.types import Card, PlayerId


@dataclass
class TelemetryService:
    """Append-only JSONL log of what happened during play."""

    path: Path

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        rec = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "type": event_type,
            "payload": dict(payload),
        }
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")

    def read(self) -> list[dict[str, object]]:
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]


class TelemetryDisplay:
    """Display wrapper that records every notification before passing it on."""

    def __init__(self, inner: Display, telemetry: TelemetryService) -> None:
        self._inner = inner
        self._telemetry = telemetry

    def hand_updated(self, player: PlayerId, cards: Sequence[Card]) -> None:
        self._telemetry.log("hand_updated", {"player": player, "size": len(cards)})
        self._inner.hand_updated(player, cards)

    def pile_top_changed(self, card: Card) -> None:
        self._telemetry.log("pile_top_changed", {"card_id": card.id})
        self._inner.pile_top_changed(card)

    def prompt_suit_selection(self) -> None:
        self._telemetry.log("prompt_suit_selection", {})
        self._inner.prompt_suit_selection()

    def winner_announced(self, player: PlayerId) -> None:
        self._telemetry.log("winner_announced", {"player": player})
        self._inner.winner_announced(player)

    def invalid_move_rejected(self, reason: str) -> None:
        self._telemetry.log("invalid_move_rejected", {"reason": reason})
        self._inner.invalid_move_rejected(reason)
