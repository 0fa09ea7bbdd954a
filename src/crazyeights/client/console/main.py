from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Sequence

from crazyeights.engine.display import Display
from crazyeights.engine.game import GameEngine, new_game
from crazyeights.engine.serialize import snapshot
from crazyeights.engine.types import DIFFICULTIES
from crazyeights.paths import get_paths
from crazyeights.services.settings import SettingsError, SettingsService
from crazyeights.services.telemetry import TelemetryDisplay, TelemetryService

from .display import ConsoleDisplay

HELP = "Commands: draw | play <card> | suit <name> | difficulty <level> | hand | quit"


class ConsoleApp:
    def __init__(
        self,
        engine: GameEngine,
        write: Callable[[str], None] = print,
        telemetry: TelemetryService | None = None,
    ) -> None:
        self.engine = engine
        self._write = write
        self._telemetry = telemetry
        self.running = True

    def handle_command(self, line: str) -> None:
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return
        cmd, arg = parts[0].lower(), (parts[1] if len(parts) > 1 else "")
        if cmd in ("quit", "exit"):
            self.running = False
        elif cmd == "draw":
            self.engine.draw_card()
        elif cmd == "play" and arg:
            self.engine.play_card(arg)
        elif cmd == "suit" and arg:
            self.engine.continue_game_after_suit_selection(arg)
        elif cmd == "difficulty" and arg:
            try:
                self.engine.set_difficulty(arg)
            except ValueError as e:
                self._write(str(e))
            else:
                self._write(f"Difficulty set to {self.engine.difficulty}.")
        elif cmd == "hand":
            self._write("Your hand: " + " ".join(c.id for c in self.engine.human.hand))
            top = self.engine.pile.get_top_card()
            if top is not None:
                suit = self.engine.pile.announced_suit
                self._write(f"Pile: {top.id}" + (f" (suit is {suit})" if suit else ""))
        else:
            self._write(HELP)

        if self.engine.winner is not None:
            if self._telemetry is not None:
                self._telemetry.log("game_ended", snapshot(self.engine))
            self.running = False

    def run(self, lines: Iterable[str]) -> int:
        self._write(HELP)
        for line in lines:
            self.handle_command(line)
            if not self.running:
                break
        return 0


def _stdin_lines() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="crazyeights")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-telemetry", action="store_true")
    args = parser.parse_args(argv)

    paths = get_paths()
    try:
        settings = SettingsService(paths.data_dir, paths.schema_dir, paths.userdata_dir).load()
    except SettingsError as e:
        print(e, file=sys.stderr)
        return 2
    difficulty = args.difficulty or settings.difficulty
    seed = args.seed if args.seed is not None else settings.seed

    display: Display = ConsoleDisplay()
    telemetry = None
    if settings.telemetry and not args.no_telemetry:
        telemetry = TelemetryService(paths.userdata_dir / "telemetry.jsonl")
        display = TelemetryDisplay(display, telemetry)

    engine = new_game(seed=seed, difficulty=difficulty, display=display)
    app = ConsoleApp(engine, telemetry=telemetry)
    return app.run(_stdin_lines())
