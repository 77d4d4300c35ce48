"""Shared test helpers for driving the game without a terminal."""

import random

from tictactoe.game_logic import GameLogic, Mark


class FixedRandom(random.Random):
    """Random source whose coin flip always lands the same way."""

    def __init__(self, value: float):
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


def new_game(first: Mark = Mark.X) -> GameLogic:
    """Helper to create a game where `first` moves first."""
    return GameLogic(rng=FixedRandom(0.0 if first is Mark.X else 0.9))


def play_all(game: GameLogic, *moves: str):
    """Feed 'row col' strings to the game, returning the results."""
    return [game.play(move) for move in moves]


class ScriptedInput:
    """Callable stand-in for input(): returns queued lines, then EOF."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.reads = 0

    def __call__(self) -> str:
        if not self.lines:
            raise EOFError
        self.reads += 1
        return self.lines.pop(0)


class CapturedOutput:
    """Callable stand-in for print() that records each line."""

    def __init__(self):
        self.lines = []

    def __call__(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
