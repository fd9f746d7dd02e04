from __future__ import annotations

from enum import Enum
from typing import Literal

Outcome = Literal["win", "lose", "draw"]


class Move(Enum):
    # Values are the menu numbers the player types.
    ROCK = 1
    PAPER = 2
    SCISSORS = 3
    LIZARD = 4
    SPOCK = 5

    def __str__(self) -> str:
        return self.name.lower()


class Mode(Enum):
    BASIC = "basic"
    ADVANCED = "advanced"


BEATS: dict[Move, frozenset[Move]] = {
    Move.ROCK: frozenset({Move.SCISSORS, Move.LIZARD}),
    Move.PAPER: frozenset({Move.ROCK, Move.SPOCK}),
    Move.SCISSORS: frozenset({Move.PAPER, Move.LIZARD}),
    Move.LIZARD: frozenset({Move.PAPER, Move.SPOCK}),
    Move.SPOCK: frozenset({Move.ROCK, Move.SCISSORS}),
}


def legal_moves(mode: Mode) -> tuple[Move, ...]:
    if mode is Mode.BASIC:
        return (Move.ROCK, Move.PAPER, Move.SCISSORS)
    return tuple(Move)


def resolve(a: Move, b: Move) -> Outcome:
    """Outcome of a round from the point of view of ``a``."""
    if b in BEATS[a]:
        return "win"
    if a in BEATS[b]:
        return "lose"
    return "draw"


def describe(a: Move, b: Move) -> str:
    outcome = resolve(a, b)
    if outcome == "win":
        return f"{a} beats {b}. You win!"
    if outcome == "lose":
        return f"{b} beats {a}. You lose!"
    return "Nobody wins. Draw!"
