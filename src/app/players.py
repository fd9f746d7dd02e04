from __future__ import annotations

import logging
import random
from typing import Callable

from console import Reader, Writer, prompt_until_valid
from rules import Mode, Move, legal_moves
from validation import parse_move

MoveSource = Callable[[], Move]

logger = logging.getLogger(__name__)


class HumanPlayer:
    def __init__(self, mode: Mode, *, read: Reader = input, write: Writer = print) -> None:
        self.mode = mode
        self._read = read
        self._write = write

    def __call__(self) -> Move:
        self._write("Please choose a move by entering a number:")
        for move in legal_moves(self.mode):
            self._write(f"{move.value}. {move.name.capitalize()}")
        return prompt_until_valid(
            "> ",
            lambda text: parse_move(text, self.mode),
            read=self._read,
            write=self._write,
        )


class ComputerPlayer:
    """Uniform random opponent; no strategy can exploit it."""

    def __init__(self, mode: Mode, *, rng: random.Random | None = None) -> None:
        self.mode = mode
        self._rng = rng if rng is not None else random.Random()

    def __call__(self) -> Move:
        move = self._rng.choice(legal_moves(self.mode))
        logger.debug("computer picked %s", move)
        return move
