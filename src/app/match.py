from __future__ import annotations

import logging

from console import Writer
from players import MoveSource
from rules import describe, resolve
from scoreboard import MatchResult, MatchState

SEPARATOR = "-" * 64

logger = logging.getLogger(__name__)


class MatchController:
    """Plays one best-of-``max_rounds`` match between two move sources.

    Draws are replayed and do not use up a round. The match stops as soon as
    the trailing side can no longer catch up, so fewer than ``max_rounds``
    decisive rounds may be played.
    """

    def __init__(
        self,
        max_rounds: int,
        player: MoveSource,
        opponent: MoveSource,
        *,
        write: Writer = print,
    ) -> None:
        self.state = MatchState(max_rounds=max_rounds)
        self._player = player
        self._opponent = opponent
        self._write = write

    def play(self) -> MatchResult:
        while self.state.in_progress:
            self.play_round()
        result = self.state.result()
        self._report(result)
        return result

    def play_round(self) -> None:
        self._write(SEPARATOR)
        player_move = self._player()
        opponent_move = self._opponent()
        self._write(f"Your move is: {player_move}")
        self._write(f"Your opponent's move is: {opponent_move}")

        outcome = resolve(player_move, opponent_move)
        self.state.record(player_move, opponent_move, outcome)
        logger.debug("round: %s vs %s -> %s", player_move, opponent_move, outcome)

        self._write("")
        self._write(describe(player_move, opponent_move))
        self._write("")
        if outcome == "draw":
            return

        self._write(self.state.format_tally())
        self._write("")

    def _report(self, result: MatchResult) -> None:
        logger.info(
            "match over: %d-%d after %d rounds (%d draws)",
            result.player_wins,
            result.opponent_wins,
            result.rounds_played,
            result.draws,
        )
        self._write("")
        self._write(SEPARATOR)
        if result.player_won:
            self._write("Congratulations, you win!")
        else:
            self._write("You lose! Better luck next time!")
        self._write("")
        self._write(f"The match took {result.rounds_played} rounds.")
        self._write(
            f"The most used move was {result.most_used_move}, used {result.most_used_count} times"
        )
