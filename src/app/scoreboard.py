from __future__ import annotations

from dataclasses import dataclass, field

from rules import Move, Outcome


@dataclass(frozen=True)
class MatchResult:
    player_won: bool
    player_wins: int
    opponent_wins: int
    rounds_played: int
    draws: int
    most_used_move: Move
    most_used_count: int


@dataclass
class MatchState:
    max_rounds: int
    player_wins: int = 0
    opponent_wins: int = 0
    rounds_played: int = 0
    draws: int = 0
    move_counts: dict[Move, int] = field(default_factory=lambda: {move: 0 for move in Move})

    def __post_init__(self) -> None:
        if self.max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {self.max_rounds}")

    @property
    def remaining(self) -> int:
        return self.max_rounds - self.rounds_played

    @property
    def in_progress(self) -> bool:
        # Keep playing only while the trailing side can still catch up.
        return (
            self.player_wins + self.remaining > self.opponent_wins
            and self.opponent_wins + self.remaining > self.player_wins
        )

    def record(self, player_move: Move, opponent_move: Move, outcome: Outcome) -> None:
        self.move_counts[player_move] += 1
        self.move_counts[opponent_move] += 1
        if outcome == "draw":
            self.draws += 1
            return
        if outcome == "win":
            self.player_wins += 1
        else:
            self.opponent_wins += 1
        self.rounds_played += 1

    def most_used(self) -> tuple[Move, int]:
        # max() keeps the first maximum, i.e. the lowest Move on ties.
        move = max(Move, key=lambda m: self.move_counts[m])
        return move, self.move_counts[move]

    def format_tally(self) -> str:
        return (
            f"You have won {self.player_wins} rounds and your opponent has won "
            f"{self.opponent_wins} rounds\nThere are {self.remaining} rounds remaining"
        )

    def result(self) -> MatchResult:
        move, count = self.most_used()
        return MatchResult(
            player_won=self.player_wins > self.opponent_wins,
            player_wins=self.player_wins,
            opponent_wins=self.opponent_wins,
            rounds_played=self.rounds_played,
            draws=self.draws,
            most_used_move=move,
            most_used_count=count,
        )
