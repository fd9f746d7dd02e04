from __future__ import annotations

from rules import Mode, Move, legal_moves


class InvalidInput(ValueError):
    """Rejected console input. The message is shown to the player before re-prompting."""


def parse_rounds(text: str) -> int:
    try:
        rounds = int(text.strip())
    except ValueError:
        rounds = 0
    if rounds < 1 or rounds % 2 == 0:
        raise InvalidInput("Invalid input, please enter an odd number greater than 0.")
    return rounds


def parse_yes_no(text: str) -> bool:
    choice = text.strip().lower()
    if choice in ("y", "yes"):
        return True
    if choice in ("n", "no"):
        return False
    raise InvalidInput("Invalid input, please write either Y for yes or N for no.")


def parse_move(text: str, mode: Mode) -> Move:
    moves = legal_moves(mode)
    choice = text.strip()
    # Only the bare menu digits count; "+1" or "01" are rejected.
    for move in moves:
        if choice == str(move.value):
            return move
    raise InvalidInput(f"Invalid choice, please choose a number between 1 and {len(moves)}.")
