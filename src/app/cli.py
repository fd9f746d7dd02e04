from __future__ import annotations

import argparse
import logging
import random
from collections import Counter

from console import ask_advanced, ask_rounds
from match import SEPARATOR, MatchController
from players import ComputerPlayer, HumanPlayer
from rules import Mode, legal_moves
from validation import InvalidInput, parse_rounds

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rpsls")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics written to stderr (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play best-of-N matches against the computer")
    play.add_argument("--rounds", default=None, help="Odd number of rounds (if not provided, will prompt)")
    mode = play.add_mutually_exclusive_group()
    mode.add_argument("--advanced", dest="advanced", action="store_true", default=None, help="Play with lizard and spock")
    mode.add_argument("--basic", dest="advanced", action="store_false", default=None, help="Play rock, paper, scissors only")
    play.add_argument("--seed", type=int, default=None, help="Seed the computer's moves for a reproducible game")

    check = sub.add_parser("check-rng", help="Tally a large sample of computer moves")
    check.add_argument("--mode", choices=[m.value for m in Mode], default=Mode.BASIC.value)
    check.add_argument("--samples", type=int, default=10000)
    check.add_argument("--seed", type=int, default=None)

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "check-rng":
        if args.samples < 1:
            parser.error("--samples must be at least 1")
        print(_format_move_sample(Mode(args.mode), args.samples, random.Random(args.seed)))
        return 0

    if args.cmd == "play":
        rounds: int | None = None
        if args.rounds is not None:
            try:
                rounds = parse_rounds(args.rounds)
            except InvalidInput:
                parser.error("--rounds must be an odd number greater than 0")
        try:
            _replay_forever(rounds=rounds, advanced=args.advanced, rng=random.Random(args.seed))
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            print()
            return 130

    raise SystemExit("unhandled command")


def _replay_forever(*, rounds: int | None, advanced: bool | None, rng: random.Random) -> None:
    while True:
        max_rounds = rounds if rounds is not None else ask_rounds()
        print()
        is_advanced = advanced if advanced is not None else ask_advanced()
        print()

        mode = Mode.ADVANCED if is_advanced else Mode.BASIC
        logger.info("starting best of %d, %s mode", max_rounds, mode.value)
        MatchController(max_rounds, HumanPlayer(mode), ComputerPlayer(mode, rng=rng)).play()

        print(SEPARATOR)
        input("\nPress Enter to play again")
        print()


def _format_move_sample(mode: Mode, samples: int, rng: random.Random) -> str:
    opponent = ComputerPlayer(mode, rng=rng)
    counts = Counter(opponent() for _ in range(samples))
    return "\n".join(f"{move.name.capitalize()}: {counts[move]}" for move in legal_moves(mode))


if __name__ == "__main__":
    raise SystemExit(main())
