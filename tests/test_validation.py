from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from console import prompt_until_valid  # type: ignore[import-not-found]  # noqa: E402
from rules import Mode, Move  # type: ignore[import-not-found]  # noqa: E402
from validation import InvalidInput, parse_move, parse_rounds, parse_yes_no  # type: ignore[import-not-found]  # noqa: E402


def test_parse_rounds_accepts_odd_positive() -> None:
    assert parse_rounds("1") == 1
    assert parse_rounds(" 7 ") == 7


@pytest.mark.parametrize("text", ["", "abc", "0", "-3", "4", "3.0"])
def test_parse_rounds_rejects(text: str) -> None:
    with pytest.raises(InvalidInput, match="odd number greater than 0"):
        parse_rounds(text)


def test_parse_yes_no() -> None:
    assert parse_yes_no("y") is True
    assert parse_yes_no("YES") is True
    assert parse_yes_no("n") is False
    assert parse_yes_no("No") is False
    with pytest.raises(InvalidInput):
        parse_yes_no("maybe")


def test_parse_move_basic_range() -> None:
    assert parse_move("1", Mode.BASIC) is Move.ROCK
    assert parse_move("3", Mode.BASIC) is Move.SCISSORS
    with pytest.raises(InvalidInput, match="between 1 and 3"):
        parse_move("7", Mode.BASIC)
    with pytest.raises(InvalidInput):
        parse_move("4", Mode.BASIC)


def test_parse_move_advanced_range() -> None:
    assert parse_move("4", Mode.ADVANCED) is Move.LIZARD
    assert parse_move("5", Mode.ADVANCED) is Move.SPOCK
    for text in ("0", "6", "rock", "01", ""):
        with pytest.raises(InvalidInput, match="between 1 and 5"):
            parse_move(text, Mode.ADVANCED)


def test_invalid_input_is_a_value_error() -> None:
    assert issubclass(InvalidInput, ValueError)


def test_prompt_until_valid_reprompts() -> None:
    lines = iter(["2", "x", "5"])
    prompts: list[str] = []
    written: list[str] = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        return next(lines)

    assert prompt_until_valid("rounds? ", parse_rounds, read=read, write=written.append) == 5
    assert prompts == ["rounds? "] * 3
    assert written == ["Invalid input, please enter an odd number greater than 0."] * 2


def test_prompt_until_valid_propagates_eof() -> None:
    def read(prompt: str) -> str:
        raise EOFError

    with pytest.raises(EOFError):
        prompt_until_valid("? ", parse_yes_no, read=read, write=lambda s: None)
