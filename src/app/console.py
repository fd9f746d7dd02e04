from __future__ import annotations

import logging
from typing import Callable, TypeVar

from validation import InvalidInput, parse_rounds, parse_yes_no

T = TypeVar("T")

Reader = Callable[[str], str]
Writer = Callable[[str], None]

logger = logging.getLogger(__name__)


def prompt_until_valid(
    prompt: str,
    parse: Callable[[str], T],
    *,
    read: Reader = input,
    write: Writer = print,
) -> T:
    """Read lines until ``parse`` accepts one. EOFError from ``read`` propagates."""
    while True:
        text = read(prompt)
        try:
            return parse(text)
        except InvalidInput as exc:
            logger.debug("rejected input %r: %s", text, exc)
            write(str(exc))


def ask_rounds(*, read: Reader = input, write: Writer = print) -> int:
    return prompt_until_valid(
        "How many rounds would you like to play? (enter an odd number greater than 0): ",
        parse_rounds,
        read=read,
        write=write,
    )


def ask_advanced(*, read: Reader = input, write: Writer = print) -> bool:
    return prompt_until_valid(
        "Would you like to play an advanced game? (Y or N): ",
        parse_yes_no,
        read=read,
        write=write,
    )
