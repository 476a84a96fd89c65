import re
from typing import Dict, Iterable, List, NamedTuple, Tuple

from .direction import Turn

SEPARATOR = ", "
LENGTH_PATTERN = re.compile(r"[0-9]+")
TURNS: Dict[str, Turn] = {t.value: t for t in Turn}


class InvalidInstructionFormat(ValueError):
    def __init__(self, token: str, reason: str):
        super().__init__(f"Invalid instruction {token!r}: {reason}")
        self.token = token
        self.reason = reason


class Instruction(NamedTuple):
    turn: Turn
    length: int


def parse_turn(c: str) -> Turn:
    turn = TURNS.get(c)
    if turn is None:
        raise InvalidInstructionFormat(c, f"turn must be one of {', '.join(TURNS)}")
    return turn


def parse_length(s: str) -> int:
    if LENGTH_PATTERN.fullmatch(s) is None:
        raise InvalidInstructionFormat(s, "length must be an unsigned integer")
    try:
        length = int(s)
    except ValueError as e:
        raise InvalidInstructionFormat(s, "length is not a parseable integer") from e
    if length < 1:
        raise InvalidInstructionFormat(s, f"length must be at least 1; got {length}")
    return length


def parse_instruction(token: str) -> Instruction:
    try:
        return Instruction(parse_turn(token[:1]), parse_length(token[1:]))
    except InvalidInstructionFormat as e:
        # report the whole token rather than the fragment that failed
        raise InvalidInstructionFormat(token, e.reason) from None


def parse_instructions(tokens: Iterable[str]) -> Tuple[Instruction, ...]:
    """Parse all tokens in order; any invalid token fails the whole sequence"""
    return tuple(map(parse_instruction, tokens))


def split_tokens(line: str, sep: str = SEPARATOR) -> List[str]:
    stripped = line.strip()
    return stripped.split(sep) if stripped else []
