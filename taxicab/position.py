from itertools import repeat
from operator import add as add_
from operator import mul
from typing import NamedTuple


class Position(NamedTuple):
    x: int
    y: int


ORIGIN = Position(0, 0)


def add(a: Position, b: Position) -> Position:
    return Position(*map(add_, a, b))


def scale(p: Position, k: int) -> Position:
    return Position(*map(mul, p, repeat(k)))


def equals(a: Position, b: Position) -> bool:
    return a == b


def manhattan_distance(p: Position) -> int:
    """Taxicab distance from the origin"""
    return sum(map(abs, p))
