from enum import Enum, IntEnum
from typing import Dict, List

from .position import Position


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


class Turn(Enum):
    RIGHT = "R"
    LEFT = "L"


START_DIRECTION = Direction.NORTH
# indexed by Direction, clockwise from north; north increases x and east increases y
DIRECTION_VECTORS: List[Position] = [
    Position(1, 0),
    Position(0, 1),
    Position(-1, 0),
    Position(0, -1),
]
ROTATIONS: Dict[Turn, int] = {Turn.RIGHT: 1, Turn.LEFT: -1}


def vector(direction: Direction) -> Position:
    return DIRECTION_VECTORS[direction]


def turn(direction: Direction, turn_: Turn) -> Direction:
    return Direction((direction + ROTATIONS[turn_]) % len(Direction))
