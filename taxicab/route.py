from dataclasses import dataclass
from functools import partial, reduce
from itertools import islice
from typing import Iterable, Iterator, NamedTuple, Set, Tuple

from . import position
from .direction import START_DIRECTION, Direction, turn, vector
from .instructions import Instruction, parse_instructions, split_tokens
from .position import ORIGIN, Position, manhattan_distance
from .util import first_repeat, iterate, print_


class HeadquartersNotFound(LookupError):
    pass


class State(NamedTuple):
    position: Position
    direction: Direction


INITIAL_STATE = State(ORIGIN, START_DIRECTION)


def walk(state: State, instruction: Instruction) -> State:
    direction = turn(state.direction, instruction.turn)
    displacement = position.scale(vector(direction), instruction.length)
    new_state = State(position.add(state.position, displacement), direction)
    print_(instruction, "->", new_state)
    return new_state


def apply_instructions(instructions: Iterable[Instruction], state: State = INITIAL_STATE) -> State:
    return reduce(walk, instructions, state)


def walk_unit_steps(
    instructions: Iterable[Instruction], state: State = INITIAL_STATE
) -> Iterator[Position]:
    """Every position reached along the route, one block at a time; the starting position is not
    included"""
    position_, direction = state
    for instruction in instructions:
        direction = turn(direction, instruction.turn)
        step = partial(position.add, vector(direction))
        print_(instruction, "from", position_, "facing", direction.name)
        for position_ in islice(iterate(step, position_), 1, instruction.length + 1):
            yield position_


def find_first_repeat(
    instructions: Iterable[Instruction], state: State = INITIAL_STATE
) -> Position:
    visited: Set[Position] = {state.position}
    repeated = first_repeat(walk_unit_steps(instructions, state), visited)
    if repeated is None:
        raise HeadquartersNotFound(
            f"No intersection was visited twice; {len(visited)} distinct intersections visited"
        )
    print_("First repeated intersection:", repeated)
    return repeated


@dataclass(frozen=True)
class Route:
    instructions: Tuple[Instruction, ...]

    def __post_init__(self):
        object.__setattr__(self, "instructions", tuple(self.instructions))

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Route":
        return cls(parse_instructions(tokens))

    @classmethod
    def from_text(cls, text: str) -> "Route":
        return cls.from_tokens(split_tokens(text))

    def final_state(self) -> State:
        return apply_instructions(self.instructions)

    def final_position(self) -> Position:
        return self.final_state().position

    def final_distance(self) -> int:
        return manhattan_distance(self.final_position())

    def unit_steps(self) -> Iterator[Position]:
        return walk_unit_steps(self.instructions)

    def first_repeated_position(self) -> Position:
        return find_first_repeat(self.instructions)

    def first_repeat_distance(self) -> int:
        return manhattan_distance(self.first_repeated_position())
