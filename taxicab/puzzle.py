"""No Time for a Taxicab: follow a route of turn-then-walk instructions on the street grid,
starting at the origin and facing north.

Part 1 folds the instructions over the (position, direction) state and reports the taxicab
distance of the final position. Part 2 walks the route one block at a time against a set of
visited intersections and reports the taxicab distance of the first one visited twice."""
from typing import IO

from .route import Route
from .util import set_verbose


def run(input_: IO[str], part_2: bool = True, verbose: bool = False) -> int:
    set_verbose(verbose)
    route = Route.from_text(input_.read())
    return route.first_repeat_distance() if part_2 else route.final_distance()


test_inputs_1 = [("R2, L3", 5), ("R2, R2, R2", 2), ("R5, L5, R5, R3", 12)]
test_inputs_2 = [("R8, R4, R4, R8", 4)]


def test():
    import io

    for input_, expected in test_inputs_1:
        actual = run(io.StringIO(input_), part_2=False)
        assert actual == expected, (input_, expected, actual)

    for input_, expected in test_inputs_2:
        actual = run(io.StringIO(input_), part_2=True)
        assert actual == expected, (input_, expected, actual)
