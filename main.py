#! /usr/bin/env python
import sys
from inspect import signature
from pathlib import Path
from time import perf_counter_ns
from typing import IO, Protocol, TypeVar

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore

from taxicab import puzzle

INPUT_PATH = Path("inputs/day01.txt")

Solution = TypeVar("Solution", covariant=True)


class Problem(Protocol[Solution]):
    def run(self, input_: IO[str], part_2: bool = True, verbose: bool = False) -> Solution:
        ...

    def test(self):
        ...


def print_solution(solution):
    print(solution)


def get_input() -> IO[str]:
    return open(INPUT_PATH) if sys.stdin.isatty() else sys.stdin


problem: Problem[int] = puzzle  # type: ignore

cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
    use_verbose_flag=True,
)


@cli.definition
class Taxicab:
    """Find Easter Bunny Headquarters by following the taxicab route in the recruiting document"""

    @cli_spec.output_handler(print_solution)
    def run(self, part_2: bool = True, trace: bool = False):
        """Run the solution. The default input is in the inputs/ folder, but input will be read
        from stdin if input is piped there.

        :param part_2: report the distance to the first intersection visited twice, rather than
          the distance to the end of the route
        :param trace: print every instruction and the state it leads to on stderr
        """
        input_ = get_input()
        print(f"Running solution (part {2 if part_2 else 1})...", file=sys.stderr)
        tic = perf_counter_ns()
        solution = problem.run(input_, part_2=part_2, verbose=trace)
        toc = perf_counter_ns()
        print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
        return solution

    def test(self):
        """Run the solution against the worked examples from the problem statement"""
        problem.test()
        print("Tests pass!")

    def info(self):
        """Print the doc string for the solution, providing some details about methodology"""
        print("Problem info:")
        if puzzle.__doc__:
            print(puzzle.__doc__, end="\n\n")
        print("Signature:")
        print(signature(problem.run))

    def input(self):
        """Print the input text for the problem to stdout"""
        with open(INPUT_PATH, "r") as f:
            for line in f:
                print(line, file=sys.stdout, end="")


if __name__ == "__main__":
    cli.run()
