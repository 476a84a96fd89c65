import sys
from typing import Callable, Hashable, Iterable, Iterator, Optional, Set, TypeVar

VERBOSE = False

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


# Iterators


def iterate(f: Callable[[T], T], initial: T) -> Iterator[T]:
    value = initial
    while True:
        yield value
        value = f(value)


def first_repeat(it: Iterable[K], seen: Optional[Set[K]] = None) -> Optional[K]:
    """Return the first element of `it` which was already in `seen` or occurred earlier in `it`,
    or None if every element is distinct. `seen` is updated in place when passed."""
    seen_ = set() if seen is None else seen
    for i in it:
        if i in seen_:
            return i
        seen_.add(i)
    return None


# I/O


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)
