from dataclasses import dataclass
from typing import List, MutableSequence, Protocol, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1

class RandomSource(Protocol):
    """What level generation needs; random.Random satisfies it as well."""
    def randint(self, a: int, b: int) -> int: ...
    def shuffle(self, x: List) -> None: ...

def pm_next(state: int) -> int:
    return (state * A) % M

def normalize_seed(seed: int) -> int:
    # 0 and multiples of M are fixed points of the generator.
    s = seed % M
    return s if s else 1

@dataclass
class PMRandom:
    state: int

    def __post_init__(self) -> None:
        self.state = normalize_seed(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        """Uniform-ish draw in 1..n inclusive."""
        assert n > 0
        return (self.next32() % n) + 1

    def randint(self, a: int, b: int) -> int:
        if b < a:
            raise ValueError(f"empty range for randint({a}, {b})")
        return a + self.bounded(b - a + 1) - 1

    def shuffle(self, x: MutableSequence[T]) -> None:
        # Fisher–Yates, highest index first
        for i in range(len(x) - 1, 0, -1):
            j = self.bounded(i + 1) - 1
            x[i], x[j] = x[j], x[i]

def seed_for_level(base_seed: int, level: int) -> int:
    """Seed for the Nth level of a run: step the base seed forward N-1 times."""
    s = normalize_seed(base_seed)
    for _ in range(max(0, level - 1)):
        s = pm_next(s)
    return s
