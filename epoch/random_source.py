"""Random sources for breeder-pair sampling."""

import random
from typing import Optional, Union

from epoch.interfaces import RandomSource


class StdRandomSource(RandomSource):
    """RandomSource backed by the standard library generator."""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self.rng = rng if rng is not None else random.Random(seed)

    def sample_index(self, start: int, stop: int) -> int:
        return self.rng.randrange(start, stop)


def as_random_source(
    value: Union[RandomSource, random.Random, int, None] = None
) -> RandomSource:
    """Coerce a generator, a seed or None into a RandomSource."""
    if isinstance(value, RandomSource):
        return value
    if isinstance(value, random.Random):
        return StdRandomSource(rng=value)
    # bool is an int subclass but never a meaningful seed
    if isinstance(value, int) and not isinstance(value, bool):
        return StdRandomSource(seed=value)
    if value is None:
        return StdRandomSource()
    raise TypeError(f"Cannot use {type(value).__name__} as a random source")
