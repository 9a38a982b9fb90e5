import random
import time
from contextlib import contextmanager


def random_element(items, rng=random):
    return items[rng.randrange(len(items))]


def random_date(start, end, rng=random):
    """
    Pick a uniformly random instant between two datetimes.

    :param start: Lower bound
    :param end: Upper bound
    :return: start + U[0, 1) * (end - start)
    """
    return start + (end - start) * rng.random()


def random_date_di(start, end, rng=random):
    """
    Fair coin flip between two fixed values.

    :return: start or end, each with probability 1/2
    """
    return start if rng.random() > 0.5 else end


def unique(items):
    """
    Drop duplicates from a sequence, keeping the first occurrence of each.

    :param items: Iterable of hashable values
    :return: A tuple in first-seen order
    """
    return tuple(dict.fromkeys(items))


class Timer:
    elapsed = 0.0

    @property
    def ms(self):
        return self.elapsed * 1000


@contextmanager
def timer():
    t = Timer()
    start = time.perf_counter()
    try:
        yield t
    finally:
        t.elapsed = time.perf_counter() - start
