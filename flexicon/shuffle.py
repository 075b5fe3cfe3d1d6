"""Unbiased Fisher-Yates shuffle."""
import random


def shuffle(items, rng=None) -> list:
    """
    Return a new list with the items of `items` in uniformly random order.
    The input is left untouched. `rng` only needs a `randint(a, b)` method
    (e.g. a seeded `random.Random`); defaults to the `random` module.
    """
    rng = rng or random
    result = list(items)

    # Walk down from the last slot, swapping each with a pick from [0, i]
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]

    return result
