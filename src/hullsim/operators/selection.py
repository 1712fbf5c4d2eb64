from hullsim.utils import typing

GROUP_SIZE = 5


# API functions

def select(items, rank, key=None):
    """
    Returns the element of `items` at 0-based `rank` in `key` order.

    Median-of-medians (BFPRT) selection: the pivot is the median of the
    medians of groups of five, which guarantees a constant fraction of the
    input is discarded every round and so a linear number of comparisons.
    Duplicate keys are fine; any element whose key sits at `rank` may be
    returned. Use a tuple key, e.g. `lambda p: (p.x, p.y)`, for a
    deterministic tie-break.
    """
    items = list(items)
    if len(items) == 0:
        raise ValueError("'items' must be non-empty: there is no element to select")
    typing.sanitize_type(rank, "integer", "rank")
    typing.sanitize_range(rank, "rank", ge=0, lt=len(items))
    key = _identity if key is None else key

    while True:
        if len(items) <= GROUP_SIZE:
            return sorted(items, key=key)[rank]

        pivot = _pivot(items, key)
        pivot_key = key(pivot)
        lows, highs = _partition(items, pivot_key, key)
        num_equal = len(items) - len(lows) - len(highs)

        if rank < len(lows):
            items = lows
        elif rank < len(lows) + num_equal:
            # every element equal to the pivot sits at this rank
            return pivot
        else:
            rank -= len(lows) + num_equal
            items = highs


def median(items, key=None):
    """ lower median of `items` """
    items = list(items)
    if len(items) == 0:
        raise ValueError("'items' must be non-empty: there is no median of an empty sequence")
    return select(items, (len(items) - 1) // 2, key)


# private helper functions

def _identity(item):
    return item


def _group_median(group, key):
    return sorted(group, key=key)[(len(group) - 1) // 2]


def _pivot(items, key):
    """
    median of the medians of consecutive groups of GROUP_SIZE
    """
    medians = [
        _group_median(items[i:i + GROUP_SIZE], key)
        for i in range(0, len(items), GROUP_SIZE)
    ]
    return select(medians, (len(medians) - 1) // 2, key)


def _partition(items, pivot_key, key):
    lows = []
    highs = []
    for item in items:
        k = key(item)
        if k < pivot_key:
            lows.append(item)
        elif k > pivot_key:
            highs.append(item)
    return lows, highs
