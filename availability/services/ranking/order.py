from collections import namedtuple
from functools import cmp_to_key

RankedItem = namedtuple("RankedItem", ["item", "rank"])


def absent_last_comparator(key):
    """Compare items by ``key`` ascending, with ``None`` keys after all others."""

    def compare(a, b):
        a_value = key(a)
        b_value = key(b)
        if a_value is None and b_value is None:
            return 0
        if a_value is None:
            return 1
        if b_value is None:
            return -1
        return (a_value > b_value) - (a_value < b_value)

    return compare


def rank_items(items, key=None, compare=None):
    """Stable-sort ``items`` and give each a dense zero-based rank.

    Pass either ``key`` (item -> number or None) or ``compare`` (three-way
    comparator). An item that compares equal to the item just before it
    shares that item's rank; otherwise its rank is one more.
    """
    if (key is None) == (compare is None):
        raise TypeError("rank_items() takes exactly one of 'key' or 'compare'")
    if compare is None:
        compare = absent_last_comparator(key)

    ranked = []
    for item in sorted(items, key=cmp_to_key(compare)):
        if not ranked:
            rank = 0
        elif compare(ranked[-1].item, item) == 0:
            rank = ranked[-1].rank
        else:
            rank = ranked[-1].rank + 1
        ranked.append(RankedItem(item, rank))
    return ranked
