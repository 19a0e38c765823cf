"""
uniassoc.merge — Right-biased merge of associative containers.

    merge(a, b, c) == merge(merge(a, b), c)

Each step folds every (key, value) of the next container into the
accumulated result with assoc_one():

    • The result has the FIRST container's shape.
    • On a key collision, the later container wins.
    • Later containers may have any shape — a dict can be merged into a
      pair list, a pair list into a tuple (as long as its keys are
      valid indices), and so on.
"""

from typing import Any

from .core import assoc_one, reduce_over


def _merge2(into: Any, other: Any) -> Any:
    return reduce_over(other, into, assoc_one)


def merge(*containers: Any) -> Any:
    """
    Left fold of containers into the first one.

        merge([("a", 1)], {"a": 2, "b": 3})  → [("b", 3), ("a", 2)]
        merge((1, 2), {3: 4})                 → (1, 2, None, 4)
        merge(c)                              → c
        merge()                               → None
    """
    if not containers:
        return None
    result = containers[0]
    for other in containers[1:]:
        result = _merge2(result, other)
    return result
