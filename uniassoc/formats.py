"""
uniassoc.formats — Convert between real-world data and the three shapes.

Supported conversions:
    • JSON text → nested containers (objects as pair lists or dicts)
    • Any associative structure → plain dict/list Python objects
    • Any associative structure → JSON text
    • Any associative container → OrderedPairs
"""

import json
from typing import Any

from .core import InvalidKeyError, Shape, is_associative, reduce_over, shape_of


# ═══════════════════════════════════════════════════════════════════
#  JSON TEXT → CONTAINERS
# ═══════════════════════════════════════════════════════════════════

def _empty_arrays_as_tuples(val: Any, objects: set) -> Any:
    if not isinstance(val, list):
        return val
    if id(val) in objects:
        return [(k, _empty_arrays_as_tuples(v, objects)) for k, v in val]
    if not val:
        return ()
    return [_empty_arrays_as_tuples(item, objects) for item in val]


def from_json(text: str, pairs: bool = True) -> Any:
    """
    Parse JSON text.

    With pairs=True every JSON object becomes an OrderedPairs list in
    document order, duplicate keys included:

        from_json('{"a": 1, "a": 2}')  → [("a", 1), ("a", 2)]

    An empty JSON array would be indistinguishable from an empty object
    as a list, so it comes back as () (an empty IndexedSequence):

        from_json('{"tags": [], "meta": {}}')  → [("tags", ()), ("meta", [])]

    With pairs=False objects become dicts (last duplicate wins, as with
    json.loads).
    """
    if not pairs:
        return json.loads(text)

    objects = set()

    def hook(items: list) -> list:
        obj = list(items)
        objects.add(id(obj))
        return obj

    return _empty_arrays_as_tuples(json.loads(text, object_pairs_hook=hook), objects)


# ═══════════════════════════════════════════════════════════════════
#  CONTAINERS → PLAIN PYTHON / JSON
# ═══════════════════════════════════════════════════════════════════

def to_python(val: Any) -> Any:
    """
    Recursively normalise an associative structure to dicts and lists.

    Mapping:
        OrderedPairs     → dict  (first pair wins on duplicate keys)
        IndexedSequence  → list
        HashMapping      → dict

    Non-associative leaves are returned as they are.  An empty list is
    an empty pair list and comes back as {}.

    Raises InvalidKeyError for a pair-list key that can't be a dict key.
    """
    if val is None or not is_associative(val):
        return val

    shape = shape_of(val)
    if shape is Shape.INDEXED_SEQUENCE:
        return [to_python(item) for item in val]

    def add(acc: dict, k: Any, v: Any) -> dict:
        try:
            seen = k in acc
        except TypeError as exc:
            raise InvalidKeyError(val, k) from exc
        if not seen:
            acc[k] = to_python(v)
        return acc

    return reduce_over(val, {}, add)


def to_json(val: Any, **kwargs) -> str:
    """Convert an associative structure to a JSON string."""
    return json.dumps(to_python(val), **kwargs)


# ═══════════════════════════════════════════════════════════════════
#  SHAPE CONVERSION
# ═══════════════════════════════════════════════════════════════════

def to_pairs(container: Any) -> list:
    """
    Copy any associative container into an OrderedPairs list.

    Keys come out in keys() order; duplicated pair-list keys keep their
    first value.

        to_pairs({"a": 1, "b": 2})  → [("a", 1), ("b", 2)]
        to_pairs(["x", "y"])        → [(0, "x"), (1, "y")]
    """
    return reduce_over(container, [], lambda acc, k, v: acc + [(k, v)])
