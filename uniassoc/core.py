"""
uniassoc.core — Uniform Associative Access
===========================================

DESIGN
══════

§1  THE PROBLEM
───────────────

Python code passes "something associative" around in at least three
native forms:

    • A list of (key, value) pairs     [("host", "db"), ("port", 5432)]
    • An indexed sequence              ["db", 5432]
    • A hash mapping                   {"host": "db", "port": 5432}

Each form answers "what is bound to this key?" differently, and each
form is updated differently.  Code that accepts all three ends up
branching on isinstance() at every call site.

This module puts that branching in ONE place.  Every operation below
works on all three shapes, accepts the native values directly and
returns native values — there is no wrapper type.


§2  SHAPES
──────────

    OrderedPairs      None, or a list whose items are all 2-tuples.
                      Keys compared with ==.  Duplicates allowed; the
                      first match wins on lookup.  Order is meaningful.
                      The empty list and None are both the empty pair
                      list.

    IndexedSequence   Any other list, or any tuple.  Keys are the
                      non-negative ints below len(); writes at or past
                      len() grow the sequence.

    HashMapping       Any collections.abc.Mapping.  No order guarantee.

shape_of() is the only function that inspects concrete types.


§3  COPY ON WRITE
─────────────────

Every write returns a NEW container.  The caller's reference is never
touched:

    c  = [10, 20]
    c2 = assoc_one(c, 3, 77)      # [10, 20, None, 77]
    c                             # still [10, 20]

Writes preserve the outer type: tuples stay tuples, lists stay lists
(unless every item of the new list is a 2-tuple; that would read back
as a pair list, so the sequence comes back as a tuple instead),
MutableMappings are shallow-copied (OrderedDict stays OrderedDict),
read-only Mappings become dicts.


§4  EQUALITY
────────────

equal(a, b) holds iff count(a) == count(b) and every key of `a` maps to
the same value in `b`.  The check is one-directional: it relies on the
count to catch extra keys in `b`.  Shapes may differ:

    equal([("a", 1)], {"a": 1})   → True

Author: uniassoc contributors
License: MIT
"""

import copy
import logging
from collections.abc import Mapping, MutableMapping
from enum import Enum, auto
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  ERRORS
# ═══════════════════════════════════════════════════════════════════

class AssociativeError(Exception):
    """Base class for every error raised by uniassoc."""


class NotAssociativeError(AssociativeError, TypeError):
    """The value is not one of the three associative shapes."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"not an associative container: {type(value).__name__} {value!r}"
        )


class InvalidKeyError(AssociativeError, LookupError):
    """A key the container can never hold (bad index, unhashable key)."""

    def __init__(self, container: Any, key: Any):
        self.container = container
        self.key = key
        super().__init__(
            f"invalid key {key!r} for {type(container).__name__} "
            f"of length {len(container)}"
        )


class InvalidArgumentError(AssociativeError, ValueError):
    """Malformed trailing arguments (e.g. an odd key/value list)."""


# ═══════════════════════════════════════════════════════════════════
#  CONFIGURATION
# ═══════════════════════════════════════════════════════════════════

# Filler for the empty slots created when an IndexedSequence grows.
FILL_VALUE = None

# Private sentinel for membership tests.  Never handed to callers.
_MISSING = object()


# ═══════════════════════════════════════════════════════════════════
#  SHAPE DISPATCH
# ═══════════════════════════════════════════════════════════════════

class Shape(Enum):
    """The three associative shapes."""
    ORDERED_PAIRS = auto()      # [(k, v), ...]
    INDEXED_SEQUENCE = auto()   # [v0, v1, ...]
    HASH_MAPPING = auto()       # {k: v, ...}


def _is_pair(item: Any) -> bool:
    return type(item) is tuple and len(item) == 2


def shape_of(value: Any) -> Shape:
    """
    Classify `value` into exactly one Shape.

    Examples:
        shape_of(None)                  → Shape.ORDERED_PAIRS
        shape_of([("a", 1)])            → Shape.ORDERED_PAIRS
        shape_of([])                    → Shape.ORDERED_PAIRS
        shape_of([10, 20])              → Shape.INDEXED_SEQUENCE
        shape_of((10, 20))              → Shape.INDEXED_SEQUENCE
        shape_of({"a": 1})              → Shape.HASH_MAPPING

    Raises NotAssociativeError for anything else (strings included,
    even though they are sequences).
    """
    if value is None:
        return Shape.ORDERED_PAIRS
    if isinstance(value, Mapping):
        return Shape.HASH_MAPPING
    if isinstance(value, list):
        if all(_is_pair(item) for item in value):
            return Shape.ORDERED_PAIRS
        return Shape.INDEXED_SEQUENCE
    if isinstance(value, tuple):
        return Shape.INDEXED_SEQUENCE
    raise NotAssociativeError(value)


def is_associative(value: Any) -> bool:
    """True iff shape_of(value) succeeds."""
    try:
        shape_of(value)
    except NotAssociativeError:
        return False
    return True


def _is_index(key: Any) -> bool:
    # bool is a subclass of int (True == 1), but it is not an index.
    return isinstance(key, int) and type(key) is not bool


# ═══════════════════════════════════════════════════════════════════
#  PRIMITIVE OPERATIONS
# ═══════════════════════════════════════════════════════════════════

def get(container: Any, key: Any, not_found: Any = None) -> Any:
    """
    Value bound to `key`, or `not_found` if there is none.

    A stored value that happens to equal `not_found` is indistinguishable
    from a miss; use has_key() when that matters.
    """
    shape = shape_of(container)

    if shape is Shape.ORDERED_PAIRS:
        for k, v in container or ():
            if k == key:
                return v
        return not_found

    if shape is Shape.INDEXED_SEQUENCE:
        if _is_index(key) and 0 <= key < len(container):
            return container[key]
        return not_found

    try:
        return container.get(key, not_found)
    except TypeError:
        # Unhashable keys can't be present in a hash mapping.
        return not_found


def has_key(container: Any, key: Any) -> bool:
    """Canonical membership test for every shape."""
    return get(container, key, _MISSING) is not _MISSING


def _assoc_pairs(pairs: Optional[list], key: Any, value: Any) -> list:
    pairs = pairs or []
    for i, (k, _) in enumerate(pairs):
        if k == key:
            result = list(pairs)
            result[i] = (k, value)
            return result
    # New keys go in front: the most recent association is found first.
    return [(key, value)] + pairs


def _assoc_indexed(seq, index: Any, value: Any):
    if not _is_index(index) or index < 0:
        raise InvalidKeyError(seq, index)

    n = len(seq)
    if index < n:
        items = list(seq)
        items[index] = value
    else:
        if index > n:
            logger.debug("growing %s of length %d to %d",
                         type(seq).__name__, n, index + 1)
        items = list(seq) + [FILL_VALUE] * (index - n) + [value]

    # A list of nothing but pairs reads back as OrderedPairs; a tuple
    # is always an IndexedSequence.
    if isinstance(seq, tuple) or all(_is_pair(item) for item in items):
        return tuple(items)
    return items


def _assoc_mapping(mapping: Mapping, key: Any, value: Any) -> Mapping:
    if isinstance(mapping, MutableMapping):
        result = copy.copy(mapping)
    else:
        result = dict(mapping)
    result[key] = value
    return result


def assoc_one(container: Any, key: Any, value: Any) -> Any:
    """
    Return a copy of `container` with `key` bound to `value`.

        assoc_one([("a", 1), ("b", 2)], "a", 99) → [("a", 99), ("b", 2)]
        assoc_one([("a", 1), ("b", 2)], "c", 3)  → [("c", 3), ("a", 1), ("b", 2)]
        assoc_one([10, 20], 0, 99)               → [99, 20]
        assoc_one([10, 20], 3, 77)               → [10, 20, None, 77]
        assoc_one({"a": 1}, "b", 2)              → {"a": 1, "b": 2}

    A sequence write whose result would hold nothing but 2-tuples is
    returned as a tuple so it still reads as an IndexedSequence:

        assoc_one([5], 0, ("a", 1))            → (("a", 1),)

    Raises InvalidKeyError for a negative, bool or non-int index into an
    IndexedSequence.
    """
    shape = shape_of(container)
    if shape is Shape.ORDERED_PAIRS:
        return _assoc_pairs(container, key, value)
    if shape is Shape.INDEXED_SEQUENCE:
        return _assoc_indexed(container, key, value)
    return _assoc_mapping(container, key, value)


def keys(container: Any) -> list:
    """
    Keys of `container`.

    OrderedPairs: in order, duplicates included.  HashMapping: in the
    mapping's iteration order (not guaranteed).  IndexedSequence: the
    indices 0 .. len-1.
    """
    shape = shape_of(container)
    if shape is Shape.ORDERED_PAIRS:
        return [k for k, _ in container or ()]
    if shape is Shape.INDEXED_SEQUENCE:
        return list(range(len(container)))
    return list(container.keys())


def values(container: Any) -> list:
    """Values of `container`, in the same order as keys()."""
    shape = shape_of(container)
    if shape is Shape.ORDERED_PAIRS:
        return [v for _, v in container or ()]
    if shape is Shape.INDEXED_SEQUENCE:
        return list(container)
    return list(container.values())


def count(container: Any) -> int:
    """Number of entries (pairs, slots or keys)."""
    shape = shape_of(container)
    if shape is Shape.HASH_MAPPING:
        return len(keys(container))
    return len(container or ())


# ═══════════════════════════════════════════════════════════════════
#  COMPOSITE OPERATIONS
# ═══════════════════════════════════════════════════════════════════

def assoc(container: Any, *kvs: Any) -> Any:
    """
    Bind several keys at once, left to right:

        assoc(c, k1, v1, k2, v2) == assoc_one(assoc_one(c, k1, v1), k2, v2)
    """
    if len(kvs) % 2:
        raise InvalidArgumentError(
            f"assoc expects key/value pairs, got {len(kvs)} trailing arguments"
        )
    result = container
    for i in range(0, len(kvs), 2):
        result = assoc_one(result, kvs[i], kvs[i + 1])
    return result


def update(container: Any, key: Any, fn: Callable, *args: Any) -> Any:
    """Rebind `key` to fn(get(container, key), *args)."""
    return assoc_one(container, key, fn(get(container, key), *args))


def reduce_over(container: Any, init: Any,
                fn: Callable[[Any, Any, Any], Any]) -> Any:
    """
    Fold fn(acc, key, value) over keys(container).

    Values are looked up with get(), not read off the entries, so a
    duplicated OrderedPairs key yields its FIRST value every time it
    appears.  This makes the fold O(n²) on pair lists.
    """
    acc = init
    for k in keys(container):
        acc = fn(acc, k, get(container, k))
    return acc


def equal(a: Any, b: Any) -> bool:
    """
    Structural equality across shapes.

    count(a) == count(b), and get(b, k) == get(a, k) for every key k of
    `a`.  Keys of `b` are never enumerated, so a key missing from `b`
    reads as None there.
    """
    if count(a) != count(b):
        return False
    return reduce_over(a, True,
                       lambda acc, k, v: acc and get(b, k) == v)
