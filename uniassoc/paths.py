"""
uniassoc.paths — Nested-path access.

A path is a sequence of keys, one per level:

    cfg = {"db": [("host", "localhost"), ("ports", [5432, 5433])]}

    get_in(cfg, ("db", "ports", 1))           → 5433
    assoc_in(cfg, ("db", "host"), "prod")     → new cfg, "host" rebound
    update_in(cfg, ("db", "ports", 0), max, 6000)

Writes descend to the leaf, replace it, and rebuild every level on the
way back up with assoc_one(), so each level keeps its own shape and the
caller's structure is never touched.

A level that does not exist yet reads as None, which is the empty pair
list.  Writing through it therefore creates a fresh OrderedPairs level,
whatever the shape of the levels above:

    assoc_in(None, ("a", "b"), 5)  → [("a", [("b", 5)])]
    assoc_in({}, ("a", "b"), 5)    → {"a": [("b", 5)]}
"""

import logging
from typing import Any, Callable, Iterable

from .core import assoc_one, get, has_key

logger = logging.getLogger(__name__)


def get_in(container: Any, path: Iterable, not_found: Any = None) -> Any:
    """
    Follow `path` down from `container`.

    Returns `not_found` as soon as a level lacks the next key.  An empty
    path returns `container` itself.
    """
    level = container
    for key in path:
        if not has_key(level, key):
            return not_found
        level = get(level, key)
    return level


def _assoc_in(container: Any, path: tuple, value: Any) -> Any:
    key, rest = path[0], path[1:]
    if not rest:
        return assoc_one(container, key, value)

    child = get(container, key)
    if not has_key(container, key):
        logger.debug("creating pair-list level at key %r", key)
    return assoc_one(container, key, _assoc_in(child, rest, value))


def assoc_in(container: Any, path: Iterable, value: Any) -> Any:
    """
    Return a copy of `container` with the value at `path` set to `value`.

    An empty path returns `container` unchanged and discards `value`.
    """
    path = tuple(path)
    if not path:
        return container
    return _assoc_in(container, path, value)


def update_in(container: Any, path: Iterable, fn: Callable, *args: Any) -> Any:
    """
    Replace the value at `path` with fn(old, *args).

    `old` is get_in(container, path), i.e. None when the path is absent.
    An empty path returns `container` unchanged.
    """
    path = tuple(path)
    if not path:
        return container
    return _assoc_in(container, path, fn(get_in(container, path), *args))
