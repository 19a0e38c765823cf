"""
Uniform Associative Access
==========================

One set of operations for the three ways Python code holds key/value data:

    get([("a", 1), ("b", 2)], "b")      → 2       (list of pairs)
    get([10, 20, 30], 1)                → 20      (indexed sequence)
    get({"a": 1}, "a")                  → 1       (hash mapping)

Every write is copy-on-write and keeps the container's shape:

    assoc_one([("a", 1)], "b", 2)       → [("b", 2), ("a", 1)]
    assoc_one([10, 20], 3, 77)          → [10, 20, None, 77]
    assoc_in(None, ["a", "b"], 5)       → [("a", [("b", 5)])]

Native values go in and native values come out — there is no wrapper type.
"""

from uniassoc.core import (
    # Shapes
    Shape,
    shape_of,
    is_associative,
    FILL_VALUE,
    # Errors
    AssociativeError,
    NotAssociativeError,
    InvalidKeyError,
    InvalidArgumentError,
    # Primitives
    get,
    has_key,
    assoc_one,
    keys,
    values,
    count,
    # Composites
    assoc,
    update,
    reduce_over,
    equal,
)
from uniassoc.merge import merge
from uniassoc.paths import get_in, assoc_in, update_in
from uniassoc.formats import from_json, to_json, to_python, to_pairs

__version__ = "0.1.0"
__all__ = [
    "Shape", "shape_of", "is_associative", "FILL_VALUE",
    "AssociativeError", "NotAssociativeError", "InvalidKeyError",
    "InvalidArgumentError",
    "get", "has_key", "assoc_one", "keys", "values", "count",
    "assoc", "update", "reduce_over", "equal",
    "merge",
    "get_in", "assoc_in", "update_in",
    "from_json", "to_json", "to_python", "to_pairs",
]
