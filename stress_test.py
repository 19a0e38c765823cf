"""
Stress tests / adversarial evaluation of uniassoc.

This script attempts to BREAK the claimed properties on randomly
generated containers of every shape:
  1. Membership vs. sentinel lookup
  2. assoc_one → get round-trip
  3. Non-destructiveness of every write
  4. count invariant for multi-pair assoc
  5. merge identity and right bias
  6. Nested round-trip with auto-vivification
  7. update_in == assoc_in ∘ fn ∘ get_in
  8. Edge cases that might expose design flaws
"""

import sys, os, random, copy
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from uniassoc.core import (
    Shape, shape_of, get, has_key, assoc_one, assoc, keys, count, equal,
    InvalidKeyError,
)
from uniassoc.merge import merge
from uniassoc.paths import get_in, assoc_in, update_in


def test(name, condition, detail=""):
    status = "PASS" if condition else "FAIL"
    print(f"  [{status}] {name}" + (f"  ({detail})" if detail else ""))
    return condition


KEYS = ["a", "b", "c", "d", "x", ("t", 1), 0, 1, 2]
LEAVES = [1, 2, "s", None, True, 3.5]


def random_container(depth=0, max_depth=3):
    """Generate a random associative container of any shape."""
    def leaf_or_nested():
        if depth + 1 < max_depth and random.random() < 0.3:
            return random_container(depth + 1, max_depth)
        return random.choice(LEAVES)

    kind = random.choice(["pairs", "seq", "tuple", "map", "none"])
    if kind == "none":
        return None
    if kind == "pairs":
        n = random.randint(0, 4)
        return [(random.choice(KEYS), leaf_or_nested()) for _ in range(n)]
    if kind in ("seq", "tuple"):
        # At least one non-pair item so a list is never read as pairs.
        items = [random.choice(LEAVES)] + [leaf_or_nested() for _ in range(random.randint(0, 3))]
        return items if kind == "seq" else tuple(items)
    n = random.randint(0, 4)
    return {k: leaf_or_nested() for k in random.sample(KEYS, n)}


def writable_keys(c):
    """Keys that assoc_one accepts for this container."""
    if shape_of(c) is Shape.INDEXED_SEQUENCE:
        return [0, len(c) - 1, len(c), len(c) + 2]
    return KEYS


random.seed(2024)
containers = [random_container() for _ in range(300)]


# ═══════════════════════════════════════════════════════════════
#  §1  MEMBERSHIP vs SENTINEL
# ═══════════════════════════════════════════════════════════════

print("=" * 70)
print("  §1  MEMBERSHIP vs SENTINEL")
print("=" * 70)

violations = 0
checks = 0
for c in containers:
    for k in KEYS + [-1, 99, "zz"]:
        sentinel = object()
        checks += 1
        if not has_key(c, k) and get(c, k, sentinel) is not sentinel:
            violations += 1
        if has_key(c, k) and get(c, k, sentinel) is sentinel:
            violations += 1
test(f"has_key agrees with sentinel lookup ({checks} checks)",
     violations == 0, f"{violations} violations")


# ═══════════════════════════════════════════════════════════════
#  §2  ROUND-TRIP and NON-DESTRUCTIVENESS
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §2  ROUND-TRIP and NON-DESTRUCTIVENESS")
print("=" * 70)

rt_failures = 0
mutations = 0
shape_changes = 0
for c in containers:
    before = copy.deepcopy(c)
    for k in writable_keys(c):
        result = assoc_one(c, k, "NEW")
        if get(result, k) != "NEW":
            rt_failures += 1
            if rt_failures <= 3:
                print(f"    ROUND-TRIP: assoc_one({c!r}, {k!r}) → {result!r}")
        if shape_of(result) is not shape_of(c):
            shape_changes += 1
    if c != before or not equal(c, before):
        mutations += 1

test("get(assoc_one(c, k, v), k) == v", rt_failures == 0, f"{rt_failures} failures")
test("assoc_one never mutates its input", mutations == 0, f"{mutations} mutated")
test("assoc_one keeps the shape", shape_changes == 0, f"{shape_changes} changed")


# ═══════════════════════════════════════════════════════════════
#  §3  COUNT INVARIANT
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §3  COUNT INVARIANT")
print("=" * 70)

count_failures = 0
for c in containers:
    if shape_of(c) is Shape.INDEXED_SEQUENCE:
        continue  # growth past len adds filler slots too
    k1, k2 = random.choice(KEYS), random.choice(KEYS)
    new = len({k for k in (k1, k2) if not has_key(c, k)})
    if count(assoc(c, k1, 1, k2, 2)) != count(c) + new:
        count_failures += 1
test("count(assoc(c, k1, v1, k2, v2)) == count(c) + new keys",
     count_failures == 0, f"{count_failures} failures")


# ═══════════════════════════════════════════════════════════════
#  §4  MERGE
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §4  MERGE")
print("=" * 70)

identity_failures = sum(1 for c in containers if not equal(merge(c), c))
test("merge(c) == c", identity_failures == 0, f"{identity_failures} failures")

bias_failures = 0
merge_checks = 0
for _ in range(500):
    a, b = random.choice(containers), random.choice(containers)
    try:
        merged = merge(a, b)
    except InvalidKeyError:
        continue  # non-index keys merged into a sequence
    merge_checks += 1
    for k in keys(b):
        if get(merged, k) != get(b, k):
            bias_failures += 1
test(f"merge is right-biased ({merge_checks} merges)",
     bias_failures == 0, f"{bias_failures} failures")


# ═══════════════════════════════════════════════════════════════
#  §5  NESTED PATHS
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §5  NESTED PATHS")
print("=" * 70)

nested_failures = 0
compose_failures = 0
nested_checks = 0
for c in containers:
    if shape_of(c) is Shape.INDEXED_SEQUENCE:
        path = [len(c), "k", "j"]
    else:
        path = ["fresh", "k", "j"]
    nested_checks += 1
    if get_in(assoc_in(c, path, "leaf"), path) != "leaf":
        nested_failures += 1
    fn = lambda old, extra: (old, extra)
    if update_in(c, path, fn, 7) != assoc_in(c, path, fn(get_in(c, path), 7)):
        compose_failures += 1

test(f"get_in(assoc_in(c, p, v), p) == v ({nested_checks} paths)",
     nested_failures == 0, f"{nested_failures} failures")
test("update_in == assoc_in(fn(get_in))",
     compose_failures == 0, f"{compose_failures} failures")


# ═══════════════════════════════════════════════════════════════
#  §6  EDGE CASES
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §6  EDGE CASES")
print("=" * 70)

# bool is an int subclass in Python; it must not address a slot
test("get([10, 20], True) is absent",
     get([10, 20], True, "nf") == "nf")

# negative indices would silently wrap with plain subscripting
test("get([10, 20], -1) is absent",
     get([10, 20], -1, "nf") == "nf")

# a sequence whose last non-pair item is overwritten must stay a sequence
drift = assoc_one([("a", 1), 0], 1, ("b", 2))
test("sequence filled with pairs is still a sequence",
     shape_of(drift) is Shape.INDEXED_SEQUENCE and get(drift, 1) == ("b", 2),
     f"got {drift!r}")

test("equal is one-directional: {'x': None} vs {'y': None}",
     equal({"x": None}, {"y": None}),
     "missing key reads as None in b, kept on purpose")

test("assoc_in(None, ['a', 'b'], 5)",
     assoc_in(None, ["a", "b"], 5) == [("a", [("b", 5)])])


# ═══════════════════════════════════════════════════════════════
#  SUMMARY
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  STRESS TEST SUMMARY")
print("=" * 70)
print("  If you see FAIL above, there's a bug.")
print("  If everything is PASS, the implementation is correct")
print("  for the tested cases (not a proof, but high confidence).")
