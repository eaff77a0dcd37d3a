"""Levenshtein edit distance kernels.

A kernel is any function `(a, b, bound) -> int` that returns the minimum number
of single-character insertions, deletions and substitutions turning `a` into
`b`.

Bounded calls
-------------
Suggestion lookups only care whether a candidate is *close enough*, so every
kernel accepts an optional `bound`:
- If the true distance is <= bound, the exact distance is returned.
- Otherwise the kernel may stop early and return `bound + 1`.

Two kernels are available:
- `levenshtein`: pure Python, rolling one-row dynamic programming.
- `rapidfuzz_levenshtein`: the same contract on top of `rapidfuzz`, which is
  much faster for long strings or large pools.

Both work on Python `str`, i.e. on Unicode code points, so "é" counts as one
edit unit no matter how many bytes it takes in UTF-8.
"""

from __future__ import annotations

from typing import Callable, Optional

Kernel = Callable[[str, str, Optional[int]], int]


def levenshtein(a: str, b: str, bound: int | None = None) -> int:
    """Compute the Levenshtein distance between two strings.

    Args:
        a: First string.
        b: Second string.
        bound: Optional early-exit bound. When the distance provably exceeds it,
            `bound + 1` is returned instead of the exact value.

    Returns:
        The edit distance (or `bound + 1` if it exceeds `bound`).
    """
    if bound is not None and bound < 0:
        raise ValueError("bound must be >= 0")

    if a == b:
        return 0

    # Keep the shorter string as the row so memory is O(min(len(a), len(b))).
    if len(a) < len(b):
        a, b = b, a

    # At least len(a) - len(b) insertions/deletions are always needed.
    if bound is not None and len(a) - len(b) > bound:
        return bound + 1

    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        row_min = i
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                cost = previous[j - 1]
            else:
                cost = 1 + min(previous[j], current[j - 1], previous[j - 1])
            current.append(cost)
            if cost < row_min:
                row_min = cost

        # Every alignment path crosses every row, so the row minimum is a lower
        # bound for the final distance.
        if bound is not None and row_min > bound:
            return bound + 1

        previous = current

    distance = previous[-1]
    if bound is not None and distance > bound:
        return bound + 1
    return distance


def rapidfuzz_levenshtein(a: str, b: str, bound: int | None = None) -> int:
    """Levenshtein distance computed by `rapidfuzz`.

    `rapidfuzz` returns `score_cutoff + 1` when the cutoff is exceeded, which is
    exactly the bounded-kernel contract.
    """
    if bound is not None and bound < 0:
        raise ValueError("bound must be >= 0")

    # Lazy import keeps the pure Python kernel usable without loading rapidfuzz.
    from rapidfuzz.distance import Levenshtein  # type: ignore

    return int(Levenshtein.distance(a, b, score_cutoff=bound))


_KERNELS: dict[str, Kernel] = {
    "python": levenshtein,
    "rapidfuzz": rapidfuzz_levenshtein,
}

KERNEL_NAMES = tuple(_KERNELS)


def get_kernel(name: str) -> Kernel:
    """Resolve a kernel by name ("python" or "rapidfuzz")."""
    try:
        return _KERNELS[name]
    except KeyError:
        raise ValueError(
            f"Unknown kernel {name!r}. Expected one of: {list(KERNEL_NAMES)}"
        ) from None
