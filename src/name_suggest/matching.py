"""Best-match selection ("did you mean?").

Given a query and a pool of candidates, pick the single candidate most likely
intended by the user.

Selection rules
---------------
1) The effective threshold is the explicit one when given (0 = exact match
   only), otherwise it is derived from the query by a `ThresholdPolicy`.
2) Candidates are scanned in the order the iterable yields them.
3) A candidate replaces the current winner only with a *strictly* smaller
   distance, so among equally close candidates the first one wins.
4) The winner is returned only if its distance is within the threshold.

Every kernel call is bounded by what could still win (the threshold, then one
less than the best distance so far), so far-away candidates are rejected
without computing their full distance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .distance import Kernel, get_kernel, levenshtein
from .threshold import DEFAULT_POLICY, ThresholdPolicy

logger = logging.getLogger(__name__)


def find_best_match(
    query: str,
    candidates: Iterable[str],
    explicit_threshold: int | None = None,
    *,
    policy: ThresholdPolicy = DEFAULT_POLICY,
    kernel: Kernel = levenshtein,
) -> str | None:
    """Return the candidate closest to `query`, or None.

    Args:
        query: The (possibly misspelled) input.
        candidates: Valid values, consumed once in iteration order.
        explicit_threshold: Maximum accepted distance. None means "derive it
            from the query using `policy`".
        policy: Implicit threshold policy.
        kernel: Edit distance kernel (see `name_suggest.distance`).

    Returns:
        The winning candidate, or None if the pool is empty or no candidate is
        within the threshold.
    """
    if explicit_threshold is not None:
        if explicit_threshold < 0:
            raise ValueError("explicit_threshold must be >= 0")
        threshold = explicit_threshold
    else:
        threshold = policy.threshold_for(query)

    best: str | None = None
    # Anything above the threshold can never be returned, so start just past it.
    best_distance = threshold + 1

    for candidate in candidates:
        if not isinstance(candidate, str):
            raise TypeError(
                f"Candidates must be str, got {type(candidate).__name__}: {candidate!r}"
            )

        bound = best_distance - 1
        distance = kernel(query, candidate, bound)
        if distance > bound:
            continue

        best = candidate
        best_distance = distance
        if distance == 0:
            # Nothing beats an exact match and ties keep the first one.
            break

    logger.debug(
        "find_best_match(query=%r, threshold=%d) -> %r (distance=%s)",
        query,
        threshold,
        best,
        best_distance if best is not None else None,
    )
    return best


@dataclass(frozen=True)
class Matcher:
    """A reusable best-match configuration (threshold policy + kernel).

    Matchers hold no mutable state, so one instance can be shared freely.
    """

    policy: ThresholdPolicy = DEFAULT_POLICY
    kernel: str = "python"
    _kernel_fn: Kernel = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Resolve eagerly so an unknown kernel name fails at construction time.
        object.__setattr__(self, "_kernel_fn", get_kernel(self.kernel))

    def distance(self, a: str, b: str, bound: int | None = None) -> int:
        return self._kernel_fn(a, b, bound)

    def find_best_match(
        self,
        query: str,
        candidates: Iterable[str],
        explicit_threshold: int | None = None,
    ) -> str | None:
        return find_best_match(
            query,
            candidates,
            explicit_threshold,
            policy=self.policy,
            kernel=self._kernel_fn,
        )


DEFAULT_MATCHER = Matcher()
