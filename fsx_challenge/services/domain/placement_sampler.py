"""
Domain service: random station placement with a minimum adjacent gap.
"""
import logging
from typing import Iterator, Optional

import numpy as np

from fsx_challenge.domain.units import Yards

logger = logging.getLogger(__name__)


class PlacementError(Exception):
    """Raised when no acceptable yardage is found within the retry cap."""
    pass


class PlacementSampler:
    """
    Lazy, unbounded sequence of yardages drawn uniformly from [lo, hi).

    Each emitted value differs from the previously emitted one by at least
    ``min_gap``. Only adjacent values are constrained; values further apart
    in the sequence may repeat.

    With ``max_attempts=None`` a candidate is redrawn until it fits, so an
    infeasible configuration (range narrower than twice the gap) never
    returns. Setting ``max_attempts`` turns that case into a PlacementError.
    """

    def __init__(
        self,
        lo: Yards,
        hi: Yards,
        min_gap: Yards,
        rng=None,
        max_attempts: Optional[int] = None,
    ):
        """
        Args:
            lo: Inclusive lower bound
            hi: Exclusive upper bound
            min_gap: Minimum difference between consecutive values
            rng: Random source exposing ``integers(low, high)``; a freshly
                seeded numpy Generator when omitted
            max_attempts: Draws allowed per emitted value, unbounded if None
        """
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.lo = lo
        self.hi = hi
        self.min_gap = min_gap
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts
        self.last: Optional[Yards] = None

    def __iter__(self) -> Iterator[Yards]:
        return self

    def __next__(self) -> Yards:
        attempts = 0
        while True:
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise PlacementError(
                    f"No yardage in [{self.lo.as_real()}, {self.hi.as_real()}) "
                    f"at least {self.min_gap.as_real()} from {self.last.as_real()} "
                    f"after {attempts} attempts"
                )
            attempts += 1

            candidate = Yards.sample_uniform(self.lo, self.hi, self.rng)
            if self.last is not None and self.last.abs_diff(candidate) < self.min_gap:
                continue

            if attempts > 1:
                logger.debug(f"Placed {candidate.as_real()} yd after {attempts} draws")
            self.last = candidate
            return candidate


def yards_within(
    lo: Yards,
    hi: Yards,
    min_gap: Yards,
    rng=None,
    max_attempts: Optional[int] = None,
) -> PlacementSampler:
    """Convenience constructor for a PlacementSampler over [lo, hi)."""
    return PlacementSampler(lo, hi, min_gap, rng=rng, max_attempts=max_attempts)
