"""
Domain service: randomized challenge construction.

A challenge is NUM_STATIONS stations placed at yardages drawn by the
PlacementSampler. Every station shares the same ring geometry and scores;
only the target distance varies. The challenge name combines the yardage
bounds with a short uid hashed from the drawn yardages.
"""
import hashlib
import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from itertools import islice
from typing import Callable, Optional, Sequence

import numpy as np

from fsx_challenge.domain.models import NUM_STATIONS, Challenge, Station
from fsx_challenge.domain.units import MILLI, Yards
from fsx_challenge.services.domain.placement_sampler import PlacementSampler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChallengeParameters:
    """Inputs for building a challenge."""

    dist_min: Yards
    """Inclusive lower bound for station distances"""

    dist_max: Yards
    """Exclusive upper bound for station distances"""

    min_gap: Yards = field(default_factory=lambda: Yards.new(10))
    """Minimum difference between consecutive station distances"""

    inner_ring: Yards = field(default_factory=lambda: Yards.new(8))
    mid_ring: Yards = field(default_factory=lambda: Yards.new(16))
    outer_ring: Yards = field(default_factory=lambda: Yards.new(24))

    inner_score: int = 5
    mid_score: int = 3
    outer_score: int = 1

    def __post_init__(self):
        for name in ("inner_score", "mid_score", "outer_score"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")


def derive_uid(yardages: Sequence[Yards]) -> int:
    """
    Derive a 32-bit identifier from a yardage sequence.

    Each milli-yard value is fed in order into a 64-bit BLAKE2b digest; the
    uid is the digest's low 32 bits.

    Args:
        yardages: Sampled yardages in emission order

    Returns:
        Unsigned 32-bit integer
    """
    digest = hashlib.blake2b(digest_size=8)
    for yards in yardages:
        digest.update(yards.milli.to_bytes(8, "little"))
    return int.from_bytes(digest.digest(), "little") & 0xFFFFFFFF


def _whole_yards(yards: Yards) -> int:
    rounded = (Decimal(yards.milli) / MILLI).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(rounded)


def format_challenge_name(dist_min: Yards, dist_max: Yards, uid: int) -> str:
    """Format e.g. ``"20 - 40 0a1b2c3d"``."""
    return f"{_whole_yards(dist_min)} - {_whole_yards(dist_max)} {uid:08x}"


class ChallengeBuilder:
    """
    Builds randomized challenges.

    The random source is injected through ``rng_factory`` so that each build
    gets its own generator; tests pass a seeded factory.
    """

    def __init__(
        self,
        rng_factory: Callable[[], object] = np.random.default_rng,
        max_attempts: Optional[int] = None,
    ):
        """
        Args:
            rng_factory: Zero-argument callable returning a fresh random source
            max_attempts: Placement retry cap per station (None for unbounded)
        """
        self.rng_factory = rng_factory
        self.max_attempts = max_attempts

    def sample_yardages(self, params: ChallengeParameters) -> list[Yards]:
        sampler = PlacementSampler(
            params.dist_min,
            params.dist_max,
            params.min_gap,
            rng=self.rng_factory(),
            max_attempts=self.max_attempts,
        )
        return list(islice(sampler, NUM_STATIONS))

    def build(self, params: ChallengeParameters) -> Challenge:
        """
        Build a challenge with freshly sampled station distances.

        Args:
            params: Distance range, gap, ring geometry and scores

        Returns:
            Challenge with NUM_STATIONS stations

        Raises:
            PlacementError: If the retry cap is set and exceeded
            ValueError: If the distance range is empty
        """
        return self.assemble(self.sample_yardages(params), params)

    def assemble(self, yardages: Sequence[Yards], params: ChallengeParameters) -> Challenge:
        """Build a challenge from an already-sampled yardage sequence."""
        inner = params.inner_ring.to_meters()
        mid = params.mid_ring.to_meters()
        outer = params.outer_ring.to_meters()

        stations = []
        for index, yards in enumerate(yardages):
            distance = yards.to_meters()
            stations.append(Station(
                array_index=index,
                desc="1",
                station_num=index + 1,
                skill_type=0,
                num_shots_am=1,
                num_shots_pro=1,
                num_shots_to_use=1,
                trgt_dist_women=distance,
                trgt_dist_am=distance,
                trgt_dist_pro=distance,
                inner_ring_diam_am=inner,
                mid_ring_diam_am=mid,
                outer_ring_diam_am=outer,
                inner_ring_diam_pro=inner,
                mid_ring_diam_pro=mid,
                outer_ring_diam_pro=outer,
                inner_score=params.inner_score,
                mid_score=params.mid_score,
                outer_score=params.outer_score,
                obstacle=0,
                obstacle_dist=Yards.new(0).to_meters(),
            ))

        uid = derive_uid(yardages)
        name = format_challenge_name(params.dist_min, params.dist_max, uid)
        logger.debug(f"Assembled challenge {name!r} with {len(stations)} stations")

        return Challenge(name=name, num_stations=len(stations), stations=stations)
