"""
API request models using Pydantic.
"""
from pydantic import BaseModel, Field, field_validator

from fsx_challenge.domain.units import Yards
from fsx_challenge.infrastructure.api_constants import ChallengeDefaults, ChallengeLimits
from fsx_challenge.services.domain.challenge_builder import ChallengeParameters


class ChallengeQuery(BaseModel):
    """Query string for the challenge endpoint. Lengths are in yards."""
    min: Yards = Field(
        description="Minimum station distance (inclusive)",
        examples=[20],
    )
    max: Yards = Field(
        description="Maximum station distance (exclusive)",
        examples=[40],
    )
    min_gap: Yards = Field(
        default=Yards.new(ChallengeDefaults.MIN_GAP),
        description="Minimum difference between consecutive station distances",
    )
    inner_ring: Yards = Field(default=Yards.new(ChallengeDefaults.INNER_RING))
    mid_ring: Yards = Field(default=Yards.new(ChallengeDefaults.MID_RING))
    outer_ring: Yards = Field(default=Yards.new(ChallengeDefaults.OUTER_RING))
    inner_score: int = Field(default=ChallengeDefaults.INNER_SCORE, ge=0)
    mid_score: int = Field(default=ChallengeDefaults.MID_SCORE, ge=0)
    outer_score: int = Field(default=ChallengeDefaults.OUTER_SCORE, ge=0)

    class Config:
        frozen = True

    @field_validator("min", "max", "min_gap", "inner_ring", "mid_ring", "outer_ring")
    @classmethod
    def check_yardage_limit(cls, value: Yards) -> Yards:
        if value > Yards.new(ChallengeLimits.MAX_YARDAGE):
            raise ValueError(f"must be at most {ChallengeLimits.MAX_YARDAGE} yards")
        return value

    def to_parameters(self) -> ChallengeParameters:
        """Convert to the builder's parameter bundle."""
        return ChallengeParameters(
            dist_min=self.min,
            dist_max=self.max,
            min_gap=self.min_gap,
            inner_ring=self.inner_ring,
            mid_ring=self.mid_ring,
            outer_ring=self.outer_ring,
            inner_score=self.inner_score,
            mid_score=self.mid_score,
            outer_score=self.outer_score,
        )
