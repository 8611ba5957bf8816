"""
Unit-typed length quantities.

Yards and Meters are stored as non-negative fixed-point integers counting
thousandths of the named unit. The two types are deliberately unrelated:
converting between them is always explicit, and they never compare equal.
"""
import math
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


YARDS_PER_METER = 1.09361
MILLI = 1000


def _check_milli(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"milli-unit value must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"length cannot be negative: {value}")


def _milli_from_real(x: float) -> int:
    if not math.isfinite(x) or x < 0:
        raise ValueError(f"length must be a finite non-negative number, got {x}")
    scaled = x * float(MILLI)
    if not math.isfinite(scaled):
        raise ValueError(f"length out of range: {x}")
    return int(scaled)


def _quantity_schema(cls: type, from_real: Callable[[float], Any]) -> core_schema.CoreSchema:
    # Parsed as a real number, stored as milli-units, rendered back as a real.
    from_float = core_schema.no_info_after_validator_function(
        from_real,
        core_schema.float_schema(ge=0, allow_inf_nan=False),
    )
    return core_schema.json_or_python_schema(
        json_schema=from_float,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_float]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            lambda quantity: quantity.as_real(),
            return_schema=core_schema.float_schema(),
        ),
    )


@dataclass(frozen=True, order=True)
class Yards:
    """A length in yards, held as an integer number of milli-yards."""

    milli: int

    def __post_init__(self):
        _check_milli(self.milli)

    @classmethod
    def new(cls, value: int) -> "Yards":
        """Whole yards."""
        return cls(value * MILLI)

    @classmethod
    def from_real(cls, x: float) -> "Yards":
        """Fractional yards, truncated toward zero to the nearest milli-yard."""
        return cls(_milli_from_real(x))

    @classmethod
    def sample_uniform(cls, low: "Yards", high: "Yards", rng) -> "Yards":
        """
        Draw uniformly from the half-open range [low, high).

        Args:
            low: Inclusive lower bound
            high: Exclusive upper bound
            rng: Random source exposing ``integers(low, high)``
                (e.g. ``numpy.random.Generator``)

        Raises:
            ValueError: If the range is empty
        """
        if low >= high:
            raise ValueError(
                f"Cannot sample from empty yardage range [{low.as_real()}, {high.as_real()})"
            )
        return cls(int(rng.integers(low.milli, high.milli)))

    def as_real(self) -> float:
        return self.milli / MILLI

    def to_meters(self) -> "Meters":
        return Meters(int(self.milli / YARDS_PER_METER))

    def abs_diff(self, other: "Yards") -> "Yards":
        return Yards(abs(self.milli - other.milli))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _quantity_schema(cls, cls.from_real)


@dataclass(frozen=True, order=True)
class Meters:
    """A length in meters, held as an integer number of milli-meters."""

    milli: int

    def __post_init__(self):
        _check_milli(self.milli)

    @classmethod
    def new(cls, value: int) -> "Meters":
        return cls(value * MILLI)

    @classmethod
    def from_real(cls, x: float) -> "Meters":
        return cls(_milli_from_real(x))

    def as_real(self) -> float:
        return self.milli / MILLI

    def to_yards(self) -> Yards:
        # Scales the milli-meter count directly, mirroring Yards.to_meters.
        return Yards(int(self.milli * YARDS_PER_METER))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _quantity_schema(cls, cls.from_real)
