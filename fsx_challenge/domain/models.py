"""
Domain models for FSX Challenge course definitions.

These models represent the core domain entities and should be independent
of any infrastructure concerns (HTTP, XML encoding, etc.). Field order is
significant: it is the element order of the exported document.
"""
from typing import List

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_pascal

from fsx_challenge.domain.units import Meters


NUM_STATIONS = 20


class Station(BaseModel):
    """A single target position within a challenge."""
    array_index: int = Field(ge=0, description="0-based position in the challenge")
    desc: str = "1"
    station_num: int = Field(ge=1, description="1-based position in the challenge")
    skill_type: int = 0
    num_shots_am: int = 1
    num_shots_pro: int = 1
    num_shots_to_use: int = 1
    trgt_dist_women: Meters
    trgt_dist_am: Meters
    trgt_dist_pro: Meters
    inner_ring_diam_am: Meters
    mid_ring_diam_am: Meters
    outer_ring_diam_am: Meters
    inner_ring_diam_pro: Meters
    mid_ring_diam_pro: Meters
    outer_ring_diam_pro: Meters
    inner_score: int = Field(ge=0)
    mid_score: int = Field(ge=0)
    outer_score: int = Field(ge=0)
    obstacle: int = 0
    obstacle_dist: Meters = Meters(0)

    class Config:
        alias_generator = to_pascal
        populate_by_name = True
        frozen = True


class Challenge(BaseModel):
    """A named, numbered set of stations."""
    name: str
    num_stations: int = NUM_STATIONS
    stations: List[Station] = Field(alias="Station")

    @model_validator(mode="after")
    def check_station_numbering(self) -> "Challenge":
        if len(self.stations) != self.num_stations:
            raise ValueError(
                f"NumStations is {self.num_stations} but {len(self.stations)} stations are present"
            )
        for index, station in enumerate(self.stations):
            if station.array_index != index or station.station_num != index + 1:
                raise ValueError(
                    f"Station {index} is numbered ArrayIndex={station.array_index}, "
                    f"StationNum={station.station_num}"
                )
        return self

    class Config:
        alias_generator = to_pascal
        populate_by_name = True
        frozen = True
