"""
League configuration consumed when a new career starts.
"""
from dataclasses import dataclass, asdict
from typing import Dict, Any

from .constants import (
    ATTRIBUTE_CAP,
    FINALS_FORMATS,
    FINALS_SIZES,
    INITIAL_ATTRIBUTE_POINTS,
    SEASON_LENGTH,
    STARTING_AGE,
    TEAM_COUNT,
)
from .errors import ConfigurationError


@dataclass
class CareerConfig:
    season_length: int = SEASON_LENGTH
    starting_attribute_points: int = INITIAL_ATTRIBUTE_POINTS
    attribute_cap: int = ATTRIBUTE_CAP
    starting_age: int = STARTING_AGE
    finals_size: int = 4
    finals_format: str = "single"
    team_count: int = TEAM_COUNT
    seed: int | None = None

    def validate(self) -> "CareerConfig":
        if self.season_length < 1:
            raise ConfigurationError(f"season_length must be >= 1, got {self.season_length}")
        if self.team_count < 2:
            raise ConfigurationError(f"team_count must be >= 2, got {self.team_count}")
        if self.finals_size not in FINALS_SIZES:
            raise ConfigurationError(f"finals_size must be one of {FINALS_SIZES}, got {self.finals_size}")
        if self.finals_size > self.team_count:
            raise ConfigurationError(
                f"finals_size {self.finals_size} exceeds team_count {self.team_count}"
            )
        if self.finals_format not in FINALS_FORMATS:
            raise ConfigurationError(f"finals_format must be one of {FINALS_FORMATS}")
        if self.finals_format == "double_chance" and self.finals_size != 4:
            raise ConfigurationError("double_chance finals need a top-4 bracket")
        if not 10 <= self.attribute_cap <= 99:
            raise ConfigurationError("attribute_cap must be within 10-99")
        if self.starting_attribute_points < 0:
            raise ConfigurationError("starting_attribute_points must be >= 0")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CareerConfig":
        known = {k: data[k] for k in cls.__dataclass_fields__ if k in data}
        return cls(**known)
