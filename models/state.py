"""
The authoritative game state aggregate and its byte-level persistence boundary.

GameState is owned by simulation.career.CareerEngine; subsystems only see copies.
serialize() produces UTF-8 JSON tagged with a format version; deserialize() either
returns a complete GameState or raises CorruptSaveError.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from .config import CareerConfig
from .draft import DraftClass
from .errors import CorruptSaveError, ValidationError
from .fixture import Fixture
from .player import PlayerProfile, PlayerStats
from .team import Team

FORMAT_VERSION = 1

PHASE_NEW = "new"
PHASE_DRAFT = "draft"
PHASE_SEASON = "season"
PHASE_RETIRED = "retired"
PHASES = (PHASE_NEW, PHASE_DRAFT, PHASE_SEASON, PHASE_RETIRED)


@dataclass
class HallOfFameRecord:
    """Snapshot of a finished career."""

    name: str
    position: str
    retired_year: int
    retired_age: int
    seasons: int
    level: int
    career_stats: PlayerStats
    clubs: List[str] = field(default_factory=list)
    milestones: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "position": self.position,
            "retired_year": self.retired_year,
            "retired_age": self.retired_age,
            "seasons": self.seasons,
            "level": self.level,
            "career_stats": self.career_stats.to_dict(),
            "clubs": list(self.clubs),
            "milestones": self.milestones,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HallOfFameRecord":
        return cls(
            name=data["name"],
            position=data["position"],
            retired_year=data["retired_year"],
            retired_age=data["retired_age"],
            seasons=data.get("seasons", 0),
            level=data.get("level", 1),
            career_stats=PlayerStats.from_dict(data.get("career_stats", {})),
            clubs=list(data.get("clubs", [])),
            milestones=data.get("milestones", 0),
        )


@dataclass
class GameState:
    phase: str = PHASE_NEW
    year: int = 1
    round: int = 1
    config: CareerConfig = field(default_factory=CareerConfig)
    profile: Optional[PlayerProfile] = None
    teams: List[Team] = field(default_factory=list)
    fixtures: List[Fixture] = field(default_factory=list)
    draft: Optional[DraftClass] = None
    # player_id -> {"name", "team_id", "votes", "goals", "disposals"} for the current season
    season_tallies: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    hall_of_fame: List[HallOfFameRecord] = field(default_factory=list)
    rng: Dict[str, Any] = field(default_factory=dict)
    seq: int = 0

    def __post_init__(self) -> None:
        if self.phase not in PHASES:
            raise ValidationError(f"Unknown phase {self.phase!r}")
        if self.year < 1 or self.round < 1:
            raise ValidationError("year and round must be >= 1")
        if self.phase in (PHASE_DRAFT, PHASE_SEASON) and self.profile is None:
            raise ValidationError(f"Phase {self.phase!r} requires a player profile")

    def next_id(self, prefix: str) -> str:
        self.seq += 1
        return f"{prefix}-{self.year}-{self.round}-{self.seq}"

    def team(self, team_id: str) -> Optional[Team]:
        return next((t for t in self.teams if t.id == team_id), None)

    def team_by_name(self, name: str) -> Optional[Team]:
        return next((t for t in self.teams if t.name == name), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase,
            "year": self.year,
            "round": self.round,
            "config": self.config.to_dict(),
            "profile": self.profile.to_dict() if self.profile else None,
            "teams": [t.to_dict() for t in self.teams],
            "fixtures": [f.to_dict() for f in self.fixtures],
            "draft": self.draft.to_dict() if self.draft else None,
            "season_tallies": {k: dict(v) for k, v in self.season_tallies.items()},
            "hall_of_fame": [h.to_dict() for h in self.hall_of_fame],
            "rng": self.rng,
            "seq": self.seq,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        profile = data.get("profile")
        draft = data.get("draft")
        return cls(
            phase=data["phase"],
            year=data["year"],
            round=data["round"],
            config=CareerConfig.from_dict(data.get("config", {})),
            profile=PlayerProfile.from_dict(profile) if profile else None,
            teams=[Team.from_dict(t) for t in data.get("teams", [])],
            fixtures=[Fixture.from_dict(f) for f in data.get("fixtures", [])],
            draft=DraftClass.from_dict(draft) if draft else None,
            season_tallies={k: dict(v) for k, v in data.get("season_tallies", {}).items()},
            hall_of_fame=[HallOfFameRecord.from_dict(h) for h in data.get("hall_of_fame", [])],
            rng=dict(data.get("rng", {})),
            seq=data.get("seq", 0),
        )


def serialize(state: GameState) -> bytes:
    """Encode the full game state as versioned JSON bytes."""
    envelope = {"format_version": FORMAT_VERSION, "state": state.to_dict()}
    return json.dumps(envelope, sort_keys=True, separators=(",", ":")).encode("utf-8")


def deserialize(payload: bytes) -> GameState:
    """Rebuild a GameState from serialize() output.

    Raises
    ------
    CorruptSaveError
        If the payload is not valid JSON, has the wrong version, or any part of
        the state fails to rebuild. No partially-initialised state is returned.
    """
    if not isinstance(payload, (bytes, bytearray)):
        raise CorruptSaveError("Save payload must be bytes", {"type": type(payload).__name__})
    try:
        envelope = json.loads(bytes(payload).decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CorruptSaveError("Save payload is not valid JSON", {"reason": str(exc)}) from exc
    if not isinstance(envelope, dict) or "state" not in envelope:
        raise CorruptSaveError("Save payload is missing the state envelope")
    version = envelope.get("format_version")
    if version != FORMAT_VERSION:
        raise CorruptSaveError(f"Unsupported save format version {version!r}", {"version": version})

    from simulation.rng import RandomOutcomeProvider

    try:
        state = GameState.from_dict(envelope["state"])
        if state.rng:
            RandomOutcomeProvider.from_dict(state.rng)
    except (LookupError, TypeError, ValueError, AttributeError) as exc:
        raise CorruptSaveError("Save payload has missing or invalid fields", {"reason": str(exc)}) from exc
    return state
