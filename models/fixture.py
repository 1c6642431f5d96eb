"""
Fixture and match result DTOs for Footy Career.

ScoreLine holds one side's goals/behinds (total = goals*6 + behinds) with a per-quarter
breakdown. PerformerStats is one player's stat line. MatchResult wraps both sides plus
votes, top performers and any milestones the user reached. Fixture is a scheduled game
that moves from unplayed to played exactly once.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from .constants import BEHIND_POINTS, GOAL_POINTS, MATCH_TYPE_LEAGUE, VOTE_WEIGHTS
from .errors import ValidationError
from .player import Injury, Milestone


@dataclass
class ScoreLine:
    goals: int = 0
    behinds: int = 0
    quarters: List[int] = field(default_factory=list)  # cumulative points at each break

    @property
    def total(self) -> int:
        return self.goals * GOAL_POINTS + self.behinds * BEHIND_POINTS

    def __str__(self) -> str:
        return f"{self.goals}.{self.behinds} ({self.total})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "goals": self.goals,
            "behinds": self.behinds,
            "total": self.total,
            "quarters": list(self.quarters),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreLine":
        line = cls(goals=data["goals"], behinds=data["behinds"], quarters=list(data.get("quarters", [])))
        if line.goals < 0 or line.behinds < 0:
            raise ValidationError("Score cannot be negative")
        return line


@dataclass
class PerformerStats:
    """One player's line for a single match."""

    player_id: str = ""
    name: str = ""
    team_id: str = ""
    disposals: int = 0
    tackles: int = 0
    goals: int = 0
    behinds: int = 0
    is_user: bool = False

    @property
    def performance_score(self) -> float:
        return (
            self.disposals * VOTE_WEIGHTS["disposals"]
            + self.tackles * VOTE_WEIGHTS["tackles"]
            + self.goals * VOTE_WEIGHTS["goals"]
            + self.behinds * VOTE_WEIGHTS["behinds"]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "name": self.name,
            "team_id": self.team_id,
            "disposals": self.disposals,
            "tackles": self.tackles,
            "goals": self.goals,
            "behinds": self.behinds,
            "is_user": self.is_user,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PerformerStats":
        return cls(**{k: data[k] for k in cls.__dataclass_fields__ if k in data})


@dataclass
class MatchResult:
    home: ScoreLine = field(default_factory=ScoreLine)
    away: ScoreLine = field(default_factory=ScoreLine)
    winner_id: Optional[str] = None  # None for a draw
    summary: str = ""
    user_stats: Optional[PerformerStats] = None
    top_performers: List[PerformerStats] = field(default_factory=list)
    votes: Dict[str, int] = field(default_factory=dict)  # player_id -> 3/2/1
    milestones: List[Milestone] = field(default_factory=list)
    user_injury: Optional[Injury] = None
    # Full box score from the simulation run; not persisted with the fixture
    performers: List[PerformerStats] = field(default_factory=list, repr=False, compare=False)

    @property
    def is_draw(self) -> bool:
        return self.winner_id is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "home": self.home.to_dict(),
            "away": self.away.to_dict(),
            "winner_id": self.winner_id,
            "summary": self.summary,
            "user_stats": self.user_stats.to_dict() if self.user_stats else None,
            "top_performers": [p.to_dict() for p in self.top_performers],
            "votes": dict(self.votes),
            "milestones": [m.to_dict() for m in self.milestones],
            "user_injury": self.user_injury.to_dict() if self.user_injury else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        user = data.get("user_stats")
        return cls(
            home=ScoreLine.from_dict(data["home"]),
            away=ScoreLine.from_dict(data["away"]),
            winner_id=data.get("winner_id"),
            summary=data.get("summary", ""),
            user_stats=PerformerStats.from_dict(user) if user else None,
            top_performers=[PerformerStats.from_dict(p) for p in data.get("top_performers", [])],
            votes={k: int(v) for k, v in data.get("votes", {}).items()},
            milestones=[Milestone.from_dict(m) for m in data.get("milestones", [])],
            user_injury=Injury.from_dict(data["user_injury"]) if data.get("user_injury") else None,
        )


@dataclass
class Fixture:
    round: int
    home_team_id: str
    away_team_id: str
    match_type: str = MATCH_TYPE_LEAGUE
    played: bool = False
    result: Optional[MatchResult] = None

    def __post_init__(self) -> None:
        if self.round < 1:
            raise ValidationError(f"Round must be >= 1, got {self.round}", {"field": "round"})
        if self.home_team_id == self.away_team_id:
            raise ValidationError("A team cannot play itself", {"team_id": self.home_team_id})
        if self.played != (self.result is not None):
            raise ValidationError("Played fixtures must carry a result and unplayed ones none")

    @property
    def is_final(self) -> bool:
        return self.match_type != MATCH_TYPE_LEAGUE

    def involves(self, team_id: str) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    def record_result(self, result: MatchResult) -> None:
        """Mark the fixture played. Results are immutable once recorded."""
        if self.played:
            raise ValidationError(
                f"Fixture round {self.round} {self.home_team_id} v {self.away_team_id} already played"
            )
        self.result = result
        self.played = True

    def loser_id(self) -> Optional[str]:
        if not self.played or self.result is None or self.result.winner_id is None:
            return None
        if self.result.winner_id == self.home_team_id:
            return self.away_team_id
        return self.home_team_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round": self.round,
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "match_type": self.match_type,
            "played": self.played,
            "result": self.result.to_dict() if self.result else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Fixture":
        result = data.get("result")
        return cls(
            round=data["round"],
            home_team_id=data["home_team_id"],
            away_team_id=data["away_team_id"],
            match_type=data.get("match_type", MATCH_TYPE_LEAGUE),
            played=bool(data.get("played", False)),
            result=MatchResult.from_dict(result) if result else None,
        )
