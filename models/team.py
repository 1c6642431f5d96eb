"""
Team DTO for Footy Career.
Teams have a stadium, colours, a 22-player roster and standings fields.
Standings are never edited by hand: the ladder calculator rebuilds them from played fixtures.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Tuple

from .constants import TIER_LOCAL


@dataclass
class Stadium:
    name: str = ""
    capacity: int = 0
    suburb: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "capacity": self.capacity, "suburb": self.suburb}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Stadium":
        return cls(
            name=data.get("name", ""),
            capacity=data.get("capacity", 0),
            suburb=data.get("suburb", ""),
        )


@dataclass
class RosterPlayer:
    """A CPU-controlled squad member. The user's own slot has is_user=True."""

    id: str
    name: str
    position: str
    sub_position: str
    rating: int
    is_user: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "sub_position": self.sub_position,
            "rating": self.rating,
            "is_user": self.is_user,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RosterPlayer":
        return cls(
            id=data["id"],
            name=data["name"],
            position=data["position"],
            sub_position=data.get("sub_position", ""),
            rating=data["rating"],
            is_user=bool(data.get("is_user", False)),
        )


@dataclass
class Team:
    id: str
    name: str
    tier: str = TIER_LOCAL
    colors: Tuple[str, str] = ("#000000", "#FFFFFF")
    stadium: Stadium = field(default_factory=Stadium)
    coach: str = ""
    roster: List[RosterPlayer] = field(default_factory=list)
    # Derived standings (see simulation.ladder.compute_ladder)
    wins: int = 0
    losses: int = 0
    draws: int = 0
    points_for: int = 0
    points_against: int = 0
    percentage: float = 0.0
    points: int = 0

    @property
    def played(self) -> int:
        return self.wins + self.losses + self.draws

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "tier": self.tier,
            "colors": list(self.colors),
            "stadium": self.stadium.to_dict(),
            "coach": self.coach,
            "roster": [p.to_dict() for p in self.roster],
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "percentage": round(self.percentage, 2),
            "points": self.points,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        return cls(
            id=data["id"],
            name=data["name"],
            tier=data.get("tier", TIER_LOCAL),
            colors=tuple(data.get("colors", ("#000000", "#FFFFFF"))),
            stadium=Stadium.from_dict(data.get("stadium", {})),
            coach=data.get("coach", ""),
            roster=[RosterPlayer.from_dict(p) for p in data.get("roster", [])],
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            draws=data.get("draws", 0),
            points_for=data.get("points_for", 0),
            points_against=data.get("points_against", 0),
            percentage=data.get("percentage", 0.0),
            points=data.get("points", 0),
        )
