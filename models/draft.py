"""
Draft DTOs for Footy Career.
A DraftClass holds prospects ordered by draft_rank and picks ordered by pick_number.
Picks are filled strictly in order and each prospect is taken at most once.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from .errors import ValidationError


@dataclass
class DraftProspect:
    id: str
    name: str
    age: int
    state: str
    position: str
    sub_position: str
    rating: int
    potential: int
    draft_rank: int
    bio: str = ""
    is_user: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "state": self.state,
            "position": self.position,
            "sub_position": self.sub_position,
            "rating": self.rating,
            "potential": self.potential,
            "draft_rank": self.draft_rank,
            "bio": self.bio,
            "is_user": self.is_user,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DraftProspect":
        return cls(**{k: data[k] for k in cls.__dataclass_fields__ if k in data})


@dataclass
class DraftPick:
    round: int
    pick_number: int
    team_id: str
    team_name: str
    prospect_id: Optional[str] = None  # None = on the clock / not yet made

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round": self.round,
            "pick_number": self.pick_number,
            "team_id": self.team_id,
            "team_name": self.team_name,
            "prospect_id": self.prospect_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DraftPick":
        return cls(
            round=data["round"],
            pick_number=data["pick_number"],
            team_id=data["team_id"],
            team_name=data["team_name"],
            prospect_id=data.get("prospect_id"),
        )


@dataclass
class DraftClass:
    year: int
    tier: str
    prospects: List[DraftProspect] = field(default_factory=list)
    picks: List[DraftPick] = field(default_factory=list)
    completed: bool = False

    def __post_init__(self) -> None:
        numbers = [p.pick_number for p in self.picks]
        if any(b <= a for a, b in zip(numbers, numbers[1:])):
            raise ValidationError("Pick numbers must be strictly increasing")
        taken = [p.prospect_id for p in self.picks if p.prospect_id is not None]
        if len(taken) != len(set(taken)):
            raise ValidationError("A prospect can only be drafted once")
        filled = [p.prospect_id is not None for p in self.picks]
        if any(later and not earlier for earlier, later in zip(filled, filled[1:])):
            raise ValidationError("Picks must be filled in order")

    def current_pick(self) -> Optional[DraftPick]:
        """The pick on the clock, or None when every pick is made."""
        for pick in self.picks:
            if pick.prospect_id is None:
                return pick
        return None

    def drafted_ids(self) -> set:
        return {p.prospect_id for p in self.picks if p.prospect_id is not None}

    def available(self) -> List[DraftProspect]:
        taken = self.drafted_ids()
        return [p for p in self.prospects if p.id not in taken]

    def prospect(self, prospect_id: str) -> Optional[DraftProspect]:
        return next((p for p in self.prospects if p.id == prospect_id), None)

    def pick_for(self, prospect_id: str) -> Optional[DraftPick]:
        return next((p for p in self.picks if p.prospect_id == prospect_id), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "tier": self.tier,
            "prospects": [p.to_dict() for p in self.prospects],
            "picks": [p.to_dict() for p in self.picks],
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DraftClass":
        return cls(
            year=data["year"],
            tier=data["tier"],
            prospects=[DraftProspect.from_dict(p) for p in data.get("prospects", [])],
            picks=[DraftPick.from_dict(p) for p in data.get("picks", [])],
            completed=bool(data.get("completed", False)),
        )
