"""
Career event and achievement DTOs for Footy Career.

A CareerEvent is drawn from CAREER_EVENT_TEMPLATES between matches. Events with
choices stay pending until the player picks one; the rest resolve on the spot.
UnlockedAchievement is a one-shot record, appended once and never changed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from .constants import RARITY_WEIGHTS
from .errors import ValidationError


@dataclass
class CareerEvent:
    id: str
    template_id: str
    title: str
    description: str
    rarity: str
    round: int
    year: int
    effects: Optional[Dict[str, Any]] = None
    choices: List[Dict[str, Any]] = field(default_factory=list)
    resolved: bool = False
    choice_made: Optional[str] = None
    outcome: Optional[str] = None

    def __post_init__(self) -> None:
        if self.rarity not in RARITY_WEIGHTS:
            raise ValidationError(f"Unknown rarity {self.rarity!r}", {"field": "rarity"})

    @property
    def needs_choice(self) -> bool:
        return bool(self.choices)

    def choice(self, choice_id: str) -> Optional[Dict[str, Any]]:
        return next((c for c in self.choices if c["id"] == choice_id), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "template_id": self.template_id,
            "title": self.title,
            "description": self.description,
            "rarity": self.rarity,
            "round": self.round,
            "year": self.year,
            "effects": dict(self.effects) if self.effects is not None else None,
            "choices": [dict(c) for c in self.choices],
            "resolved": self.resolved,
            "choice_made": self.choice_made,
            "outcome": self.outcome,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CareerEvent":
        return cls(
            id=data["id"],
            template_id=data["template_id"],
            title=data.get("title", ""),
            description=data.get("description", ""),
            rarity=data["rarity"],
            round=data.get("round", 0),
            year=data.get("year", 0),
            effects=data.get("effects"),
            choices=[dict(c) for c in data.get("choices", [])],
            resolved=bool(data.get("resolved", False)),
            choice_made=data.get("choice_made"),
            outcome=data.get("outcome"),
        )


@dataclass(frozen=True)
class UnlockedAchievement:
    achievement_id: str
    name: str
    rarity: str
    round: int
    year: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "achievement_id": self.achievement_id,
            "name": self.name,
            "rarity": self.rarity,
            "round": self.round,
            "year": self.year,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UnlockedAchievement":
        return cls(
            achievement_id=data["achievement_id"],
            name=data.get("name", ""),
            rarity=data["rarity"],
            round=data.get("round", 0),
            year=data.get("year", 0),
        )
