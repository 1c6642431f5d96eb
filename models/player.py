"""
Player DTOs for Footy Career.
PlayerProfile is the user's athlete: 7 trainable attributes bounded by a fixed
potential, resource pools (energy, morale, skill points, wallet), contract,
career/season stat counters, milestones, media reputation and login streak.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Any, List, Optional

from .constants import (
    ATTRIBUTES,
    ATTRIBUTE_MIN,
    ATTRIBUTE_CAP,
    CHEMISTRY_MAX,
    CHEMISTRY_START,
    DEFAULT_POTENTIAL,
    DEFAULT_SUB_POSITION,
    ENERGY_MAX,
    FOLLOWERS_START,
    MORALE_MAX,
    POSITIONS,
    REPUTATION_MAX,
    REPUTATION_START,
    REPUTATION_TIERS,
    STARTING_AGE,
    TIERS,
    TIER_LOCAL,
)
from .errors import ValidationError


def _check_range(name: str, value: int, lo: int, hi: int | None = None) -> None:
    if value < lo or (hi is not None and value > hi):
        bound = f"[{lo}, {hi}]" if hi is not None else f">= {lo}"
        raise ValidationError(f"{name} must be {bound}, got {value}", {"field": name, "value": value})


@dataclass
class Injury:
    name: str
    weeks_remaining: int

    def __post_init__(self) -> None:
        _check_range("weeks_remaining", self.weeks_remaining, 1)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "weeks_remaining": self.weeks_remaining}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Injury":
        return cls(name=data["name"], weeks_remaining=data["weeks_remaining"])


@dataclass
class Contract:
    club_name: str = ""
    salary: int = 0
    tier: str = TIER_LOCAL
    years_left: int = 0

    def __post_init__(self) -> None:
        _check_range("salary", self.salary, 0)
        _check_range("years_left", self.years_left, 0)
        if self.tier not in TIERS:
            raise ValidationError(f"Unknown tier {self.tier!r}", {"field": "tier"})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "club_name": self.club_name,
            "salary": self.salary,
            "tier": self.tier,
            "years_left": self.years_left,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Contract":
        return cls(
            club_name=data.get("club_name", ""),
            salary=data.get("salary", 0),
            tier=data.get("tier", TIER_LOCAL),
            years_left=data.get("years_left", 0),
        )


@dataclass
class PlayerStats:
    """Counting stats. Only ever incremented; season stats reset at season rollover."""

    matches: int = 0
    goals: int = 0
    behinds: int = 0
    disposals: int = 0
    tackles: int = 0
    votes: int = 0
    premierships: int = 0
    awards: List[str] = field(default_factory=list)

    COUNTERS = ("matches", "goals", "behinds", "disposals", "tackles", "votes", "premierships")

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {k: getattr(self, k) for k in self.COUNTERS}
        d["awards"] = list(self.awards)
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerStats":
        stats = cls(**{k: int(data.get(k, 0)) for k in cls.COUNTERS})
        stats.awards = list(data.get("awards", []))
        for k in cls.COUNTERS:
            _check_range(k, getattr(stats, k), 0)
        return stats


@dataclass(frozen=True)
class Milestone:
    """A career stat crossing a fixed threshold. Immutable once recorded."""

    stat: str
    threshold: int
    description: str
    achieved_round: int
    achieved_year: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stat": self.stat,
            "threshold": self.threshold,
            "description": self.description,
            "achieved_round": self.achieved_round,
            "achieved_year": self.achieved_year,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Milestone":
        return cls(
            stat=data["stat"],
            threshold=data["threshold"],
            description=data["description"],
            achieved_round=data["achieved_round"],
            achieved_year=data["achieved_year"],
        )


@dataclass
class MediaEvent:
    id: str
    type: str
    title: str
    description: str
    reputation_impact: int = 0
    fan_impact: int = 0
    round: int = 0
    year: int = 0
    has_responded: bool = False
    response: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "reputation_impact": self.reputation_impact,
            "fan_impact": self.fan_impact,
            "round": self.round,
            "year": self.year,
            "has_responded": self.has_responded,
            "response": self.response,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MediaEvent":
        return cls(
            id=data["id"],
            type=data["type"],
            title=data.get("title", ""),
            description=data.get("description", ""),
            reputation_impact=data.get("reputation_impact", 0),
            fan_impact=data.get("fan_impact", 0),
            round=data.get("round", 0),
            year=data.get("year", 0),
            has_responded=bool(data.get("has_responded", False)),
            response=data.get("response"),
        )


def reputation_tier(score: int) -> str:
    """Map a 0-100 reputation score to its named tier."""
    for threshold, tier in REPUTATION_TIERS:
        if score >= threshold:
            return tier
    return REPUTATION_TIERS[-1][1]


@dataclass
class MediaReputation:
    score: int = REPUTATION_START
    fan_followers: int = FOLLOWERS_START
    events: List[MediaEvent] = field(default_factory=list)
    fan_milestones: List[int] = field(default_factory=list)  # unlocked thresholds, ascending
    total_posts: int = 0

    def __post_init__(self) -> None:
        _check_range("reputation score", self.score, 0, REPUTATION_MAX)
        _check_range("fan_followers", self.fan_followers, 0)

    @property
    def tier(self) -> str:
        return reputation_tier(self.score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "tier": self.tier,
            "fan_followers": self.fan_followers,
            "events": [e.to_dict() for e in self.events],
            "fan_milestones": list(self.fan_milestones),
            "total_posts": self.total_posts,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MediaReputation":
        return cls(
            score=data.get("score", REPUTATION_START),
            fan_followers=data.get("fan_followers", FOLLOWERS_START),
            events=[MediaEvent.from_dict(e) for e in data.get("events", [])],
            fan_milestones=list(data.get("fan_milestones", [])),
            total_posts=data.get("total_posts", 0),
        )


@dataclass
class DailyRewards:
    last_claim_date: Optional[date] = None
    streak: int = 1
    total_logins: int = 0

    def __post_init__(self) -> None:
        _check_range("streak", self.streak, 1)
        _check_range("total_logins", self.total_logins, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "last_claim_date": self.last_claim_date.isoformat() if self.last_claim_date else None,
            "streak": self.streak,
            "total_logins": self.total_logins,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyRewards":
        raw = data.get("last_claim_date")
        return cls(
            last_claim_date=date.fromisoformat(raw) if raw else None,
            streak=data.get("streak", 1),
            total_logins=data.get("total_logins", 0),
        )


@dataclass
class SeasonRecord:
    """One completed season in the player's history."""

    year: int
    tier: str
    club: str
    ladder_position: int | None
    stats: PlayerStats
    promoted: bool = False
    relegated: bool = False
    premiership: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "tier": self.tier,
            "club": self.club,
            "ladder_position": self.ladder_position,
            "stats": self.stats.to_dict(),
            "promoted": self.promoted,
            "relegated": self.relegated,
            "premiership": self.premiership,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SeasonRecord":
        return cls(
            year=data["year"],
            tier=data["tier"],
            club=data["club"],
            ladder_position=data.get("ladder_position"),
            stats=PlayerStats.from_dict(data.get("stats", {})),
            promoted=bool(data.get("promoted", False)),
            relegated=bool(data.get("relegated", False)),
            premiership=bool(data.get("premiership", False)),
        )


@dataclass
class PlayerProfile:
    """The user's athlete. Every attribute stays within [ATTRIBUTE_MIN, potential]."""

    name: str
    position: str
    sub_position: str = ""
    age: int = STARTING_AGE
    potential: int = DEFAULT_POTENTIAL
    attributes: Dict[str, int] = field(default_factory=lambda: {a: ATTRIBUTE_MIN for a in ATTRIBUTES})
    level: int = 1
    xp: int = 0
    skill_points: int = 0
    energy: int = ENERGY_MAX
    morale: int = MORALE_MAX
    injury: Optional[Injury] = None
    contract: Contract = field(default_factory=Contract)
    career_stats: PlayerStats = field(default_factory=PlayerStats)
    season_stats: PlayerStats = field(default_factory=PlayerStats)
    milestones: List[Milestone] = field(default_factory=list)
    milestones_acknowledged: int = 0
    wallet: int = 0
    lifetime_earnings: int = 0
    items_purchased: List[str] = field(default_factory=list)
    transfer_offers: List[Any] = field(default_factory=list)  # TransferOffer
    media: MediaReputation = field(default_factory=MediaReputation)
    daily_rewards: DailyRewards = field(default_factory=DailyRewards)
    master_skills: List[str] = field(default_factory=list)
    xp_boost_pct: int = 0
    clubs: List[str] = field(default_factory=list)
    season_history: List[SeasonRecord] = field(default_factory=list)
    win_streak: int = 0
    last_result: Optional[str] = None
    training_sessions: int = 0
    chemistry: int = CHEMISTRY_START
    chemistry_club: str = ""
    career_events: List[Any] = field(default_factory=list)  # CareerEvent
    achievements: List[Any] = field(default_factory=list)  # UnlockedAchievement

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Player name is required", {"field": "name"})
        if self.position not in POSITIONS:
            raise ValidationError(f"Unknown position {self.position!r}", {"field": "position"})
        if not self.sub_position:
            self.sub_position = DEFAULT_SUB_POSITION[self.position]
        _check_range("potential", self.potential, ATTRIBUTE_MIN, ATTRIBUTE_CAP)
        if set(self.attributes) != set(ATTRIBUTES):
            raise ValidationError(
                "Attributes must be exactly " + ", ".join(ATTRIBUTES),
                {"field": "attributes", "got": sorted(self.attributes)},
            )
        for attr, value in self.attributes.items():
            _check_range(attr, value, ATTRIBUTE_MIN, self.potential)
        _check_range("age", self.age, 0)
        _check_range("level", self.level, 1)
        _check_range("xp", self.xp, 0)
        _check_range("skill_points", self.skill_points, 0)
        _check_range("energy", self.energy, 0, ENERGY_MAX)
        _check_range("morale", self.morale, 0, MORALE_MAX)
        _check_range("wallet", self.wallet, 0)
        _check_range("milestones_acknowledged", self.milestones_acknowledged, 0, len(self.milestones))
        _check_range("win_streak", self.win_streak, 0)
        _check_range("training_sessions", self.training_sessions, 0)
        _check_range("chemistry", self.chemistry, 0, CHEMISTRY_MAX)

    @property
    def is_injured(self) -> bool:
        return self.injury is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "position": self.position,
            "sub_position": self.sub_position,
            "age": self.age,
            "potential": self.potential,
            "attributes": dict(self.attributes),
            "level": self.level,
            "xp": self.xp,
            "skill_points": self.skill_points,
            "energy": self.energy,
            "morale": self.morale,
            "injury": self.injury.to_dict() if self.injury else None,
            "contract": self.contract.to_dict(),
            "career_stats": self.career_stats.to_dict(),
            "season_stats": self.season_stats.to_dict(),
            "milestones": [m.to_dict() for m in self.milestones],
            "milestones_acknowledged": self.milestones_acknowledged,
            "wallet": self.wallet,
            "lifetime_earnings": self.lifetime_earnings,
            "items_purchased": list(self.items_purchased),
            "transfer_offers": [o.to_dict() for o in self.transfer_offers],
            "media": self.media.to_dict(),
            "daily_rewards": self.daily_rewards.to_dict(),
            "master_skills": list(self.master_skills),
            "xp_boost_pct": self.xp_boost_pct,
            "clubs": list(self.clubs),
            "season_history": [s.to_dict() for s in self.season_history],
            "win_streak": self.win_streak,
            "last_result": self.last_result,
            "training_sessions": self.training_sessions,
            "chemistry": self.chemistry,
            "chemistry_club": self.chemistry_club,
            "career_events": [e.to_dict() for e in self.career_events],
            "achievements": [a.to_dict() for a in self.achievements],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerProfile":
        from .career_event import CareerEvent, UnlockedAchievement
        from .transfer import TransferOffer

        injury = data.get("injury")
        return cls(
            name=data["name"],
            position=data["position"],
            sub_position=data.get("sub_position", ""),
            age=data.get("age", STARTING_AGE),
            potential=data.get("potential", DEFAULT_POTENTIAL),
            attributes={k: int(v) for k, v in data["attributes"].items()},
            level=data.get("level", 1),
            xp=data.get("xp", 0),
            skill_points=data.get("skill_points", 0),
            energy=data.get("energy", ENERGY_MAX),
            morale=data.get("morale", MORALE_MAX),
            injury=Injury.from_dict(injury) if injury else None,
            contract=Contract.from_dict(data.get("contract", {})),
            career_stats=PlayerStats.from_dict(data.get("career_stats", {})),
            season_stats=PlayerStats.from_dict(data.get("season_stats", {})),
            milestones=[Milestone.from_dict(m) for m in data.get("milestones", [])],
            milestones_acknowledged=data.get("milestones_acknowledged", 0),
            wallet=data.get("wallet", 0),
            lifetime_earnings=data.get("lifetime_earnings", 0),
            items_purchased=list(data.get("items_purchased", [])),
            transfer_offers=[TransferOffer.from_dict(o) for o in data.get("transfer_offers", [])],
            media=MediaReputation.from_dict(data.get("media", {})),
            daily_rewards=DailyRewards.from_dict(data.get("daily_rewards", {})),
            master_skills=list(data.get("master_skills", [])),
            xp_boost_pct=data.get("xp_boost_pct", 0),
            clubs=list(data.get("clubs", [])),
            season_history=[SeasonRecord.from_dict(s) for s in data.get("season_history", [])],
            win_streak=data.get("win_streak", 0),
            last_result=data.get("last_result"),
            training_sessions=data.get("training_sessions", 0),
            chemistry=data.get("chemistry", CHEMISTRY_START),
            chemistry_club=data.get("chemistry_club", ""),
            career_events=[CareerEvent.from_dict(e) for e in data.get("career_events", [])],
            achievements=[UnlockedAchievement.from_dict(a) for a in data.get("achievements", [])],
        )
