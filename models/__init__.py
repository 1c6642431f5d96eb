from .career_event import CareerEvent, UnlockedAchievement
from .config import CareerConfig
from .draft import DraftClass, DraftPick, DraftProspect
from .errors import (
    CareerError,
    ValidationError,
    InsufficientResourceError,
    InsufficientFundsError,
    CapReachedError,
    AlreadyOwnedError,
    NotFoundError,
    ConfigurationError,
    CorruptSaveError,
)
from .fixture import Fixture, MatchResult, PerformerStats, ScoreLine
from .player import (
    Contract,
    DailyRewards,
    Injury,
    MediaEvent,
    MediaReputation,
    Milestone,
    PlayerProfile,
    PlayerStats,
    SeasonRecord,
)
from .shop import CATALOG, ItemEffect, ShopItem
from .state import GameState, HallOfFameRecord, serialize, deserialize
from .team import RosterPlayer, Stadium, Team
from .transfer import TransferOffer

__all__ = [
    "CareerEvent",
    "UnlockedAchievement",
    "CareerConfig",
    "DraftClass",
    "DraftPick",
    "DraftProspect",
    "CareerError",
    "ValidationError",
    "InsufficientResourceError",
    "InsufficientFundsError",
    "CapReachedError",
    "AlreadyOwnedError",
    "NotFoundError",
    "ConfigurationError",
    "CorruptSaveError",
    "Fixture",
    "MatchResult",
    "PerformerStats",
    "ScoreLine",
    "Contract",
    "DailyRewards",
    "Injury",
    "MediaEvent",
    "MediaReputation",
    "Milestone",
    "PlayerProfile",
    "PlayerStats",
    "SeasonRecord",
    "CATALOG",
    "ItemEffect",
    "ShopItem",
    "GameState",
    "HallOfFameRecord",
    "serialize",
    "deserialize",
    "RosterPlayer",
    "Stadium",
    "Team",
    "TransferOffer",
]
