"""
Simulation engine for Footy Career.
Plays AFL-style matches, builds fixtures, ladders and finals, and drives the player's
development, transfers, media, draft and season rollover through CareerEngine.
"""
from .engine import simulate_match
from .schedule import generate_season_fixtures, next_finals_fixtures
from .ladder import compute_ladder
from .rng import RandomOutcomeProvider
from .career import (
    CareerEngine,
    user_team,
    user_fixture,
    ladder,
    is_season_complete,
    pending_milestones,
    pending_career_events,
    available_master_skills,
)
from .chemistry import chemistry_form

__all__ = [
    "simulate_match",
    "generate_season_fixtures",
    "next_finals_fixtures",
    "compute_ladder",
    "RandomOutcomeProvider",
    "CareerEngine",
    "user_team",
    "user_fixture",
    "ladder",
    "is_season_complete",
    "pending_milestones",
    "pending_career_events",
    "available_master_skills",
    "chemistry_form",
]
