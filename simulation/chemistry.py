"""
Team chemistry: how settled the player is with their current club.

Chemistry starts at CHEMISTRY_START whenever the player lands at a new club, moves
with results and big games, and feeds a small strength bonus (or penalty) into the
user's side of the match simulation. At CHEMISTRY_START the effect is zero.
"""
from __future__ import annotations

from models.constants import (
    CHEMISTRY_BIG_GAME,
    CHEMISTRY_FORMS,
    CHEMISTRY_LOSS,
    CHEMISTRY_MATCH,
    CHEMISTRY_MAX,
    CHEMISTRY_MAX_STRENGTH,
    CHEMISTRY_START,
    CHEMISTRY_WIN,
)
from models.player import PlayerProfile


def chemistry_form(chemistry: int) -> str:
    for floor, label in CHEMISTRY_FORMS:
        if chemistry >= floor:
            return label
    return CHEMISTRY_FORMS[-1][1]


def strength_bonus(chemistry: int) -> float:
    """Strength points for the user's side; linear from -MAX at 0 to +MAX at 100."""
    half = CHEMISTRY_MAX / 2
    return (chemistry - half) / half * CHEMISTRY_MAX_STRENGTH


def sync_club(profile: PlayerProfile) -> bool:
    """Reset chemistry in place when the contract club differs from the tracked one."""
    club = profile.contract.club_name
    if profile.chemistry_club == club:
        return False
    profile.chemistry = CHEMISTRY_START
    profile.chemistry_club = club
    return True


def after_match(profile: PlayerProfile, won: bool | None, votes: int) -> int:
    """Move chemistry in place after a match the player took part in. Returns the delta."""
    before = profile.chemistry
    delta = CHEMISTRY_MATCH
    if won is True:
        delta += CHEMISTRY_WIN
    elif won is False:
        delta += CHEMISTRY_LOSS
    if votes >= 2:
        delta += CHEMISTRY_BIG_GAME
    profile.chemistry = max(0, min(CHEMISTRY_MAX, profile.chemistry + delta))
    return profile.chemistry - before
