"""
Achievements: one-shot badges checked after anything that changes the profile.

Each entry in ACHIEVEMENTS names a ``check`` kind. Career checks read career_stats,
match checks read the stat line of the match just played (plus its votes), and the
rest look at attributes, streaks, salary and club history.
"""
from __future__ import annotations

import copy
import logging
from typing import Optional

from models.career_event import UnlockedAchievement
from models.constants import ACHIEVEMENTS
from models.fixture import PerformerStats
from models.player import PlayerProfile

logger = logging.getLogger(__name__)


def _met(achievement: dict, profile: PlayerProfile, line: Optional[PerformerStats], votes: int) -> bool:
    check = achievement["check"]
    target = achievement.get("target", 0)
    if check == "career":
        return getattr(profile.career_stats, achievement["stat"]) >= target
    if check == "match":
        if line is None:
            return False
        if achievement["stat"] == "votes":
            return votes >= target
        return getattr(line, achievement["stat"]) >= target
    if check == "attribute":
        return profile.attributes[achievement["stat"]] >= target
    if check == "max_attribute":
        return max(profile.attributes.values()) >= target
    if check == "min_attribute":
        return min(profile.attributes.values()) >= target
    if check == "at_potential":
        return any(v >= profile.potential for v in profile.attributes.values())
    if check == "training_sessions":
        return profile.training_sessions >= target
    if check == "win_streak":
        return profile.win_streak >= target
    if check == "salary":
        return profile.contract.salary >= target
    if check == "clubs":
        return len(set(profile.clubs)) >= target
    if check == "ruck_matches":
        return profile.position == "Ruck" and profile.career_stats.matches >= target
    return False


def check_achievements(
    profile: PlayerProfile,
    round_no: int,
    year: int,
    line: Optional[PerformerStats] = None,
    votes: int = 0,
) -> tuple[PlayerProfile, list[UnlockedAchievement]]:
    """Unlock every achievement now satisfied that the player does not already hold."""
    held = {a.achievement_id for a in profile.achievements}
    unlocked = [
        UnlockedAchievement(a["id"], a["name"], a["rarity"], round_no, year)
        for a in ACHIEVEMENTS
        if a["id"] not in held and _met(a, profile, line, votes)
    ]
    if not unlocked:
        return profile, []
    p = copy.deepcopy(profile)
    p.achievements.extend(unlocked)
    for a in unlocked:
        logger.info("%s unlocked achievement %s", p.name, a.achievement_id)
    return p, unlocked
