"""
Player development engine for Footy Career.

Training spends skill points and energy to raise one attribute toward potential.
Matches feed stats, XP, skill points and morale; XP crossing fixed thresholds levels
the player up with bonus skill points. Injuries tick down once per round. Milestones
and master-skill availability are derived from current stats, never stored as flags.

Public functions work on a copy of the profile and leave the caller's profile
untouched, except gain_xp, which other subsystems call on their own working copy.
"""
from __future__ import annotations

import copy
import logging
from typing import Any

from models.constants import (
    ATTRIBUTES,
    ENERGY_MAX,
    LEVEL_UP_SKILL_POINTS,
    LEVEL_XP_STEP,
    MASTER_SKILLS,
    MATCH_SKILL_POINTS,
    MATCH_XP_BASE,
    MILESTONE_LABELS,
    MILESTONE_THRESHOLDS,
    MORALE_LOSS,
    MORALE_MAX,
    MORALE_WIN,
    RESULT_DRAW,
    RESULT_LOSS,
    RESULT_WIN,
    TRAINING_ENERGY_COST,
    TRAINING_XP,
)
from models.errors import (
    CapReachedError,
    InsufficientResourceError,
    NotFoundError,
    ValidationError,
)
from models.fixture import PerformerStats
from models.player import Injury, Milestone, PlayerProfile, PlayerStats

logger = logging.getLogger(__name__)


def _clamp_int(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


# ===================================================================
# XP and levels
# ===================================================================

def xp_for_level(level: int) -> int:
    """Total XP needed to reach *level* (level 1 needs 0)."""
    return LEVEL_XP_STEP * level * (level - 1) // 2


def level_for_xp(xp: int) -> int:
    level = 1
    while xp >= xp_for_level(level + 1):
        level += 1
    return level


def gain_xp(profile: PlayerProfile, amount: int) -> int:
    """Add XP in place; apply level-ups and their bonus skill points. Returns levels gained."""
    profile.xp += max(0, amount)
    new_level = level_for_xp(profile.xp)
    gained = max(0, new_level - profile.level)
    if gained:
        profile.level = new_level
        profile.skill_points += gained * LEVEL_UP_SKILL_POINTS
    return gained


# ===================================================================
# Training
# ===================================================================

def train_attribute(profile: PlayerProfile, attribute: str) -> tuple[PlayerProfile, int]:
    """Spend 1 skill point and 10 energy to raise *attribute* by 1.

    Returns
    -------
    (PlayerProfile, int)
        The updated copy and the XP gained. Any level-ups are already applied.

    Raises
    ------
    ValidationError
        Unknown attribute, or the player is injured.
    InsufficientResourceError
        No skill points or less than 10 energy.
    CapReachedError
        The attribute already equals potential.
    """
    if attribute not in ATTRIBUTES:
        raise ValidationError(f"Unknown attribute {attribute!r}", {"allowed": ATTRIBUTES})
    if profile.is_injured:
        raise ValidationError(
            f"Cannot train while injured ({profile.injury.name})",
            {"weeks_remaining": profile.injury.weeks_remaining},
        )
    if profile.skill_points <= 0:
        raise InsufficientResourceError("No skill points available", {"skill_points": profile.skill_points})
    if profile.energy < TRAINING_ENERGY_COST:
        raise InsufficientResourceError(
            f"Training needs {TRAINING_ENERGY_COST} energy", {"energy": profile.energy}
        )
    if profile.attributes[attribute] >= profile.potential:
        raise CapReachedError(
            f"{attribute} is already at potential ({profile.potential})",
            {"attribute": attribute, "potential": profile.potential},
        )

    p = copy.deepcopy(profile)
    p.attributes[attribute] += 1
    p.skill_points -= 1
    p.energy -= TRAINING_ENERGY_COST
    p.training_sessions += 1
    levels = gain_xp(p, TRAINING_XP)
    if levels:
        logger.debug("Training level-up: now level %d", p.level)
    return p, TRAINING_XP


# ===================================================================
# Round upkeep
# ===================================================================

def restore_energy(profile: PlayerProfile) -> PlayerProfile:
    p = copy.deepcopy(profile)
    p.energy = ENERGY_MAX
    return p


def tick_injury(profile: PlayerProfile) -> tuple[PlayerProfile, bool]:
    """One round of recovery. Returns (profile, healed_this_round)."""
    if profile.injury is None:
        return profile, False
    p = copy.deepcopy(profile)
    remaining = p.injury.weeks_remaining - 1
    if remaining <= 0:
        p.injury = None
        return p, True
    p.injury = Injury(name=p.injury.name, weeks_remaining=remaining)
    return p, False


# ===================================================================
# Milestones
# ===================================================================

def detect_milestones(
    before: PlayerStats,
    after: PlayerStats,
    round_no: int,
    year: int,
) -> list[Milestone]:
    """One Milestone per threshold crossed between *before* and *after*.

    Thresholds at or below the old total were already passed and never retrigger.
    """
    found: list[Milestone] = []
    for stat, thresholds in MILESTONE_THRESHOLDS.items():
        old = getattr(before, stat)
        new = getattr(after, stat)
        for threshold in thresholds:
            if old < threshold <= new:
                label = MILESTONE_LABELS[stat]
                if stat == "matches" and threshold == 1:
                    description = "Debut match"
                elif stat == "goals" and threshold == 1:
                    description = "First career goal"
                else:
                    description = f"{threshold} {label}"
                found.append(Milestone(stat, threshold, description, round_no, year))
    return found


def pending_milestones(profile: PlayerProfile) -> list[Milestone]:
    """Milestones not yet acknowledged by the player."""
    return profile.milestones[profile.milestones_acknowledged:]


def acknowledge_milestones(profile: PlayerProfile) -> PlayerProfile:
    p = copy.deepcopy(profile)
    p.milestones_acknowledged = len(p.milestones)
    return p


# ===================================================================
# Match application
# ===================================================================

def match_xp(line: PerformerStats, votes: int) -> int:
    return MATCH_XP_BASE + 5 * line.goals + line.disposals // 5 + 2 * line.tackles + 10 * votes


def apply_match(
    profile: PlayerProfile,
    line: PerformerStats,
    votes: int,
    won: bool | None,
    injury: Injury | None,
    round_no: int,
    year: int,
) -> tuple[PlayerProfile, dict[str, Any]]:
    """Fold one played match into the profile.

    Stats go to career and season totals together, then milestones are detected
    against the career totals. ``won`` is None for a draw.
    """
    p = copy.deepcopy(profile)
    before = copy.deepcopy(p.career_stats)

    for stats in (p.career_stats, p.season_stats):
        stats.matches += 1
        stats.goals += line.goals
        stats.behinds += line.behinds
        stats.disposals += line.disposals
        stats.tackles += line.tackles
        stats.votes += votes

    milestones = detect_milestones(before, p.career_stats, round_no, year)
    p.milestones.extend(milestones)

    p.skill_points += MATCH_SKILL_POINTS
    xp = match_xp(line, votes)
    if p.xp_boost_pct:
        xp = xp * (100 + p.xp_boost_pct) // 100
        p.xp_boost_pct = 0
    levels = gain_xp(p, xp)

    if won is True:
        p.morale = _clamp_int(p.morale + MORALE_WIN, 0, MORALE_MAX)
        p.win_streak += 1
        p.last_result = RESULT_WIN
    elif won is False:
        p.morale = _clamp_int(p.morale + MORALE_LOSS, 0, MORALE_MAX)
        p.win_streak = 0
        p.last_result = RESULT_LOSS
    else:
        p.win_streak = 0
        p.last_result = RESULT_DRAW

    if injury is not None and p.injury is None:
        p.injury = injury

    return p, {
        "xp_gained": xp,
        "levels_gained": levels,
        "milestones": milestones,
        "injury": injury,
    }


# ===================================================================
# Master skills
# ===================================================================

def _skill(skill_id: str) -> dict:
    for s in MASTER_SKILLS:
        if s["id"] == skill_id:
            return s
    raise NotFoundError(f"Unknown master skill {skill_id!r}", {"skill_id": skill_id})


def _skill_ready(profile: PlayerProfile, skill: dict) -> bool:
    return (
        profile.attributes[skill["attribute"]] >= skill["prerequisite"]
        and profile.level >= skill["level"]
    )


def available_master_skills(profile: PlayerProfile) -> list[dict]:
    """Master skills whose unlock predicate holds right now and are not yet unlocked."""
    return [
        s for s in MASTER_SKILLS
        if s["id"] not in profile.master_skills and _skill_ready(profile, s)
    ]


def unlock_master_skill(profile: PlayerProfile, skill_id: str) -> PlayerProfile:
    skill = _skill(skill_id)
    if skill_id in profile.master_skills:
        raise CapReachedError(f"{skill['name']} is already unlocked", {"skill_id": skill_id})
    if not _skill_ready(profile, skill):
        raise ValidationError(
            f"{skill['name']} needs {skill['attribute']} {skill['prerequisite']} and level {skill['level']}",
            {"skill_id": skill_id},
        )
    if profile.skill_points < skill["sp_cost"]:
        raise InsufficientResourceError(
            f"{skill['name']} costs {skill['sp_cost']} skill points",
            {"skill_points": profile.skill_points},
        )
    p = copy.deepcopy(profile)
    p.skill_points -= skill["sp_cost"]
    p.master_skills.append(skill_id)
    logger.info("Master skill unlocked: %s", skill_id)
    return p
