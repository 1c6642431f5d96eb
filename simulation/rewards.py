"""
Daily login rewards for Footy Career.

One claim per calendar day. Claiming on consecutive days grows the streak; missing a
day resets it to 1. The reward tier cycles every DAILY_REWARD_CYCLE days.
"""
from __future__ import annotations

import copy
from datetime import date, datetime
from typing import Any

from models.constants import DAILY_REWARD_CYCLE, DAILY_REWARDS, ENERGY_MAX
from models.player import DailyRewards, PlayerProfile


def _day(now: date | datetime) -> date:
    return now.date() if isinstance(now, datetime) else now


def can_claim(rewards: DailyRewards, now: date | datetime) -> bool:
    """True when nothing has been claimed yet or the last claim was before today."""
    return rewards.last_claim_date is None or rewards.last_claim_date < _day(now)


def reward_for_streak(streak: int) -> dict[str, Any]:
    day = (streak - 1) % DAILY_REWARD_CYCLE + 1
    skill_points, energy = DAILY_REWARDS[day]
    return {"day": day, "streak": streak, "skill_points": skill_points, "energy": energy}


def claim(rewards: DailyRewards, now: date | datetime) -> tuple[DailyRewards, dict[str, Any] | None]:
    """Claim today's reward.

    Returns
    -------
    (DailyRewards, dict or None)
        The updated tracker and the reward earned. A second claim on the same
        day returns the tracker unchanged and None.
    """
    today = _day(now)
    if not can_claim(rewards, today):
        return rewards, None
    if rewards.last_claim_date is not None and (today - rewards.last_claim_date).days == 1:
        streak = rewards.streak + 1
    else:
        streak = 1
    updated = DailyRewards(
        last_claim_date=today,
        streak=streak,
        total_logins=rewards.total_logins + 1,
    )
    return updated, reward_for_streak(streak)


def apply_reward(profile: PlayerProfile, reward: dict[str, Any]) -> PlayerProfile:
    p = copy.deepcopy(profile)
    p.skill_points += reward["skill_points"]
    p.energy = min(ENERGY_MAX, p.energy + reward["energy"])
    return p
