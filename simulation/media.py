"""
Media, fans and the player's wallet for Footy Career.

Matches may produce a media event; the player's response to it moves reputation and
follower counts. Followers also grow passively each round and through social posts.
Fan milestones unlock in ascending order, each exactly once. Salary lands in the
wallet every league round and pays for shop items.
"""
from __future__ import annotations

import copy
import logging
import math
from typing import Any, Callable

from models.constants import (
    EFFECT_ATTRIBUTE_BOOST,
    EFFECT_ENERGY,
    EFFECT_INJURY_HEAL,
    EFFECT_MORALE,
    EFFECT_SKILL_POINTS,
    EFFECT_XP_BOOST,
    ENERGY_MAX,
    FAN_MILESTONES,
    MEDIA_CRITICISM,
    MEDIA_EVENT_CHANCE,
    MEDIA_EVENT_CHANCE_POOR,
    MEDIA_EVENT_CHANCE_STANDOUT,
    MEDIA_INTERVIEW,
    MEDIA_PRAISE,
    MEDIA_RESPONSE_EFFECTS,
    MEDIA_RESPONSES,
    MEDIA_SOCIAL,
    MORALE_MAX,
    PASSIVE_FAN_BASE,
    PASSIVE_FAN_TIER_MULTIPLIER,
    REPUTATION_MAX,
    SOCIAL_POST_BASE,
    TIER_FOLLOWER_MULTIPLIER,
)
from models.errors import (
    AlreadyOwnedError,
    CapReachedError,
    InsufficientFundsError,
    NotFoundError,
    ValidationError,
)
from models.fixture import PerformerStats
from models.player import Injury, MediaEvent, MediaReputation, PlayerProfile
from models.shop import CATALOG, ShopItem

logger = logging.getLogger(__name__)


def apply_reputation(media: MediaReputation, rep_delta: int, fan_delta: int) -> list[int]:
    """Move score and followers in place, clamped. Returns newly unlocked fan milestones."""
    media.score = max(0, min(REPUTATION_MAX, media.score + rep_delta))
    media.fan_followers = max(0, media.fan_followers + fan_delta)
    return _unlock_fan_milestones(media)


def _unlock_fan_milestones(media: MediaReputation) -> list[int]:
    unlocked = []
    for threshold, _title in FAN_MILESTONES:
        if threshold in media.fan_milestones:
            continue
        if media.fan_followers < threshold:
            break
        media.fan_milestones.append(threshold)
        unlocked.append(threshold)
    return unlocked


def fan_milestone_title(threshold: int) -> str:
    return dict(FAN_MILESTONES).get(threshold, "")


# ===================================================================
# Media events
# ===================================================================

def respond_to_media(
    profile: PlayerProfile, event_id: str, response: str
) -> tuple[PlayerProfile, dict[str, Any]]:
    """Answer a pending media event.

    The event's own impact and the response effect are applied together.

    Raises
    ------
    ValidationError
        *response* is not HUMBLE, CONFIDENT or IGNORE.
    NotFoundError
        No such event, or it was already answered.
    """
    if response not in MEDIA_RESPONSES:
        raise ValidationError(f"Unknown media response {response!r}", {"allowed": MEDIA_RESPONSES})
    idx = next(
        (i for i, e in enumerate(profile.media.events) if e.id == event_id and not e.has_responded),
        None,
    )
    if idx is None:
        raise NotFoundError(f"No pending media event {event_id!r}", {"event_id": event_id})

    p = copy.deepcopy(profile)
    event = p.media.events[idx]
    rep, fans = MEDIA_RESPONSE_EFFECTS.get((event.type, response), (0, 0))
    rep_delta = event.reputation_impact + rep
    fan_delta = event.fan_impact + fans
    unlocked = apply_reputation(p.media, rep_delta, fan_delta)
    event.has_responded = True
    event.response = response
    return p, {
        "event_id": event_id,
        "response": response,
        "reputation_delta": rep_delta,
        "fan_delta": fan_delta,
        "fan_milestones": unlocked,
    }


def _event_templates(name: str, line: PerformerStats, votes: int, won: bool | None) -> list[dict]:
    standout = line.goals >= 5 or line.disposals >= 35 or votes == 3
    poor = line.disposals < 10 and line.goals == 0
    candidates = [
        {
            "type": MEDIA_PRAISE,
            "title": "Outstanding Performance!",
            "description": f"{name}'s {line.goals}-goal haul has the media singing their praises.",
            "reputation_impact": 10,
            "fan_impact": 2000,
            "when": line.goals >= 5,
        },
        {
            "type": MEDIA_PRAISE,
            "title": "Midfield Maestro",
            "description": f"A {line.disposals}-disposal game has pundits calling {name} the best in the league.",
            "reputation_impact": 8,
            "fan_impact": 1500,
            "when": line.disposals >= 35,
        },
        {
            "type": MEDIA_INTERVIEW,
            "title": "Post-Match Interview",
            "description": f"{name} talks through the {'win' if won else 'result'} and their part in it.",
            "reputation_impact": 5 if won else 2,
            "fan_impact": 500 if won else 200,
            "when": votes > 0 or standout,
        },
        {
            "type": MEDIA_CRITICISM,
            "title": "Quiet Game Raises Questions",
            "description": f"Critics question {name}'s impact after a quiet {line.disposals}-disposal game.",
            "reputation_impact": -5,
            "fan_impact": -300,
            "when": poor and won is not True,
        },
    ]
    return [c for c in candidates if c["when"]]


def generate_media_event(
    profile: PlayerProfile,
    line: PerformerStats,
    votes: int,
    won: bool | None,
    round_no: int,
    year: int,
    rng,
    make_id: Callable[[str], str],
) -> MediaEvent | None:
    """Maybe produce a PRAISE, CRITICISM or INTERVIEW event from a match line."""
    standout = line.goals >= 5 or line.disposals >= 35 or votes == 3
    poor = line.disposals < 10 and line.goals == 0
    chance = MEDIA_EVENT_CHANCE
    if standout:
        chance = MEDIA_EVENT_CHANCE_STANDOUT
    elif poor:
        chance = MEDIA_EVENT_CHANCE_POOR
    if not rng.chance(chance):
        return None
    options = _event_templates(profile.name, line, votes, won)
    if not options:
        return None
    picked = rng.choice(options)
    return MediaEvent(
        id=make_id("media"),
        type=picked["type"],
        title=picked["title"],
        description=picked["description"],
        reputation_impact=picked["reputation_impact"],
        fan_impact=picked["fan_impact"],
        round=round_no,
        year=year,
    )


def create_social_post(
    profile: PlayerProfile,
    content: str,
    round_no: int,
    year: int,
    make_id: Callable[[str], str],
) -> tuple[PlayerProfile, dict[str, Any]]:
    """Post to social media: followers grow by the tier-scaled base, reputation +1."""
    if not content or not content.strip():
        raise ValidationError("Post content cannot be empty", {"field": "content"})
    p = copy.deepcopy(profile)
    gain = math.floor(SOCIAL_POST_BASE * TIER_FOLLOWER_MULTIPLIER[p.media.tier])
    unlocked = apply_reputation(p.media, 1, gain)
    p.media.total_posts += 1
    p.media.events.append(
        MediaEvent(
            id=make_id("post"),
            type=MEDIA_SOCIAL,
            title="Social Post",
            description=content.strip(),
            reputation_impact=1,
            fan_impact=gain,
            round=round_no,
            year=year,
            has_responded=True,
        )
    )
    return p, {"followers_gained": gain, "fan_milestones": unlocked}


def passive_fan_growth(profile: PlayerProfile) -> int:
    """Followers gained each round from simply being on a list."""
    growth = PASSIVE_FAN_BASE * PASSIVE_FAN_TIER_MULTIPLIER.get(profile.contract.tier, 1)
    growth += (profile.media.score // 10) * 10
    if profile.season_stats.goals >= 20:
        growth += 100
    if profile.season_stats.votes >= 10:
        growth += 150
    return growth


def apply_passive_growth(profile: PlayerProfile) -> tuple[PlayerProfile, list[int]]:
    p = copy.deepcopy(profile)
    unlocked = apply_reputation(p.media, 0, passive_fan_growth(p))
    return p, unlocked


# ===================================================================
# Economy
# ===================================================================

def pay_salary(profile: PlayerProfile, season_length: int) -> tuple[PlayerProfile, int]:
    """One league round's share of the season salary."""
    amount = profile.contract.salary // max(1, season_length)
    if amount <= 0:
        return profile, 0
    p = copy.deepcopy(profile)
    p.wallet += amount
    p.lifetime_earnings += amount
    return p, amount


def _apply_item_effect(p: PlayerProfile, item: ShopItem) -> None:
    effect = item.effect
    if effect.kind == EFFECT_ENERGY:
        p.energy = min(ENERGY_MAX, p.energy + effect.value)
    elif effect.kind == EFFECT_SKILL_POINTS:
        p.skill_points += effect.value
    elif effect.kind == EFFECT_MORALE:
        p.morale = min(MORALE_MAX, p.morale + effect.value)
    elif effect.kind == EFFECT_INJURY_HEAL:
        remaining = p.injury.weeks_remaining - effect.value
        p.injury = Injury(p.injury.name, remaining) if remaining > 0 else None
    elif effect.kind == EFFECT_XP_BOOST:
        # Boosts do not stack; the larger one is kept
        p.xp_boost_pct = max(p.xp_boost_pct, effect.value)
    elif effect.kind == EFFECT_ATTRIBUTE_BOOST:
        attr = effect.attribute
        p.attributes[attr] = min(p.potential, p.attributes[attr] + effect.value)


def purchase_item(profile: PlayerProfile, item_id: str) -> tuple[PlayerProfile, ShopItem]:
    """Buy a shop item and apply its effect.

    Raises
    ------
    NotFoundError
        Unknown item id.
    AlreadyOwnedError
        A one-time item that was already bought.
    CapReachedError
        An attribute boost whose attribute is already at potential.
    ValidationError
        A healing item bought while not injured.
    InsufficientFundsError
        The wallet is short of the price.
    """
    item = CATALOG.get(item_id)
    if item is None:
        raise NotFoundError(f"Unknown shop item {item_id!r}", {"item_id": item_id})
    if item.one_time and item_id in profile.items_purchased:
        raise AlreadyOwnedError(f"{item.name} is already owned", {"item_id": item_id})
    if item.effect.kind == EFFECT_INJURY_HEAL and not profile.is_injured:
        raise ValidationError(f"{item.name} needs an injury to treat", {"item_id": item_id})
    if item.effect.kind == EFFECT_ATTRIBUTE_BOOST:
        attr = item.effect.attribute
        if profile.attributes[attr] >= profile.potential:
            raise CapReachedError(
                f"{attr} is already at potential ({profile.potential})",
                {"item_id": item_id, "attribute": attr},
            )
    if profile.wallet < item.price:
        raise InsufficientFundsError(
            f"{item.name} costs ${item.price}, wallet has ${profile.wallet}",
            {"price": item.price, "wallet": profile.wallet},
        )
    p = copy.deepcopy(profile)
    p.wallet -= item.price
    _apply_item_effect(p, item)
    if item.one_time:
        p.items_purchased.append(item_id)
    logger.info("Purchased %s for $%d", item_id, item.price)
    return p, item
