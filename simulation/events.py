"""
Career events for Footy Career.

Between matches there is a small chance something happens off the field: a sponsor
calls, the coach gives a spray, a club legend offers to mentor. Which templates can
fire depends on the player's situation at that moment (win streak, morale, energy,
reputation, injury, first season). Events without choices apply their effects on
the spot; events with choices wait on the profile until the player resolves them.

Effects never push an attribute past potential, and resources stay in range.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Callable

from models.career_event import CareerEvent
from models.constants import (
    ATTRIBUTE_MIN,
    ATTRIBUTES,
    CAREER_EVENT_CHANCE,
    CAREER_EVENT_TEMPLATES,
    ENERGY_MAX,
    EVENT_EFFECT_KEYS,
    MAX_PENDING_CAREER_EVENTS,
    MORALE_MAX,
    RARITY_WEIGHTS,
    RESULT_LOSS,
    TRIGGER_AFTER_LOSS,
    TRIGGER_FIRST_SEASON,
    TRIGGER_GOOD_FORM,
    TRIGGER_HIGH_LEVEL,
    TRIGGER_HIGH_MEDIA_REP,
    TRIGGER_INJURED,
    TRIGGER_LOW_ENERGY,
    TRIGGER_LOW_MORALE,
    TRIGGER_WIN_STREAK_3,
    TRIGGER_WIN_STREAK_5,
)
from models.errors import NotFoundError, ValidationError
from models.player import Injury, PlayerProfile
from simulation.development import gain_xp
from simulation.media import apply_reputation

logger = logging.getLogger(__name__)

EVENT_INJURY_NAME = "Event-related injury"


def _template(template_id: str) -> dict:
    for t in CAREER_EVENT_TEMPLATES:
        if t["id"] == template_id:
            return t
    raise NotFoundError(f"Unknown career event template {template_id!r}", {"template_id": template_id})


def active_triggers(profile: PlayerProfile, year: int) -> set[str]:
    """Trigger conditions that hold for *profile* right now."""
    active = set()
    if profile.win_streak >= 3:
        active.add(TRIGGER_WIN_STREAK_3)
    if profile.win_streak >= 5:
        active.add(TRIGGER_WIN_STREAK_5)
    if profile.morale < 30:
        active.add(TRIGGER_LOW_MORALE)
    if profile.energy < 30:
        active.add(TRIGGER_LOW_ENERGY)
    if profile.media.score >= 70:
        active.add(TRIGGER_HIGH_MEDIA_REP)
    if profile.morale > 70 and profile.energy > 60:
        active.add(TRIGGER_GOOD_FORM)
    if profile.last_result == RESULT_LOSS:
        active.add(TRIGGER_AFTER_LOSS)
    if profile.level >= 20:
        active.add(TRIGGER_HIGH_LEVEL)
    if profile.is_injured:
        active.add(TRIGGER_INJURED)
    if year == 1:
        active.add(TRIGGER_FIRST_SEASON)
    return active


def eligible_templates(profile: PlayerProfile, year: int) -> list[dict]:
    active = active_triggers(profile, year)
    return [t for t in CAREER_EVENT_TEMPLATES if t["trigger"] is None or t["trigger"] in active]


def pending_events(profile: PlayerProfile) -> list[CareerEvent]:
    return [e for e in profile.career_events if not e.resolved]


def roll_career_event(
    profile: PlayerProfile,
    round_no: int,
    year: int,
    rng,
    make_id: Callable[[str], str],
) -> CareerEvent | None:
    """Maybe draw one event for this round, weighted by rarity among eligible templates.

    Nothing is drawn while MAX_PENDING_CAREER_EVENTS events are still waiting.
    """
    if len(pending_events(profile)) >= MAX_PENDING_CAREER_EVENTS:
        return None
    if not rng.chance(CAREER_EVENT_CHANCE):
        return None
    pool = eligible_templates(profile, year)
    if not pool:
        return None

    roll = rng.uniform(0, sum(RARITY_WEIGHTS[t["rarity"]] for t in pool))
    chosen = pool[-1]
    for t in pool:
        roll -= RARITY_WEIGHTS[t["rarity"]]
        if roll <= 0:
            chosen = t
            break

    logger.debug("Career event %s in round %d", chosen["id"], round_no)
    return CareerEvent(
        id=make_id("event"),
        template_id=chosen["id"],
        title=chosen["title"],
        description=chosen["description"],
        rarity=chosen["rarity"],
        round=round_no,
        year=year,
        effects=copy.deepcopy(chosen.get("effects")),
        choices=copy.deepcopy(chosen.get("choices", [])),
    )


def apply_event_effects(profile: PlayerProfile, effects: dict[str, Any]) -> tuple[PlayerProfile, dict[str, Any]]:
    """Apply an effect bundle to a copy of *profile*.

    Returns
    -------
    (PlayerProfile, dict)
        The updated copy and a summary with ``levels_gained`` and any newly
        unlocked ``fan_milestones``.

    Raises
    ------
    ValidationError
        An effect key or attribute name that is not recognised.
    """
    unknown = set(effects) - set(EVENT_EFFECT_KEYS)
    if unknown:
        raise ValidationError(f"Unknown event effects {sorted(unknown)}")
    p = copy.deepcopy(profile)

    for attr, delta in effects.get("attributes", {}).items():
        if attr not in ATTRIBUTES:
            raise ValidationError(f"Unknown attribute {attr!r}", {"allowed": ATTRIBUTES})
        p.attributes[attr] = max(ATTRIBUTE_MIN, min(p.potential, p.attributes[attr] + delta))
    if "morale" in effects:
        p.morale = max(0, min(MORALE_MAX, p.morale + effects["morale"]))
    if "energy" in effects:
        p.energy = max(0, min(ENERGY_MAX, p.energy + effects["energy"]))
    levels = gain_xp(p, effects.get("xp", 0))
    if "skill_points" in effects:
        p.skill_points = max(0, p.skill_points + effects["skill_points"])
    if "wallet" in effects:
        p.wallet = max(0, p.wallet + effects["wallet"])

    unlocked: list[int] = []
    if "reputation" in effects or "fan_followers" in effects:
        unlocked = apply_reputation(p.media, effects.get("reputation", 0), effects.get("fan_followers", 0))

    if "injury_weeks" in effects:
        weeks = effects["injury_weeks"]
        if weeks == 0:
            p.injury = None
        elif p.injury is None or p.injury.weeks_remaining < weeks:
            p.injury = Injury(EVENT_INJURY_NAME, weeks)
    if "salary_bonus_pct" in effects:
        p.contract.salary = p.contract.salary * (100 + effects["salary_bonus_pct"]) // 100

    return p, {"levels_gained": levels, "fan_milestones": unlocked}


def record_event(profile: PlayerProfile, event: CareerEvent) -> tuple[PlayerProfile, dict[str, Any] | None]:
    """Attach *event* to the profile. Events without choices resolve immediately."""
    if event.needs_choice:
        p = copy.deepcopy(profile)
        p.career_events.append(event)
        return p, None
    p, summary = apply_event_effects(profile, event.effects or {})
    settled = copy.deepcopy(event)
    settled.resolved = True
    settled.outcome = _template(event.template_id).get("result")
    p.career_events.append(settled)
    return p, summary


def resolve_career_event(
    profile: PlayerProfile, event_id: str, choice_id: str
) -> tuple[PlayerProfile, CareerEvent, dict[str, Any]]:
    """Resolve a pending event with one of its choices.

    Raises NotFoundError for an unknown or already resolved event and
    ValidationError for a choice the event does not offer.
    """
    event = next((e for e in profile.career_events if e.id == event_id), None)
    if event is None or event.resolved:
        raise NotFoundError(f"No pending career event {event_id!r}", {"event_id": event_id})
    choice = event.choice(choice_id)
    if choice is None:
        raise ValidationError(
            f"Unknown choice {choice_id!r}",
            {"event_id": event_id, "allowed": [c["id"] for c in event.choices]},
        )
    p, summary = apply_event_effects(profile, choice.get("effects", {}))
    resolved = next(e for e in p.career_events if e.id == event_id)
    resolved.resolved = True
    resolved.choice_made = choice_id
    resolved.outcome = choice.get("result")
    logger.info("Career event %s resolved with %s", event.template_id, choice_id)
    return p, resolved, summary
