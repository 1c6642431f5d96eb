"""
National draft for Footy Career.

A draft class is built with more prospects than picks, one of them the user. Clubs
pick worst-ladder-first for DRAFT_ROUNDS rounds. The AI takes the best available
prospect by a noisy value score, sometimes favouring the position where its squad
is thinnest. Once every pick is made the class is completed and never reopens.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Sequence

from models.constants import (
    DRAFT_CLASS_EXTRA,
    DRAFT_NEED_CHANCE,
    DRAFT_RANK_NOISE,
    DRAFT_ROUNDS,
    POSITIONS,
    PROSPECT_POTENTIAL_BANDS,
    TIER_NATIONAL,
)
from models.draft import DraftClass, DraftPick, DraftProspect
from models.errors import ValidationError
from models.player import PlayerProfile
from models.ratings import overall_rating
from models.team import Team

logger = logging.getLogger(__name__)

# Value bonus for a prospect who fills the club's weakest line
POSITION_NEED_BONUS = 5.0
PICK_NOISE = 3.0


def user_prospect_id(year: int) -> str:
    return f"prospect-user-{year}"


def _user_prospect(profile: PlayerProfile, year: int) -> DraftProspect:
    return DraftProspect(
        id=user_prospect_id(year),
        name=profile.name,
        age=profile.age,
        state="VIC",
        position=profile.position,
        sub_position=profile.sub_position,
        rating=overall_rating(profile),
        potential=profile.potential,
        draft_rank=0,
        bio=f"{profile.position} with {profile.career_stats.matches} senior games behind them.",
        is_user=True,
    )


def _assign_draft_ranks(prospects: list[DraftProspect], rng) -> list[DraftProspect]:
    """Rank by true quality, blur by scouting noise, then re-rank to 1..n."""
    by_quality = sorted(prospects, key=lambda p: (-p.potential, -p.rating, p.id))
    noisy = []
    for base_rank, p in enumerate(by_quality, start=1):
        noise = rng.randint(-DRAFT_RANK_NOISE, DRAFT_RANK_NOISE)
        noisy.append((base_rank + noise, base_rank, p))
    noisy.sort(key=lambda x: (x[0], x[1]))
    ranked = []
    for rank, (_, _, p) in enumerate(noisy, start=1):
        p.draft_rank = rank
        ranked.append(p)
    return ranked


def build_draft_class(
    year: int,
    profile: PlayerProfile | None,
    pick_order: Sequence[Team],
    rng,
    tier: str = TIER_NATIONAL,
) -> DraftClass:
    """Create the draft class for *year*.

    Parameters
    ----------
    year : int
    profile : PlayerProfile or None
        When given, the user is entered as prospect ``prospect-user-{year}``.
    pick_order : sequence of Team
        Drafting clubs, worst ladder position first. Each round repeats this order.
    rng : RandomOutcomeProvider
    tier : str
        Tier of the drafting clubs.

    Returns
    -------
    DraftClass
        Prospects sorted by draft_rank and picks numbered 1..n with none made.
    """
    from generation.generate import generate_prospect

    if not pick_order:
        raise ValidationError("A draft needs at least one drafting club")
    picks: list[DraftPick] = []
    number = 1
    for round_no in range(1, DRAFT_ROUNDS + 1):
        for team in pick_order:
            picks.append(DraftPick(round=round_no, pick_number=number, team_id=team.id, team_name=team.name))
            number += 1

    total = len(picks) + DRAFT_CLASS_EXTRA
    prospects: list[DraftProspect] = []
    if profile is not None:
        prospects.append(_user_prospect(profile, year))
    bands = len(PROSPECT_POTENTIAL_BANDS)
    i = 1
    while len(prospects) < total:
        band = (i - 1) * bands // total
        prospects.append(generate_prospect(f"prospect-{year}-{i}", TIER_NATIONAL, rng, band=band))
        i += 1

    return DraftClass(year=year, tier=tier, prospects=_assign_draft_ranks(prospects, rng), picks=picks)


def _weakest_position(team: Team) -> str | None:
    """Position whose roster players have the lowest mean rating."""
    means: dict[str, float] = {}
    for pos in POSITIONS:
        ratings = [rp.rating for rp in team.roster if rp.position == pos]
        if ratings:
            means[pos] = sum(ratings) / len(ratings)
    if not means:
        return None
    return min(means, key=lambda pos: (means[pos], pos))


def _pick_best_available(
    available: list[DraftProspect], team: Team | None, rng
) -> DraftProspect:
    """AI logic: value = rating + potential/2 + noise, with an occasional need bonus."""
    need = _weakest_position(team) if team is not None else None
    use_need = need is not None and rng.chance(DRAFT_NEED_CHANCE)
    best: DraftProspect | None = None
    best_key: tuple[float, int] | None = None
    for p in sorted(available, key=lambda p: p.draft_rank):
        value = p.rating + p.potential / 2 + rng.uniform(-PICK_NOISE, PICK_NOISE)
        if use_need and p.position == need:
            value += POSITION_NEED_BONUS
        key = (value, -p.draft_rank)
        if best_key is None or key > best_key:
            best, best_key = p, key
    return best


def make_draft_pick(
    draft: DraftClass, teams: Sequence[Team], rng
) -> tuple[DraftClass, dict[str, Any]]:
    """Fill the pick on the clock. Returns the updated class and a pick summary.

    Raises ValidationError if the draft is completed or has no open pick or
    no prospect left.
    """
    if draft.completed:
        raise ValidationError("The draft is already completed")
    current = draft.current_pick()
    if current is None:
        raise ValidationError("Every pick has been made; complete the draft")
    available = draft.available()
    if not available:
        raise ValidationError("No prospects left to draft")

    d = copy.deepcopy(draft)
    pick = d.current_pick()
    team = next((t for t in teams if t.id == pick.team_id), None)
    chosen = _pick_best_available(available, team, rng)
    pick.prospect_id = chosen.id
    logger.debug("Pick %d: %s select %s", pick.pick_number, pick.team_name, chosen.name)
    return d, {
        "pick_number": pick.pick_number,
        "round": pick.round,
        "team_id": pick.team_id,
        "team_name": pick.team_name,
        "prospect_id": chosen.id,
        "prospect_name": chosen.name,
        "position": chosen.position,
        "rating": chosen.rating,
        "potential": chosen.potential,
        "is_user": chosen.is_user,
    }


def complete_draft(
    draft: DraftClass, teams: Sequence[Team], rng
) -> tuple[DraftClass, list[dict[str, Any]]]:
    """Make every remaining pick and close the draft."""
    if draft.completed:
        raise ValidationError("The draft is already completed")
    made: list[dict[str, Any]] = []
    d = draft
    while d.current_pick() is not None and d.available():
        d, info = make_draft_pick(d, teams, rng)
        made.append(info)
    d = copy.deepcopy(d)
    d.completed = True
    return d, made


def user_draft_pick(draft: DraftClass) -> DraftPick | None:
    """The pick that took the user, or None if they went undrafted."""
    return draft.pick_for(user_prospect_id(draft.year))
