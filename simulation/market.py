"""
Transfer market for Footy Career.

Clubs make offers at mid-season, at the end of the regular season and whenever the
user's contract is about to run out. Offers expire after a few rounds; accepting one
replaces the contract and clears the rest. Season-end promotion, relegation and
contract renewal live here too since they all price the player against a tier.
"""
from __future__ import annotations

import copy
import logging
from typing import Callable, Sequence

from models.constants import (
    BASE_SALARY,
    DRAFT_ELIGIBLE_AGE,
    DRAFT_ELIGIBLE_RATING,
    MAX_OFFERS,
    MIN_OFFER_SALARY,
    MORALE_MAX,
    MORALE_TRANSFER,
    OFFER_EXPIRY_ROUNDS,
    PROMOTION_RULES,
    PROMOTION_SALARY_BONUS,
    RELEGATION_RULES,
    ROLE_DEPTH,
    ROLE_ROTATION,
    ROLE_STAR,
    ROLE_STARTER,
    TEAM_NAMES,
    TIERS,
    TIER_NATIONAL,
    TIER_OFFER_RATING,
    TIER_SALARY_MULTIPLIER,
    TIER_STATE,
)
from models.errors import NotFoundError
from models.player import Contract, PlayerProfile
from models.ratings import overall_rating
from models.team import RosterPlayer, Team
from models.transfer import TransferOffer

logger = logging.getLogger(__name__)

OFFER_REASONS = {
    ROLE_STAR: ["Build the side around you", "Lead us to a premiership", "Be the face of the club"],
    ROLE_STARTER: ["Key addition to our best 22", "Fill a crucial hole in the side", "Boost our finals chances"],
    ROLE_ROTATION: ["Add depth to the list", "Valuable squad role on offer", "A path to more game time"],
    ROLE_DEPTH: ["Develop under experienced coaches", "A long-term investment in your future"],
}
PROMOTION_REASONS = {
    TIER_STATE: ["Time to step up to state level", "Your potential fits our development plan"],
    TIER_NATIONAL: ["Ready for the big league", "Your form has caught our recruiters' eye"],
}


# ===================================================================
# Pricing
# ===================================================================

def offer_salary(tier: str, rating: int) -> int:
    """Base offer salary for a tier at a given overall rating, floored at MIN_OFFER_SALARY."""
    if tier == TIER_NATIONAL:
        base = 1500 + (rating - 70) * 50
    elif tier == TIER_STATE:
        base = 600 + (rating - 60) * 30
    else:
        base = 200 + (rating - 50) * 15
    return max(MIN_OFFER_SALARY, base)


def offer_role(rating: int, ladder_position: int | None, team_count: int) -> str:
    if rating >= 85:
        return ROLE_STAR
    if rating >= 75:
        return ROLE_STARTER
    if rating >= 65:
        # Struggling clubs promise a starting spot
        if ladder_position is not None and ladder_position > team_count // 2:
            return ROLE_STARTER
        return ROLE_ROTATION
    return ROLE_DEPTH


def contract_length_for(rating: int) -> int:
    return min(4, max(1, rating // 25 + 1))


def generate_new_season_salary(tier: str, rating: int, promoted: bool = False) -> int:
    """Salary for a renewed contract at season rollover."""
    salary = BASE_SALARY * TIER_SALARY_MULTIPLIER[tier]
    salary += ((rating - 50) // 10) * 100
    if promoted:
        salary += PROMOTION_SALARY_BONUS
    return max(int(salary), BASE_SALARY)


# ===================================================================
# Offers
# ===================================================================

def should_generate_offers(profile: PlayerProfile, round_no: int, season_length: int) -> bool:
    if profile.contract.years_left <= 1:
        return True
    return round_no in (season_length // 2, season_length)


def prune_offers(offers: Sequence[TransferOffer], round_no: int) -> list[TransferOffer]:
    """Drop offers whose expiry round has passed."""
    return [o for o in offers if o.expires_round >= round_no]


def _adjacent_tiers(tier: str) -> list[str]:
    idx = TIERS.index(tier)
    return [TIERS[i] for i in (idx - 1, idx + 1) if 0 <= i < len(TIERS)]


def _candidate_clubs(
    profile: PlayerProfile,
    ladder: Sequence[Team],
    rating: int,
    season_end: bool,
) -> list[tuple[str, str, int]]:
    """(club_name, tier, ladder_position) pairs that may bid for the player."""
    tier = profile.contract.tier
    taken = {o.club_name for o in profile.transfer_offers}
    own = profile.contract.club_name
    out: list[tuple[str, str, int]] = []
    for pos, team in enumerate(ladder, start=1):
        if team.name == own or team.name in taken:
            continue
        if rating >= TIER_OFFER_RATING[team.tier]:
            out.append((team.name, team.tier, pos))
    if season_end:
        in_league = {t.name for t in ladder}
        for other in _adjacent_tiers(tier):
            if rating < TIER_OFFER_RATING[other]:
                continue
            for name in TEAM_NAMES[other]:
                if name in in_league or name in taken or name == own:
                    continue
                out.append((name, other, 0))
    return out


def _pick_reason(profile: PlayerProfile, role: str, tier: str, rng) -> str:
    reasons = list(OFFER_REASONS[role])
    if TIERS.index(tier) > TIERS.index(profile.contract.tier):
        reasons.extend(PROMOTION_REASONS.get(tier, []))
    if profile.age <= 23:
        reasons.append("Young talent with a huge upside")
    elif profile.age >= 30:
        reasons.append("Experienced head for a finals push")
    return rng.choice(reasons)


def generate_offers(
    profile: PlayerProfile,
    ladder: Sequence[Team],
    round_no: int,
    season_length: int,
    rng,
    make_id: Callable[[str], str],
) -> list[TransferOffer]:
    """New offers for the player this round.

    Parameters
    ----------
    profile : PlayerProfile
        Existing open offers count toward MAX_OFFERS and block a second offer
        from the same club.
    ladder : sequence of Team
        The current league in ladder order; supplies clubs and their positions.
    round_no, season_length : int
        Season-end offers may also come from clubs of an adjacent tier.
    rng : RandomOutcomeProvider
    make_id : callable
        Produces a unique id from a prefix (``GameState.next_id``).

    Returns
    -------
    list[TransferOffer]
        Sorted best salary first. Empty when no offer is due.
    """
    if not should_generate_offers(profile, round_no, season_length):
        return []
    room = MAX_OFFERS - len(profile.transfer_offers)
    if room <= 0:
        return []

    rating = overall_rating(profile)
    performing = profile.season_stats.votes >= 5 or profile.career_stats.votes >= 30
    count = min(room, max(1, (rating - 60) // 10 + (1 if performing else 0)))
    clubs = _candidate_clubs(profile, ladder, rating, season_end=round_no >= season_length)
    if not clubs:
        return []
    rng.shuffle(clubs)

    current_salary = profile.contract.salary
    offers: list[TransferOffer] = []
    for club_name, tier, position in clubs[:count]:
        salary = round(offer_salary(tier, rating) * rng.uniform(1.0, 1.3))
        if tier == profile.contract.tier:
            salary = max(salary, round(current_salary * 1.1))
        elif TIERS.index(tier) > TIERS.index(profile.contract.tier):
            salary = max(salary, round(current_salary * 1.2))
        role = offer_role(rating, position or None, len(ladder))
        offers.append(
            TransferOffer(
                id=make_id("offer"),
                club_name=club_name,
                tier=tier,
                team_ranking=position,
                salary=max(MIN_OFFER_SALARY, salary),
                contract_length=contract_length_for(rating),
                role=role,
                reason=_pick_reason(profile, role, tier, rng),
                expires_round=round_no + OFFER_EXPIRY_ROUNDS,
            )
        )
    offers.sort(key=lambda o: -o.salary)
    logger.debug("Round %d: %d offer(s) for %s", round_no, len(offers), profile.name)
    return offers


def _find_offer(profile: PlayerProfile, offer_id: str) -> TransferOffer:
    for offer in profile.transfer_offers:
        if offer.id == offer_id:
            return offer
    raise NotFoundError(f"No open transfer offer {offer_id!r}", {"offer_id": offer_id})


def accept_transfer(
    profile: PlayerProfile, offer_id: str, round_no: int
) -> tuple[PlayerProfile, TransferOffer]:
    """Sign with the offering club. Every other open offer is cleared.

    Raises NotFoundError for an unknown offer or one that expired before *round_no*.
    """
    offer = _find_offer(profile, offer_id)
    if offer.expires_round < round_no:
        raise NotFoundError(f"Transfer offer {offer_id!r} has expired", {"offer_id": offer_id})
    p = copy.deepcopy(profile)
    p.contract = Contract(
        club_name=offer.club_name,
        salary=offer.salary,
        tier=offer.tier,
        years_left=offer.contract_length,
    )
    p.transfer_offers = []
    p.morale = min(MORALE_MAX, p.morale + MORALE_TRANSFER)
    if offer.club_name not in p.clubs:
        p.clubs.append(offer.club_name)
    return p, offer


def reject_transfer(profile: PlayerProfile, offer_id: str) -> PlayerProfile:
    _find_offer(profile, offer_id)
    p = copy.deepcopy(profile)
    p.transfer_offers = [o for o in p.transfer_offers if o.id != offer_id]
    return p


# ===================================================================
# Roster moves
# ===================================================================

def _user_slot(team: Team) -> int | None:
    for i, rp in enumerate(team.roster):
        if rp.is_user:
            return i
    return None


def remove_user_from_team(team: Team, rng, make_id: Callable[[str], str]) -> None:
    """Refill the user's roster slot with a CPU player of squad-average rating."""
    from generation.generate import random_player_name

    idx = _user_slot(team)
    if idx is None:
        return
    others = [rp.rating for rp in team.roster if not rp.is_user]
    rating = round(sum(others) / len(others)) if others else 50
    old = team.roster[idx]
    team.roster[idx] = RosterPlayer(
        id=make_id("player"),
        name=random_player_name(rng),
        position=old.position,
        sub_position=old.sub_position,
        rating=rating,
    )


def place_user_in_team(team: Team, profile: PlayerProfile) -> None:
    """Put the user into the squad, taking the weakest slot at their position."""
    if _user_slot(team) is not None:
        return
    rating = overall_rating(profile)
    same = [i for i, rp in enumerate(team.roster) if rp.position == profile.position]
    pool = same or list(range(len(team.roster)))
    idx = min(pool, key=lambda i: (team.roster[i].rating, i))
    team.roster[idx] = RosterPlayer(
        id="user",
        name=profile.name,
        position=profile.position,
        sub_position=profile.sub_position,
        rating=rating,
        is_user=True,
    )


def relocate_user(
    teams: Sequence[Team],
    profile: PlayerProfile,
    rng,
    make_id: Callable[[str], str],
) -> bool:
    """Move the user's roster slot to ``profile.contract.club_name``.

    Returns False when the new club is not in this league; the move then waits
    for the next season's league build and the user sits out until then.
    """
    for team in teams:
        if team.name != profile.contract.club_name:
            remove_user_from_team(team, rng, make_id)
    target = next((t for t in teams if t.name == profile.contract.club_name), None)
    if target is None:
        return False
    place_user_in_team(target, profile)
    return True


# ===================================================================
# Season-end tier movement
# ===================================================================

def tier_movement(
    tier: str, ladder_position: int | None, team_count: int, rating: int
) -> tuple[str, bool, bool]:
    """Where the player's contract tier lands next season.

    Returns (new_tier, promoted, relegated).
    """
    if ladder_position is None:
        return tier, False, False
    if tier in PROMOTION_RULES:
        cut, min_rating = PROMOTION_RULES[tier]
        if ladder_position <= cut and rating >= min_rating:
            return TIERS[TIERS.index(tier) + 1], True, False
    if tier in RELEGATION_RULES:
        bottom, max_rating = RELEGATION_RULES[tier]
        if ladder_position > team_count - bottom and rating < max_rating:
            return TIERS[TIERS.index(tier) - 1], False, True
    return tier, False, False


def is_draft_eligible(tier: str, ladder_position: int | None, rating: int, age: int) -> bool:
    """STATE-league players who finish top two or rate highly enough enter the national draft."""
    if tier != TIER_STATE or age >= DRAFT_ELIGIBLE_AGE:
        return False
    top_two = ladder_position is not None and ladder_position <= 2
    return top_two or rating >= DRAFT_ELIGIBLE_RATING


def base_contract(club_name: str, tier: str, rating: int) -> Contract:
    """A one-year deal for a player landing at a club without an offer."""
    return Contract(
        club_name=club_name,
        salary=generate_new_season_salary(tier, rating),
        tier=tier,
        years_left=1,
    )

