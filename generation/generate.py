"""
Generate leagues (clubs with stadiums, colours, coaches and 22-man rosters), draft
prospects and the user's starting profile. All randomness comes from the caller's
RandomOutcomeProvider so a seeded career always builds the same world.

Procedural logic:
- Club names come from the per-tier pool; the user's club is always included.
- CPU ratings are drawn from the tier's band, with midfield slots skewed slightly higher.
- Stadiums are "<suburb> <suffix>" with a capacity from the tier's range.
"""
from __future__ import annotations

from models.config import CareerConfig
from models.constants import (
    ATTRIBUTES,
    ATTRIBUTE_MIN,
    COACH_TITLES,
    DEFAULT_POTENTIAL,
    DEFAULT_SUB_POSITION,
    FIRST_NAMES,
    LAST_NAMES,
    ONBOARDING_ATTRIBUTE_CAP,
    POSITIONS,
    PROSPECT_BIOS,
    PROSPECT_POTENTIAL_BANDS,
    PROSPECT_STATES,
    ROSTER_TEMPLATE,
    STADIUM_TEMPLATES,
    SUBURBS,
    TEAM_COLORS,
    TEAM_NAMES,
    TIERS,
    TIER_RATING_RANGE,
)
from models.draft import DraftProspect
from models.errors import ConfigurationError, ValidationError
from models.player import PlayerProfile
from models.team import RosterPlayer, Stadium, Team


def random_player_name(rng) -> str:
    return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"


def team_id_for(name: str) -> str:
    """Stable id from a club name: 'North Melbourne' -> 'north-melbourne'."""
    return name.lower().replace("'", "").replace(" ", "-")


def _stadium(tier: str, rng) -> Stadium:
    template = STADIUM_TEMPLATES[tier]
    suburb = rng.choice(SUBURBS)
    return Stadium(
        name=f"{suburb} {rng.choice(template['suffixes'])}",
        capacity=rng.randint(template["min_cap"], template["max_cap"]),
        suburb=suburb,
    )


def _coach(rng) -> str:
    return f"{rng.choice(COACH_TITLES)} {random_player_name(rng)}"


def _roster_rating(position: str, tier: str, rng) -> int:
    lo, hi = TIER_RATING_RANGE[tier]
    rating = rng.randint(lo, hi)
    if position == "Midfielder":
        rating = min(hi, rating + rng.randint(0, 3))
    return rating


def generate_roster(team_id: str, tier: str, rng) -> list[RosterPlayer]:
    """22 CPU players following ROSTER_TEMPLATE, in template order."""
    roster = []
    for i, (sub_position, position) in enumerate(ROSTER_TEMPLATE, start=1):
        roster.append(
            RosterPlayer(
                id=f"{team_id}-{i:02d}",
                name=random_player_name(rng),
                position=position,
                sub_position=sub_position,
                rating=_roster_rating(position, tier, rng),
            )
        )
    return roster


def generate_team(name: str, tier: str, rng) -> Team:
    team_id = team_id_for(name)
    return Team(
        id=team_id,
        name=name,
        tier=tier,
        colors=tuple(rng.choice(TEAM_COLORS)),
        stadium=_stadium(tier, rng),
        coach=_coach(rng),
        roster=generate_roster(team_id, tier, rng),
    )


def generate_league(
    tier: str,
    rng,
    team_count: int,
    user_club: str | None = None,
) -> list[Team]:
    """Build a fresh league of *team_count* clubs for *tier*.

    Parameters
    ----------
    tier : str
        One of TIERS; selects the name pool, stadium template and rating band.
    rng : RandomOutcomeProvider
    team_count : int
        Number of clubs; must fit the tier's name pool.
    user_club : str, optional
        A club that must be part of the league (the user's contract club).

    Returns
    -------
    list[Team]
        Clubs in a shuffled order with empty standings.
    """
    if tier not in TIERS:
        raise ConfigurationError(f"Unknown tier {tier!r}", {"tiers": TIERS})
    pool = list(TEAM_NAMES[tier])
    if team_count > len(pool):
        raise ConfigurationError(
            f"{tier} only has {len(pool)} clubs, cannot build a {team_count}-team league",
            {"tier": tier, "team_count": team_count},
        )
    rng.shuffle(pool)
    names = pool[:team_count]
    if user_club and user_club not in names:
        names[-1] = user_club
    return [generate_team(name, tier, rng) for name in names]


def generate_prospect(prospect_id: str, tier: str, rng, band: int = 0) -> DraftProspect:
    """One CPU draft prospect. Lower *band* index means a higher potential range."""
    lo, hi = PROSPECT_POTENTIAL_BANDS[min(band, len(PROSPECT_POTENTIAL_BANDS) - 1)]
    potential = rng.randint(lo, hi)
    rating_lo, rating_hi = TIER_RATING_RANGE[tier]
    rating = min(potential, rng.randint(rating_lo, rating_hi))
    position = rng.choice(POSITIONS)
    return DraftProspect(
        id=prospect_id,
        name=random_player_name(rng),
        age=rng.randint(18, 20),
        state=rng.choice(PROSPECT_STATES),
        position=position,
        sub_position=DEFAULT_SUB_POSITION[position],
        rating=rating,
        potential=potential,
        draft_rank=0,
        bio=rng.choice(PROSPECT_BIOS),
    )


def create_profile(
    name: str,
    position: str,
    allocations: dict[str, int] | None = None,
    config: CareerConfig | None = None,
    potential: int = DEFAULT_POTENTIAL,
) -> PlayerProfile:
    """Onboarding: spend the starting attribute points on top of the base of 10.

    Raises ValidationError when more points are spent than the config allows, an
    attribute would go above the onboarding cap, or a key is unknown.
    """
    config = config or CareerConfig()
    allocations = dict(allocations or {})
    unknown = set(allocations) - set(ATTRIBUTES)
    if unknown:
        raise ValidationError(f"Unknown attributes {sorted(unknown)}", {"allowed": ATTRIBUTES})
    if any(v < 0 for v in allocations.values()):
        raise ValidationError("Attribute allocations cannot be negative")
    spent = sum(allocations.values())
    if spent > config.starting_attribute_points:
        raise ValidationError(
            f"Spent {spent} points, only {config.starting_attribute_points} available",
            {"spent": spent, "available": config.starting_attribute_points},
        )
    attributes = {a: ATTRIBUTE_MIN + allocations.get(a, 0) for a in ATTRIBUTES}
    over = [a for a, v in attributes.items() if v > ONBOARDING_ATTRIBUTE_CAP]
    if over:
        raise ValidationError(
            f"Starting attributes cannot exceed {ONBOARDING_ATTRIBUTE_CAP}", {"attributes": over}
        )
    return PlayerProfile(
        name=name,
        position=position,
        age=config.starting_age,
        potential=min(potential, config.attribute_cap),
        attributes=attributes,
    )

