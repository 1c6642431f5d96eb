"""
Overall rating and team strength calculations.
Single source of truth: position-weighted sum of the 7 attributes for the user,
mean of squad ratings for a team.
"""
from .constants import ATTRIBUTE_MIN, POSITION_RATING_WEIGHTS


def compute_overall(attributes: dict, position: str) -> int:
    """Weighted sum of current attributes for a position. Returns 0-99."""
    weights = POSITION_RATING_WEIGHTS.get(position, {})
    if not weights:
        return 0
    total = 0.0
    for attr, w in weights.items():
        total += w * float(attributes.get(attr, ATTRIBUTE_MIN))
    return min(99, max(0, round(total)))


def overall_rating(profile) -> int:
    """Overall for a PlayerProfile at its own position."""
    return compute_overall(profile.attributes, profile.position)


def team_strength(team, user_rating: int | None = None, include_user: bool = True) -> float:
    """Mean rating of a team's roster.

    The roster slot flagged ``is_user`` takes *user_rating* when given; with
    include_user=False (injured or absent user) that slot is left out.
    """
    ratings: list[float] = []
    for p in team.roster:
        if p.is_user:
            if not include_user:
                continue
            ratings.append(float(user_rating if user_rating is not None else p.rating))
        else:
            ratings.append(float(p.rating))
    return sum(ratings) / len(ratings) if ratings else 0.0
