"""
Match simulation engine for Footy Career.

Turns two teams (and, when selected, the user's athlete) into a final score, a stat
line for every player, Brownlow-style votes and an optional in-match injury.
Key design goals:

1. **Rating-driven**: each team's strength is the mean squad rating, with the user's
   overall substituted for their roster slot. The strength differential biases both
   the number of scoring chances and how many of them become goals.
2. **Internally consistent**: team goals/behinds equal the sum of individual goals/behinds;
   the user's own goals are part of their team's score, never extra.
3. **Replayable**: every draw comes from the shared RandomOutcomeProvider, so the
   same stream position produces the same match.
"""
from __future__ import annotations

import logging

from models.constants import (
    CHANCE_BASE,
    CHANCE_MIN,
    CHANCE_SD,
    CHANCE_SWING,
    GOAL_PROB_BASE,
    GOAL_PROB_RANGE,
    GOAL_PROB_SWING,
    HOME_ADVANTAGE,
    INJURY_CHANCE,
    INJURY_LOW_ENERGY,
    INJURY_LOW_ENERGY_MULTIPLIER,
    INJURY_TYPES,
    MASTER_SKILLS,
    MORALE_HIGH,
    MORALE_HIGH_MULTIPLIER,
    MORALE_LOW,
    MORALE_LOW_MULTIPLIER,
    POSITION_STAT_PROFILE,
    QUARTERS,
    TEAM_DISPOSALS_MEAN,
    TEAM_TACKLES_MEAN,
    VOTES_AWARDED,
)
from models.fixture import MatchResult, PerformerStats, ScoreLine
from models.player import Injury, PlayerProfile
from models.ratings import overall_rating, team_strength
from models.team import Team
from simulation.chemistry import strength_bonus

logger = logging.getLogger(__name__)

USER_PLAYER_ID = "user"


# ===================================================================
# Helper utilities
# ===================================================================

def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _weighted_partition(
    total: int,
    weights: list[float],
    rng,
    noise: float = 0.04,
) -> list[int]:
    """Split *total* into ``len(weights)`` non-negative ints that sum to
    *total*, roughly proportional to *weights* with small Gaussian noise.
    """
    n = len(weights)
    if n == 0:
        return []
    if total <= 0:
        return [0] * n

    w_sum = sum(weights)
    if w_sum <= 0:
        weights = [1.0] * n
        w_sum = float(n)

    noisy = [max(0.001, w / w_sum + rng.gauss(0, noise)) for w in weights]
    n_sum = sum(noisy)

    raw = [total * (nw / n_sum) for nw in noisy]
    result = [max(0, int(r)) for r in raw]

    # Distribute rounding remainder to the highest-weighted slots
    remainder = total - sum(result)
    if remainder != 0:
        indices = sorted(range(n), key=lambda i: noisy[i], reverse=True)
        step = 1 if remainder > 0 else -1
        for i in range(abs(remainder)):
            idx = indices[i % n]
            result[idx] = max(0, result[idx] + step)

    diff = total - sum(result)
    if diff != 0:
        idx = max(range(n), key=lambda i: result[i])
        result[idx] = max(0, result[idx] + diff)

    return result


def morale_multiplier(morale: int) -> float:
    if morale > MORALE_HIGH:
        return MORALE_HIGH_MULTIPLIER
    if morale < MORALE_LOW:
        return MORALE_LOW_MULTIPLIER
    return 1.0


def _master_skill_bonus(profile: PlayerProfile, stat: str) -> float:
    bonus = 0.0
    for skill in MASTER_SKILLS:
        if skill["id"] in profile.master_skills and skill["stat"] == stat:
            bonus += skill["bonus"]
    return 1.0 + bonus


# ===================================================================
# User stat line and injury
# ===================================================================

def roll_injury(profile: PlayerProfile, rng) -> tuple[Injury | None, int]:
    """Return (injury, quarter it happened in) or (None, 0).

    Base chance is small and doubles when the player starts the match tired.
    """
    chance = INJURY_CHANCE
    if profile.energy < INJURY_LOW_ENERGY:
        chance *= INJURY_LOW_ENERGY_MULTIPLIER
    if not rng.chance(chance):
        return None, 0
    name, weeks = rng.choice(INJURY_TYPES)
    quarter = rng.randint(1, QUARTERS)
    return Injury(name=name, weeks_remaining=weeks), quarter


def _user_stat_line(profile: PlayerProfile, team_id: str, rng, injury_quarter: int = 0) -> PerformerStats:
    """Draw the user's disposals/tackles/goals/behinds from their attributes."""
    a = profile.attributes
    shape = POSITION_STAT_PROFILE[profile.position]
    mult = morale_multiplier(profile.morale)

    disposals = (rng.randint(0, 14) + a["stamina"] / 8 + a["speed"] / 8 + a["handball"] / 10) * shape["disposals"]
    if profile.position == "Forward":
        goals = rng.randint(0, 3) + (1 if a["kicking"] > 50 else 0) + a["goal_sense"] / 20
    else:
        goals = rng.randint(0, 1) * shape["goals"] + a["goal_sense"] / 40
    behinds = float(rng.randint(0, 2))
    tackles = (rng.randint(0, 3) + a["tackling"] / 10) * shape["tackles"]

    disposals *= mult * _master_skill_bonus(profile, "disposals")
    goals *= mult * _master_skill_bonus(profile, "goals")
    tackles *= mult * _master_skill_bonus(profile, "tackles")

    if injury_quarter > 0:
        play_time = (injury_quarter - 0.5) / QUARTERS
        disposals *= play_time
        goals *= play_time
        behinds *= play_time
        tackles *= play_time

    return PerformerStats(
        player_id=USER_PLAYER_ID,
        name=profile.name,
        team_id=team_id,
        disposals=max(0, int(disposals)),
        tackles=max(0, int(tackles)),
        goals=max(0, int(goals)),
        behinds=max(0, int(behinds)),
        is_user=True,
    )


# ===================================================================
# Scoreline
# ===================================================================

def _scoring_chances(own: float, opp: float, rng) -> tuple[int, int]:
    """Random walk of scoring chances for one side: returns (goals, behinds)."""
    diff = own - opp
    chances = max(CHANCE_MIN, round(rng.gauss(CHANCE_BASE + CHANCE_SWING * diff, CHANCE_SD)))
    goal_p = _clamp(GOAL_PROB_BASE + GOAL_PROB_SWING * diff, *GOAL_PROB_RANGE)
    goals = behinds = 0
    for _ in range(chances):
        if rng.random() < goal_p:
            goals += 1
        else:
            behinds += 1
    return goals, behinds


def _quarter_totals(goals: int, behinds: int, rng) -> list[int]:
    """Cumulative points at each of the four breaks."""
    g_split = _weighted_partition(goals, [1.0] * QUARTERS, rng, noise=0.08)
    b_split = _weighted_partition(behinds, [1.0] * QUARTERS, rng, noise=0.08)
    running = 0
    out: list[int] = []
    for g, b in zip(g_split, b_split):
        running += g * 6 + b
        out.append(running)
    return out


def _break_tie(home: ScoreLine, away: ScoreLine, home_str: float, away_str: float, rng) -> None:
    """Extra time for finals: play scoring shots until the totals differ."""
    home_share = home_str / (home_str + away_str) if home_str + away_str > 0 else 0.5
    while home.total == away.total:
        side = home if rng.random() < home_share else away
        if rng.random() < GOAL_PROB_BASE:
            side.goals += 1
        else:
            side.behinds += 1
    home.quarters.append(home.total)
    away.quarters.append(away.total)


# ===================================================================
# Player stat allocation and votes
# ===================================================================

def _cpu_stat_lines(
    team: Team,
    goals: int,
    behinds: int,
    strength: float,
    user_line: PerformerStats | None,
    rng,
) -> list[PerformerStats]:
    """Split the team's output across its CPU players (user slot excluded).

    Lines come back in roster order with the user's line at their own slot.
    """
    cpu = [p for p in team.roster if not p.is_user]
    disposals_total = max(0, round(rng.gauss(TEAM_DISPOSALS_MEAN * (0.8 + strength / 250), 25)))
    tackles_total = max(0, round(rng.gauss(TEAM_TACKLES_MEAN, 8)))
    if user_line is not None:
        disposals_total = max(0, disposals_total - user_line.disposals)
        tackles_total = max(0, tackles_total - user_line.tackles)

    def _w(stat: str) -> list[float]:
        return [POSITION_STAT_PROFILE[p.position][stat] * max(1, p.rating) for p in cpu]

    disp = _weighted_partition(disposals_total, _w("disposals"), rng)
    tack = _weighted_partition(tackles_total, _w("tackles"), rng)
    gls = _weighted_partition(goals, _w("goals"), rng, noise=0.1)
    bhs = _weighted_partition(behinds, _w("goals"), rng, noise=0.1)

    cpu_lines = iter(
        PerformerStats(
            player_id=p.id, name=p.name, team_id=team.id,
            disposals=disp[i], tackles=tack[i], goals=gls[i], behinds=bhs[i],
        )
        for i, p in enumerate(cpu)
    )
    lines: list[PerformerStats] = []
    for p in team.roster:
        if p.is_user:
            if user_line is not None:
                lines.append(user_line)
        else:
            lines.append(next(cpu_lines))
    return lines


def award_votes(performers: list[PerformerStats]) -> dict[str, int]:
    """3-2-1 votes to the best performers.

    Ranked by performance score, then goals, then disposals, then input order.
    """
    ranked = sorted(
        enumerate(performers),
        key=lambda ip: (-ip[1].performance_score, -ip[1].goals, -ip[1].disposals, ip[0]),
    )
    votes: dict[str, int] = {}
    for (_, perf), v in zip(ranked, VOTES_AWARDED):
        votes[perf.player_id] = v
    return votes


# ===================================================================
# Public API
# ===================================================================

def simulate_match(
    home: Team,
    away: Team,
    user_team_id: str | None,
    profile: PlayerProfile | None,
    rng,
    *,
    allow_draw: bool = True,
) -> MatchResult:
    """Simulate one fixture.

    Parameters
    ----------
    home, away : Team
        The two clubs. Roster ratings drive team strength.
    user_team_id : str | None
        The user's club id; the user plays only if it matches one side.
    profile : PlayerProfile | None
        The user's athlete. An injured profile is left out of selection; when
        they play, their team chemistry shifts their side's strength.
    rng : RandomOutcomeProvider
        The only randomness source used.
    allow_draw : bool
        False for finals: tied scores go to extra time.

    Returns
    -------
    MatchResult
        Scores, winner (None for a draw), the user's stat line when they played,
        top performers, votes and any injury the user picked up.
    """
    user_side = None
    if profile is not None and user_team_id in (home.id, away.id) and not profile.is_injured:
        user_side = "home" if user_team_id == home.id else "away"

    user_rating = overall_rating(profile) if profile is not None else None
    home_str = team_strength(home, user_rating, include_user=user_side == "home") + HOME_ADVANTAGE
    away_str = team_strength(away, user_rating, include_user=user_side == "away")
    if user_side == "home":
        home_str += strength_bonus(profile.chemistry)
    elif user_side == "away":
        away_str += strength_bonus(profile.chemistry)

    injury = None
    user_line = None
    if user_side is not None:
        injury, injury_quarter = roll_injury(profile, rng)
        user_line = _user_stat_line(profile, user_team_id, rng, injury_quarter)

    home_goals, home_behinds = _scoring_chances(home_str, away_str, rng)
    away_goals, away_behinds = _scoring_chances(away_str, home_str, rng)

    # The user's scoring is part of the team's, never on top of it
    if user_line is not None:
        if user_side == "home":
            home_goals = max(home_goals, user_line.goals)
            home_behinds = max(home_behinds, user_line.behinds)
        else:
            away_goals = max(away_goals, user_line.goals)
            away_behinds = max(away_behinds, user_line.behinds)

    home_line = ScoreLine(home_goals, home_behinds, _quarter_totals(home_goals, home_behinds, rng))
    away_line = ScoreLine(away_goals, away_behinds, _quarter_totals(away_goals, away_behinds, rng))
    if not allow_draw and home_line.total == away_line.total:
        _break_tie(home_line, away_line, home_str, away_str, rng)

    def _rest(line: ScoreLine, side: str) -> tuple[int, int]:
        if user_line is not None and user_side == side:
            return line.goals - user_line.goals, line.behinds - user_line.behinds
        return line.goals, line.behinds

    hg, hb = _rest(home_line, "home")
    ag, ab = _rest(away_line, "away")
    performers = (
        _cpu_stat_lines(home, hg, hb, home_str, user_line if user_side == "home" else None, rng)
        + _cpu_stat_lines(away, ag, ab, away_str, user_line if user_side == "away" else None, rng)
    )
    votes = award_votes(performers)
    top = [p for p in performers if p.player_id in votes]
    top.sort(key=lambda p: -votes[p.player_id])

    if home_line.total > away_line.total:
        winner_id, summary = home.id, f"{home.name} {home_line} def. {away.name} {away_line}"
    elif away_line.total > home_line.total:
        winner_id, summary = away.id, f"{away.name} {away_line} def. {home.name} {home_line}"
    else:
        winner_id, summary = None, f"{home.name} {home_line} drew with {away.name} {away_line}"

    logger.debug("Match %s v %s: %s", home.id, away.id, summary)

    return MatchResult(
        home=home_line,
        away=away_line,
        winner_id=winner_id,
        summary=summary,
        user_stats=user_line,
        top_performers=top,
        votes=votes,
        user_injury=injury,
        performers=performers,
    )
