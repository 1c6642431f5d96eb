"""
Season fixture and finals generation for Footy Career.

The regular season cycles a single round robin (circle method) until
``season_length`` rounds are filled, swapping home/away on every second cycle so
a double round robin is exactly balanced. Odd team counts get one bye per round.
After the last league round the finals bracket is built from the ladder, one
round at a time, finishing with a Grand Final.
"""
from __future__ import annotations

from typing import Sequence

from models.constants import (
    MATCH_TYPE_ELIMINATION,
    MATCH_TYPE_GRAND,
    MATCH_TYPE_LEAGUE,
    MATCH_TYPE_PRELIMINARY,
    MATCH_TYPE_QUALIFYING,
    MATCH_TYPE_QUARTER,
    MATCH_TYPE_SEMI,
)
from models.errors import ConfigurationError
from models.fixture import Fixture

# Seed pairings for the opening finals round, in bracket order
SINGLE_ELIMINATION_SEEDS = {
    4: [(1, 4), (2, 3)],
    8: [(1, 8), (4, 5), (2, 7), (3, 6)],
}


def _round_robin_rounds(team_ids: list[str]) -> list[list[tuple[str, str]]]:
    """One full round robin: every pair meets once. None marks a bye slot."""
    teams: list[str | None] = list(team_ids)
    if len(teams) % 2 != 0:
        teams.append(None)
    n = len(teams)

    fixed = teams[0]
    rotating = list(teams[1:])
    rounds: list[list[tuple[str, str]]] = []

    for round_idx in range(n - 1):
        pairs: list[tuple] = []

        # Fixed team vs first rotating, alternating venue each round
        if round_idx % 2 == 0:
            pairs.append((fixed, rotating[0]))
        else:
            pairs.append((rotating[0], fixed))

        for i in range(1, n // 2):
            t1 = rotating[i]
            t2 = rotating[n - 1 - i]
            if i % 2 == 0:
                pairs.append((t1, t2))
            else:
                pairs.append((t2, t1))

        rounds.append([(h, a) for h, a in pairs if h is not None and a is not None])

        # Circle-method rotation: last element moves to front
        rotating = [rotating[-1]] + rotating[:-1]

    return rounds


def generate_season_fixtures(
    teams: Sequence,
    season_length: int,
    allow_byes: bool = True,
) -> list[Fixture]:
    """Build the regular-season fixture list.

    Parameters
    ----------
    teams : sequence of Team
        Clubs in the league; only ``id`` is used.
    season_length : int
        Number of rounds to fill.
    allow_byes : bool
        Whether an odd team count may be scheduled with one bye per round.

    Returns
    -------
    list[Fixture]
        Ordered by round. Every team plays at most once per round, and exactly
        once when the team count is even.

    Raises
    ------
    ConfigurationError
        Fewer than two teams, a non-positive season length, duplicate ids, or an
        odd team count with byes disabled.
    """
    team_ids = [t.id for t in teams]
    if len(team_ids) < 2:
        raise ConfigurationError(f"Need at least 2 teams for a season, got {len(team_ids)}")
    if season_length < 1:
        raise ConfigurationError(f"season_length must be >= 1, got {season_length}")
    if len(set(team_ids)) != len(team_ids):
        raise ConfigurationError("Team ids must be unique", {"team_ids": team_ids})
    if len(team_ids) % 2 != 0 and not allow_byes:
        raise ConfigurationError(
            f"{len(team_ids)} teams cannot play every round without byes",
            {"team_count": len(team_ids)},
        )

    cycle = _round_robin_rounds(team_ids)
    fixtures: list[Fixture] = []
    for round_no in range(1, season_length + 1):
        cycle_idx, slot = divmod(round_no - 1, len(cycle))
        swap = cycle_idx % 2 == 1
        for home, away in cycle[slot]:
            if swap:
                home, away = away, home
            fixtures.append(Fixture(round=round_no, home_team_id=home, away_team_id=away))
    return fixtures


# ===================================================================
# Finals
# ===================================================================

def _first_finals_round(
    seeded: list[str], round_no: int, finals_size: int, finals_format: str
) -> list[Fixture]:
    if finals_format == "double_chance":
        return [
            Fixture(round_no, seeded[0], seeded[1], MATCH_TYPE_QUALIFYING),
            Fixture(round_no, seeded[2], seeded[3], MATCH_TYPE_ELIMINATION),
        ]
    match_type = MATCH_TYPE_SEMI if finals_size == 4 else MATCH_TYPE_QUARTER
    return [
        Fixture(round_no, seeded[hi - 1], seeded[lo - 1], match_type)
        for hi, lo in SINGLE_ELIMINATION_SEEDS[finals_size]
    ]


def _hosted(a: str, b: str, seeds: dict[str, int]) -> tuple[str, str]:
    """Order two teams so the better ladder seed is at home."""
    return (a, b) if seeds[a] <= seeds[b] else (b, a)


def next_finals_fixtures(
    ladder: Sequence,
    fixtures: Sequence[Fixture],
    finals_size: int,
    finals_format: str = "single",
) -> list[Fixture]:
    """Return the next finals round to append, or [] when none is due.

    Nothing is generated while any league or finals fixture of the latest round
    is unplayed, or once the Grand Final has been played.
    """
    league = [f for f in fixtures if not f.is_final]
    if not league or any(not f.played for f in league):
        return []
    seeded = [t.id for t in ladder[:finals_size]]
    seeds = {tid: i + 1 for i, tid in enumerate(seeded)}

    finals = [f for f in fixtures if f.is_final]
    if not finals:
        first_round = max(f.round for f in league) + 1
        return _first_finals_round(seeded, first_round, finals_size, finals_format)

    last_round = max(f.round for f in finals)
    current = [f for f in finals if f.round == last_round]
    if any(not f.played for f in current):
        return []
    if any(f.match_type == MATCH_TYPE_GRAND for f in current):
        return []
    next_round = last_round + 1

    if finals_format == "double_chance":
        by_type = {f.match_type: f for f in finals}
        if MATCH_TYPE_QUALIFYING in {f.match_type for f in current}:
            qf = by_type[MATCH_TYPE_QUALIFYING]
            ef = by_type[MATCH_TYPE_ELIMINATION]
            home, away = _hosted(qf.loser_id(), ef.result.winner_id, seeds)
            return [Fixture(next_round, home, away, MATCH_TYPE_PRELIMINARY)]
        qf = by_type[MATCH_TYPE_QUALIFYING]
        pf = by_type[MATCH_TYPE_PRELIMINARY]
        home, away = _hosted(qf.result.winner_id, pf.result.winner_id, seeds)
        return [Fixture(next_round, home, away, MATCH_TYPE_GRAND)]

    winners = [f.result.winner_id for f in current]
    match_type = MATCH_TYPE_GRAND if len(winners) == 2 else MATCH_TYPE_SEMI
    out: list[Fixture] = []
    for i in range(0, len(winners), 2):
        home, away = _hosted(winners[i], winners[i + 1], seeds)
        out.append(Fixture(next_round, home, away, match_type))
    return out


def grand_final(fixtures: Sequence[Fixture]) -> Fixture | None:
    return next((f for f in fixtures if f.match_type == MATCH_TYPE_GRAND), None)


def is_season_complete(fixtures: Sequence[Fixture]) -> bool:
    gf = grand_final(fixtures)
    return gf is not None and gf.played


def is_eliminated(team_id: str, fixtures: Sequence[Fixture]) -> bool:
    """True once finals have started and the team is out (never qualified or lost a final)."""
    finals = [f for f in fixtures if f.is_final]
    if not finals:
        return False
    in_bracket = any(f.involves(team_id) for f in finals)
    if not in_bracket:
        return True
    for f in finals:
        if not f.involves(team_id) or not f.played:
            continue
        if f.loser_id() != team_id:
            continue
        # A qualifying-final loser gets a second chance
        if f.match_type == MATCH_TYPE_QUALIFYING:
            continue
        return True
    return False


def league_rounds(fixtures: Sequence[Fixture]) -> int:
    return max((f.round for f in fixtures if f.match_type == MATCH_TYPE_LEAGUE), default=0)
