"""
Ladder calculation for Footy Career.
Standings are rebuilt from scratch from played league fixtures every time; nothing is
patched incrementally, so the table can never drift from the results it summarises.
"""
from __future__ import annotations

import copy
from typing import Sequence

from models.constants import POINTS_DRAW, POINTS_LOSS, POINTS_WIN
from models.fixture import Fixture
from models.team import Team


def compute_percentage(points_for: int, points_against: int) -> float:
    """points_for / points_against * 100, guarding a zero denominator."""
    if points_against == 0:
        return float(points_for * 100) if points_for > 0 else 0.0
    return points_for / points_against * 100.0


def ladder_sort_key(team: Team) -> tuple:
    return (-team.points, -team.percentage, -team.points_for, team.name)


def compute_ladder(teams: Sequence[Team], fixtures: Sequence[Fixture]) -> list[Team]:
    """Return copies of *teams* with standings rebuilt, sorted into ladder order.

    Only played league fixtures count; finals never change the ladder.
    Order: points desc, percentage desc, points_for desc, name asc.
    """
    table: dict[str, Team] = {}
    for t in teams:
        fresh = copy.copy(t)
        fresh.wins = fresh.losses = fresh.draws = 0
        fresh.points_for = fresh.points_against = 0
        fresh.points = 0
        table[t.id] = fresh

    for f in fixtures:
        if not f.played or f.is_final or f.result is None:
            continue
        home = table.get(f.home_team_id)
        away = table.get(f.away_team_id)
        if home is None or away is None:
            continue
        hs = f.result.home.total
        as_ = f.result.away.total
        home.points_for += hs
        home.points_against += as_
        away.points_for += as_
        away.points_against += hs
        if hs > as_:
            home.wins += 1
            away.losses += 1
            home.points += POINTS_WIN
            away.points += POINTS_LOSS
        elif as_ > hs:
            away.wins += 1
            home.losses += 1
            away.points += POINTS_WIN
            home.points += POINTS_LOSS
        else:
            home.draws += 1
            away.draws += 1
            home.points += POINTS_DRAW
            away.points += POINTS_DRAW

    for t in table.values():
        t.percentage = compute_percentage(t.points_for, t.points_against)

    return sorted(table.values(), key=ladder_sort_key)


def ladder_position(ladder: Sequence[Team], team_id: str) -> int | None:
    """1-based position of *team_id* in an already-sorted ladder."""
    for i, t in enumerate(ladder):
        if t.id == team_id:
            return i + 1
    return None
