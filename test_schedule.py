#!/usr/bin/env python3
"""
Fixture and finals generation tests.
"""
from collections import Counter

import pytest

from models.constants import (
    MATCH_TYPE_ELIMINATION,
    MATCH_TYPE_GRAND,
    MATCH_TYPE_PRELIMINARY,
    MATCH_TYPE_QUALIFYING,
    MATCH_TYPE_QUARTER,
    MATCH_TYPE_SEMI,
)
from models.errors import ConfigurationError
from models.fixture import MatchResult, ScoreLine
from models.team import Team
from simulation.ladder import compute_ladder
from simulation.schedule import (
    generate_season_fixtures,
    grand_final,
    is_eliminated,
    is_season_complete,
    league_rounds,
    next_finals_fixtures,
)


def _teams(n):
    return [Team(id=f"t{i}", name=f"Team {i:02d}") for i in range(1, n + 1)]


def _play(fixture, winner_id=None):
    """Record a result; the home side wins unless *winner_id* says otherwise."""
    home_wins = winner_id in (None, fixture.home_team_id)
    home = ScoreLine(goals=12 if home_wins else 8, behinds=6)
    away = ScoreLine(goals=8 if home_wins else 12, behinds=6)
    winner = fixture.home_team_id if home_wins else fixture.away_team_id
    fixture.record_result(MatchResult(home=home, away=away, winner_id=winner))


def _play_league_in_seed_order(teams, fixtures):
    """Lower-numbered team always wins, so the ladder ends t1, t2, t3..."""
    order = {t.id: i for i, t in enumerate(teams)}
    for f in fixtures:
        winner = min(f.home_team_id, f.away_team_id, key=order.get)
        _play(f, winner)


# ═══════════════════════════════════════════════════════════════
# REGULAR SEASON
# ═══════════════════════════════════════════════════════════════

class TestSeasonFixtures:
    def test_every_team_plays_once_per_round(self):
        teams = _teams(8)
        fixtures = generate_season_fixtures(teams, 14)
        for r in range(1, 15):
            ids = [tid for f in fixtures if f.round == r for tid in (f.home_team_id, f.away_team_id)]
            assert sorted(ids) == sorted(t.id for t in teams)

    def test_double_round_robin_is_balanced(self):
        teams = _teams(6)
        fixtures = generate_season_fixtures(teams, 10)
        pairs = Counter(frozenset((f.home_team_id, f.away_team_id)) for f in fixtures)
        assert all(count == 2 for count in pairs.values())
        assert len(pairs) == 15
        homes = Counter(f.home_team_id for f in fixtures)
        assert set(homes.values()) == {5}
        venues = Counter((f.home_team_id, f.away_team_id) for f in fixtures)
        assert all(count == 1 for count in venues.values())

    def test_eighteen_teams_over_twenty_two_rounds(self):
        teams = _teams(18)
        fixtures = generate_season_fixtures(teams, 22)
        assert len(fixtures) == 18 * 22 // 2
        appearances = Counter(tid for f in fixtures for tid in (f.home_team_id, f.away_team_id))
        assert set(appearances.values()) == {22}
        assert set(appearances) == {t.id for t in teams}

    def test_odd_team_count_gets_one_bye_per_round(self):
        teams = _teams(5)
        fixtures = generate_season_fixtures(teams, 5)
        for r in range(1, 6):
            playing = {tid for f in fixtures if f.round == r for tid in (f.home_team_id, f.away_team_id)}
            assert len(playing) == 4

    def test_odd_team_count_without_byes_is_rejected(self):
        with pytest.raises(ConfigurationError):
            generate_season_fixtures(_teams(5), 5, allow_byes=False)

    def test_too_few_teams_rejected(self):
        with pytest.raises(ConfigurationError):
            generate_season_fixtures(_teams(1), 5)

    def test_non_positive_season_length_rejected(self):
        with pytest.raises(ConfigurationError):
            generate_season_fixtures(_teams(4), 0)

    def test_no_team_plays_itself(self):
        for f in generate_season_fixtures(_teams(7), 20):
            assert f.home_team_id != f.away_team_id

    def test_league_rounds(self):
        assert league_rounds(generate_season_fixtures(_teams(4), 9)) == 9


# ═══════════════════════════════════════════════════════════════
# FINALS
# ═══════════════════════════════════════════════════════════════

class TestFinals:
    def test_nothing_until_league_is_finished(self):
        teams = _teams(4)
        fixtures = generate_season_fixtures(teams, 3)
        _play(fixtures[0])
        ladder = compute_ladder(teams, fixtures)
        assert next_finals_fixtures(ladder, fixtures, 4) == []

    def test_top_four_single_elimination(self):
        teams = _teams(6)
        fixtures = generate_season_fixtures(teams, 5)
        _play_league_in_seed_order(teams, fixtures)
        ladder = compute_ladder(teams, fixtures)
        assert [t.id for t in ladder[:4]] == ["t1", "t2", "t3", "t4"]

        semis = next_finals_fixtures(ladder, fixtures, 4)
        assert [f.match_type for f in semis] == [MATCH_TYPE_SEMI, MATCH_TYPE_SEMI]
        assert {(f.home_team_id, f.away_team_id) for f in semis} == {("t1", "t4"), ("t2", "t3")}
        assert all(f.round == 6 for f in semis)

        fixtures.extend(semis)
        assert next_finals_fixtures(ladder, fixtures, 4) == []
        for f in semis:
            _play(f)
        gf = next_finals_fixtures(ladder, fixtures, 4)
        assert len(gf) == 1 and gf[0].match_type == MATCH_TYPE_GRAND
        assert (gf[0].home_team_id, gf[0].away_team_id) == ("t1", "t2")

        fixtures.extend(gf)
        assert not is_season_complete(fixtures)
        _play(gf[0])
        assert is_season_complete(fixtures)
        assert grand_final(fixtures).result.winner_id == "t1"
        assert next_finals_fixtures(ladder, fixtures, 4) == []

    def test_top_eight_bracket(self):
        teams = _teams(8)
        fixtures = generate_season_fixtures(teams, 7)
        _play_league_in_seed_order(teams, fixtures)
        ladder = compute_ladder(teams, fixtures)
        qfs = next_finals_fixtures(ladder, fixtures, 8)
        assert len(qfs) == 4 and all(f.match_type == MATCH_TYPE_QUARTER for f in qfs)
        assert ("t1", "t8") in {(f.home_team_id, f.away_team_id) for f in qfs}

    def test_double_chance_gives_qualifying_loser_a_second_chance(self):
        teams = _teams(6)
        fixtures = generate_season_fixtures(teams, 5)
        _play_league_in_seed_order(teams, fixtures)
        ladder = compute_ladder(teams, fixtures)

        first = next_finals_fixtures(ladder, fixtures, 4, "double_chance")
        types = {f.match_type: f for f in first}
        assert set(types) == {MATCH_TYPE_QUALIFYING, MATCH_TYPE_ELIMINATION}
        assert (types[MATCH_TYPE_QUALIFYING].home_team_id, types[MATCH_TYPE_QUALIFYING].away_team_id) == ("t1", "t2")
        fixtures.extend(first)
        for f in first:
            _play(f)

        # t2 lost the qualifying final but is still alive; t4 is out
        assert not is_eliminated("t2", fixtures)
        assert is_eliminated("t4", fixtures)
        assert is_eliminated("t5", fixtures)
        assert not is_eliminated("t1", fixtures)

        prelim = next_finals_fixtures(ladder, fixtures, 4, "double_chance")
        assert len(prelim) == 1 and prelim[0].match_type == MATCH_TYPE_PRELIMINARY
        assert (prelim[0].home_team_id, prelim[0].away_team_id) == ("t2", "t3")
        fixtures.extend(prelim)
        _play(prelim[0])

        gf = next_finals_fixtures(ladder, fixtures, 4, "double_chance")
        assert gf[0].match_type == MATCH_TYPE_GRAND
        assert (gf[0].home_team_id, gf[0].away_team_id) == ("t1", "t2")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
