#!/usr/bin/env python3
"""
Match engine tests: score consistency, votes, user selection and replayability.
"""
import copy

import pytest

from models.fixture import PerformerStats
from models.player import Injury
from simulation.engine import USER_PLAYER_ID, award_votes, morale_multiplier, simulate_match
from simulation.market import place_user_in_team
from simulation.rng import RandomOutcomeProvider


@pytest.fixture
def sides(league, profile):
    home, away = copy.deepcopy(league[0]), copy.deepcopy(league[1])
    place_user_in_team(home, profile)
    return home, away


class TestSimulateMatch:
    def test_team_score_is_sum_of_players(self, sides, profile):
        home, away = sides
        for seed in range(20):
            result = simulate_match(home, away, home.id, profile, RandomOutcomeProvider(seed))
            home_goals = sum(p.goals for p in result.performers if p.team_id == home.id)
            away_goals = sum(p.goals for p in result.performers if p.team_id == away.id)
            home_behinds = sum(p.behinds for p in result.performers if p.team_id == home.id)
            assert home_goals == result.home.goals
            assert home_behinds == result.home.behinds
            assert away_goals == result.away.goals
            assert result.home.total == result.home.goals * 6 + result.home.behinds

    def test_user_line_included_in_team(self, sides, profile):
        home, away = sides
        result = simulate_match(home, away, home.id, profile, RandomOutcomeProvider(3))
        assert result.user_stats is not None
        assert result.user_stats.player_id == USER_PLAYER_ID
        assert any(p.is_user for p in result.performers)
        assert result.user_stats.goals <= result.home.goals

    def test_injured_user_does_not_play(self, sides, profile):
        home, away = sides
        profile.injury = Injury("Rolled Ankle", 1)
        result = simulate_match(home, away, home.id, profile, RandomOutcomeProvider(3))
        assert result.user_stats is None
        assert USER_PLAYER_ID not in result.votes
        assert result.user_injury is None

    def test_cpu_only_match(self, league):
        result = simulate_match(league[2], league[3], None, None, RandomOutcomeProvider(9))
        assert result.user_stats is None
        assert sorted(result.votes.values()) == [1, 2, 3]

    def test_same_seed_same_match(self, sides, profile):
        home, away = sides
        a = simulate_match(home, away, home.id, profile, RandomOutcomeProvider(77))
        b = simulate_match(home, away, home.id, profile, RandomOutcomeProvider(77))
        assert a.to_dict() == b.to_dict()

    def test_finals_are_never_drawn(self, league):
        for seed in range(60):
            result = simulate_match(league[0], league[1], None, None, RandomOutcomeProvider(seed), allow_draw=False)
            assert result.winner_id is not None
            assert result.home.total != result.away.total

    def test_winner_matches_scores(self, league):
        for seed in range(20):
            result = simulate_match(league[4], league[5], None, None, RandomOutcomeProvider(seed))
            if result.home.total > result.away.total:
                assert result.winner_id == league[4].id
            elif result.away.total > result.home.total:
                assert result.winner_id == league[5].id
            else:
                assert result.is_draw


class TestVotesAndMorale:
    def test_votes_go_to_top_three(self, league):
        result = simulate_match(league[0], league[1], None, None, RandomOutcomeProvider(5))
        votes = award_votes(result.performers)
        best = max(p.performance_score for p in result.performers)
        three = next(p for p in result.performers if votes.get(p.player_id) == 3)
        assert three.performance_score == best
        assert [p.player_id for p in result.top_performers] == sorted(votes, key=lambda pid: -votes[pid])

    def test_vote_ties_break_on_goals_then_disposals_then_order(self):
        lines = [
            PerformerStats(player_id="p4", disposals=13, tackles=2),
            PerformerStats(player_id="p2", disposals=16),
            PerformerStats(player_id="p1", disposals=10, goals=1),
            PerformerStats(player_id="p3", disposals=13, tackles=2),
        ]
        assert len({p.performance_score for p in lines}) == 1
        assert award_votes(lines) == {"p1": 3, "p2": 2, "p4": 1}

    def test_morale_multiplier(self):
        assert morale_multiplier(90) > 1.0
        assert morale_multiplier(60) == 1.0
        assert morale_multiplier(20) < 1.0


# ═══════════════════════════════════════════════════════════════
# TEAM CHEMISTRY
# ═══════════════════════════════════════════════════════════════

class TestChemistryInMatches:
    def _margin(self, sides, profile, chemistry, seed):
        home, away = sides
        profile.chemistry = chemistry
        result = simulate_match(home, away, home.id, profile, RandomOutcomeProvider(seed))
        return result.home.total - result.away.total

    def test_hot_chemistry_lifts_the_user_side(self, sides, profile):
        hot = sum(self._margin(sides, profile, 100, seed) for seed in range(40))
        cold = sum(self._margin(sides, profile, 0, seed) for seed in range(40))
        assert hot > cold


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
