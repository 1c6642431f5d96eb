#!/usr/bin/env python3
"""
Achievement and team chemistry tests.
"""
import pytest

from models.fixture import PerformerStats
from models.player import PlayerStats
from simulation.achievements import check_achievements
from simulation.chemistry import after_match, chemistry_form, strength_bonus, sync_club


def _ids(profile):
    return [a.achievement_id for a in profile.achievements]


# ═══════════════════════════════════════════════════════════════
# ACHIEVEMENTS
# ═══════════════════════════════════════════════════════════════

class TestAchievements:
    def test_fresh_profile_has_none(self, profile):
        same, unlocked = check_achievements(profile, 1, 1)
        assert unlocked == []
        assert same is profile

    def test_career_thresholds(self, profile):
        profile.career_stats = PlayerStats(matches=50, goals=1)
        updated, unlocked = check_achievements(profile, 4, 2)
        assert {"first_game", "veteran_50", "first_goal"} <= set(_ids(updated))
        assert "veteran_100" not in _ids(updated)
        assert all((a.round, a.year) == (4, 2) for a in unlocked)
        assert profile.achievements == []

    def test_unlocked_only_once(self, profile):
        profile.career_stats = PlayerStats(matches=1)
        once, _ = check_achievements(profile, 1, 1)
        twice, unlocked = check_achievements(once, 2, 1)
        assert unlocked == []
        assert _ids(twice).count("first_game") == 1

    def test_match_line_and_votes(self, profile):
        line = PerformerStats(player_id="user", goals=5, disposals=31, tackles=10, is_user=True)
        updated, _ = check_achievements(profile, 1, 1, line, votes=3)
        assert {"bag_5", "disposal_king", "tackle_machine", "best_on_ground"} <= set(_ids(updated))
        assert "bag_10" not in _ids(updated)

    def test_match_checks_need_a_match(self, profile):
        updated, _ = check_achievements(profile, 1, 1, None, votes=3)
        assert "best_on_ground" not in _ids(updated)

    def test_potential_unlocked(self, profile):
        profile.attributes["speed"] = profile.potential
        updated, _ = check_achievements(profile, 1, 1)
        assert "potential_unlocked" in _ids(updated)

    def test_streak_training_and_clubs(self, profile):
        profile.win_streak = 5
        profile.training_sessions = 50
        profile.clubs = ["Box Hill", "Werribee", "Sandringham"]
        updated, _ = check_achievements(profile, 1, 1)
        assert {"win_streak_5", "gym_rat", "journeyman"} <= set(_ids(updated))
        assert "win_streak_10" not in _ids(updated)

    def test_big_man_is_for_rucks(self, profile):
        profile.career_stats = PlayerStats(matches=50)
        updated, _ = check_achievements(profile, 1, 1)
        assert "ruck_dominance" not in _ids(updated)
        profile.position = "Ruck"
        updated, _ = check_achievements(profile, 1, 1)
        assert "ruck_dominance" in _ids(updated)


# ═══════════════════════════════════════════════════════════════
# TEAM CHEMISTRY
# ═══════════════════════════════════════════════════════════════

class TestChemistry:
    def test_bonus_is_zero_at_fifty(self):
        assert strength_bonus(50) == 0
        assert strength_bonus(100) == -strength_bonus(0) > 0

    def test_forms(self):
        assert chemistry_form(85) == "HOT"
        assert chemistry_form(60) == "WARM"
        assert chemistry_form(50) == "NEUTRAL"
        assert chemistry_form(25) == "COLD"
        assert chemistry_form(0) == "FREEZING"

    def test_results_move_chemistry(self, profile):
        profile.chemistry = 50
        assert after_match(profile, True, 3) == 1 + 3 + 2
        assert profile.chemistry == 56
        assert after_match(profile, False, 0) == 1 - 2
        assert after_match(profile, None, 0) == 1
        assert profile.chemistry == 56

    def test_clamped(self, profile):
        profile.chemistry = 99
        after_match(profile, True, 2)
        assert profile.chemistry == 100
        profile.chemistry = 0
        assert after_match(profile, False, 0) == 0

    def test_new_club_resets(self, profile):
        profile.contract.club_name = "Box Hill"
        profile.chemistry_club = "Box Hill"
        profile.chemistry = 80
        assert not sync_club(profile)
        profile.contract.club_name = "Werribee"
        assert sync_club(profile)
        assert (profile.chemistry, profile.chemistry_club) == (50, "Werribee")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
