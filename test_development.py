#!/usr/bin/env python3
"""
Player development tests: training, XP/levels, match application, milestones,
injuries and master skills.
"""
import pytest

from models.errors import (
    CapReachedError,
    InsufficientResourceError,
    NotFoundError,
    ValidationError,
)
from models.fixture import PerformerStats
from models.player import Injury, PlayerStats
from simulation.development import (
    acknowledge_milestones,
    apply_match,
    available_master_skills,
    detect_milestones,
    level_for_xp,
    match_xp,
    pending_milestones,
    restore_energy,
    tick_injury,
    train_attribute,
    unlock_master_skill,
    xp_for_level,
)


def _line(goals=2, disposals=20, tackles=4, behinds=1):
    return PerformerStats(
        player_id="user", name="Jack Riley", team_id="t",
        goals=goals, disposals=disposals, tackles=tackles, behinds=behinds, is_user=True,
    )


# ═══════════════════════════════════════════════════════════════
# TRAINING
# ═══════════════════════════════════════════════════════════════

class TestTraining:
    def test_training_spends_and_raises(self, profile):
        profile.skill_points = 2
        before = profile.attributes["kicking"]
        trained, xp = train_attribute(profile, "kicking")
        assert trained.attributes["kicking"] == before + 1
        assert trained.skill_points == 1
        assert trained.energy == profile.energy - 10
        assert xp == 10
        assert trained.xp == profile.xp + 10
        # Caller's profile untouched
        assert profile.attributes["kicking"] == before

    def test_kicking_ten_with_one_point_and_full_energy(self, profile):
        profile.attributes["kicking"] = 10
        profile.skill_points = 1
        profile.energy = 100
        trained, _ = train_attribute(profile, "kicking")
        assert (trained.attributes["kicking"], trained.skill_points, trained.energy) == (11, 0, 90)
        assert trained.training_sessions == profile.training_sessions + 1

    def test_unknown_attribute(self, profile):
        profile.skill_points = 1
        with pytest.raises(ValidationError):
            train_attribute(profile, "flying")

    def test_injured_cannot_train(self, profile):
        profile.skill_points = 1
        profile.injury = Injury("Calf Strain", 2)
        with pytest.raises(ValidationError):
            train_attribute(profile, "kicking")

    def test_needs_skill_points(self, profile):
        profile.skill_points = 0
        with pytest.raises(InsufficientResourceError):
            train_attribute(profile, "kicking")

    def test_needs_energy(self, profile):
        profile.skill_points = 1
        profile.energy = 9
        with pytest.raises(InsufficientResourceError):
            train_attribute(profile, "kicking")

    def test_capped_at_potential(self, profile):
        profile.skill_points = 1
        profile.potential = 20
        profile.attributes["speed"] = 20
        with pytest.raises(CapReachedError):
            train_attribute(profile, "speed")


class TestLevels:
    def test_xp_thresholds(self):
        assert xp_for_level(1) == 0
        assert xp_for_level(2) == 100
        assert xp_for_level(3) == 300
        assert level_for_xp(0) == 1
        assert level_for_xp(99) == 1
        assert level_for_xp(100) == 2
        assert level_for_xp(299) == 2
        assert level_for_xp(300) == 3

    def test_level_up_awards_skill_points(self, profile):
        profile.skill_points = 1
        profile.xp = 95
        trained, _ = train_attribute(profile, "kicking")
        assert trained.level == 2
        assert trained.skill_points == 0 + 3


# ═══════════════════════════════════════════════════════════════
# MATCHES & MILESTONES
# ═══════════════════════════════════════════════════════════════

class TestApplyMatch:
    def test_stats_xp_and_morale(self, profile):
        profile.morale = 50
        line = _line()
        updated, summary = apply_match(profile, line, 2, True, None, 1, 1)
        assert updated.career_stats.matches == 1
        assert updated.season_stats.goals == 2
        assert updated.career_stats.votes == 2
        assert updated.skill_points == profile.skill_points + 1
        assert summary["xp_gained"] == match_xp(line, 2) == 20 + 10 + 4 + 8 + 20
        assert updated.morale == 55

    def test_loss_and_draw_morale(self, profile):
        profile.morale = 50
        lost, _ = apply_match(profile, _line(), 0, False, None, 1, 1)
        drew, _ = apply_match(profile, _line(), 0, None, None, 1, 1)
        assert lost.morale == 45
        assert drew.morale == 50

    def test_xp_boost_consumed(self, profile):
        profile.xp_boost_pct = 50
        line = _line()
        updated, summary = apply_match(profile, line, 0, True, None, 1, 1)
        assert summary["xp_gained"] == match_xp(line, 0) * 150 // 100
        assert updated.xp_boost_pct == 0

    def test_debut_and_first_goal_milestones(self, profile):
        updated, summary = apply_match(profile, _line(goals=1), 0, True, None, 3, 1)
        descriptions = [m.description for m in summary["milestones"]]
        assert descriptions == ["Debut match", "First career goal"]
        assert pending_milestones(updated) == updated.milestones
        acked = acknowledge_milestones(updated)
        assert pending_milestones(acked) == []

    def test_milestones_never_retrigger(self):
        before = PlayerStats(matches=1, goals=49)
        after = PlayerStats(matches=2, goals=51)
        found = detect_milestones(before, after, 5, 2)
        assert [(m.stat, m.threshold) for m in found] == [("goals", 50)]
        assert found[0].description == "50 career goals"

    def test_injury_applied(self, profile):
        updated, summary = apply_match(profile, _line(), 0, True, Injury("Concussion", 1), 1, 1)
        assert updated.injury.name == "Concussion"
        assert summary["injury"] is not None

    def test_potential_is_fixed_after_best_on_ground(self, profile):
        profile.potential = 90
        updated = profile
        for round_no in range(1, 31):
            updated, _ = apply_match(updated, _line(), 3, True, None, round_no, 1)
        assert updated.potential == 90
        assert all(v <= 90 for v in updated.attributes.values())

    def test_win_streak_and_last_result(self, profile):
        won, _ = apply_match(profile, _line(), 0, True, None, 1, 1)
        won, _ = apply_match(won, _line(), 0, True, None, 2, 1)
        assert won.win_streak == 2 and won.last_result == "win"
        drew, _ = apply_match(won, _line(), 0, None, None, 3, 1)
        assert drew.win_streak == 0 and drew.last_result == "draw"
        lost, _ = apply_match(won, _line(), 0, False, None, 3, 1)
        assert lost.win_streak == 0 and lost.last_result == "loss"

    def test_one_milestone_per_threshold_crossed(self, profile):
        profile.career_stats = PlayerStats(matches=49, goals=48)
        updated, summary = apply_match(profile, _line(goals=3), 0, True, None, 1, 1)
        assert [(m.stat, m.threshold) for m in summary["milestones"]] == [("matches", 50), ("goals", 50)]

        updated.career_stats.matches = 99
        updated.career_stats.goals = 99
        again, summary = apply_match(updated, _line(goals=1), 0, True, None, 2, 1)
        assert [(m.stat, m.threshold) for m in summary["milestones"]] == [("matches", 100), ("goals", 100)]
        assert len(again.milestones) == 4

    def test_big_jump_crosses_several_thresholds(self):
        found = detect_milestones(PlayerStats(goals=40), PlayerStats(goals=110), 1, 1)
        assert [m.threshold for m in found] == [50, 100]


class TestUpkeep:
    def test_restore_energy(self, profile):
        profile.energy = 10
        assert restore_energy(profile).energy == 100

    def test_injury_ticks_down_then_heals(self, profile):
        profile.injury = Injury("Hamstring Strain", 2)
        once, healed = tick_injury(profile)
        assert once.injury.weeks_remaining == 1 and not healed
        twice, healed = tick_injury(once)
        assert twice.injury is None and healed

    def test_tick_without_injury(self, profile):
        same, healed = tick_injury(profile)
        assert same.injury is None and not healed


# ═══════════════════════════════════════════════════════════════
# MASTER SKILLS
# ═══════════════════════════════════════════════════════════════

class TestMasterSkills:
    def test_locked_until_requirements_met(self, profile):
        assert available_master_skills(profile) == []
        profile.skill_points = 10
        with pytest.raises(ValidationError):
            unlock_master_skill(profile, "sharpshooter")

    def test_unlock(self, profile):
        profile.attributes["goal_sense"] = 60
        profile.level = 3
        profile.skill_points = 6
        assert "sharpshooter" in [s["id"] for s in available_master_skills(profile)]
        unlocked = unlock_master_skill(profile, "sharpshooter")
        assert unlocked.master_skills == ["sharpshooter"]
        assert unlocked.skill_points == 1
        assert "sharpshooter" not in [s["id"] for s in available_master_skills(unlocked)]
        with pytest.raises(CapReachedError):
            unlock_master_skill(unlocked, "sharpshooter")

    def test_unlock_needs_skill_points(self, profile):
        profile.attributes["goal_sense"] = 60
        profile.level = 3
        profile.skill_points = 4
        with pytest.raises(InsufficientResourceError):
            unlock_master_skill(profile, "sharpshooter")

    def test_unknown_skill(self, profile):
        with pytest.raises(NotFoundError):
            unlock_master_skill(profile, "teleport")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
