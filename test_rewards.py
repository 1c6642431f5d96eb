#!/usr/bin/env python3
"""
Daily login reward tests.
"""
from datetime import date, datetime

import pytest

from models.player import DailyRewards
from simulation.rewards import apply_reward, can_claim, claim, reward_for_streak


class TestDailyRewards:
    def test_first_claim(self):
        tracker, reward = claim(DailyRewards(), date(2026, 3, 1))
        assert reward == {"day": 1, "streak": 1, "skill_points": 1, "energy": 10}
        assert tracker.last_claim_date == date(2026, 3, 1)
        assert tracker.total_logins == 1

    def test_same_day_claim_is_a_no_op(self):
        tracker, _ = claim(DailyRewards(), date(2026, 3, 1))
        again, reward = claim(tracker, datetime(2026, 3, 1, 23, 59))
        assert reward is None
        assert again == tracker
        assert not can_claim(tracker, date(2026, 3, 1))

    def test_consecutive_days_grow_streak(self):
        tracker = DailyRewards()
        for day in range(1, 8):
            tracker, reward = claim(tracker, date(2026, 3, day))
        assert tracker.streak == 7
        assert reward["day"] == 7
        assert (reward["skill_points"], reward["energy"]) == (5, 50)

    def test_missed_day_resets_streak(self):
        tracker, _ = claim(DailyRewards(), date(2026, 3, 1))
        tracker, _ = claim(tracker, date(2026, 3, 2))
        tracker, reward = claim(tracker, date(2026, 3, 4))
        assert tracker.streak == 1
        assert reward["day"] == 1
        assert tracker.total_logins == 3

    def test_cycle_wraps_after_fourteen_days(self):
        assert reward_for_streak(14)["day"] == 14
        assert reward_for_streak(15)["day"] == 1
        assert reward_for_streak(15)["streak"] == 15

    def test_apply_reward_caps_energy(self, profile):
        profile.energy = 95
        updated = apply_reward(profile, reward_for_streak(7))
        assert updated.energy == 100
        assert updated.skill_points == profile.skill_points + 5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
