#!/usr/bin/env python3
"""
Media, fans, salary and shop tests.
"""
import itertools

import pytest

from models.constants import (
    MEDIA_CRITICISM,
    MEDIA_PRAISE,
    RESPONSE_CONFIDENT,
    RESPONSE_HUMBLE,
    TIER_NATIONAL,
)
from models.errors import (
    AlreadyOwnedError,
    CapReachedError,
    InsufficientFundsError,
    NotFoundError,
    ValidationError,
)
from models.fixture import PerformerStats
from models.player import Contract, Injury, MediaEvent
from simulation.media import (
    apply_passive_growth,
    create_social_post,
    fan_milestone_title,
    generate_media_event,
    passive_fan_growth,
    pay_salary,
    purchase_item,
    respond_to_media,
)
from simulation.rng import RandomOutcomeProvider


def _ids():
    counter = itertools.count(1)
    return lambda prefix: f"{prefix}-{next(counter)}"


def _praise(event_id="media-1"):
    return MediaEvent(
        id=event_id, type=MEDIA_PRAISE, title="Outstanding Performance!",
        description="", reputation_impact=10, fan_impact=2000, round=1, year=1,
    )


class TestMediaEvents:
    def test_humble_response_to_praise(self, profile):
        profile.media.events = [_praise()]
        updated, summary = respond_to_media(profile, "media-1", RESPONSE_HUMBLE)
        assert updated.media.score == 50 + 10 + 3
        assert updated.media.fan_followers == 100 + 2000 + 500
        assert updated.media.events[0].has_responded
        assert updated.media.events[0].response == RESPONSE_HUMBLE
        assert summary["fan_milestones"] == [1000]

    def test_event_answered_once(self, profile):
        profile.media.events = [_praise()]
        updated, _ = respond_to_media(profile, "media-1", RESPONSE_CONFIDENT)
        with pytest.raises(NotFoundError):
            respond_to_media(updated, "media-1", RESPONSE_HUMBLE)

    def test_bad_response(self, profile):
        profile.media.events = [_praise()]
        with pytest.raises(ValidationError):
            respond_to_media(profile, "media-1", "SHRUG")

    def test_reputation_is_clamped(self, profile):
        profile.media.score = 98
        profile.media.events = [_praise()]
        updated, _ = respond_to_media(profile, "media-1", RESPONSE_HUMBLE)
        assert updated.media.score == 100

    def test_quiet_game_can_draw_criticism(self, profile):
        line = PerformerStats(player_id="user", name=profile.name, team_id="t", disposals=4)
        types = set()
        for seed in range(40):
            event = generate_media_event(profile, line, 0, False, 1, 1, RandomOutcomeProvider(seed), _ids())
            if event is not None:
                types.add(event.type)
                assert not event.has_responded
        assert types == {MEDIA_CRITICISM}


class TestFans:
    def test_milestones_unlock_once_in_order(self, profile):
        profile.media.fan_followers = 9900
        updated, unlocked = apply_passive_growth(profile)
        assert unlocked == [1000, 5000, 10000]
        again, unlocked = apply_passive_growth(updated)
        assert unlocked == []
        assert again.media.fan_milestones == [1000, 5000, 10000]
        assert fan_milestone_title(10000) == "Fan Favourite"

    def test_passive_growth_scales_with_tier(self, profile):
        local = passive_fan_growth(profile)
        profile.contract = Contract(club_name="Carlton", salary=1000, tier=TIER_NATIONAL, years_left=1)
        assert passive_fan_growth(profile) > local

    def test_social_post(self, profile):
        updated, summary = create_social_post(profile, "Big win today!", 3, 1, _ids())
        # DECENT tier multiplier is 1.0
        assert summary["followers_gained"] == 300
        assert updated.media.fan_followers == 400
        assert updated.media.total_posts == 1
        assert updated.media.score == 51

    def test_empty_post_rejected(self, profile):
        with pytest.raises(ValidationError):
            create_social_post(profile, "   ", 3, 1, _ids())


class TestEconomy:
    def test_salary_paid_per_round(self, profile):
        profile.contract = Contract(club_name="Box Hill", salary=1400, tier=TIER_NATIONAL, years_left=1)
        paid, amount = pay_salary(profile, 14)
        assert amount == 100
        assert paid.wallet == 100 and paid.lifetime_earnings == 100

    def test_purchase_energy_drink(self, profile):
        profile.wallet = 60
        profile.energy = 50
        bought, item = purchase_item(profile, "energy_drink")
        assert bought.wallet == 10
        assert bought.energy == 80
        assert item.id == "energy_drink"

    def test_insufficient_funds(self, profile):
        profile.wallet = 10
        with pytest.raises(InsufficientFundsError):
            purchase_item(profile, "energy_drink")

    def test_one_time_item(self, profile):
        profile.wallet = 5000
        once, _ = purchase_item(profile, "kicking_boots")
        assert once.attributes["kicking"] == profile.attributes["kicking"] + 2
        with pytest.raises(AlreadyOwnedError):
            purchase_item(once, "kicking_boots")

    def test_boost_at_potential_is_refused_before_paying(self, profile):
        profile.wallet = 5000
        profile.attributes["kicking"] = profile.potential
        with pytest.raises(CapReachedError):
            purchase_item(profile, "kicking_boots")
        assert profile.wallet == 5000
        assert "kicking_boots" not in profile.items_purchased

    def test_boost_stops_at_potential(self, profile):
        profile.wallet = 5000
        profile.attributes["kicking"] = profile.potential - 1
        bought, _ = purchase_item(profile, "kicking_boots")
        assert bought.attributes["kicking"] == profile.potential

    def test_heal_needs_injury(self, profile):
        profile.wallet = 1000
        with pytest.raises(ValidationError):
            purchase_item(profile, "physio")
        profile.injury = Injury("Calf Strain", 2)
        healed, _ = purchase_item(profile, "physio")
        assert healed.injury.weeks_remaining == 1

    def test_xp_boosts_do_not_stack(self, profile):
        profile.wallet = 1000
        profile.xp_boost_pct = 80
        bought, _ = purchase_item(profile, "film_study")
        assert bought.xp_boost_pct == 80

    def test_unknown_item(self, profile):
        with pytest.raises(NotFoundError):
            purchase_item(profile, "jetpack")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
