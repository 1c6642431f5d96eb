#!/usr/bin/env python3
"""
CareerEngine integration tests: new game, rounds, finals, season rollover, draft,
retirement, atomic intents and replayability.
"""
from datetime import date

import pytest

from models.career_event import CareerEvent
from models.config import CareerConfig
from models.constants import (
    MATCH_TYPE_GRAND,
    TIER_LOCAL,
    TIER_NATIONAL,
    TIER_STATE,
)
from models.errors import (
    InsufficientResourceError,
    NotFoundError,
    ValidationError,
)
from models.player import Injury
from models.state import PHASE_DRAFT, PHASE_NEW, PHASE_RETIRED, PHASE_SEASON, deserialize, serialize
from simulation.career import (
    CareerEngine,
    is_season_complete,
    ladder,
    pending_career_events,
    user_fixture,
    user_team,
)


def _engine(seed=7, **overrides):
    return CareerEngine(config=CareerConfig(seed=seed, season_length=7, **overrides))


def _play_season(engine):
    for _ in range(40):
        if is_season_complete(engine.state):
            return
        engine.simulate_round()
    raise AssertionError("season never finished")


@pytest.fixture
def engine(profile):
    e = _engine()
    e.start_new_game(profile)
    return e


# ═══════════════════════════════════════════════════════════════
# NEW GAME
# ═══════════════════════════════════════════════════════════════

class TestNewGame:
    def test_local_start(self, engine, profile):
        state = engine.state
        assert state.phase == PHASE_SEASON
        assert (state.year, state.round) == (1, 1)
        assert len(state.teams) == 8
        assert state.profile.contract.tier == TIER_LOCAL
        assert state.profile.contract.years_left == 2
        assert state.profile.clubs == [state.profile.contract.club_name]
        team = user_team(state)
        assert team is not None
        assert sum(rp.is_user for rp in team.roster) == 1
        assert len([f for f in state.fixtures if f.round == 1]) == 4
        assert user_fixture(state)["status"] == "playing"

    def test_cannot_start_twice(self, engine, profile):
        with pytest.raises(ValidationError):
            engine.start_new_game(profile)

    def test_potential_above_cap_rejected(self, profile):
        e = CareerEngine(config=CareerConfig(attribute_cap=80))
        with pytest.raises(ValidationError):
            e.start_new_game(profile)
        assert e.state.phase == PHASE_NEW

    def test_first_reward_claimed_with_now(self, profile):
        e = _engine()
        _, events = e.start_new_game(profile, now=date(2026, 5, 1))
        assert any(ev["type"] == "daily_reward" for ev in events)
        assert e.state.profile.daily_rewards.total_logins == 1
        with pytest.raises(ValidationError):
            e.claim_reward(date(2026, 5, 1))

    def test_draft_start(self, profile):
        e = _engine()
        e.start_new_game(profile, via_draft=True)
        assert e.state.phase == PHASE_DRAFT
        assert e.state.draft is not None
        assert all(t.tier == TIER_NATIONAL for t in e.state.teams)
        assert user_fixture(e.state)["status"] == "no_club"
        with pytest.raises(ValidationError):
            e.simulate_round()


# ═══════════════════════════════════════════════════════════════
# ROUNDS & FINALS
# ═══════════════════════════════════════════════════════════════

class TestRounds:
    def test_round_plays_every_fixture(self, engine):
        state, events = engine.simulate_round()
        assert state.round == 2
        assert all(f.played for f in state.fixtures if f.round == 1)
        assert not any(f.played for f in state.fixtures if f.round == 2)
        assert state.profile.career_stats.matches == 1
        assert state.profile.energy == 100
        assert any(ev["type"] == "match" for ev in events)
        assert state.profile.wallet > 0

    def test_performers_not_kept_in_state(self, engine):
        state, _ = engine.simulate_round()
        assert all(f.result.performers == [] for f in state.fixtures if f.played)
        assert "user" in state.season_tallies

    def test_injured_user_sits_out_and_recovers(self, engine):
        engine.state.profile.injury = Injury("Rolled Ankle", 1)
        assert user_fixture(engine.state)["status"] == "injured"
        state, events = engine.simulate_round()
        assert state.profile.career_stats.matches == 0
        assert state.profile.injury is None
        assert any(ev["type"] == "recovered" for ev in events)

    def test_full_season_with_finals(self, engine):
        _play_season(engine)
        state = engine.state
        finals = [f for f in state.fixtures if f.is_final]
        assert len(finals) == 3
        assert finals[-1].match_type == MATCH_TYPE_GRAND
        assert all(f.result.winner_id is not None for f in finals)
        assert user_fixture(state)["status"] == "season_complete"
        table = ladder(state)
        assert sum(t.wins + t.losses + t.draws for t in table) == 2 * 7 * 4
        with pytest.raises(ValidationError):
            engine.simulate_round()

    def test_regular_season_totals_balance(self, engine):
        _play_season(engine)
        table = ladder(engine.state)
        assert sum(t.wins for t in table) == sum(t.losses for t in table)
        assert sum(t.points_for for t in table) == sum(t.points_against for t in table)

    def test_career_counts_never_go_backwards(self, engine):
        seen = []
        while not is_season_complete(engine.state):
            state, _ = engine.simulate_round()
            seen.append((state.profile.career_stats.matches, state.profile.career_stats.goals))
        assert all(b[0] >= a[0] and b[1] >= a[1] for a, b in zip(seen, seen[1:]))

    def test_offers_arrive_mid_season(self, engine):
        for _ in range(3):
            engine.simulate_round()
        assert engine.state.profile.transfer_offers
        assert len(engine.state.profile.transfer_offers) <= 3


# ═══════════════════════════════════════════════════════════════
# ATOMIC INTENTS & REPLAY
# ═══════════════════════════════════════════════════════════════

class TestAtomicity:
    def test_failed_intent_leaves_state_untouched(self, engine):
        engine.state.profile.skill_points = 0
        before = serialize(engine.state)
        with pytest.raises(InsufficientResourceError):
            engine.train_attribute("kicking")
        with pytest.raises(NotFoundError):
            engine.accept_transfer("offer-missing")
        with pytest.raises(NotFoundError):
            engine.purchase_item("jetpack")
        assert serialize(engine.state) == before

    def test_same_seed_same_career(self, profile):
        a, b = _engine(seed=11), _engine(seed=11)
        for e in (a, b):
            e.start_new_game(profile)
            for _ in range(4):
                e.simulate_round()
        assert a.to_bytes() == b.to_bytes()

    def test_save_and_resume_matches_uninterrupted(self, profile):
        straight = _engine(seed=3)
        straight.start_new_game(profile)
        for _ in range(6):
            straight.simulate_round()

        first = _engine(seed=3)
        first.start_new_game(profile)
        for _ in range(3):
            first.simulate_round()
        resumed = CareerEngine.from_bytes(first.to_bytes())
        for _ in range(3):
            resumed.simulate_round()

        assert resumed.to_bytes() == straight.to_bytes()

    def test_serialize_round_trip(self, engine):
        engine.simulate_round()
        payload = serialize(engine.state)
        assert serialize(deserialize(payload)) == payload


# ═══════════════════════════════════════════════════════════════
# PLAYER INTENTS
# ═══════════════════════════════════════════════════════════════

class TestPlayerIntents:
    def test_train(self, engine):
        engine.state.profile.skill_points = 2
        state, events = engine.train_attribute("speed")
        assert state.profile.skill_points == 1
        assert events[0]["type"] == "trained"

    def test_acknowledge_milestones(self, engine):
        engine.simulate_round()
        assert engine.state.profile.milestones
        state, _ = engine.acknowledge_milestone()
        assert state.profile.milestones_acknowledged == len(state.profile.milestones)

    def test_social_post_and_purchase(self, engine):
        state, events = engine.create_social_post("Training hard")
        assert state.profile.media.total_posts == 1
        engine.state.profile.wallet = 100
        state, events = engine.purchase_item("energy_drink")
        assert state.profile.wallet == 50
        assert events[0]["type"] == "purchase"

    def test_accept_transfer_moves_roster_slot(self, engine):
        for _ in range(3):
            engine.simulate_round()
        offer = engine.state.profile.transfer_offers[0]
        state, events = engine.accept_transfer(offer.id)
        team = user_team(state)
        assert team.name == offer.club_name
        assert sum(rp.is_user for t in state.teams for rp in t.roster) == 1
        assert state.profile.transfer_offers == []

    def test_reject_transfer(self, engine):
        for _ in range(3):
            engine.simulate_round()
        offer = engine.state.profile.transfer_offers[0]
        state, _ = engine.reject_transfer(offer.id)
        assert offer.id not in {o.id for o in state.profile.transfer_offers}


# ═══════════════════════════════════════════════════════════════
# CAREER EVENTS, ACHIEVEMENTS, CHEMISTRY
# ═══════════════════════════════════════════════════════════════

def _pending_homesick(event_id="event-test"):
    return CareerEvent(
        id=event_id, template_id="homesick", title="Homesick", description="",
        rarity="COMMON", round=1, year=1,
        choices=[
            {"id": "visit", "label": "Fly home", "effects": {"morale": 10, "wallet": -150}, "result": "Recharged."},
            {"id": "stay", "label": "Stay", "effects": {"morale": 4}, "result": "The group gets tighter."},
        ],
    )


class TestCareerEventsAndAchievements:
    def test_resolve_pending_event(self, engine):
        engine.state.profile.career_events.append(_pending_homesick())
        engine.state.profile.morale = 50
        assert [e.id for e in pending_career_events(engine.state)] == ["event-test"]
        state, events = engine.resolve_career_event("event-test", "stay")
        assert state.profile.morale == 54
        assert pending_career_events(state) == []
        assert events[0]["type"] == "career_event_resolved"
        assert events[0]["message"] == "The group gets tighter."
        with pytest.raises(NotFoundError):
            engine.resolve_career_event("event-test", "stay")

    def test_bad_choice_leaves_state_untouched(self, engine):
        engine.state.profile.career_events.append(_pending_homesick())
        before = serialize(engine.state)
        with pytest.raises(ValidationError):
            engine.resolve_career_event("event-test", "sulk")
        assert serialize(engine.state) == before

    def test_pending_events_stay_bounded_over_a_season(self, engine):
        _play_season(engine)
        assert len(pending_career_events(engine.state)) <= 3

    def test_first_game_achievement(self, engine):
        state, events = engine.simulate_round()
        ids = [a.achievement_id for a in state.profile.achievements]
        assert "first_game" in ids
        assert any(ev["type"] == "achievement" for ev in events)
        engine.simulate_round()
        ids = [a.achievement_id for a in engine.state.profile.achievements]
        assert len(ids) == len(set(ids))

    def test_chemistry_tracks_the_club(self, engine):
        p = engine.state.profile
        assert p.chemistry_club == p.contract.club_name
        assert p.chemistry == 50
        for _ in range(3):
            engine.simulate_round()
        offer = engine.state.profile.transfer_offers[0]
        state, _ = engine.accept_transfer(offer.id)
        assert state.profile.chemistry_club == offer.club_name
        assert state.profile.chemistry == 50


# ═══════════════════════════════════════════════════════════════
# SEASON ROLLOVER, DRAFT, RETIREMENT
# ═══════════════════════════════════════════════════════════════

class TestSeasonRollover:
    def test_cannot_advance_mid_season(self, engine):
        with pytest.raises(ValidationError):
            engine.advance_season()

    def test_advance_season(self, engine):
        _play_season(engine)
        matches = engine.state.profile.season_stats.matches
        state, events = engine.advance_season()
        p = state.profile
        assert state.year == 2 and state.round == 1
        assert p.age == 19
        assert len(p.season_history) == 1
        assert p.season_history[0].stats.matches == matches
        assert p.season_stats.matches == 0
        assert p.transfer_offers == []
        assert state.phase in (PHASE_SEASON, PHASE_DRAFT)
        if state.phase == PHASE_SEASON:
            assert not any(f.played for f in state.fixtures)
            assert user_team(state) is not None
        assert any(ev["type"] in ("season_started", "draft_started") for ev in events)

    def test_draft_to_season(self, profile):
        e = _engine()
        e.start_new_game(profile, via_draft=True)
        e.simulate_draft_pick()
        assert e.state.draft.picks[0].prospect_id is not None
        state, events = e.complete_draft()
        assert state.phase == PHASE_SEASON
        assert state.draft.completed
        assert state.profile.contract.tier in (TIER_NATIONAL, TIER_STATE)
        assert user_team(state) is not None
        assert any(ev["type"] in ("drafted", "undrafted") for ev in events)

    def test_retire_and_reset(self, engine, profile):
        engine.simulate_round()
        state, events = engine.retire_player()
        assert state.phase == PHASE_RETIRED
        assert state.profile is None
        assert len(state.hall_of_fame) == 1
        assert state.hall_of_fame[0].career_stats.matches <= 1
        state, _ = engine.reset_game()
        assert state.phase == PHASE_NEW
        assert len(state.hall_of_fame) == 1
        engine.start_new_game(profile)
        assert engine.state.phase == PHASE_SEASON
        assert len(engine.state.hall_of_fame) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
