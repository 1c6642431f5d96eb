#!/usr/bin/env python3
"""
National draft tests: class composition, pick order, AI picks and completion.
"""
import pytest

from generation.generate import generate_league
from models.constants import DRAFT_CLASS_EXTRA, DRAFT_ROUNDS, TIER_NATIONAL
from models.errors import ValidationError
from simulation.offseason import (
    build_draft_class,
    complete_draft,
    make_draft_pick,
    user_draft_pick,
    user_prospect_id,
)
from simulation.rng import RandomOutcomeProvider


@pytest.fixture
def clubs(rng):
    return generate_league(TIER_NATIONAL, rng, 6)


@pytest.fixture
def draft(profile, clubs, rng):
    return build_draft_class(2, profile, clubs, rng)


class TestDraftClass:
    def test_sizes_and_user_entry(self, draft, clubs, profile):
        assert len(draft.picks) == DRAFT_ROUNDS * len(clubs)
        assert len(draft.prospects) == len(draft.picks) + DRAFT_CLASS_EXTRA
        user = draft.prospect(user_prospect_id(2))
        assert user is not None and user.is_user and user.name == profile.name
        assert sum(p.is_user for p in draft.prospects) == 1

    def test_ranks_are_unique(self, draft):
        assert sorted(p.draft_rank for p in draft.prospects) == list(range(1, len(draft.prospects) + 1))

    def test_pick_order_repeats_each_round(self, draft, clubs):
        order = [c.id for c in clubs]
        for r in range(DRAFT_ROUNDS):
            chunk = draft.picks[r * len(clubs):(r + 1) * len(clubs)]
            assert [p.team_id for p in chunk] == order
            assert all(p.round == r + 1 for p in chunk)
        assert [p.pick_number for p in draft.picks] == list(range(1, len(draft.picks) + 1))

    def test_needs_clubs(self, profile, rng):
        with pytest.raises(ValidationError):
            build_draft_class(1, profile, [], rng)

    def test_seeded_class_is_reproducible(self, profile, clubs):
        a = build_draft_class(1, profile, clubs, RandomOutcomeProvider(5))
        b = build_draft_class(1, profile, clubs, RandomOutcomeProvider(5))
        assert a.to_dict() == b.to_dict()


class TestPicks:
    def test_single_pick(self, draft, clubs, rng):
        after, info = make_draft_pick(draft, clubs, rng)
        assert info["pick_number"] == 1
        assert info["team_id"] == clubs[0].id
        assert after.picks[0].prospect_id == info["prospect_id"]
        # Original class untouched
        assert draft.picks[0].prospect_id is None
        assert after.current_pick().pick_number == 2

    def test_prospect_never_picked_twice(self, draft, clubs, rng):
        done, made = complete_draft(draft, clubs, rng)
        ids = [p.prospect_id for p in done.picks]
        assert len(ids) == len(set(ids)) == len(done.picks)
        assert len(made) == len(done.picks)
        assert len(done.available()) == DRAFT_CLASS_EXTRA

    def test_completed_draft_cannot_continue(self, draft, clubs, rng):
        done, _ = complete_draft(draft, clubs, rng)
        assert done.completed
        with pytest.raises(ValidationError):
            make_draft_pick(done, clubs, rng)
        with pytest.raises(ValidationError):
            complete_draft(done, clubs, rng)

    def test_user_pick_lookup(self, draft, clubs, rng):
        done, _ = complete_draft(draft, clubs, rng)
        pick = user_draft_pick(done)
        if pick is None:
            assert user_prospect_id(2) in {p.id for p in done.available()}
        else:
            assert pick.prospect_id == user_prospect_id(2)

    def test_high_rated_user_gets_drafted(self, profile, clubs):
        for attr in profile.attributes:
            profile.attributes[attr] = 85
        profile.potential = 95
        drafted = 0
        for seed in range(5):
            d = build_draft_class(1, profile, clubs, RandomOutcomeProvider(seed))
            done, _ = complete_draft(d, clubs, RandomOutcomeProvider(seed + 100))
            if user_draft_pick(done) is not None:
                drafted += 1
        assert drafted == 5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
