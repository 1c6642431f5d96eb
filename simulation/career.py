"""
Career orchestrator for Footy Career.

CareerEngine owns the authoritative GameState. Every intent works on a deep copy of
the state and a provider restored from the saved RNG cursor; only when the intent
finishes without raising are the copy and the cursor committed together. A failed
intent therefore leaves both the state and the random stream exactly as they were.

Each intent returns ``(state, events)`` where events are plain dicts with at least
``type`` and ``message``.
"""
from __future__ import annotations

import copy
import logging
from datetime import date, datetime
from typing import Any

from generation.generate import generate_league
from models.config import CareerConfig
from models.constants import (
    AWARD_BROWNLOW,
    AWARD_CLUB_BF,
    AWARD_COLEMAN,
    AWARD_RISING_STAR,
    RETIREMENT_AGE,
    RISING_STAR_AGE,
    RISING_STAR_VOTES,
    ROOKIE_CONTRACT_YEARS,
    ROOKIE_SALARY,
    TEAM_NAMES,
    TIER_LOCAL,
    TIER_NATIONAL,
    TIER_STATE,
)
from models.errors import ValidationError
from models.player import Contract, PlayerProfile, PlayerStats, SeasonRecord
from models.ratings import overall_rating
from models.state import (
    PHASE_DRAFT,
    PHASE_NEW,
    PHASE_RETIRED,
    PHASE_SEASON,
    GameState,
    HallOfFameRecord,
    deserialize,
    serialize,
)
from models.team import Team
from simulation import achievements, chemistry, development, market, media, offseason, rewards
from simulation import events as career_events
from simulation.engine import USER_PLAYER_ID, simulate_match
from simulation.ladder import compute_ladder, ladder_position
from simulation.rng import RandomOutcomeProvider
from simulation.schedule import (
    generate_season_fixtures,
    grand_final,
    is_eliminated,
    league_rounds,
    next_finals_fixtures,
)
from simulation.schedule import is_season_complete as fixtures_complete

logger = logging.getLogger(__name__)


def _event(kind: str, message: str, **data: Any) -> dict[str, Any]:
    return {"type": kind, "message": message, **data}


# ===================================================================
# Derived views (never stored)
# ===================================================================

def user_team(state: GameState) -> Team | None:
    """The club in the current league whose name matches the user's contract."""
    if state.profile is None or not state.profile.contract.club_name:
        return None
    return state.team_by_name(state.profile.contract.club_name)


def ladder(state: GameState) -> list[Team]:
    return compute_ladder(state.teams, state.fixtures)


def is_season_complete(state: GameState) -> bool:
    return state.phase == PHASE_SEASON and fixtures_complete(state.fixtures)


def pending_milestones(state: GameState) -> list:
    if state.profile is None:
        return []
    return development.pending_milestones(state.profile)


def pending_career_events(state: GameState) -> list:
    if state.profile is None:
        return []
    return career_events.pending_events(state.profile)


def available_master_skills(profile: PlayerProfile) -> list[dict]:
    return development.available_master_skills(profile)


def user_fixture(state: GameState) -> dict[str, Any]:
    """What the user does this round.

    ``status`` is one of playing, injured, bye, eliminated, season_complete or
    no_club; ``fixture`` is the user's fixture for the round when there is one.
    """
    if state.phase != PHASE_SEASON or state.profile is None:
        return {"status": "no_club", "fixture": None}
    if fixtures_complete(state.fixtures):
        return {"status": "season_complete", "fixture": None}
    team = user_team(state)
    if team is None:
        return {"status": "no_club", "fixture": None}
    fixture = next(
        (f for f in state.fixtures if f.round == state.round and f.involves(team.id)),
        None,
    )
    if fixture is not None:
        status = "injured" if state.profile.is_injured else "playing"
        return {"status": status, "fixture": fixture}
    if state.round > league_rounds(state.fixtures) and is_eliminated(team.id, state.fixtures):
        return {"status": "eliminated", "fixture": None}
    return {"status": "bye", "fixture": None}


# ===================================================================
# Engine
# ===================================================================

class CareerEngine:
    """Intent API over a single career save."""

    def __init__(self, state: GameState | None = None, config: CareerConfig | None = None) -> None:
        if state is None:
            state = GameState(config=(config or CareerConfig()).validate())
        self.state = state

    # --- persistence -------------------------------------------------

    @classmethod
    def from_bytes(cls, payload: bytes) -> "CareerEngine":
        return cls(deserialize(payload))

    def to_bytes(self) -> bytes:
        return serialize(self.state)

    # --- transaction helpers -----------------------------------------

    def _begin(self) -> tuple[GameState, RandomOutcomeProvider]:
        work = copy.deepcopy(self.state)
        if work.rng:
            rng = RandomOutcomeProvider.from_dict(work.rng)
        else:
            rng = RandomOutcomeProvider(work.config.seed)
        return work, rng

    def _commit(
        self, work: GameState, rng: RandomOutcomeProvider, events: list[dict[str, Any]]
    ) -> tuple[GameState, list[dict[str, Any]]]:
        work.rng = rng.to_dict()
        self.state = work
        return self.state, events

    def _require_profile(self) -> PlayerProfile:
        if self.state.profile is None:
            raise ValidationError("No active player; start a new game first")
        return self.state.profile

    @staticmethod
    def _check_achievements(work: GameState, events: list[dict[str, Any]], line=None, votes: int = 0) -> None:
        work.profile, unlocked = achievements.check_achievements(work.profile, work.round, work.year, line, votes)
        for a in unlocked:
            events.append(_event("achievement", f"Achievement unlocked: {a.name}", achievement=a.to_dict()))

    @staticmethod
    def _effect_events(events: list[dict[str, Any]], level_before: int, p: PlayerProfile, summary: dict) -> None:
        if p.level > level_before:
            events.append(_event("level_up", f"Reached level {p.level}", level=p.level))
        for threshold in summary["fan_milestones"]:
            events.append(_event("fan_milestone", media.fan_milestone_title(threshold), followers=threshold))

    def _require_phase(self, *phases: str) -> None:
        if self.state.phase not in phases:
            raise ValidationError(
                f"Not allowed during the {self.state.phase!r} phase",
                {"phase": self.state.phase, "allowed": list(phases)},
            )

    # --- league setup ------------------------------------------------

    def _start_season(self, work: GameState, rng: RandomOutcomeProvider, teams: list[Team]) -> None:
        """Put the user into their club and build the fixture list for a new season."""
        market.relocate_user(teams, work.profile, rng, work.next_id)
        chemistry.sync_club(work.profile)
        work.teams = teams
        work.fixtures = generate_season_fixtures(teams, work.config.season_length)
        work.round = 1
        work.season_tallies = {}
        work.phase = PHASE_SEASON

    def _start_draft(self, work: GameState, rng: RandomOutcomeProvider) -> None:
        """Enter the national draft: the national clubs pick in lottery order."""
        count = min(work.config.team_count, len(TEAM_NAMES[TIER_NATIONAL]))
        clubs = generate_league(TIER_NATIONAL, rng, count)
        work.teams = clubs
        work.fixtures = []
        work.round = 1
        work.season_tallies = {}
        work.draft = offseason.build_draft_class(work.year, work.profile, clubs, rng)
        work.phase = PHASE_DRAFT

    # --- intents -----------------------------------------------------

    def start_new_game(
        self,
        profile: PlayerProfile,
        via_draft: bool = False,
        now: date | datetime | None = None,
    ) -> tuple[GameState, list[dict[str, Any]]]:
        """Begin a career with *profile*.

        The default path signs the player to a LOCAL league club. With
        ``via_draft`` the career opens in the national draft instead. When
        *now* is given the first daily reward is claimed as well.
        """
        self._require_phase(PHASE_NEW, PHASE_RETIRED)
        config = self.state.config.validate()
        if profile.potential > config.attribute_cap:
            raise ValidationError(
                f"Potential {profile.potential} exceeds the attribute cap {config.attribute_cap}"
            )

        rng = RandomOutcomeProvider(config.seed)
        work = GameState(config=config, hall_of_fame=copy.deepcopy(self.state.hall_of_fame))
        work.profile = copy.deepcopy(profile)
        events: list[dict[str, Any]] = []

        if via_draft:
            work.profile.contract = Contract(tier=TIER_STATE)
            self._start_draft(work, rng)
            events.append(_event("draft_started", f"{profile.name} enters the {work.year} national draft"))
        else:
            teams = generate_league(TIER_LOCAL, rng, config.team_count)
            club = rng.choice(teams)
            rating = overall_rating(work.profile)
            work.profile.contract = Contract(
                club_name=club.name,
                salary=market.generate_new_season_salary(TIER_LOCAL, rating),
                tier=TIER_LOCAL,
                years_left=2,
            )
            work.profile.clubs = [club.name]
            self._start_season(work, rng, teams)
            events.append(_event("game_started", f"{profile.name} signs with {club.name}", club=club.name))

        if now is not None:
            updated, reward = rewards.claim(work.profile.daily_rewards, now)
            if reward is not None:
                work.profile.daily_rewards = updated
                work.profile = rewards.apply_reward(work.profile, reward)
                events.append(_event("daily_reward", f"Day {reward['day']} reward claimed", reward=reward))

        logger.info("New game started for %s (via_draft=%s, seed=%s)", profile.name, via_draft, rng.seed)
        return self._commit(work, rng, events)

    def simulate_round(self) -> tuple[GameState, list[dict[str, Any]]]:
        """Play every fixture of the current round and apply its effects to the user."""
        self._require_phase(PHASE_SEASON)
        self._require_profile()
        if fixtures_complete(self.state.fixtures):
            raise ValidationError("The season is complete; advance to the next season")

        work, rng = self._begin()
        events: list[dict[str, Any]] = []
        round_no = work.round
        p = work.profile
        p.transfer_offers = market.prune_offers(p.transfer_offers, round_no)
        chemistry.sync_club(p)
        injured_before = p.is_injured
        team = user_team(work)
        team_id = team.id if team is not None else None
        last_league_round = league_rounds(work.fixtures)

        user_result = None
        user_line, votes = None, 0
        for fixture in [f for f in work.fixtures if f.round == round_no and not f.played]:
            home = work.team(fixture.home_team_id)
            away = work.team(fixture.away_team_id)
            result = simulate_match(home, away, team_id, p, rng, allow_draw=not fixture.is_final)
            fixture.record_result(result)
            if not fixture.is_final:
                self._tally(work, result)
            result.performers = []
            if result.user_stats is not None:
                user_result = (fixture, result)

        if user_result is not None:
            fixture, result = user_result
            votes = result.votes.get(USER_PLAYER_ID, 0)
            won = None if result.is_draw else result.winner_id == team_id
            level_before = p.level
            p, applied = development.apply_match(
                p, result.user_stats, votes, won, result.user_injury, round_no, work.year
            )
            user_line = result.user_stats
            result.milestones = list(applied["milestones"])
            events.append(_event("match", result.summary, fixture=fixture.to_dict(), votes=votes))
            for m in applied["milestones"]:
                events.append(_event("milestone", m.description, milestone=m.to_dict()))
            if p.level > level_before:
                events.append(_event("level_up", f"Reached level {p.level}", level=p.level))
            shift = chemistry.after_match(p, won, votes)
            if shift:
                events.append(_event(
                    "chemistry",
                    f"Chemistry {p.chemistry} ({chemistry.chemistry_form(p.chemistry)})",
                    chemistry=p.chemistry,
                    change=shift,
                ))
            if applied["injury"] is not None:
                inj = applied["injury"]
                events.append(
                    _event("injury", f"{inj.name}: out for {inj.weeks_remaining} week(s)", injury=inj.to_dict())
                )
            event = media.generate_media_event(p, result.user_stats, votes, won, round_no, work.year, rng, work.next_id)
            if event is not None:
                p.media.events.append(event)
                events.append(_event("media", event.title, event=event.to_dict()))
        elif team_id is not None and p.is_injured:
            events.append(_event("sidelined", f"Missed round {round_no} through injury"))

        if injured_before:
            p, healed = development.tick_injury(p)
            if healed:
                events.append(_event("recovered", "Cleared to play again"))

        if round_no <= last_league_round:
            p, paid = media.pay_salary(p, work.config.season_length)
            if paid:
                events.append(_event("salary", f"Paid ${paid}", amount=paid))
        p, unlocked = media.apply_passive_growth(p)
        for threshold in unlocked:
            events.append(_event("fan_milestone", media.fan_milestone_title(threshold), followers=threshold))

        standings = compute_ladder(work.teams, work.fixtures)
        if round_no <= last_league_round:
            offers = market.generate_offers(
                p, standings, round_no, work.config.season_length, rng, work.next_id
            )
            if offers:
                p.transfer_offers.extend(offers)
                events.append(_event("offers", f"{len(offers)} new transfer offer(s)", offers=[o.to_dict() for o in offers]))

        # Triggers read the state the round left behind, before energy comes back
        career_event = career_events.roll_career_event(p, round_no, work.year, rng, work.next_id)
        p = development.restore_energy(p)
        if career_event is not None:
            level_before = p.level
            p, summary = career_events.record_event(p, career_event)
            events.append(_event(
                "career_event",
                career_event.title,
                event=p.career_events[-1].to_dict(),
                needs_choice=career_event.needs_choice,
            ))
            if summary is not None:
                self._effect_events(events, level_before, p, summary)
        work.profile = p
        self._check_achievements(work, events, user_line, votes)

        finals = next_finals_fixtures(
            standings, work.fixtures, work.config.finals_size, work.config.finals_format
        )
        if finals:
            work.fixtures.extend(finals)
            events.append(_event("finals", f"{finals[0].match_type} round set", fixtures=[f.to_dict() for f in finals]))

        if fixtures_complete(work.fixtures):
            gf = grand_final(work.fixtures)
            events.append(_event("season_complete", gf.result.summary))
        else:
            work.round += 1

        logger.info("Round %d simulated (year %d)", round_no, work.year)
        return self._commit(work, rng, events)

    @staticmethod
    def _tally(work: GameState, result) -> None:
        for perf in result.performers:
            row = work.season_tallies.setdefault(
                perf.player_id,
                {"name": perf.name, "team_id": perf.team_id, "votes": 0, "goals": 0, "disposals": 0},
            )
            row["team_id"] = perf.team_id
            row["votes"] += result.votes.get(perf.player_id, 0)
            row["goals"] += perf.goals
            row["disposals"] += perf.disposals

    def train_attribute(self, attribute: str) -> tuple[GameState, list[dict[str, Any]]]:
        self._require_phase(PHASE_SEASON, PHASE_DRAFT)
        profile = self._require_profile()
        work, rng = self._begin()
        p, xp = development.train_attribute(profile, attribute)
        events = [_event("trained", f"{attribute} is now {p.attributes[attribute]}", xp=xp)]
        if p.level > profile.level:
            events.append(_event("level_up", f"Reached level {p.level}", level=p.level))
        work.profile = p
        self._check_achievements(work, events)
        return self._commit(work, rng, events)

    def unlock_master_skill(self, skill_id: str) -> tuple[GameState, list[dict[str, Any]]]:
        self._require_phase(PHASE_SEASON, PHASE_DRAFT)
        profile = self._require_profile()
        work, rng = self._begin()
        work.profile = development.unlock_master_skill(profile, skill_id)
        return self._commit(work, rng, [_event("master_skill", f"Unlocked {skill_id}", skill_id=skill_id)])

    def acknowledge_milestone(self) -> tuple[GameState, list[dict[str, Any]]]:
        profile = self._require_profile()
        work, rng = self._begin()
        seen = len(development.pending_milestones(profile))
        work.profile = development.acknowledge_milestones(profile)
        return self._commit(work, rng, [_event("milestones_acknowledged", f"{seen} milestone(s) acknowledged")])

    def claim_reward(self, now: date | datetime) -> tuple[GameState, list[dict[str, Any]]]:
        profile = self._require_profile()
        if not rewards.can_claim(profile.daily_rewards, now):
            raise ValidationError("Today's reward has already been claimed")
        work, rng = self._begin()
        updated, reward = rewards.claim(profile.daily_rewards, now)
        work.profile.daily_rewards = updated
        work.profile = rewards.apply_reward(work.profile, reward)
        return self._commit(
            work, rng, [_event("daily_reward", f"Day {reward['day']} reward claimed", reward=reward)]
        )

    def purchase_item(self, item_id: str) -> tuple[GameState, list[dict[str, Any]]]:
        profile = self._require_profile()
        work, rng = self._begin()
        work.profile, item = media.purchase_item(profile, item_id)
        events = [_event("purchase", f"Bought {item.name}", item=item.to_dict())]
        self._check_achievements(work, events)
        return self._commit(work, rng, events)

    def accept_transfer(self, offer_id: str) -> tuple[GameState, list[dict[str, Any]]]:
        self._require_phase(PHASE_SEASON)
        profile = self._require_profile()
        work, rng = self._begin()
        p, offer = market.accept_transfer(profile, offer_id, work.round)
        work.profile = p
        moved = market.relocate_user(work.teams, p, rng, work.next_id)
        events = [_event("transfer", f"Signed with {offer.club_name}", offer=offer.to_dict())]
        if not moved:
            events.append(_event("transfer_pending", f"Move to {offer.club_name} takes effect next season"))
        else:
            chemistry.sync_club(p)
        self._check_achievements(work, events)
        logger.info("Transfer accepted: %s (%s)", offer.club_name, offer.tier)
        return self._commit(work, rng, events)

    def reject_transfer(self, offer_id: str) -> tuple[GameState, list[dict[str, Any]]]:
        profile = self._require_profile()
        work, rng = self._begin()
        work.profile = market.reject_transfer(profile, offer_id)
        return self._commit(work, rng, [_event("transfer_rejected", f"Rejected offer {offer_id}")])

    def respond_to_media(self, event_id: str, response: str) -> tuple[GameState, list[dict[str, Any]]]:
        profile = self._require_profile()
        work, rng = self._begin()
        work.profile, summary = media.respond_to_media(profile, event_id, response)
        events = [_event("media_response", f"Responded {response}", **summary)]
        for threshold in summary["fan_milestones"]:
            events.append(_event("fan_milestone", media.fan_milestone_title(threshold), followers=threshold))
        return self._commit(work, rng, events)

    def resolve_career_event(self, event_id: str, choice_id: str) -> tuple[GameState, list[dict[str, Any]]]:
        """Settle a pending career event with one of the choices it offers."""
        profile = self._require_profile()
        work, rng = self._begin()
        p, event, summary = career_events.resolve_career_event(profile, event_id, choice_id)
        work.profile = p
        events = [_event("career_event_resolved", event.outcome or event.title, event=event.to_dict())]
        self._effect_events(events, profile.level, p, summary)
        self._check_achievements(work, events)
        return self._commit(work, rng, events)

    def create_social_post(self, text: str) -> tuple[GameState, list[dict[str, Any]]]:
        profile = self._require_profile()
        work, rng = self._begin()
        work.profile, summary = media.create_social_post(profile, text, work.round, work.year, work.next_id)
        events = [_event("social_post", f"+{summary['followers_gained']} followers", **summary)]
        for threshold in summary["fan_milestones"]:
            events.append(_event("fan_milestone", media.fan_milestone_title(threshold), followers=threshold))
        return self._commit(work, rng, events)

    def simulate_draft_pick(self) -> tuple[GameState, list[dict[str, Any]]]:
        self._require_phase(PHASE_DRAFT)
        work, rng = self._begin()
        work.draft, info = offseason.make_draft_pick(work.draft, work.teams, rng)
        message = f"Pick {info['pick_number']}: {info['team_name']} select {info['prospect_name']}"
        return self._commit(work, rng, [_event("draft_pick", message, pick=info)])

    def complete_draft(self) -> tuple[GameState, list[dict[str, Any]]]:
        """Finish the draft and start the season at the club that took the user.

        An undrafted user lands at a STATE league club on a base contract.
        """
        self._require_phase(PHASE_DRAFT)
        work, rng = self._begin()
        work.draft, made = offseason.complete_draft(work.draft, work.teams, rng)
        events = [_event("draft_pick", f"Pick {m['pick_number']}: {m['team_name']} select {m['prospect_name']}", pick=m) for m in made]
        p = work.profile
        rating = overall_rating(p)
        pick = offseason.user_draft_pick(work.draft)
        if pick is not None:
            p.contract = Contract(
                club_name=pick.team_name,
                salary=ROOKIE_SALARY,
                tier=TIER_NATIONAL,
                years_left=ROOKIE_CONTRACT_YEARS,
            )
            teams = work.teams
            events.append(_event("drafted", f"Drafted by {pick.team_name} at pick {pick.pick_number}", pick=pick.to_dict()))
        else:
            keep = p.contract.tier == TIER_STATE and p.contract.club_name and p.contract.years_left > 0
            club = p.contract.club_name if keep else rng.choice(TEAM_NAMES[TIER_STATE])
            if not keep:
                p.contract = market.base_contract(club, TIER_STATE, rating)
            teams = generate_league(TIER_STATE, rng, work.config.team_count, user_club=club)
            events.append(_event("undrafted", f"Overlooked in the draft; playing for {club}", club=club))
        if p.contract.club_name not in p.clubs:
            p.clubs.append(p.contract.club_name)
        self._start_season(work, rng, teams)
        self._check_achievements(work, events)
        logger.info("Draft completed: %s -> %s", p.name, p.contract.club_name)
        return self._commit(work, rng, events)

    def _season_awards(self, work: GameState, team: Team | None) -> list[str]:
        tallies = work.season_tallies
        mine = tallies.get(USER_PLAYER_ID)
        if mine is None:
            return []
        awards = []
        top_votes = max(row["votes"] for row in tallies.values())
        if mine["votes"] > 0 and mine["votes"] == top_votes:
            awards.append(AWARD_BROWNLOW)
        top_goals = max(row["goals"] for row in tallies.values())
        if mine["goals"] > 0 and mine["goals"] == top_goals:
            awards.append(AWARD_COLEMAN)
        if team is not None:
            club_votes = max(row["votes"] for row in tallies.values() if row["team_id"] == team.id)
            if mine["votes"] > 0 and mine["votes"] == club_votes:
                awards.append(AWARD_CLUB_BF)
        if work.profile.age <= RISING_STAR_AGE and work.profile.season_stats.votes >= RISING_STAR_VOTES:
            awards.append(AWARD_RISING_STAR)
        return awards

    def advance_season(self) -> tuple[GameState, list[dict[str, Any]]]:
        """Close the finished season and set up the next one (or the draft)."""
        self._require_phase(PHASE_SEASON)
        self._require_profile()
        if not fixtures_complete(self.state.fixtures):
            raise ValidationError("The season is not complete yet")

        work, rng = self._begin()
        p = work.profile
        events: list[dict[str, Any]] = []
        standings = compute_ladder(work.teams, work.fixtures)
        team = user_team(work)
        position = ladder_position(standings, team.id) if team is not None else None
        season_tier = standings[0].tier if standings else p.contract.tier
        rating = overall_rating(p)

        gf = grand_final(work.fixtures)
        premiership = team is not None and gf is not None and gf.result.winner_id == team.id
        if premiership:
            p.career_stats.premierships += 1
            p.season_stats.premierships += 1
            events.append(_event("premiership", f"{team.name} are premiers!"))

        for award in self._season_awards(work, team):
            p.career_stats.awards.append(award)
            p.season_stats.awards.append(award)
            events.append(_event("award", award))

        draft_bound = team is not None and market.is_draft_eligible(season_tier, position, rating, p.age)
        new_tier, promoted, relegated = p.contract.tier, False, False
        if team is not None and not draft_bound:
            new_tier, promoted, relegated = market.tier_movement(
                p.contract.tier, position, len(work.teams), rating
            )

        p.season_history.append(
            SeasonRecord(
                year=work.year,
                tier=season_tier,
                club=team.name if team is not None else p.contract.club_name,
                ladder_position=position,
                stats=copy.deepcopy(p.season_stats),
                promoted=promoted,
                relegated=relegated,
                premiership=premiership,
            )
        )
        p.age += 1
        p.contract.years_left = max(0, p.contract.years_left - 1)
        p.season_stats = PlayerStats()
        p.transfer_offers = []

        if new_tier != p.contract.tier:
            club = rng.choice(TEAM_NAMES[new_tier])
            p.contract = Contract(
                club_name=club,
                salary=market.generate_new_season_salary(new_tier, rating, promoted),
                tier=new_tier,
                years_left=max(1, p.contract.years_left),
            )
            word = "Promoted" if promoted else "Relegated"
            events.append(_event("promoted" if promoted else "relegated", f"{word} to the {new_tier} with {club}", club=club))
        elif p.contract.years_left == 0:
            p.contract = Contract(
                club_name=p.contract.club_name,
                salary=market.generate_new_season_salary(p.contract.tier, rating),
                tier=p.contract.tier,
                years_left=market.contract_length_for(rating),
            )
            events.append(_event("contract_renewed", f"Re-signed for ${p.contract.salary}", contract=p.contract.to_dict()))
        if p.contract.club_name not in p.clubs:
            p.clubs.append(p.contract.club_name)

        work.year += 1
        work.draft = None
        if draft_bound:
            self._start_draft(work, rng)
            events.append(_event("draft_started", f"Nominated for the {work.year} national draft"))
        else:
            keep = team is not None and team.name == p.contract.club_name and new_tier == season_tier
            if keep:
                teams = work.teams
            else:
                teams = generate_league(p.contract.tier, rng, work.config.team_count, user_club=p.contract.club_name)
            self._start_season(work, rng, teams)
            events.append(_event("season_started", f"Season {work.year} begins with {p.contract.club_name}"))

        self._check_achievements(work, events)
        if p.age >= RETIREMENT_AGE:
            events.append(_event("retirement_due", f"At {p.age} it may be time to hang up the boots"))
        logger.info("Season advanced to year %d (%s, %s)", work.year, p.contract.club_name, p.contract.tier)
        return self._commit(work, rng, events)

    def retire_player(self) -> tuple[GameState, list[dict[str, Any]]]:
        """Move the player into the hall of fame and end the career."""
        self._require_phase(PHASE_SEASON, PHASE_DRAFT)
        profile = self._require_profile()
        work, rng = self._begin()
        record = HallOfFameRecord(
            name=profile.name,
            position=profile.position,
            retired_year=work.year,
            retired_age=profile.age,
            seasons=len(profile.season_history),
            level=profile.level,
            career_stats=copy.deepcopy(profile.career_stats),
            clubs=list(profile.clubs),
            milestones=len(profile.milestones),
        )
        work.hall_of_fame.append(record)
        work.phase = PHASE_RETIRED
        work.profile = None
        work.teams = []
        work.fixtures = []
        work.draft = None
        work.season_tallies = {}
        logger.info("%s retired after %d season(s)", record.name, record.seasons)
        return self._commit(work, rng, [_event("retired", f"{record.name} retires", record=record.to_dict())])

    def reset_game(self) -> tuple[GameState, list[dict[str, Any]]]:
        """Throw away the current career. The hall of fame survives."""
        self.state = GameState(
            config=copy.deepcopy(self.state.config),
            hall_of_fame=copy.deepcopy(self.state.hall_of_fame),
        )
        return self.state, [_event("reset", "Game reset")]

