"""
Footy Career: Flask app.
JSON intent API over a single in-process CareerEngine. Every intent answers with the
events it produced and a snapshot of the resulting state; saves go to SQLite slots.
"""
import logging
import threading
from datetime import date

from flask import Flask, jsonify, request

from models import (
    CATALOG,
    CareerConfig,
    CareerError,
    CapReachedError,
    ConfigurationError,
    CorruptSaveError,
    InsufficientResourceError,
    NotFoundError,
    ValidationError,
)
from db import (
    get_connection,
    init_db,
    save_game,
    load_game,
    list_saves,
    delete_save,
    insert_hall_of_fame,
    get_hall_of_fame,
)
from generation import create_profile
from simulation import (
    CareerEngine,
    available_master_skills,
    chemistry_form,
    ladder,
    pending_career_events,
    pending_milestones,
    user_fixture,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_mapping(DB_PATH=None, SEED=None)
app.config.from_prefixed_env("FOOTY")

# One engine per process; intents run one at a time so a double-click cannot skip a round
_engine_lock = threading.Lock()
_engine = CareerEngine()

# Most specific class first
_STATUS_CODES = [
    (NotFoundError, 404),
    (CapReachedError, 409),
    (InsufficientResourceError, 402),
    (ConfigurationError, 422),
    (CorruptSaveError, 500),
    (ValidationError, 400),
]


def get_engine() -> CareerEngine:
    return _engine


def set_engine(engine: CareerEngine) -> None:
    global _engine
    with _engine_lock:
        _engine = engine


def _status_for(exc: CareerError) -> int:
    for cls, status in _STATUS_CODES:
        if isinstance(exc, cls):
            return status
    return 400


@app.errorhandler(CareerError)
def handle_career_error(exc: CareerError):
    status = _status_for(exc)
    logger.warning("%s %s -> %d %s", request.method, request.path, status, exc)
    return jsonify({"error": exc.message, "code": exc.code, "details": exc.details}), status


def _connection():
    conn = get_connection(app.config.get("DB_PATH"))
    init_db(conn)
    return conn


def _body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def _required(data: dict, key: str):
    value = data.get(key)
    if value is None or value == "":
        raise ValidationError(f"Missing {key}", {"field": key})
    return value


def _snapshot(state) -> dict:
    return {
        "phase": state.phase,
        "year": state.year,
        "round": state.round,
        "profile": state.profile.to_dict() if state.profile is not None else None,
    }


def _respond(result):
    state, events = result
    return jsonify({"events": events, "state": _snapshot(state)})


def _run(intent, *args):
    with _engine_lock:
        return _respond(intent(*args))


# ===================================================================
# Game lifecycle
# ===================================================================

@app.route("/api/game", methods=["POST"])
def api_new_game():
    """Onboarding: build the profile from the allocation and start a career."""
    data = _body()
    overrides = data.get("config") or {}
    if not isinstance(overrides, dict):
        raise ValidationError("config must be an object", {"field": "config"})
    config = CareerConfig.from_dict(overrides)
    if config.seed is None and app.config.get("SEED") is not None:
        config.seed = int(app.config["SEED"])
    config.validate()
    profile = create_profile(
        _required(data, "name"),
        _required(data, "position"),
        data.get("allocations") or {},
        config=config,
    )
    engine = CareerEngine(config=config)
    if _engine.state.hall_of_fame:
        engine.state.hall_of_fame = list(_engine.state.hall_of_fame)
    now = date.today() if data.get("claim_reward") else None
    result = engine.start_new_game(profile, via_draft=bool(data.get("via_draft")), now=now)
    set_engine(engine)
    return _respond(result)


@app.route("/api/state")
def api_state():
    return jsonify(_engine.state.to_dict())


@app.route("/api/reset", methods=["POST"])
def api_reset():
    return _run(_engine.reset_game)


@app.route("/api/retire", methods=["POST"])
def api_retire():
    with _engine_lock:
        state, events = _engine.retire_player()
        conn = _connection()
        try:
            insert_hall_of_fame(conn, state.hall_of_fame[-1])
        finally:
            conn.close()
    return _respond((state, events))


# ===================================================================
# Season
# ===================================================================

@app.route("/api/round", methods=["POST"])
def api_simulate_round():
    return _run(_engine.simulate_round)


@app.route("/api/season/advance", methods=["POST"])
def api_advance_season():
    return _run(_engine.advance_season)


@app.route("/api/ladder")
def api_ladder():
    rows = []
    for pos, team in enumerate(ladder(_engine.state), start=1):
        row = team.to_dict()
        row.pop("roster", None)
        row["position"] = pos
        rows.append(row)
    return jsonify({"ladder": rows})


@app.route("/api/fixture")
def api_fixture():
    view = user_fixture(_engine.state)
    fixture = view["fixture"]
    return jsonify({"status": view["status"], "fixture": fixture.to_dict() if fixture else None})


@app.route("/api/fixtures")
def api_fixtures():
    return jsonify({"fixtures": [f.to_dict() for f in _engine.state.fixtures]})


# ===================================================================
# Player development
# ===================================================================

@app.route("/api/train", methods=["POST"])
def api_train():
    return _run(_engine.train_attribute, _required(_body(), "attribute"))


@app.route("/api/master-skills")
def api_master_skills():
    profile = _engine.state.profile
    if profile is None:
        return jsonify({"error": "No active player"}), 404
    return jsonify({"skills": available_master_skills(profile), "unlocked": profile.master_skills})


@app.route("/api/master-skills/<skill_id>", methods=["POST"])
def api_unlock_master_skill(skill_id: str):
    return _run(_engine.unlock_master_skill, skill_id)


@app.route("/api/milestones")
def api_milestones():
    return jsonify({"pending": [m.to_dict() for m in pending_milestones(_engine.state)]})


@app.route("/api/milestones/acknowledge", methods=["POST"])
def api_acknowledge_milestones():
    return _run(_engine.acknowledge_milestone)


@app.route("/api/rewards/claim", methods=["POST"])
def api_claim_reward():
    raw = _body().get("date")
    try:
        now = date.fromisoformat(raw) if raw else date.today()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid date {raw!r}", {"field": "date"}) from exc
    return _run(_engine.claim_reward, now)


# ===================================================================
# Shop, transfers, media
# ===================================================================

@app.route("/api/shop")
def api_shop():
    return jsonify({"items": [item.to_dict() for item in CATALOG.values()]})


@app.route("/api/shop/<item_id>", methods=["POST"])
def api_purchase(item_id: str):
    return _run(_engine.purchase_item, item_id)


@app.route("/api/transfers/<offer_id>/accept", methods=["POST"])
def api_accept_transfer(offer_id: str):
    return _run(_engine.accept_transfer, offer_id)


@app.route("/api/transfers/<offer_id>/reject", methods=["POST"])
def api_reject_transfer(offer_id: str):
    return _run(_engine.reject_transfer, offer_id)


@app.route("/api/media/<event_id>", methods=["POST"])
def api_media_response(event_id: str):
    return _run(_engine.respond_to_media, event_id, _required(_body(), "response"))


@app.route("/api/social", methods=["POST"])
def api_social_post():
    return _run(_engine.create_social_post, _required(_body(), "content"))


# ===================================================================
# Career events, achievements, chemistry
# ===================================================================

@app.route("/api/career-events")
def api_career_events():
    return jsonify({"pending": [e.to_dict() for e in pending_career_events(_engine.state)]})


@app.route("/api/career-events/<event_id>", methods=["POST"])
def api_resolve_career_event(event_id: str):
    return _run(_engine.resolve_career_event, event_id, _required(_body(), "choice"))


@app.route("/api/achievements")
def api_achievements():
    profile = _engine.state.profile
    if profile is None:
        return jsonify({"error": "No active player"}), 404
    return jsonify({"unlocked": [a.to_dict() for a in profile.achievements]})


@app.route("/api/chemistry")
def api_chemistry():
    profile = _engine.state.profile
    if profile is None:
        return jsonify({"error": "No active player"}), 404
    return jsonify({
        "club": profile.chemistry_club,
        "chemistry": profile.chemistry,
        "form": chemistry_form(profile.chemistry),
    })


# ===================================================================
# Draft
# ===================================================================

@app.route("/api/draft")
def api_draft():
    draft = _engine.state.draft
    if draft is None:
        return jsonify({"error": "No draft in progress"}), 404
    return jsonify(draft.to_dict())


@app.route("/api/draft/pick", methods=["POST"])
def api_draft_pick():
    return _run(_engine.simulate_draft_pick)


@app.route("/api/draft/complete", methods=["POST"])
def api_draft_complete():
    return _run(_engine.complete_draft)


# ===================================================================
# Saves and hall of fame
# ===================================================================

@app.route("/api/saves")
def api_saves():
    conn = _connection()
    try:
        return jsonify({"saves": list_saves(conn)})
    finally:
        conn.close()


@app.route("/api/save/<slot>", methods=["POST"])
def api_save(slot: str):
    conn = _connection()
    try:
        with _engine_lock:
            save_game(conn, slot, _engine.state)
    finally:
        conn.close()
    logger.info("Saved game to slot %s", slot)
    return jsonify({"ok": True, "slot": slot})


@app.route("/api/load/<slot>", methods=["POST"])
def api_load(slot: str):
    conn = _connection()
    try:
        state = load_game(conn, slot)
    finally:
        conn.close()
    set_engine(CareerEngine(state))
    logger.info("Loaded game from slot %s", slot)
    return jsonify({"ok": True, "slot": slot, "state": _snapshot(state)})


@app.route("/api/save/<slot>", methods=["DELETE"])
def api_delete_save(slot: str):
    conn = _connection()
    try:
        delete_save(conn, slot)
    finally:
        conn.close()
    return jsonify({"ok": True, "slot": slot})


@app.route("/api/hall-of-fame")
def api_hall_of_fame():
    conn = _connection()
    try:
        records = get_hall_of_fame(conn)
    finally:
        conn.close()
    return jsonify({"hall_of_fame": [r.to_dict() for r in records]})


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=True, port=5000)
