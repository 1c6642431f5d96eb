"""
Game constants for Footy Career.
League tiers, positions, attribute ranges, milestone thresholds, reward tables,
shop catalog and name pools. Tunable numbers for the match simulator live here too.
"""
from typing import Dict, List, Tuple

# ---------------------------------------------------------------------------
# Player attributes
# ---------------------------------------------------------------------------
ATTRIBUTES = [
    "kicking", "handball", "tackling", "marking",
    "speed", "stamina", "goal_sense",
]

ATTRIBUTE_MIN = 10
ATTRIBUTE_CAP = 99
INITIAL_ATTRIBUTE_POINTS = 15
# Onboarding ceiling per attribute before any training
ONBOARDING_ATTRIBUTE_CAP = 20
DEFAULT_POTENTIAL = 90

STARTING_AGE = 18
RETIREMENT_AGE = 35
SEASON_LENGTH = 14
TEAM_COUNT = 8

ENERGY_MAX = 100
MORALE_MAX = 100
REPUTATION_MAX = 100

# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------
POSITIONS = ["Forward", "Midfielder", "Defender", "Ruck"]

DEFAULT_SUB_POSITION: Dict[str, str] = {
    "Forward": "HFF",
    "Midfielder": "C",
    "Defender": "HBF",
    "Ruck": "RUCK",
}

# 22-man team sheet: 18 on field + 4 interchange
ROSTER_TEMPLATE: List[Tuple[str, str]] = [
    ("FB", "Defender"), ("BP", "Defender"), ("BP", "Defender"),
    ("CHB", "Defender"), ("HBF", "Defender"), ("HBF", "Defender"),
    ("C", "Midfielder"), ("W", "Midfielder"), ("W", "Midfielder"),
    ("RUCK", "Ruck"), ("RR", "Midfielder"), ("ROV", "Midfielder"),
    ("CHF", "Forward"), ("HFF", "Forward"), ("HFF", "Forward"),
    ("FF", "Forward"), ("FP", "Forward"), ("FP", "Forward"),
    ("INT", "Midfielder"), ("INT", "Defender"), ("INT", "Forward"), ("INT", "Ruck"),
]
ROSTER_SIZE = len(ROSTER_TEMPLATE)

# Overall rating weights per position (sum to 1.0)
POSITION_RATING_WEIGHTS: Dict[str, Dict[str, float]] = {
    "Forward": {
        "kicking": 0.20, "handball": 0.05, "tackling": 0.05, "marking": 0.20,
        "speed": 0.10, "stamina": 0.10, "goal_sense": 0.30,
    },
    "Midfielder": {
        "kicking": 0.18, "handball": 0.20, "tackling": 0.15, "marking": 0.07,
        "speed": 0.15, "stamina": 0.20, "goal_sense": 0.05,
    },
    "Defender": {
        "kicking": 0.20, "handball": 0.10, "tackling": 0.25, "marking": 0.25,
        "speed": 0.10, "stamina": 0.10, "goal_sense": 0.00,
    },
    "Ruck": {
        "kicking": 0.10, "handball": 0.15, "tackling": 0.20, "marking": 0.30,
        "speed": 0.05, "stamina": 0.20, "goal_sense": 0.00,
    },
}

# Expected per-match output scale by position (disposals, tackles, goals)
POSITION_STAT_PROFILE: Dict[str, Dict[str, float]] = {
    "Forward": {"disposals": 0.7, "tackles": 0.7, "goals": 1.6},
    "Midfielder": {"disposals": 1.3, "tackles": 1.2, "goals": 0.6},
    "Defender": {"disposals": 1.0, "tackles": 1.1, "goals": 0.1},
    "Ruck": {"disposals": 0.8, "tackles": 1.0, "goals": 0.4},
}

# ---------------------------------------------------------------------------
# League tiers
# ---------------------------------------------------------------------------
TIER_LOCAL = "Local League"
TIER_STATE = "State League"
TIER_NATIONAL = "AFL"
TIERS = [TIER_LOCAL, TIER_STATE, TIER_NATIONAL]

TEAM_NAMES: Dict[str, List[str]] = {
    TIER_LOCAL: [
        "Mudcrabs", "Bushrangers", "Magpies", "Tigers", "Blues", "Demons",
        "Lions", "Hawks", "Roosters", "Kangaroos",
    ],
    TIER_STATE: [
        "Port Melbourne", "Williamstown", "Box Hill", "Werribee", "Sandringham",
        "Coburg", "Frankston", "Northern Bullants", "Casey", "Footscray",
    ],
    TIER_NATIONAL: [
        "Collingwood", "Carlton", "Essendon", "Richmond", "Hawthorn", "Geelong",
        "Sydney", "Brisbane", "Fremantle", "Adelaide", "St Kilda", "Melbourne",
        "North Melbourne", "Western Bulldogs", "Port Adelaide", "West Coast",
        "Gold Coast", "GWS",
    ],
}

TEAM_COLORS = [
    ("#000000", "#FFFFFF"), ("#0E1E2D", "#FFFFFF"), ("#CC2031", "#000000"),
    ("#FED102", "#000000"), ("#4D2004", "#FBBF15"), ("#1C3C63", "#FFFFFF"),
    ("#ED171F", "#FFFFFF"), ("#A30046", "#FDBE57"), ("#2A0D54", "#FFFFFF"),
    ("#0039A6", "#D32F2F"), ("#008AAB", "#000000"), ("#F15C22", "#FFFFFF"),
]

STADIUM_TEMPLATES: Dict[str, Dict] = {
    TIER_LOCAL: {"suffixes": ["Oval", "Park", "Reserve", "Rec Ground", "Paddock"], "min_cap": 200, "max_cap": 3000},
    TIER_STATE: {"suffixes": ["Arena", "Showgrounds", "Oval", "Sportsplex", "Centre"], "min_cap": 5000, "max_cap": 15000},
    TIER_NATIONAL: {"suffixes": ["Stadium", "Colosseum", "G", "Dome", "Arena"], "min_cap": 30000, "max_cap": 100000},
}

SUBURBS = [
    "Brunswick", "Fitzroy", "Geelong", "Ballarat", "Bendigo", "Shepparton",
    "Mildura", "Warrnambool", "Traralgon", "Wangaratta", "Echuca", "Horsham",
    "Sale", "Colac", "Hamilton", "Benalla",
]

# CPU roster rating bands per tier (lo, hi)
TIER_RATING_RANGE: Dict[str, Tuple[int, int]] = {
    TIER_LOCAL: (30, 60),
    TIER_STATE: (45, 72),
    TIER_NATIONAL: (60, 90),
}

# Salary multiplier applied at season rollover
TIER_SALARY_MULTIPLIER: Dict[str, float] = {
    TIER_LOCAL: 1.0,
    TIER_STATE: 2.5,
    TIER_NATIONAL: 8.0,
}
BASE_SALARY = 500
PROMOTION_SALARY_BONUS = 500

# ---------------------------------------------------------------------------
# Ladder and finals
# ---------------------------------------------------------------------------
POINTS_WIN = 4
POINTS_DRAW = 2
POINTS_LOSS = 0

FINALS_SIZES = (4, 8)
FINALS_FORMATS = ("single", "double_chance")

MATCH_TYPE_LEAGUE = "League"
MATCH_TYPE_QUALIFYING = "Qualifying Final"
MATCH_TYPE_ELIMINATION = "Elimination Final"
MATCH_TYPE_QUARTER = "Quarter Final"
MATCH_TYPE_SEMI = "Semi Final"
MATCH_TYPE_PRELIMINARY = "Preliminary Final"
MATCH_TYPE_GRAND = "Grand Final"

# ---------------------------------------------------------------------------
# Match simulator parameters
# ---------------------------------------------------------------------------
GOAL_POINTS = 6
BEHIND_POINTS = 1
QUARTERS = 4

CHANCE_BASE = 24.0
CHANCE_SWING = 0.45  # extra chances per rating point of strength advantage
CHANCE_SD = 4.0
CHANCE_MIN = 6
GOAL_PROB_BASE = 0.52
GOAL_PROB_SWING = 0.006
GOAL_PROB_RANGE = (0.35, 0.70)
HOME_ADVANTAGE = 1.5

TEAM_DISPOSALS_MEAN = 340
TEAM_TACKLES_MEAN = 60

# Vote scoring: weighted performance per stat
VOTE_WEIGHTS: Dict[str, float] = {
    "disposals": 1.0,
    "tackles": 1.5,
    "goals": 6.0,
    "behinds": 0.5,
}
VOTES_AWARDED = (3, 2, 1)

MORALE_HIGH = 80
MORALE_LOW = 40
MORALE_HIGH_MULTIPLIER = 1.1
MORALE_LOW_MULTIPLIER = 0.85
MORALE_WIN = 5
MORALE_LOSS = -5
MORALE_TRANSFER = 20

RESULT_WIN = "win"
RESULT_LOSS = "loss"
RESULT_DRAW = "draw"

# ---------------------------------------------------------------------------
# Progression
# ---------------------------------------------------------------------------
TRAINING_ENERGY_COST = 10
TRAINING_XP = 10
MATCH_SKILL_POINTS = 1
MATCH_XP_BASE = 20
LEVEL_XP_STEP = 100
LEVEL_UP_SKILL_POINTS = 3

INJURY_CHANCE = 0.015
INJURY_LOW_ENERGY = 30
INJURY_LOW_ENERGY_MULTIPLIER = 2.0
INJURY_TYPES: List[Tuple[str, int]] = [
    ("Hamstring Strain", 2),
    ("Rolled Ankle", 1),
    ("Concussion", 1),
    ("ACL Tear", 10),
    ("Calf Strain", 2),
    ("Shoulder Dislocation", 4),
]


# Career milestone thresholds by stat
MILESTONE_THRESHOLDS: Dict[str, List[int]] = {
    "matches": [1, 50, 100, 150, 200, 250, 300, 350, 400],
    "goals": [1, 50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 1000],
    "disposals": [500, 1000, 2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
    "tackles": [100, 250, 500, 750, 1000],
}

MILESTONE_LABELS: Dict[str, str] = {
    "matches": "games",
    "goals": "career goals",
    "disposals": "career disposals",
    "tackles": "career tackles",
}

# Master skills: unlocked once, boost one match stat
MASTER_SKILLS: List[Dict] = [
    {"id": "sharpshooter", "name": "Sharpshooter", "attribute": "goal_sense", "prerequisite": 60, "level": 3, "sp_cost": 5, "stat": "goals", "bonus": 0.15},
    {"id": "set_shot_specialist", "name": "Set Shot Specialist", "attribute": "kicking", "prerequisite": 70, "level": 5, "sp_cost": 8, "stat": "goals", "bonus": 0.10},
    {"id": "clearance_king", "name": "Clearance King", "attribute": "handball", "prerequisite": 60, "level": 3, "sp_cost": 5, "stat": "disposals", "bonus": 0.10},
    {"id": "engine_room", "name": "Engine Room", "attribute": "stamina", "prerequisite": 70, "level": 5, "sp_cost": 8, "stat": "disposals", "bonus": 0.12},
    {"id": "bone_crusher", "name": "Bone Crusher", "attribute": "tackling", "prerequisite": 60, "level": 3, "sp_cost": 5, "stat": "tackles", "bonus": 0.15},
    {"id": "contested_beast", "name": "Contested Beast", "attribute": "marking", "prerequisite": 65, "level": 4, "sp_cost": 6, "stat": "disposals", "bonus": 0.08},
    {"id": "burst_of_pace", "name": "Burst of Pace", "attribute": "speed", "prerequisite": 65, "level": 4, "sp_cost": 6, "stat": "tackles", "bonus": 0.08},
]

# ---------------------------------------------------------------------------
# Transfers
# ---------------------------------------------------------------------------
OFFER_EXPIRY_ROUNDS = 3
MAX_OFFERS = 3
MIN_OFFER_SALARY = 100

ROLE_STAR = "STAR"
ROLE_STARTER = "STARTER"
ROLE_ROTATION = "ROTATION"
ROLE_DEPTH = "DEPTH"
ROLES = [ROLE_STAR, ROLE_STARTER, ROLE_ROTATION, ROLE_DEPTH]

# Rating needed before clubs of a tier make offers
TIER_OFFER_RATING: Dict[str, int] = {
    TIER_LOCAL: 0,
    TIER_STATE: 55,
    TIER_NATIONAL: 70,
}

# Promotion / relegation rules: (ladder cut, rating cut)
PROMOTION_RULES: Dict[str, Tuple[int, int]] = {
    TIER_LOCAL: (3, 50),
    TIER_STATE: (2, 65),
}
RELEGATION_RULES: Dict[str, Tuple[int, int]] = {
    TIER_NATIONAL: (2, 60),
    TIER_STATE: (2, 50),
}

# ---------------------------------------------------------------------------
# Draft
# ---------------------------------------------------------------------------
DRAFT_ROUNDS = 3
DRAFT_CLASS_EXTRA = 6
DRAFT_RANK_NOISE = 3
DRAFT_NEED_CHANCE = 0.3
DRAFT_ELIGIBLE_AGE = 24
DRAFT_ELIGIBLE_RATING = 65
ROOKIE_CONTRACT_YEARS = 2
ROOKIE_SALARY = 1200
PROSPECT_STATES = ["VIC", "NSW", "QLD", "SA", "WA", "TAS", "NT", "ACT"]
PROSPECT_POTENTIAL_BANDS = [(85, 95), (78, 88), (72, 82), (65, 75)]

# ---------------------------------------------------------------------------
# Media & economy
# ---------------------------------------------------------------------------
REPUTATION_START = 50
FOLLOWERS_START = 100

# (minimum score, tier) checked top-down
REPUTATION_TIERS: List[Tuple[int, str]] = [
    (90, "LEGEND"),
    (75, "SUPERSTAR"),
    (60, "POPULAR"),
    (40, "DECENT"),
    (20, "CONTROVERSIAL"),
    (0, "UNKNOWN"),
]

TIER_FOLLOWER_MULTIPLIER: Dict[str, float] = {
    "LEGEND": 3.0,
    "SUPERSTAR": 2.0,
    "POPULAR": 1.5,
    "DECENT": 1.0,
    "CONTROVERSIAL": 0.8,
    "UNKNOWN": 0.5,
}

FAN_MILESTONES: List[Tuple[int, str]] = [
    (1000, "Local Following"),
    (5000, "Rising Star"),
    (10000, "Fan Favourite"),
    (50000, "State Hero"),
    (100000, "National Icon"),
    (500000, "Superstar"),
    (1000000, "Legend"),
]

MEDIA_PRAISE = "PRAISE"
MEDIA_CRITICISM = "CRITICISM"
MEDIA_INTERVIEW = "INTERVIEW"
MEDIA_CONTROVERSY = "CONTROVERSY"
MEDIA_SOCIAL = "SOCIAL_MEDIA"

RESPONSE_HUMBLE = "HUMBLE"
RESPONSE_CONFIDENT = "CONFIDENT"
RESPONSE_IGNORE = "IGNORE"
MEDIA_RESPONSES = [RESPONSE_HUMBLE, RESPONSE_CONFIDENT, RESPONSE_IGNORE]

# (event type, response) -> (reputation delta, follower delta)
MEDIA_RESPONSE_EFFECTS: Dict[Tuple[str, str], Tuple[int, int]] = {
    (MEDIA_PRAISE, RESPONSE_HUMBLE): (3, 500),
    (MEDIA_PRAISE, RESPONSE_CONFIDENT): (1, 300),
    (MEDIA_PRAISE, RESPONSE_IGNORE): (0, 0),
    (MEDIA_CRITICISM, RESPONSE_HUMBLE): (5, 400),
    (MEDIA_CRITICISM, RESPONSE_CONFIDENT): (-3, -200),
    (MEDIA_CRITICISM, RESPONSE_IGNORE): (-2, -100),
    (MEDIA_INTERVIEW, RESPONSE_HUMBLE): (2, 200),
    (MEDIA_INTERVIEW, RESPONSE_CONFIDENT): (2, 200),
    (MEDIA_INTERVIEW, RESPONSE_IGNORE): (-1, -50),
    (MEDIA_CONTROVERSY, RESPONSE_HUMBLE): (4, 300),
    (MEDIA_CONTROVERSY, RESPONSE_CONFIDENT): (-4, 100),
    (MEDIA_CONTROVERSY, RESPONSE_IGNORE): (-2, -200),
}

MEDIA_EVENT_CHANCE = 0.3
MEDIA_EVENT_CHANCE_STANDOUT = 0.7
MEDIA_EVENT_CHANCE_POOR = 0.4

SOCIAL_POST_BASE = 300
PASSIVE_FAN_BASE = 50
PASSIVE_FAN_TIER_MULTIPLIER: Dict[str, int] = {
    TIER_LOCAL: 1,
    TIER_STATE: 2,
    TIER_NATIONAL: 5,
}

# Daily login rewards: day -> (skill points, energy); days 7 and 14 are bonus tiers
DAILY_REWARDS: Dict[int, Tuple[int, int]] = {
    1: (1, 10), 2: (1, 15), 3: (2, 20), 4: (2, 25), 5: (3, 30), 6: (3, 35),
    7: (5, 50),
    8: (2, 20), 9: (2, 20), 10: (3, 30), 11: (3, 30), 12: (3, 30), 13: (4, 35),
    14: (7, 75),
}
DAILY_REWARD_CYCLE = 14

# Shop effect kinds
EFFECT_ENERGY = "ENERGY"
EFFECT_SKILL_POINTS = "SKILL_POINTS"
EFFECT_MORALE = "MORALE"
EFFECT_INJURY_HEAL = "INJURY_HEAL"
EFFECT_XP_BOOST = "XP_BOOST"
EFFECT_ATTRIBUTE_BOOST = "ATTRIBUTE_BOOST"
EFFECT_COSMETIC = "COSMETIC"
EFFECT_KINDS = [
    EFFECT_ENERGY, EFFECT_SKILL_POINTS, EFFECT_MORALE, EFFECT_INJURY_HEAL,
    EFFECT_XP_BOOST, EFFECT_ATTRIBUTE_BOOST, EFFECT_COSMETIC,
]

SHOP_ITEMS: List[Dict] = [
    {"id": "energy_drink", "name": "Energy Drink", "category": "Recovery", "price": 50, "effect": EFFECT_ENERGY, "value": 30, "one_time": False},
    {"id": "ice_bath", "name": "Ice Bath Session", "category": "Recovery", "price": 120, "effect": EFFECT_ENERGY, "value": 100, "one_time": False},
    {"id": "physio", "name": "Physio Treatment", "category": "Recovery", "price": 300, "effect": EFFECT_INJURY_HEAL, "value": 1, "one_time": False},
    {"id": "surgeon", "name": "Specialist Surgeon", "category": "Recovery", "price": 1500, "effect": EFFECT_INJURY_HEAL, "value": 10, "one_time": False},
    {"id": "skills_coach", "name": "Skills Coach Session", "category": "Training", "price": 400, "effect": EFFECT_SKILL_POINTS, "value": 2, "one_time": False},
    {"id": "team_dinner", "name": "Team Dinner", "category": "Lifestyle", "price": 150, "effect": EFFECT_MORALE, "value": 15, "one_time": False},
    {"id": "film_study", "name": "Film Study Pack", "category": "Training", "price": 250, "effect": EFFECT_XP_BOOST, "value": 50, "one_time": False},
    {"id": "kicking_boots", "name": "Pro Kicking Boots", "category": "Equipment", "price": 800, "effect": EFFECT_ATTRIBUTE_BOOST, "value": 2, "attribute": "kicking", "one_time": True},
    {"id": "gps_vest", "name": "GPS Training Vest", "category": "Equipment", "price": 900, "effect": EFFECT_ATTRIBUTE_BOOST, "value": 2, "attribute": "stamina", "one_time": True},
    {"id": "sprint_spikes", "name": "Sprint Spikes", "category": "Equipment", "price": 900, "effect": EFFECT_ATTRIBUTE_BOOST, "value": 2, "attribute": "speed", "one_time": True},
    {"id": "gold_boots", "name": "Gold Boots", "category": "Cosmetic", "price": 2000, "effect": EFFECT_COSMETIC, "value": 0, "one_time": True},
    {"id": "headband", "name": "Retro Headband", "category": "Cosmetic", "price": 200, "effect": EFFECT_COSMETIC, "value": 0, "one_time": True},
]

# ---------------------------------------------------------------------------
# Team chemistry
# ---------------------------------------------------------------------------
CHEMISTRY_START = 50
CHEMISTRY_MAX = 100
# Strength points added to the user's side at 0 / 100 chemistry (linear, 0 at 50)
CHEMISTRY_MAX_STRENGTH = 4.0
CHEMISTRY_MATCH = 1
CHEMISTRY_WIN = 3
CHEMISTRY_LOSS = -2
CHEMISTRY_BIG_GAME = 2
# (minimum chemistry, form label) checked top-down
CHEMISTRY_FORMS: List[Tuple[int, str]] = [
    (80, "HOT"),
    (60, "WARM"),
    (40, "NEUTRAL"),
    (20, "COLD"),
    (0, "FREEZING"),
]

# ---------------------------------------------------------------------------
# Career events
# ---------------------------------------------------------------------------
CAREER_EVENT_CHANCE = 0.20
MAX_PENDING_CAREER_EVENTS = 3

RARITY_COMMON = "COMMON"
RARITY_UNCOMMON = "UNCOMMON"
RARITY_RARE = "RARE"
RARITY_EPIC = "EPIC"
RARITY_LEGENDARY = "LEGENDARY"
RARITY_WEIGHTS: Dict[str, int] = {
    RARITY_COMMON: 50,
    RARITY_UNCOMMON: 25,
    RARITY_RARE: 15,
    RARITY_EPIC: 7,
    RARITY_LEGENDARY: 3,
}

TRIGGER_WIN_STREAK_3 = "WIN_STREAK_3"
TRIGGER_WIN_STREAK_5 = "WIN_STREAK_5"
TRIGGER_LOW_MORALE = "LOW_MORALE"
TRIGGER_LOW_ENERGY = "LOW_ENERGY"
TRIGGER_HIGH_MEDIA_REP = "HIGH_MEDIA_REP"
TRIGGER_GOOD_FORM = "GOOD_FORM"
TRIGGER_AFTER_LOSS = "AFTER_LOSS"
TRIGGER_HIGH_LEVEL = "HIGH_LEVEL"
TRIGGER_INJURED = "INJURED"
TRIGGER_FIRST_SEASON = "FIRST_SEASON"

# Effect keys understood by simulation.events.apply_event_effects
EVENT_EFFECT_KEYS = (
    "attributes", "morale", "energy", "xp", "skill_points", "wallet",
    "reputation", "fan_followers", "injury_weeks", "salary_bonus_pct",
)

# Templates without choices resolve on the spot; the rest wait for the player.
CAREER_EVENT_TEMPLATES: List[Dict] = [
    {
        "id": "junior_clinic", "title": "Junior Clinic",
        "description": "The club asks you to run a clinic for the under-12s.",
        "rarity": RARITY_COMMON, "trigger": None,
        "effects": {"morale": 5, "fan_followers": 150, "reputation": 1},
        "result": "The kids loved it.",
    },
    {
        "id": "extra_session", "title": "Extra Session",
        "description": "The skills coach offers an optional session after training.",
        "rarity": RARITY_COMMON, "trigger": None,
        "choices": [
            {"id": "attend", "label": "Stay back", "effects": {"energy": -20, "xp": 40}, "result": "Sharper by the end of it."},
            {"id": "rest", "label": "Head home", "effects": {"energy": 10}, "result": "Fresh legs for the weekend."},
        ],
    },
    {
        "id": "sponsor_approach", "title": "Boot Sponsor",
        "description": "A boot company wants you in their next campaign.",
        "rarity": RARITY_UNCOMMON, "trigger": TRIGGER_HIGH_MEDIA_REP,
        "choices": [
            {"id": "sign", "label": "Sign the deal", "effects": {"wallet": 800, "reputation": 3}, "result": "Your face is on a billboard."},
            {"id": "decline", "label": "Stay focused", "effects": {"morale": 3}, "result": "Football first."},
        ],
    },
    {
        "id": "hot_streak_buzz", "title": "Streak Buzz",
        "description": "The team is flying and the whole town has noticed.",
        "rarity": RARITY_UNCOMMON, "trigger": TRIGGER_WIN_STREAK_3,
        "effects": {"morale": 8, "fan_followers": 400},
        "result": "Winning is contagious.",
    },
    {
        "id": "premiership_favourites", "title": "Premiership Favourites",
        "description": "The bookies have installed your side as flag favourites.",
        "rarity": RARITY_RARE, "trigger": TRIGGER_WIN_STREAK_5,
        "choices": [
            {"id": "embrace", "label": "Embrace it", "effects": {"morale": 5, "reputation": 4}, "result": "You back the group in."},
            {"id": "deflect", "label": "One week at a time", "effects": {"xp": 60}, "result": "Heads down, keep working."},
        ],
    },
    {
        "id": "sports_psych", "title": "Sports Psychologist",
        "description": "The welfare manager suggests a session with the club psych.",
        "rarity": RARITY_COMMON, "trigger": TRIGGER_LOW_MORALE,
        "choices": [
            {"id": "book", "label": "Book it in", "effects": {"morale": 20, "wallet": -100}, "result": "A weight off your shoulders."},
            {"id": "skip", "label": "Tough it out", "effects": {"morale": -5}, "result": "It lingers."},
        ],
    },
    {
        "id": "overtraining", "title": "Running on Empty",
        "description": "The high-performance staff flag your training load.",
        "rarity": RARITY_UNCOMMON, "trigger": TRIGGER_LOW_ENERGY,
        "choices": [
            {"id": "rest", "label": "Take a light week", "effects": {"energy": 30}, "result": "Legs are coming back."},
            {"id": "push", "label": "Push through", "effects": {"xp": 50, "injury_weeks": 1}, "result": "Something tweaked."},
        ],
    },
    {
        "id": "coach_spray", "title": "Coach's Spray",
        "description": "The coach singles you out in the post-match review.",
        "rarity": RARITY_COMMON, "trigger": TRIGGER_AFTER_LOSS,
        "choices": [
            {"id": "own_it", "label": "Own it", "effects": {"morale": -3, "xp": 30}, "result": "Respect earned in the rooms."},
            {"id": "push_back", "label": "Push back", "effects": {"morale": 5, "reputation": -3}, "result": "The story leaks."},
        ],
    },
    {
        "id": "leadership_group", "title": "Leadership Group",
        "description": "Your teammates vote you into the leadership group.",
        "rarity": RARITY_EPIC, "trigger": TRIGGER_HIGH_LEVEL,
        "effects": {"morale": 10, "reputation": 5, "salary_bonus_pct": 10},
        "result": "A bump in pay and standing.",
    },
    {
        "id": "miracle_physio", "title": "Miracle Physio",
        "description": "A visiting physio thinks they can fast-track your recovery.",
        "rarity": RARITY_RARE, "trigger": TRIGGER_INJURED,
        "choices": [
            {"id": "try", "label": "Give it a go", "effects": {"injury_weeks": 0, "wallet": -200}, "result": "Cleared early."},
            {"id": "wait", "label": "Stick with the club doctors", "effects": {"morale": 2}, "result": "Patience."},
        ],
    },
    {
        "id": "homesick", "title": "Homesick",
        "description": "First year away from home is harder than expected.",
        "rarity": RARITY_COMMON, "trigger": TRIGGER_FIRST_SEASON,
        "choices": [
            {"id": "visit", "label": "Fly home for the weekend", "effects": {"morale": 10, "wallet": -150, "energy": -10}, "result": "Recharged."},
            {"id": "stay", "label": "Lean on your housemates", "effects": {"morale": 4}, "result": "The group gets tighter."},
        ],
    },
    {
        "id": "good_form_feature", "title": "Magazine Feature",
        "description": "A footy magazine runs a feature on your form.",
        "rarity": RARITY_UNCOMMON, "trigger": TRIGGER_GOOD_FORM,
        "effects": {"fan_followers": 800, "reputation": 2},
        "result": "Cover star.",
    },
    {
        "id": "legend_mentor", "title": "Club Legend",
        "description": "A club great offers to mentor you one-on-one.",
        "rarity": RARITY_LEGENDARY, "trigger": None,
        "effects": {"skill_points": 3, "attributes": {"kicking": 1, "marking": 1}},
        "result": "Priceless lessons.",
    },
]

# ---------------------------------------------------------------------------
# Achievements
# ---------------------------------------------------------------------------
# check: "career" compares a career stat, "match" the last match line,
# "attribute" one attribute, or a named rule handled in simulation.achievements.
ACHIEVEMENTS: List[Dict] = [
    {"id": "first_game", "name": "First Bounce", "rarity": RARITY_COMMON, "check": "career", "stat": "matches", "target": 1},
    {"id": "veteran_50", "name": "Half Century", "rarity": RARITY_COMMON, "check": "career", "stat": "matches", "target": 50},
    {"id": "veteran_100", "name": "Centurion", "rarity": RARITY_RARE, "check": "career", "stat": "matches", "target": 100},
    {"id": "veteran_200", "name": "Legend Status", "rarity": RARITY_EPIC, "check": "career", "stat": "matches", "target": 200},
    {"id": "veteran_300", "name": "Immortal", "rarity": RARITY_LEGENDARY, "check": "career", "stat": "matches", "target": 300},
    {"id": "first_goal", "name": "First Major", "rarity": RARITY_COMMON, "check": "career", "stat": "goals", "target": 1},
    {"id": "goals_50", "name": "Sharp Shooter", "rarity": RARITY_COMMON, "check": "career", "stat": "goals", "target": 50},
    {"id": "goals_100", "name": "Century of Goals", "rarity": RARITY_RARE, "check": "career", "stat": "goals", "target": 100},
    {"id": "goals_300", "name": "Goal Machine", "rarity": RARITY_EPIC, "check": "career", "stat": "goals", "target": 300},
    {"id": "goals_500", "name": "Coleman Legend", "rarity": RARITY_LEGENDARY, "check": "career", "stat": "goals", "target": 500},
    {"id": "disposals_1000", "name": "Ball Winner", "rarity": RARITY_COMMON, "check": "career", "stat": "disposals", "target": 1000},
    {"id": "disposals_5000", "name": "Midfield Master", "rarity": RARITY_EPIC, "check": "career", "stat": "disposals", "target": 5000},
    {"id": "tackles_500", "name": "Enforcer", "rarity": RARITY_RARE, "check": "career", "stat": "tackles", "target": 500},
    {"id": "brownlow_50", "name": "Brownlow Contender", "rarity": RARITY_EPIC, "check": "career", "stat": "votes", "target": 50},
    {"id": "grand_final_hero", "name": "Big Game Player", "rarity": RARITY_LEGENDARY, "check": "career", "stat": "premierships", "target": 1},
    {"id": "dynasty", "name": "Dynasty", "rarity": RARITY_LEGENDARY, "check": "career", "stat": "premierships", "target": 3},
    {"id": "bag_5", "name": "Five Star", "rarity": RARITY_RARE, "check": "match", "stat": "goals", "target": 5},
    {"id": "bag_10", "name": "Perfect 10", "rarity": RARITY_LEGENDARY, "check": "match", "stat": "goals", "target": 10},
    {"id": "disposal_king", "name": "Ball Magnet", "rarity": RARITY_RARE, "check": "match", "stat": "disposals", "target": 30},
    {"id": "disposal_40", "name": "Possession Beast", "rarity": RARITY_EPIC, "check": "match", "stat": "disposals", "target": 40},
    {"id": "tackle_machine", "name": "Tackle Machine", "rarity": RARITY_RARE, "check": "match", "stat": "tackles", "target": 10},
    {"id": "best_on_ground", "name": "Best on Ground", "rarity": RARITY_RARE, "check": "match", "stat": "votes", "target": 3},
    {"id": "speed_demon", "name": "Lightning Fast", "rarity": RARITY_RARE, "check": "attribute", "stat": "speed", "target": 90},
    {"id": "boot_perfect", "name": "Golden Boot", "rarity": RARITY_RARE, "check": "attribute", "stat": "kicking", "target": 90},
    {"id": "marking_king", "name": "Specky King", "rarity": RARITY_RARE, "check": "attribute", "stat": "marking", "target": 90},
    {"id": "maxed_attribute", "name": "Elite Skill", "rarity": RARITY_EPIC, "check": "max_attribute", "target": 99},
    {"id": "all_80", "name": "All-Rounder", "rarity": RARITY_LEGENDARY, "check": "min_attribute", "target": 80},
    {"id": "potential_unlocked", "name": "Peak Performance", "rarity": RARITY_RARE, "check": "at_potential"},
    {"id": "gym_rat", "name": "Dedicated Trainer", "rarity": RARITY_COMMON, "check": "training_sessions", "target": 50},
    {"id": "win_streak_5", "name": "On a Roll", "rarity": RARITY_RARE, "check": "win_streak", "target": 5},
    {"id": "win_streak_10", "name": "Unstoppable", "rarity": RARITY_LEGENDARY, "check": "win_streak", "target": 10},
    {"id": "big_money", "name": "Paid Player", "rarity": RARITY_RARE, "check": "salary", "target": 1000},
    {"id": "journeyman", "name": "Journeyman", "rarity": RARITY_COMMON, "check": "clubs", "target": 3},
    {"id": "ruck_dominance", "name": "Big Man", "rarity": RARITY_RARE, "check": "ruck_matches", "target": 50},
]

# ---------------------------------------------------------------------------
# Season awards
# ---------------------------------------------------------------------------
AWARD_BROWNLOW = "Brownlow Medal"
AWARD_COLEMAN = "Coleman Medal"
AWARD_CLUB_BF = "Club Best & Fairest"
AWARD_RISING_STAR = "Rising Star"
RISING_STAR_AGE = 21
RISING_STAR_VOTES = 5

# ---------------------------------------------------------------------------
# Name generation
# ---------------------------------------------------------------------------
FIRST_NAMES = [
    "Aaron", "Adam", "Angus", "Archie", "Bailey", "Ben", "Blake", "Beau", "Brodie", "Bryce",
    "Callum", "Cameron", "Charlie", "Cody", "Connor", "Cooper", "Darcy", "Declan", "Dylan", "Ethan",
    "Finn", "Fletcher", "Flynn", "Hamish", "Harrison", "Harry", "Hayden", "Heath", "Hugh", "Isaac",
    "Jack", "Jackson", "Jake", "James", "Jesse", "Jett", "Jordan", "Josh", "Kade", "Kai",
    "Lachlan", "Liam", "Lochie", "Luke", "Marcus", "Max", "Mitchell", "Nathan", "Nick", "Oliver",
    "Oscar", "Patrick", "Reece", "Rhys", "Riley", "Rory", "Ryan", "Sam", "Scott", "Taj",
    "Tate", "Tom", "Toby", "Travis", "Will", "Xavier", "Zac",
]

LAST_NAMES = [
    "Abbott", "Anderson", "Bailey", "Barker", "Bennett", "Bond", "Brennan", "Brown", "Buckley", "Burgess",
    "Cameron", "Campbell", "Carey", "Clarke", "Coleman", "Collins", "Cooper", "Costello", "Daly", "Dawson",
    "Dixon", "Doyle", "Dunn", "Dwyer", "Fitzgerald", "Fletcher", "Fraser", "Gallagher", "Gibson", "Grant",
    "Hall", "Harding", "Harvey", "Hawkins", "Healy", "Hogan", "Hunt", "Jackson", "Johnson", "Kelly",
    "Kennedy", "Lawson", "Lynch", "McCarthy", "McGrath", "McKay", "McLean", "Mitchell", "Murphy", "Nash",
    "O'Brien", "O'Connor", "O'Neill", "Parker", "Pearce", "Power", "Quinn", "Reid", "Riley", "Rioli",
    "Roberts", "Ryan", "Scott", "Sheahan", "Smith", "Stewart", "Sullivan", "Taylor", "Walsh", "Watson",
    "Wilson", "Wright", "Young",
]

COACH_TITLES = ["Coach", "Senior Coach", "Head Coach"]

PROSPECT_BIOS = [
    "Raw talent with an elite motor.",
    "Smooth mover who reads the play early.",
    "Competitive beast at the contest.",
    "Polished kick with a high ceiling.",
    "Late bloomer turning heads at state level.",
    "Explosive athlete still learning the game.",
]
