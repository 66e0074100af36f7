# Position code -> category used for power weighting
POSITION_CATEGORIES = {
    "GK": ["GK"],
    "DEF": ["LB", "CB", "RB"],
    "MID": ["CDM", "CM", "CAM"],
    "FWD": ["LW", "ST", "RW"],
}

POSITION_CODES = ("GK", "LB", "CB", "RB", "CDM", "CM", "CAM", "LW", "RW", "ST")

# Category weights for power calculation
CATEGORY_WEIGHTS = {
    "GK": 1.0,
    "DEF": 1.0,
    "MID": 1.0,
    "FWD": 1.2,  # Forwards weighted slightly higher
}

DEFAULT_CATEGORY = "MID"  # Unknown position codes aggregate as midfielders

FULL_SQUAD_SIZE = 11

# Sector groups for team strengths (raw position codes, not categories)
STRENGTH_SECTORS = {
    "defense": ("GK", "LB", "CB", "RB"),
    "midfield": ("CDM", "CM", "CAM"),
    "attack": ("LW", "RW", "ST"),
}

# Attribute = rating * ratio when a player has no explicit value
ATTRIBUTE_FALLBACK_RATIOS = {
    "pace": 0.8,
    "dribbling": 0.7,
    "passing": 0.7,
    "physical": 0.6,
    "defending": 0.6,
}

STRATEGY_SCORE_SCALE = 1.2
MAX_COMPATIBILITY_SCORE = 100

# Recommendation panel policy
MIN_PLAYERS_FOR_RECOMMENDATION = 7
DEFAULT_RECOMMENDATION_COUNT = 3
