"""Position code lookups shared by the scoring modules."""

from typing import Dict, Optional

from src.lineup_engine.config import DEFAULT_CATEGORY, POSITION_CATEGORIES, STRENGTH_SECTORS

_CATEGORY_BY_CODE: Dict[str, str] = {
    code: category
    for category, codes in POSITION_CATEGORIES.items()
    for code in codes
}

_SECTOR_BY_CODE: Dict[str, str] = {
    code: sector
    for sector, codes in STRENGTH_SECTORS.items()
    for code in codes
}


def get_position_category(position: str) -> Optional[str]:
    """Category (GK/DEF/MID/FWD) for a position code, None if unknown."""
    return _CATEGORY_BY_CODE.get(position)


def get_weighting_category(position: str) -> str:
    """Category used for strength weighting; unknown codes count as MID."""
    return _CATEGORY_BY_CODE.get(position, DEFAULT_CATEGORY)


def get_strength_sector(position: str) -> Optional[str]:
    """Strength sector (defense/midfield/attack) for a raw position code."""
    return _SECTOR_BY_CODE.get(position)
