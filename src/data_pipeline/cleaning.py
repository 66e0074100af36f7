"""Data cleaning for player ratings exports.

Handles standardization of:
- Position codes (aliases like LWB -> LB, CF -> ST)
- Player names for duplicate detection
- Club names
- Ratings and attributes (clamped to the 0-99 scale)
"""

import logging
import math
from typing import Optional

import pandas as pd

from src.data_pipeline.config import ATTRIBUTE_COLUMNS, MAX_RATING, MIN_RATING
from src.lineup_engine.config import POSITION_CODES

logger = logging.getLogger(__name__)

# Aliases that map to canonical position codes
_POSITION_ALIASES = {
    "G": "GK",
    "GB": "GK",
    "LWB": "LB",
    "RWB": "RB",
    "DM": "CDM",
    "AM": "CAM",
    "LM": "LW",
    "RM": "RW",
    "CF": "ST",
    "FW": "ST",
}


class DataCleaner:
    """Cleans and standardizes player ratings data."""

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------
    @staticmethod
    def normalize_position(pos_str: str) -> Optional[str]:
        """Normalize a position string to one of the ten position codes.

        Examples:
            "st"  -> "ST"
            "LWB" -> "LB"
            "CF"  -> "ST"
            "XY"  -> None
        """
        if pd.isna(pos_str):
            return None

        code = str(pos_str).strip().upper()
        canonical = _POSITION_ALIASES.get(code, code)
        return canonical if canonical in POSITION_CODES else None

    # ------------------------------------------------------------------
    # Club standardization
    # ------------------------------------------------------------------
    @staticmethod
    def standardize_club(club: str) -> Optional[str]:
        """Strip quotes and collapse whitespace; None for blank values."""
        if pd.isna(club):
            return None
        club = " ".join(str(club).strip().strip('"').split())
        return club or None

    # ------------------------------------------------------------------
    # Player name normalization
    # ------------------------------------------------------------------
    @staticmethod
    def normalize_player_name(name: str) -> Optional[str]:
        """Normalize a player name for consistent matching.

        - Strips quotes and extra whitespace
        - Standardizes apostrophes and hyphens
        - Preserves accents (Mbappé stays Mbappé)
        """
        if pd.isna(name):
            return None

        name = str(name).strip().strip('"')
        if name == "":
            return None

        # Standardize apostrophe variants to ASCII straight quote
        name = name.replace("’", "'")   # right single curly '
        name = name.replace("‘", "'")   # left single curly '
        name = name.replace("ʼ", "'")   # modifier letter apostrophe ʼ

        # Standardize dash variants to ASCII hyphen-minus
        name = name.replace("–", "-")   # en dash –
        name = name.replace("—", "-")   # em dash —

        # Collapse whitespace
        name = " ".join(name.split())

        return name

    # ------------------------------------------------------------------
    # Rating helpers
    # ------------------------------------------------------------------
    @staticmethod
    def clamp_rating(value) -> Optional[int]:
        """Round and clamp a rating to the 0-99 scale; None when missing."""
        if value is None or pd.isna(value):
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        if math.isnan(number):
            return None
        return int(min(MAX_RATING, max(MIN_RATING, math.floor(number + 0.5))))

    def _clamp_column(self, series: pd.Series) -> pd.Series:
        """Clamp a numeric column, keeping ints and None (object dtype)."""
        return pd.Series(
            [self.clamp_rating(v) for v in series], index=series.index, dtype=object
        )

    # ------------------------------------------------------------------
    # DataFrame-level cleaning
    # ------------------------------------------------------------------
    def clean_ratings(self, df: pd.DataFrame) -> pd.DataFrame:
        """Clean the ratings DataFrame.

        Adds columns:
            Position_Code - canonical position code (None if unrecognized)
            Player_Norm   - normalized player name
            Club_Clean    - standardized club name
            Rating_Clean  - rating clamped to 0-99
            <attr>        - lower-case attribute columns clamped to 0-99
        """
        out = df.copy()
        out["Position_Code"] = out["Position"].apply(self.normalize_position)
        out["Player_Norm"] = out["Name"].apply(self.normalize_player_name)
        out["Club_Clean"] = out["Club"].apply(self.standardize_club)
        out["Rating_Clean"] = self._clamp_column(out["Rating"])
        for col, attr in ATTRIBUTE_COLUMNS.items():
            out[attr] = self._clamp_column(out[col])

        unknown = out["Position_Code"].isna() & out["Position"].notna()
        if unknown.any():
            logger.warning(
                "Unrecognized positions: %s",
                sorted(out.loc[unknown, "Position"].astype(str).unique()),
            )

        logger.info("Cleaned ratings: %d rows", len(out))
        return out

    def clean_all(
        self, data: dict[str, pd.DataFrame]
    ) -> dict[str, pd.DataFrame]:
        """Clean every DataFrame returned by PlayerRatingsIngester.read_all().

        Expects key: ratings.
        """
        return {"ratings": self.clean_ratings(data["ratings"])}
