"""CSV ingestion for player ratings exports.

Handles the quirks of spreadsheet exports:
- Quoted string values with stray whitespace
- Numbers exported as quoted text, with decimal commas (e.g., "88,5")
- Empty placeholder rows
- Missing optional attribute columns
"""

import logging
from pathlib import Path

import pandas as pd

from src.data_pipeline.config import (
    ATTRIBUTE_COLUMNS,
    IMAGE_COLUMN,
    RATINGS_FILE_PATTERN,
    REQUIRED_COLUMNS,
)

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when CSV ingestion fails."""


def _parse_numeric(value):
    """Parse a numeric string that may use a decimal comma (e.g., '88,5' -> 88.5)."""
    if pd.isna(value):
        return value
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip().strip('"').replace(",", ".")
    if s == "" or s.isspace():
        return float("nan")
    try:
        return float(s)
    except ValueError:
        return float("nan")


class PlayerRatingsIngester:
    """Reads a squad's player ratings CSV export.

    The returned DataFrame has:
    - All required columns plus every attribute column (NaN when absent)
    - Numeric columns parsed as floats
    - Rows without a player name removed
    """

    def __init__(self, data_dir: Path, squad: str):
        self.data_dir = Path(data_dir)
        self.squad = squad

    def _resolve_path(self) -> Path:
        """Build the ratings file path, raising if missing."""
        filepath = self.data_dir / RATINGS_FILE_PATTERN.format(squad=self.squad)
        if not filepath.exists():
            raise FileNotFoundError(
                f"Expected file not found: {filepath}"
            )
        return filepath

    def read_ratings(self) -> pd.DataFrame:
        """Read the ratings file.

        Returns DataFrame with columns:
            Name, Position, Club, Rating, Pace, Dribbling, Passing,
            Physical, Defending, Image URL
        """
        filepath = self._resolve_path()
        logger.info("Reading player ratings: %s", filepath.name)

        df = pd.read_csv(filepath, quotechar='"', dtype=str, skipinitialspace=True)
        df.columns = [str(c).strip().strip('"') for c in df.columns]

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(
                f"Ratings file {filepath.name} is missing columns: {missing}"
            )

        for col in ATTRIBUTE_COLUMNS:
            if col not in df.columns:
                df[col] = float("nan")
        if IMAGE_COLUMN not in df.columns:
            df[IMAGE_COLUMN] = None

        df = self._clean_ratings_df(df, numeric_cols=["Rating", *ATTRIBUTE_COLUMNS])
        logger.info("Loaded %d player ratings", len(df))
        return df

    def _clean_ratings_df(
        self, df: pd.DataFrame, numeric_cols: list[str]
    ) -> pd.DataFrame:
        """Common cleanup for the ratings DataFrame.

        - Strips whitespace/quotes from string columns
        - Parses comma-formatted numbers
        - Drops rows with no player name
        """
        numeric = set(numeric_cols)
        for col in df.columns:
            if col in numeric:
                continue
            df[col] = df[col].where(df[col].isna(), df[col].astype(str).str.strip('"').str.strip())

        df = df[df["Name"].notna() & (df["Name"] != "")]
        df = df.reset_index(drop=True)

        for col in numeric_cols:
            df[col] = df[col].apply(_parse_numeric).astype(float)

        return df

    def read_all(self) -> dict[str, pd.DataFrame]:
        """Read every input file for the squad.

        Returns:
            dict with key: 'ratings'

        Raises:
            IngestionError: if any file cannot be read.
        """
        try:
            return {"ratings": self.read_ratings()}
        except Exception as e:
            raise IngestionError(f"Failed to read CSV files: {e}") from e
