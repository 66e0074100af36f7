"""Data transformation for cleaned player ratings.

Turns the cleaned ratings table into the player reference table:
- Drops players with no recognized position or no rating
- Removes duplicate players (same normalized name, keeps highest rating)
- Generates sequential integer player IDs
"""

import logging

import pandas as pd

logger = logging.getLogger(__name__)

# Keys expected in the cleaned data dict passed to transform()
_REQUIRED_KEYS = {"ratings"}


class DataTransformer:
    """Builds the player reference table from cleaned ratings."""

    @staticmethod
    def drop_unusable(df: pd.DataFrame) -> pd.DataFrame:
        """Drop rows with no position code or no rating."""
        unusable = df["Position_Code"].isna() | df["Rating_Clean"].isna()
        if unusable.any():
            logger.warning(
                "Dropping %d players with no position or rating: %s",
                unusable.sum(),
                df.loc[unusable, "Name"].tolist(),
            )
        return df[~unusable].reset_index(drop=True)

    @staticmethod
    def deduplicate(df: pd.DataFrame) -> pd.DataFrame:
        """Keep one row per normalized player name (the highest rated).

        The surviving rows keep their original input order.
        """
        order = df.assign(_row=range(len(df)))
        best = (
            order.sort_values(["Rating_Clean", "_row"], ascending=[False, True])
            .drop_duplicates(subset=["Player_Norm"], keep="first")
            .sort_values("_row")
            .drop(columns="_row")
            .reset_index(drop=True)
        )

        dropped = len(df) - len(best)
        if dropped:
            logger.warning("Removed %d duplicate players", dropped)
        return best

    @staticmethod
    def generate_player_ids(df: pd.DataFrame) -> pd.DataFrame:
        """Assign sequential integer ``player_id`` values starting at 1."""
        out = df.copy()
        out["player_id"] = range(1, len(out) + 1)
        return out

    def transform(self, cleaned: dict[str, pd.DataFrame]) -> pd.DataFrame:
        """Run the full transformation.

        Args:
            cleaned: Output of :meth:`DataCleaner.clean_all`.

        Returns:
            Player table with ``player_id`` plus the cleaned columns.
        """
        missing = _REQUIRED_KEYS - set(cleaned)
        if missing:
            raise ValueError(f"Cleaned data missing keys: {sorted(missing)}")

        players = self.drop_unusable(cleaned["ratings"])
        players = self.deduplicate(players)
        players = self.generate_player_ids(players)

        logger.info("Transformed: %d players", len(players))
        return players
