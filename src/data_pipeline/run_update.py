"""Run the complete player ratings data pipeline.

Usage:
    python -m src.data_pipeline.run_update [squad] [data_dir]

Examples:
    python -m src.data_pipeline.run_update france
    python -m src.data_pipeline.run_update france /path/to/csvs
"""

import json
import logging
import math
import sys
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from src.data_pipeline.cleaning import DataCleaner
from src.data_pipeline.config import (
    ATTRIBUTE_COLUMNS,
    DEFAULT_SQUAD,
    IMAGE_COLUMN,
    LATEST_PLAYERS_FILE,
    OUTPUT_FORMAT_VERSION,
    PLAYERS_OUTPUT_PATTERN,
    PROCESSED_DATA_DIR,
    RAW_DATA_DIR,
)
from src.data_pipeline.ingestion import PlayerRatingsIngester
from src.data_pipeline.transformation import DataTransformer
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _safe(val, default=None):
    """Return *default* for None, pd.NA and NaN; otherwise *val* unchanged."""
    if val is None or val is pd.NA:
        return default
    if isinstance(val, float) and math.isnan(val):
        return default
    return val


def _safe_int(val):
    """Integer attribute value, or None when the export left it blank."""
    val = _safe(val)
    return None if val is None else int(val)


def _player_to_dict(row: pd.Series) -> dict:
    """One player table row as the dict shape PlayerStore.from_json reads."""
    return {
        "player_id": int(row["player_id"]),
        "name": row["Player_Norm"],
        "position": row["Position_Code"],
        "club": _safe(row.get("Club_Clean"), ""),
        "rating": int(row["Rating_Clean"]),
        "image_url": _safe(row.get(IMAGE_COLUMN), ""),
        **{attr: _safe_int(row.get(attr)) for attr in ATTRIBUTE_COLUMNS.values()},
    }


def _write_output(players: list[dict], squad: str, output_dir: Path) -> Path:
    """Write ``players_{squad}.json`` and point the latest symlink at it."""
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / PLAYERS_OUTPUT_PATTERN.format(squad=squad)

    document = {
        "metadata": {
            "version": OUTPUT_FORMAT_VERSION,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "squad": squad,
            "total_players": len(players),
        },
        "players": players,
    }
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)

    latest = output_dir / LATEST_PLAYERS_FILE
    if latest.is_symlink() or latest.exists():
        latest.unlink()
    latest.symlink_to(output_file.name)

    return output_file


def _log_summary(players_df: pd.DataFrame, output_file: Path) -> None:
    by_position = players_df["Position_Code"].value_counts().sort_index()
    logger.info("Pipeline complete! Output: %s", output_file)
    logger.info("  Total players: %d", len(players_df))
    logger.info(
        "  By position: %s",
        ", ".join(f"{pos}={count}" for pos, count in by_position.items()),
    )
    if len(players_df):
        logger.info("  Average rating: %.1f", players_df["Rating_Clean"].astype(float).mean())


def run_pipeline(
    squad: str = DEFAULT_SQUAD,
    data_dir: Path | None = None,
    output_dir: Path | None = None,
) -> Path:
    """Run the complete player ratings pipeline.

    Args:
        squad: Squad name used in the input and output file names.
        data_dir: Directory containing ``{squad}_player_ratings.csv``.
            Defaults to ``data/raw/``.
        output_dir: Where the players JSON is written.
            Defaults to ``data/processed/``.

    Returns:
        Path to the generated JSON file.

    Raises:
        FileNotFoundError: If *data_dir* is not a directory.
        IngestionError: If the ratings export cannot be read.
    """
    data_dir = Path(data_dir) if data_dir is not None else RAW_DATA_DIR
    output_dir = Path(output_dir) if output_dir is not None else PROCESSED_DATA_DIR

    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    logger.info("Starting pipeline for squad %s (data: %s)", squad, data_dir)

    logger.info("Step 1/4: Reading ratings export...")
    raw = PlayerRatingsIngester(data_dir, squad).read_all()

    logger.info("Step 2/4: Cleaning %d rows...", len(raw["ratings"]))
    cleaned = DataCleaner().clean_all(raw)

    logger.info("Step 3/4: Building player table...")
    players_df = DataTransformer().transform(cleaned)

    logger.info("Step 4/4: Writing JSON output...")
    players = [_player_to_dict(row) for _, row in players_df.iterrows()]
    output_file = _write_output(players, squad, output_dir)

    _log_summary(players_df, output_file)
    return output_file


if __name__ == "__main__":
    setup_logging()

    squad = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SQUAD
    data_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        output = run_pipeline(squad, data_dir)
        print(f"Players written to {output}")
    except Exception:
        logger.exception("Player data update failed")
        sys.exit(1)
