"""
Local Storage - Load Layer

Pure functions for local file storage operations.
Handles the raw JSON body and the Parquet agency table.
"""

import polars as pl
import os
from datetime import date
from typing import Any, Dict, List
import logging

logger = logging.getLogger(__name__)

AGENCY_SCHEMA = {"agency": pl.String}


def _ensure_parent(filepath: str):
    parent = os.path.dirname(filepath)
    if parent:
        os.makedirs(parent, exist_ok=True)


def save_text(text: str, filepath: str) -> str:
    """
    Save raw text verbatim

    Args:
        text: Text to save
        filepath: Path to save file

    Returns:
        str: Path to saved file
    """
    logger.info(f"Saving raw text to: {filepath}")
    _ensure_parent(filepath)

    with open(filepath, "w", encoding="utf-8", newline="") as f:
        f.write(text)

    logger.info(f"Saved {len(text)} characters to {filepath}")
    return filepath


def save_parquet(df: pl.DataFrame, filepath: str) -> str:
    """
    Save DataFrame to Parquet file

    Args:
        df: DataFrame to save
        filepath: Path to save file

    Returns:
        str: Path to saved file
    """
    logger.info(f"Saving DataFrame to Parquet: {filepath}")
    _ensure_parent(filepath)

    df.write_parquet(filepath)

    logger.info(f"Saved {df.height} records to {filepath}")
    return filepath


def agencies_to_frame(agencies: List[Any]) -> pl.DataFrame:
    """
    Build a single-column agency table

    Non-string scalars are stored as their string form; None stays null.
    Row order follows the input.
    """
    values = [None if agency is None else str(agency) for agency in agencies]
    return pl.DataFrame({"agency": values}, schema=AGENCY_SCHEMA)


def save_agency_data(
    raw_text: str, agencies: List[Any], output_dir: str = "output"
) -> Dict[str, str]:
    """
    Save the raw programs body and the extracted agencies

    Args:
        raw_text: Raw response body
        agencies: Extracted agency values
        output_dir: Output directory

    Returns:
        Dict[str, str]: Paths keyed "raw" and "agencies"
    """
    today = date.today().strftime("%Y-%m-%d")

    raw_path = save_text(
        raw_text, os.path.join(output_dir, f"raw_programs_{today}.json")
    )
    agencies_path = save_parquet(
        agencies_to_frame(agencies),
        os.path.join(output_dir, f"agencies_{today}.parquet"),
    )

    return {"raw": raw_path, "agencies": agencies_path}
