"""
Local Storage - Load Layer

Pure functions for local file storage operations.
Handles per-record JSON files and the JSON index artifact.
"""

import json
import os
from typing import Any, Dict, List

import polars as pl
from pydantic import BaseModel

from ..coreutils.errors import OutputError
import logging

logger = logging.getLogger(__name__)


def record_path(output_dir: str, record_id: str) -> str:
    return os.path.join(output_dir, f"{record_id}.json")


def save_json(data: Any, filepath: str) -> str:
    """
    Save a JSON-serializable value as pretty-printed UTF-8 text

    Args:
        data: Value to save
        filepath: Path to save file

    Returns:
        str: Path to saved file

    Raises:
        OutputError: On any filesystem failure
    """
    try:
        # Ensure directory exists
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)
    except OSError as e:
        raise OutputError(filepath, str(e)) from e

    return filepath


def write_record(output_dir: str, record_id: str, record: BaseModel) -> str:
    """
    Write one record to <output_dir>/<record_id>.json, replacing any
    existing file

    Returns:
        str: Path to the written file
    """
    filepath = record_path(output_dir, record_id)
    logger.debug(f"Saving record to {filepath}")
    return save_json(record.model_dump(mode="json"), filepath)


def _remove_quietly(path: str):
    """Delete a leftover temp file; a missing file is fine"""
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove temp file {path}: {e}")


class IndexWriter:
    """Accumulates index entries for a run and writes them once at the end

    Nothing touches the index path before flush(); an aborted run leaves
    no index file behind.
    """

    def __init__(self, index_path: str):
        self.index_path = index_path
        self.entries: List[Dict[str, Any]] = []
        self.flushed = False

    def __len__(self) -> int:
        return len(self.entries)

    def append(self, entry: BaseModel):
        if self.flushed:
            raise RuntimeError("index already flushed")
        self.entries.append(entry.model_dump(mode="json"))

    def flush(self) -> str:
        """Write all accumulated entries to the index path as a JSON array"""
        if self.flushed:
            raise RuntimeError("index already flushed")

        tmp_path = f"{self.index_path}.tmp"
        try:
            save_json(self.entries, tmp_path)
            try:
                os.replace(tmp_path, self.index_path)
            except OSError as e:
                raise OutputError(self.index_path, str(e)) from e
        except OutputError:
            _remove_quietly(tmp_path)
            raise

        self.flushed = True
        logger.info(f"Saved {len(self.entries)} index entries to {self.index_path}")
        return self.index_path


def load_index(filepath: str) -> pl.DataFrame:
    """
    Load an index artifact into a DataFrame

    Args:
        filepath: Path to index JSON file

    Returns:
        pl.DataFrame: One row per index entry
    """
    logger.info(f"Loading index from JSON: {filepath}")

    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Index file not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    df = pl.DataFrame(data, strict=False, infer_schema_length=10000)

    logger.info(f"Loaded {df.height} index entries from {filepath}")
    return df


def summarize_index(df: pl.DataFrame) -> pl.DataFrame:
    """Record counts per prefecture, largest first"""
    if df.is_empty() or "prefecture" not in df.columns:
        return pl.DataFrame(
            schema={"prefecture": pl.String, "records": pl.UInt32}
        )

    return (
        df.group_by("prefecture")
        .agg(pl.len().alias("records"))
        .sort(["records", "prefecture"], descending=[True, False], nulls_last=True)
    )
