"""File I/O utilities for request and vendor files."""
import json
import logging
import re
import pandas as pd
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from vendor_matching.score.models import ServiceRequest, VendorMatchData

logger = logging.getLogger(__name__)

# Columns holding lists; tabular files store them comma or semicolon separated
LIST_COLUMNS = ("services", "service_areas", "job_size_range")

# Columns holding nested mappings; tabular files store them as JSON text
JSON_COLUMNS = ("service_specialties", "service_details")

LIST_SEPARATOR = re.compile(r"[;,]")


def read_data_file(file_path: Union[str, Path]) -> pd.DataFrame:
    """
    Read CSV, XLSX or JSON file into DataFrame.

    Tabular cells are read as text so zip codes and ids keep leading zeros.

    Args:
        file_path: Path to CSV, XLSX or JSON file

    Returns:
        DataFrame with file contents

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = file_path.suffix.lower()

    try:
        if suffix == ".csv":
            df = pd.read_csv(file_path, dtype=str, low_memory=False)
        elif suffix == ".xlsx":
            df = pd.read_excel(file_path, engine="openpyxl", dtype=str)
        elif suffix == ".json":
            with open(file_path, "r", encoding="utf-8") as f:
                df = pd.DataFrame(json.load(f))
        else:
            raise ValueError(f"Unsupported file format: {suffix}")

        logger.info(f"Loaded {len(df)} rows from {file_path}")
        return df

    except Exception as e:
        logger.error(f"Error reading {file_path}: {e}")
        raise


def split_list_value(value: Any) -> Any:
    """Split a comma/semicolon separated cell into a list; lists pass through."""
    if isinstance(value, str):
        return [part.strip() for part in LIST_SEPARATOR.split(value) if part.strip()]
    return value


def parse_json_value(value: Any) -> Any:
    """Decode a JSON text cell; empty text becomes None."""
    if isinstance(value, str):
        value = value.strip()
        return json.loads(value) if value else None
    return value


def frame_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """
    Convert a DataFrame to record dicts ready for model validation.

    Missing cells become None, list columns are split and JSON columns
    decoded.
    """
    records = []
    for record in df.to_dict(orient="records"):
        cleaned = {}
        for key, value in record.items():
            if not isinstance(value, (list, dict)) and pd.isna(value):
                value = None
            elif key in LIST_COLUMNS:
                value = split_list_value(value)
            elif key in JSON_COLUMNS:
                value = parse_json_value(value)
            cleaned[key] = value
        records.append(cleaned)
    return records


def load_requests(file_path: Union[str, Path]) -> List[ServiceRequest]:
    """Load service requests from a file."""
    return [ServiceRequest.model_validate(r) for r in frame_to_records(read_data_file(file_path))]


def load_vendors(file_path: Union[str, Path]) -> List[VendorMatchData]:
    """Load vendors (with any statistics columns present) from a file."""
    return [VendorMatchData.model_validate(r) for r in frame_to_records(read_data_file(file_path))]


def write_preview_csv(df: pd.DataFrame, output_path: Union[str, Path], max_rows: Optional[int] = 1000):
    """
    Write a preview CSV with first N rows.

    Args:
        df: DataFrame to write
        output_path: Output file path
        max_rows: Maximum number of rows to write, None for all
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    preview_df = df if max_rows is None else df.head(max_rows)
    preview_df.to_csv(output_path, index=False)
    logger.info(f"Wrote preview CSV with {len(preview_df)} rows to {output_path}")
