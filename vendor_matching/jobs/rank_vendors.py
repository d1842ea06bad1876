"""Batch vendor ranking job."""
import argparse
import json
import logging
import pandas as pd
from datetime import datetime, timezone
from pathlib import Path
from tqdm import tqdm

from vendor_matching.config import settings
from vendor_matching.score.context import create_matching_context
from vendor_matching.score.scorer import calculate_match_scores, results_to_frame
from vendor_matching.utils.io import load_requests, load_vendors, write_preview_csv

logger = logging.getLogger(__name__)


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName
        }
        if hasattr(record, "duration"):
            log_entry["duration_seconds"] = record.duration
        return json.dumps(log_entry)


def setup_logging(log_dir: Path = None):
    """Configure root logger: JSON lines to file, plain text to console."""
    log_dir = Path(log_dir or settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_dir / "rank_vendors.log")
    file_handler.setFormatter(JSONFormatter())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def rank_vendors(requests, vendors, top: int = None) -> pd.DataFrame:
    """
    Rank the vendor pool for every request.

    Inactive vendors are skipped. Each request's rows are prefixed with its
    request id and limited to the top N when given.

    Returns:
        Combined ranking table
    """
    eligible = [v for v in vendors if v.status == "active"]
    logger.info(f"{len(eligible)} of {len(vendors)} vendors are active")

    frames = []
    for request in tqdm(requests, desc="Ranking vendors"):
        context = create_matching_context(request)
        ranked = calculate_match_scores(eligible, context)
        frame = results_to_frame(ranked)
        if top is not None:
            frame = frame.head(top)
        frame.insert(0, "request_id", request.id)
        frames.append(frame)

    if not frames:
        return pd.DataFrame()
    return pd.concat(frames, ignore_index=True)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Rank vendors for service requests")
    parser.add_argument("--requests", required=True, type=Path, help="Requests file (JSON, CSV or XLSX)")
    parser.add_argument("--vendors", required=True, type=Path, help="Vendors file (JSON, CSV or XLSX)")
    parser.add_argument("--out", type=Path, default=None, help="Output CSV path")
    parser.add_argument("--top", type=int, default=None, help="Keep only the top N vendors per request")
    return parser.parse_args(argv)


def main(argv=None) -> Path:
    """Main entry point for batch ranking."""
    args = parse_args(argv)
    setup_logging()

    start_time = datetime.now()
    logger.info("Starting vendor ranking job...")

    try:
        requests = load_requests(args.requests)
        vendors = load_vendors(args.vendors)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load input: {e}")
        raise

    if not requests:
        logger.warning("No requests found to rank")

    result_df = rank_vendors(requests, vendors, top=args.top)

    output_path = args.out
    if output_path is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M")
        output_path = settings.out_dir / f"vendor_rankings_{timestamp}.csv"
    write_preview_csv(result_df, output_path, max_rows=None)

    total_duration = (datetime.now() - start_time).total_seconds()
    logger.info(
        f"Ranking complete: {len(requests)} requests, {len(result_df)} rows in {total_duration:.2f} seconds",
        extra={"duration": total_duration}
    )
    return output_path


if __name__ == "__main__":
    main()
