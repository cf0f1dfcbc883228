# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run normalization over a saved analysis-results JSON file
#   (a list of per-photo records) and preview or write the
#   corrected records.
#
# COMMANDS:
# ---------
# 1. Preview corrections without writing anything:
#    python -m photo_normalizer.cli normalize results.json --dry-run
#
# 2. Correct and write to a new file:
#    python -m photo_normalizer.cli normalize results.json -o fixed.json
#
# 3. Correct in place with a stricter threshold, stations only:
#    python -m photo_normalizer.cli normalize results.json --threshold 0.8 --no-work-type
#
# OPTIONS (normalize):
# --------------------
#   -o / --output               Output file (default: overwrite input)
#   --dry-run                   Print corrections only
#   --threshold T               Agreement ratio 0.0-1.0
#   --no-station                Skip station normalization
#   --no-work-type              Skip work type / variety / detail
#   --no-protect-measurements   Allow records with readings to be corrected
#   -v / --verbose              DEBUG logging
#
#   Defaults come from get_config() (environment / .env).
#
# EXIT CODES:
# -----------
#   0 success, 1 input or configuration error, 2 usage error (argparse)
#
# ==============================================

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import NormalizationOptions, get_config
from .models import AnalysisResult
from .result_normalizer import apply_corrections, normalize_results


logger = logging.getLogger(__name__)


def _threshold(value: str) -> float:
    try:
        threshold = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not 0.0 <= threshold <= 1.0:
        raise argparse.ArgumentTypeError("threshold must be between 0.0 and 1.0")
    return threshold


def build_parser() -> argparse.ArgumentParser:
    config = get_config()

    parser = argparse.ArgumentParser(
        prog="photo-normalizer",
        description="Align station and work type fields across construction photo records.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize = subparsers.add_parser(
        "normalize", help="Normalize an analysis results JSON file"
    )
    normalize.add_argument("input", type=Path, help="Input JSON file (list of records)")
    normalize.add_argument("-o", "--output", type=Path, help="Output file (default: overwrite input)")
    normalize.add_argument("--dry-run", action="store_true", help="Preview without writing")
    normalize.add_argument(
        "--threshold", type=_threshold, default=config.options.threshold,
        help=f"Agreement ratio required to correct (default {config.options.threshold})",
    )
    normalize.add_argument("--no-station", action="store_true", help="Skip station normalization")
    normalize.add_argument("--no-work-type", action="store_true", help="Skip work type normalization")
    normalize.add_argument(
        "--no-protect-measurements", action="store_true",
        help="Also correct records whose remarks/measurements carry readings",
    )
    normalize.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def load_results(path: Path) -> List[AnalysisResult]:
    """
    Read a JSON list of analysis records.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the JSON is not a list of valid records
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of records")
    return [AnalysisResult.from_dict(item) for item in data]


def save_results(path: Path, results: List[AnalysisResult]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump([r.to_dict() for r in results], f, ensure_ascii=False, indent=2)


def run_normalize(args: argparse.Namespace) -> int:
    try:
        results = load_results(args.input)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.debug("Loaded %d records from %s", len(results), args.input)

    config = get_config()
    options = NormalizationOptions(
        normalize_station=config.options.normalize_station and not args.no_station,
        normalize_work_type=config.options.normalize_work_type and not args.no_work_type,
        threshold=args.threshold,
        protect_measurements=config.options.protect_measurements and not args.no_protect_measurements,
    )

    result = normalize_results(results, options)

    for correction in result.corrections:
        print(f"  {correction.file_name} [{correction.field}] "
              f"{correction.original} → {correction.corrected}")

    stats = result.stats
    print(f"Records: {stats.total_records}, corrected: {stats.corrected_records}, "
          f"station: {stats.station_corrections}, work type: {stats.work_type_corrections}, "
          f"protected: {stats.skipped_due_to_measurements}")

    if args.dry_run:
        print("Dry run: no file written")
        return 0

    apply_corrections(results, result.corrections)
    output = args.output or args.input
    try:
        save_results(output, results)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Saved {len(results)} records to {output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = get_config()
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "normalize":
        return run_normalize(args)

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
