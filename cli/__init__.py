"""Command-line interface for DataVision.

Runs the ingestion pipeline on a local file and prints the inferred
schema, optionally exporting the dataset to CSV or saving its summary
through the save-dataset function.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from core.pipeline import PipelineOrchestrator
from level3_dataset.exporter import dataset_to_csv
from level3_dataset.samples import list_sample_datasets
from level3_dataset.schema_editor import validate_schema
from level4_charts.recommender import recommend_charts
from level5_persistence.client import PersistenceConfigError, SaveDatasetClient
from level5_persistence.record import build_dataset_record
from settings import ConfigError, load_config
from utils import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_CONFIG,
    EXIT_REJECTED_UPLOAD,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    get_logger,
    setup_logging,
)

from .display import (
    dataset_summary,
    display_dataset,
    display_recommendations,
    display_validation,
    display_warnings,
    print_json,
)

logger = get_logger(__name__)

__all__ = [
    "EXIT_INVALID_CONFIG",
    "EXIT_REJECTED_UPLOAD",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "PipelineOrchestrator",
    "main",
    "parse_args",
    "run_ingest",
]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="datavision",
        description="DataVision - decode, type and chart tabular files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    ingest_parser = subparsers.add_parser("ingest", help="Decode a file and infer its schema")
    ingest_parser.add_argument("file", type=str, help="Path to a .csv, .json, .xlsx or .xls file")
    ingest_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML/JSON pipeline config (optional)",
    )
    ingest_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the dataset summary as JSON",
    )
    ingest_parser.add_argument(
        "--export-csv",
        type=str,
        default=None,
        help="Write the decoded dataset to this CSV path",
    )
    ingest_parser.add_argument(
        "--save",
        action="store_true",
        help="Save the dataset summary through the save-dataset function",
    )
    ingest_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers.add_parser("samples", help="List built-in sample datasets")

    return parser.parse_args(argv)


def run_ingest(args: argparse.Namespace) -> int:
    """Run the pipeline for ``args.file`` and report the result."""
    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"✗ Invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    result = PipelineOrchestrator(config).run(args.file)
    display_warnings(result.warnings)
    if not result.ok:
        print(f"✗ Upload rejected: {result.error}", file=sys.stderr)
        return EXIT_REJECTED_UPLOAD

    dataset = result.dataset
    validation = validate_schema(dataset.columns)

    if args.json:
        summary = dataset_summary(dataset)
        summary["schema_errors"] = validation.errors
        print_json(summary)
    else:
        display_dataset(dataset)
        display_validation(validation)
        display_recommendations(recommend_charts(dataset))

    if args.export_csv:
        Path(args.export_csv).write_text(dataset_to_csv(dataset), encoding="utf-8")
        print(f"✓ Exported CSV to {args.export_csv}")

    if args.save:
        if not validation.is_valid:
            print("✗ Not saving: fix the schema errors first", file=sys.stderr)
            return EXIT_REJECTED_UPLOAD
        client = SaveDatasetClient(config.persistence)
        outcome = client.save(build_dataset_record(dataset))
        if not outcome.success:
            print(f"✗ Save failed: {outcome.message}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR
        print(f"✓ {outcome.message} (id: {outcome.dataset_id})")

    return EXIT_SUCCESS


def run_samples() -> int:
    print("Sample datasets:")
    for key, name in list_sample_datasets().items():
        print(f"  {key:<10} {name}")
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the ``datavision`` command."""
    args = parse_args(argv)
    # keep stdout clean for --json output
    quiet = getattr(args, "json", False) and not getattr(args, "verbose", False)
    setup_logging(verbose=getattr(args, "verbose", False), level=logging.WARNING if quiet else None)

    try:
        if args.command == "samples":
            return run_samples()
        return run_ingest(args)
    except PersistenceConfigError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG
    except KeyboardInterrupt:
        print("\n✗ Interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except OSError as e:
        print(f"✗ I/O error: {e}", file=sys.stderr)
        logger.exception("I/O error while running the CLI")
        return EXIT_RUNTIME_ERROR
