#!/usr/bin/env python
"""
Dataset inspection script.

Loads a recommendation dataset through the dashboard core and reports:
1. How each header was mapped (canonical or extension column)
2. Accepted and rejected row counts
3. Dataset summary statistics
4. Genre and rating distributions over the whole dataset

Usage:
    # Inspect the default dataset
    python scripts/inspect_dataset.py

    # Inspect another file or URL
    python scripts/inspect_dataset.py --source https://example.com/final_model_output.csv

    # Also list the profile of every user
    python scripts/inspect_dataset.py --profiles
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_dashboard.api.config import get_dataset_source, get_dataset_timeout
from movie_dashboard.core.distributions import genre_distribution, rating_distribution
from movie_dashboard.core.exceptions import DashboardError
from movie_dashboard.core.ingestion.loader import decode_dataset
from movie_dashboard.core.ingestion.parser import parse_records
from movie_dashboard.core.profiles import build_user_profiles
from movie_dashboard.core.store import RecordStore
from movie_dashboard.data.source import fetch_dataset
from movie_dashboard.utils.logging_config import setup_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def report_headers(report):
    """Print the header mapping of a parsed dataset."""
    print_section("1. Header Mapping")
    for index, name in sorted(report.mapping.fields.items()):
        print(f"  column {index}: -> {name}")
    for index, header in sorted(report.mapping.extensions.items()):
        print(f"  column {index}: {header} (extension, ignored)")
    if report.mapping.missing_fields:
        print(f"\n  Unmapped fields: {', '.join(report.mapping.missing_fields)}")


def report_rows(report):
    """Print accepted/rejected row counts."""
    print_section("2. Rows")
    print(f"  Read:     {report.total_rows:,}")
    print(f"  Accepted: {report.accepted_rows:,}")
    print(f"  Rejected: {report.rejected_rows:,}")


def report_summary(store):
    """Print dataset summary statistics."""
    print_section("3. Summary")
    summary = store.summary()
    print(f"  Recommendations: {summary.total_recommendations:,}")
    print(f"  Users:           {summary.total_users:,}")
    print(f"  Genres:          {summary.total_genres:,}")
    print(f"  Avg rating:      {summary.average_rating:.2f}")


def report_distributions(store):
    """Print genre and rating distributions."""
    print_section("4. Distributions")
    print("\n  Genres:")
    for entry in genre_distribution(store.records):
        print(f"    {entry.label:<15} {entry.count:>6}")
    print("\n  Predicted ratings:")
    for entry in rating_distribution(store.records):
        print(f"    {entry.label:<15} {entry.count:>6}")


def report_profiles(store):
    """Print every user profile."""
    print_section("5. User Profiles")
    for profile in build_user_profiles(store).values():
        genres = ", ".join(profile.top_genres) or "-"
        print(
            f"  {profile.user_id:<12} {profile.recommendation_count:>4} recs  "
            f"avg {profile.average_rating:.2f}  top: {genres}"
        )


def main():
    parser = argparse.ArgumentParser(description="Inspect a recommendation dataset")
    parser.add_argument("--source", default=None, help="File path or URL (default: DATASET_SOURCE)")
    parser.add_argument("--profiles", action="store_true", help="List every user profile")
    parser.add_argument("--debug", action="store_true", help="Log rejected rows")
    args = parser.parse_args()

    setup_logging(level="DEBUG" if args.debug else "WARNING")
    source = args.source or get_dataset_source()

    try:
        raw = fetch_dataset(source, timeout=get_dataset_timeout())
    except DashboardError as e:
        print(f"[ERROR] {e}")
        return 1

    report = parse_records(decode_dataset(raw))
    report_headers(report)
    report_rows(report)

    if not report.records:
        print("\n[ERROR] No valid data found in dataset")
        return 1

    store = RecordStore(report.records)
    report_summary(store)
    report_distributions(store)
    if args.profiles:
        report_profiles(store)

    print("\n[SUCCESS] Dataset inspection complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
