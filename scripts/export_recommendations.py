#!/usr/bin/env python
"""
Export filtered recommendations to a CSV file.

Usage:
    # Top 10 recommendations of one user
    python scripts/export_recommendations.py --user u1001

    # Every Sci-Fi title containing "star", up to 100 rows, into a directory
    python scripts/export_recommendations.py --genre Sci-Fi --search star --limit 100 --output-dir exports
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_dashboard.api.config import get_dataset_source, get_dataset_timeout, get_default_top_n
from movie_dashboard.core.exceptions import DashboardError
from movie_dashboard.core.models import ALL_GENRES, FilterCriteria
from movie_dashboard.data.source import load_engine
from movie_dashboard.utils.logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Export filtered recommendations")
    parser.add_argument("--source", default=None, help="File path or URL (default: DATASET_SOURCE)")
    parser.add_argument("--user", default=None, help="Exact user id")
    parser.add_argument("--genre", default=ALL_GENRES, help="Genre, or 'all'")
    parser.add_argument("--search", default="", help="Substring of the movie title")
    parser.add_argument("--limit", type=int, default=get_default_top_n(), help="Result cap")
    parser.add_argument("--output-dir", default=".", help="Directory for the export file")
    args = parser.parse_args()

    setup_logging(level="INFO")

    try:
        engine = load_engine(args.source or get_dataset_source(), timeout=get_dataset_timeout())
    except DashboardError as e:
        print(f"[ERROR] {e}")
        return 1

    criteria = FilterCriteria(user_id=args.user, genre=args.genre, search=args.search, limit=args.limit)
    export = engine.export(criteria)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / export.filename
    output_path.write_text(export.content, encoding="utf-8")

    print(f"[SUCCESS] Wrote {export.row_count} recommendations to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
