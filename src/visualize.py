"""
Standalone CLI for generating HTML reports from saved check results.

Usage:
    python -m src.visualize results/check.json
    python -m src.visualize results/check.json --output report.html
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .render import generate_report


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate an HTML report from a saved tile check result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.main --phrase "HELLO" --tiles "H E L:2 O" -o results/check.json
  python -m src.visualize results/check.json
  python -m src.visualize results/check.json --output my_report.html
        """
    )
    parser.add_argument(
        "results",
        help="Path to the result JSON file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Output path for HTML file (default: same as input with .html extension)"
    )

    args = parser.parse_args(argv)

    results_path = Path(args.results)
    if not results_path.exists():
        print(f"Error: Results file not found: {args.results}", file=sys.stderr)
        return 1

    if not results_path.suffix == ".json":
        print("Warning: Input file doesn't have .json extension", file=sys.stderr)

    try:
        output_path = generate_report(results_path, args.output)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error generating report: {e}", file=sys.stderr)
        return 1

    print(f"Report generated: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
