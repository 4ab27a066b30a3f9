"""
Main entry point for checking a phrase against a tile inventory.

Usage:
    python -m src.main --tiles "A:3 B C" --phrase "CAB" --rows 1 --row-length 8
    python -m src.main config.yaml --phrase "HELLO WORLD" --show-leftover --verbose
    python -m src.main config.yaml --output results/check.json --html results/check.html
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .checker import CheckerConfig, check, parse_tokens
from .checker.wrapping import grid_size, wrap_phrase
from .render import render_text, write_html
from .storage import MemoryStore, default_store, load_inventory, save_inventory


def load_config(config_path: str) -> dict:
    """Load raw configuration values from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")
    return data


def build_config(args: argparse.Namespace) -> CheckerConfig:
    """Merge the config file (if any) with command-line overrides."""
    data = load_config(args.config) if args.config else {}

    overrides = {
        "tiles": args.tiles,
        "phrase": args.phrase,
        "rows": args.rows,
        "row_length": args.row_length,
        "store_path": args.store,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    if args.show_leftover:
        data["show_leftover"] = True
    if args.no_persist:
        data["persist"] = False

    return CheckerConfig(**data)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check whether a tile inventory can spell a phrase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Inventory syntax: whitespace-separated tiles, each with an optional :count
  A:3 E:2 .:1 X      three A, two E, one '.', one X
  \\::2 a\\:b         two ':' tiles, one 'a:b' tile

Example config.yaml:
  rows: 3
  row_length: 12
  show_leftover: true
  tiles: "A:4 B:2 C:2 D E:5"
  limits:
    max_tiles: 5000
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--tiles", "-t",
        help="Tile inventory text (saved for next time; loaded from the store if omitted)"
    )
    parser.add_argument(
        "--phrase", "-p",
        help="Phrase to lay out"
    )
    parser.add_argument(
        "--rows",
        type=int,
        help="Number of rows available"
    )
    parser.add_argument(
        "--row-length",
        type=int,
        help="Maximum characters per row"
    )
    parser.add_argument(
        "--show-leftover",
        action="store_true",
        help="Report tiles left over after a successful check"
    )
    parser.add_argument(
        "--store",
        help="Path of the JSON file the inventory text is saved to"
    )
    parser.add_argument(
        "--no-persist",
        action="store_true",
        help="Neither load nor save the inventory text"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the result as JSON"
    )
    parser.add_argument(
        "--html",
        help="Path to write an HTML report"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a text report"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        # pydantic's ValidationError is a ValueError
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if config.phrase is None:
        print("Error: a phrase is required (--phrase or 'phrase' in the config)", file=sys.stderr)
        return 1

    store = default_store(config.store_path) if config.persist else MemoryStore()

    if config.tiles is not None:
        tiles_text = config.tiles.strip()
        saved = save_inventory(store, tiles_text)
        if args.verbose:
            print(f"Inventory saved: {'yes' if saved else 'no (storage unavailable)'}")
    else:
        tiles_text = (load_inventory(store) or "").strip()
        if args.verbose:
            print(f"Inventory loaded from store: {tiles_text or '(empty)'}")

    if args.verbose:
        tokens = parse_tokens(tiles_text)
        print(f"Tiles: {sum(t.count for t in tokens)} in {len(tokens)} tokens")
        print(f"Rows: {config.rows} x {config.row_length}")
        if len(config.phrase) <= config.limits.max_phrase_length:
            height, width = grid_size(wrap_phrase(config.phrase, config.row_length))
            print(f"Wrapped phrase: {height} rows, widest {width}")
        print("-" * 40)

    result = check(
        tiles_text,
        config.phrase,
        row_width=config.row_length,
        row_budget=config.rows,
        include_leftover=config.show_leftover,
        limits=config.limits,
    )

    if args.json:
        print(json.dumps(result.model_dump(), indent=2))
    else:
        print(render_text(result))

    try:
        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w") as f:
                json.dump(result.model_dump(), f, indent=2)
            if args.verbose:
                print(f"\nResult saved to: {output_path}")
        if args.html:
            html_path = write_html(result, args.html)
            if args.verbose:
                print(f"HTML report written to: {html_path}")
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
