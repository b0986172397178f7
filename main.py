"""CLI entrypoint: report how many ways each piece of a puzzle can be placed."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from polycube.core.exceptions import PuzzleError
from polycube.io.puzzle_file import PuzzleFile
from polycube.utils.logger import configure_logging
from polycube.utils.pretty import format_piece


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Enumerate piece placements for a stored polycube puzzle",
    )
    parser.add_argument("--puzzle", type=Path, required=True, help="Path to a puzzle JSON file")
    parser.add_argument(
        "--region",
        type=int,
        nargs="+",
        metavar="N",
        required=True,
        help="Size of the target region, one value per grid axis (e.g. 3 3 3)",
    )
    parser.add_argument(
        "--piece",
        dest="pieces",
        action="append",
        metavar="ID",
        help="Only report this piece ID (repeatable); default is every piece",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the first placement found for each piece",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    try:
        puzzle_file = PuzzleFile.load(args.puzzle)
    except (OSError, PuzzleError) as exc:
        parser.error(f"cannot load {args.puzzle}: {exc}")
    puzzle = puzzle_file.puzzle
    region = puzzle.grid.get_coordinates(args.region)

    piece_ids: List[str] = args.pieces or list(puzzle.pieces)
    report: List[Dict[str, Any]] = []
    for piece_id in piece_ids:
        try:
            placements = list(puzzle.get_piece_placements(piece_id, region))
        except PuzzleError as exc:
            parser.error(str(exc))
        report.append({"piece": piece_id, "placements": len(placements)})
        if args.show and placements:
            print(format_piece(placements[0].transformed_piece))

    payload = {
        "puzzle": puzzle_file.name,
        "region": args.region,
        "pieces": report,
    }
    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
