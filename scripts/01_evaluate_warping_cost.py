#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Evaluate DTW warping costs for sequence pairs stored in JSON.

Input is either a single pair:
    {"sequence_1": [[0.0], [1.0]], "sequence_2": [[0.0], [1.0], [1.0]]}
or a batch:
    {"pairs": [{"id": "a", "sequence_1": [...], "sequence_2": [...]}, ...]}

All pairs are evaluated with one DTWEvaluator so the cost matrix is reused.

Usage:
    python scripts/01_evaluate_warping_cost.py --input pairs.json --metric euclidean
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging
import os
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from simple_dtw.distances import DISTANCE_FUNCTIONS, get_distance_fn
from simple_dtw.dtw_core import DTWError, DTWEvaluator

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = os.environ.get("DTW_LOG_LEVEL", "INFO")


def load_pairs(json_path: Path) -> List[Dict[str, Any]]:
    """Load sequence pairs from a JSON file.

    Args:
        json_path: File holding a single pair or a {"pairs": [...]} batch.

    Returns:
        List of pair dictionaries, each with an "id".

    Raises:
        ValueError: If a pair is missing one of its sequences.
    """
    with open(json_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    pairs = data["pairs"] if "pairs" in data else [data]

    for idx, pair in enumerate(pairs):
        missing = {"sequence_1", "sequence_2"} - set(pair.keys())
        if missing:
            raise ValueError(f"Pair at index {idx} missing keys: {sorted(missing)}")
        pair.setdefault("id", idx)

    logger.info(f"Loaded {len(pairs)} pair(s) from {json_path}")
    return pairs


def evaluate_pairs(
    pairs: List[Dict[str, Any]],
    evaluator: DTWEvaluator,
    show_progress: bool = True,
) -> List[Dict[str, Any]]:
    """Evaluate every pair with a shared evaluator."""
    results = []
    for pair in tqdm(pairs, disable=not show_progress):
        cost = evaluator.evaluate_warping_cost(pair["sequence_1"], pair["sequence_2"])
        results.append({"id": pair["id"], "cost": cost})
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate DTW warping costs")
    parser.add_argument("--input", type=str, required=True)
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON path. Results are printed to stdout if not given.",
    )
    parser.add_argument(
        "--metric",
        type=str,
        default="euclidean",
        choices=sorted(DISTANCE_FUNCTIONS),
    )
    parser.add_argument(
        "--x_size",
        type=int,
        default=None,
        help="Pre-size the matrix for sequences 1 up to this length",
    )
    parser.add_argument(
        "--y_size",
        type=int,
        default=None,
        help="Pre-size the matrix for sequences 2 up to this length",
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        help="Logging level (default from DTW_LOG_LEVEL, else INFO)",
    )
    parser.add_argument("--no_progress", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.x_size is None) != (args.y_size is None):
        parser.error("--x_size and --y_size must be given together")

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    evaluator = DTWEvaluator(get_distance_fn(args.metric), args.x_size, args.y_size)

    pairs = load_pairs(Path(args.input))
    try:
        results = evaluate_pairs(pairs, evaluator, show_progress=not args.no_progress)
    except DTWError as e:
        logger.error(f"DTW evaluation failed: {e}")
        return 1

    output = json.dumps({"metric": args.metric, "results": results}, indent=2)
    if args.output:
        Path(args.output).parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        logger.info(f"Saved {len(results)} result(s) to {args.output}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
