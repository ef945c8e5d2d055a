"""CLI tool for grouping precomputed face descriptors."""
import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from facematch.core.config import settings
from facematch.core.exceptions import DescriptorEngineError
from facematch.core.logging import get_logger
from facematch.services.clustering import group_all, summarize

logger = get_logger(__name__)


def load_items(path: Path) -> List[Tuple[Any, List[float]]]:
    """
    Read a JSON list of ``{"source_id": ..., "descriptor": [...]}`` objects.

    Args:
        path: Path to the JSON file

    Returns:
        (source id, descriptor values) pairs in file order

    Raises:
        ValueError: If the file does not have the expected structure
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError("Expected a JSON list of items")

    items = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict) or "source_id" not in entry or "descriptor" not in entry:
            raise ValueError(f"Item {i} must have 'source_id' and 'descriptor'")
        items.append((entry["source_id"], entry["descriptor"]))
    return items


def group_file(path: Path, threshold: float) -> List[dict]:
    """Group the descriptors in `path` and return one summary dict per cluster."""
    items = load_items(path)
    clusters = group_all(items, threshold)
    logger.info(
        "Grouping completed",
        path=str(path),
        faces=len(items),
        clusters=len(clusters),
        threshold=threshold,
    )
    return [summary.model_dump() for summary in summarize(clusters)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Group face descriptors by identity")
    parser.add_argument("path", help="JSON file with source_id/descriptor items")
    parser.add_argument(
        "--threshold",
        type=float,
        default=settings.GROUPING_THRESHOLD,
        help=f"Maximum distance to a group's first face (default: {settings.GROUPING_THRESHOLD})"
    )
    args = parser.parse_args(argv)

    path = Path(args.path)
    if not path.exists():
        logger.error("Descriptor file not found", path=args.path)
        return 1

    try:
        groups = group_file(path, args.threshold)
    except (DescriptorEngineError, ValueError) as e:
        logger.error("Grouping failed", path=args.path, error=str(e))
        return 1

    for group in groups:
        print(f"Group {group['index'] + 1} ({group['size']} faces): "
              + ", ".join(str(s) for s in group["source_ids"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
