"""Compute DoT uptime and clip metrics for a fight dumped to JSON."""

import argparse
import json
import logging
import sys
from pathlib import Path

from jizoku.config import get_settings
from jizoku.logs.models import FightDump
from jizoku.pipeline.dots import DotTrackerError
from jizoku.pipeline.event_data import analyze_dots_for_fight
from jizoku.pipeline.report import format_clip_summary, format_uptime_lines
from jizoku.pipeline.uptime import DegenerateFightWindowError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute DoT uptime and clip metrics for a fight",
    )
    parser.add_argument("--input", required=True, type=Path, help="Fight dump JSON file")
    parser.add_argument("--source-id", type=int, help="Only count this player's events")
    parser.add_argument("--json", action="store_true", help="Print metrics as JSON")
    return parser.parse_args(argv)


def run(input_path: Path, source_id: int | None = None, as_json: bool = False) -> dict:
    settings = get_settings()
    dump = FightDump.model_validate_json(input_path.read_text(encoding="utf-8"))
    fight = dump.fight

    metrics = analyze_dots_for_fight(
        [e.model_dump(by_alias=True) for e in dump.events],
        fight.start_time,
        fight.duration_ms,
        [w.to_window(fight.start_time) for w in dump.invuln_windows],
        source_id=source_id,
        settings=settings,
    )

    if as_json:
        print(json.dumps(metrics, indent=2))
    else:
        for line in format_uptime_lines(metrics):
            print(line)
        print(f"Clip severity: {metrics['clip_severity']}")
        print(format_clip_summary(metrics))

    logger.info("Analyzed fight %d (%s) from %s", fight.id, fight.name, input_path)
    return metrics


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=get_settings().log_level)
    try:
        run(args.input, source_id=args.source_id, as_json=args.json)
    except (DotTrackerError, DegenerateFightWindowError):
        logger.exception("Fight data failed integrity checks: %s", args.input)
        sys.exit(1)


if __name__ == "__main__":
    main()
