"""CLI entrypoint for the FEMA / ARC shelter feed."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

from shelter_feed.common.config_loader import FeedConfig, load_feed_config
from shelter_feed.common.constants import DEFAULT_CONFIG_PATH, EXIT_HARD_FAIL, EXIT_SUCCESS
from shelter_feed.common.errors import ShelterFeedError
from shelter_feed.common.logging import build_logger, log_event
from shelter_feed.harvest.fema_shelters import fetch_and_normalize
from shelter_feed.pipeline.export import write_shelters_csv, write_shelters_json


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=["fetch"])
    parser.add_argument("--config-path", default=None)
    parser.add_argument("--overlay-config-path", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--preview", type=int, default=3)
    parser.add_argument("--output", default=None)
    parser.add_argument("--format", default="json", choices=["json", "csv"])
    return parser.parse_args(argv)


def generate_run_id() -> str:
    return datetime.now(tz=timezone.utc).strftime("run-%Y%m%dT%H%M%S%fZ")


def _resolve_config(args: argparse.Namespace) -> FeedConfig:
    overlay = Path(args.overlay_config_path) if args.overlay_config_path else None
    if args.config_path:
        return load_feed_config(Path(args.config_path), overlay_config_path=overlay)
    default_path = Path(DEFAULT_CONFIG_PATH)
    if default_path.exists():
        return load_feed_config(default_path, overlay_config_path=overlay)
    return FeedConfig()


def run_command(args: argparse.Namespace, http_client=None) -> int:
    run_id = args.run_id or generate_run_id()
    log_path = Path(args.log_file) if args.log_file else None
    logger = build_logger(run_id, level=args.log_level, log_path=log_path)

    try:
        cfg = _resolve_config(args)
        shelters = fetch_and_normalize(
            http_client,
            source=cfg.source,
            timeout=cfg.timeout,
            logger=logger,
            run_id=run_id,
        )
    except ShelterFeedError as exc:
        log_event(
            logger,
            f"fetch failed: {exc}",
            run_id=run_id,
            stage="fetch",
            event="FETCH_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        return EXIT_HARD_FAIL

    print(f"Fetched {len(shelters)} shelters")
    preview = [shelter.to_dict() for shelter in shelters[: max(args.preview, 0)]]
    print(json.dumps(preview, ensure_ascii=False, indent=2))

    if args.output:
        out_path = Path(args.output)
        if args.format == "csv":
            write_shelters_csv(out_path, shelters)
        else:
            write_shelters_json(out_path, shelters)
        log_event(
            logger,
            f"wrote {len(shelters)} shelters to {out_path}",
            run_id=run_id,
            stage="export",
            event="EXPORT_END",
            status="ok",
            rows_out=len(shelters),
        )

    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        return run_command(args)
    except OSError as exc:
        print(f"shelter-feed: {exc}", file=sys.stderr)
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
