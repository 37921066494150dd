"""CLI entry point: serve the API, inspect statistics, import records."""

import argparse
import json
import logging
import sys
from pathlib import Path

from recruit_assistant.config import AppConfig, load_config, validate_config
from recruit_assistant.data.loader import DataLoader
from recruit_assistant.data.snapshot import Statistics
from recruit_assistant.errors import SourceUnavailable
from recruit_assistant.models import create_session_factory
from recruit_assistant.storage.record_store import RecordStore
from recruit_assistant.utils.logging_config import setup_logging

logger = logging.getLogger("recruit_assistant")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Recruit Assistant - recruitment data API and chat assistant backend",
    )
    parser.add_argument(
        "--config", default="config.yaml",
        help="Path to config file (default: config.yaml)",
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--serve", action="store_true",
        help="Run the HTTP API (default action)",
    )
    action.add_argument(
        "--stats", action="store_true",
        help="Print data statistics and exit",
    )
    action.add_argument(
        "--refresh", action="store_true",
        help="Build a snapshot once, print counts and exit",
    )
    action.add_argument(
        "--import", dest="import_file", metavar="FILE",
        help="Import a JSON file with profiles, ai_summaries and jobs arrays",
    )
    return parser.parse_args(argv)


def build_store(config: AppConfig) -> RecordStore:
    return RecordStore(create_session_factory(config.database.url))


def print_stats(stats: Statistics):
    """Print headline statistics."""
    print("\n=== Recruit Assistant Statistics ===")
    print(f"Total candidates: {stats.total_candidates}")
    print(f"Total jobs: {stats.total_jobs}")
    print(f"AI summaries: {stats.ai_summaries_count}")
    print(f"Average experience: {stats.average_experience:.1f} years")

    if stats.skills_distribution:
        print("\nTop skills:")
        for entry in stats.skills_distribution[:10]:
            print(f"  {entry['skill']}: {entry['count']}")

    print("\nExperience:")
    for entry in stats.experience_distribution:
        print(f"  {entry['range']}: {entry['count']}")

    if stats.skill_demand_analysis:
        print("\nSkills in demand:")
        for entry in stats.skill_demand_analysis[:10]:
            print(f"  {entry.skill}: demand {entry.demand}, supply {entry.supply}, ratio {entry.ratio:.2f}")

    if stats.top_candidates:
        print("\nTop candidates:")
        for i, c in enumerate(stats.top_candidates[:10], 1):
            print(f"  #{i} [{c.fit_percentage:.0f}%] {c.name} - {c.current_role or 'n/a'}")
    print()


def import_file(store: RecordStore, path: str) -> dict[str, int]:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Import file not found: {path}")
    with open(file_path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        raise ValueError("Import file must contain a JSON object")
    return store.import_documents(payload)


def serve(config: AppConfig):
    import uvicorn

    from recruit_assistant.web.app import create_app

    app = create_app(config)
    logger.info("Recruit Assistant backend running on %s:%d", config.server.host, config.server.port)
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.log_dir, config.log_level)

    for w in validate_config(config):
        logger.warning("Config: %s", w)

    if args.import_file:
        try:
            counts = import_file(build_store(config), args.import_file)
        except (OSError, ValueError) as e:
            logger.error("Import failed: %s", e)
            sys.exit(1)
        print(f"Imported {counts['profiles']} profiles, {counts['ai_summaries']} AI summaries, {counts['jobs']} jobs")
        return

    if args.stats or args.refresh:
        loader = DataLoader.from_config(build_store(config), config)
        try:
            snapshot = loader.refresh()
        except SourceUnavailable as e:
            logger.error("%s", e)
            sys.exit(1)
        if args.stats:
            print_stats(snapshot.statistics)
        else:
            print(
                f"Snapshot built: {snapshot.profiles_count} profiles, "
                f"{snapshot.jobs_count} jobs, {snapshot.ai_summaries_count} AI summaries"
            )
        return

    serve(config)


if __name__ == "__main__":
    main()
